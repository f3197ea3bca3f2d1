#!/usr/bin/env python3

from collections import defaultdict
from collections.abc import Iterator, Mapping, Sequence
from typing import DefaultDict, TypeVar

from .adjacency import index_graph
from .log import logger
from .scc import ComponentResult, SubgraphSCCFinder
from .type_defs import AdjacencyList, Comparable

T = TypeVar("T", bound=Comparable)


def johnson(graph: Mapping[T, Sequence[T]]) -> Iterator[tuple[T, ...]]:
    labels, adjacency = index_graph(graph)
    for cycle in elementary_cycles(adjacency):
        yield tuple(labels[v] for v in cycle)


def elementary_cycles(adjacency: AdjacencyList) -> Iterator[tuple[int, ...]]:
    """
    Donald B. Johnson: Finding all the elementary circuits of a directed graph.

    Each cycle starts at its lowest vertex and is not closed, ie. the edge from
    the last vertex back to the first one is implied. Self-loops are not reported.
    """
    finder = SubgraphSCCFinder(adjacency)
    start = 0
    while start < finder.vertex_count:
        if (component := finder.compute(start)) is None:
            break
        start = component.lowest_vertex_id
        logger.debug("Search cycles through %d in %s", start, sorted(component.vertices))
        yield from _find_cycles(component)
        start += 1


def _find_cycles(component: ComponentResult) -> Sequence[tuple[int, ...]]:
    start = component.lowest_vertex_id
    # duplicate edges must not duplicate cycles
    adjacency = [tuple(dict.fromkeys(successors)) for successors in component.adjacency]
    blocked: set[int] = {start}
    blocked_by: DefaultDict[int, set[int]] = defaultdict(set)
    cycles: list[tuple[int, ...]] = []

    path = [start]
    found = [False]
    frames: list[tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]

    while frames:
        node, successors = frames[-1]
        for successor in successors:
            if successor == start:
                if len(path) > 1:
                    cycles.append(tuple(path))
                    found[-1] = True
            elif successor not in blocked:
                path.append(successor)
                blocked.add(successor)
                found.append(False)
                frames.append((successor, iter(adjacency[successor])))
                break
        else:
            frames.pop()
            path.pop()
            if found.pop():
                _unblock(node, blocked, blocked_by)
                if found:
                    found[-1] = True
            else:
                for successor in adjacency[node]:
                    blocked_by[successor].add(node)

    return cycles


def _unblock(node: int, blocked: set[int], blocked_by: DefaultDict[int, set[int]]) -> None:
    pending = [node]
    while pending:
        current = pending.pop()
        blocked.discard(current)
        while blocked_by[current]:
            if (w := blocked_by[current].pop()) in blocked:
                pending.append(w)
