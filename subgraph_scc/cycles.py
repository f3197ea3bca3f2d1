#!/usr/bin/env python3

from collections.abc import Iterator, Mapping, Sequence
from typing import Literal, TypeVar

from .adjacency import index_graph
from .johnson import johnson
from .scc import SubgraphSCCFinder
from .tarjan import strongly_connected_components
from .type_defs import Comparable

T = TypeVar("T", bound=Comparable)


def detect_cycles(
    strategy: Literal["tarjan", "johnson"],
    graph: Mapping[T, Sequence[T]],
) -> Iterator[tuple[T, ...]]:
    if strategy == "tarjan":
        return _tarjan(graph)
    if strategy == "johnson":
        return johnson(graph)
    raise NotImplementedError()


def _tarjan(graph: Mapping[T, Sequence[T]]) -> Iterator[tuple[T, ...]]:
    labels, adjacency = index_graph(graph)
    for scc in strongly_connected_components(adjacency):
        yield tuple(sorted(labels[v] for v in scc))


def subgraph_components(graph: Mapping[T, Sequence[T]]) -> Iterator[tuple[int, tuple[T, ...]]]:
    """Component of every shrinking subgraph {s, ..., n - 1}, keyed by s"""
    labels, adjacency = index_graph(graph)
    finder = SubgraphSCCFinder(adjacency)
    for start in range(finder.vertex_count):
        if (result := finder.compute(start)) is not None:
            yield start, tuple(labels[v] for v in sorted(result.vertices))
