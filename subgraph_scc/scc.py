#!/usr/bin/env python3

"""
Helper for the search of all elementary cycles of a directed graph with the
algorithm of Johnson.

For a start vertex s the finder restricts the graph to the vertices
{s, s + 1, ..., n - 1} and returns the strongly connected component of this
subgraph which contains the lowest vertex of all non-trivial components.

Robert Tarjan: Depth-first search and linear graph algorithms.
SIAM Journal on Computing, 1(2), 1972, pp. 146-160.

Donald B. Johnson: Finding all the elementary circuits of a directed graph.
SIAM Journal on Computing, 4(1), 1975, pp. 77-84.
"""

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Final

from .adjacency import check_adjacency_list
from .log import logger
from .tarjan import strongly_connected_components
from .type_defs import AdjacencyList


class StartVertexOutOfRangeError(IndexError):
    pass


@dataclass(frozen=True)
class ComponentResult:
    adjacency: tuple[tuple[int, ...], ...]
    lowest_vertex_id: int

    @property
    def vertices(self) -> frozenset[int]:
        return frozenset(vertex for vertex, successors in enumerate(self.adjacency) if successors)


def make_subgraph(adjacency: AdjacencyList, start: int) -> tuple[tuple[int, ...], ...]:
    # Vertices below `start` stay as empty placeholders to keep the indices aligned
    return tuple(
        tuple(w for w in successors if w >= start) if vertex >= start else ()
        for vertex, successors in enumerate(adjacency)
    )


def lowest_id_component(components: Sequence[Collection[int]]) -> Collection[int] | None:
    # Components are disjoint, so their minima never tie
    return min(components, key=min, default=None)


def extract_component(subgraph: AdjacencyList, members: Collection[int]) -> ComponentResult:
    member_set = frozenset(members)
    adjacency = tuple(
        tuple(w for w in successors if w in member_set) if vertex in member_set else ()
        for vertex, successors in enumerate(subgraph)
    )
    for vertex, successors in enumerate(adjacency):
        if successors:
            return ComponentResult(adjacency=adjacency, lowest_vertex_id=vertex)
    raise ValueError(f"Component {sorted(member_set)} has no internal edges")


class SubgraphSCCFinder:
    def __init__(self, adjacency: AdjacencyList) -> None:
        self._adjacency: Final[tuple[tuple[int, ...], ...]] = check_adjacency_list(adjacency)

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def compute(self, start: int) -> ComponentResult | None:
        """
        Returns the adjacency structure of the strongly connected component with the
        least vertex in the subgraph induced by {start, ..., n - 1}, or None if the
        subgraph has no component with more than one vertex.

        A component which contains neither `start` nor `start + 1` is not returned;
        the search continues with `start + 1` instead. This couples to the outer cycle
        search, which advances its start vertex one by one.
        """
        if not 0 <= start <= self.vertex_count:
            raise StartVertexOutOfRangeError(
                f"Start vertex {start} is outside of [0, {self.vertex_count}]"
            )

        while start < self.vertex_count:
            subgraph = make_subgraph(self._adjacency, start)
            components = strongly_connected_components(subgraph, start)
            if (nodes := lowest_id_component(components)) is None:
                logger.debug("No strongly connected component at or above %d", start)
                return None

            if start not in nodes and start + 1 not in nodes:
                logger.debug(
                    "Lowest component %s neither contains %d nor %d, skip",
                    sorted(nodes),
                    start,
                    start + 1,
                )
                start += 1
                continue

            result = extract_component(subgraph, nodes)
            logger.debug(
                "Component at start %d: %s (lowest vertex %d)",
                start,
                sorted(result.vertices),
                result.lowest_vertex_id,
            )
            return result

        return None
