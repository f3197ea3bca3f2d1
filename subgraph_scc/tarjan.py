#!/usr/bin/env python3

from collections.abc import Iterator
from dataclasses import dataclass, field

from .type_defs import AdjacencyList


@dataclass
class _Traversal:
    visited: list[bool]
    number: list[int]
    lowlink: list[int]
    on_stack: list[bool]
    stack: list[int] = field(default_factory=list)
    components: list[tuple[int, ...]] = field(default_factory=list)
    counter: int = 0

    @classmethod
    def fresh(cls, size: int) -> "_Traversal":
        return cls(
            visited=[False] * size,
            number=[0] * size,
            lowlink=[0] * size,
            on_stack=[False] * size,
        )

    def visit(self, node: int) -> None:
        # discovery numbers start at 1 and keep counting across roots
        self.counter += 1
        self.number[node] = self.counter
        self.lowlink[node] = self.counter
        self.visited[node] = True
        self.stack.append(node)
        self.on_stack[node] = True

    def close(self, root: int) -> None:
        connected_component = []
        while True:
            node = self.stack.pop()
            self.on_stack[node] = False
            connected_component.append(node)
            if self.number[node] <= self.number[root]:
                break
        # single nodes never carry an elementary cycle of length >= 2
        if len(connected_component) > 1:
            self.components.append(tuple(connected_component))


def strongly_connected_components(
    adjacency: AdjacencyList,
    start: int = 0,
) -> list[tuple[int, ...]]:
    """
    Tarjan's Algorithm (named for its discoverer, Robert Tarjan) is a graph theory algorithm
    for finding the strongly connected components of a graph.

    Roots are taken in increasing order from `start` on. The adjacency is expected to hold
    no edges to vertices below `start`, see `scc.make_subgraph`. Only non-trivial components
    (two or more vertices) are returned, in the order in which they are closed, each in
    stack-pop order.

    The recursion of the textbook version is replaced by a stack of
    (vertex, successor iterator) frames so that long paths do not exhaust the call stack.

    Based on: http://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm
    """

    traversal = _Traversal.fresh(len(adjacency))
    for root in range(start, len(adjacency)):
        if not traversal.visited[root]:
            _strongconnect(adjacency, root, traversal)
    return traversal.components


def _strongconnect(adjacency: AdjacencyList, root: int, traversal: _Traversal) -> None:
    traversal.visit(root)
    frames: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]

    while frames:
        node, successors = frames[-1]
        for successor in successors:
            if not traversal.visited[successor]:
                # Successor has not yet been visited; descend into it
                traversal.visit(successor)
                frames.append((successor, iter(adjacency[successor])))
                break
            if (
                traversal.number[successor] < traversal.number[node]
                and traversal.on_stack[successor]
            ):
                # the successor is in the stack and hence in the current
                # strongly connected component (SCC)
                traversal.lowlink[node] = min(
                    traversal.lowlink[node], traversal.number[successor]
                )
        else:
            frames.pop()
            if frames:
                parent = frames[-1][0]
                traversal.lowlink[parent] = min(traversal.lowlink[parent], traversal.lowlink[node])

            # If `node` is a root node, pop the stack and generate an SCC
            if traversal.lowlink[node] == traversal.number[node]:
                traversal.close(node)
