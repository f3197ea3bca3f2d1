#!/usr/bin/env python3

from collections.abc import Mapping, Sequence
from typing import TypeVar

from networkx import DiGraph

from .type_defs import AdjacencyList, Comparable

T = TypeVar("T", bound=Comparable)


class MalformedGraphError(ValueError):
    pass


def adjacency_list_from_matrix(matrix: Sequence[Sequence[bool]]) -> AdjacencyList:
    """Row i of the result holds every j with matrix[i][j] set, in increasing order"""
    size = len(matrix)
    adjacency: list[tuple[int, ...]] = []
    for i, row in enumerate(matrix):
        if len(row) != size:
            raise MalformedGraphError(f"Row {i} has {len(row)} entries, expected {size}")
        for j, edge in enumerate(row):
            if not isinstance(edge, int) or edge not in (0, 1):
                raise MalformedGraphError(f"Cell ({i}, {j}) holds {edge!r}, expected a boolean")
        adjacency.append(tuple(j for j, edge in enumerate(row) if edge))
    return tuple(adjacency)


def check_adjacency_list(adjacency: AdjacencyList) -> tuple[tuple[int, ...], ...]:
    size = len(adjacency)
    checked: list[tuple[int, ...]] = []
    for vertex, successors in enumerate(adjacency):
        for successor in successors:
            # bool is an int subclass but never a vertex
            if isinstance(successor, bool) or not isinstance(successor, int):
                raise MalformedGraphError(f"Successor {successor!r} of {vertex} is not an index")
            if not 0 <= successor < size:
                raise MalformedGraphError(
                    f"Successor {successor} of {vertex} is outside of [0, {size})"
                )
        checked.append(tuple(successors))
    return tuple(checked)


def index_graph(graph: Mapping[T, Sequence[T]]) -> tuple[Sequence[T], AdjacencyList]:
    labels = sorted({*graph, *(w for vertices in graph.values() for w in vertices)})
    index_by_label = {label: index for index, label in enumerate(labels)}
    adjacency = tuple(
        tuple(index_by_label[w] for w in graph.get(label, ())) for label in labels
    )
    return labels, adjacency


def from_digraph(digraph: DiGraph) -> tuple[Sequence, AdjacencyList]:
    return index_graph({node: list(digraph.successors(node)) for node in digraph.nodes})
