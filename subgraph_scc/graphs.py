#!/usr/bin/env python3

import itertools
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import NamedTuple, TypeVar

from graphviz import Digraph

from .log import logger


class CycleEdge(NamedTuple):
    title: str
    from_vertex: str
    to_vertex: str
    edge_color: str


T = TypeVar("T")


def make_graph(filepath: Path, cycles: Sequence[tuple[object, ...]]) -> None:
    sys.stderr.write(f"Write graph data to {filepath}\n")

    if not (edges := make_edges(cycles)):
        logger.debug("No such edges for graph")
        return

    d = make_digraph(filepath, edges)
    d.unflatten(stagger=50)
    d.view()


def make_digraph(filepath: Path, edges: Sequence[CycleEdge]) -> Digraph:
    d = Digraph("cycles", filename=filepath)

    with d.subgraph() as ds:
        for edge in edges:
            ds.node(edge.from_vertex)
            ds.node(edge.to_vertex)
            ds.attr("edge", color=edge.edge_color)
            ds.edge(edge.from_vertex, edge.to_vertex, edge.title)

    return d


def pairwise(iterable: Iterable[T]) -> Iterator[tuple[T, T]]:
    # pairwise('ABCDEFG') --> AB BC CD DE EF FG
    a, b = itertools.tee(iterable)
    next(b, None)
    return zip(a, b)


def make_edges(cycles: Sequence[tuple[object, ...]]) -> Sequence[CycleEdge]:
    edges: set[CycleEdge] = set()
    for nr, cycle in enumerate(cycles, start=1):
        color = "#{:02x}{:02x}{:02x}".format(  # pylint: disable=consider-using-f-string
            random.randint(50, 200),
            random.randint(50, 200),
            random.randint(50, 200),
        )

        # close the cycle
        for from_vertex, to_vertex in pairwise(cycle + cycle[:1]):
            edges.add(
                CycleEdge(
                    f"{str(nr)} ({len(cycle)})",
                    str(from_vertex),
                    str(to_vertex),
                    color,
                )
            )
    return sorted(edges)
