#!/usr/bin/env python3

import json
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from networkx import DiGraph

from .adjacency import adjacency_list_from_matrix, from_digraph, MalformedGraphError


def load_graph(
    filepath: Path,
    matrix: bool,
    edges: bool = False,
) -> Mapping[str | int, Sequence[str | int]]:
    with filepath.open("r") as fp:
        try:
            data = json.load(fp)
        except json.JSONDecodeError as e:
            raise MalformedGraphError(f"{filepath}: {e}") from e

    if matrix:
        if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
            raise MalformedGraphError(f"{filepath}: expected a list of matrix rows")
        return dict(enumerate(adjacency_list_from_matrix(data)))

    if edges:
        if not isinstance(data, list) or not all(
            isinstance(edge, list) and len(edge) == 2 and all(isinstance(v, str) for v in edge)
            for edge in data
        ):
            raise MalformedGraphError(f"{filepath}: expected a list of [from, to] name pairs")
        labels, adjacency = from_digraph(DiGraph([tuple(edge) for edge in data]))
        return {
            labels[vertex]: [labels[w] for w in successors]
            for vertex, successors in enumerate(adjacency)
        }

    if isinstance(data, dict):
        if not all(
            isinstance(vertices, list) and all(isinstance(w, str) for w in vertices)
            for vertices in data.values()
        ):
            raise MalformedGraphError(f"{filepath}: expected lists of successor names")
        return data

    if isinstance(data, list) and all(isinstance(vertices, list) for vertices in data):
        # Dense adjacency list, the position is the vertex
        for vertices in data:
            for w in vertices:
                if isinstance(w, bool) or not isinstance(w, int) or not 0 <= w < len(data):
                    raise MalformedGraphError(f"{filepath}: {w!r} is not a vertex")
        return dict(enumerate(data))

    raise MalformedGraphError(f"{filepath}: expected a JSON object or list")


@dataclass(frozen=True, kw_only=True)
class OutputsFilePaths:
    log: Path
    graph: Path


def get_outputs_file_paths(outputs_folder: Path | None, outputs_filename: str) -> OutputsFilePaths:
    if not outputs_folder:
        outputs_folder = Path.home() / Path(".local", "subgraph-scc", "outputs")
    outputs_folder.mkdir(parents=True, exist_ok=True)
    if not outputs_filename:
        outputs_filename = str(int(time.time()))
    return OutputsFilePaths(
        log=(outputs_folder / outputs_filename).with_suffix(".log"),
        graph=(outputs_folder / outputs_filename).with_suffix(".gv"),
    )
