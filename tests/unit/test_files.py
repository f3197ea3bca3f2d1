#!/usr/bin/env python3

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from subgraph_scc.adjacency import MalformedGraphError
from subgraph_scc.files import get_outputs_file_paths, load_graph


@pytest.mark.parametrize(
    "data, matrix, expected",
    [
        ({}, False, {}),
        ({"a": ["b"], "b": []}, False, {"a": ["b"], "b": []}),
        ([[1], [0]], False, {0: [1], 1: [0]}),
        ([[False, True], [True, False]], True, {0: (1,), 1: (0,)}),
    ],
)
def test_load_graph(
    write_graph_file: Callable[[Any], Path],
    data: Any,
    matrix: bool,
    expected: Any,
) -> None:
    assert load_graph(write_graph_file(data), matrix) == expected


@pytest.mark.parametrize(
    "data, matrix",
    [
        ("a", False),
        ({"a": "b"}, False),
        ({"a": [1]}, False),
        ([[2], []], False),
        ([[True], []], False),
        ([1, 2], False),
        ({"a": []}, True),
        ([[True, False], [True]], True),
    ],
)
def test_load_graph_malformed(
    write_graph_file: Callable[[Any], Path],
    data: Any,
    matrix: bool,
) -> None:
    with pytest.raises(MalformedGraphError):
        load_graph(write_graph_file(data), matrix)


def test_load_graph_invalid_json(tmp_path: Path) -> None:
    filepath = tmp_path / "graph.json"
    filepath.write_text("{")
    with pytest.raises(MalformedGraphError):
        load_graph(filepath, False)


def test_get_outputs_file_paths(tmp_path: Path) -> None:
    outputs_folder = tmp_path / "outputs"
    outputs_filepaths = get_outputs_file_paths(outputs_folder, "run")
    assert outputs_folder.is_dir()
    assert outputs_filepaths.log == outputs_folder / "run.log"
    assert outputs_filepaths.graph == outputs_folder / "run.gv"


def test_get_outputs_file_paths_default_filename(tmp_path: Path) -> None:
    outputs_filepaths = get_outputs_file_paths(tmp_path, "")
    assert outputs_filepaths.log.suffix == ".log"
    assert outputs_filepaths.log.stem.isdigit()


def test_load_graph_edges(write_graph_file: Callable[[Any], Path]) -> None:
    graph = load_graph(write_graph_file([["b", "a"], ["a", "b"], ["b", "c"]]), False, edges=True)
    assert {vertex: sorted(successors) for vertex, successors in graph.items()} == {
        "a": ["b"],
        "b": ["a", "c"],
        "c": [],
    }


@pytest.mark.parametrize(
    "data",
    [
        {"a": ["b"]},
        [["a"]],
        [["a", "b", "c"]],
        [["a", 1]],
    ],
)
def test_load_graph_edges_malformed(write_graph_file: Callable[[Any], Path], data: Any) -> None:
    with pytest.raises(MalformedGraphError):
        load_graph(write_graph_file(data), False, edges=True)
