#!/usr/bin/env python3

import json
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def _repo_path():
    return os.path.dirname(os.path.dirname(os.path.realpath(__file__)))


def _add_python_paths():
    # make the repo directory available
    sys.path.insert(0, _repo_path())


_add_python_paths()


@pytest.fixture(name="write_graph_file")
def fixture_write_graph_file(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(data: Any) -> Path:
        filepath = tmp_path / "graph.json"
        filepath.write_text(json.dumps(data))
        return filepath

    return _write
