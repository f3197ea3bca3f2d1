#!/usr/bin/env python3

"""Find strongly connected components and elementary cycles of a directed graph.

The graph is read from a JSON file, either
  - an object mapping each vertex name to the list of its successor names,
  - a list of successor lists where the position is the vertex,
  - with --matrix, a square boolean adjacency matrix, or
  - with --edges, a list of [from, to] pairs of vertex names.
"""

import argparse
import logging
import sys
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path

from . import __version__
from .adjacency import MalformedGraphError
from .cycles import detect_cycles, subgraph_components
from .files import get_outputs_file_paths, load_graph
from .graphs import make_graph
from .log import logger, setup_logging


def _parse_arguments(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="show additional information for debug purposes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show cycles if some are found",
    )
    parser.add_argument(
        "--outputs-folder",
        help="path to outputs folder. If not set $HOME/.local/subgraph-scc/outputs/ is used",
    )
    parser.add_argument(
        "--outputs-filename",
        help="outputs filename. If not set the current timestamp is used",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="create graphical representation",
    )
    input_format = parser.add_mutually_exclusive_group()
    input_format.add_argument(
        "--matrix",
        action="store_true",
        help="the graph file holds a boolean adjacency matrix",
    )
    input_format.add_argument(
        "--edges",
        action="store_true",
        help="the graph file holds a list of [from, to] edges",
    )
    parser.add_argument(
        "--strategy",
        choices=["tarjan", "johnson"],
        default="johnson",
        help="tarjan: strongly connected components, johnson: elementary cycles",
    )
    parser.add_argument(
        "--subgraph-components",
        action="store_true",
        help="show the lowest component of every subgraph {s, ..., n-1}",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=0,
        help="Tolerate a certain number of cycles, ie. an upper threshold.",
    )
    parser.add_argument(
        "graph_file",
        help="path to the JSON graph file",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_arguments(argv)

    outputs_filepaths = get_outputs_file_paths(
        Path(args.outputs_folder) if args.outputs_folder else None,
        args.outputs_filename or "",
    )

    setup_logging(outputs_filepaths.log, args.debug)

    logger.info("Load graph from %s", args.graph_file)
    try:
        graph = load_graph(Path(args.graph_file), args.matrix, args.edges)
    except (MalformedGraphError, OSError) as e:
        sys.stderr.write(f"Cannot load graph: {e}\n")
        return 2

    if _debug():
        logger.debug(
            "Successors of vertices:\n%s",
            "\n".join(_make_readable_graph(graph)),
        )

    if args.subgraph_components:
        logger.info("Compute lowest components of subgraphs")
        for start, component in subgraph_components(graph):
            sys.stderr.write(f"  Subgraph {start}: {', '.join(str(v) for v in component)}\n")

    logger.info("Detect cycles with strategy %s", args.strategy)
    unsorted_cycles = list(detect_cycles(args.strategy, graph))

    logger.info("Sort cycles")
    sorted_cycles = sorted(unsorted_cycles, key=lambda t: (len(t), t))

    sys.stderr.write(f"Found {len(sorted_cycles)} cycles\n")
    _log_or_show_cycles(args.verbose, sorted_cycles)

    if args.graph:
        logger.info("Make graph")
        make_graph(outputs_filepaths.graph, sorted_cycles)

    return len(sorted_cycles) > args.threshold


#   .--helper--------------------------------------------------------------.
#   |                    _          _                                      |
#   |                   | |__   ___| |_ __   ___ _ __                      |
#   |                   | '_ \ / _ \ | '_ \ / _ \ '__|                     |
#   |                   | | | |  __/ | |_) |  __/ |                        |
#   |                   |_| |_|\___|_| .__/ \___|_|                        |
#   |                                |_|                                   |
#   '----------------------------------------------------------------------'


def _make_readable_graph(graph: Mapping[object, Sequence[object]]) -> Iterator[str]:
    for vertex, successors in graph.items():
        if successors:
            yield f"  {str(vertex)} -> {', '.join(str(w) for w in successors)}"


def _make_readable_cycles(sorted_cycles: Sequence[tuple[object, ...]]) -> Iterator[str]:
    for nr, cycle in enumerate(sorted_cycles, start=1):
        if cycle:
            yield f"  Cycle {nr}:"
            yield f"    {str(cycle[0])}"
            yield from (f"    > {str(v)} " for v in cycle[1:])


def _log_or_show_cycles(verbose: bool, sorted_cycles: Sequence[tuple[object, ...]]) -> None:
    if verbose:
        for line in _make_readable_cycles(sorted_cycles):
            sys.stderr.write(f"{line}\n")

    if _debug():
        logger.debug(
            "Cycles:\n%s",
            "\n".join(_make_readable_cycles(sorted_cycles)),
        )


def _debug() -> bool:
    return logger.level == logging.DEBUG
