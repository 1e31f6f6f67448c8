#!/usr/bin/env python3
"""Entry point for generating random directed graphs.

Streams the graph vertex by vertex, so the full graph is never held in
memory and graphs of arbitrary size can be written.

Usage:
    python generate_digraph.py -n 1000 -edges 10 -prob 0.3 > graph.txt
    python generate_digraph.py -n 50 -words /usr/share/dict/words -dot -o g.dot
    python generate_digraph.py --config run.json --seed 7
    python generate_digraph.py --config run.json --dry-run

Unless -dot is given, each output line is "tail head" for an edge, or a
lone "tail" for a vertex without outgoing edges. With -multiedges the
two-field lines may repeat; single-field lines are always unique.
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator, TextIO

import numpy as np
from dacite import DaciteError

from mkdigraph.config import (
    DEFAULT_CONFIG,
    GraphConfig,
    OutputConfig,
    RunConfig,
    config_from_json,
    config_to_json,
)
from mkdigraph.graph import generate_digraph
from mkdigraph.io import WRITERS, WriteStats, read_words
from mkdigraph.reproducibility import create_rng

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    log.info("Completed: %s in %.1fs", name, elapsed)


@contextmanager
def open_output(path: str | None) -> Generator[TextIO, None, None]:
    """Open the output file, or yield standard output when path is None."""
    if path is None:
        yield sys.stdout
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as f:
        yield f


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mkdigraph",
        description="Generate a random directed graph",
    )
    # Flags default to None so that only explicit ones override --config
    parser.add_argument(
        "-n", type=int, default=None, help="number of vertices (default 25)"
    )
    parser.add_argument(
        "-edges",
        "--edges",
        type=int,
        default=None,
        help="maximum number of outgoing edges per vertex (default 5)",
    )
    parser.add_argument(
        "-prob",
        "--prob",
        type=float,
        default=None,
        help="probability of creating an edge, between 0 and 1 (default 0.5)",
    )
    parser.add_argument(
        "-loops", "--loops", action="store_true", default=None, help="allow loops"
    )
    parser.add_argument(
        "-multiedges",
        "--multiedges",
        action="store_true",
        default=None,
        help="allow multiple edges with the same tail and head",
    )
    parser.add_argument(
        "-words",
        "--words",
        type=str,
        default=None,
        help="choose vertex labels from a words file",
    )
    parser.add_argument(
        "-dot", "--dot", action="store_true", default=None, help="emit DOT output"
    )
    parser.add_argument(
        "-o", type=str, default=None, help="output file (default standard output)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="path to a run config JSON file; flags override its values",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the random source"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the resolved config as JSON and exit without generating",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def build_run_config(args: argparse.Namespace) -> RunConfig:
    """Merge the optional config file with explicit command-line flags.

    Loads the label pool when a words file is configured.

    Raises:
        ValueError: On out-of-range values or malformed JSON.
        OSError: If the config or words file cannot be read.
        DaciteError: If the config file does not match the schema.
    """
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())
        log.info("Config loaded from %s", args.config)
    else:
        config = DEFAULT_CONFIG

    graph_overrides = {
        "n_vertices": args.n,
        "max_edges": args.edges,
        "edge_prob": args.prob,
        "allow_loops": args.loops,
        "allow_multi_edges": args.multiedges,
    }
    output_overrides = {
        "format": "dot" if args.dot else None,
        "path": args.o,
        "words_file": args.words,
    }
    graph = replace(
        config.graph,
        **{k: v for k, v in graph_overrides.items() if v is not None},
    )
    output = replace(
        config.output,
        **{k: v for k, v in output_overrides.items() if v is not None},
    )
    seed = args.seed if args.seed is not None else config.seed

    if output.words_file is not None:
        graph = replace(graph, labels=tuple(read_words(output.words_file)))

    return replace(config, graph=graph, output=output, seed=seed)


def run_generation(config: RunConfig) -> WriteStats:
    """Generate the configured digraph and write it out.

    Returns:
        Counts of vertices and edges written.
    """
    seed = config.seed
    if seed is None:
        # Log a concrete seed so any run can be reproduced
        seed = int(np.random.SeedSequence().entropy % 2**63)
    log.info("Seed: %d", seed)

    graph: GraphConfig = config.graph
    output: OutputConfig = config.output
    write = WRITERS[output.format]

    with stage_timer("Digraph Generation"):
        records = generate_digraph(graph, create_rng(seed))
        with open_output(output.path) as stream:
            stats = write(records, stream)

    log.info(
        "Wrote %d vertices and %d edges (%s) to %s",
        stats.n_vertices,
        stats.n_edges,
        output.format,
        output.path or "<stdout>",
    )
    return stats


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_run_config(args)
    except (ValueError, OSError, DaciteError) as e:
        log.error("Invalid configuration: %s", e)
        sys.exit(1)

    log.info(
        "Graph: n=%d, edges=%d, prob=%g, loops=%s, multiedges=%s, labels=%d",
        config.graph.n_vertices,
        config.graph.max_edges,
        config.graph.edge_prob,
        config.graph.allow_loops,
        config.graph.allow_multi_edges,
        len(config.graph.labels),
    )

    if args.dry_run:
        print(config_to_json(config))
        return

    try:
        run_generation(config)
    except OSError:
        log.exception("Writing output failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
