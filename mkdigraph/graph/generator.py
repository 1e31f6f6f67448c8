"""Streaming random digraph generator.

Vertices are produced one at a time, in increasing index order, only when
the consumer asks for the next one. Nothing beyond the current vertex's
trial batch is kept in memory, so graphs larger than RAM can be written
out as they are generated.

Each vertex runs ``max_edges`` independent trials. A trial succeeds with
probability ``edge_prob`` and then picks one head uniformly from the
permissible range: any vertex when loops are allowed, otherwise only
vertices with a larger index. Without multi-edges a head that was already
picked for the same vertex is discarded, so the trial is spent without
adding an edge.
"""

import logging

import numpy as np

from mkdigraph.config.digraph import GraphConfig, validate_graph_config
from mkdigraph.graph.labels import vertex_label
from mkdigraph.graph.types import VertexRecord

log = logging.getLogger(__name__)


class DigraphGenerationError(Exception):
    """Raised when an invalid configuration reaches the generator."""


# Head picks are drawn at most this many at a time
HEAD_CHUNK_SIZE = 4096


def sample_heads(
    tail: int,
    config: GraphConfig,
    rng: np.random.Generator,
) -> list[int]:
    """Run the edge trials of one vertex.

    The number of successful trials is drawn as Binomial(max_edges,
    edge_prob), which matches counting independent Bernoulli trials, so
    the trial budget never has to be materialized. Heads are then picked
    in bounded chunks.

    Args:
        tail: Index of the tail vertex.
        config: Graph configuration.
        rng: Random source for the trials and head selection.

    Returns:
        Head indices in trial order. Empty when no trial succeeded.
    """
    start = 0 if config.allow_loops else tail + 1
    n_candidates = config.n_vertices - start
    if config.max_edges == 0 or n_candidates <= 0:
        return []

    n_success = int(rng.binomial(config.max_edges, config.edge_prob))
    heads: list[int] = []
    selected: set[int] = set()
    remaining = n_success
    while remaining > 0:
        size = min(remaining, HEAD_CHUNK_SIZE)
        remaining -= size
        picks = rng.integers(start, config.n_vertices, size=size).tolist()
        if config.allow_multi_edges:
            heads.extend(picks)
            continue
        # Keep first occurrences only; repeated picks are spent trials
        for head in picks:
            if head not in selected:
                selected.add(head)
                heads.append(head)
        if len(selected) == n_candidates:
            break
    return heads


class DigraphGenerator:
    """Pull-based iterator over the vertex records of a random digraph.

    All generation state lives on the instance: the configuration, the
    injected random source, the next vertex index and whether the
    sequence has ended. Each ``next()`` call does the work for exactly
    one vertex.

    When loops are not allowed the last vertex has no permissible heads;
    its record is produced with no heads and the sequence ends there.

    Example::

        rng = np.random.default_rng(7)
        for record in DigraphGenerator(GraphConfig(n_vertices=10), rng):
            print(record.tail, record.heads)
    """

    def __init__(self, config: GraphConfig, rng: np.random.Generator) -> None:
        errors = validate_graph_config(config)
        if errors:
            raise DigraphGenerationError("; ".join(errors))
        self.config = config
        self.rng = rng
        self.next_index = 0
        self.finished = config.n_vertices == 0

    def __iter__(self) -> "DigraphGenerator":
        return self

    def __next__(self) -> VertexRecord:
        if self.finished:
            raise StopIteration

        config = self.config
        tail = self.next_index
        tail_label = vertex_label(config.labels, tail)

        if not config.allow_loops and tail == config.n_vertices - 1:
            # No possible heads
            self.finished = True
            return VertexRecord(index=tail, tail=tail_label, heads=())

        heads = sample_heads(tail, config, self.rng)
        self.next_index = tail + 1
        if self.next_index == config.n_vertices:
            self.finished = True

        return VertexRecord(
            index=tail,
            tail=tail_label,
            heads=tuple(vertex_label(config.labels, h) for h in heads),
        )


def generate_digraph(
    config: GraphConfig, rng: np.random.Generator | None = None
) -> DigraphGenerator:
    """Create a record iterator for ``config``.

    Args:
        config: Graph configuration.
        rng: Random source. A fresh ``default_rng()`` is used when omitted.

    Returns:
        DigraphGenerator yielding one VertexRecord per vertex.

    Raises:
        DigraphGenerationError: If the configuration is out of range.
    """
    if rng is None:
        rng = np.random.default_rng()
    generator = DigraphGenerator(config, rng)
    log.debug(
        "Generating digraph (n=%d, max_edges=%d, prob=%g, loops=%s, "
        "multiedges=%s, labels=%d)",
        config.n_vertices,
        config.max_edges,
        config.edge_prob,
        config.allow_loops,
        config.allow_multi_edges,
        len(config.labels),
    )
    return generator
