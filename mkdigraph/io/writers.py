"""Plain-text and DOT serializers for generated records.

Both writers pull records one at a time and write each before asking for
the next, so output can be streamed for graphs of any size.

Plain text::

    tail head      one line per edge
    tail           vertex without outgoing edges

DOT::

    digraph {
      tail -> head
      tail
    }
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from mkdigraph.graph.types import VertexRecord


@dataclass(frozen=True, slots=True)
class WriteStats:
    """Counts of what a writer emitted."""

    n_vertices: int
    n_edges: int


def _write_records(
    records: Iterable[VertexRecord],
    stream: TextIO,
    vertex_fmt: str,
    edge_fmt: str,
) -> WriteStats:
    n_vertices = 0
    n_edges = 0
    for record in records:
        n_vertices += 1
        if not record.heads:
            stream.write(vertex_fmt.format(tail=record.tail))
            continue
        for head in record.heads:
            stream.write(edge_fmt.format(tail=record.tail, head=head))
        n_edges += len(record.heads)
    return WriteStats(n_vertices=n_vertices, n_edges=n_edges)


def write_text(records: Iterable[VertexRecord], stream: TextIO) -> WriteStats:
    """Write records as a space-separated edge list.

    Repeated edges (multi-edges) are written as repeated lines.
    """
    return _write_records(records, stream, "{tail}\n", "{tail} {head}\n")


def write_dot(records: Iterable[VertexRecord], stream: TextIO) -> WriteStats:
    """Write records as a DOT digraph."""
    stream.write("digraph {\n")
    stats = _write_records(records, stream, "  {tail}\n", "  {tail} -> {head}\n")
    stream.write("}\n")
    return stats


WRITERS: dict[str, Callable[[Iterable[VertexRecord], TextIO], WriteStats]] = {
    "text": write_text,
    "dot": write_dot,
}
