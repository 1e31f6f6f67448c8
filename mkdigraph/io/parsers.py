"""Parsers for the plain-text and DOT output formats.

Used to check generated files: they recover the multiset of edges and
the set of vertices written without outgoing edges.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class ParsedDigraph:
    """Edges and edgeless tails read back from a serialized digraph."""

    edges: Counter = field(default_factory=Counter)  # (tail, head) -> count
    isolated: set[str] = field(default_factory=set)  # tails without heads

    @property
    def n_edges(self) -> int:
        return sum(self.edges.values())


def parse_text(lines: Iterable[str]) -> ParsedDigraph:
    """Parse the space-separated edge-list format.

    Raises:
        ValueError: On a line with other than one or two fields.
    """
    parsed = ParsedDigraph()
    for lineno, line in enumerate(lines, start=1):
        fields = line.split()
        if len(fields) == 1:
            parsed.isolated.add(fields[0])
        elif len(fields) == 2:
            parsed.edges[(fields[0], fields[1])] += 1
        else:
            raise ValueError(f"line {lineno}: malformed edge: {line.rstrip()!r}")
    return parsed


def parse_dot(lines: Iterable[str]) -> ParsedDigraph:
    """Parse the DOT subset written by :func:`mkdigraph.io.write_dot`.

    Raises:
        ValueError: If the ``digraph {`` header or closing brace is missing,
            or a statement is neither a vertex nor a ``->`` edge.
    """
    parsed = ParsedDigraph()
    opened = False
    closed = False
    for lineno, line in enumerate(lines, start=1):
        stmt = line.strip()
        if not stmt:
            continue
        if closed:
            raise ValueError(f"line {lineno}: content after closing brace")
        if not opened:
            if stmt != "digraph {":
                raise ValueError(f"line {lineno}: expected 'digraph {{'")
            opened = True
            continue
        if stmt == "}":
            closed = True
            continue

        fields = stmt.split()
        if len(fields) == 1:
            parsed.isolated.add(fields[0])
        elif len(fields) == 3 and fields[1] == "->":
            parsed.edges[(fields[0], fields[2])] += 1
        else:
            raise ValueError(f"line {lineno}: malformed statement: {stmt!r}")

    if not closed:
        raise ValueError("unterminated digraph: missing closing brace")
    return parsed
