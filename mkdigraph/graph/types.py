"""Generation record produced for each vertex."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VertexRecord:
    """One vertex and the labels of its outgoing edges.

    Heads are kept in the order their trials succeeded; they may repeat
    only when multi-edges are allowed.
    """

    index: int  # vertex index in [0, n_vertices)
    tail: str  # label of this vertex
    heads: tuple[str, ...]  # head labels, trial order
