"""Vertex label derivation from an optional pool of words."""

from collections.abc import Sequence


def vertex_label(labels: Sequence[str], index: int) -> str:
    """Return the display label of vertex ``index``.

    Without a pool the label is the decimal index. With a pool, vertex i
    takes ``labels[i % len(labels)]``; once the pool has wrapped around,
    the index is appended so that labels stay unique, e.g. with
    ``["A", "B"]`` vertex 2 is ``"A2"`` and vertex 5 is ``"B5"``.

    Args:
        labels: Sanitized, deduplicated label pool (may be empty).
        index: Vertex index, >= 0.

    Returns:
        Label string.
    """
    if index < 0:
        raise ValueError(f"invalid vertex index: {index}")
    if not labels:
        return str(index)
    word = labels[index % len(labels)]
    if index < len(labels):
        return word
    return f"{word}{index}"
