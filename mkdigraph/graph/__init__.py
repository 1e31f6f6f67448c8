"""Random digraph generation: vertex labels, records, and the streaming generator."""

from mkdigraph.graph.generator import (
    DigraphGenerationError,
    DigraphGenerator,
    generate_digraph,
    sample_heads,
)
from mkdigraph.graph.labels import vertex_label
from mkdigraph.graph.types import VertexRecord

__all__ = [
    "DigraphGenerationError",
    "DigraphGenerator",
    "VertexRecord",
    "generate_digraph",
    "sample_heads",
    "vertex_label",
]
