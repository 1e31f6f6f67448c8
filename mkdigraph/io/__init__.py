"""Input and output formats: word lists, edge-list text, and DOT."""

from mkdigraph.io.parsers import ParsedDigraph, parse_dot, parse_text
from mkdigraph.io.words import read_words, sanitize_word
from mkdigraph.io.writers import WRITERS, WriteStats, write_dot, write_text

__all__ = [
    "ParsedDigraph",
    "WRITERS",
    "WriteStats",
    "parse_dot",
    "parse_text",
    "read_words",
    "sanitize_word",
    "write_dot",
    "write_text",
]
