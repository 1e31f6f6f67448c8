"""Reproducibility infrastructure: explicit random source construction."""

from mkdigraph.reproducibility.seed import create_rng

__all__ = [
    "create_rng",
]
