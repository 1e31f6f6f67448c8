"""Streaming random directed graph generator."""

__version__ = "0.1.0"
