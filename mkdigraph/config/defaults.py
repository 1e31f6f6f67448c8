"""Default run configuration."""

from mkdigraph.config.digraph import RunConfig

# 25 vertices, up to 5 outgoing edges each, edge probability 0.5,
# no loops, no multi-edges, numeric labels, plain-text output to stdout.
DEFAULT_CONFIG = RunConfig()
