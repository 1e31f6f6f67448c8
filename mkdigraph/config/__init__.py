"""Generation configuration with frozen, validated, serializable dataclasses."""

from mkdigraph.config.defaults import DEFAULT_CONFIG
from mkdigraph.config.digraph import (
    OUTPUT_FORMATS,
    GraphConfig,
    OutputConfig,
    RunConfig,
    validate_graph_config,
)
from mkdigraph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "OUTPUT_FORMATS",
    "GraphConfig",
    "OutputConfig",
    "RunConfig",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
    "validate_graph_config",
]
