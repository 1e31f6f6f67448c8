"""JSON serialization and deserialization for run configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from mkdigraph.config.digraph import RunConfig


def _int_to_float(value: Any) -> Any:
    """Accept JSON integers for float fields; bools stay bools and fail."""
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


_DACITE_CONFIG = DaciteConfig(
    type_hooks={float: _int_to_float},
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: RunConfig) -> str:
    """Serialize a RunConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> RunConfig:
    """Deserialize a JSON string to a RunConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple]
    to convert the JSON label array back to a tuple. Range checks run in
    the dataclass __post_init__ hooks and surface as ValueError.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: RunConfig) -> dict[str, Any]:
    """Convert a RunConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> RunConfig:
    """Reconstruct a RunConfig from a plain dictionary."""
    return from_dict(data_class=RunConfig, data=d, config=_DACITE_CONFIG)
