"""Digraph configuration dataclasses, all frozen for immutability."""

import re
from dataclasses import dataclass, field

OUTPUT_FORMATS = ("text", "dot")

VALID_LABEL = re.compile(r"[A-Za-z]+")


def _validate_labels(labels: tuple[str, ...]) -> list[str]:
    """Check that labels are non-empty ASCII-letter words without repeats."""
    errors: list[str] = []
    bad = [word for word in labels if not VALID_LABEL.fullmatch(word)]
    if bad:
        errors.append(
            f"invalid label {bad[0]!r}: labels must be non-empty ASCII letters "
            f"({len(bad)} invalid)"
        )
    seen: set[str] = set()
    for word in labels:
        if word in seen:
            errors.append(f"duplicate label: {word!r}")
            break
        seen.add(word)
    return errors


def validate_graph_config(config: "GraphConfig") -> list[str]:
    """Check the ranges and the label pool of a graph configuration.

    Returns:
        List of error strings (empty = valid configuration).
    """
    errors: list[str] = []
    if config.n_vertices < 0:
        errors.append(f"invalid number of vertices: {config.n_vertices}")
    if not 0 <= config.max_edges < 2**63:
        errors.append(
            f"invalid maximum number of outgoing edges: {config.max_edges}"
        )
    # Written so that NaN is rejected too
    if not 0.0 <= config.edge_prob <= 1.0:
        errors.append(f"invalid edge probability: {config.edge_prob}")
    errors.extend(_validate_labels(config.labels))
    return errors


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Random digraph generation parameters.

    Every vertex runs ``max_edges`` Bernoulli trials with success
    probability ``edge_prob``; each success picks one head vertex.
    """

    n_vertices: int = 25
    max_edges: int = 5  # trials per vertex
    edge_prob: float = 0.5
    allow_loops: bool = False
    allow_multi_edges: bool = False
    labels: tuple[str, ...] = ()  # unique ASCII-letter words

    def __post_init__(self) -> None:
        errors = validate_graph_config(self)
        if errors:
            raise ValueError("; ".join(errors))


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Where and how generated records are written."""

    format: str = "text"  # "text" or "dot"
    path: str | None = None  # None = standard output
    words_file: str | None = None

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"invalid output format: {self.format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Top-level configuration composing graph and output settings."""

    graph: GraphConfig = field(default_factory=GraphConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None  # None = fresh OS entropy

    def __post_init__(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"invalid seed: {self.seed}")
