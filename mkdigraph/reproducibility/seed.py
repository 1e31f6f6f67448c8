"""Random source management for reproducible generation.

Generation never touches global RNG state. Callers build a
``numpy.random.Generator`` here and pass it to the generator, so two runs
with the same seed and configuration produce identical output.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)


def create_rng(seed: int | None = None) -> np.random.Generator:
    """Create a PCG64-backed random Generator.

    Args:
        seed: Master seed, or None to draw fresh entropy from the OS.

    Returns:
        A new, independent numpy random Generator.
    """
    if seed is not None and seed < 0:
        raise ValueError(f"invalid seed: {seed}")
    if seed is None:
        log.debug("Seeding random source from OS entropy")
    else:
        log.debug("Seeding random source with %d", seed)
    return np.random.default_rng(seed)
