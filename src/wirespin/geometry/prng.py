"""Seeded Park-Miller generator with explicitly threaded state."""

from __future__ import annotations

import numpy as np

from wirespin._constants import LCG_MODULUS, LCG_MULTIPLIER


def lcg(seed: int) -> int:
    """Return the generator state following *seed*.

    A seed in ``[1, 2**31 - 2]`` always maps to another seed in that
    range.  Callers carry the returned value forward themselves.
    """
    return (seed * LCG_MULTIPLIER) % LCG_MODULUS


def is_valid_seed(seed: int) -> bool:
    """Whether *seed* is a usable generator state."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        return False
    return 1 <= seed < LCG_MODULUS


def random_seed(rng: np.random.Generator | None = None) -> int:
    """Draw a fresh seed uniformly from ``[1, 2**31 - 2]``.

    This is the only non-deterministic entry point in wirespin.  Pass
    an explicit *rng* to make it reproducible.
    """
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(1, LCG_MODULUS))
