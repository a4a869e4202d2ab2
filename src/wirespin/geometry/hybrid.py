"""Procedural hybrid shapes: two base shapes blended with vertex noise."""

from __future__ import annotations

import math

import numpy as np

from wirespin._constants import N_VERTICES
from wirespin.geometry.shape import Shape
from wirespin.geometry.shapes import BASE_SHAPES

HYBRID_WOBBLE: float = 0.12
"""Amplitude of the per-axis vertex jitter added to every hybrid."""

# (seed frequency, vertex frequency) for the x, y and z jitter terms.
_JITTER_TERMS = ((3.1, 2.1), (5.3, 1.7), (7.9, 3.3))


def hybrid_indices(seed: float) -> tuple[int, int]:
    """Pick two distinct indices into :data:`BASE_SHAPES` from *seed*."""
    n = len(BASE_SHAPES)
    idx_a = abs(math.floor(seed * 4.7)) % n
    idx_b = abs(math.floor(seed * 7.3)) % n
    if idx_b == idx_a:
        idx_b = (idx_b + 1) % n
    return idx_a, idx_b


def mix_ratio(seed: float) -> float:
    """Blend weight of the second shape, always within ``[0.2, 0.8]``."""
    return 0.2 + (math.sin(seed * 13.7) * 0.5 + 0.5) * 0.6


def generate_hybrid(seed: float) -> Shape:
    """Generate a hybrid shape as a pure function of *seed*.

    Two distinct base shapes are chosen from *seed*, linearly blended
    with :func:`mix_ratio`, and every coordinate is jittered by a
    sinusoid keyed on *seed* and the vertex index.  Each axis uses its
    own frequencies so the jitter is uncorrelated between axes.

    Args:
        seed: Any finite number; the shape queue passes a scaled
            generator state.

    Returns:
        A :class:`Shape` named ``"hybrid:<a>+<b>"``.
    """
    idx_a, idx_b = hybrid_indices(seed)
    a = BASE_SHAPES[idx_a]
    b = BASE_SHAPES[idx_b]
    mix = mix_ratio(seed)

    i = np.arange(N_VERTICES, dtype=float)
    (fx, gx), (fy, gy), (fz, gz) = _JITTER_TERMS
    jitter = np.column_stack([
        np.sin(seed * fx + i * gx),
        np.cos(seed * fy + i * gy),
        np.sin(seed * fz + i * gz),
    ]) * HYBRID_WOBBLE

    verts = a.vertices * (1.0 - mix) + b.vertices * mix + jitter
    return Shape(f"hybrid:{a.name}+{b.name}", verts)
