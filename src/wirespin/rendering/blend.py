"""Interpolation helpers for morphing between queued shapes."""

from __future__ import annotations

import numpy as np

from wirespin.model import MotionStyle

# (time frequency, vertex frequency) of the breathing terms on x, y, z.
_BREATH_TERMS = ((0.7, 1.7), (0.5, 2.3), (0.9, 0.9))


def smoothstep(t: float) -> float:
    """Cubic ease-in/ease-out ``3t^2 - 2t^3`` with *t* clamped to [0, 1]."""
    c = min(max(t, 0.0), 1.0)
    return c * c * (3.0 - 2.0 * c)


def lerp_vertices(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Linearly interpolate two vertex arrays of equal shape."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    return a + (b - a) * t


def blend_factor(shape_time: float, style: MotionStyle | None = None) -> float:
    """Weight of the next shape after *shape_time* seconds on the current one.

    Zero while the shape is held, then eased from 0 to 1 over the
    transition window.
    """
    if style is None:
        style = MotionStyle()
    if shape_time <= style.hold_time:
        return 0.0
    return smoothstep((shape_time - style.hold_time) / style.transition_time)


def breathing_offsets(time: float, n: int, amplitude: float) -> np.ndarray:
    """Per-vertex ``(n, 3)`` breathing jitter at scaled time *time*.

    Purely cosmetic; it does not change which shape is shown.
    """
    i = np.arange(n, dtype=float)
    (fx, gx), (fy, gy), (fz, gz) = _BREATH_TERMS
    return np.column_stack([
        np.sin(time * fx + i * gx),
        np.cos(time * fy + i * gy),
        np.sin(time * fz + i * gz),
    ]) * amplitude
