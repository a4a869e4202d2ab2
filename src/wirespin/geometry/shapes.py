"""Base shape library: named per-vertex transforms of the dodecahedron.

Each transform takes the ``(20, 3)`` dodecahedron vertex array and
returns a new ``(20, 3)`` array in which row ``i`` is the image of
vertex ``i``.  Transforms are pure and keep every coordinate within
about 1.6 of the origin, well inside the default perspective divisor.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from wirespin.geometry.dodecahedron import DODECA
from wirespin.geometry.shape import Shape

ShapeFunction = Callable[[np.ndarray], np.ndarray]


def _columns(v: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    return v[:, 0], v[:, 1], v[:, 2]


def dodecahedron(v: np.ndarray) -> np.ndarray:
    """Identity: the resting dodecahedron."""
    return np.array(v, dtype=float)


def sphere(v: np.ndarray) -> np.ndarray:
    """Inflate onto a slightly uneven sphere of radius about 1.15."""
    norms = np.linalg.norm(v, axis=1)
    i = np.arange(len(v))
    r = 1.15 + np.sin(i * 2.7) * 0.08
    return v / norms[:, np.newaxis] * r[:, np.newaxis]


def twist(v: np.ndarray) -> np.ndarray:
    """Rotate about the vertical axis by an angle proportional to height."""
    x, y, z = _columns(v)
    angle = y * 1.2
    c, s = np.cos(angle), np.sin(angle)
    return np.column_stack([x * c - z * s, y * 0.8, x * s + z * c])


def star(v: np.ndarray) -> np.ndarray:
    """Push even vertices out and pull odd vertices in."""
    scale = np.where(np.arange(len(v)) % 2 == 0, 1.5, 0.5)
    return v * scale[:, np.newaxis]


def gem(v: np.ndarray) -> np.ndarray:
    """Stretch polar vertices vertically and equatorial ones outwards."""
    polar = np.abs(v[:, 1]) > 0.5
    scale = np.where(
        polar[:, np.newaxis],
        np.array([0.5, 1.3, 0.5]),
        np.array([1.3, 0.6, 1.3]),
    )
    return v * scale


def helix(v: np.ndarray) -> np.ndarray:
    """Wind the vertices around the vertical axis with a radial bulge."""
    x, y, z = _columns(v)
    angle = y * 2.5
    radial = 0.25 * np.sin(y * np.pi)
    c, s = np.cos(angle), np.sin(angle)
    return np.column_stack([
        (x + radial) * c - z * s,
        y * 0.9,
        x * s + (z + radial) * c,
    ])


def bloom(v: np.ndarray) -> np.ndarray:
    """Open the upper half like a flower; the lower half shrinks slightly."""
    y = v[:, 1]
    scale = np.where(y > 0, 1.0 + y * 0.7, 1.0 + y * 0.3)
    return v * scale[:, np.newaxis]


def ripple(v: np.ndarray) -> np.ndarray:
    """Modulate horizontal radius with one full sine wave over height."""
    x, y, z = _columns(v)
    wave = 1.0 + 0.35 * np.sin(y * np.pi * 2.0)
    return np.column_stack([x * wave, y, z * wave])


def spire(v: np.ndarray) -> np.ndarray:
    """Taper towards the top and elongate vertically."""
    x, y, z = _columns(v)
    taper = 0.4 + 0.6 * (1.0 - (y + 1.0) / 2.0)
    return np.column_stack([x * taper, y * 1.2, z * taper])


def cage(v: np.ndarray) -> np.ndarray:
    """Widen the equator and squash the poles."""
    x, y, z = _columns(v)
    scale = 0.6 + (1.0 - np.abs(y)) * 0.9
    return np.column_stack([x * scale, y * 0.7, z * scale])


SHAPE_FUNCTIONS: dict[str, ShapeFunction] = {
    "dodecahedron": dodecahedron,
    "sphere": sphere,
    "twist": twist,
    "star": star,
    "gem": gem,
    "helix": helix,
    "bloom": bloom,
    "ripple": ripple,
    "spire": spire,
    "cage": cage,
}
"""Named base transforms, in queue-shuffle order."""

SHAPE_NAMES: tuple[str, ...] = tuple(SHAPE_FUNCTIONS)
"""Base shape names, in the same order as :data:`BASE_SHAPES`."""

BASE_SHAPES: tuple[Shape, ...] = tuple(
    Shape(name, fn(DODECA)) for name, fn in SHAPE_FUNCTIONS.items()
)
"""The base shapes, each applied once to :data:`DODECA`."""

_BY_NAME = {shape.name: shape for shape in BASE_SHAPES}


def base_shape(name: str) -> Shape:
    """Look up a base shape by name.

    Raises:
        KeyError: If *name* is not one of :data:`SHAPE_NAMES`.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"unknown shape {name!r}; expected one of {list(SHAPE_NAMES)}"
        ) from None
