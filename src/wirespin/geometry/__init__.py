"""Geometry: the dodecahedron, its shape transforms and the seeded generator."""

from wirespin.geometry.dodecahedron import DODECA, EDGES, PHI, find_edges
from wirespin.geometry.hybrid import generate_hybrid, hybrid_indices, mix_ratio
from wirespin.geometry.prng import is_valid_seed, lcg, random_seed
from wirespin.geometry.shape import Shape
from wirespin.geometry.shapes import (
    BASE_SHAPES,
    SHAPE_FUNCTIONS,
    SHAPE_NAMES,
    base_shape,
)

__all__ = [
    "BASE_SHAPES",
    "DODECA",
    "EDGES",
    "PHI",
    "SHAPE_FUNCTIONS",
    "SHAPE_NAMES",
    "Shape",
    "base_shape",
    "find_edges",
    "generate_hybrid",
    "hybrid_indices",
    "is_valid_seed",
    "lcg",
    "mix_ratio",
    "random_seed",
]
