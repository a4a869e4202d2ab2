"""Regular dodecahedron vertices and edge topology.

Every shape in wirespin is a positional remapping of these 20 vertices,
so :data:`EDGES` is computed once here and shared by all of them.
"""

from __future__ import annotations

import numpy as np

from wirespin._constants import EDGE_TOLERANCE, N_EDGES, N_VERTICES

PHI: float = (1.0 + np.sqrt(5.0)) / 2.0
"""The golden ratio."""

_INV_PHI = 1.0 / PHI

# Cube corners, then the three golden rectangles in the yz, xz and xy planes.
_RAW = np.array([
    [1, 1, 1], [1, 1, -1], [1, -1, 1], [1, -1, -1],
    [-1, 1, 1], [-1, 1, -1], [-1, -1, 1], [-1, -1, -1],
    [0, PHI, _INV_PHI], [0, PHI, -_INV_PHI],
    [0, -PHI, _INV_PHI], [0, -PHI, -_INV_PHI],
    [_INV_PHI, 0, PHI], [-_INV_PHI, 0, PHI],
    [_INV_PHI, 0, -PHI], [-_INV_PHI, 0, -PHI],
    [PHI, _INV_PHI, 0], [PHI, -_INV_PHI, 0],
    [-PHI, _INV_PHI, 0], [-PHI, -_INV_PHI, 0],
], dtype=float)

EDGE_LENGTH_SQ: float = 4.0 / (3.0 * PHI * PHI)
"""Squared edge length of the unit-circumradius dodecahedron."""


def find_edges(
    vertices: np.ndarray,
    edge_length_sq: float,
    tol: float = EDGE_TOLERANCE,
) -> np.ndarray:
    """Return index pairs of vertices separated by the given edge length.

    Args:
        vertices: Array of shape ``(n, 3)``.
        edge_length_sq: Expected squared edge length.
        tol: Absolute tolerance on the squared distance.

    Returns:
        Integer array of shape ``(n_edges, 2)`` with ``i < j`` in each
        row, ordered by ``i`` then ``j``.
    """
    vertices = np.asarray(vertices, dtype=float)
    diff = vertices[:, np.newaxis, :] - vertices[np.newaxis, :, :]
    dist_sq = np.einsum("ijk,ijk->ij", diff, diff)
    close = np.abs(dist_sq - edge_length_sq) < tol
    i, j = np.nonzero(np.triu(close, k=1))
    return np.column_stack([i, j]).astype(int)


def _build() -> tuple[np.ndarray, np.ndarray]:
    verts = _RAW / np.sqrt(3.0)
    edges = find_edges(verts, EDGE_LENGTH_SQ)
    if len(verts) != N_VERTICES or len(edges) != N_EDGES:
        raise RuntimeError(
            f"dodecahedron must have {N_VERTICES} vertices and {N_EDGES} "
            f"edges, got {len(verts)} and {len(edges)}"
        )
    verts.setflags(write=False)
    edges.setflags(write=False)
    return verts, edges


# Read-only: vertices (20, 3) on the unit sphere, edges (30, 2).
DODECA, EDGES = _build()
