"""Rotation and perspective projection of wireframe vertices."""

from __future__ import annotations

import numpy as np


def rotation_matrix_yxz(ay: float, ax: float, az: float) -> np.ndarray:
    """Build the 3x3 matrix rotating about Y, then X, then Z.

    Args:
        ay: Angle about the Y axis in radians, applied first.
        ax: Angle about the X axis, applied second.
        az: Angle about the Z axis, applied last.

    Returns:
        Matrix *R* such that ``rotated = v @ R.T`` for row vectors.
    """
    cy, sy = np.cos(ay), np.sin(ay)
    cx, sx = np.cos(ax), np.sin(ax)
    cz, sz = np.cos(az), np.sin(az)
    # The Y step maps (x, z) -> (x cos - z sin, x sin + z cos).
    rot_y = np.array([
        [cy, 0.0, -sy],
        [0.0, 1.0, 0.0],
        [sy, 0.0, cy],
    ])
    rot_x = np.array([
        [1.0, 0.0, 0.0],
        [0.0, cx, -sx],
        [0.0, sx, cx],
    ])
    rot_z = np.array([
        [cz, -sz, 0.0],
        [sz, cz, 0.0],
        [0.0, 0.0, 1.0],
    ])
    return rot_z @ rot_x @ rot_y


def rotate_yxz(
    vertices: np.ndarray, ay: float, ax: float, az: float,
) -> np.ndarray:
    """Rotate ``(n, 3)`` *vertices* about Y, then X, then Z."""
    vertices = np.asarray(vertices, dtype=float)
    return vertices @ rotation_matrix_yxz(ay, ax, az).T


def project_perspective(
    vertices: np.ndarray,
    centre: tuple[float, float],
    radius: float,
    fov: float,
) -> np.ndarray:
    """Project camera-space vertices onto the screen.

    Each vertex is scaled by ``fov / (fov + z)``, so points with
    negative ``z`` (towards the viewer) appear larger.

    Args:
        vertices: ``(n, 3)`` rotated vertices.
        centre: Screen position of the origin.
        radius: Screen length of one model unit at ``z = 0``.
        fov: Perspective divisor.

    Returns:
        ``(n, 3)`` array of ``(screen_x, screen_y, z)``.

    Raises:
        ValueError: If any vertex has ``fov + z <= 0``.
    """
    vertices = np.asarray(vertices, dtype=float)
    z = vertices[:, 2]
    denom = fov + z
    if np.any(denom <= 0):
        raise ValueError(
            f"vertex depth must stay above -fov ({-fov}), "
            f"got min z = {float(np.min(z))}"
        )
    scale = fov / denom * radius
    return np.column_stack([
        centre[0] + vertices[:, 0] * scale,
        centre[1] + vertices[:, 1] * scale,
        z,
    ])
