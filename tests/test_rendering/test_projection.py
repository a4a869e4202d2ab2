"""Tests for Y-X-Z rotation and perspective projection."""

import numpy as np
import pytest

from wirespin.rendering.projection import (
    project_perspective,
    rotate_yxz,
    rotation_matrix_yxz,
)


def _rotate_scalar(v, ay, ax, az):
    """Reference rotation, one axis at a time."""
    x = v[0] * np.cos(ay) - v[2] * np.sin(ay)
    z = v[0] * np.sin(ay) + v[2] * np.cos(ay)
    y = v[1]
    y2 = y * np.cos(ax) - z * np.sin(ax)
    z2 = y * np.sin(ax) + z * np.cos(ax)
    x3 = x * np.cos(az) - y2 * np.sin(az)
    y3 = x * np.sin(az) + y2 * np.cos(az)
    return np.array([x3, y3, z2])


class TestRotation:
    def test_identity(self):
        np.testing.assert_allclose(rotation_matrix_yxz(0, 0, 0), np.eye(3))

    def test_orthonormal(self):
        r = rotation_matrix_yxz(0.3, 1.1, -0.7)
        np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(r) == pytest.approx(1.0)

    def test_matches_sequential_rotation(self):
        rng = np.random.default_rng(0)
        pts = rng.normal(size=(20, 3))
        angles = (0.9, 0.55, 0.33)
        expected = np.array([_rotate_scalar(p, *angles) for p in pts])
        np.testing.assert_allclose(rotate_yxz(pts, *angles), expected, atol=1e-12)

    def test_y_rotation_quarter_turn(self):
        out = rotate_yxz(np.array([[1.0, 0.0, 0.0]]), np.pi / 2, 0.0, 0.0)
        np.testing.assert_allclose(out, [[0.0, 0.0, 1.0]], atol=1e-12)

    def test_x_rotation_quarter_turn(self):
        out = rotate_yxz(np.array([[0.0, 1.0, 0.0]]), 0.0, np.pi / 2, 0.0)
        np.testing.assert_allclose(out, [[0.0, 0.0, 1.0]], atol=1e-12)


class TestProjectPerspective:
    def test_origin_maps_to_centre(self):
        out = project_perspective(np.zeros((1, 3)), (24.0, 24.0), 10.0, 3.0)
        np.testing.assert_allclose(out, [[24.0, 24.0, 0.0]])

    def test_plane_z_zero_unscaled(self):
        out = project_perspective(
            np.array([[1.0, -1.0, 0.0]]), (0.0, 0.0), 10.0, 3.0,
        )
        np.testing.assert_allclose(out, [[10.0, -10.0, 0.0]])

    def test_near_points_larger(self):
        pts = np.array([[1.0, 0.0, -1.0], [1.0, 0.0, 1.0]])
        out = project_perspective(pts, (0.0, 0.0), 1.0, 3.0)
        assert out[0, 0] == pytest.approx(1.5)
        assert out[1, 0] == pytest.approx(0.75)

    def test_keeps_depth(self):
        pts = np.array([[0.2, 0.3, 0.4]])
        out = project_perspective(pts, (5.0, 5.0), 2.0, 3.0)
        assert out[0, 2] == pytest.approx(0.4)

    def test_behind_projection_plane_raises(self):
        with pytest.raises(ValueError, match="fov"):
            project_perspective(np.array([[0.0, 0.0, -3.0]]), (0, 0), 1.0, 3.0)
