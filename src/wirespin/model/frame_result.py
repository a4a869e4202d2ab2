from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from wirespin._constants import N_EDGES, N_VERTICES


@dataclass
class FrameResult:
    """Everything a renderer needs to draw one frame.

    Screen coordinates are in the caller's length units with the origin
    at the top-left of a ``size`` by ``size`` square.  Colours are
    0-255 integers; alphas are in ``[0, 1]`` with larger values nearer
    the viewer.

    Attributes:
        projected: ``(20, 3)`` array of ``(screen_x, screen_y, z)``.
        edge_colours: ``(30, 3)`` integer RGB per edge.
        edge_depth_alphas: ``(30,)`` opacity per edge.
        vertex_depth_alphas: ``(20,)`` opacity per vertex.

    Raises:
        ValueError: If any array has the wrong shape.
    """

    projected: np.ndarray
    edge_colours: np.ndarray
    edge_depth_alphas: np.ndarray
    vertex_depth_alphas: np.ndarray

    def __post_init__(self) -> None:
        self.projected = np.asarray(self.projected, dtype=float)
        self.edge_colours = np.asarray(self.edge_colours, dtype=int)
        self.edge_depth_alphas = np.asarray(self.edge_depth_alphas, dtype=float)
        self.vertex_depth_alphas = np.asarray(
            self.vertex_depth_alphas, dtype=float,
        )
        expected = {
            "projected": (N_VERTICES, 3),
            "edge_colours": (N_EDGES, 3),
            "edge_depth_alphas": (N_EDGES,),
            "vertex_depth_alphas": (N_VERTICES,),
        }
        for name, shape in expected.items():
            actual = getattr(self, name).shape
            if actual != shape:
                raise ValueError(
                    f"{name} must have shape {shape}, got {actual}"
                )

    @property
    def screen_xy(self) -> np.ndarray:
        """``(20, 2)`` screen positions without depth."""
        return self.projected[:, :2]

    def edge_segments(self, edges: np.ndarray) -> np.ndarray:
        """Return ``(n_edges, 2, 2)`` screen-space line segments.

        Args:
            edges: ``(n_edges, 2)`` vertex index pairs, normally
                :data:`~wirespin.geometry.EDGES`.
        """
        xy = self.screen_xy
        return np.stack([xy[edges[:, 0]], xy[edges[:, 1]]], axis=1)
