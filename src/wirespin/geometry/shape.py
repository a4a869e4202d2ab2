from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from wirespin._constants import N_VERTICES


@dataclass(frozen=True, eq=False)
class Shape:
    """A named vertex set sharing the dodecahedron's topology.

    Vertex ``i`` of every shape corresponds to vertex ``i`` of
    :data:`~wirespin.geometry.DODECA`, so all shapes can be drawn with
    the same :data:`~wirespin.geometry.EDGES`.

    Attributes:
        name: Identifier, e.g. ``"twist"`` or ``"hybrid:gem+helix"``.
        vertices: Read-only array of shape ``(20, 3)``.

    Raises:
        ValueError: If *vertices* does not have shape ``(20, 3)``.
    """

    name: str
    vertices: np.ndarray

    def __post_init__(self) -> None:
        verts = np.array(self.vertices, dtype=float)
        if verts.shape != (N_VERTICES, 3):
            raise ValueError(
                f"vertices must have shape ({N_VERTICES}, 3), got {verts.shape}"
            )
        verts.setflags(write=False)
        object.__setattr__(self, "vertices", verts)

    @property
    def is_hybrid(self) -> bool:
        """Whether this shape was produced by the hybrid generator."""
        return self.name.startswith("hybrid:")

    @property
    def extent(self) -> float:
        """Largest absolute coordinate over all vertices."""
        return float(np.max(np.abs(self.vertices)))

    def __repr__(self) -> str:
        return f"Shape({self.name!r})"
