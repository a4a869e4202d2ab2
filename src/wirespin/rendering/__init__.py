"""Frame computation: blending, rotation and perspective projection.

Nothing here draws.  The output is plain arrays that any 2D backend
can stroke and fill.
"""

from wirespin.rendering.blend import (
    blend_factor,
    breathing_offsets,
    lerp_vertices,
    smoothstep,
)
from wirespin.rendering.frame import compute_frame
from wirespin.rendering.projection import (
    project_perspective,
    rotate_yxz,
    rotation_matrix_yxz,
)

__all__ = [
    "blend_factor",
    "breathing_offsets",
    "compute_frame",
    "lerp_vertices",
    "project_perspective",
    "rotate_yxz",
    "rotation_matrix_yxz",
    "smoothstep",
]
