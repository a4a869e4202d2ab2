"""Per-tick frame computation: morph, rotate, project and shade."""

from __future__ import annotations

import numpy as np

from wirespin.geometry import EDGES
from wirespin.model import FrameResult, MotionStyle, OpalRamp, ShapeQueue
from wirespin.rendering.blend import blend_factor, breathing_offsets, lerp_vertices
from wirespin.rendering.projection import project_perspective, rotate_yxz

_DEFAULT_STYLE = MotionStyle()
_DEFAULT_RAMP = OpalRamp()


def _depth_alpha(z: np.ndarray, base: float, span: float) -> np.ndarray:
    # z = -1 (nearest) -> base + span; z = +1 (farthest) -> base.
    return base + span * (1.0 - (z + 1.0) / 2.0)


def compute_frame(
    queue: ShapeQueue,
    shape_time: float,
    total_time: float,
    speed: float = 1.0,
    size: float = 48.0,
    *,
    style: MotionStyle | None = None,
    ramp: OpalRamp | None = None,
) -> FrameResult:
    """Compute the projected wireframe for one animation tick.

    The current and next shapes are read from *queue* (which may
    refill itself to provide them) and blended according to
    *shape_time*.  The queue's cursor is never moved: the host calls
    :func:`~wirespin.model.advance_queue` and subtracts
    ``style.shape_duration`` from its own *shape_time* once it rolls
    over.

    Args:
        queue: Shape source for this spinner.
        shape_time: Seconds spent on the current shape.
        total_time: Seconds since the spinner started.
        speed: Multiplier applied to *total_time* for rotation,
            breathing and shimmer.
        size: Render size in the caller's length units.  The shape is
            centred in a ``size`` by ``size`` square.
        style: Motion parameters; defaults to :class:`MotionStyle()`.
        ramp: Edge colour ramp; defaults to the opal ramp.

    Returns:
        A fresh :class:`FrameResult`.

    Raises:
        ValueError: If *size* is not positive, *speed* is negative, or
            a vertex ends up behind the projection plane.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if speed < 0:
        raise ValueError(f"speed must be non-negative, got {speed}")
    if style is None:
        style = _DEFAULT_STYLE
    if ramp is None:
        ramp = _DEFAULT_RAMP

    time = total_time * speed

    shape_a = queue.shape(0).vertices
    shape_b = queue.shape(1).vertices
    blend = blend_factor(shape_time, style)

    verts = lerp_vertices(shape_a, shape_b, blend)
    verts = verts + breathing_offsets(time, len(verts), style.breath_amplitude)

    rate_y, rate_x, rate_z = style.rotation_rates
    rotated = rotate_yxz(
        verts,
        time * rate_y,
        time * rate_x + style.rotation_offset_x,
        time * rate_z,
    )

    centre = (size / 2.0, size / 2.0)
    projected = project_perspective(
        rotated, centre, size * style.radius_fraction, style.fov,
    )

    pa = projected[EDGES[:, 0]]
    pb = projected[EDGES[:, 1]]
    mid = (pa + pb) / 2.0
    sweep = (mid[:, 0] + mid[:, 1]) / (size * 2.0) + time * style.sweep_rate
    # Half-up rounding, matching how the renderers format colours.
    edge_colours = np.floor(ramp.sample(sweep) + 0.5).astype(int)

    return FrameResult(
        projected=projected,
        edge_colours=edge_colours,
        edge_depth_alphas=_depth_alpha(
            mid[:, 2], style.edge_alpha_base, style.depth_alpha_span,
        ),
        vertex_depth_alphas=_depth_alpha(
            projected[:, 2], style.vertex_alpha_base, style.depth_alpha_span,
        ),
    )
