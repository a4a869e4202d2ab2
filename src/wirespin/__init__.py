"""wirespin: the morphing wireframe kernel behind the "thinking" spinner.

A dodecahedron is continuously morphed through an endless, seeded
sequence of base and hybrid shapes, rotated, and projected to 2D with
depth-aware colour and opacity.  Renderers draw the returned arrays;
wirespin itself never draws.

Example usage::

    from wirespin import EDGES, compute_frame, create_shape_queue

    queue = create_shape_queue()
    frame = compute_frame(queue, shape_time, total_time, speed=0.8, size=50)
    for (i, j), rgb, alpha in zip(EDGES, frame.edge_colours,
                                  frame.edge_depth_alphas):
        ...
"""

from wirespin._constants import SHAPE_DURATION, TRANSITION_TIME
from wirespin.geometry import (
    BASE_SHAPES,
    DODECA,
    EDGES,
    SHAPE_NAMES,
    Shape,
    base_shape,
    generate_hybrid,
    lcg,
)
from wirespin.model import (
    Colour,
    FrameResult,
    MotionStyle,
    OpalRamp,
    ShapeQueue,
    advance_queue,
    create_shape_queue,
    normalise_colour,
    queue_shape,
    refill_queue,
    sample_opal,
)
from wirespin.rendering import (
    compute_frame,
    lerp_vertices,
    rotate_yxz,
    smoothstep,
)
from wirespin.styles import StyleSet, load_styles, save_styles
from wirespin.timeline import SpinnerTimeline

__all__ = [
    "BASE_SHAPES",
    "Colour",
    "DODECA",
    "EDGES",
    "FrameResult",
    "MotionStyle",
    "OpalRamp",
    "SHAPE_DURATION",
    "SHAPE_NAMES",
    "Shape",
    "ShapeQueue",
    "SpinnerTimeline",
    "StyleSet",
    "TRANSITION_TIME",
    "advance_queue",
    "base_shape",
    "compute_frame",
    "create_shape_queue",
    "generate_hybrid",
    "lcg",
    "lerp_vertices",
    "load_styles",
    "normalise_colour",
    "queue_shape",
    "refill_queue",
    "rotate_yxz",
    "sample_opal",
    "save_styles",
    "smoothstep",
]
