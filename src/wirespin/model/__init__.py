"""Data model for wirespin: the shape queue, frame output and styles.

Everything is re-exported here so that ``from wirespin.model import
ShapeQueue`` works.
"""

from wirespin.model.colour import (
    OPAL_STOPS,
    VERTEX_COLOUR,
    Colour,
    OpalRamp,
    normalise_colour,
    sample_opal,
)
from wirespin.model.frame_result import FrameResult
from wirespin.model.motion_style import MotionStyle
from wirespin.model.shape_queue import (
    ShapeQueue,
    advance_queue,
    create_shape_queue,
    queue_shape,
    refill_queue,
)

__all__ = [
    "Colour",
    "FrameResult",
    "MotionStyle",
    "OPAL_STOPS",
    "OpalRamp",
    "ShapeQueue",
    "VERTEX_COLOUR",
    "advance_queue",
    "create_shape_queue",
    "normalise_colour",
    "queue_shape",
    "refill_queue",
    "sample_opal",
]
