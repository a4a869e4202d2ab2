"""Host-side clock that drives a shape queue at a fixed tick rate."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from wirespin._constants import FRAME_DT
from wirespin.model import FrameResult, MotionStyle, OpalRamp, ShapeQueue
from wirespin.rendering import compute_frame

logger = logging.getLogger(__name__)


@dataclass
class SpinnerTimeline:
    """Time accumulators and queue for one spinner instance.

    Renderers own the animation loop; this class holds the bookkeeping
    they would otherwise repeat: scaling each tick by *speed*, rolling
    *shape_time* over and advancing the queue, and keeping
    *total_time*.  Call :meth:`tick` once per animation frame::

        timeline = SpinnerTimeline(size=50, speed=0.8)
        frame = timeline.tick()

    Attributes:
        queue: Shape source.  A randomly seeded queue by default.
        speed: Time multiplier.
        size: Render size passed to :func:`compute_frame`.
        style: Motion parameters.
        ramp: Edge colour ramp, or ``None`` for the opal default.
        shape_time: Seconds spent on the current shape.
        total_time: Unscaled seconds since the first tick.
    """

    queue: ShapeQueue = field(default_factory=ShapeQueue.create)
    speed: float = 1.0
    size: float = 48.0
    style: MotionStyle = field(default_factory=MotionStyle)
    ramp: OpalRamp | None = None
    shape_time: float = 0.0
    total_time: float = 0.0

    def __post_init__(self) -> None:
        if self.speed < 0:
            raise ValueError(f"speed must be non-negative, got {self.speed}")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")

    def tick(self, dt: float = FRAME_DT) -> FrameResult:
        """Advance the clock by *dt* seconds and compute the frame.

        Raises:
            ValueError: If *dt* is negative.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.shape_time += dt * self.speed
        while self.shape_time >= self.style.shape_duration:
            self.shape_time -= self.style.shape_duration
            self.queue.advance()
            logger.debug("Advanced to %r", self.queue.shape(0))

        frame = compute_frame(
            self.queue,
            self.shape_time,
            self.total_time,
            self.speed,
            self.size,
            style=self.style,
            ramp=self.ramp,
        )
        self.total_time += dt
        return frame
