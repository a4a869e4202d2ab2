from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from wirespin._constants import SHAPE_DURATION, TRANSITION_TIME

_POSITIVE = ("shape_duration", "transition_time", "fov", "radius_fraction")
_NON_NEGATIVE = (
    "breath_amplitude", "edge_alpha_base", "vertex_alpha_base",
    "depth_alpha_span",
)


@dataclass(frozen=True)
class MotionStyle:
    """Timing, camera and shading parameters for :func:`compute_frame`.

    The defaults reproduce the stock spinner.

    Attributes:
        shape_duration: Seconds each shape is shown, transition included.
        transition_time: Final seconds of *shape_duration* spent
            blending into the next shape.
        breath_amplitude: Amplitude of the per-vertex breathing jitter.
        rotation_rates: Angular speeds ``(y, x, z)`` in radians per
            unit of scaled time.
        rotation_offset_x: Constant tilt about the X axis in radians.
        fov: Perspective divisor; must exceed the largest ``|z|`` of
            any shape so the projection never flips.
        radius_fraction: On-screen radius as a fraction of the render
            size.
        sweep_rate: Speed of the opal shimmer along the ramp.
        edge_alpha_base: Edge opacity at the far side of the shape.
        vertex_alpha_base: Vertex opacity at the far side of the shape.
        depth_alpha_span: Extra opacity added from far (z = +1) to
            near (z = -1).

    Raises:
        ValueError: If a field is out of range or *transition_time*
            exceeds *shape_duration*.
    """

    shape_duration: float = SHAPE_DURATION
    transition_time: float = TRANSITION_TIME
    breath_amplitude: float = 0.03
    rotation_rates: tuple[float, float, float] = (0.25, 0.15, 0.09)
    rotation_offset_x: float = 0.4
    fov: float = 3.0
    radius_fraction: float = 0.26
    sweep_rate: float = 0.12
    edge_alpha_base: float = 0.3
    vertex_alpha_base: float = 0.4
    depth_alpha_span: float = 0.5

    def __post_init__(self) -> None:
        for name in _POSITIVE:
            val = getattr(self, name)
            if val <= 0:
                raise ValueError(f"{name} must be positive, got {val}")
        for name in _NON_NEGATIVE:
            val = getattr(self, name)
            if val < 0:
                raise ValueError(f"{name} must be non-negative, got {val}")
        if self.transition_time > self.shape_duration:
            raise ValueError(
                f"transition_time must not exceed shape_duration "
                f"({self.shape_duration}), got {self.transition_time}"
            )
        if len(self.rotation_rates) != 3:
            raise ValueError(
                f"rotation_rates must have 3 elements, "
                f"got {len(self.rotation_rates)}"
            )
        object.__setattr__(
            self, "rotation_rates", tuple(float(r) for r in self.rotation_rates),
        )

    @property
    def hold_time(self) -> float:
        """Seconds a shape is held still before blending begins."""
        return self.shape_duration - self.transition_time

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        d: dict = {}
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if val != f.default:
                d[f.name] = list(val) if isinstance(val, tuple) else val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> MotionStyle:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown motion style keys: {sorted(unknown)}")
        kwargs = dict(d)
        if "rotation_rates" in kwargs:
            kwargs["rotation_rates"] = tuple(kwargs["rotation_rates"])
        return cls(**kwargs)
