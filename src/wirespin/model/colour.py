from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from matplotlib.colors import ListedColormap

#: A colour specification accepted by :meth:`OpalRamp.from_colours`.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"lavender"``, ``"#615880"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``.
#:
#: See :func:`normalise_colour` for conversion to a normalised RGB tuple.
Colour = str | float | tuple[float, float, float] | list[float]

#: The default opal ramp, as 0-255 RGB stops.  The ramp is cyclic:
#: the last stop blends back into the first.
OPAL_STOPS: tuple[tuple[float, float, float], ...] = (
    (97.0, 88.0, 128.0),
    (119.0, 110.0, 162.0),
    (154.0, 168.0, 184.0),
    (216.0, 221.0, 232.0),
    (154.0, 168.0, 184.0),
    (119.0, 110.0, 162.0),
)

#: Silver used by renderers for vertex dots, as 0-255 RGB.
VERTEX_COLOUR: tuple[int, int, int] = (216, 221, 232)


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to a normalised (r, g, b) tuple.

    Args:
        colour: CSS name, hex string, grey float or RGB sequence.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        grey = float(colour)
        if not 0.0 <= grey <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {grey}")
        return (grey, grey, grey)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        rgb = tuple(float(c) for c in colour)
        if not all(0.0 <= c <= 1.0 for c in rgb):
            raise ValueError(f"RGB components must be in [0, 1], got {rgb}")
        return rgb  # type: ignore[return-value]

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


@dataclass(frozen=True)
class OpalRamp:
    """Cyclic piecewise-linear colour ramp.

    The parameter ``t`` is wrapped into ``[0, 1)`` and spread evenly
    over the stops, with the segment after the last stop running back
    to the first, so ``sample(0)`` and ``sample(1)`` coincide.

    Attributes:
        stops: RGB stops with components in ``[0, 255]``.  At least
            two are required.
    """

    stops: tuple[tuple[float, float, float], ...] = OPAL_STOPS

    def __post_init__(self) -> None:
        stops = tuple(tuple(float(c) for c in s) for s in self.stops)
        if len(stops) < 2:
            raise ValueError(
                f"stops must contain at least 2 colours, got {len(stops)}"
            )
        for s in stops:
            if len(s) != 3:
                raise ValueError(f"each stop must have 3 components, got {s}")
            if not all(0.0 <= c <= 255.0 for c in s):
                raise ValueError(f"stop components must be in [0, 255], got {s}")
        object.__setattr__(self, "stops", stops)

    @classmethod
    def from_colours(cls, colours: Sequence[Colour]) -> OpalRamp:
        """Build a ramp from any colour specifications.

        Accepts everything :func:`normalise_colour` does, e.g.
        ``OpalRamp.from_colours(["#615880", "lavender"])``.
        """
        return cls(stops=tuple(
            tuple(c * 255.0 for c in normalise_colour(col))
            for col in colours
        ))

    def sample(self, t: float | np.ndarray) -> np.ndarray:
        """Sample the ramp at *t*.

        Args:
            t: A scalar or array of ramp parameters.  Any real value
                is accepted and wrapped into ``[0, 1)``.

        Returns:
            Array of shape ``t.shape + (3,)`` with 0-255 RGB floats.
        """
        table = np.asarray(self.stops)
        n = len(table)
        pos = np.mod(np.asarray(t, dtype=float), 1.0) * n
        idx = np.floor(pos).astype(int)
        frac = (pos - idx)[..., np.newaxis]
        a = table[idx % n]
        b = table[(idx + 1) % n]
        return a + (b - a) * frac

    def as_colormap(self, n: int = 256) -> ListedColormap:
        """Return a matplotlib colourmap spanning one full cycle.

        Useful for previewing a ramp with matplotlib's colourbar tools.
        """
        from matplotlib.colors import ListedColormap

        rgb = self.sample(np.linspace(0.0, 1.0, n, endpoint=False)) / 255.0
        return ListedColormap(rgb, name="opal")

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {"stops": [list(s) for s in self.stops]}

    @classmethod
    def from_dict(cls, d: dict) -> OpalRamp:
        """Deserialise from a dictionary.

        Stops given as lists of three numbers are read as 0-255 RGB;
        any other entry (e.g. a hex string) goes through
        :func:`normalise_colour`.
        """
        stops = d["stops"]
        if all(isinstance(s, (list, tuple)) for s in stops):
            return cls(stops=tuple(tuple(s) for s in stops))
        return cls.from_colours(stops)


_DEFAULT_RAMP = OpalRamp()


def sample_opal(t: float) -> tuple[float, float, float]:
    """Sample the default opal ramp at *t*, returning 0-255 RGB floats."""
    r, g, b = _DEFAULT_RAMP.sample(t)
    return (float(r), float(g), float(b))
