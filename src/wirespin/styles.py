"""Style set save/load for JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from wirespin.model import MotionStyle, OpalRamp

logger = logging.getLogger(__name__)

_VALID_SECTIONS = frozenset({"motion", "opal_ramp"})


@dataclass
class StyleSet:
    """Spinner settings loaded from or saved to a file.

    Both fields are optional.  A ``StyleSet`` loaded from a file that
    only contains ``"motion"`` has ``opal_ramp`` set to ``None``.

    Attributes:
        motion: Timing, camera and shading parameters.
        opal_ramp: Edge colour ramp.
    """

    motion: MotionStyle | None = None
    opal_ramp: OpalRamp | None = None


def save_styles(
    path: str | Path,
    *,
    motion: MotionStyle | None = None,
    opal_ramp: OpalRamp | None = None,
) -> None:
    """Save spinner settings to a JSON file.

    Only sections that are not ``None`` are written.  The file is
    human-readable with two-space indentation.

    Args:
        path: Destination file path.
        motion: Timing, camera and shading parameters.
        opal_ramp: Edge colour ramp.
    """
    data: dict = {}
    if motion is not None:
        data["motion"] = motion.to_dict()
    if opal_ramp is not None:
        data["opal_ramp"] = opal_ramp.to_dict()

    Path(path).write_text(json.dumps(data, indent=2) + "\n")
    logger.info("Saved spinner styles to %s", path)


def load_styles(path: str | Path) -> StyleSet:
    """Load spinner settings from a JSON file.

    Args:
        path: Source file path.

    Returns:
        A :class:`StyleSet` with the parsed sections.

    Raises:
        ValueError: If the file contains unknown top-level keys or a
            section holds invalid values.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    motion = None
    if "motion" in data:
        motion = MotionStyle.from_dict(data["motion"])

    opal_ramp = None
    if "opal_ramp" in data:
        opal_ramp = OpalRamp.from_dict(data["opal_ramp"])

    logger.info("Loaded spinner styles from %s", path)
    return StyleSet(motion=motion, opal_ramp=opal_ramp)
