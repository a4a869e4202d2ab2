"""Shared constants used across the geometry, model and rendering layers."""

N_VERTICES: int = 20
"""Number of vertices in every shape (the dodecahedron's vertex count)."""

N_EDGES: int = 30
"""Number of edges shared by every shape."""

EDGE_TOLERANCE: float = 0.01
"""Tolerance on squared distance when detecting dodecahedron edges."""

LCG_MULTIPLIER: int = 16807
"""Park-Miller multiplier for the seeded generator."""

LCG_MODULUS: int = 2147483647
"""Park-Miller modulus (``2**31 - 1``).  Seeds live in ``[1, LCG_MODULUS - 1]``."""

SHAPE_DURATION: float = 3.0
"""Seconds each queued shape is shown, including its transition out."""

TRANSITION_TIME: float = 1.2
"""Final seconds of :data:`SHAPE_DURATION` spent blending into the next shape."""

TRIM_THRESHOLD: int = 20
"""Queue cursor position beyond which consumed shapes are discarded."""

TRIM_KEEP: int = 2
"""Consumed shapes retained behind the cursor after a trim."""

FRAME_DT: float = 0.016
"""Default tick length in seconds used by host-side drivers (16 ms)."""
