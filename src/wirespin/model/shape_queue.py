"""The shape queue: an endless, seeded sequence of shapes to morph through."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from wirespin._constants import TRIM_KEEP, TRIM_THRESHOLD
from wirespin.geometry import (
    BASE_SHAPES,
    Shape,
    generate_hybrid,
    is_valid_seed,
    lcg,
    random_seed,
)

logger = logging.getLogger(__name__)


@dataclass
class ShapeQueue:
    """Mutable sequencer of shapes for one spinner instance.

    The queue only ever grows by whole batches (a shuffled copy of
    :data:`~wirespin.geometry.BASE_SHAPES` with two or three hybrids
    inserted) and is trimmed from the front once the cursor has moved
    far enough, so the shapes at ``consumed`` and ``consumed + 1`` are
    always available.

    A queue must be driven from a single thread.  Hosts that animate
    on several threads need one queue each.

    Attributes:
        shapes: Queued shapes, oldest first.
        consumed: Index of the current shape within *shapes*.
        seed: Generator state, threaded through every random draw.

    Raises:
        ValueError: If *shapes* is empty, *consumed* is negative, or
            *seed* is outside ``[1, 2**31 - 2]``.
    """

    shapes: list[Shape] = field(default_factory=lambda: [BASE_SHAPES[0]])
    consumed: int = 0
    seed: int = 1

    def __post_init__(self) -> None:
        if not self.shapes:
            raise ValueError("shapes must not be empty")
        if self.consumed < 0:
            raise ValueError(
                f"consumed must be non-negative, got {self.consumed}"
            )
        if not is_valid_seed(self.seed):
            raise ValueError(
                f"seed must be an integer in [1, 2147483646], got {self.seed!r}"
            )
        self.seed = int(self.seed)

    @classmethod
    def create(cls, seed: int | None = None) -> ShapeQueue:
        """Build a queue that starts on the plain dodecahedron.

        Two batches are queued immediately so that the current and
        next shapes are ready before the first frame.

        Args:
            seed: Initial generator state.  ``None`` draws one at
                random; pass an integer for a reproducible sequence.
        """
        queue = cls(
            shapes=[BASE_SHAPES[0]],
            consumed=0,
            seed=random_seed() if seed is None else seed,
        )
        queue.refill()
        queue.refill()
        return queue

    @property
    def lookahead(self) -> int:
        """Number of shapes from the current one to the end of the queue."""
        return len(self.shapes) - self.consumed

    def _draw(self) -> int:
        self.seed = lcg(self.seed)
        return self.seed

    def refill(self) -> None:
        """Append one shuffled batch of base shapes plus hybrids."""
        batch = list(BASE_SHAPES)
        # Fisher-Yates, one draw per swap.
        for i in range(len(batch) - 1, 0, -1):
            j = self._draw() % (i + 1)
            batch[i], batch[j] = batch[j], batch[i]

        hybrid_count = 2 + self._draw() % 2
        for h in range(hybrid_count):
            hybrid = generate_hybrid(self.seed * 0.0001 + h * 53.1)
            insert_at = self._draw() % (len(batch) + 1)
            batch.insert(insert_at, hybrid)

        self.shapes.extend(batch)
        logger.debug(
            "Refilled shape queue with %d shapes (%d hybrids); length %d",
            len(batch), hybrid_count, len(self.shapes),
        )

    def shape(self, offset: int = 0) -> Shape:
        """Return the shape *offset* places after the current one.

        Refills as many times as needed to reach it.

        Args:
            offset: ``0`` for the current shape, ``1`` for the next.

        Raises:
            ValueError: If *offset* is negative.
        """
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")
        idx = self.consumed + offset
        while idx >= len(self.shapes):
            self.refill()
        return self.shapes[idx]

    def advance(self) -> None:
        """Move the cursor to the next shape.

        Once the cursor passes :data:`TRIM_THRESHOLD`, everything but
        the last :data:`TRIM_KEEP` consumed shapes is dropped.  The
        current and next shapes are never removed.
        """
        self.consumed += 1
        if self.consumed > TRIM_THRESHOLD:
            dropped = self.consumed - TRIM_KEEP
            del self.shapes[:dropped]
            self.consumed = TRIM_KEEP
            logger.debug(
                "Trimmed %d consumed shapes; length %d",
                dropped, len(self.shapes),
            )


def create_shape_queue(seed: int | None = None) -> ShapeQueue:
    """Create a primed :class:`ShapeQueue`.  See :meth:`ShapeQueue.create`."""
    return ShapeQueue.create(seed)


def refill_queue(queue: ShapeQueue) -> None:
    """Append one batch to *queue*.  See :meth:`ShapeQueue.refill`."""
    queue.refill()


def queue_shape(queue: ShapeQueue, offset: int) -> np.ndarray:
    """Return the vertices of the shape *offset* places ahead in *queue*.

    Args:
        queue: The queue to read from; refilled if too short.
        offset: ``0`` for the current shape, ``1`` for the next.
            Must be non-negative.

    Returns:
        Read-only array of shape ``(20, 3)``.
    """
    return queue.shape(offset).vertices


def advance_queue(queue: ShapeQueue) -> None:
    """Advance *queue* by one shape.  See :meth:`ShapeQueue.advance`."""
    queue.advance()
