"""Shared test fixtures for wirespin."""

import pytest

from wirespin.model import ShapeQueue

FIXED_SEED = 42


@pytest.fixture
def seeded_queue():
    """Return a primed queue with the fixed regression seed."""
    return ShapeQueue.create(seed=FIXED_SEED)


@pytest.fixture
def style_path(tmp_path):
    """Return a path for a temporary style file."""
    return tmp_path / "spinner_style.json"
