"""Tests for the host-side spinner clock."""

import logging

import numpy as np
import pytest

from wirespin import FrameResult, MotionStyle, ShapeQueue, SpinnerTimeline
from wirespin.rendering import compute_frame


class TestTick:
    def test_returns_frame(self, seeded_queue):
        timeline = SpinnerTimeline(queue=seeded_queue)
        assert isinstance(timeline.tick(), FrameResult)

    def test_accumulates_time(self, seeded_queue):
        timeline = SpinnerTimeline(queue=seeded_queue, speed=0.5)
        for _ in range(10):
            timeline.tick(0.1)
        assert timeline.total_time == pytest.approx(1.0)
        assert timeline.shape_time == pytest.approx(0.5)

    def test_first_tick_uses_starting_total_time(self, seeded_queue):
        expected = compute_frame(ShapeQueue.create(seed=42), 0.016, 0.0)
        frame = SpinnerTimeline(queue=seeded_queue).tick()
        np.testing.assert_array_equal(frame.projected, expected.projected)

    def test_advances_after_shape_duration(self, seeded_queue):
        timeline = SpinnerTimeline(queue=seeded_queue)
        for _ in range(200):
            timeline.tick()
        assert seeded_queue.consumed == 1
        assert seeded_queue.shape(0).name == "star"
        assert 0.0 <= timeline.shape_time < 3.0

    def test_long_tick_advances_several_shapes(self, seeded_queue):
        timeline = SpinnerTimeline(queue=seeded_queue)
        timeline.tick(7.0)
        assert seeded_queue.consumed == 2
        assert timeline.shape_time == pytest.approx(1.0)

    def test_speed_shortens_shapes(self, seeded_queue):
        timeline = SpinnerTimeline(queue=seeded_queue, speed=2.0)
        for _ in range(10):
            timeline.tick(0.2)
        assert seeded_queue.consumed == 1

    def test_custom_duration(self, seeded_queue):
        style = MotionStyle(shape_duration=1.0, transition_time=0.5)
        timeline = SpinnerTimeline(queue=seeded_queue, style=style)
        timeline.tick(2.5)
        assert seeded_queue.consumed == 2

    def test_zero_speed_freezes(self, seeded_queue):
        timeline = SpinnerTimeline(queue=seeded_queue, speed=0.0)
        first = timeline.tick(1.0)
        second = timeline.tick(5.0)
        assert seeded_queue.consumed == 0
        np.testing.assert_array_equal(first.projected, second.projected)

    def test_logs_advance(self, seeded_queue, caplog):
        timeline = SpinnerTimeline(queue=seeded_queue)
        with caplog.at_level(logging.DEBUG, logger="wirespin.timeline"):
            timeline.tick(3.5)
        assert "Advanced to" in caplog.text

    def test_default_queue_is_primed(self):
        timeline = SpinnerTimeline()
        assert timeline.queue.lookahead >= 2


class TestValidation:
    def test_negative_dt(self, seeded_queue):
        with pytest.raises(ValueError, match="dt"):
            SpinnerTimeline(queue=seeded_queue).tick(-0.1)

    def test_negative_speed(self, seeded_queue):
        with pytest.raises(ValueError, match="speed"):
            SpinnerTimeline(queue=seeded_queue, speed=-1.0)

    def test_zero_size(self, seeded_queue):
        with pytest.raises(ValueError, match="size"):
            SpinnerTimeline(queue=seeded_queue, size=0.0)
