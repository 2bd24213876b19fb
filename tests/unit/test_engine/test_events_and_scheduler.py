"""
Unit tests for the host event registry and the tick scheduler.
"""

import pytest

from engine.events import SAVE_COMPLETED, METER_SCREEN_REFRESH
from engine.scheduler import TickScheduler


class TestHostEvents:
    """Tests for HostEvents."""

    def test_fire_calls_handlers_in_order(self, events):
        """Test registration order and payload passing."""
        seen = []
        events.subscribe(SAVE_COMPLETED, lambda slot: seen.append(("a", slot)))
        events.subscribe(SAVE_COMPLETED, lambda slot: seen.append(("b", slot)))

        assert events.fire(SAVE_COMPLETED, slot=3) == 2
        assert seen == [("a", 3), ("b", 3)]

    def test_fire_without_handlers(self, events):
        """Test that unknown events are a no-op."""
        assert events.fire(METER_SCREEN_REFRESH) == 0

    def test_unsubscribe(self, events):
        """Test removing a handler."""
        seen = []

        def handler(**_):
            seen.append(1)

        events.subscribe(SAVE_COMPLETED, handler)
        events.unsubscribe(SAVE_COMPLETED, handler)
        events.fire(SAVE_COMPLETED)

        assert seen == []

    def test_handler_errors_propagate(self, events):
        """Test that a failing handler is not swallowed."""
        seen = []

        def broken(**_):
            raise RuntimeError("boom")

        events.subscribe(SAVE_COMPLETED, broken)
        events.subscribe(SAVE_COMPLETED, lambda **_: seen.append(1))

        with pytest.raises(RuntimeError):
            events.fire(SAVE_COMPLETED)
        assert seen == []


class TestTickScheduler:
    """Tests for TickScheduler."""

    def test_runs_after_delay(self):
        """Test that a 10 tick delay runs on the 10th advance."""
        scheduler = TickScheduler()
        seen = []
        scheduler.start_delayed(10, lambda: seen.append(scheduler.tick))

        for _ in range(9):
            scheduler.advance()
        assert seen == []

        assert scheduler.advance() == 1
        assert seen == [10]
        assert scheduler.pending == 0

    def test_zero_delay_runs_next_tick(self):
        """Test that zero delay still waits for advance()."""
        scheduler = TickScheduler()
        seen = []
        scheduler.start_delayed(0, lambda: seen.append("x"))
        assert seen == []

        scheduler.advance()
        assert seen == ["x"]

    def test_same_tick_keeps_schedule_order(self):
        """Test FIFO order for callbacks due together."""
        scheduler = TickScheduler()
        seen = []
        scheduler.start_delayed(2, lambda: seen.append("first"))
        scheduler.start_delayed(2, lambda: seen.append("second"))
        scheduler.start_delayed(1, lambda: seen.append("earlier"))

        scheduler.advance()
        scheduler.advance()

        assert seen == ["earlier", "first", "second"]

    def test_callback_scheduling_more_work(self):
        """Test that callbacks added while running wait for a later tick."""
        scheduler = TickScheduler()
        seen = []

        def outer():
            seen.append("outer")
            scheduler.start_delayed(0, lambda: seen.append("inner"))

        scheduler.start_delayed(1, outer)
        scheduler.advance()
        assert seen == ["outer"]

        scheduler.advance()
        assert seen == ["outer", "inner"]
