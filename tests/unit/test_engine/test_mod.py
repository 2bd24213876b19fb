"""
Unit tests for the forced exit mod wiring.
"""

import pytest
from datetime import datetime, timedelta

from engine.config import ClockFormat
from engine.events import (
    METER_SCREEN_DESTROYED,
    METER_SCREEN_INIT,
    METER_SCREEN_REFRESH,
    SAVE_COMPLETED,
)
from engine.mod import POST_SAVE_DELAY, ForcedExitMod
from engine.session import SessionClock
from systems.exit_policy import ElapsedTimeTrigger, TimeOfDayTrigger
from ui.meter_screen import MeterScreen


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.current = now

    def __call__(self) -> datetime:
        return self.current


@pytest.fixture
def clock(game_started):
    return FakeClock(game_started)


@pytest.fixture
def mod(host, events, options, game_started, clock):
    """
    Loaded mod bound to the recording host, without touching the options file.
    """
    forced_exit = ForcedExitMod(host, events, options, SessionClock(game_started), now=clock)
    forced_exit.on_load(read_options=False)
    return forced_exit


class TestForcedExitCheck:
    """Tests for the save completed -> exit check path."""

    def test_save_schedules_delayed_sequence(self, mod, host, events, clock, game_started):
        """Test that the exit sequence starts POST_SAVE_DELAY ticks after the save."""
        clock.current = game_started + timedelta(hours=13)
        events.fire(SAVE_COMPLETED, slot=1)

        assert host.calls == [f"start_delayed:{POST_SAVE_DELAY}"]
        host.run_ticks(POST_SAVE_DELAY - 1)
        assert "show_dialog" not in host.calls

        host.run_ticks(1)
        assert host.calls[-2:] == ["suspend_simulation", "show_dialog"]
        request, _ = host.dialogs[0]
        assert request.body_lines[0] == "You have played for 12 hours."

    def test_policy_reads_clock_at_save_time(self, mod, host, events, clock, game_started):
        """Test that the decision is made when the save completes."""
        clock.current = game_started + timedelta(hours=12)
        events.fire(SAVE_COMPLETED, slot=1)
        clock.current = game_started + timedelta(hours=12, seconds=1)
        host.run_ticks(POST_SAVE_DELAY)

        assert host.calls == []

    def test_decision_survives_the_delay(self, mod, host, events, clock, game_started):
        """Test that a trigger at save time still exits after the clock moves on."""
        clock.current = game_started + timedelta(hours=12, seconds=1)
        events.fire(SAVE_COMPLETED, slot=1)
        clock.current = game_started
        host.run_ticks(POST_SAVE_DELAY)

        assert "show_dialog" in host.calls

    def test_no_trigger_does_nothing(self, mod, host, clock, game_started):
        """Test that an early save leaves the game alone."""
        clock.current = game_started + timedelta(hours=1)
        assert mod.check_forced_exit() is None
        assert host.calls == []
        assert host.simulation_active is True

    def test_time_of_day_uses_host_formatter(self, mod, host, options, clock):
        """Test that the time-of-day label comes from the host."""
        options.exit_after_enabled = False
        options.exit_at_enabled = True
        options.exit_at_hour = 23
        clock.current = datetime(2024, 3, 1, 23, 4)

        assert mod.check_forced_exit() == TimeOfDayTrigger("23:04")
        host.run_ticks(POST_SAVE_DELAY)
        request, _ = host.dialogs[0]
        assert request.body_lines[0] == "It is now 23:04."

    def test_paused_host_closes_pause_first(self, paused_host, events, options, game_started):
        """Test the pause screen path end to end."""
        now = game_started + timedelta(hours=20)
        forced_exit = ForcedExitMod(paused_host, events, options, SessionClock(game_started), now=lambda: now)
        forced_exit.on_load(read_options=False)

        assert forced_exit.check_forced_exit() == ElapsedTimeTrigger(12)
        assert paused_host.calls == [f"start_delayed:{POST_SAVE_DELAY}"]

        paused_host.run_ticks(POST_SAVE_DELAY)
        assert paused_host.calls[1:] == ["deactivate_pause", "start_delayed:10"]

        paused_host.run_ticks(10)
        _, on_closed = paused_host.dialogs[0]
        on_closed("close")

        assert paused_host.quit_requested is True

    def test_exit_now_without_trigger(self, mod, host):
        """Test that exit_now ignores a missing trigger."""
        mod.exit_now(None)
        assert host.calls == []


class TestIngameClock:
    """Tests for the meter bar clock."""

    def test_clock_disabled_adds_nothing(self, mod, events):
        """Test that the clock is only created when enabled."""
        meter = MeterScreen(800)
        events.fire(METER_SCREEN_INIT, meter_screen=meter)
        assert meter.widgets == []
        assert mod.clock_widget is None

    def test_clock_lifecycle(self, mod, events, options, clock, game_started):
        """Test create, refresh and teardown of the clock widget."""
        options.ingame_clock_enabled = True
        options.clock_format = ClockFormat.TWENTY_FOUR_HOUR
        meter = MeterScreen(800)

        events.fire(METER_SCREEN_INIT, meter_screen=meter)
        assert meter.widgets == [mod.clock_widget]
        assert mod.clock_widget.text == "9:30"

        clock.current = game_started + timedelta(hours=5, minutes=5)
        events.fire(METER_SCREEN_REFRESH, meter_screen=meter)
        assert mod.clock_widget.text == "14:35"
        assert mod.clock_widget.tooltip_lines == ["Played for 5.1 of 12 hours"]

        events.fire(METER_SCREEN_DESTROYED, meter_screen=meter)
        assert meter.widgets == []
        assert mod.clock_widget is None

    def test_refresh_follows_format_change(self, mod, events, options):
        """Test that a changed clock format shows up on the next refresh."""
        options.ingame_clock_enabled = True
        options.clock_format = ClockFormat.TWENTY_FOUR_HOUR
        meter = MeterScreen(800)
        events.fire(METER_SCREEN_INIT, meter_screen=meter)

        options.clock_format = ClockFormat.TWELVE_HOUR
        events.fire(METER_SCREEN_REFRESH, meter_screen=meter)

        assert mod.clock_widget.text == "9:30 AM"

    def test_refresh_without_widget(self, mod, events):
        """Test that refresh is harmless when the clock is off."""
        events.fire(METER_SCREEN_REFRESH, meter_screen=MeterScreen(800))
        assert mod.clock_widget is None
