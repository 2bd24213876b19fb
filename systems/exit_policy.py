# systems/exit_policy.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

from engine.config import ModOptions
from systems.clock_format import locale_short_time


@dataclass(frozen=True)
class ElapsedTimeTrigger:
    """The session has run longer than the configured number of hours."""

    hours_played: int


@dataclass(frozen=True)
class TimeOfDayTrigger:
    """The wall clock is inside the configured exit hour."""

    current_time_label: str


TriggerResult = Optional[Union[ElapsedTimeTrigger, TimeOfDayTrigger]]


def evaluate(
    now: datetime,
    game_started: datetime,
    settings: ModOptions,
    time_label: Callable[[datetime], str] = locale_short_time,
) -> TriggerResult:
    """
    Decide whether the game should be forced to exit.

    Exit-after is checked first; if it fires, exit-at is not looked at.
    The elapsed comparison is strict, so the exact boundary instant does
    not trigger yet. Exit-at matches the whole hour and fires again on
    every call during that hour.

    Args:
        now: Current wall-clock time
        game_started: Session start timestamp
        settings: Current mod options
        time_label: Formats `now` for the time-of-day message

    Returns:
        ElapsedTimeTrigger, TimeOfDayTrigger or None
    """
    if settings.exit_after_enabled:
        exit_time = game_started + timedelta(hours=settings.exit_after_hours)
        if now > exit_time:
            return ElapsedTimeTrigger(settings.exit_after_hours)

    if settings.exit_at_enabled and now.hour == settings.exit_at_hour:
        return TimeOfDayTrigger(time_label(now))

    return None
