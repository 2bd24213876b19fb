# systems/clock_format.py

from __future__ import annotations

import locale
import re
from datetime import datetime
from typing import List

from engine.config import ClockFormat, ModOptions
from engine.error_handler import InvalidClockFormatError, logger


def use_system_locale() -> str:
    """
    Switch LC_TIME to the user's locale so FOLLOW_LOCALE matches the OS.

    Python starts in the "C" locale; without this every locale pattern is
    the C one. Returns the LC_TIME setting now in effect.
    """
    try:
        return locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not adopt the system time locale ({e}); times use the C locale")
        return locale.setlocale(locale.LC_TIME)


def locale_short_time(time: datetime) -> str:
    """
    Render a time the way the current locale writes short times.

    Uses the locale's time pattern with the seconds field dropped. Platforms
    without nl_langinfo (Windows) render "%X" and cut the seconds out of
    the result.
    """
    if hasattr(locale, "nl_langinfo"):
        locale_pattern = locale.nl_langinfo(locale.T_FMT)
        if locale_pattern:
            pattern = re.sub(r"[:.]?%S", "", locale_pattern.replace("%T", "%H:%M").replace("%r", "%I:%M %p"))
            return time.strftime(pattern)

    # Seconds are the last two-digit field behind a separator
    rendered = time.strftime("%X")
    return re.sub(rf"[:.]{time.second:02d}(?=\D*$)", "", rendered, count=1)


def format_time(time: datetime, fmt: ClockFormat) -> str:
    """
    Format a time for the clock readout.

    TWENTY_FOUR_HOUR gives "14:05", TWELVE_HOUR gives "2:05 PM"; the hour
    is never zero-padded.
    """
    if fmt == ClockFormat.FOLLOW_LOCALE:
        return locale_short_time(time)
    if fmt == ClockFormat.TWENTY_FOUR_HOUR:
        return f"{time.hour}:{time.minute:02d}"
    if fmt == ClockFormat.TWELVE_HOUR:
        hour = time.hour % 12 or 12
        suffix = "AM" if time.hour < 12 else "PM"
        return f"{hour}:{time.minute:02d} {suffix}"
    raise InvalidClockFormatError(f"Unknown clock format: {fmt!r}")


def hours_played(now: datetime, game_started: datetime) -> float:
    return (now - game_started).total_seconds() / 3600.0


def build_tooltip_lines(
    settings: ModOptions,
    now: datetime,
    game_started: datetime,
) -> List[str]:
    """
    Tooltip text for the in-game clock.

    One line for the play time (with the limit when exit-after is on),
    plus the exit hour when exit-at is on.
    """
    played = hours_played(now, game_started)
    lines: List[str] = []

    if settings.exit_after_enabled:
        lines.append(f"Played for {played:.1f} of {settings.exit_after_hours} hours")
    else:
        lines.append(f"Played for {played:.1f} hours")

    if settings.exit_at_enabled:
        exit_at = now.replace(hour=settings.exit_at_hour, minute=0, second=0, microsecond=0)
        lines.append(f"Will exit at {format_time(exit_at, settings.clock_format)}")

    return lines
