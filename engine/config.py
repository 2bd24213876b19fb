"""
Mod options: the single settings record for the forced exit mod.

Values are persisted as JSON using the same keys the options screen shows
(ExitAfterMode, ExitAfter, ExitAtMode, ExitAt, ClockFormat, IngameClock).
"""

import json
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Tuple

from engine.error_handler import logger, log_error, ConfigError

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_DIR.mkdir(exist_ok=True)
CONFIG_FILE = CONFIG_DIR / "forced_exit.json"

# Inclusive (min, max) limits enforced by the options screen
EXIT_AFTER_LIMITS: Tuple[int, int] = (0, 48)
EXIT_AT_LIMITS: Tuple[int, int] = (0, 23)


class ClockFormat(str, Enum):
    """How the in-game clock and time labels are rendered."""

    FOLLOW_LOCALE = "FollowLocale"
    TWENTY_FOUR_HOUR = "TwentyFourHour"
    TWELVE_HOUR = "TwelveHour"


def _clamp(value: Any, limits: Tuple[int, int], default: int) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    low, high = limits
    return max(low, min(high, value))


class ModOptions:
    """Manages the forced exit options."""

    def __init__(self) -> None:
        self.exit_after_enabled: bool = True
        self.exit_after_hours: int = 12
        self.exit_at_enabled: bool = False
        self.exit_at_hour: int = 0
        self.clock_format: ClockFormat = ClockFormat.FOLLOW_LOCALE
        self.ingame_clock_enabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary for saving."""
        return {
            "ExitAfterMode": self.exit_after_enabled,
            "ExitAfter": self.exit_after_hours,
            "ExitAtMode": self.exit_at_enabled,
            "ExitAt": self.exit_at_hour,
            "ClockFormat": self.clock_format.value,
            "IngameClock": self.ingame_clock_enabled,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Load options from dictionary, clamping hand-edited values."""
        self.exit_after_enabled = bool(data.get("ExitAfterMode", True))
        self.exit_after_hours = _clamp(data.get("ExitAfter", 12), EXIT_AFTER_LIMITS, 12)
        self.exit_at_enabled = bool(data.get("ExitAtMode", False))
        self.exit_at_hour = _clamp(data.get("ExitAt", 0), EXIT_AT_LIMITS, 0)
        self.ingame_clock_enabled = bool(data.get("IngameClock", False))

        raw_format = data.get("ClockFormat", ClockFormat.FOLLOW_LOCALE.value)
        try:
            self.clock_format = ClockFormat(raw_format)
        except ValueError:
            logger.warning(f"Unknown ClockFormat {raw_format!r} in options file; using FollowLocale")
            self.clock_format = ClockFormat.FOLLOW_LOCALE

    def save(self) -> bool:
        """Save options to file."""
        try:
            with CONFIG_FILE.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            log_error(ConfigError(str(e)), "options_save")
            return False

    def load(self) -> bool:
        """Load options from file."""
        if not CONFIG_FILE.exists():
            return False

        try:
            with CONFIG_FILE.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log_error(ConfigError(str(e)), "options_load")
            return False

        if not isinstance(data, dict):
            logger.warning(f"Ignoring options file {CONFIG_FILE}: expected an object")
            return False

        self.from_dict(data)
        return True


# Global options instance
_config = ModOptions()


def get_config() -> ModOptions:
    """Get the global options instance."""
    return _config


def save_config() -> bool:
    """Save the global options."""
    return _config.save()
