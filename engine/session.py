"""
Session start time, captured once when the process starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SessionClock:
    game_started: datetime = field(default_factory=datetime.now)


# Baseline for elapsed play time
SESSION = SessionClock()
