"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import locale

import pytest
import pygame
from datetime import datetime
from typing import Callable, Generator, List, Tuple

from engine.scheduler import TickScheduler


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    # Use a small headless surface (no display needed)
    pygame.display.set_mode((800, 600), pygame.HIDDEN)
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def restore_time_locale() -> Generator[None, None, None]:
    """
    Put LC_TIME back after tests that let the host adopt the user locale.
    """
    saved = locale.setlocale(locale.LC_TIME)
    yield
    locale.setlocale(locale.LC_TIME, saved)


@pytest.fixture
def sample_screen() -> pygame.Surface:
    """
    Create a sample pygame surface for tests that need a screen.
    """
    return pygame.Surface((800, 600))


@pytest.fixture
def options():
    """
    Default mod options (exit after 12 hours, exit-at off, clock off).
    """
    from engine.config import ModOptions
    return ModOptions()


@pytest.fixture
def game_started() -> datetime:
    """
    A fixed session start: 2024-03-01 09:30.
    """
    return datetime(2024, 3, 1, 9, 30, 0)


class RecordingHost:
    """
    Host double that records every service call in order.
    Delayed callbacks go through a real TickScheduler.
    """

    def __init__(self, pause_active: bool = False) -> None:
        self.pause_active = pause_active
        self.scheduler = TickScheduler()
        self.calls: List[str] = []
        self.dialogs: List[Tuple[object, Callable[[str], None]]] = []
        self.simulation_active = True
        self.quit_requested = False

    def is_pause_active(self) -> bool:
        return self.pause_active

    def deactivate_pause(self) -> None:
        self.calls.append("deactivate_pause")
        self.pause_active = False

    def start_delayed(self, ticks, callback) -> None:
        self.calls.append(f"start_delayed:{ticks}")
        self.scheduler.start_delayed(ticks, callback)

    def suspend_simulation(self) -> None:
        self.calls.append("suspend_simulation")
        self.simulation_active = False

    def show_dialog(self, request, on_closed) -> None:
        self.calls.append("show_dialog")
        self.dialogs.append((request, on_closed))

    def quit(self) -> None:
        self.calls.append("quit")
        self.quit_requested = True

    def format_locale_time(self, time: datetime) -> str:
        return time.strftime("%H:%M")

    def run_ticks(self, count: int) -> None:
        for _ in range(count):
            self.scheduler.advance()


@pytest.fixture
def host() -> RecordingHost:
    """
    Recording host with the pause screen closed.
    """
    return RecordingHost()


@pytest.fixture
def paused_host() -> RecordingHost:
    """
    Recording host with the pause screen open.
    """
    return RecordingHost(pause_active=True)


@pytest.fixture
def events():
    """
    Empty host event registry.
    """
    from engine.events import HostEvents
    return HostEvents()
