"""
Host services the forced exit mod calls back into.

Host is the contract; PygameHost implements it on top of the demo game
loop (pause screen, tick scheduler, modal dialog, meter bar, saves).
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Protocol

import pygame

from settings import FPS, METER_REFRESH_TICKS
from engine.error_handler import logger
from engine.events import (
    HostEvents,
    METER_SCREEN_DESTROYED,
    METER_SCREEN_INIT,
    METER_SCREEN_REFRESH,
    SAVE_COMPLETED,
)
from engine.game import Game
from engine.scheduler import TickScheduler
from engine.scenes.pause_menu import PauseScreen, ModOptionsScene
from engine.utils.save_system import save_game
from systems.clock_format import locale_short_time, use_system_locale
from systems.exit_sequencer import DialogRequest
from telemetry.logger import telemetry
from ui.exit_dialog import ExitDialog
from ui.meter_screen import MeterScreen


DialogClosed = Callable[[str], None]


class Host(Protocol):
    """Services the mod needs from the game."""

    def is_pause_active(self) -> bool:
        ...

    def deactivate_pause(self) -> None:
        ...

    def start_delayed(self, ticks: int, callback: Callable[[], None]) -> None:
        ...

    def suspend_simulation(self) -> None:
        ...

    def show_dialog(self, request: DialogRequest, on_closed: DialogClosed) -> None:
        ...

    def quit(self) -> None:
        ...

    def format_locale_time(self, time: datetime) -> str:
        ...


class PygameHost:
    """
    The demo game host.

    Owns the window, the simulation, the pause screen and the meter bar,
    and fires lifecycle events the mod subscribes to.

    Keys: Esc pauses, F5 saves, F10 opens the mod options.
    """

    def __init__(self, screen: pygame.Surface, events: Optional[HostEvents] = None) -> None:
        self.screen = screen
        self.events = events or HostEvents()
        self.time_locale = use_system_locale()
        self.scheduler = TickScheduler()
        self.game = Game()
        self.pause_screen = PauseScreen(screen)
        self.meter_screen: Optional[MeterScreen] = None
        self.dialog: Optional[ExitDialog] = None
        self.running: bool = True

    # ------------------------------------------------------------------
    # Host services
    # ------------------------------------------------------------------

    def is_pause_active(self) -> bool:
        return self.pause_screen.is_active()

    def deactivate_pause(self) -> None:
        self.pause_screen.deactivate()

    def start_delayed(self, ticks: int, callback: Callable[[], None]) -> None:
        self.scheduler.start_delayed(ticks, callback)

    def suspend_simulation(self) -> None:
        self.game.active = False

    def show_dialog(self, request: DialogRequest, on_closed: DialogClosed) -> None:
        self.dialog = ExitDialog(request, on_closed)

    def quit(self) -> None:
        logger.info("Host quit requested")
        self.running = False

    def format_locale_time(self, time: datetime) -> str:
        return locale_short_time(time)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open_meter_screen(self) -> None:
        self.meter_screen = MeterScreen(self.screen.get_width())
        self.events.fire(METER_SCREEN_INIT, meter_screen=self.meter_screen)

    def close_meter_screen(self) -> None:
        if self.meter_screen is None:
            return
        self.events.fire(METER_SCREEN_DESTROYED, meter_screen=self.meter_screen)
        self.meter_screen = None

    def save(self, slot: int = 1) -> bool:
        """Write a save and, on success, fire the save completed event."""
        if not save_game(self.game, slot):
            return False
        telemetry.log("save_completed", slot=slot, cycle=self.game.cycle)
        self.events.fire(SAVE_COMPLETED, slot=slot)
        return True

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return

        if self.dialog is not None:
            self.dialog.handle_event(event)
            return

        if event.type != pygame.KEYDOWN:
            return

        if self.pause_screen.is_active():
            choice = self.pause_screen.handle_keydown(event)
            if choice is not None:
                self._apply_pause_choice(choice)
            return

        if event.key == pygame.K_ESCAPE:
            self.pause_screen.activate()
        elif event.key == pygame.K_F5:
            self.save()
        elif event.key == pygame.K_F10:
            ModOptionsScene(self.screen).run()

    def _apply_pause_choice(self, choice: str) -> None:
        if choice == "resume":
            self.pause_screen.deactivate()
        elif choice == "save":
            self.save()
        elif choice == "options":
            ModOptionsScene(self.screen).run()
        elif choice == "quit":
            self.quit()

    def update(self, dt: float) -> None:
        self.scheduler.advance()
        if not self.pause_screen.is_active():
            self.game.update(dt)
        if self.meter_screen is not None:
            if self.scheduler.tick % METER_REFRESH_TICKS == 0:
                self.events.fire(METER_SCREEN_REFRESH, meter_screen=self.meter_screen)
            self.meter_screen.update(dt, pygame.mouse.get_pos())

    def draw(self) -> None:
        self.game.draw(self.screen)
        if self.meter_screen is not None:
            self.meter_screen.draw(self.screen)
        if self.pause_screen.is_active():
            self.pause_screen.draw()
        if self.dialog is not None:
            self.dialog.draw(self.screen)

    def run(self) -> None:
        clock = pygame.time.Clock()
        self.open_meter_screen()

        while self.running:
            dt = clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                self.handle_event(event)

            self.update(dt)
            self.draw()
            pygame.display.flip()

        self.close_meter_screen()
