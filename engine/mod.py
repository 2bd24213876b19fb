"""
Forced exit mod entry point.

Subscribes to host lifecycle events:
- save_completed: run the forced exit check, delay the exit sequence
- meter_screen_init / meter_screen_destroyed: add / remove the clock
- meter_screen_refresh: update the clock text and tooltip
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from engine.config import ModOptions, get_config
from engine.error_handler import logger
from engine.events import (
    HostEvents,
    MOD_LOAD,
    METER_SCREEN_DESTROYED,
    METER_SCREEN_INIT,
    METER_SCREEN_REFRESH,
    SAVE_COMPLETED,
)
from engine.session import SESSION, SessionClock
from systems import exit_sequencer
from systems.clock_format import build_tooltip_lines, format_time
from systems.exit_policy import TriggerResult, evaluate
from telemetry.logger import telemetry
from ui.clock_widget import ClockWidget

if TYPE_CHECKING:
    from engine.host import Host
    from ui.meter_screen import MeterScreen


# Ticks between a save that triggers and the start of the exit sequence
POST_SAVE_DELAY = 10


class ForcedExitMod:
    def __init__(
        self,
        host: "Host",
        events: HostEvents,
        options: Optional[ModOptions] = None,
        session: SessionClock = SESSION,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.host = host
        self.events = events
        self.options = options or get_config()
        self.session = session
        self.now = now
        self.clock_widget: Optional[ClockWidget] = None

    def on_load(self, read_options: bool = True) -> None:
        """Read the options file and hook into the host events."""
        if read_options:
            self.options.load()
        self.events.subscribe(SAVE_COMPLETED, self.on_save_completed)
        self.events.subscribe(METER_SCREEN_INIT, self.on_meter_screen_init)
        self.events.subscribe(METER_SCREEN_DESTROYED, self.on_meter_screen_destroyed)
        self.events.subscribe(METER_SCREEN_REFRESH, self.on_meter_screen_refresh)
        self.events.fire(MOD_LOAD, mod=self)
        logger.info(f"Forced exit loaded, session started {self.session.game_started:%Y-%m-%d %H:%M:%S}")

    # ------------------------------------------------------------------
    # Forced exit
    # ------------------------------------------------------------------

    def on_save_completed(self, **_payload) -> None:
        self.check_forced_exit()

    def check_forced_exit(self) -> TriggerResult:
        """
        Evaluate the exit policy now; if it fires, start the exit sequence
        POST_SAVE_DELAY ticks later.
        """
        trigger = evaluate(
            self.now(),
            self.session.game_started,
            self.options,
            time_label=self.host.format_locale_time,
        )
        if trigger is not None:
            self.host.start_delayed(POST_SAVE_DELAY, lambda: self.exit_now(trigger))
        return trigger

    def exit_now(self, trigger: TriggerResult) -> None:
        # Pause state is read when the sequence starts, not at save time
        action = exit_sequencer.sequence(trigger, self.host.is_pause_active())
        if action is None:
            return
        telemetry.log("exit_triggered", trigger=type(trigger).__name__, message=action.message)
        exit_sequencer.execute(action, self.host)

    # ------------------------------------------------------------------
    # In-game clock
    # ------------------------------------------------------------------

    def on_meter_screen_init(self, meter_screen: "MeterScreen", **_payload) -> None:
        if not self.options.ingame_clock_enabled:
            return
        self.clock_widget = ClockWidget()
        meter_screen.add_widget(self.clock_widget)
        self.refresh_clock()

    def on_meter_screen_destroyed(self, meter_screen: "MeterScreen", **_payload) -> None:
        if self.clock_widget is None:
            return
        meter_screen.remove_widget(self.clock_widget)
        self.clock_widget = None

    def on_meter_screen_refresh(self, meter_screen: "MeterScreen", **_payload) -> None:
        self.refresh_clock()

    def refresh_clock(self) -> None:
        if self.clock_widget is None:
            return
        now = self.now()
        self.clock_widget.set_text(
            format_time(now, self.options.clock_format),
            build_tooltip_lines(self.options, now, self.session.game_started),
        )
