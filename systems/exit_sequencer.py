# systems/exit_sequencer.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from engine.error_handler import logger
from systems.exit_policy import ElapsedTimeTrigger, TimeOfDayTrigger, TriggerResult

if TYPE_CHECKING:
    from engine.host import Host


DIALOG_TITLE = "Forced Exit"
SAVED_NOTICE = "The game is now going to quit. Your game has been saved."
CONFIRM_KEY = "close"
CONFIRM_LABEL = "OK"

# Ticks to wait after closing the pause screen before the dialog opens
PAUSE_DISMISS_DELAY = 10


@dataclass
class DialogRequest:
    """Everything the host needs to build the exit dialog."""

    title: str
    body_lines: List[str]
    buttons: List[Tuple[str, str]] = field(default_factory=lambda: [(CONFIRM_KEY, CONFIRM_LABEL)])


@dataclass
class ExitAction:
    message: str
    dismiss_pause: bool
    delay_ticks: int
    dialog: DialogRequest


def render_message(trigger: TriggerResult) -> str:
    if isinstance(trigger, ElapsedTimeTrigger):
        return f"You have played for {trigger.hours_played} hours."
    if isinstance(trigger, TimeOfDayTrigger):
        return f"It is now {trigger.current_time_label}."
    raise TypeError(f"Not an exit trigger: {trigger!r}")


def sequence(trigger: TriggerResult, is_pause_active: bool) -> Optional[ExitAction]:
    """
    Turn a trigger into the steps that show the exit dialog.

    Returns None when there is nothing to do.
    """
    if trigger is None:
        return None

    message = render_message(trigger)
    return ExitAction(
        message=message,
        dismiss_pause=is_pause_active,
        delay_ticks=PAUSE_DISMISS_DELAY if is_pause_active else 0,
        dialog=DialogRequest(title=DIALOG_TITLE, body_lines=[message, SAVED_NOTICE]),
    )


def execute(action: ExitAction, host: "Host") -> None:
    """
    Run an ExitAction against the host.

    Suspends the simulation, shows the dialog and quits once the player
    closes it. None of this can be undone.
    """
    logger.debug("Play time exceeded; game is being forcibly quit.")

    def show_dialog() -> None:
        host.suspend_simulation()
        host.show_dialog(action.dialog, lambda _key: host.quit())

    if action.dismiss_pause:
        host.deactivate_pause()
        host.start_delayed(action.delay_ticks, show_dialog)
    else:
        show_dialog()
