"""
Host lifecycle events.

The host fires named events; the mod registers plain handler functions
against them. Handlers run synchronously in registration order.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from engine.error_handler import logger

# Event names fired by the host
MOD_LOAD = "mod_load"
SAVE_COMPLETED = "save_completed"
METER_SCREEN_INIT = "meter_screen_init"
METER_SCREEN_DESTROYED = "meter_screen_destroyed"
METER_SCREEN_REFRESH = "meter_screen_refresh"

Handler = Callable[..., None]


class HostEvents:
    """Registry mapping event names to their handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, event: str, handler: Handler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers(self, event: str) -> List[Handler]:
        return list(self._handlers.get(event, []))

    def fire(self, event: str, **payload: Any) -> int:
        """
        Call every handler for `event` with the given keyword payload.

        A failing handler is logged and its exception propagates; handlers
        after it do not run.

        Returns:
            Number of handlers called.
        """
        called = 0
        for handler in self.handlers(event):
            try:
                handler(**payload)
            except Exception:
                logger.exception(f"Handler {getattr(handler, '__name__', handler)!r} failed for {event}")
                raise
            called += 1
        return called
