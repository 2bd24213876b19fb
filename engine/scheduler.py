"""
Delayed callbacks measured in host ticks (one tick per frame).
"""

from __future__ import annotations

from typing import Callable, List, Tuple


class TickScheduler:
    """
    Fire-and-forget delayed calls.

    Callbacks run from advance() once their delay has elapsed, in the
    order they were scheduled. A scheduled call cannot be cancelled.
    """

    def __init__(self) -> None:
        self.tick: int = 0
        self._pending: List[Tuple[int, int, Callable[[], None]]] = []
        self._counter: int = 0

    def start_delayed(self, ticks: int, callback: Callable[[], None]) -> None:
        """Run `callback` after `ticks` more calls to advance()."""
        due = self.tick + max(0, int(ticks))
        self._pending.append((due, self._counter, callback))
        self._counter += 1

    def advance(self) -> int:
        """
        Move forward one tick and run everything now due.

        Returns the number of callbacks run. Callbacks scheduled while this
        runs wait for a later tick even with a zero delay.
        """
        self.tick += 1
        due = sorted(entry for entry in self._pending if entry[0] <= self.tick)
        if not due:
            return 0

        self._pending = [entry for entry in self._pending if entry[0] > self.tick]
        for _, _, callback in due:
            callback()
        return len(due)

    @property
    def pending(self) -> int:
        return len(self._pending)
