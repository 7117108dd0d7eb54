"""Cooperative timer queue for the TUI event loop.

The loop polls for input with a short timeout and calls ``run_due()`` on
every iteration, so callbacks always run on the loop thread, between
events, never in the middle of one.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class ScheduledTask:
    """Handle for a callback scheduled on a Scheduler."""

    __slots__ = ("due", "callback", "name", "_cancelled", "_done")

    def __init__(self, due: float, callback: Callable[[], None], name: str = "") -> None:
        self.due = due
        self.callback = callback
        self.name = name
        self._cancelled = False
        self._done = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._done)

    def cancel(self) -> bool:
        """Cancel the task. Returns False if it already ran or was cancelled."""
        if not self.pending:
            return False
        self._cancelled = True
        return True

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "done" if self._done else "pending"
        return f"<ScheduledTask {self.name or self.callback!r} due={self.due:.3f} {state}>"


class Scheduler:
    """Min-heap of ScheduledTasks ordered by due time on a monotonic clock."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._heap: list[tuple[float, int, ScheduledTask]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay_s: float, callback: Callable[[], None], *, name: str = "") -> ScheduledTask:
        """Schedule ``callback`` to run ``delay_s`` seconds from now."""
        task = ScheduledTask(self._clock() + max(0.0, delay_s), callback, name)
        heapq.heappush(self._heap, (task.due, next(self._seq), task))
        logger.debug("Scheduled %s in %.3fs", name or callback, delay_s)
        return task

    def _discard_cancelled(self) -> None:
        while self._heap and not self._heap[0][2].pending:
            heapq.heappop(self._heap)

    def next_delay(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds until the next pending task is due, or None if nothing is scheduled."""
        self._discard_cancelled()
        if not self._heap:
            return None
        current = self._clock() if now is None else now
        return max(0.0, self._heap[0][0] - current)

    def run_due(self, now: Optional[float] = None) -> int:
        """Run every pending task whose due time has passed.

        Tasks scheduled by a callback are not run in the same pass, even if
        they are already due.

        Returns:
            Number of callbacks executed
        """
        current = self._clock() if now is None else now
        due: list[ScheduledTask] = []
        while self._heap and self._heap[0][0] <= current:
            _, _, task = heapq.heappop(self._heap)
            if task.pending:
                due.append(task)

        ran = 0
        for task in due:
            # An earlier callback in this pass may have cancelled it.
            if not task.pending:
                continue
            task._done = True
            task.callback()
            ran += 1
        return ran

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, task in self._heap if task.pending)
