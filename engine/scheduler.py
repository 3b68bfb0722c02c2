"""
Deferred callbacks for the turn engine.

The engine never sleeps. Every delay (countdown tick, notice revert,
pause after a timeout) is a callback handed to a Scheduler, which
calls back into the engine later on the same thread.
"""

import heapq
import itertools
from typing import Callable, Dict, List, Tuple


class Scheduler:
    """
    Interface for one-shot deferred callbacks.

    Implementations must call callbacks on the thread that owns the engine.
    """

    def schedule(self, delay_ms: int, callback: Callable[[], None]):
        """
        Run callback once after delay_ms milliseconds.

        Returns:
            A handle that can be passed to cancel().
        """
        raise NotImplementedError

    def cancel(self, handle) -> None:
        """Cancel a pending callback. Unknown or already-fired handles are ignored."""
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Scheduler driven by a virtual clock.

    Nothing fires until advance() is called, so tests (and headless runs)
    decide exactly when time passes.
    """

    def __init__(self):
        self.now_ms = 0
        self._counter = itertools.count()
        self._queue: List[Tuple[int, int]] = []
        self._callbacks: Dict[int, Callable[[], None]] = {}

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> int:
        handle = next(self._counter)
        self._callbacks[handle] = callback
        heapq.heappush(self._queue, (self.now_ms + max(0, int(delay_ms)), handle))
        return handle

    def cancel(self, handle) -> None:
        self._callbacks.pop(handle, None)

    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return len(self._callbacks)

    def advance(self, ms: int) -> int:
        """
        Move the clock forward, firing every callback that falls due.

        Callbacks fire in (due time, scheduling order). Callbacks scheduled
        while advancing fire too if they fall due before the new time.

        Returns:
            Number of callbacks fired.
        """
        target = self.now_ms + ms
        fired = 0

        while self._queue and self._queue[0][0] <= target:
            due, handle = heapq.heappop(self._queue)
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue  # cancelled
            self.now_ms = due
            callback()
            fired += 1

        self.now_ms = target
        return fired
