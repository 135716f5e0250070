"""Recurring timers with explicit cancellation handles.

``Scheduler.call_repeatedly`` arms a recurring callback and returns a
``CancelFn``. Cancelling is synchronous, idempotent and final: once the
returned function has been called the callback never runs again, including a
tick that was already due in the same :meth:`PollingScheduler.poll` pass.

Two hosts are provided:

* :class:`PollingScheduler` for hosts that own their loop and call
  :meth:`~PollingScheduler.poll` (the Streamlit fragment, and tests with a
  fake clock).
* :class:`AsyncioScheduler` for an ``asyncio`` event loop.
"""

import asyncio
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

from glyph_mask.types import CancelFn, Clock


logger = logging.getLogger(__name__)

Callback = Callable[[], None]


def wall_clock_ms() -> float:
    """Milliseconds since the epoch."""
    return time.time() * 1000.0


class Scheduler(Protocol):
    def call_repeatedly(self, interval_ms: float, callback: Callback) -> CancelFn: ...


def _check_interval(interval_ms: float) -> None:
    if interval_ms <= 0:
        raise ValueError(f"Timer interval must be positive, got {interval_ms}")


@dataclass
class _Timer:
    interval_ms: float
    callback: Callback
    next_due_ms: float


class PollingScheduler:
    """Single-threaded scheduler driven by explicit :meth:`poll` calls.

    Each poll fires every due timer at most once; a timer that fell several
    intervals behind is moved to its next boundary after ``now`` instead of
    firing a burst of catch-up ticks.
    """

    def __init__(self, clock: Clock = wall_clock_ms):
        self.clock = clock
        self._timers: Dict[int, _Timer] = {}
        self._next_id = 0

    @property
    def active_count(self) -> int:
        """Number of timers still armed."""
        return len(self._timers)

    def call_repeatedly(self, interval_ms: float, callback: Callback) -> CancelFn:
        _check_interval(interval_ms)
        timer_id = self._next_id
        self._next_id += 1
        self._timers[timer_id] = _Timer(
            interval_ms=interval_ms,
            callback=callback,
            next_due_ms=self.clock() + interval_ms,
        )

        def cancel() -> None:
            self._timers.pop(timer_id, None)

        return cancel

    def poll(self) -> int:
        """Fire due timers; return how many callbacks ran."""
        now = self.clock()
        fired = 0
        for timer_id in sorted(self._timers):
            # A callback earlier in this pass may have cancelled this timer.
            timer = self._timers.get(timer_id)
            if timer is None or now < timer.next_due_ms:
                continue
            missed = math.floor((now - timer.next_due_ms) / timer.interval_ms)
            timer.next_due_ms += (missed + 1) * timer.interval_ms
            try:
                timer.callback()
            except Exception:
                logger.warning("Timer %d callback raised", timer_id, exc_info=True)
                raise
            fired += 1
        return fired

    def cancel_all(self) -> None:
        self._timers.clear()


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later``; re-arms after each tick.

    Without an explicit ``loop`` it must be constructed from inside a running
    event loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop or asyncio.get_running_loop()

    def call_repeatedly(self, interval_ms: float, callback: Callback) -> CancelFn:
        _check_interval(interval_ms)
        delay = interval_ms / 1000.0
        handle: Optional[asyncio.TimerHandle] = None
        cancelled = False

        def tick() -> None:
            nonlocal handle
            if cancelled:
                return
            handle = self.loop.call_later(delay, tick)
            try:
                callback()
            except Exception:
                logger.warning("Timer callback raised", exc_info=True)
                raise

        def cancel() -> None:
            nonlocal cancelled
            cancelled = True
            if handle is not None:
                handle.cancel()

        handle = self.loop.call_later(delay, tick)
        return cancel
