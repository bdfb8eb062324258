"""Fixed-rate scheduler — calls registered tickables on a steady interval.

Synchronous and single-threaded: every tickable runs on the caller's thread,
one after another. A tickable that reports ``cancelled`` is dropped and never
called again.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class Tickable(Protocol):
    @property
    def cancelled(self) -> bool: ...

    def run(self) -> None: ...


class FixedRateScheduler:
    def __init__(
        self,
        interval_seconds: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("Scheduler interval must be positive.")
        self.interval_seconds = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._tasks: list[Tickable] = []

    @property
    def tasks(self) -> list[Tickable]:
        return list(self._tasks)

    def schedule(self, task: Tickable) -> None:
        if task not in self._tasks:
            self._tasks.append(task)
            logger.debug("Scheduled %s every %.2f s.", type(task).__name__, self.interval_seconds)

    def unschedule(self, task: Tickable) -> None:
        if task in self._tasks:
            self._tasks.remove(task)

    def tick(self) -> None:
        """Run every live task once, then drop any that cancelled themselves."""
        for task in list(self._tasks):
            if task.cancelled:
                continue
            try:
                task.run()
            except Exception:
                logger.exception("Exception in scheduled task %s", type(task).__name__)
        for task in [t for t in self._tasks if t.cancelled]:
            logger.info("%s cancelled, removing it from the scheduler.", type(task).__name__)
            self._tasks.remove(task)

    def run(self, max_ticks: int | None = None) -> int:
        """Tick until no tasks remain (or *max_ticks* is reached). Returns ticks run."""
        ticks = 0
        next_at = self._clock()
        while self._tasks and (max_ticks is None or ticks < max_ticks):
            self.tick()
            ticks += 1
            next_at += self.interval_seconds
            delay = next_at - self._clock()
            if delay > 0 and self._tasks and (max_ticks is None or ticks < max_ticks):
                self._sleep(delay)
        return ticks
