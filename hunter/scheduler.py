"""Tick-counted deadline queue.

Replaces fire-and-forget wall-clock timers (sprint cooldown release, HUD
notifications). The world owns one scheduler and advances it once at the
end of every simulation tick, so nothing fires while the game is paused
and timers stay in lockstep with the simulation.

Tasks due on the same tick fire in the order they were scheduled. A task
fires exactly once; tasks scheduled from inside a callback are picked up
on a later ``advance`` even when their delay is zero.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List

from hunter.logger import get_logger

log = get_logger("scheduler")


@dataclass(order=True)
class ScheduledTask:
    due: int
    seq: int
    tag: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False, repr=False)


class TaskScheduler:
    def __init__(self) -> None:
        self.tick = 0
        self._queue: List[ScheduledTask] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    def schedule(self, delay_ticks: int, callback: Callable[[], None], tag: str = "") -> ScheduledTask:
        """Run ``callback`` once, ``delay_ticks`` advances from now (minimum one)."""
        task = ScheduledTask(self.tick + max(1, int(delay_ticks)), next(self._counter), tag, callback)
        heapq.heappush(self._queue, task)
        return task

    def pending(self, tag: str) -> int:
        return sum(1 for t in self._queue if t.tag == tag)

    def advance(self, ticks: int = 1) -> int:
        """Move the clock forward and run every task that became due.

        Returns the number of callbacks executed.
        """
        fired = 0
        for _ in range(ticks):
            self.tick += 1
            due: List[ScheduledTask] = []
            while self._queue and self._queue[0].due <= self.tick:
                due.append(heapq.heappop(self._queue))
            for task in due:
                task.callback()
                fired += 1
        return fired

    def cancel(self, tag: str) -> int:
        kept = [t for t in self._queue if t.tag != tag]
        removed = len(self._queue) - len(kept)
        if removed:
            heapq.heapify(kept)
            self._queue = kept
        return removed

    def clear(self) -> None:
        if self._queue:
            log.debug("Dropping", len(self._queue), "scheduled task(s)")
        self._queue.clear()
