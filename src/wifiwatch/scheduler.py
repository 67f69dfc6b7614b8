"""Cycle pacing for the watchdog loop."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

__all__ = ["Scheduler", "IntervalScheduler"]


class Scheduler(ABC):
    """Decides when the next watchdog cycle starts."""

    @abstractmethod
    def wait_next(self) -> None:
        """Block until the next cycle is due."""


class IntervalScheduler(Scheduler):
    """
    Fixed delay between the end of one cycle and the start of the next.

    A slow cycle pushes the next one back rather than overlapping it. The
    delay is slept in slices of at most one second so that a shutdown
    request (``should_continue`` returning False) is noticed quickly.
    """

    def __init__(
        self,
        interval: float,
        should_continue: Callable[[], bool] = lambda: True,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.interval = interval
        self.should_continue = should_continue
        self._sleep = sleep

    def wait_next(self) -> None:
        remaining = self.interval
        while remaining > 0 and self.should_continue():
            step = min(1.0, remaining)
            self._sleep(step)
            remaining -= step
