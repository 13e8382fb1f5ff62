"""A monotonic clock reading and a simple throughput timer."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from stormkit.time.convert import NANOS_PER_SEC

_log = logging.getLogger(__name__)


def now() -> int:
    """The current reading of a monotonic clock, in nanoseconds."""
    return time.perf_counter_ns()


@dataclass(frozen=True)
class TimerReport:
    """Statistics for one reporting period of a timer."""

    label: str
    invocations: int
    max_tps: int
    average_ns: float


class Timer:
    """Measures start/stop spans and reports an average about once per second."""

    def __init__(self, label: str, clock: Callable[[], int] = now) -> None:
        self.label = label
        self._clock = clock
        self._start = clock()
        self._last_display = clock()
        self.duration_ns = 0
        self.invocations = 0

    def start(self) -> None:
        """Begin a measured span."""
        self._start = self._clock()

    def stop(self) -> TimerReport | None:
        """End a span; returns a report when more than a second has passed since the last one."""
        current = self._clock()
        self.duration_ns += current - self._start
        self.invocations += 1
        if current - self._last_display <= NANOS_PER_SEC:
            return None
        self._last_display = current
        average = self.duration_ns / self.invocations
        max_tps = NANOS_PER_SEC // max(int(average), 1)
        report = TimerReport(self.label, self.invocations, max_tps, average)
        _log.debug(
            "%16s: %4d / %7d tps | %7.0f ns", self.label, self.invocations, max_tps, average
        )
        self.duration_ns = 0
        self.invocations = 0
        return report