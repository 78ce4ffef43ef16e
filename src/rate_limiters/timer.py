"""Elapsed-time sources consumed by the filters.

The caller owns the clock choice: pass any object exposing
`seconds_elapsed()`, `reset()` and `reset_and_start()`. The default is a
`Stopwatch` on `time.monotonic`.
"""

import time
from typing import Callable, Optional, Protocol


class ElapsedTimeSource(Protocol):
    """Monotonic stopwatch measuring seconds since the last reset."""

    def seconds_elapsed(self) -> float:
        ...

    def reset(self) -> None:
        ...

    def reset_and_start(self) -> None:
        ...


class Stopwatch:
    """Stopwatch on top of a monotonic clock.

    A new stopwatch is stopped and reads 0.0 until `reset_and_start` is
    called. `reset` moves the baseline to "now" without starting a
    stopped stopwatch.

    Args:
        clock: Callable returning monotonic seconds. Defaults to
            `time.monotonic`; tests inject a fake clock here.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._start: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._start is not None

    def seconds_elapsed(self) -> float:
        if self._start is None:
            return 0.0
        # Clamp against clocks that step backwards between samples.
        return max(0.0, self._clock() - self._start)

    def reset(self) -> None:
        if self._start is not None:
            self._start = self._clock()

    def reset_and_start(self) -> None:
        self._start = self._clock()


class ManualClock:
    """Clock that only moves when advanced.

    Pass it as `Stopwatch(clock=...)` to replay a control loop at a fixed
    period without waiting on wall time (demos, tests, offline analysis).
    """

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now
