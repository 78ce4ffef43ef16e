"""Stateful rate limiting filters.

A rate limiter limits the rate of change of some value. This is useful for
voltage ramps, velocity ramps and the like. For controlling position, use a
trapezoid profile instead.

Both filters have memory: use a separate instance for every input stream,
and do not share an instance between threads.
"""

import logging
from typing import Optional

from .config import RateLimiterConfiguration
from .core import (
    rate_limited_change,
    slew_limited_output,
    slew_rate_of_change,
    validate_negative_rate_limit,
    validate_positive_rate_limit,
)
from .timer import ElapsedTimeSource, Stopwatch

logger = logging.getLogger(__name__)


class _RateLimitedFilter:
    """Rate limits, baseline input and owned stopwatch shared by both filters."""

    def __init__(
        self,
        positive_rate_limit: float,
        negative_rate_limit: float,
        timer: Optional[ElapsedTimeSource] = None,
    ):
        self._positive_rate_limit = validate_positive_rate_limit(positive_rate_limit)
        self._negative_rate_limit = validate_negative_rate_limit(negative_rate_limit)
        self._timer = timer if timer is not None else Stopwatch()
        self._previous_input: Optional[float] = None

    @classmethod
    def from_config(
        cls,
        config: RateLimiterConfiguration,
        timer: Optional[ElapsedTimeSource] = None,
    ) -> "_RateLimitedFilter":
        return cls(config.positive_rate_limit, config.negative_rate_limit, timer=timer)

    @property
    def positive_rate_limit(self) -> float:
        """Rate-of-change limit in the positive direction, units/s (> 0)."""
        return self._positive_rate_limit

    @positive_rate_limit.setter
    def positive_rate_limit(self, value: float) -> None:
        self._positive_rate_limit = validate_positive_rate_limit(value)
        logger.debug("%s: positive_rate_limit=%s", type(self).__name__, value)

    @property
    def negative_rate_limit(self) -> float:
        """Rate-of-change limit in the negative direction, units/s (< 0)."""
        return self._negative_rate_limit

    @negative_rate_limit.setter
    def negative_rate_limit(self, value: float) -> None:
        self._negative_rate_limit = validate_negative_rate_limit(value)
        logger.debug("%s: negative_rate_limit=%s", type(self).__name__, value)

    def set_positive_rate_limit(self, value: float) -> None:
        self.positive_rate_limit = value

    def set_negative_rate_limit(self, value: float) -> None:
        self.negative_rate_limit = value

    @property
    def initialized(self) -> bool:
        """True once a baseline exists (first `calculate` or any `reset`)."""
        return self._previous_input is not None

    @property
    def previous_input(self) -> Optional[float]:
        return self._previous_input

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(positive_rate_limit={self._positive_rate_limit!r}, "
            f"negative_rate_limit={self._negative_rate_limit!r})"
        )


class RateLimiter(_RateLimitedFilter):
    """Integrating rate limiter.

    The output accumulates the input's changes, each one bounded by the
    rate limits times the time since the previous call. The output never
    jumps. A held input adds nothing, so an offset built up while the
    input moved faster than the limits is kept until `reset`.

    Usage:
        limiter = RateLimiter(positive_rate_limit=12.0, negative_rate_limit=-12.0)

        # In the control loop:
        voltage = limiter.calculate(requested_voltage)
    """

    def __init__(
        self,
        positive_rate_limit: float,
        negative_rate_limit: float,
        timer: Optional[ElapsedTimeSource] = None,
    ):
        """
        Args:
            positive_rate_limit: Rate-of-change limit in the positive
                direction, in units per second. Must be > 0.
            negative_rate_limit: Rate-of-change limit in the negative
                direction, in units per second. Must be < 0.
            timer: Elapsed-time source owned by this filter. Defaults to a
                new monotonic `Stopwatch`.

        Raises:
            ConfigurationError: If either limit has the wrong sign.
        """
        super().__init__(positive_rate_limit, negative_rate_limit, timer)
        self._output = 0.0

    @property
    def output(self) -> float:
        """Last integrated output (0.0 before the first baseline)."""
        return self._output

    def calculate(self, value: float) -> float:
        """Return the rate-limited output for `value`.

        Call this periodically. The first call takes `value` as the baseline.
        """
        if self._previous_input is None:
            self.reset(value)

        seconds_since_last_call = self._timer.seconds_elapsed()
        self._timer.reset()

        change_in_input = value - self._previous_input
        self._previous_input = value

        self._output += rate_limited_change(
            change_in_input,
            seconds_since_last_call,
            self._positive_rate_limit,
            self._negative_rate_limit,
        )
        return self._output

    def reset(self, new_value: float) -> None:
        """Jump to `new_value`, ignoring the rate limits, and restart timing."""
        self._previous_input = new_value
        self._output = new_value
        self._timer.reset_and_start()
        logger.debug("RateLimiter: reset to %s", new_value)


class SlewRateLimiter(_RateLimitedFilter):
    """Slew rate limiter.

    Passes the input through while its instantaneous rate of change is
    within the limits. Out of bounds, the input value is clamped against
    `rate_limit * seconds_elapsed`.

    Note the clamp target is a value, not a change relative to the
    previous input, so this filter does not behave like `RateLimiter`
    once a limit is hit.
    """

    def calculate(self, value: float) -> float:
        """Return the slew-limited output for `value`.

        Call this periodically. The first call takes `value` as the baseline
        and returns it unchanged.
        """
        if self._previous_input is None:
            self.reset(value)

        # The stopwatch is read here and reset only after the output is known.
        seconds_elapsed = self._timer.seconds_elapsed()
        rate_of_change = slew_rate_of_change(value - self._previous_input, seconds_elapsed)

        output = slew_limited_output(
            value,
            rate_of_change,
            seconds_elapsed,
            self._positive_rate_limit,
            self._negative_rate_limit,
        )
        self._previous_input = value
        self._timer.reset()
        return output

    def reset(self, new_value: float) -> None:
        """Take `new_value` as the baseline, ignoring the rate limits."""
        self._previous_input = new_value
        self._timer.reset_and_start()
        logger.debug("SlewRateLimiter: reset to %s", new_value)
