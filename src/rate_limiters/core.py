"""Pure mathematical functions for rate limiting.

This module contains stateless operations shared by the filters:
- Rate limit validation
- Bounded change per time step (integrating rate limiter)
- Slew rate estimation and value clamping (slew rate limiter)

All functions operate on plain floats, making them easy to test and
reuse independently of any clock.

Date: October 18, 2026
"""

import math

from .errors import ConfigurationError


def validate_positive_rate_limit(value: float) -> float:
    """Return `value` if it is a valid positive rate limit (units/s)."""
    if not value > 0:
        raise ConfigurationError(f"positive_rate_limit must be > 0, got {value!r}")
    return float(value)


def validate_negative_rate_limit(value: float) -> float:
    """Return `value` if it is a valid negative rate limit (units/s)."""
    if not value < 0:
        raise ConfigurationError(f"negative_rate_limit must be < 0, got {value!r}")
    return float(value)


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def rate_limited_change(
    change_in_input: float,
    dt: float,
    positive_rate_limit: float,
    negative_rate_limit: float,
) -> float:
    """Limit a change in input to what the rate limits allow over `dt`.

    The allowed window is:
        [negative_rate_limit * dt, positive_rate_limit * dt]

    Args:
        change_in_input: Difference between the current and previous input.
        dt: Seconds since the previous sample.
        positive_rate_limit: Maximum rate of increase in units/s (> 0).
        negative_rate_limit: Maximum rate of decrease in units/s (< 0).

    Returns:
        The change to add to the integrated output.
    """
    max_change = positive_rate_limit * dt
    min_change = negative_rate_limit * dt
    return clamp(change_in_input, min_change, max_change)


def slew_rate_of_change(change_in_input: float, dt: float) -> float:
    """Instantaneous rate of change, in units/s.

    With `dt == 0` (first sample, or two samples inside the clock
    resolution) the result is +inf/-inf for a non-zero change and nan for
    no change, matching IEEE float division.
    """
    if dt > 0:
        return change_in_input / dt
    if change_in_input == 0 or math.isnan(change_in_input):
        return math.nan
    return math.copysign(math.inf, change_in_input)


def slew_limited_output(
    value: float,
    rate_of_change: float,
    dt: float,
    positive_rate_limit: float,
    negative_rate_limit: float,
) -> float:
    """Clamp `value` when its rate of change is out of bounds.

    When the rate reaches a limit, the input itself (not the change) is
    bounded by `rate_limit * dt`:
        rate >= positive:  min(value, positive_rate_limit * dt)
        rate <= negative:  max(value, negative_rate_limit * dt)
        otherwise:         value

    A nan rate compares false on both branches and passes `value` through.
    """
    if rate_of_change >= positive_rate_limit:
        return min(value, positive_rate_limit * dt)
    if rate_of_change <= negative_rate_limit:
        return max(value, negative_rate_limit * dt)
    return value
