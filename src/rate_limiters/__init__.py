"""Rate limiting filters for periodic control loops.

This package contains two stateful filters that bound how fast a scalar
output may change per second, and the pure math core they share:

- `RateLimiter`: integrates bounded increments, the output never jumps.
- `SlewRateLimiter`: passes the input through unless its slew rate is out
  of bounds, then clamps it.

`SimulationStopwatch` (GrADyS-SIM NG time) lives in `rate_limiters.sim_timer`
and is not imported here.

Date: October 18, 2026
"""

from .config import RateLimiterConfiguration
from .errors import ConfigurationError
from .limiters import RateLimiter, SlewRateLimiter
from .timer import ElapsedTimeSource, ManualClock, Stopwatch
from .core import (
    clamp,
    rate_limited_change,
    slew_limited_output,
    slew_rate_of_change,
    validate_negative_rate_limit,
    validate_positive_rate_limit,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ElapsedTimeSource",
    "ManualClock",
    "RateLimiter",
    "RateLimiterConfiguration",
    "SlewRateLimiter",
    "Stopwatch",
    "clamp",
    "rate_limited_change",
    "slew_limited_output",
    "slew_rate_of_change",
    "validate_negative_rate_limit",
    "validate_positive_rate_limit",
]
