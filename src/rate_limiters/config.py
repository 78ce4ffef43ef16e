"""
Configuration dataclass for the rate limiting filters.
"""

from dataclasses import dataclass

from .core import validate_negative_rate_limit, validate_positive_rate_limit


@dataclass
class RateLimiterConfiguration:
    """
    Configuration parameters shared by RateLimiter and SlewRateLimiter.

    Attributes:
        positive_rate_limit: Maximum rate of increase, in units per second.
            Must be > 0. Typical for voltage ramps: 6–24 V/s.
        negative_rate_limit: Maximum rate of decrease, in units per second.
            Must be < 0.
    """
    positive_rate_limit: float
    negative_rate_limit: float

    def __post_init__(self):
        self.positive_rate_limit = validate_positive_rate_limit(self.positive_rate_limit)
        self.negative_rate_limit = validate_negative_rate_limit(self.negative_rate_limit)

    @classmethod
    def symmetric(cls, rate_limit: float) -> "RateLimiterConfiguration":
        """Same magnitude in both directions, e.g. `symmetric(2.0)` -> (2.0, -2.0)."""
        return cls(positive_rate_limit=rate_limit, negative_rate_limit=-rate_limit)
