"""Exceptions raised by the rate limiting filters."""


class ConfigurationError(ValueError):
    """A rate limit was given a value with the wrong sign.

    Raised by filter constructors, limit setters and
    `RateLimiterConfiguration`. Never raised while filtering.
    """
