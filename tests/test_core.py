"""
Tests for the pure rate limiting functions.

Tests validation of rate limits, the bounded change used by the
integrating limiter, and the slew rate estimate and value clamp.
"""

import math

import pytest

from rate_limiters import ConfigurationError
from rate_limiters.core import (
    clamp,
    rate_limited_change,
    slew_limited_output,
    slew_rate_of_change,
    validate_negative_rate_limit,
    validate_positive_rate_limit,
)


class TestValidation:
    """Test sign constraints on rate limits."""

    def test_positive_limit_accepted(self):
        assert validate_positive_rate_limit(2.5) == 2.5

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan])
    def test_positive_limit_rejected(self, value):
        with pytest.raises(ConfigurationError):
            validate_positive_rate_limit(value)

    def test_negative_limit_accepted(self):
        assert validate_negative_rate_limit(-0.5) == -0.5

    @pytest.mark.parametrize("value", [0.0, 0.5, math.nan])
    def test_negative_limit_rejected(self, value):
        with pytest.raises(ConfigurationError):
            validate_negative_rate_limit(value)

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError also see configuration errors."""
        with pytest.raises(ValueError, match="positive_rate_limit"):
            validate_positive_rate_limit(-3.0)


class TestRateLimitedChange:
    """Test bounded change per time step."""

    def test_clamp(self):
        assert clamp(5.0, -1.0, 1.0) == 1.0
        assert clamp(-5.0, -1.0, 1.0) == -1.0
        assert clamp(0.25, -1.0, 1.0) == 0.25

    def test_small_change_passes_through(self):
        assert rate_limited_change(0.1, dt=1.0, positive_rate_limit=1.0, negative_rate_limit=-1.0) == 0.1

    def test_positive_change_limited(self):
        change = rate_limited_change(5.0, dt=2.0, positive_rate_limit=1.0, negative_rate_limit=-1.0)
        assert change == pytest.approx(2.0)

    def test_negative_change_uses_negative_limit(self):
        """Asymmetric limits bound each direction independently."""
        change = rate_limited_change(-5.0, dt=2.0, positive_rate_limit=1.0, negative_rate_limit=-0.5)
        assert change == pytest.approx(-1.0)

    def test_zero_dt_allows_no_change(self):
        assert rate_limited_change(3.0, dt=0.0, positive_rate_limit=1.0, negative_rate_limit=-1.0) == 0.0


class TestSlewRate:
    """Test slew rate estimation and value clamping."""

    def test_rate_of_change(self):
        assert slew_rate_of_change(5.0, 2.0) == pytest.approx(2.5)

    def test_zero_dt_no_change_is_nan(self):
        assert math.isnan(slew_rate_of_change(0.0, 0.0))

    def test_zero_dt_with_change_is_infinite(self):
        assert slew_rate_of_change(1.0, 0.0) == math.inf
        assert slew_rate_of_change(-1.0, 0.0) == -math.inf

    def test_within_limits_passes_through(self):
        assert slew_limited_output(0.5, 0.5, 1.0, 1.0, -1.0) == 0.5

    def test_positive_rate_clamps_value(self):
        assert slew_limited_output(5.0, 2.5, 2.0, 1.0, -1.0) == pytest.approx(2.0)

    def test_negative_rate_clamps_value(self):
        assert slew_limited_output(-5.0, -2.5, 2.0, 1.0, -1.0) == pytest.approx(-2.0)

    def test_rate_exactly_at_limit_engages_clamp(self):
        """Comparisons are inclusive."""
        assert slew_limited_output(3.0, 1.0, 1.0, 1.0, -1.0) == pytest.approx(1.0)

    def test_clamp_is_against_value_not_change(self):
        """Rising from 10 to 12 in 1 s at limit 1 is clamped to 1 * dt, not to 11."""
        assert slew_limited_output(12.0, 2.0, 1.0, 1.0, -1.0) == pytest.approx(1.0)

    def test_nan_rate_passes_through(self):
        assert slew_limited_output(4.0, math.nan, 0.0, 1.0, -1.0) == 4.0
