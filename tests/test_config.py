"""
Tests for RateLimiterConfiguration.
"""

import pytest

from rate_limiters import ConfigurationError, RateLimiterConfiguration


class TestConfiguration:
    """Test validation and constructors."""

    def test_valid(self):
        config = RateLimiterConfiguration(positive_rate_limit=2, negative_rate_limit=-1)
        assert config.positive_rate_limit == 2.0
        assert isinstance(config.positive_rate_limit, float)
        assert config.negative_rate_limit == -1.0

    @pytest.mark.parametrize("positive, negative", [(0.0, -1.0), (1.0, 0.0), (-1.0, 1.0)])
    def test_invalid(self, positive, negative):
        with pytest.raises(ConfigurationError):
            RateLimiterConfiguration(positive_rate_limit=positive, negative_rate_limit=negative)

    def test_symmetric(self):
        config = RateLimiterConfiguration.symmetric(0.75)
        assert config == RateLimiterConfiguration(0.75, -0.75)

    def test_symmetric_rejects_non_positive(self):
        with pytest.raises(ConfigurationError):
            RateLimiterConfiguration.symmetric(-0.75)
