"""Shared fixtures: a manually advanced clock for exact elapsed times."""

import pytest

from rate_limiters import ManualClock, Stopwatch


@pytest.fixture
def clock():
    return ManualClock(start=100.0)


@pytest.fixture
def stopwatch(clock):
    return Stopwatch(clock=clock)
