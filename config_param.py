"""Centralized parameter/config constants for the plotting script.

This module is the single source of truth for the values used by
`plot_ramp_response.py`. The core-only example under `examples/` keeps its
own inline values so it runs without this module on the path.
"""

# --------------------------------------------------------------------------------------
# 1) Control loop timing
# --------------------------------------------------------------------------------------

# Control loop period (seconds). 20 ms is a typical robot loop.
CONTROL_PERIOD: float = 0.02

# Duration of each replayed response (seconds)
RESPONSE_DURATION: float = 6.0

# --------------------------------------------------------------------------------------
# 2) Rate limits (units per second)
# --------------------------------------------------------------------------------------

POSITIVE_RATE_LIMIT: float = 2.0    # Max rise: 2 units/s
NEGATIVE_RATE_LIMIT: float = -4.0   # Max fall: 4 units/s

# --------------------------------------------------------------------------------------
# 3) Input signal
# --------------------------------------------------------------------------------------

RAMP_UP_TIME: float = 0.5           # Start ramping up at t = 0.5 s
RAMP_DOWN_TIME: float = 3.5         # Start ramping down at t = 3.5 s
RAMP_RATE: float = 5.0              # Input slope (units/s), faster than both limits
RAMP_HEIGHT: float = 6.0            # Plateau value (units)

# Output files
RESPONSE_CSV: str = "ramp_response.csv"
RESPONSE_PNG: str = "ramp_response.png"
