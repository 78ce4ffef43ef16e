"""Plot the ramp response of RateLimiter and SlewRateLimiter.

Replays a fast trapezoid ramp input through both filters at the control
period from config_param.py, stores the samples in a DataFrame and plots:
- input, RateLimiter output and SlewRateLimiter output vs time
- per-sample rate of change of each output vs the configured limits

Run:
    python plot_ramp_response.py [--csv]

With --csv, the samples are also written to ramp_response.csv.
"""

from __future__ import annotations

import logging
import sys

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from config_param import (
    CONTROL_PERIOD,
    NEGATIVE_RATE_LIMIT,
    POSITIVE_RATE_LIMIT,
    RESPONSE_CSV,
    RESPONSE_DURATION,
    RESPONSE_PNG,
    RAMP_DOWN_TIME,
    RAMP_HEIGHT,
    RAMP_RATE,
    RAMP_UP_TIME,
)
from rate_limiters import (
    ManualClock,
    RateLimiter,
    RateLimiterConfiguration,
    SlewRateLimiter,
    Stopwatch,
)

logger = logging.getLogger(__name__)


def ramp_signal(t: np.ndarray) -> np.ndarray:
    rising = np.clip(RAMP_RATE * (t - RAMP_UP_TIME), 0.0, RAMP_HEIGHT)
    falling = np.clip(RAMP_HEIGHT - RAMP_RATE * (t - RAMP_DOWN_TIME), 0.0, RAMP_HEIGHT)
    return np.minimum(rising, falling)


def run_response(t: np.ndarray, u: np.ndarray, config: RateLimiterConfiguration) -> pd.DataFrame:
    clock = ManualClock(start=float(t[0]))
    rate_limiter = RateLimiter.from_config(config, timer=Stopwatch(clock))
    slew_limiter = SlewRateLimiter.from_config(config, timer=Stopwatch(clock))

    y_rate = np.empty_like(u)
    y_slew = np.empty_like(u)
    for i, (t_i, u_i) in enumerate(zip(t, u)):
        clock.now = float(t_i)
        y_rate[i] = rate_limiter.calculate(float(u_i))
        y_slew[i] = slew_limiter.calculate(float(u_i))

    df = pd.DataFrame({"t": t, "u": u, "y_rate": y_rate, "y_slew": y_slew})
    dt = df["t"].diff()
    df["dy_rate"] = df["y_rate"].diff() / dt
    df["dy_slew"] = df["y_slew"].diff() / dt
    return df


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = RateLimiterConfiguration(POSITIVE_RATE_LIMIT, NEGATIVE_RATE_LIMIT)
    num_samples = int(round(RESPONSE_DURATION / CONTROL_PERIOD)) + 1
    t = np.linspace(0.0, RESPONSE_DURATION, num_samples)
    u = ramp_signal(t)

    df = run_response(t, u, config)

    if "--csv" in argv:
        df.to_csv(RESPONSE_CSV, index=False)
        logger.info("Saved samples: %s", RESPONSE_CSV)

    fig, (ax_y, ax_rate) = plt.subplots(2, 1, figsize=(9.0, 7.0), sharex=True)

    ax_y.plot(df["t"], df["u"], color="0.35", linestyle="--", linewidth=2, label="input")
    ax_y.plot(df["t"], df["y_rate"], linewidth=2, label="RateLimiter")
    ax_y.plot(df["t"], df["y_slew"], linewidth=1.5, label="SlewRateLimiter")
    ax_y.set_ylabel("value")
    ax_y.set_title(
        f"Ramp response (limits +{config.positive_rate_limit} / {config.negative_rate_limit} units/s, "
        f"dt={CONTROL_PERIOD} s)"
    )
    ax_y.grid(True, alpha=0.25)
    ax_y.legend(loc="best")

    ax_rate.plot(df["t"], df["dy_rate"], linewidth=2, label="RateLimiter")
    ax_rate.plot(df["t"], df["dy_slew"], linewidth=1.0, label="SlewRateLimiter")
    ax_rate.axhline(config.positive_rate_limit, color="0.6", linestyle=":", linewidth=1)
    ax_rate.axhline(config.negative_rate_limit, color="0.6", linestyle=":", linewidth=1)
    ax_rate.set_xlabel("t (s)")
    ax_rate.set_ylabel("d(output)/dt")
    ax_rate.set_ylim(4 * config.negative_rate_limit, 4 * config.positive_rate_limit)
    ax_rate.grid(True, alpha=0.25)
    ax_rate.legend(loc="best")

    fig.tight_layout()
    fig.savefig(RESPONSE_PNG, dpi=160)
    logger.info("Saved: %s", RESPONSE_PNG)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
