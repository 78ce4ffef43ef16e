"""Core-only example (no GrADyS-SIM runtime required).

This script replays a fast ramp input through both filters on a manual
clock and prints their outputs side by side:

- RateLimiter: integrates the input changes, each bounded by the limits,
  so while the input rises faster than the limit the output falls behind
  and keeps that offset once the input settles
- SlewRateLimiter: passes the input through unless its slew rate is out
  of bounds, then clamps it against `rate_limit * dt`

Usage:
    python examples/ex_ramp_response.py
"""

from rate_limiters import (
    ManualClock,
    RateLimiter,
    RateLimiterConfiguration,
    SlewRateLimiter,
    Stopwatch,
)


def ramp_input(t: float) -> float:
    # 0 until 0.5 s, then rises at 3 units/s up to 3.0
    return min(max(3.0 * (t - 0.5), 0.0), 3.0)


def simulate_ramp_response():
    """
    Drive both filters through a ramp that is faster than the positive limit.
    """
    print("Core-only demo: RateLimiter vs SlewRateLimiter on a ramp input")

    config = RateLimiterConfiguration(
        positive_rate_limit=2.0,    # Max rise: 2 units/s
        negative_rate_limit=-4.0,   # Max fall: 4 units/s
    )
    dt = 0.1

    # Each filter owns its stopwatch; both read the same manual clock.
    clock = ManualClock()
    rate_limiter = RateLimiter.from_config(config, timer=Stopwatch(clock))
    slew_limiter = SlewRateLimiter.from_config(config, timer=Stopwatch(clock))

    print(f"Limits: +{config.positive_rate_limit} / {config.negative_rate_limit} units/s")
    print(f"dt: {dt} s")
    print("-" * 46)
    print(f"{'t (s)':>6} | {'input':>8} | {'rate':>10} | {'slew':>10}")
    print("-" * 46)

    duration = 3.0
    num_steps = int(round(duration / dt))

    for step in range(num_steps + 1):
        t = step * dt
        u = ramp_input(t)
        y_rate = rate_limiter.calculate(u)
        y_slew = slew_limiter.calculate(u)

        # Print every ~0.2 s
        if step % 2 == 0:
            print(f"{t:>6.1f} | {u:>8.2f} | {y_rate:>10.3f} | {y_slew:>10.3f}")

        clock.advance(dt)

    print("-" * 46)
    print(f"Final RateLimiter output: {rate_limiter.output:.3f}")


if __name__ == "__main__":
    simulate_ramp_response()
