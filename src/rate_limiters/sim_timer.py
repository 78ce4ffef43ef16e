"""Elapsed-time source driven by GrADyS-SIM NG simulation time.

Inside a simulation the control loop runs on `EventLoop.current_time`,
not on the wall clock. Wrapping the loop in a `SimulationStopwatch` lets a
protocol or handler run the filters at simulation speed (including
non-real-time runs).
"""

from gradysim.simulator.event import EventLoop

from .timer import Stopwatch


class SimulationStopwatch(Stopwatch):
    """Stopwatch reading the simulator's current time.

    Usage:
        timer = SimulationStopwatch(event_loop)
        limiter = RateLimiter(2.0, -2.0, timer=timer)
    """

    def __init__(self, event_loop: EventLoop):
        super().__init__(clock=lambda: float(event_loop.current_time))
        self._loop = event_loop

    @property
    def event_loop(self) -> EventLoop:
        return self._loop
