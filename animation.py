"""
Ping-pong phase oscillator driving the background animation
"""
import time
from typing import Callable

INCREASING = "increasing"
DECREASING = "decreasing"


def ping_pong(elapsed: float, half_period: float) -> float:
    """
    Linear back-and-forth value in [0, 1].

    Starts at 0, reaches 1 after one half period and is back at 0 after
    a full period.
    """
    if half_period <= 0:
        raise ValueError("half_period must be positive")

    position = (max(0.0, elapsed) / half_period) % 2.0
    return position if position <= 1.0 else 2.0 - position


class PhaseOscillator:
    """Phase scalar that runs 0 -> 1 -> 0 forever, reversing at each bound"""

    def __init__(self, half_period: float = 30.0,
                 clock: Callable[[], float] = time.monotonic):
        if half_period <= 0:
            raise ValueError("half_period must be positive")
        self.half_period = half_period
        self._clock = clock
        self._start = clock()

    @property
    def elapsed(self) -> float:
        return self._clock() - self._start

    def value(self) -> float:
        return ping_pong(self.elapsed, self.half_period)

    @property
    def direction(self) -> str:
        position = (max(0.0, self.elapsed) / self.half_period) % 2.0
        return INCREASING if position < 1.0 else DECREASING
