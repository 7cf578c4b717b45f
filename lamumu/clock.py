"""Fixed-timestep clock.

The simulation always advances in whole ticks of ``1 / tps`` seconds. Hosts
that render at their own frame rate feed wall-clock frame durations into
``due()`` and run as many ticks as it reports.
"""
from __future__ import annotations

import random
from typing import Callable

from lamumu.types import TickContext

MAX_CATCH_UP = 5


class Clock:
    def __init__(self, tps: int, max_catch_up: int = MAX_CATCH_UP) -> None:
        if tps <= 0:
            raise ValueError(f"tps must be positive, got {tps}")
        if max_catch_up <= 0:
            raise ValueError(f"max_catch_up must be positive, got {max_catch_up}")
        self._tps = tps
        self._dt = 1.0 / tps
        self._max_catch_up = max_catch_up
        self._ticks = 0
        self._pending = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._ticks

    @property
    def elapsed(self) -> float:
        """Simulated seconds, not wall-clock time."""
        return self._ticks * self._dt

    def advance(self) -> int:
        self._ticks += 1
        return self._ticks

    def due(self, frame_seconds: float) -> int:
        """Bank ``frame_seconds`` and return how many ticks are owed.

        At most ``max_catch_up`` ticks are reported per call; time beyond that
        is dropped so a stalled frame does not snowball into a burst of ticks.
        """
        self._pending += max(0.0, frame_seconds)
        owed = int(self._pending / self._dt)
        if owed > self._max_catch_up:
            self._pending = 0.0
            return self._max_catch_up
        self._pending -= owed * self._dt
        return owed

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._ticks,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._ticks = tick_number
        self._pending = 0.0
