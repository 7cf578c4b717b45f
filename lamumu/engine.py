"""Engine - ordered systems, seeded randomness, and tick pacing."""

from __future__ import annotations

import os
import random
import time
from typing import TYPE_CHECKING, Callable

from lamumu.clock import Clock
from lamumu.types import System

if TYPE_CHECKING:
    from lamumu.state import GameState


class Engine:
    def __init__(self, tps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def systems(self) -> tuple[System, ...]:
        return tuple(self._systems)

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, state: GameState) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(state, ctx)
            if self._stop_requested:
                break

    def step(self, state: GameState) -> None:
        """Run exactly one tick. A stop request skips the rest of that tick."""
        self._stop_requested = False
        self._tick(state)

    def run(self, state: GameState, n: int) -> int:
        """Run up to ``n`` ticks. Returns the number of ticks executed."""
        self._stop_requested = False
        done = 0
        for _ in range(n):
            self._tick(state)
            done += 1
            if self._stop_requested:
                break
        return done

    def run_forever(
        self,
        state: GameState,
        should_continue: Callable[[GameState], bool],
    ) -> None:
        """Tick in real time until ``should_continue`` returns False."""
        dt = self._clock.dt
        while should_continue(state):
            start = time.monotonic()
            self.step(state)
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
