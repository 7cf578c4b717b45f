"""Shared type aliases and protocols for the simulation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


@dataclass(frozen=True, slots=True)
class InputFrame:
    """Inputs sampled by the host between two ticks."""

    jump: bool = False


class InvalidTransitionError(Exception):
    """Raised when a session command is not legal in the current phase."""

    def __init__(self, phase: object, command: str) -> None:
        self.phase = phase
        self.command = command
        super().__init__(f"Cannot {command!r} while in phase {phase!s}")


if TYPE_CHECKING:
    from lamumu.state import GameState

System = Callable[["GameState", TickContext], None]
