"""Invulnerability window: inactive -> active (pickup) -> inactive (countdown)."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from lamumu.state import GameState, PowerupTimer
    from lamumu.types import TickContext


def activate(timer: PowerupTimer) -> None:
    """Start or refill the window. Refills never stack past ``duration``."""
    timer.active = True
    timer.remaining = timer.duration


def deactivate(timer: PowerupTimer) -> None:
    timer.active = False
    timer.remaining = 0


def tick_timer(timer: PowerupTimer) -> bool:
    """Count down one tick. Returns True on the tick the window closes."""
    if not timer.active:
        return False
    timer.remaining = max(0, timer.remaining - 1)
    if timer.remaining == 0:
        timer.active = False
        return True
    return False


def remaining_fraction(timer: PowerupTimer) -> float:
    """Countdown as a 0..1 fraction for progress bars."""
    if not timer.active or timer.duration <= 0:
        return 0.0
    return min(1.0, max(0.0, timer.remaining / timer.duration))


def make_powerup_system(
    on_expire: Callable[[GameState, TickContext], None] | None = None,
) -> Callable[[GameState, TickContext], None]:
    """Return a system that decrements the power-up countdown each tick."""

    def powerup_system(state: GameState, ctx: TickContext) -> None:
        if tick_timer(state.powerup) and on_expire is not None:
            on_expire(state, ctx)

    return powerup_system
