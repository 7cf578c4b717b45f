"""Read-only projections of the simulation for display."""
from __future__ import annotations

from dataclasses import dataclass

from lamumu.powerup import remaining_fraction
from lamumu.state import GameState

DISTANCE_DIVISOR = 10


@dataclass(frozen=True)
class HudView:
    distance: int
    currency: int
    powerup_fraction: float
    powerup_active: bool


def distance(score: int) -> int:
    return score // DISTANCE_DIVISOR


def project(state: GameState) -> HudView:
    return HudView(
        distance=distance(state.session.score),
        currency=state.session.currency,
        powerup_fraction=remaining_fraction(state.powerup),
        powerup_active=state.powerup.active,
    )


def achievements(state: GameState) -> list[str]:
    """Titles earned by the current run. Nothing is persisted."""
    dist = distance(state.session.score)
    currency = state.session.currency
    earned: list[str] = []
    if dist > 50:
        earned.append("Space Explorer")
    if dist > 200:
        earned.append("Stellar Navigator")
    if dist > 500:
        earned.append("Cosmic Champion")
    if dist > 1000:
        earned.append("Galaxy Master")
    if currency > 30:
        earned.append("Token Collector")
    if currency > 80:
        earned.append("Treasure Hunter")
    if currency > 150:
        earned.append("Wealth Master")
    if state.powerup.active:
        earned.append("Power User")
    if dist > 100 and currency > 50:
        earned.append("Perfect Balance")
    return earned
