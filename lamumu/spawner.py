"""Procedural spawning: hazards, collectibles, background, particles.

Everything enters at the right edge (``x = config.width``) and is walked
left by the scroll system. Hazards and collectibles are spacing-gated on the
most recently appended entity of their own container only.
"""
from __future__ import annotations

import colorsys
import logging
import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

from lamumu.components import (
    Beam,
    Box,
    Collectible,
    Color,
    Decoration,
    DistantStar,
    Hazard,
    NebulaCloud,
    Orb,
    Particle,
    Star,
    Wall,
)
from lamumu.config import GameConfig

if TYPE_CHECKING:
    from lamumu.state import GameState
    from lamumu.types import TickContext

logger = logging.getLogger(__name__)

TAU = math.pi * 2


@dataclass(frozen=True)
class Band:
    """Vertical placement rule: ``y = clamp(low + r * (H - span_inset), low, H - high_inset)``."""

    low: float
    span_inset: float
    high_inset: float


@dataclass(frozen=True)
class HazardKind:
    factory: Callable[..., Hazard]
    width: float
    height: float
    band: Band


HAZARD_KINDS: tuple[HazardKind, ...] = (
    HazardKind(Beam, 15.0, 120.0, Band(50.0, 200.0, 170.0)),
    HazardKind(Orb, 70.0, 70.0, Band(50.0, 140.0, 120.0)),
    HazardKind(Wall, 25.0, 160.0, Band(30.0, 220.0, 200.0)),
)

COLLECTIBLE_SIZE = 50.0
COLLECTIBLE_BAND = Band(70.0, 140.0, 120.0)


def hsl(hue: float, saturation: float, lightness: float) -> Color:
    """Convert CSS-style HSL (degrees, fractions) to an RGB tuple."""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return (round(r * 255), round(g * 255), round(b * 255))


def safe_y(
    rng: random.Random, band: Band, entity_height: float, arena_height: float,
) -> float:
    """Pick a y inside ``band``, then force the entity fully on screen.

    A degenerate band (low above high) collapses to ``low``; an entity taller
    than the arena is pinned to the top.
    """
    span = max(0.0, arena_height - band.span_inset)
    high = arena_height - band.high_inset
    y = max(band.low, min(high, band.low + rng.random() * span))
    return max(0.0, min(y, arena_height - entity_height))


def spacing_clear(entities: Sequence[Box], config: GameConfig) -> bool:
    """Spacing gate: empty container or last spawned entity has moved far enough."""
    if not entities:
        return True
    return entities[-1].x < config.width - config.spawn_spacing


# -- Hazards and collectibles --


def spawn_hazard(state: GameState, rng: random.Random) -> Hazard:
    config = state.config
    kind = rng.choice(HAZARD_KINDS)
    hazard = kind.factory(
        x=config.width,
        y=safe_y(rng, kind.band, kind.height, config.height),
        width=kind.width,
        height=kind.height,
    )
    state.hazards.append(hazard)
    logger.debug(f"Spawned {type(hazard).__name__} at y={hazard.y:.1f}")
    return hazard


def maybe_spawn_hazard(state: GameState, rng: random.Random) -> Hazard | None:
    if not spacing_clear(state.hazards, state.config):
        return None
    return spawn_hazard(state, rng)


def spawn_collectible(state: GameState, rng: random.Random) -> Collectible:
    config = state.config
    collectible = Collectible(
        x=config.width,
        y=safe_y(rng, COLLECTIBLE_BAND, COLLECTIBLE_SIZE, config.height),
        width=COLLECTIBLE_SIZE,
        height=COLLECTIBLE_SIZE,
    )
    state.collectibles.append(collectible)
    logger.debug(f"Spawned collectible at y={collectible.y:.1f}")
    return collectible


def maybe_spawn_collectible(
    state: GameState, rng: random.Random,
) -> Collectible | None:
    roll = rng.random()
    if roll >= state.config.collectible_chance:
        return None
    if not spacing_clear(state.collectibles, state.config):
        return None
    return spawn_collectible(state, rng)


# -- Background --


def spawn_decoration(state: GameState, rng: random.Random) -> Decoration:
    config = state.config
    decoration: Decoration
    if rng.random() < 0.5:
        size = 4.0 + rng.random() * 8.0
        decoration = DistantStar(
            x=config.width,
            y=rng.random() * config.height,
            width=size,
            height=size,
            speed=0.1 + rng.random() * 0.2,
            twinkle_phase=rng.random() * TAU,
            color=hsl(200.0 + rng.random() * 60.0, 0.7, 0.8),
        )
    else:
        decoration = NebulaCloud(
            x=config.width,
            y=rng.random() * max(0.0, config.height - 150.0) + 75.0,
            width=100.0 + rng.random() * 100.0,
            height=80.0 + rng.random() * 60.0,
            speed=0.05 + rng.random() * 0.1,
            drift_phase=rng.random() * TAU,
            color=hsl(180.0 + rng.random() * 80.0, 0.4, 0.25),
        )
    state.decorations.append(decoration)
    return decoration


def maybe_spawn_decoration(
    state: GameState, rng: random.Random,
) -> Decoration | None:
    if rng.random() >= state.config.decoration_chance:
        return None
    return spawn_decoration(state, rng)


def spawn_starfield(config: GameConfig, rng: random.Random) -> list[Star]:
    return [
        Star(
            x=rng.random() * config.width,
            y=rng.random() * config.height,
            size=rng.random() * 2.0 + 1.0,
            twinkle=rng.random() * TAU,
            speed=0.5 + rng.random() * 1.5,
        )
        for _ in range(config.star_count)
    ]


# -- Particles --


def emit_jump_particles(
    state: GameState, rng: random.Random, count: int = 8,
) -> None:
    """Exhaust puff below the player."""
    player = state.player
    x = player.x + player.width / 2
    y = player.y + player.height
    for _ in range(count):
        state.particles.append(Particle(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * 4.0,
            vy=rng.random() * 3.0 + 1.0,
            size=rng.random() * 6.0 + 2.0,
            decay=0.02,
            color=hsl(200.0 + rng.random() * 60.0, 0.8, 0.7),
        ))


def emit_collect_particles(
    state: GameState, x: float, y: float, rng: random.Random, count: int = 20,
) -> None:
    """Burst at a collectible's origin."""
    for _ in range(count):
        state.particles.append(Particle(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * 8.0,
            vy=(rng.random() - 0.5) * 8.0,
            size=rng.random() * 8.0 + 3.0,
            decay=0.03,
            color=hsl(300.0 + rng.random() * 60.0, 0.8, 0.7),
        ))


def emit_ambient_particle(state: GameState, rng: random.Random) -> Particle:
    """Slow white speck drifting in from the right edge."""
    config = state.config
    particle = Particle(
        x=config.width,
        y=rng.random() * config.height,
        vx=-state.session.scroll_speed * 0.5,
        vy=0.0,
        size=rng.random() * 3.0 + 1.0,
        decay=0.005,
        color=(255, 255, 255),
        alpha=0.6,
    )
    state.particles.append(particle)
    return particle


def make_spawn_system() -> Callable[["GameState", "TickContext"], None]:
    """Run the three independent generators once per tick."""

    def spawn_system(state: GameState, ctx: TickContext) -> None:
        maybe_spawn_hazard(state, ctx.random)
        maybe_spawn_collectible(state, ctx.random)
        maybe_spawn_decoration(state, ctx.random)

    return spawn_system
