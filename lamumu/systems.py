"""Per-tick system factories.

Each factory returns a ``(GameState, TickContext) -> None`` callable. Terminal
events are reported through callbacks so the owner decides what a crash means.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from lamumu.collision import overlaps
from lamumu.components import (
    Beam,
    Collectible,
    DistantStar,
    Hazard,
    NebulaCloud,
    Orb,
    Wall,
)
from lamumu.powerup import activate
from lamumu.spawner import emit_ambient_particle, emit_collect_particles

if TYPE_CHECKING:
    from lamumu.state import GameState
    from lamumu.types import TickContext

logger = logging.getLogger(__name__)

SystemFn = Callable[["GameState", "TickContext"], None]
CrashCallback = Callable[["GameState", "TickContext"], None]


def make_player_system(on_fall: CrashCallback) -> SystemFn:
    """Gravity integration, derived tilt, trail fade, and arena bounds.

    Velocity is updated before position. The ceiling is solid; leaving
    through the floor calls ``on_fall``.
    """

    def player_system(state: GameState, ctx: TickContext) -> None:
        config = state.config
        player = state.player

        player.velocity_y += config.gravity
        player.y += player.velocity_y
        player.rotation = max(
            -config.max_rotation,
            min(config.max_rotation, player.velocity_y * config.rotation_factor),
        )

        for point in player.trail:
            point.alpha -= config.trail_decay
        player.trail[:] = [p for p in player.trail if p.alpha > 0.0]

        if player.y < 0.0:
            player.y = 0.0
            player.velocity_y = 0.0
        if player.y + player.height > config.height:
            on_fall(state, ctx)

    return player_system


def _animate_hazard(hazard: Hazard) -> None:
    if isinstance(hazard, Beam):
        hazard.pulse_phase += 0.2
        hazard.intensity = 0.8 + math.sin(hazard.pulse_phase) * 0.2
    elif isinstance(hazard, Orb):
        hazard.rotation += 0.15
        hazard.pulse_phase += 0.12
        hazard.scale = 1.0 + math.sin(hazard.pulse_phase) * 0.15
    elif isinstance(hazard, Wall):
        hazard.wave_phase += 0.1


def _animate_collectible(collectible: Collectible) -> None:
    collectible.rotation += 0.1
    collectible.pulse_phase += 0.15
    collectible.scale = 1.0 + math.sin(collectible.pulse_phase) * 0.2


def make_scroll_system() -> SystemFn:
    """Walk hazards, collectibles, and decorations left; drop what has left the arena."""

    def scroll_system(state: GameState, ctx: TickContext) -> None:
        config = state.config
        speed = state.session.scroll_speed

        for hazard in state.hazards:
            hazard.x -= speed * config.hazard_speed
            _animate_hazard(hazard)
        state.hazards[:] = [h for h in state.hazards if h.x + h.width > 0.0]

        for collectible in state.collectibles:
            collectible.x -= speed * config.collectible_speed
            _animate_collectible(collectible)
        state.collectibles[:] = [
            c for c in state.collectibles if c.x + c.width > 0.0
        ]

        for deco in state.decorations:
            deco.x -= speed * deco.speed
            if isinstance(deco, DistantStar):
                deco.twinkle_phase += 0.05
            elif isinstance(deco, NebulaCloud):
                deco.drift_phase += 0.02
        state.decorations[:] = [
            d for d in state.decorations if d.x + d.width > 0.0
        ]

    return scroll_system


def make_particle_system() -> SystemFn:
    """Free-flying particles: move, fade, shrink, die."""

    def particle_system(state: GameState, ctx: TickContext) -> None:
        for p in state.particles:
            p.x += p.vx
            p.y += p.vy
            p.alpha -= p.decay
            p.size *= 0.98
        state.particles[:] = [p for p in state.particles if p.alive]

    return particle_system


def make_starfield_system() -> SystemFn:
    """Parallax stars drift at a tenth of scroll speed and wrap at the left edge."""

    def starfield_system(state: GameState, ctx: TickContext) -> None:
        config = state.config
        speed = state.session.scroll_speed
        for star in state.stars:
            star.twinkle += 0.05
            star.x -= star.speed * speed * 0.1
            if star.x < 0.0:
                star.x = config.width
                star.y = ctx.random.random() * config.height

    return starfield_system


def make_score_system() -> SystemFn:
    """One point per tick survived; scroll speed ramps without a cap."""

    def score_system(state: GameState, ctx: TickContext) -> None:
        state.session.score += 1
        state.session.scroll_speed += state.config.scroll_ramp

    return score_system


def collect(state: GameState, collectible: Collectible, ctx: TickContext) -> None:
    """Award currency, refill the power-up, and burst particles."""
    state.session.currency += state.config.collectible_reward
    activate(state.powerup)
    emit_collect_particles(state, collectible.x, collectible.y, ctx.random)
    logger.debug(f"Collected token, currency={state.session.currency}")


def make_collision_system(
    on_hazard: CrashCallback,
    on_collect: Callable[["GameState", "TickContext", Collectible], None] | None = None,
) -> SystemFn:
    """Player vs hazards, then player vs collectibles, with padded hitboxes.

    An active power-up makes hazards harmless; they are not destroyed.
    A collectible is removed on the first tick it overlaps.
    """

    def collision_system(state: GameState, ctx: TickContext) -> None:
        player = state.player
        padding = state.config.hitbox_padding

        if not state.powerup.active:
            for hazard in state.hazards:
                if overlaps(player, hazard, padding):
                    on_hazard(state, ctx)
                    if not state.playing:
                        return

        kept: list[Collectible] = []
        for collectible in state.collectibles:
            if overlaps(player, collectible, padding):
                collect(state, collectible, ctx)
                if on_collect is not None:
                    on_collect(state, ctx, collectible)
            else:
                kept.append(collectible)
        state.collectibles[:] = kept

    return collision_system


def make_ambient_system() -> SystemFn:
    """Emit one ambient particle every ``state.ambient.interval`` ticks."""

    def ambient_system(state: GameState, ctx: TickContext) -> None:
        periodic = state.ambient
        periodic.elapsed += 1
        if periodic.elapsed >= periodic.interval:
            emit_ambient_particle(state, ctx.random)
            periodic.elapsed = 0

    return ambient_system
