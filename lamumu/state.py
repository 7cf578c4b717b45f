"""Session-owned simulation state and its reset semantics."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from lamumu.components import (
    Collectible,
    Decoration,
    Hazard,
    Particle,
    Periodic,
    Player,
    Star,
)
from lamumu.config import GameConfig
from lamumu.spawner import spawn_decoration, spawn_starfield


class Phase(Enum):
    """Lifecycle phase of a play session."""

    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"

    def __str__(self) -> str:
        return self.value


@dataclass
class SessionState:
    phase: Phase = Phase.START
    score: int = 0  # ticks survived; displayed as distance = score // 10
    currency: int = 0
    scroll_speed: float = 2.0


@dataclass
class PowerupTimer:
    """Invulnerability window. ``remaining`` counts down in ticks."""

    duration: int = 300
    active: bool = False
    remaining: int = 0


@dataclass
class GameState:
    """Everything the tick systems read and write, owned by one Game."""

    config: GameConfig
    player: Player
    session: SessionState = field(default_factory=SessionState)
    powerup: PowerupTimer = field(default_factory=PowerupTimer)
    hazards: list[Hazard] = field(default_factory=list)
    collectibles: list[Collectible] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    decorations: list[Decoration] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)
    ambient: Periodic = field(default_factory=lambda: Periodic("ambient", 12))

    @property
    def playing(self) -> bool:
        return self.session.phase is Phase.PLAYING


def new_player(config: GameConfig) -> Player:
    return Player(
        x=config.player_x,
        y=config.height / 2,
        width=config.player_width,
        height=config.player_height,
    )


def new_state(config: GameConfig, rng: random.Random) -> GameState:
    """Build a fresh state in the ``start`` phase with starfield and decorations."""
    state = GameState(
        config=config,
        player=new_player(config),
        session=SessionState(scroll_speed=config.base_scroll_speed),
        powerup=PowerupTimer(duration=config.powerup_duration),
        ambient=Periodic("ambient", config.ambient_interval),
    )
    state.stars = spawn_starfield(config, rng)
    for _ in range(config.initial_decorations):
        spawn_decoration(state, rng)
    return state


def reset_state(state: GameState, rng: random.Random) -> None:
    """Zero the session and clear every entity container.

    The phase is left alone; the session machine decides it. The starfield
    survives, decorations are reseeded so the first frame is not empty.
    """
    config = state.config
    state.session.score = 0
    state.session.currency = 0
    state.session.scroll_speed = config.base_scroll_speed
    state.player = new_player(config)
    state.hazards.clear()
    state.collectibles.clear()
    state.particles.clear()
    state.decorations.clear()
    state.powerup.active = False
    state.powerup.remaining = 0
    state.ambient.elapsed = 0
    for _ in range(config.initial_decorations):
        spawn_decoration(state, rng)
