"""Simulation tunables.

Units are arena pixels and ticks; the simulation is tuned for 60 ticks per
second and does not scale its constants by ``dt``.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # Arena
    width: float = 800.0
    height: float = 600.0

    # Player
    player_x: float = 100.0
    player_width: float = 60.0
    player_height: float = 50.0
    gravity: float = 0.6
    jump_force: float = -12.0
    rotation_factor: float = 0.05
    max_rotation: float = 0.5
    trail_length: int = 8
    trail_decay: float = 0.15

    # Difficulty
    base_scroll_speed: float = 2.0
    scroll_ramp: float = 0.002
    hazard_speed: float = 2.0
    collectible_speed: float = 2.0

    # Spawning
    spawn_spacing: float = 200.0
    collectible_chance: float = 0.004
    decoration_chance: float = 0.002
    initial_decorations: int = 5
    star_count: int = 150

    # Collisions and rewards
    hitbox_padding: float = 5.0
    powerup_duration: int = 300
    collectible_reward: int = 10

    # Ambient particles, every N ticks (~200ms at 60 tps)
    ambient_interval: int = 12

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("arena width and height must be positive")
        if self.hitbox_padding < 0:
            raise ValueError("hitbox_padding must be non-negative")
        for name in ("collectible_chance", "decoration_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.powerup_duration <= 0:
            raise ValueError("powerup_duration must be positive")
        if self.trail_length <= 0:
            raise ValueError("trail_length must be positive")
        if self.ambient_interval <= 0:
            raise ValueError("ambient_interval must be positive")
        if self.initial_decorations < 0 or self.star_count < 0:
            raise ValueError("initial entity counts must be non-negative")
