"""Entity models. Plain data, no behaviour."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

Color = tuple[int, int, int]


@dataclass
class TrailPoint:
    """Fading snapshot of the player's centre, pushed on every jump."""

    x: float
    y: float
    alpha: float = 1.0


@dataclass
class Player:
    """The player. ``x`` never changes; ``rotation`` is derived from velocity."""

    x: float
    y: float
    width: float
    height: float
    velocity_y: float = 0.0
    rotation: float = 0.0
    trail: list[TrailPoint] = field(default_factory=list)

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Box:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float


# -- Hazards --


@dataclass
class Beam(Box):
    """Vertical laser bar with a pulsing intensity."""

    color: Color = (255, 0, 64)
    pulse_phase: float = 0.0
    intensity: float = 1.0


@dataclass
class Orb(Box):
    """Spinning energy ball that breathes in scale."""

    color: Color = (255, 64, 0)
    rotation: float = 0.0
    pulse_phase: float = 0.0
    scale: float = 1.0


@dataclass
class Wall(Box):
    """Tall plasma column with a travelling wave."""

    color: Color = (128, 0, 255)
    wave_phase: float = 0.0


Hazard = Union[Beam, Orb, Wall]


@dataclass
class Collectible(Box):
    rotation: float = 0.0
    scale: float = 1.0
    pulse_phase: float = 0.0


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    decay: float
    color: Color
    alpha: float = 1.0

    @property
    def alive(self) -> bool:
        return self.alpha > 0.0 and self.size > 0.5


# -- Background --


@dataclass
class DistantStar(Box):
    speed: float = 0.1
    twinkle_phase: float = 0.0
    color: Color = (255, 255, 255)


@dataclass
class NebulaCloud(Box):
    speed: float = 0.05
    drift_phase: float = 0.0
    color: Color = (40, 40, 60)


Decoration = Union[DistantStar, NebulaCloud]


@dataclass
class Star:
    """Parallax starfield point. Wraps around instead of dying."""

    x: float
    y: float
    size: float
    twinkle: float
    speed: float


@dataclass
class Periodic:
    """Recurring sub-trigger. Fires every ``interval`` ticks."""

    name: str
    interval: int
    elapsed: int = 0
