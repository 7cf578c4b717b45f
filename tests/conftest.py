"""Shared fixtures: deterministic configs and states without background noise."""
from __future__ import annotations

import random

import pytest

from lamumu.config import GameConfig
from lamumu.state import GameState, Phase, new_state


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(star_count=0, initial_decorations=0)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def state(config: GameConfig, rng: random.Random) -> GameState:
    s = new_state(config, rng)
    s.session.phase = Phase.PLAYING
    return s
