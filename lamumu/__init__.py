"""lamumu - a side-scrolling reflex arcade game on a fixed-tick simulation core."""

from lamumu.clock import Clock
from lamumu.config import GameConfig
from lamumu.engine import Engine
from lamumu.game import Game
from lamumu.hud import HudView
from lamumu.input import ActivateButton
from lamumu.state import GameState, Phase
from lamumu.types import InputFrame, InvalidTransitionError, TickContext

__all__ = [
    "ActivateButton",
    "Clock",
    "Engine",
    "Game",
    "GameConfig",
    "GameState",
    "HudView",
    "InputFrame",
    "InvalidTransitionError",
    "Phase",
    "TickContext",
]
