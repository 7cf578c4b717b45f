"""Session lifecycle state machine.

Transition table maps each phase to the commands it accepts and the phase
they lead to. Entering ``playing`` always resets the session first.
"""
from __future__ import annotations

import logging
import random
from typing import Callable

from lamumu.state import GameState, Phase, reset_state
from lamumu.types import InvalidTransitionError

logger = logging.getLogger(__name__)

TransitionCallback = Callable[[GameState, Phase, Phase], None]

TRANSITIONS: dict[Phase, dict[str, Phase]] = {
    Phase.START: {"start": Phase.PLAYING},
    Phase.PLAYING: {"crash": Phase.GAME_OVER},
    Phase.GAME_OVER: {"restart": Phase.PLAYING, "menu": Phase.START},
}


class SessionMachine:
    """Applies session commands to a GameState and notifies listeners."""

    def __init__(
        self,
        rng: random.Random,
        transitions: dict[Phase, dict[str, Phase]] | None = None,
    ) -> None:
        self._rng = rng
        self._transitions = transitions if transitions is not None else TRANSITIONS
        self._listeners: list[TransitionCallback] = []

    def on_transition(self, callback: TransitionCallback) -> None:
        self._listeners.append(callback)

    def allowed(self, phase: Phase) -> list[str]:
        """Commands accepted in ``phase``."""
        return list(self._transitions.get(phase, {}))

    def can(self, state: GameState, command: str) -> bool:
        return command in self._transitions.get(state.session.phase, {})

    def fire(self, state: GameState, command: str) -> Phase:
        """Apply ``command``. Raises InvalidTransitionError if not allowed."""
        old = state.session.phase
        target = self._transitions.get(old, {}).get(command)
        if target is None:
            raise InvalidTransitionError(old, command)
        if target is Phase.PLAYING:
            reset_state(state, self._rng)
        state.session.phase = target
        logger.info(f"Session {old} -> {target} ({command})")
        for cb in self._listeners:
            cb(state, old, target)
        return target
