"""Game facade: one engine, one owned state, and the session commands."""
from __future__ import annotations

import logging

from lamumu import hud
from lamumu.components import TrailPoint
from lamumu.config import GameConfig
from lamumu.engine import Engine
from lamumu.powerup import make_powerup_system
from lamumu.session import SessionMachine
from lamumu.spawner import emit_jump_particles, make_spawn_system
from lamumu.state import GameState, Phase, new_state
from lamumu.systems import (
    make_ambient_system,
    make_collision_system,
    make_particle_system,
    make_player_system,
    make_score_system,
    make_scroll_system,
    make_starfield_system,
)
from lamumu.types import InputFrame, TickContext

logger = logging.getLogger(__name__)


class Game:
    """Owns a GameState and advances it one tick at a time.

    The host decides when ticks happen; ``tick`` is a no-op outside the
    ``playing`` phase so menus and the game-over screen render a frozen state.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        tps: int = 60,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.engine = Engine(tps=tps, seed=seed)
        self.state: GameState = new_state(self.config, self.engine.random)
        self.session = SessionMachine(self.engine.random)
        self.session.on_transition(self._log_transition)

        self.engine.add_system(make_player_system(on_fall=self._crash))
        self.engine.add_system(make_scroll_system())
        self.engine.add_system(make_particle_system())
        self.engine.add_system(make_starfield_system())
        self.engine.add_system(make_powerup_system())
        self.engine.add_system(make_spawn_system())
        self.engine.add_system(make_score_system())
        self.engine.add_system(make_collision_system(on_hazard=self._crash))
        self.engine.add_system(make_ambient_system())

    @property
    def phase(self) -> Phase:
        return self.state.session.phase

    @property
    def seed(self) -> int:
        return self.engine.seed

    # -- Session commands --

    def start(self) -> None:
        self.session.fire(self.state, "start")

    def restart(self) -> None:
        self.session.fire(self.state, "restart")

    def return_to_menu(self) -> None:
        self.session.fire(self.state, "menu")

    # -- Input --

    def jump(self) -> bool:
        """Apply the jump impulse immediately. Ignored unless playing."""
        if not self.state.playing:
            return False
        config = self.config
        player = self.state.player
        player.velocity_y = config.jump_force
        emit_jump_particles(self.state, self.engine.random)
        cx, cy = player.center
        player.trail.insert(0, TrailPoint(x=cx, y=cy))
        del player.trail[config.trail_length:]
        return True

    # -- Simulation --

    def tick(self, inputs: InputFrame | None = None) -> GameState:
        if inputs is not None and inputs.jump:
            self.jump()
        if self.state.playing:
            self.engine.step(self.state)
        return self.state

    def run(self, ticks: int) -> int:
        """Advance up to ``ticks`` ticks without input. Stops at game over."""
        if not self.state.playing:
            return 0
        return self.engine.run(self.state, ticks)

    # -- Projections --

    def hud(self) -> hud.HudView:
        return hud.project(self.state)

    def achievements(self) -> list[str]:
        return hud.achievements(self.state)

    # -- Internals --

    def _crash(self, state: GameState, ctx: TickContext) -> None:
        if state.playing:
            self.session.fire(state, "crash")
        ctx.request_stop()

    def _log_transition(self, state: GameState, old: Phase, new: Phase) -> None:
        if new is Phase.GAME_OVER:
            view = hud.project(state)
            logger.info(
                f"Game over: distance={view.distance} currency={view.currency} "
                f"achievements={hud.achievements(state)}"
            )
