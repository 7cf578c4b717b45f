"""
Lamumu Space: pygame host.

Drives the fixed-tick Game from a frame accumulator and renders every frame.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from lamumu.game import Game
from lamumu.input import ActivateButton
from lamumu.state import Phase
from lamumu.types import InputFrame
from lamumu.ui.constants import FPS, TITLE, TPS
from lamumu.ui.overlay import draw_game_over, draw_hud, draw_start_screen
from lamumu.ui.renderer import Renderer, load_assets

logger = logging.getLogger(__name__)

ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="lamumu", description=TITLE)
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible run")
    parser.add_argument("--tps", type=int, default=TPS, help="simulation ticks per second")
    parser.add_argument("--assets", type=Path, default=None, help="directory with optional images")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def _handle_command_key(game: Game, key: int) -> bool:
    """Session keys. Returns False when the host should quit."""
    phase = game.phase
    if key == pygame.K_ESCAPE:
        if phase is Phase.GAME_OVER:
            game.return_to_menu()
            return True
        return False
    if key == pygame.K_RETURN:
        if phase is Phase.START:
            game.start()
        elif phase is Phase.GAME_OVER:
            game.restart()
    elif key == pygame.K_m and phase is Phase.GAME_OVER:
        game.return_to_menu()
    return True


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.debug)

    game = Game(seed=args.seed, tps=args.tps)
    logger.info(f"Starting {TITLE} (seed={game.seed}, tps={args.tps})")

    pygame.init()
    config = game.config
    screen = pygame.display.set_mode((int(config.width), int(config.height)))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)
    big_font = pygame.font.SysFont("monospace", 40, bold=True)

    renderer = Renderer(screen, load_assets(args.assets))
    button = ActivateButton()

    frame = 0
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0
        frame += 1

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in ACTIVATE_KEYS:
                    button.press(event.key)
                elif not _handle_command_key(game, event.key):
                    running = False
            elif event.type == pygame.KEYUP:
                button.release(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                button.press("mouse")
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                button.release("mouse")
            elif event.type == pygame.FINGERDOWN:
                button.press(("finger", event.finger_id))
            elif event.type == pygame.FINGERUP:
                button.release(("finger", event.finger_id))

        # --- Update ---
        for _ in range(game.engine.clock.due(dt)):
            game.tick(InputFrame(jump=button.consume()))

        # --- Draw ---
        renderer.draw(game.state, frame)
        view = game.hud()
        if game.phase is Phase.PLAYING:
            draw_hud(screen, font, view)
        elif game.phase is Phase.START:
            draw_start_screen(screen, big_font, font)
        else:
            draw_game_over(screen, big_font, font, view, game.achievements())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
