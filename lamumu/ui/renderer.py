"""Draw one frame from a GameState. Never mutates the state."""
from __future__ import annotations

import logging
import math
from pathlib import Path

import pygame

from lamumu.components import Beam, Collectible, DistantStar, NebulaCloud, Orb, Wall
from lamumu.state import GameState
from lamumu.ui.constants import (
    ACCENT,
    ASSET_FILES,
    BG_COLOR,
    COW_BODY,
    COW_BODY_POWERED,
    COW_SPOTS,
    COW_SPOTS_POWERED,
    POWERUP_COLOR,
    TOKEN_EDGE,
    TOKEN_GOLD,
)

logger = logging.getLogger(__name__)

Assets = dict[str, pygame.Surface | None]


def load_assets(directory: Path | None) -> Assets:
    """Load optional images. Missing or broken files map to None."""
    assets: Assets = {name: None for name in ASSET_FILES}
    if directory is None:
        return assets
    for name, filename in ASSET_FILES.items():
        path = directory / filename
        try:
            assets[name] = pygame.image.load(str(path)).convert_alpha()
        except (FileNotFoundError, pygame.error) as exc:
            logger.warning(f"Asset {name} not loaded ({exc}), using fallback")
    return assets


def _alpha_surface(size: tuple[int, int]) -> pygame.Surface:
    return pygame.Surface((max(1, size[0]), max(1, size[1])), pygame.SRCALPHA)


def _glow_circle(
    screen: pygame.Surface,
    color: tuple[int, int, int],
    center: tuple[float, float],
    radius: float,
    alpha: float,
) -> None:
    r = max(1, int(radius))
    surf = _alpha_surface((r * 2, r * 2))
    a = max(0, min(255, int(alpha * 255)))
    pygame.draw.circle(surf, (*color, a), (r, r), r)
    screen.blit(surf, (int(center[0]) - r, int(center[1]) - r))


class Renderer:
    def __init__(self, screen: pygame.Surface, assets: Assets | None = None) -> None:
        self.screen = screen
        self.assets: Assets = assets if assets is not None else {}

    def draw(self, state: GameState, frame: int) -> None:
        self.screen.fill(BG_COLOR)
        self._draw_stars(state)
        self._draw_decorations(state)
        self._draw_hazards(state)
        self._draw_collectibles(state)
        self._draw_player(state)
        self._draw_particles(state)
        if state.powerup.active:
            self._draw_powerup_border(state, frame)

    # -- Background --

    def _draw_stars(self, state: GameState) -> None:
        for star in state.stars:
            alpha = 0.3 + math.sin(star.twinkle) * 0.2
            _glow_circle(self.screen, (255, 255, 255), (star.x, star.y), star.size, alpha)

    def _draw_decorations(self, state: GameState) -> None:
        for deco in state.decorations:
            if isinstance(deco, DistantStar):
                alpha = 0.4 + math.sin(deco.twinkle_phase) * 0.2
                _glow_circle(self.screen, deco.color, (deco.x, deco.y), deco.width / 2, alpha)
            elif isinstance(deco, NebulaCloud):
                surf = _alpha_surface((int(deco.width), int(deco.height)))
                pygame.draw.ellipse(surf, (*deco.color, 38), surf.get_rect())
                self.screen.blit(surf, (int(deco.x), int(deco.y)))

    # -- Hazards --

    def _draw_hazards(self, state: GameState) -> None:
        for hazard in state.hazards:
            rect = pygame.Rect(int(hazard.x), int(hazard.y), int(hazard.width), int(hazard.height))
            if isinstance(hazard, Beam):
                surf = _alpha_surface(rect.size)
                a = int(255 * max(0.0, min(1.0, hazard.intensity)))
                surf.fill((*hazard.color, a))
                core = pygame.Rect(3, 10, max(1, rect.width - 6), max(1, rect.height - 20))
                pygame.draw.rect(surf, (255, 255, 255, a), core)
                self.screen.blit(surf, rect.topleft)
                pygame.draw.rect(self.screen, hazard.color, rect.inflate(4, 4), 2)
            elif isinstance(hazard, Orb):
                cx, cy = rect.center
                radius = hazard.width / 2 * hazard.scale
                pygame.draw.circle(self.screen, hazard.color, (cx, cy), int(radius), 6)
                pygame.draw.circle(self.screen, (255, 255, 255), (cx, cy), int(radius / 1.5))
                for i in range(6):
                    angle = i / 6 * math.tau + hazard.rotation
                    inner = radius / 2
                    outer = radius / 1.25
                    pygame.draw.line(
                        self.screen,
                        (255, 255, 0),
                        (cx + math.cos(angle) * inner, cy + math.sin(angle) * inner),
                        (cx + math.cos(angle) * outer, cy + math.sin(angle) * outer),
                        2,
                    )
            elif isinstance(hazard, Wall):
                pygame.draw.rect(self.screen, hazard.color, rect)
                points = []
                for step in range(0, int(hazard.height) + 1, 8):
                    offset = math.sin(hazard.wave_phase + step * 0.1) * (hazard.width / 3)
                    points.append((rect.centerx + offset, rect.top + step))
                if len(points) > 1:
                    pygame.draw.lines(self.screen, (230, 180, 255), False, points, 2)

    # -- Collectibles --

    def _draw_collectibles(self, state: GameState) -> None:
        image = self.assets.get("token")
        for token in state.collectibles:
            self._draw_token(token, image)

    def _draw_token(self, token: Collectible, image: pygame.Surface | None) -> None:
        size = max(1, int(token.width * token.scale))
        cx = token.x + token.width / 2
        cy = token.y + token.height / 2
        if image is not None:
            scaled = pygame.transform.smoothscale(image, (size, size))
            rotated = pygame.transform.rotate(scaled, -math.degrees(token.rotation))
            self.screen.blit(rotated, rotated.get_rect(center=(int(cx), int(cy))))
            return
        radius = size // 2
        pygame.draw.circle(self.screen, TOKEN_GOLD, (int(cx), int(cy)), radius)
        pygame.draw.circle(self.screen, TOKEN_EDGE, (int(cx), int(cy)), radius, 3)

    # -- Player --

    def _draw_player(self, state: GameState) -> None:
        player = state.player
        powered = state.powerup.active
        trail_color = POWERUP_COLOR if powered else ACCENT
        for index, point in enumerate(player.trail):
            _glow_circle(self.screen, trail_color, (point.x, point.y), 8 - index, point.alpha * 0.6)

        w, h = int(player.width), int(player.height)
        image = self.assets.get("player")
        if image is not None:
            sprite = pygame.transform.smoothscale(image, (w, h))
        else:
            sprite = self._procedural_cow(w, h, powered)
        rotated = pygame.transform.rotate(sprite, -math.degrees(player.rotation))
        cx, cy = player.center
        self.screen.blit(rotated, rotated.get_rect(center=(int(cx), int(cy))))

        if powered:
            glow = pygame.Rect(int(player.x) - 5, int(player.y) - 5, w + 10, h + 10)
            pygame.draw.rect(self.screen, POWERUP_COLOR, glow, 3)

    @staticmethod
    def _procedural_cow(w: int, h: int, powered: bool) -> pygame.Surface:
        surf = _alpha_surface((w, h))
        body = COW_BODY_POWERED if powered else COW_BODY
        spots = COW_SPOTS_POWERED if powered else COW_SPOTS
        sx, sy = w / 60, h / 50
        ox, oy = w / 2, h / 2

        def rect(x: float, y: float, rw: float, rh: float) -> pygame.Rect:
            return pygame.Rect(int(ox + x * sx), int(oy + y * sy), int(rw * sx), int(rh * sy))

        pygame.draw.rect(surf, body, rect(-25, -20, 40, 25))
        pygame.draw.rect(surf, body, rect(-30, -25, 20, 15))
        for x, y, r in ((-15, -10, 4), (-5, -5, 3), (10, -15, 5)):
            pygame.draw.circle(surf, spots, (int(ox + x * sx), int(oy + y * sy)), int(r * sx))
        pygame.draw.rect(surf, COW_SPOTS, rect(-28, -22, 2, 2))
        pygame.draw.rect(surf, COW_SPOTS, rect(-24, -22, 2, 2))
        for x in (-20, -10, 0, 10):
            pygame.draw.rect(surf, body, rect(x, 5, 4, 8))
        return surf

    # -- Effects --

    def _draw_particles(self, state: GameState) -> None:
        for p in state.particles:
            _glow_circle(self.screen, p.color, (p.x, p.y), p.size, p.alpha)

    def _draw_powerup_border(self, state: GameState, frame: int) -> None:
        config = state.config
        alpha = 0.3 + math.sin(frame * 0.16) * 0.2
        surf = _alpha_surface((int(config.width), int(config.height)))
        pygame.draw.rect(surf, (*POWERUP_COLOR, int(alpha * 255)), surf.get_rect(), 8)
        self.screen.blit(surf, (0, 0))
