"""HUD, start menu, and game-over screens."""
from __future__ import annotations

import pygame

from lamumu.hud import HudView
from lamumu.ui.constants import (
    HUD_MARGIN,
    POWERUP_BAR_BG,
    POWERUP_BAR_H,
    POWERUP_BAR_W,
    POWERUP_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)


def _dim(surface: pygame.Surface, alpha: int = 150) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def _centered(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    y: int,
    color: tuple[int, int, int] = TEXT_COLOR,
) -> None:
    surf = font.render(text, True, color)
    surface.blit(surf, surf.get_rect(center=(surface.get_width() // 2, y)))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, view: HudView) -> None:
    """Distance, tokens, and the power-up bar in the top-left corner."""
    lines = [f"Distance: {view.distance}", f"Tokens: {view.currency}"]
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT_COLOR)
        surface.blit(surf, (HUD_MARGIN, HUD_MARGIN + i * 20))

    bar = pygame.Rect(HUD_MARGIN, HUD_MARGIN + 46, POWERUP_BAR_W, POWERUP_BAR_H)
    pygame.draw.rect(surface, POWERUP_BAR_BG, bar)
    if view.powerup_active:
        fill = bar.copy()
        fill.width = int(POWERUP_BAR_W * view.powerup_fraction)
        pygame.draw.rect(surface, POWERUP_COLOR, fill)


def draw_start_screen(
    surface: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font,
) -> None:
    _dim(surface, 110)
    mid = surface.get_height() // 2
    _centered(surface, big_font, "LAMUMU SPACE", mid - 40)
    _centered(surface, font, "Enter to start", mid + 10)
    _centered(surface, font, "Space / Up / Click to boost", mid + 34, TEXT_DIM)


def draw_game_over(
    surface: pygame.Surface,
    big_font: pygame.font.Font,
    font: pygame.font.Font,
    view: HudView,
    achievements: list[str],
) -> None:
    _dim(surface)
    mid = surface.get_height() // 2
    _centered(surface, big_font, "GAME OVER", mid - 90)
    _centered(surface, font, f"Distance: {view.distance}", mid - 40)
    _centered(surface, font, f"Tokens: {view.currency}", mid - 18)
    for i, title in enumerate(achievements):
        _centered(surface, font, title, mid + 14 + i * 20, POWERUP_COLOR)
    bottom = mid + 30 + len(achievements) * 20
    _centered(surface, font, "Enter=Restart  M=Menu", bottom, TEXT_DIM)
