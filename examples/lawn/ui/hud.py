"""HUD - sun/score bar, status line and the game-over overlay."""
from __future__ import annotations

import pygame

from tick_lawn import GameView

from ui.constants import GRID_H, GRID_W, HUD_H, PLANT_LABELS, SCREEN_W, STATUS_H


def draw_top_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    view: GameView,
    counts: tuple[int, int, int],
) -> None:
    pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, 0, SCREEN_W, HUD_H))
    selected = PLANT_LABELS.get(view.selected, "none")
    text = font.render(
        f"Sun: {view.balance}   Score: {view.score}   "
        f"Zombies: {counts[1]}   Selected: {selected}",
        True, (255, 255, 255),
    )
    surface.blit(text, (8, 8))


class StatusBar:
    """Displays messages at the bottom of the screen."""

    def __init__(self) -> None:
        self._message = "1: Sunflower (50)  2: Peashooter (100)  R: restart"
        self._color = (200, 200, 200)

    def set(self, message: str, color: tuple[int, int, int] = (200, 200, 200)) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        top = HUD_H + GRID_H
        pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, top, SCREEN_W, STATUS_H))
        if self._message:
            surface.blit(font.render(self._message, True, self._color), (8, top + 6))


def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    """Semi-transparent overlay over the lawn with the final score."""
    overlay = pygame.Surface((GRID_W, GRID_H), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    surface.blit(overlay, (0, HUD_H))

    center = (GRID_W // 2, HUD_H + GRID_H // 2)
    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    text = big_font.render("GAME OVER", True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=center))

    hint = font.render(f"Final score: {score}  -  R to play again", True, (200, 200, 200))
    surface.blit(hint, hint.get_rect(center=(center[0], center[1] + 34)))
