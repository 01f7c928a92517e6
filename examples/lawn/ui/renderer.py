"""Lawn, plant, zombie and pea rendering."""
from __future__ import annotations

import pygame

from tick_lawn import GameView, LawnGrid, PlantKind

from ui.constants import (
    GRID_H, GRID_LINE_COLOR, GRID_W, HUD_H, LAWN_COLOR,
    PEA_COLOR, PLANT_COLORS, RULES, ZOMBIE_COLOR,
)


def draw_lawn(surface: pygame.Surface, grid: LawnGrid) -> None:
    """Draw the lawn background and cell lines."""
    pygame.draw.rect(surface, LAWN_COLOR, pygame.Rect(0, HUD_H, GRID_W, GRID_H))
    for c in range(grid.columns + 1):
        x = c * grid.cell_width
        pygame.draw.line(surface, GRID_LINE_COLOR, (x, HUD_H), (x, HUD_H + GRID_H))
    for r in range(grid.rows + 1):
        y = HUD_H + r * grid.cell_height
        pygame.draw.line(surface, GRID_LINE_COLOR, (0, y), (GRID_W, y))


def draw_entities(surface: pygame.Surface, view: GameView, grid: LawnGrid) -> None:
    """Draw plants, zombies and peas from a snapshot."""
    cw, ch = grid.cell_width, grid.cell_height
    for plant in view.plants:
        color = PLANT_COLORS[plant.kind]
        x, y = int(plant.x), int(plant.y) + HUD_H
        if plant.kind is PlantKind.GENERATOR:
            pygame.draw.circle(surface, color, (x + cw // 2, y + ch // 2), 20)
        else:
            pygame.draw.rect(surface, color, pygame.Rect(x + 15, y + 15, 50, 70))

    for zombie in view.zombies:
        x, y = int(zombie.x), int(zombie.y) + HUD_H
        pygame.draw.rect(surface, ZOMBIE_COLOR, pygame.Rect(x - 15, y - 25, 30, 50))
        pygame.draw.circle(surface, (0, 0, 0), (x - 5, y - 15), 5)
        pygame.draw.circle(surface, (0, 0, 0), (x + 5, y - 15), 5)
        # Health bar
        frac = max(zombie.health, 0) / RULES.zombie_health
        pygame.draw.rect(surface, (200, 40, 40), pygame.Rect(x - 15, y - 32, int(30 * frac), 4))

    for pea in view.peas:
        pygame.draw.circle(surface, PEA_COLOR, (int(pea.x), int(pea.y) + HUD_H), 5)
