"""Lawn defense - play the tick-lawn simulation with pygame."""
from __future__ import annotations

import logging
import sys

import pygame

from tick_lawn import Engine, RejectReason

from ui.constants import FPS, HUD_H, PLANT_KEYS, PLANT_LABELS, RULES, SCREEN_H, SCREEN_W
from ui.hud import StatusBar, draw_game_over, draw_top_bar
from ui.renderer import draw_entities, draw_lawn

REJECT_MESSAGES = {
    RejectReason.NO_KIND_SELECTED: "Pick a plant first (1 or 2)",
    RejectReason.GAME_OVER: "Game over - press R",
    RejectReason.OUT_OF_BOUNDS: "That is not on the lawn",
    RejectReason.CELL_OCCUPIED: "That cell is taken",
    RejectReason.INSUFFICIENT_RESOURCE: "Not enough sun",
}


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Lawn Defense")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)

    engine = Engine(rules=RULES)
    status = StatusBar()

    # Tick accumulator for fixed-rate engine steps
    tick_interval = engine.clock.dt
    accumulator = 0.0

    running = True
    while running:
        accumulator += clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    engine.reset()
                    status.set("New game", (100, 255, 100))
                elif event.unicode in PLANT_KEYS:
                    kind = PLANT_KEYS[event.unicode]
                    engine.select(kind)
                    status.set(f"Selected: {PLANT_LABELS[kind]}")

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = engine.grid.cell_at(event.pos[0], event.pos[1] - HUD_H)
                if cell is None:
                    continue
                result = engine.place_plant(*cell)
                if result:
                    status.set(f"Planted at {cell}", (100, 255, 100))
                else:
                    status.set(REJECT_MESSAGES[result.reason], (255, 80, 80))

        # --- Step engine at fixed rate ---
        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        # --- Render ---
        view = engine.view()
        screen.fill((20, 20, 30))
        draw_top_bar(screen, font, view, engine.counts())
        draw_lawn(screen, engine.grid)
        draw_entities(screen, view, engine.grid)
        if view.terminal:
            draw_game_over(screen, font, view.score)
        status.draw(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
