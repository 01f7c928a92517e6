"""Layout and color constants for the lawn example."""
from tick_lawn import PlantKind, Rules

RULES = Rules()

GRID_W = RULES.columns * RULES.cell_width
GRID_H = RULES.rows * RULES.cell_height
HUD_H = 32
STATUS_H = 28
SCREEN_W = GRID_W
SCREEN_H = HUD_H + GRID_H + STATUS_H

FPS = 60

LAWN_COLOR = (135, 206, 235)
GRID_LINE_COLOR = (221, 221, 221)
PLANT_COLORS = {
    PlantKind.GENERATOR: (255, 215, 0),
    PlantKind.SHOOTER: (0, 170, 0),
}
ZOMBIE_COLOR = (136, 136, 136)
PEA_COLOR = (144, 238, 144)

PLANT_KEYS = {
    "1": PlantKind.GENERATOR,
    "2": PlantKind.SHOOTER,
}
PLANT_LABELS = {
    PlantKind.GENERATOR: "Sunflower",
    PlantKind.SHOOTER: "Peashooter",
}
