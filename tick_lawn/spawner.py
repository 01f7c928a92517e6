"""Spawn controller - injects zombies at the far edge of the lawn."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from tick_lawn.components import Position, Zombie
from tick_lawn.types import EntityId

if TYPE_CHECKING:
    from tick_lawn.config import Rules
    from tick_lawn.grid import LawnGrid
    from tick_lawn.state import GameState
    from tick_lawn.world import World

logger = logging.getLogger(__name__)


def spawn_zombie(
    world: World, grid: LawnGrid, rules: Rules, row: int
) -> EntityId:
    """Create a full-health zombie at the far bound of ``row``. No guards."""
    if not 0 <= row < grid.rows:
        raise ValueError(f"row {row} out of range for {grid.rows} lanes")
    return world.spawn(
        Zombie(row=row, health=rules.zombie_health),
        Position(rules.field_end, grid.lane_center(row)),
    )


def try_spawn_zombie(
    world: World,
    state: GameState,
    grid: LawnGrid,
    rules: Rules,
    rng: random.Random,
    row: int | None = None,
) -> EntityId | None:
    """Spawn one zombie unless the game is over or the lawn is at capacity.

    The lane is drawn uniformly from ``rng`` when ``row`` is None. Returns the
    new entity id, or None when nothing was spawned.
    """
    if state.terminal:
        return None
    if world.count(Zombie) >= rules.zombie_cap:
        return None
    if row is None:
        row = rng.randrange(grid.rows)
    eid = spawn_zombie(world, grid, rules, row)
    logger.debug(f"Spawned zombie {eid} in lane {row}")
    return eid
