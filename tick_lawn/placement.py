"""Placement authority - validates and commits plant placement."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_lawn.components import Plant, Position
from tick_lawn.types import Placement, PlantKind, RejectReason

if TYPE_CHECKING:
    from tick_lawn.config import Rules
    from tick_lawn.grid import LawnGrid
    from tick_lawn.state import GameState
    from tick_lawn.world import World

logger = logging.getLogger(__name__)


def occupied(world: World, column: int, row: int) -> bool:
    return any(
        plant.column == column and plant.row == row
        for _, (plant,) in world.query(Plant)
    )


def check_placement(
    world: World,
    state: GameState,
    grid: LawnGrid,
    rules: Rules,
    column: int,
    row: int,
    kind: PlantKind | None,
) -> RejectReason | None:
    """Return why a placement would fail, or None if it would succeed."""
    if state.terminal:
        return RejectReason.GAME_OVER
    if not isinstance(kind, PlantKind):
        return RejectReason.NO_KIND_SELECTED
    if not grid.contains(column, row):
        return RejectReason.OUT_OF_BOUNDS
    if occupied(world, column, row):
        return RejectReason.CELL_OCCUPIED
    if state.balance < rules.cost(kind):
        return RejectReason.INSUFFICIENT_RESOURCE
    return None


def place_plant(
    world: World,
    state: GameState,
    grid: LawnGrid,
    rules: Rules,
    column: int,
    row: int,
    kind: PlantKind | None = None,
) -> Placement:
    """Place a plant of ``kind`` (or the selected kind) at (column, row).

    On rejection nothing changes and the result carries the reason.
    """
    if kind is None:
        kind = state.selected
    reason = check_placement(world, state, grid, rules, column, row, kind)
    if reason is not None:
        logger.debug(f"Rejected {kind} at ({column}, {row}): {reason.value}")
        return Placement(reason=reason)

    x, y = grid.cell_origin(column, row)
    eid = world.spawn(Plant(kind=kind, column=column, row=row), Position(x, y))
    state.balance -= rules.cost(kind)
    logger.debug(
        f"Placed {kind.value} {eid} at ({column}, {row}), "
        f"balance {state.balance}"
    )
    return Placement(entity_id=eid)
