"""Read-only snapshots of the simulation for renderers and HUDs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_lawn.components import Pea, Plant, Position, Zombie
from tick_lawn.types import EntityId, PlantKind

if TYPE_CHECKING:
    from tick_lawn.world import World


@dataclass(frozen=True, slots=True)
class PlantView:
    id: EntityId
    kind: PlantKind
    column: int
    row: int
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ZombieView:
    id: EntityId
    row: int
    x: float
    y: float
    health: int


@dataclass(frozen=True, slots=True)
class PeaView:
    id: EntityId
    target_row: int
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class GameView:
    tick_number: int
    balance: int
    score: int
    terminal: bool
    selected: PlantKind | None
    plants: tuple[PlantView, ...]
    zombies: tuple[ZombieView, ...]
    peas: tuple[PeaView, ...]


def plant_views(world: World) -> tuple[PlantView, ...]:
    return tuple(
        PlantView(eid, plant.kind, plant.column, plant.row, pos.x, pos.y)
        for eid, (plant, pos) in world.query(Plant, Position)
    )


def zombie_views(world: World) -> tuple[ZombieView, ...]:
    return tuple(
        ZombieView(eid, zombie.row, pos.x, pos.y, zombie.health)
        for eid, (zombie, pos) in world.query(Zombie, Position)
    )


def pea_views(world: World) -> tuple[PeaView, ...]:
    return tuple(
        PeaView(eid, pea.target_row, pos.x, pos.y)
        for eid, (pea, pos) in world.query(Pea, Position)
    )
