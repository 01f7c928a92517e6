"""Component dataclasses for plants, zombies and peas."""
from __future__ import annotations

from dataclasses import dataclass

from tick_lawn.types import PlantKind


@dataclass
class Position:
    """World coordinates. Plants sit at their cell origin."""

    x: float
    y: float


@dataclass(frozen=True)
class Plant:
    kind: PlantKind
    column: int
    row: int


@dataclass
class Zombie:
    row: int
    health: int


@dataclass(frozen=True)
class Pea:
    """A projectile. ``target_row`` is the lane of the zombie it was fired at."""

    target_row: int
