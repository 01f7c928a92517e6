"""Shared type aliases, enums and errors for the lawn simulation."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


class PlantKind(enum.Enum):
    GENERATOR = "generator"
    SHOOTER = "shooter"


class RejectReason(enum.Enum):
    """Why a placement request was refused."""

    NO_KIND_SELECTED = "no_kind_selected"
    GAME_OVER = "game_over"
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    INSUFFICIENT_RESOURCE = "insufficient_resource"


@dataclass(frozen=True, slots=True)
class Placement:
    """Outcome of a placement request. Truthy when the plant was placed."""

    reason: RejectReason | None = None
    entity_id: EntityId | None = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.accepted


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt_ms: int
    elapsed_ms: int
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from tick_lawn.world import World

System = Callable[["World", TickContext], None]
