"""tick-lawn - a fixed-tick lawn defense simulation."""

from tick_lawn.clock import Clock
from tick_lawn.config import Rules
from tick_lawn.engine import Engine
from tick_lawn.grid import LawnGrid
from tick_lawn.types import (
    DeadEntityError,
    EntityId,
    Placement,
    PlantKind,
    RejectReason,
    TickContext,
)
from tick_lawn.view import GameView, PeaView, PlantView, ZombieView
from tick_lawn.world import World

__all__ = [
    "Engine",
    "Rules",
    "World",
    "Clock",
    "LawnGrid",
    "TickContext",
    "EntityId",
    "PlantKind",
    "RejectReason",
    "Placement",
    "DeadEntityError",
    "GameView",
    "PlantView",
    "ZombieView",
    "PeaView",
]
