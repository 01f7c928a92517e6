"""Periodic timer and the system factory that drives it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_lawn.types import TickContext
    from tick_lawn.world import World


@dataclass
class Periodic:
    """Recurring timer. Fires every `interval` ticks."""

    name: str
    interval: int
    elapsed: int = 0

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError("interval must be positive")

    def restart(self) -> None:
        self.elapsed = 0


def make_periodic_system(
    periodic: Periodic,
    on_fire: Callable[[World, TickContext, Periodic], None],
) -> Callable[[World, TickContext], None]:
    """Return a system that counts ticks and calls on_fire every interval."""

    def periodic_system(world: World, ctx: TickContext) -> None:
        periodic.elapsed += 1
        if periodic.elapsed >= periodic.interval:
            on_fire(world, ctx, periodic)
            periodic.elapsed = 0

    return periodic_system
