"""Engine - owns the lawn state, drives the pipeline and the spawner."""

import logging
import os
import random
import time
from typing import Callable

from tick_lawn.clock import Clock
from tick_lawn.components import Pea, Plant, Zombie
from tick_lawn.config import Rules
from tick_lawn.grid import LawnGrid
from tick_lawn.placement import place_plant
from tick_lawn.schedule import Periodic, make_periodic_system
from tick_lawn.spawner import try_spawn_zombie
from tick_lawn.state import GameState
from tick_lawn.systems import make_pipeline
from tick_lawn.types import EntityId, Placement, PlantKind, System, TickContext
from tick_lawn.view import (
    GameView,
    PeaView,
    PlantView,
    ZombieView,
    pea_views,
    plant_views,
    zombie_views,
)
from tick_lawn.world import World

logger = logging.getLogger(__name__)


class Engine:
    """Single writer for one game.

    The update pipeline and the spawn timer are both dispatched from
    ``step()``, and placement requests are applied synchronously, so every
    mutation happens on the thread that drives the engine.
    """

    def __init__(self, rules: Rules | None = None, seed: int | None = None) -> None:
        self._rules = rules if rules is not None else Rules()
        self._clock = Clock(self._rules.tick_ms)
        self._world = World()
        self._grid = LawnGrid(
            self._rules.columns,
            self._rules.rows,
            self._rules.cell_width,
            self._rules.cell_height,
        )
        self._state = GameState(balance=self._rules.starting_balance)
        self._pipeline: list[System] = make_pipeline(
            self._state, self._rules, self._grid
        )
        self._spawn_timer = Periodic(
            name="spawn", interval=self._rules.spawn_interval_ticks
        )
        self._spawn_driver = make_periodic_system(
            self._spawn_timer, lambda world, ctx, periodic: self.try_spawn_zombie()
        )
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def rules(self) -> Rules:
        return self._rules

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def grid(self) -> LawnGrid:
        return self._grid

    @property
    def seed(self) -> int:
        return self._seed

    # -- Read-only state --

    @property
    def balance(self) -> int:
        return self._state.balance

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def terminal(self) -> bool:
        return self._state.terminal

    @property
    def selected(self) -> PlantKind | None:
        return self._state.selected

    def plants(self) -> tuple[PlantView, ...]:
        return plant_views(self._world)

    def zombies(self) -> tuple[ZombieView, ...]:
        return zombie_views(self._world)

    def peas(self) -> tuple[PeaView, ...]:
        return pea_views(self._world)

    def view(self) -> GameView:
        return GameView(
            tick_number=self._clock.tick_number,
            balance=self._state.balance,
            score=self._state.score,
            terminal=self._state.terminal,
            selected=self._state.selected,
            plants=self.plants(),
            zombies=self.zombies(),
            peas=self.peas(),
        )

    # -- Operations --

    def select(self, kind: PlantKind | None) -> None:
        self._state.selected = kind

    def place_plant(
        self, column: int, row: int, kind: PlantKind | None = None
    ) -> Placement:
        return place_plant(
            self._world, self._state, self._grid, self._rules, column, row, kind
        )

    def try_spawn_zombie(self, row: int | None = None) -> EntityId | None:
        return try_spawn_zombie(
            self._world, self._state, self._grid, self._rules, self._rng, row
        )

    def reset(self) -> None:
        self._world.clear()
        self._state.restart(self._rules.starting_balance)
        self._spawn_timer.restart()
        self._clock.reset()
        logger.info("Lawn reset")

    # -- Driving --

    def _context(self) -> TickContext:
        return self._clock.context(self._rng)

    def tick(self) -> None:
        """Advance one period and run the update pipeline once."""
        self._clock.advance()
        ctx = self._context()
        for system in self._pipeline:
            system(self._world, ctx)

    def step(self) -> None:
        """One scheduler step: the pipeline, then the spawn timer."""
        self.tick()
        self._spawn_driver(self._world, self._context())

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def stop(self) -> None:
        self._stop_requested = True

    def run_forever(self, should_continue: Callable[[], bool] | None = None) -> None:
        """Step at the tick period until stop() or should_continue() is False."""
        self._stop_requested = False
        dt = self._clock.dt
        while not self._stop_requested:
            if should_continue is not None and not should_continue():
                break
            start = time.monotonic()
            self.step()
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

    def counts(self) -> tuple[int, int, int]:
        """(plants, zombies, peas) currently alive."""
        return (
            self._world.count(Plant),
            self._world.count(Zombie),
            self._world.count(Pea),
        )
