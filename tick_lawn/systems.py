"""Update pipeline - the five per-tick stages of the lawn simulation.

Each factory returns a system ``(world, ctx) -> None``. Every stage reads the
collections it needs into a list first and commits its mutations after the
read pass, so no stage observes its own partial updates. All stages are
no-ops once the game state is terminal.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_lawn.components import Pea, Plant, Position, Zombie
from tick_lawn.types import PlantKind, System

if TYPE_CHECKING:
    from tick_lawn.config import Rules
    from tick_lawn.grid import LawnGrid
    from tick_lawn.state import GameState
    from tick_lawn.types import TickContext
    from tick_lawn.world import World

logger = logging.getLogger(__name__)


def in_hit_range(a: Position, b: Position, distance: float) -> bool:
    """True when a and b are closer than distance on both axes."""
    return abs(a.x - b.x) < distance and abs(a.y - b.y) < distance


def make_zombie_system(state: GameState, rules: Rules) -> System:
    """Stage 1: advance zombies, detect the loss, prune far-gone zombies."""

    def zombie_system(world: World, ctx: TickContext) -> None:
        if state.terminal:
            return
        moved = [
            (eid, pos, pos.x - rules.zombie_speed)
            for eid, (_, pos) in world.query(Zombie, Position)
        ]
        # Crossing the left edge loses the game, whether or not the zombie
        # is pruned below.
        crossed = any(x < 0 for _, _, x in moved)

        for eid, pos, x in moved:
            if x <= rules.despawn_x:
                world.despawn(eid)
            else:
                pos.x = x

        if crossed and state.end():
            logger.info(
                f"Zombie reached the house at tick {ctx.tick_number}; "
                f"game over with score {state.score}"
            )

    return zombie_system


def make_pea_system(state: GameState, rules: Rules) -> System:
    """Stage 2: advance peas and prune those past the far bound."""

    def pea_system(world: World, ctx: TickContext) -> None:
        if state.terminal:
            return
        for eid, (_, pos) in list(world.query(Pea, Position)):
            x = pos.x + rules.pea_speed
            if x >= rules.field_end:
                world.despawn(eid)
            else:
                pos.x = x

    return pea_system


def make_collision_system(state: GameState, rules: Rules) -> System:
    """Stage 3: resolve pea hits, remove dead zombies, award score.

    Each pea hits at most the first zombie in range. Zombies whose health
    reaches zero during the pass still absorb later peas in the same pass.
    """

    def collision_system(world: World, ctx: TickContext) -> None:
        if state.terminal:
            return
        peas = list(world.query(Pea, Position))
        zombies = list(world.query(Zombie, Position))
        if not peas or not zombies:
            return

        damage: dict[int, int] = {}
        spent: list[int] = []
        for pea_id, (_, pea_pos) in peas:
            for zombie_id, (_, zombie_pos) in zombies:
                if in_hit_range(pea_pos, zombie_pos, rules.hit_distance):
                    damage[zombie_id] = damage.get(zombie_id, 0) + rules.pea_damage
                    spent.append(pea_id)
                    break

        for pea_id in spent:
            world.despawn(pea_id)

        kills = 0
        for zombie_id, (zombie, _) in zombies:
            zombie.health -= damage.get(zombie_id, 0)
            if zombie.health <= 0:
                world.despawn(zombie_id)
                kills += 1

        if kills:
            state.score += kills * rules.kill_score
            logger.debug(
                f"Tick {ctx.tick_number}: {kills} zombie(s) killed, "
                f"score {state.score}"
            )

    return collision_system


def make_shooter_system(
    state: GameState, rules: Rules, grid: LawnGrid
) -> System:
    """Stage 4: every shooter fires one pea per zombie ahead of it in its lane."""

    def shooter_system(world: World, ctx: TickContext) -> None:
        if state.terminal:
            return
        shooters = [
            (plant, pos)
            for _, (plant, pos) in world.query(Plant, Position)
            if plant.kind is PlantKind.SHOOTER
        ]
        zombies = [zp for _, zp in world.query(Zombie, Position)]

        volley: list[tuple[Pea, Position]] = []
        for plant, plant_pos in shooters:
            lane_y = grid.lane_center(plant.row)
            for zombie, zombie_pos in zombies:
                if (
                    abs(lane_y - zombie_pos.y) < rules.lane_tolerance
                    and zombie_pos.x > plant_pos.x
                ):
                    volley.append((
                        Pea(target_row=zombie.row),
                        Position(plant_pos.x + grid.cell_width, lane_y),
                    ))

        for pea, pos in volley:
            world.spawn(pea, pos)

    return shooter_system


def make_sun_system(state: GameState, rules: Rules) -> System:
    """Stage 5: each generator may accrue sun, independently per tick."""

    def sun_system(world: World, ctx: TickContext) -> None:
        if state.terminal:
            return
        gain = 0
        for _, (plant,) in world.query(Plant):
            if (
                plant.kind is PlantKind.GENERATOR
                and ctx.random.random() < rules.sun_chance
            ):
                gain += rules.sun_amount
        state.balance += gain

    return sun_system


def make_pipeline(
    state: GameState, rules: Rules, grid: LawnGrid
) -> list[System]:
    """The five stages in execution order."""
    return [
        make_zombie_system(state, rules),
        make_pea_system(state, rules),
        make_collision_system(state, rules),
        make_shooter_system(state, rules, grid),
        make_sun_system(state, rules),
    ]
