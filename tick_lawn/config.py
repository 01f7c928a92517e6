"""Rules - the fixed constants of a lawn game."""
from __future__ import annotations

from dataclasses import dataclass

from tick_lawn.types import PlantKind


@dataclass(frozen=True)
class Rules:
    """Immutable game constants. Defaults reproduce the classic lawn.

    Attributes:
        columns, rows: Grid size in cells.
        cell_width, cell_height: Cell size in world units.
        field_end: Far (right) bound. Zombies spawn here, peas are pruned here.
        despawn_x: Zombies at or past this x are pruned.
        tick_ms: Update pipeline period.
        spawn_period_ms: Spawn controller period. Must be a multiple of tick_ms.
        zombie_cap: Maximum live zombies.
        zombie_health: Health of a fresh zombie.
        zombie_speed: Units a zombie moves left per tick.
        pea_speed: Units a pea moves right per tick.
        pea_damage: Health removed per hit.
        hit_distance: Per-axis proximity for a pea to hit a zombie.
        lane_tolerance: Vertical distance within which a shooter sees a zombie.
        generator_cost, shooter_cost: Placement prices.
        sun_amount: Resource added by one generator accrual.
        sun_chance: Per-generator, per-tick accrual probability.
        kill_score: Score per zombie killed.
        starting_balance: Resource balance of a new game.
    """

    columns: int = 9
    rows: int = 5
    cell_width: int = 80
    cell_height: int = 100
    field_end: float = 800.0
    despawn_x: float = -50.0
    tick_ms: int = 50
    spawn_period_ms: int = 2000
    zombie_cap: int = 10
    zombie_health: int = 100
    zombie_speed: float = 1.0
    pea_speed: float = 5.0
    pea_damage: int = 20
    hit_distance: float = 30.0
    lane_tolerance: float = 50.0
    generator_cost: int = 50
    shooter_cost: int = 100
    sun_amount: int = 25
    sun_chance: float = 0.02
    kill_score: int = 10
    starting_balance: int = 100

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError("grid must have at least one column and one row")
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("cell size must be positive")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if self.spawn_period_ms <= 0 or self.spawn_period_ms % self.tick_ms:
            raise ValueError(
                f"spawn_period_ms must be a positive multiple of tick_ms "
                f"({self.tick_ms}), got {self.spawn_period_ms}"
            )
        if self.zombie_cap < 0:
            raise ValueError("zombie_cap must not be negative")
        if not 0.0 <= self.sun_chance <= 1.0:
            raise ValueError("sun_chance must be within [0, 1]")
        for name in (
            "zombie_health", "pea_damage", "zombie_speed", "pea_speed",
            "hit_distance", "lane_tolerance",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in (
            "generator_cost", "shooter_cost", "sun_amount",
            "kill_score", "starting_balance",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def spawn_interval_ticks(self) -> int:
        return self.spawn_period_ms // self.tick_ms

    def cost(self, kind: PlantKind) -> int:
        if kind is PlantKind.GENERATOR:
            return self.generator_cost
        if kind is PlantKind.SHOOTER:
            return self.shooter_cost
        raise ValueError(f"Unknown plant kind {kind!r}")
