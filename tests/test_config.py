"""Tests for Rules defaults and validation."""

import dataclasses

import pytest

from tick_lawn.config import Rules
from tick_lawn.types import PlantKind


def test_defaults_match_classic_lawn():
    rules = Rules()
    assert (rules.columns, rules.rows) == (9, 5)
    assert (rules.cell_width, rules.cell_height) == (80, 100)
    assert rules.tick_ms == 50
    assert rules.spawn_period_ms == 2000
    assert rules.zombie_cap == 10
    assert rules.zombie_health == 100
    assert rules.pea_damage == 20
    assert rules.starting_balance == 100


def test_cost():
    rules = Rules()
    assert rules.cost(PlantKind.GENERATOR) == 50
    assert rules.cost(PlantKind.SHOOTER) == 100


def test_derived_timing():
    rules = Rules()
    assert rules.spawn_interval_ticks == 40


def test_rules_are_frozen():
    rules = Rules()
    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.zombie_cap = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"columns": 0},
        {"cell_height": -1},
        {"tick_ms": 0},
        {"spawn_period_ms": 75},
        {"spawn_period_ms": 0},
        {"zombie_cap": -1},
        {"sun_chance": 1.5},
        {"zombie_health": 0},
        {"pea_damage": 0},
        {"pea_damage": -20},
        {"zombie_speed": 0.0},
        {"pea_speed": -5.0},
        {"hit_distance": 0.0},
        {"lane_tolerance": 0.0},
        {"generator_cost": -1},
        {"shooter_cost": -100},
        {"sun_amount": -25},
        {"kill_score": -10},
        {"starting_balance": -1},
    ],
)
def test_invalid_rules_raise(overrides):
    with pytest.raises(ValueError):
        Rules(**overrides)


def test_zero_costs_and_rewards_are_allowed():
    rules = Rules(generator_cost=0, shooter_cost=0, sun_amount=0, kill_score=0)
    assert rules.cost(PlantKind.SHOOTER) == 0


def test_cost_of_unknown_kind_raises():
    with pytest.raises(ValueError):
        Rules().cost("generator")  # type: ignore[arg-type]
