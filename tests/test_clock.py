"""Tests for clock advancement and TickContext generation."""

import random

import pytest

from tick_lawn.clock import Clock
from tick_lawn.types import TickContext

_test_rng = random.Random(0)


def test_clock_initialization():
    clock = Clock(period_ms=50)
    assert clock.period_ms == 50
    assert clock.tick_number == 0
    assert clock.elapsed_ms == 0
    assert abs(clock.dt - 0.05) < 1e-9


def test_invalid_period_raises():
    with pytest.raises(ValueError):
        Clock(period_ms=0)
    with pytest.raises(ValueError):
        Clock(period_ms=-50)


def test_advance_returns_new_tick_number():
    clock = Clock(period_ms=50)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.elapsed_ms == 100


def test_context_reflects_clock():
    clock = Clock(period_ms=50)
    clock.advance()
    clock.advance()
    clock.advance()
    ctx = clock.context(_test_rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 3
    assert ctx.dt_ms == 50
    assert ctx.elapsed_ms == 150
    assert ctx.random is _test_rng


def test_context_is_immutable():
    ctx = Clock(period_ms=50).context(_test_rng)
    with pytest.raises(AttributeError):
        ctx.tick_number = 99  # type: ignore[misc]


def test_reset():
    clock = Clock(period_ms=50)
    for _ in range(5):
        clock.advance()
    clock.reset()
    assert clock.tick_number == 0
    clock.reset(10)
    assert clock.elapsed_ms == 500
