"""End-to-end lawn scenarios."""

from tick_lawn import Engine, PlantKind, RejectReason, Rules
from tick_lawn.components import Position


def test_placement_scenario():
    engine = Engine(seed=1)
    assert engine.place_plant(0, 0, PlantKind.GENERATOR)
    assert engine.balance == 50

    occupied = engine.place_plant(0, 0, PlantKind.SHOOTER)
    assert occupied.reason is RejectReason.CELL_OCCUPIED

    broke = engine.place_plant(1, 0, PlantKind.SHOOTER)
    assert broke.reason is RejectReason.INSUFFICIENT_RESOURCE
    assert engine.balance == 50
    assert len(engine.plants()) == 1


def test_shooter_kills_zombie_in_five_hits():
    engine = Engine(seed=1)
    assert engine.place_plant(0, 2, PlantKind.SHOOTER)
    zombie_id = engine.try_spawn_zombie(row=2)

    healths = {}
    for tick in range(1, 121):
        engine.tick()
        zombies = engine.zombies()
        healths[tick] = zombies[0].health if zombies else None
        if tick < 116:
            # One new pea every tick, none has landed yet.
            assert len(engine.peas()) == tick

    assert healths[115] == 100
    assert [healths[t] for t in range(116, 120)] == [80, 60, 40, 20]
    assert healths[120] is None
    assert engine.score == 10
    assert all(z.id != zombie_id for z in engine.zombies())
    # 119 peas fired, five spent on hits.
    assert len(engine.peas()) == 114

    # With nothing to shoot at, the remaining peas fly off the lawn.
    for _ in range(200):
        engine.tick()
    assert engine.peas() == ()
    assert engine.score == 10


def test_zombie_reaching_house_ends_game():
    engine = Engine(seed=1)
    engine.try_spawn_zombie(row=4)
    for _ in range(800):
        engine.tick()
    assert engine.zombies()[0].x == 0.0
    assert not engine.terminal

    engine.tick()
    assert engine.terminal

    frozen = engine.view()
    engine.run(100)
    after = engine.view()
    assert engine.terminal is True
    assert after.terminal is True
    assert after.zombies == frozen.zombies
    assert after.balance == frozen.balance
    assert engine.place_plant(0, 0, PlantKind.GENERATOR).reason is RejectReason.GAME_OVER
    assert engine.try_spawn_zombie() is None


def test_loss_tick_skips_remaining_stages():
    engine = Engine(rules=Rules(sun_chance=1.0), seed=1)
    engine.place_plant(0, 0, PlantKind.GENERATOR)
    engine.place_plant(1, 1, PlantKind.GENERATOR)
    balance = engine.balance
    zombie_id = engine.try_spawn_zombie(row=0)
    engine.world.get(zombie_id, Position).x = 0.5
    engine.tick()
    assert engine.terminal
    assert engine.balance == balance


def test_population_cap_under_many_spawn_attempts():
    engine = Engine(seed=5)
    for _ in range(50):
        engine.try_spawn_zombie()
    assert len(engine.zombies()) == 10
    # The spawn timer keeps firing while at cap.
    engine.run(400)
    assert len(engine.zombies()) == 10


def test_generators_fund_more_plants():
    engine = Engine(rules=Rules(sun_chance=1.0), seed=2)
    assert engine.place_plant(0, 0, PlantKind.GENERATOR)
    engine.tick()
    engine.tick()
    assert engine.balance == 100
    assert engine.place_plant(1, 0, PlantKind.SHOOTER)
    assert engine.balance == 0
