"""Tests for engine system ordering, stop requests, and seeding."""

from unittest.mock import patch

from lamumu.config import GameConfig
from lamumu.engine import Engine
from lamumu.state import new_state


def _state(engine):
    return new_state(GameConfig(star_count=0, initial_decorations=0), engine.random)


def test_engine_init_defaults():
    engine = Engine(seed=1)
    assert engine.clock.tps == 60
    assert engine.clock.tick_number == 0
    assert engine.seed == 1


def test_systems_run_in_order():
    engine = Engine(seed=1)
    state = _state(engine)
    order = []
    engine.add_system(lambda s, c: order.append("first"))
    engine.add_system(lambda s, c: order.append("second"))
    engine.add_system(lambda s, c: order.append("third"))
    engine.step(state)
    assert order == ["first", "second", "third"]


def test_system_receives_state_and_context():
    engine = Engine(seed=1)
    state = _state(engine)
    seen = []
    engine.add_system(lambda s, c: seen.append((s, c.tick_number)))
    engine.step(state)
    engine.step(state)
    assert seen == [(state, 1), (state, 2)]


def test_request_stop_skips_rest_of_tick():
    engine = Engine(seed=1)
    state = _state(engine)
    calls = []

    def stopper(s, ctx):
        calls.append("stopper")
        ctx.request_stop()

    engine.add_system(stopper)
    engine.add_system(lambda s, c: calls.append("after"))
    engine.step(state)
    assert calls == ["stopper"]

    # The next step starts clean.
    engine.step(state)
    assert calls == ["stopper", "stopper"]


def test_run_stops_early_on_request():
    engine = Engine(seed=1)
    state = _state(engine)

    def stop_at_3(s, ctx):
        if ctx.tick_number == 3:
            ctx.request_stop()

    engine.add_system(stop_at_3)
    assert engine.run(state, 10) == 3
    assert engine.clock.tick_number == 3


def test_run_zero_ticks():
    engine = Engine(seed=1)
    state = _state(engine)
    assert engine.run(state, 0) == 0
    assert engine.clock.tick_number == 0


def test_same_seed_same_random_sequence():
    a = Engine(seed=99)
    b = Engine(seed=99)
    assert [a.random.random() for _ in range(5)] == [b.random.random() for _ in range(5)]


def test_seed_generated_when_omitted():
    engine = Engine()
    assert isinstance(engine.seed, int)


def test_run_forever_paces_and_stops():
    engine = Engine(tps=10, seed=1)
    state = _state(engine)
    ticks = []
    engine.add_system(lambda s, c: ticks.append(c.tick_number))

    with patch("lamumu.engine.time.sleep") as sleep:
        engine.run_forever(state, lambda s: len(ticks) < 3)

    assert ticks == [1, 2, 3]
    assert sleep.call_count == 3
