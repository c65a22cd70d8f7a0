import pytest

from typeshuffle.components.opacity import Opacity
from typeshuffle.components.tween import Tween
from typeshuffle.events.bus import EVENT_TWEEN_COMPLETE, EVENT_TWEEN_REQUEST, EventBus
from typeshuffle.systems.tween_system import TweenSystem
from typeshuffle.world import create_world

from tests.helpers import StubRandom, drive, record


def _setup(count=3, rng=None):
    bus = EventBus()
    world = create_world(rng=rng)
    TweenSystem(world, bus)
    ents = [world.create_entity(Opacity()) for _ in range(count)]
    return bus, world, ents


def _value(world, ent):
    return world.component_for_entity(ent, Opacity).value


def test_zero_duration_sets_immediately():
    bus, world, ents = _setup()
    bus.emit(EVENT_TWEEN_REQUEST, targets=ents, prop="opacity", value=0.0, duration=0.0)
    assert [_value(world, e) for e in ents] == [0.0, 0.0, 0.0]
    assert not world.get_component(Tween)


def test_linear_tween_progresses_and_completes():
    bus, world, ents = _setup(1)
    done = record(bus, EVENT_TWEEN_COMPLETE)
    bus.emit(EVENT_TWEEN_REQUEST, targets=ents, prop="opacity", value=0.0, duration=0.0)
    bus.emit(EVENT_TWEEN_REQUEST, targets=ents, prop="opacity", value=1.0, duration=0.1)
    drive(bus, 5)
    assert _value(world, ents[0]) == pytest.approx(0.5)
    drive(bus, 6)
    assert _value(world, ents[0]) == pytest.approx(1.0)
    assert not world.has_component(ents[0], Tween)
    assert done == [{"target": ents[0], "prop": "opacity", "value": 1.0}]


def test_new_request_replaces_running_tween():
    bus, world, ents = _setup(1)
    bus.emit(EVENT_TWEEN_REQUEST, targets=ents, prop="opacity", value=0.0, duration=1.0)
    drive(bus, 10)
    bus.emit(EVENT_TWEEN_REQUEST, targets=ents, prop="opacity", value=0.0, duration=0.0)
    assert _value(world, ents[0]) == 0.0
    assert not world.has_component(ents[0], Tween)


@pytest.mark.parametrize(
    "origin, expected",
    [
        ("start", [0.0, 0.5, 1.0]),
        ("end", [1.0, 0.5, 0.0]),
        ("random", [1.0, 0.5, 0.0]),  # StubRandom.shuffle reverses
    ],
)
def test_stagger_spreads_start_delays(origin, expected):
    bus, world, ents = _setup(3, rng=StubRandom())
    bus.emit(
        EVENT_TWEEN_REQUEST,
        targets=ents,
        prop="opacity",
        value=0.0,
        duration=0.5,
        stagger={"amount": 1.0, "from": origin},
    )
    delays = [world.component_for_entity(e, Tween).delay for e in ents]
    assert delays == pytest.approx(expected)


def test_delayed_tween_waits_before_moving():
    bus, world, ents = _setup(2, rng=StubRandom())
    bus.emit(
        EVENT_TWEEN_REQUEST,
        targets=ents,
        prop="opacity",
        value=0.0,
        duration=0.1,
        stagger={"amount": 0.2, "from": "start"},
    )
    drive(bus, 10)
    assert _value(world, ents[0]) == pytest.approx(0.0)
    assert _value(world, ents[1]) == pytest.approx(1.0)
    drive(bus, 30)
    assert _value(world, ents[1]) == pytest.approx(0.0)


def test_unsupported_property_and_missing_targets_are_ignored():
    bus, world, ents = _setup(1)
    bus.emit(EVENT_TWEEN_REQUEST, targets=ents, prop="scale", value=0.0, duration=0.0)
    bus.emit(EVENT_TWEEN_REQUEST, targets=[], prop="opacity", value=0.0, duration=0.0)
    bus.emit(EVENT_TWEEN_REQUEST, targets=[999], prop="opacity", value=0.0, duration=0.0)
    assert _value(world, ents[0]) == 1.0
