from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence

from esper import World

from typeshuffle.engine import ShuffleEngine
from typeshuffle.events.bus import EVENT_TICK, EVENT_TWEEN_REQUEST, EventBus
from typeshuffle.systems.scramble_system import ScrambleSystem
from typeshuffle.systems.tween_system import TweenSystem
from typeshuffle.world import create_world


class StubRandom:
    """Fixed-sequence random source.

    ``randint`` cycles through ``delays`` (clamped to the requested range),
    ``choice`` cycles through ``picks`` as indexes and ``shuffle`` reverses.
    """

    def __init__(self, delays: Iterable[int] = (0,), picks: Iterable[int] = (0,)) -> None:
        self._delays = itertools.cycle(tuple(delays))
        self._picks = itertools.cycle(tuple(picks))
        self.randint_calls: List[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.randint_calls.append((a, b))
        return max(a, min(b, next(self._delays)))

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[next(self._picks) % len(seq)]

    def shuffle(self, seq: list) -> None:
        seq.reverse()


@dataclass
class Harness:
    bus: EventBus
    world: World
    engine: ShuffleEngine
    scramble: ScrambleSystem
    tweens: TweenSystem


def make_engine(text: str, *, duration: int = 100, rng: Any = None, wrap: int | None = None) -> Harness:
    bus = EventBus()
    world = create_world(rng=rng)
    tweens = TweenSystem(world, bus)
    scramble = ScrambleSystem(world, bus)
    engine = ShuffleEngine.from_text(world, bus, text, duration=duration, wrap=wrap)
    return Harness(bus, world, engine, scramble, tweens)


def drive(bus: EventBus, ticks: int, dt: float = 0.01) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def drive_until_idle(bus: EventBus, engine: ShuffleEngine, dt: float = 0.01, limit: int = 1000) -> float:
    """Tick until the engine is no longer animating; returns elapsed milliseconds."""
    elapsed = 0.0
    for _ in range(limit):
        if not engine.is_animating:
            break
        bus.emit(EVENT_TICK, dt=dt)
        elapsed += dt * 1000.0
    return elapsed


def record(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []

    def handler(sender, **kwargs):
        received.append(kwargs)

    bus.subscribe(name, handler)
    return received


def record_tweens(bus: EventBus) -> list[dict]:
    return record(bus, EVENT_TWEEN_REQUEST)
