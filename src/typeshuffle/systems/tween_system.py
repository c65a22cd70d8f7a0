import logging
import random
from typing import Any, List

from esper import World

from typeshuffle.components.opacity import Opacity
from typeshuffle.components.tween import Tween
from typeshuffle.events.bus import EVENT_TICK, EVENT_TWEEN_COMPLETE, EVENT_TWEEN_REQUEST, EventBus

logger = logging.getLogger(__name__)


class TweenSystem:
    """Visual tweening for glyph opacity.

    Requests arrive as ``EVENT_TWEEN_REQUEST`` and are fire-and-forget for the
    sender. A zero duration sets the value right away; otherwise a linear
    Tween replaces whatever tween the target was running.
    """

    SUPPORTED_PROPS = ("opacity",)

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.rng = getattr(world, "random", None) or random.Random()
        event_bus.subscribe(EVENT_TWEEN_REQUEST, self.on_tween_request)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tween_request(self, sender, **kwargs):
        targets: List[int] = list(kwargs.get('targets') or [])
        prop = kwargs.get('prop', 'opacity')
        if not targets:
            return
        if prop not in self.SUPPORTED_PROPS:
            logger.debug(f"Ignoring tween on unsupported property {prop!r}")
            return
        value = float(kwargs.get('value', 1.0))
        duration = max(0.0, float(kwargs.get('duration', 0.0)))
        delays = self._stagger_delays(targets, kwargs.get('stagger'))
        for ent, delay in zip(targets, delays):
            if not self.world.entity_exists(ent):
                continue
            opacity = self._opacity(ent)
            if self.world.has_component(ent, Tween):
                self.world.remove_component(ent, Tween)
            if duration <= 0.0 and delay <= 0.0:
                opacity.value = value
                continue
            self.world.add_component(ent, Tween(prop, opacity.value, value, duration, delay=delay))

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for ent, tween in list(self.world.get_component(Tween)):
            if tween.delay > 0.0:
                tween.delay -= dt
                if tween.delay > 0.0:
                    continue
                # Delay overshoot counts as time already spent tweening.
                spill = -tween.delay
                tween.delay = 0.0
                # Tween starts from whatever value is current when it actually begins.
                tween.start = self._opacity(ent).value
                tween.elapsed += spill
            else:
                tween.elapsed += dt
            self._opacity(ent).value = tween.value()
            if tween.progress >= 1.0:
                self.world.remove_component(ent, Tween)
                self.event_bus.emit(EVENT_TWEEN_COMPLETE, target=ent, prop=tween.prop, value=tween.end)

    def _opacity(self, ent: int) -> Opacity:
        try:
            return self.world.component_for_entity(ent, Opacity)
        except KeyError:
            opacity = Opacity()
            self.world.add_component(ent, opacity)
            return opacity

    def _stagger_delays(self, targets: List[int], stagger: Any) -> List[float]:
        """Spread start delays evenly over ``amount`` seconds in the requested order."""
        count = len(targets)
        if not stagger or count < 2:
            return [0.0] * count
        amount = max(0.0, float(stagger.get('amount', 0.0)))
        origin = stagger.get('from', 'start')
        order = list(range(count))
        if origin == 'random':
            self.rng.shuffle(order)
        elif origin == 'end':
            order.reverse()
        each = amount / (count - 1)
        delays = [0.0] * count
        for rank, index in enumerate(order):
            delays[index] = rank * each
        return delays
