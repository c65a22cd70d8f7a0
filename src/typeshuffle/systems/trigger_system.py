from __future__ import annotations

import logging
from typing import Dict, List

from esper import World

from typeshuffle.components.bounds import Bounds
from typeshuffle.components.delay import Delay
from typeshuffle.components.scroll_trigger import ScrollTrigger
from typeshuffle.components.text_element import TextElement
from typeshuffle.components.trigger_binding import PendingTrigger, TriggerBinding
from typeshuffle.config import ATTR_EFFECT, TriggerConfig
from typeshuffle.constants import DEFAULT_EFFECT, GLITCH_EFFECT_ATTR, SCROLL_START_RATIO
from typeshuffle.effects.base import Effect
from typeshuffle.engine import ShuffleEngine
from typeshuffle.events.bus import EVENT_LOAD, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from typeshuffle.segmentation.splitter import TextSplitter

logger = logging.getLogger(__name__)


class TriggerSystem:
    """Wires text elements to their engines according to their attributes.

    ``load`` elements fire ``delay`` ms after ``EVENT_LOAD``; ``click`` elements
    (and any unknown trigger type) fire when a press lands inside their bounds;
    ``scroll`` elements get a ScrollTrigger region whose leave-back fades the
    text out again when the pass is repeatable.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        splitter: TextSplitter | None = None,
        effects: Dict[str, Effect] | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.splitter = splitter or TextSplitter(world)
        self.effects = effects
        event_bus.subscribe(EVENT_LOAD, self.on_load)
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def bind_all(self) -> List[ShuffleEngine]:
        engines = []
        for ent, element in list(self.world.get_component(TextElement)):
            if element.attributes.get(ATTR_EFFECT) != GLITCH_EFFECT_ATTR:
                continue
            if self.world.has_component(ent, TriggerBinding):
                continue
            engines.append(self.bind(ent))
        return engines

    def bind(self, element: int) -> ShuffleEngine:
        text_el = self.world.component_for_entity(element, TextElement)
        config = TriggerConfig.from_attributes(text_el.attributes)
        engine = ShuffleEngine(
            self.world,
            self.event_bus,
            element,
            splitter=self.splitter,
            duration=config.duration,
            effects=self.effects,
        )
        engine.initialize(config.trigger_type, config.duration)
        self.world.add_component(element, TriggerBinding(engine, config))
        if config.trigger_type == "scroll":
            self._bind_scroll(element, engine, config)
        logger.debug(f"Bound element {element} ({config.trigger_type}, {config.duration}ms)")
        return engine

    def unbind(self, element: int) -> None:
        try:
            binding = self.world.component_for_entity(element, TriggerBinding)
        except KeyError:
            return
        binding.engine.cancel()
        for ent, pending in list(self.world.get_component(PendingTrigger)):
            if pending.engine is binding.engine:
                self.world.delete_entity(ent, immediate=True)
        self.world.remove_component(element, TriggerBinding)
        if self.world.has_component(element, ScrollTrigger):
            self.world.remove_component(element, ScrollTrigger)

    def engine_for(self, element: int) -> ShuffleEngine | None:
        try:
            return self.world.component_for_entity(element, TriggerBinding).engine
        except KeyError:
            return None

    def _bind_scroll(self, element: int, engine: ShuffleEngine, config: TriggerConfig) -> None:
        bounds = self.world.component_for_entity(element, Bounds)
        region = ScrollTrigger(
            top=bounds.top,
            bottom=bounds.bottom,
            on_enter=lambda: engine.trigger(DEFAULT_EFFECT),
            on_leave_back=None if config.scroll_once else engine.reset_cells,
            once=config.scroll_once,
            start_ratio=SCROLL_START_RATIO,
        )
        self.world.add_component(element, region)

    def on_load(self, sender, **kwargs):
        for ent, binding in list(self.world.get_component(TriggerBinding)):
            if binding.config.trigger_type != "load":
                continue
            self.world.create_entity(
                PendingTrigger(binding.engine, DEFAULT_EFFECT),
                Delay(float(binding.config.delay)),
            )

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x'); y = kwargs.get('y')
        if x is None or y is None:
            return
        for ent, (binding, bounds) in list(self.world.get_components(TriggerBinding, Bounds)):
            if binding.config.trigger_type in ("load", "scroll"):
                continue
            if bounds.contains(float(x), float(y)):
                binding.engine.trigger(DEFAULT_EFFECT)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for ent, (pending, delay) in list(self.world.get_components(PendingTrigger, Delay)):
            delay.remaining -= dt * 1000.0
            if delay.due:
                self.world.delete_entity(ent, immediate=True)
                pending.engine.trigger(pending.effect)
