"""Arcade window hosting the demo page.

Sets up ECS world, event bus, systems, and the scrollable page of text blocks.
"""
import logging

from arcade import Window, run, set_background_color, color

from typeshuffle.components.text_element import TextElement
from typeshuffle.config import ATTR_EFFECT
from typeshuffle.constants import GLITCH_EFFECT_ATTR, SCROLL_STEP, WINDOW_HEIGHT, WINDOW_WIDTH
from typeshuffle.events.bus import EVENT_LOAD, EVENT_MOUSE_PRESS, EVENT_SCROLL, EVENT_TICK, EventBus
from typeshuffle.factories.page import page_height, spawn_demo_page
from typeshuffle.segmentation.splitter import TextSplitter
from typeshuffle.systems.render import RenderSystem
from typeshuffle.systems.scramble_system import ScrambleSystem
from typeshuffle.systems.scroll_system import ScrollSystem
from typeshuffle.systems.trigger_system import TriggerSystem
from typeshuffle.systems.tween_system import TweenSystem
from typeshuffle.world import create_world

logger = logging.getLogger(__name__)


class TypeShuffleWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Type Shuffle")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        self.splitter = TextSplitter(self.world)

        # Collaborators must be listening before blocks are bound so initial clears land.
        self.tween_system = TweenSystem(self.world, self.event_bus)
        self.scramble_system = ScrambleSystem(self.world, self.event_bus)
        self.scroll_system = ScrollSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.splitter)
        self.trigger_system = TriggerSystem(self.world, self.event_bus, splitter=self.splitter)

        elements = spawn_demo_page(self.world)
        engines = self.trigger_system.bind_all()
        for ent in elements:
            attrs = self.world.component_for_entity(ent, TextElement).attributes
            if attrs.get(ATTR_EFFECT) != GLITCH_EFFECT_ATTR:
                self.splitter.split(ent)
        logger.info(f"Bound {len(engines)} text blocks")

        self.scroll_offset = 0.0
        self._loaded = False
        set_background_color(color.BLACK)
        self._emit_scroll()

    @property
    def max_scroll(self) -> float:
        return max(0.0, page_height(self.world) + SCROLL_STEP - self.height)

    def _emit_scroll(self):
        self.event_bus.emit(EVENT_SCROLL, offset=self.scroll_offset, viewport_height=self.height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        if not self._loaded:
            self._loaded = True
            self.event_bus.emit(EVENT_LOAD)
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        # Hit-testing happens in document space (y down, scrolled).
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=self.height - y + self.scroll_offset, button=button)

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float):
        offset = self.scroll_offset - scroll_y * SCROLL_STEP
        self.scroll_offset = max(0.0, min(self.max_scroll, offset))
        self._emit_scroll()

    def on_resize(self, width: int, height: int):
        # Window construction resizes before the systems exist.
        if hasattr(self, "scroll_offset"):
            self._emit_scroll()
        return super().on_resize(width, height)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    TypeShuffleWindow()
    run()


if __name__ == "__main__":
    main()
