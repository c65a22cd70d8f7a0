from typing import Dict, Tuple

import arcade
from esper import World

from typeshuffle.components.glyph import Glyph
from typeshuffle.components.opacity import Opacity
from typeshuffle.constants import FONT_NAME, FONT_SIZE, LINE_HEIGHT, TEXT_COLOR
from typeshuffle.events.bus import EVENT_SCROLL, EventBus
from typeshuffle.segmentation.splitter import TextSplitter

# Baseline sits this far below the top of a text row.
BASELINE_RATIO = 0.75


def to_screen(doc_x: float, doc_y: float, scroll_offset: float, window_height: float) -> Tuple[float, float]:
    """Convert a document-space row top (y down) to an arcade baseline position (y up)."""
    return doc_x, window_height - (doc_y - scroll_offset) - LINE_HEIGHT * BASELINE_RATIO


class RenderSystem:
    """Draws every glyph at its fixed-pitch slot with its current opacity."""

    def __init__(self, world: World, event_bus: EventBus, window, splitter: TextSplitter):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.splitter = splitter
        self.scroll_offset = 0.0
        self._texts: Dict[int, arcade.Text] = {}
        self.event_bus.subscribe(EVENT_SCROLL, self.on_scroll)

    def on_scroll(self, sender, **kwargs):
        self.scroll_offset = float(kwargs.get('offset', self.scroll_offset))

    def visible(self, screen_y: float) -> bool:
        return -LINE_HEIGHT <= screen_y <= self.window.height + LINE_HEIGHT

    def process(self):
        seen = set()
        for ent, glyph in self.world.get_component(Glyph):
            seen.add(ent)
            opacity = self.world.try_component(ent, Opacity)
            value = 1.0 if opacity is None else opacity.value
            alpha = int(255 * max(0.0, min(1.0, value)))
            if alpha <= 0:
                continue
            doc_x, doc_y = self.splitter.glyph_position(glyph)
            x, y = to_screen(doc_x, doc_y, self.scroll_offset, self.window.height)
            if not self.visible(y):
                continue
            text = self._texts.get(ent)
            if text is None:
                text = arcade.Text(glyph.text, x, y, (*TEXT_COLOR, alpha), FONT_SIZE, font_name=FONT_NAME)
                self._texts[ent] = text
            else:
                text.text = glyph.text
                text.x = x
                text.y = y
                text.color = (*TEXT_COLOR, alpha)
            text.draw()
        for ent in [ent for ent in self._texts if ent not in seen]:
            del self._texts[ent]
