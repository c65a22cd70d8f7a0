from typing import List

from esper import World

from typeshuffle.components.bounds import Bounds
from typeshuffle.components.text_element import TextElement

# Each entry mirrors one text element with its markup attributes.
DEMO_PAGE = (
    ("CLICK TO SCRAMBLE", 40, 60, {"data-effect": "glitch"}),
    ("Resolves after a short wait", 40, 160,
     {"data-effect": "glitch", "data-trigger": "load", "data-delay": "1500"}),
    ("Scroll down for more", 40, 260, {"data-effect": "glitch", "data-trigger": "scroll"}),
    ("Every glyph settles back\nonto its original letter", 40, 900,
     {"data-effect": "glitch", "data-trigger": "scroll", "data-scroll-once": "false", "data-duration": "1200"}),
    ("This one runs exactly once", 40, 1300, {"data-effect": "glitch", "data-trigger": "scroll"}),
    ("Plain text without an effect", 40, 1500, {}),
)


def spawn_demo_page(world: World, wrap: int | None = 36) -> List[int]:
    """Create the demo page's text elements; returns their entities in page order."""
    return [
        world.create_entity(TextElement(text, x, y, dict(attrs), wrap))
        for text, x, y, attrs in DEMO_PAGE
    ]


def page_height(world: World) -> float:
    """Bottom edge of the lowest split element, in document space."""
    bottom = 0.0
    for _, bounds in world.get_component(Bounds):
        bottom = max(bottom, bounds.bottom)
    return bottom
