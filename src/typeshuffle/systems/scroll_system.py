import logging

from esper import World

from typeshuffle.components.scroll_trigger import ScrollTrigger
from typeshuffle.events.bus import EVENT_SCROLL, EventBus

logger = logging.getLogger(__name__)


class ScrollSystem:
    """Scroll observation: fires region callbacks when the scroll offset crosses a region start.

    Moving forward over the start calls ``on_enter``; moving back over it calls
    ``on_leave_back``. The first observation of a region counts as coming from
    above the page, so regions already in view enter immediately. ``once``
    regions are dropped after entering.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.offset = 0.0
        self.viewport_height = 0.0
        event_bus.subscribe(EVENT_SCROLL, self.on_scroll)

    def register(self, entity: int, region: ScrollTrigger) -> ScrollTrigger:
        self.world.add_component(entity, region)
        return region

    def on_scroll(self, sender, **kwargs):
        offset = float(kwargs.get('offset', self.offset))
        viewport = float(kwargs.get('viewport_height', self.viewport_height))
        self.offset = offset
        self.viewport_height = viewport
        for ent, region in list(self.world.get_component(ScrollTrigger)):
            start = region.start(viewport)
            previous = region.last_offset
            region.last_offset = offset
            region.active = start <= offset < region.end
            entered = (previous is None or previous < start) and offset >= start
            left_back = previous is not None and previous >= start and offset < start
            if entered:
                logger.debug(f"Scroll region on element {ent} entered at offset {offset}")
                if region.once:
                    self.world.remove_component(ent, ScrollTrigger)
                if region.on_enter:
                    region.on_enter()
            elif left_back and region.on_leave_back:
                region.on_leave_back()
