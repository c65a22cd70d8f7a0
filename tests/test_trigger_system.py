import random

from typeshuffle.components.opacity import Opacity
from typeshuffle.components.scroll_trigger import ScrollTrigger
from typeshuffle.components.text_element import TextElement
from typeshuffle.components.trigger_binding import PendingTrigger, TriggerBinding
from typeshuffle.events.bus import EVENT_LOAD, EVENT_MOUSE_PRESS, EVENT_SCROLL, EVENT_SHUFFLE_COMPLETE, EventBus
from typeshuffle.systems.scramble_system import ScrambleSystem
from typeshuffle.systems.scroll_system import ScrollSystem
from typeshuffle.systems.trigger_system import TriggerSystem
from typeshuffle.systems.tween_system import TweenSystem
from typeshuffle.world import create_world

from tests.helpers import drive, drive_until_idle, record_tweens


class _Page:
    def __init__(self):
        self.bus = EventBus()
        self.world = create_world(rng=random.Random(7))
        self.tweens = TweenSystem(self.world, self.bus)
        self.scramble = ScrambleSystem(self.world, self.bus)
        self.scroll = ScrollSystem(self.world, self.bus)
        self.triggers = TriggerSystem(self.world, self.bus)

    def element(self, text, x=0, y=0, **attrs):
        attrs.setdefault("data-effect", "glitch")
        return self.world.create_entity(TextElement(text, x, y, dict(attrs)))

    def press(self, x, y):
        self.bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)

    def scroll_to(self, offset, viewport=600):
        self.bus.emit(EVENT_SCROLL, offset=offset, viewport_height=viewport)


def _glyph_opacity(page, engine):
    return [page.world.component_for_entity(cell.element, Opacity).value for cell in engine.cells()]


def test_bind_all_only_binds_glitch_elements():
    page = _Page()
    glitch = page.element("GLITCH")
    plain = page.world.create_entity(TextElement("PLAIN", 0, 100, {}))
    engines = page.triggers.bind_all()
    assert len(engines) == 1
    assert page.world.has_component(glitch, TriggerBinding)
    assert not page.world.has_component(plain, TriggerBinding)
    # Already bound elements are skipped.
    assert page.triggers.bind_all() == []


def test_click_inside_bounds_starts_pass():
    page = _Page()
    ent = page.element("AB", x=0, y=0, **{"data-duration": "100"})
    engine = page.triggers.bind(ent)
    assert engine.duration == 100
    page.press(500, 500)
    assert not engine.is_animating
    page.press(10, 10)
    assert engine.is_animating
    drive_until_idle(page.bus, engine)
    assert engine.text == "AB"


def test_click_element_stays_visible_until_first_pass():
    page = _Page()
    engine = page.triggers.bind(page.element("AB"))
    assert all(value == 1.0 for value in _glyph_opacity(page, engine))


def test_unknown_trigger_type_behaves_like_click():
    page = _Page()
    engine = page.triggers.bind(page.element("AB", **{"data-trigger": "hover"}))
    page.press(5, 5)
    assert engine.is_animating


def test_load_trigger_waits_for_delay():
    page = _Page()
    ent = page.element("LOAD", **{"data-trigger": "load", "data-delay": "100"})
    engine = page.triggers.bind(ent)
    assert all(value == 0.0 for value in _glyph_opacity(page, engine))
    page.press(5, 5)
    assert not engine.is_animating
    page.bus.emit(EVENT_LOAD)
    drive(page.bus, 9)
    assert not engine.is_animating
    drive(page.bus, 1)
    assert engine.is_animating
    assert not list(page.world.get_component(PendingTrigger))


def test_scroll_trigger_enters_and_resets_when_repeatable():
    page = _Page()
    ent = page.element("SCROLL", y=1000, **{"data-trigger": "scroll", "data-scroll-once": "false"})
    engine = page.triggers.bind(ent)
    assert all(value == 0.0 for value in _glyph_opacity(page, engine))
    page.scroll_to(0)
    assert not engine.is_animating
    page.scroll_to(600)
    assert engine.is_animating
    drive_until_idle(page.bus, engine)
    requests = record_tweens(page.bus)
    page.scroll_to(0)
    assert len(requests) == 1
    assert requests[0]["value"] == 0.0
    assert requests[0]["stagger"] == {"amount": 1.0, "from": "random"}
    assert page.world.has_component(ent, ScrollTrigger)


def test_scroll_once_region_fires_a_single_time():
    page = _Page()
    ent = page.element("ONCE", y=1000, **{"data-trigger": "scroll"})
    engine = page.triggers.bind(ent)
    page.scroll_to(600)
    assert engine.is_animating
    assert not page.world.has_component(ent, ScrollTrigger)
    drive_until_idle(page.bus, engine)
    requests = record_tweens(page.bus)
    page.scroll_to(0)
    page.scroll_to(600)
    assert requests == []
    assert not engine.is_animating


def test_unbind_cancels_pending_work():
    page = _Page()
    ent = page.element("BUSY")
    engine = page.triggers.bind(ent)
    page.press(5, 5)
    assert page.scramble.pending == 4
    page.triggers.unbind(ent)
    assert page.scramble.pending == 0
    assert not engine.is_animating
    assert page.triggers.engine_for(ent) is None
    assert engine.text == "BUSY"


def test_unbind_from_completion_handler():
    page = _Page()
    ent = page.element("AB", **{"data-duration": "100"})
    engine = page.triggers.bind(ent)
    completions = []

    def on_complete(sender, **kwargs):
        completions.append(kwargs)
        page.triggers.unbind(ent)

    page.bus.subscribe(EVENT_SHUFFLE_COMPLETE, on_complete)
    page.press(5, 5)
    drive(page.bus, 50)
    assert len(completions) == 1
    assert not engine.is_animating
    assert engine.text == "AB"
    assert page.triggers.engine_for(ent) is None
    assert page.scramble.pending == 0


def test_unbind_from_completion_handler_with_zero_step_interval():
    page = _Page()
    ent = page.element("AB")
    engine = page.triggers.bind(ent)
    engine.duration = 0
    page.bus.subscribe(EVENT_SHUFFLE_COMPLETE, lambda sender, **kwargs: page.triggers.unbind(ent))
    page.press(5, 5)
    drive(page.bus, 1)
    assert engine.text == "AB"
    assert page.triggers.engine_for(ent) is None
    assert page.scramble.pending == 0
