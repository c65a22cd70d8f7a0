from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nothing else references the system.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (seconds)
EVENT_LOAD = "load"                        # payload: none; page finished loading


# ============================================================================
# INPUT & VIEWPORT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y (document space), button
EVENT_SCROLL = "scroll"                    # payload: offset=float, viewport_height=float


# ============================================================================
# SHUFFLE PASSES
# ============================================================================
EVENT_SHUFFLE_START = "shuffle_start"      # payload: engine, effect=str
EVENT_SHUFFLE_COMPLETE = "shuffle_complete"  # payload: engine, effect=str|None, empty=bool
EVENT_CELL_STEP = "cell_step"              # payload: engine, cell=Cell, iteration=int, glyph=str


# ============================================================================
# TWEENING
# ============================================================================
EVENT_TWEEN_REQUEST = "tween_request"      # payload: targets=list[int], prop=str, value=float, duration=float, stagger=dict|None
EVENT_TWEEN_COMPLETE = "tween_complete"    # payload: target=int, prop=str, value=float
