from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typeshuffle.config import TriggerConfig

if TYPE_CHECKING:
    from typeshuffle.engine import ShuffleEngine

@dataclass(slots=True)
class TriggerBinding:
    """Links a text element to its engine and the trigger it was wired with."""
    engine: ShuffleEngine
    config: TriggerConfig


@dataclass(slots=True)
class PendingTrigger:
    """Deferred ``engine.trigger(effect)`` waiting on a Delay component."""
    engine: ShuffleEngine
    effect: str
