from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typeshuffle.engine import ShuffleEngine


class EffectKind(Enum):
    """Effects a text block can run; the value is the name used by triggers."""
    SCRAMBLE = "fx3"


class Effect(Protocol):
    """Interface implemented by concrete effects."""

    kind: EffectKind

    @property
    def name(self) -> str:
        ...

    def run(self, engine: ShuffleEngine) -> None:
        ...
