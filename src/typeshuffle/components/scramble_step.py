from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typeshuffle.components.cell import Cell

if TYPE_CHECKING:
    from typeshuffle.engine import ShuffleEngine

@dataclass(slots=True)
class ScrambleStep:
    """Explicit per-cell state of the scramble loop, advanced by ScrambleSystem."""
    engine: ShuffleEngine
    cell: Cell
    iteration: int = 0
