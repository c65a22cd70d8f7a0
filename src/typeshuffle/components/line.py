from dataclasses import dataclass, field
from typing import List

from typeshuffle.components.cell import Cell

@dataclass(slots=True)
class Line:
    """Ordered cells of one visual line, left to right."""
    position: int = -1
    cells: List[Cell] = field(default_factory=list)
