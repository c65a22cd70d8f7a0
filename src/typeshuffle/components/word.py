from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Word:
    """Word group produced by the first segmentation pass."""
    text: str
    row: int
    col: int
    element: int
    chars: List[int] = field(default_factory=list)  # filled by the second pass
