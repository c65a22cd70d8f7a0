from dataclasses import dataclass

@dataclass(slots=True)
class Glyph:
    """Leaf character on the rendering surface; ``text`` is what gets drawn."""
    text: str
    row: int
    col: int
    element: int
