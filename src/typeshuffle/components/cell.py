from dataclasses import dataclass, field

from typeshuffle.components.glyph import Glyph

@dataclass(slots=True)
class Cell:
    """One animatable character placeholder.

    ``original`` is captured from the glyph at construction and never changes;
    ``state`` always mirrors what the glyph currently shows.
    """
    element: int
    glyph: Glyph = field(repr=False)
    position: int = -1
    previous_cell_position: int = -1
    original: str = ""
    state: str = ""

    def __post_init__(self) -> None:
        if not self.original:
            self.original = self.glyph.text
        if not self.state:
            self.state = self.original

    def set(self, value: str) -> None:
        self.state = value
        self.glyph.text = value
