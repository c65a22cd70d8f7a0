"""Two-pass text segmentation onto fixed-pitch rows and columns.

Pass one breaks an element into lines of word entities; pass two breaks each
word into glyph entities. Whitespace never becomes a glyph, it only advances
the column of the following word.
"""
from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass, field
from typing import List

from esper import World

from typeshuffle.components.bounds import Bounds
from typeshuffle.components.glyph import Glyph
from typeshuffle.components.text_element import TextElement
from typeshuffle.components.word import Word
from typeshuffle.constants import CHAR_WIDTH, LINE_HEIGHT

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SplitResult:
    element: int
    lines: List[List[int]] = field(default_factory=list)  # word entities per line

    @property
    def words(self) -> List[int]:
        return [word for line in self.lines for word in line]


class TextSplitter:
    def __init__(self, world: World, char_width: float = CHAR_WIDTH, line_height: float = LINE_HEIGHT):
        self.world = world
        self.char_width = char_width
        self.line_height = line_height

    def split(self, element: int) -> SplitResult:
        result = self.split_lines(element)
        for word in result.words:
            self.split_chars(word)
        return result

    def split_lines(self, element: int) -> SplitResult:
        text_el = self.world.component_for_entity(element, TextElement)
        result = SplitResult(element=element)
        widest = 0
        rows = self._wrap(text_el)
        for row, raw_line in enumerate(rows):
            words: List[int] = []
            col = 0
            for token in raw_line.split(" "):
                if token:
                    words.append(self.world.create_entity(Word(token, row, col, element)))
                col += len(token) + 1
            widest = max(widest, len(raw_line.rstrip()))
            if words:
                result.lines.append(words)
        self._store_bounds(element, text_el, widest, len(rows))
        logger.debug(f"Split element {element} into {len(result.lines)} lines")
        return result

    def split_chars(self, word_entity: int) -> List[int]:
        word = self.world.component_for_entity(word_entity, Word)
        if word.chars:
            return list(word.chars)
        word.chars = [
            self.world.create_entity(Glyph(char, word.row, word.col + offset, word.element))
            for offset, char in enumerate(word.text)
        ]
        return list(word.chars)

    def glyph_position(self, glyph: Glyph) -> tuple[float, float]:
        """Document-space top-left corner of a glyph."""
        text_el = self.world.component_for_entity(glyph.element, TextElement)
        return (
            text_el.x + glyph.col * self.char_width,
            text_el.y + glyph.row * self.line_height,
        )

    def _wrap(self, text_el: TextElement) -> List[str]:
        rows: List[str] = []
        for paragraph in text_el.text.expandtabs(1).splitlines():
            if text_el.wrap and len(paragraph) > text_el.wrap:
                rows.extend(textwrap.wrap(paragraph, text_el.wrap) or [""])
            else:
                rows.append(paragraph)
        return rows

    def _store_bounds(self, element: int, text_el: TextElement, widest: int, rows: int) -> None:
        bounds = Bounds(
            left=text_el.x,
            top=text_el.y,
            width=widest * self.char_width,
            height=rows * self.line_height,
        )
        self.world.add_component(element, bounds)
