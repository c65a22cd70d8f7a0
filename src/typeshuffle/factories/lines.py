from typing import List

from typeshuffle.components.cell import Cell
from typeshuffle.components.glyph import Glyph
from typeshuffle.components.line import Line
from typeshuffle.components.opacity import Opacity
from typeshuffle.segmentation.splitter import SplitResult, TextSplitter


def build_lines(splitter: TextSplitter, result: SplitResult) -> List[Line]:
    """Create the Line/Cell hierarchy for one split element.

    Leaf glyphs are re-derived from each word, so a result that only went
    through the line pass is completed here. Cell positions restart at 0 on
    every line.
    """
    world = splitter.world
    lines: List[Line] = []
    for line_position, words in enumerate(result.lines):
        line = Line(position=line_position)
        char_count = 0
        for word in words:
            for glyph_entity in splitter.split_chars(word):
                glyph = world.component_for_entity(glyph_entity, Glyph)
                cell = Cell(
                    element=glyph_entity,
                    glyph=glyph,
                    position=char_count,
                    previous_cell_position=-1 if char_count == 0 else char_count - 1,
                )
                world.add_component(glyph_entity, cell)
                if not world.has_component(glyph_entity, Opacity):
                    world.add_component(glyph_entity, Opacity())
                line.cells.append(cell)
                char_count += 1
        lines.append(line)
    return lines
