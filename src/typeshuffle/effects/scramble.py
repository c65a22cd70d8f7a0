from __future__ import annotations

from typing import TYPE_CHECKING

from typeshuffle.effects.base import EffectKind

if TYPE_CHECKING:
    from typeshuffle.engine import ShuffleEngine


class ScrambleEffect:
    """Hide every cell, then start each cell's scramble loop after its own random delay.

    The loop itself lives in ``ShuffleEngine.advance``; completion is detected
    there once the finished counter reaches ``total_chars``.
    """

    kind = EffectKind.SCRAMBLE

    @property
    def name(self) -> str:
        return self.kind.value

    def run(self, engine: ShuffleEngine) -> None:
        engine.clear_cells()
        engine.finished = 0
        for line in engine.lines:
            for cell in line.cells:
                engine.schedule_step(cell, engine.rng.randint(0, engine.duration))
