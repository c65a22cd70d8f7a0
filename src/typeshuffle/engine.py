"""Scramble-then-resolve engine for a single text block."""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterator, List, Optional

from esper import World

from typeshuffle.components.cell import Cell
from typeshuffle.components.delay import Delay
from typeshuffle.components.line import Line
from typeshuffle.components.scramble_step import ScrambleStep
from typeshuffle.components.text_element import TextElement
from typeshuffle.constants import (
    DEFAULT_DURATION_MS,
    DEFAULT_EFFECT,
    GLYPHS,
    MAX_CELL_ITERATIONS,
    RESET_FADE_DURATION,
    RESET_STAGGER_AMOUNT,
)
from typeshuffle.effects.base import Effect
from typeshuffle.effects.registry import create_effect_map
from typeshuffle.events.bus import (
    EVENT_CELL_STEP,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_SHUFFLE_START,
    EVENT_TWEEN_REQUEST,
    EventBus,
)
from typeshuffle.factories.lines import build_lines
from typeshuffle.segmentation.splitter import TextSplitter

logger = logging.getLogger(__name__)


class ShuffleEngine:
    """Owns the lines of one text block and runs its scramble passes.

    Each engine keeps its own busy flag and finished counter, so several blocks
    can animate independently on the same world. Per-cell timing is delegated
    to ``ScrambleSystem``, which advances the ``ScrambleStep`` entities this
    engine schedules; opacity changes are requested through
    ``EVENT_TWEEN_REQUEST`` and never waited on.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        element: int,
        *,
        splitter: TextSplitter | None = None,
        duration: int = DEFAULT_DURATION_MS,
        effects: Dict[str, Effect] | None = None,
        rng: Any = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.element = element
        self.rng = rng or getattr(world, "random", None) or random.Random()
        self.effects: Dict[str, Effect] = effects if effects is not None else create_effect_map()
        self.is_animating = False
        self.finished = 0
        self.current_effect: Optional[str] = None
        self._duration = DEFAULT_DURATION_MS
        self.duration = duration

        splitter = splitter or TextSplitter(world)
        # Lines and words first; characters are derived per word while building cells.
        result = splitter.split_lines(element)
        self.lines: List[Line] = build_lines(splitter, result)
        self.total_chars = sum(len(line.cells) for line in self.lines)
        logger.debug(f"ShuffleEngine for element {element}: {len(self.lines)} lines, {self.total_chars} chars")

    @classmethod
    def from_text(cls, world: World, event_bus: EventBus, text: str, *, x: float = 0.0, y: float = 0.0,
                  attributes: Optional[Dict[str, str]] = None, wrap: Optional[int] = None,
                  **kwargs) -> "ShuffleEngine":
        element = world.create_entity(TextElement(text, x, y, dict(attributes or {}), wrap))
        return cls(world, event_bus, element, **kwargs)

    @property
    def duration(self) -> int:
        return self._duration

    @duration.setter
    def duration(self, value: int) -> None:
        self._duration = max(0, int(value))

    @property
    def step_interval(self) -> float:
        """Milliseconds between two iterations of one cell."""
        return self._duration / 10

    def cells(self) -> Iterator[Cell]:
        for line in self.lines:
            yield from line.cells

    @property
    def text(self) -> str:
        return "\n".join("".join(cell.state for cell in line.cells) for line in self.lines)

    @property
    def original_text(self) -> str:
        return "\n".join("".join(cell.original for cell in line.cells) for line in self.lines)

    # Visibility
    def clear_cells(self) -> None:
        """Hide every cell immediately."""
        targets = [cell.element for cell in self.cells()]
        if targets:
            self._animate(targets, 0.0, 0.0)

    def reset_cells(self) -> None:
        """Fade each line out in random order; glyph content is left untouched."""
        for line in self.lines:
            if not line.cells:
                continue
            self._animate(
                [cell.element for cell in line.cells],
                0.0,
                RESET_FADE_DURATION,
                stagger={"amount": RESET_STAGGER_AMOUNT, "from": "random"},
            )

    def initialize(self, trigger_type: str, duration: int) -> None:
        self.duration = duration
        if trigger_type in ("load", "scroll"):
            self.clear_cells()

    # Passes
    def trigger(self, effect: str = DEFAULT_EFFECT) -> bool:
        """Start ``effect`` unless it is unknown or a pass is already running.

        Returns True when a pass was started. Dropped triggers are not errors.
        """
        if effect not in self.effects:
            logger.debug(f"Ignoring unknown effect {effect!r}")
            return False
        if self.is_animating:
            logger.debug(f"Dropping {effect!r} trigger on element {self.element}: pass in progress")
            return False
        if self.total_chars == 0:
            self.event_bus.emit(EVENT_SHUFFLE_COMPLETE, engine=self, effect=effect, empty=True)
            return False
        self.is_animating = True
        self.current_effect = effect
        logger.debug(f"Starting {effect!r} on element {self.element} ({self.total_chars} chars)")
        self.event_bus.emit(EVENT_SHUFFLE_START, engine=self, effect=effect)
        self.effects[effect].run(self)
        return True

    def schedule_step(self, cell: Cell, delay_ms: float) -> int:
        return self.world.create_entity(ScrambleStep(self, cell), Delay(float(delay_ms)))

    def advance(self, step: ScrambleStep) -> bool:
        """Run one iteration of a cell's scramble loop.

        Returns True while the cell has iterations left; the caller re-runs the
        step after ``step_interval`` milliseconds.
        """
        cell = step.cell
        iteration = step.iteration
        if iteration == MAX_CELL_ITERATIONS - 1:
            cell.set(cell.original)
            self.finished += 1
        else:
            cell.set(self.rng.choice(GLYPHS))
        self.event_bus.emit(EVENT_CELL_STEP, engine=self, cell=cell, iteration=iteration, glyph=cell.state)
        self._animate([cell.element], 1.0, self._duration / 1000)
        if iteration == MAX_CELL_ITERATIONS - 1 and self.finished == self.total_chars:
            self._complete()
        step.iteration = iteration + 1
        return step.iteration < MAX_CELL_ITERATIONS

    def cancel(self) -> int:
        """Drop every pending step of this engine and release the busy flag.

        Cells of dropped steps snap back to their original glyph and become
        visible again. Returns the number of dropped steps.
        """
        pending = [(ent, step) for ent, step in self.world.get_component(ScrambleStep) if step.engine is self]
        for ent, step in pending:
            step.cell.set(step.cell.original)
            self.world.delete_entity(ent, immediate=True)
        targets = [step.cell.element for _, step in pending]
        if targets:
            self._animate(targets, 1.0, 0.0)
        self.is_animating = False
        return len(pending)

    def _complete(self) -> None:
        self.is_animating = False
        logger.debug(f"Pass complete on element {self.element}")
        self.event_bus.emit(EVENT_SHUFFLE_COMPLETE, engine=self, effect=self.current_effect, empty=False)

    def _animate(self, targets: List[int], value: float, duration: float, stagger: dict | None = None) -> None:
        self.event_bus.emit(
            EVENT_TWEEN_REQUEST,
            targets=targets,
            prop="opacity",
            value=value,
            duration=duration,
            stagger=stagger,
        )
