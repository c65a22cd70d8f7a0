from dataclasses import dataclass, field
from typing import Callable, Optional

@dataclass(slots=True)
class ScrollTrigger:
    """Scroll region with enter / leave-back callbacks.

    ``start`` and ``end`` are scroll offsets; ``start`` is derived from the
    element top and the viewport height when the region is first observed.
    """
    top: float
    bottom: float
    on_enter: Optional[Callable[[], None]] = None
    on_leave_back: Optional[Callable[[], None]] = None
    once: bool = True
    start_ratio: float = 0.75
    active: bool = False
    last_offset: Optional[float] = field(default=None, repr=False)

    def start(self, viewport_height: float) -> float:
        return self.top - viewport_height * self.start_ratio

    @property
    def end(self) -> float:
        return self.bottom
