from dataclasses import dataclass

@dataclass(slots=True)
class Tween:
    """Linear property tween; ``delay`` and ``elapsed`` are seconds."""
    prop: str
    start: float
    end: float
    duration: float
    delay: float = 0.0
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        if self.duration <= 0.0:
            return 1.0
        return max(0.0, min(1.0, self.elapsed / self.duration))

    def value(self) -> float:
        return self.start + (self.end - self.start) * self.progress
