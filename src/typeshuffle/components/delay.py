from dataclasses import dataclass

@dataclass(slots=True)
class Delay:
    """Milliseconds left before the owning entity's scheduled work is due."""
    remaining: float

    @property
    def due(self) -> bool:
        return self.remaining <= 0.0
