from dataclasses import dataclass

@dataclass(slots=True)
class Opacity:
    value: float = 1.0
