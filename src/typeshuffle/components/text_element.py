from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass(slots=True)
class TextElement:
    """Text-bearing element placed on the page in document coordinates (y grows downwards)."""
    text: str
    x: float = 0.0
    y: float = 0.0
    attributes: Dict[str, str] = field(default_factory=dict)
    wrap: Optional[int] = None  # column width for soft wrapping; None keeps explicit lines only
