"""Per-element trigger configuration read from markup-style attributes."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping

from typeshuffle.constants import (
    DEFAULT_DELAY_MS,
    DEFAULT_DURATION_MS,
    DEFAULT_SCROLL_ONCE,
    DEFAULT_TRIGGER,
    TRIGGER_TYPES,
)

logger = logging.getLogger(__name__)

ATTR_EFFECT = "data-effect"
ATTR_TRIGGER = "data-trigger"
ATTR_SCROLL_ONCE = "data-scroll-once"
ATTR_DURATION = "data-duration"
ATTR_DELAY = "data-delay"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: object, default: int) -> int:
    """Parse the leading integer of ``value``; missing, invalid or zero yields ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value or default
    match = _LEADING_INT.match(str(value))
    if not match:
        logger.debug(f"Unparseable integer {value!r}, using {default}")
        return default
    return int(match.group(1)) or default


@dataclass(frozen=True, slots=True)
class TriggerConfig:
    trigger_type: str = DEFAULT_TRIGGER
    scroll_once: bool = DEFAULT_SCROLL_ONCE
    duration: int = DEFAULT_DURATION_MS
    delay: int = DEFAULT_DELAY_MS

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "TriggerConfig":
        trigger_type = attributes.get(ATTR_TRIGGER) or DEFAULT_TRIGGER
        if trigger_type not in TRIGGER_TYPES:
            # Unknown trigger types are wired like clicks.
            logger.debug(f"Unknown trigger type {trigger_type!r}, treating as click")
        raw_once = attributes.get(ATTR_SCROLL_ONCE)
        scroll_once = raw_once == "true" if raw_once else DEFAULT_SCROLL_ONCE
        return cls(
            trigger_type=trigger_type,
            scroll_once=scroll_once,
            duration=parse_int(attributes.get(ATTR_DURATION), DEFAULT_DURATION_MS),
            delay=parse_int(attributes.get(ATTR_DELAY), DEFAULT_DELAY_MS),
        )
