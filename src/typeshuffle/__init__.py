"""Scramble-then-resolve text animation on an esper world."""
from typeshuffle.engine import ShuffleEngine
from typeshuffle.world import create_world

__version__ = "0.1.0"

__all__ = ["ShuffleEngine", "create_world"]
