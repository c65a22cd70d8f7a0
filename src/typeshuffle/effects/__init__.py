from typeshuffle.effects.base import Effect, EffectKind
from typeshuffle.effects.registry import create_effect_map, register_effect
from typeshuffle.effects.scramble import ScrambleEffect

__all__ = [
    "Effect",
    "EffectKind",
    "ScrambleEffect",
    "create_effect_map",
    "register_effect",
]
