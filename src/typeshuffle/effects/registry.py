from __future__ import annotations

import logging
from importlib import metadata
from typing import Dict, Iterable

from typeshuffle.effects.base import Effect
from typeshuffle.effects.scramble import ScrambleEffect

logger = logging.getLogger(__name__)

_PLUGIN_GROUP = "typeshuffle.effects"
_plugin_loaded = False


class EffectRegistry:
    """In-memory collection of effects keyed by trigger name."""

    def __init__(self) -> None:
        self._effects: dict[str, Effect] = {}

    def register(self, effect: Effect) -> None:
        if effect.name in self._effects:
            raise ValueError(f"Effect '{effect.name}' already registered")
        self._effects[effect.name] = effect

    def get(self, name: str) -> Effect:
        try:
            return self._effects[name]
        except KeyError as exc:
            raise KeyError(f"Effect '{name}' is not registered") from exc

    def has(self, name: str) -> bool:
        return name in self._effects

    def all(self) -> Iterable[Effect]:
        return tuple(self._effects.values())


default_effect_registry = EffectRegistry()


def register_effect(effect: Effect) -> None:
    """Register an effect provided by external content."""

    default_effect_registry.register(effect)


def register_effects(effects: Iterable[Effect]) -> None:
    for effect in effects:
        register_effect(effect)


def _load_entry_point_effects() -> None:
    global _plugin_loaded
    if _plugin_loaded:
        return
    _plugin_loaded = True
    try:
        candidates = metadata.entry_points(group=_PLUGIN_GROUP)
    except Exception as exc:
        logger.warning(f"Could not read effect entry points: {exc}")
        return
    for entry_point in candidates:
        try:
            loaded = entry_point.load()
            effect = loaded() if isinstance(loaded, type) else loaded
            register_effect(effect)
        except Exception as exc:
            logger.warning(f"Skipping effect plugin {entry_point.name}: {exc}")


def _builtin_effects() -> Dict[str, Effect]:
    scramble = ScrambleEffect()
    return {scramble.name: scramble}


def create_effect_map(overrides: Dict[str, Effect] | None = None) -> Dict[str, Effect]:
    """Combine built-in, plugin, and override effects into a single map."""

    _load_entry_point_effects()
    combined: Dict[str, Effect] = _builtin_effects()
    combined.update({effect.name: effect for effect in default_effect_registry.all()})
    if overrides:
        combined.update(overrides)
    return combined


__all__ = [
    "EffectRegistry",
    "create_effect_map",
    "default_effect_registry",
    "register_effect",
    "register_effects",
]
