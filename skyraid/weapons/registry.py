from __future__ import annotations

from typing import Dict

from .base import Weapon

_registry: Dict[str, Weapon] = {}


def register_weapon(name: str, weapon: Weapon) -> None:
    _registry[name] = weapon


def get_weapon(name: str) -> Weapon:
    return _registry.get(name, _registry["none"])
