"""Weapon behaviours.

The simulation asks the registry for ``twin_rail`` (player) and
``hostile_cannon`` (enemies) instead of branching on shooter kind.
"""

from .base import FireResult, NoneWeapon, Weapon
from .cannon import HostileCannon
from .registry import get_weapon, register_weapon
from .twin_rail import TwinRailWeapon

# Register built-ins on import
register_weapon("none", NoneWeapon())
register_weapon("twin_rail", TwinRailWeapon())
register_weapon("hostile_cannon", HostileCannon())

__all__ = [
    "Weapon",
    "FireResult",
    "NoneWeapon",
    "TwinRailWeapon",
    "HostileCannon",
    "get_weapon",
    "register_weapon",
]
