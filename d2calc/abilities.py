"""Ability descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class AbilityType(Enum):
    """Category of an ability."""

    GRENADE = auto()
    MELEE = auto()
    CLASS = auto()
    SUPER = auto()
    WEAPON = auto()
    ARMOR = auto()
    MISC = auto()
    UNKNOWN = auto()


@dataclass
class AbilityDamageProfile:
    """How an ability deals its damage; a crit multiplier of 1.0 means no crits."""

    impact: float = 0.0
    secondary: float = 0.0
    sec_hit_count: int = 0
    lin_hit_scalar: float = 0.0
    crit_mult: float = 0.0


@dataclass
class Ability:
    """A named ability with its damage profile."""

    name: str = ""
    hash: int = 0
    ability_type: AbilityType = AbilityType.UNKNOWN
    damage_profile: AbilityDamageProfile = field(default_factory=AbilityDamageProfile)
    is_initialized: bool = False