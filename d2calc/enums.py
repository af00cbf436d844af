"""Game enumerations: ammo, weapon, stat, damage types and damage sources."""

from __future__ import annotations

from enum import Enum, IntEnum, auto

Seconds = float
MetersPerSecond = float
StatBump = int
BungieHash = int


class _UnknownFallbackEnum(IntEnum):
    """Integer enum whose unrecognised integer values resolve to ``UNKNOWN``."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return cls["UNKNOWN"]
        return None


class AmmoType(_UnknownFallbackEnum):
    """Ammunition class of a weapon."""

    UNKNOWN = 0
    PRIMARY = 1
    SPECIAL = 2
    HEAVY = 3


class WeaponType(_UnknownFallbackEnum):
    """Weapon archetype, keyed by its item sub-type id."""

    UNKNOWN = 0
    AUTORIFLE = 6
    SHOTGUN = 7
    MACHINEGUN = 8
    HANDCANNON = 9
    ROCKET = 10
    FUSIONRIFLE = 11
    SNIPER = 12
    PULSERIFLE = 13
    SCOUTRIFLE = 14
    SIDEARM = 17
    SWORD = 18
    LINEARFUSIONRIFLE = 22
    GRENADELAUNCHER = 23
    SUBMACHINEGUN = 24
    TRACERIFLE = 25
    BOW = 31
    GLAIVE = 33


class StatHashes(_UnknownFallbackEnum):
    """Stat definitions, keyed by their manifest hash."""

    UNKNOWN = 0
    ACCURACY = 1591432999
    AIM_ASSIST = 1345609583
    AIRBORNE = 2714457168
    AMMO_CAPACITY = 925767036
    ATTACK = 1480404414
    BLAST_RADIUS = 3614673599
    CHARGE_RATE = 3022301683
    CHARGE_TIME = 2961396640
    DISCIPLINE = 1735777505
    DRAW_TIME = 447667954
    GUARD_EFFICIENCY = 2762071195
    GUARD_ENDURANCE = 3736848092
    GUARD_RESISTANCE = 209426660
    HANDLING = 943549884
    IMPACT = 4043523819
    INTELLECT = 144602215
    INVENTORY_SIZE = 1931675084
    MAGAZINE = 3871231066
    MOBILITY = 2996146975
    POWER = 1935470627
    RANGE = 1240592695
    RECOIL_DIR = 2715839340
    RECOVERY = 1943323491
    RELOAD = 4188031367
    RESILIENCE = 392767087
    RPM = 4284893193
    SHIELD_DURATION = 1842278586
    STABILITY = 155624089
    STRENGTH = 4244567218
    SWING_SPEED = 2837207746
    VELOCITY = 2523465841
    ZOOM = 3555269338

    def is_weapon_stat(self) -> bool:
        """Whether this stat belongs to weapons rather than armour or characters."""
        return self in _WEAPON_STATS


_WEAPON_STATS = frozenset(
    {
        StatHashes.ACCURACY,
        StatHashes.AIM_ASSIST,
        StatHashes.AIRBORNE,
        StatHashes.AMMO_CAPACITY,
        StatHashes.ZOOM,
        StatHashes.RANGE,
        StatHashes.STABILITY,
        StatHashes.RELOAD,
        StatHashes.MAGAZINE,
        StatHashes.HANDLING,
        StatHashes.VELOCITY,
        StatHashes.BLAST_RADIUS,
        StatHashes.CHARGE_TIME,
        StatHashes.INVENTORY_SIZE,
        StatHashes.RECOIL_DIR,
        StatHashes.RPM,
        StatHashes.GUARD_EFFICIENCY,
        StatHashes.GUARD_ENDURANCE,
        StatHashes.GUARD_RESISTANCE,
        StatHashes.DRAW_TIME,
        StatHashes.SWING_SPEED,
        StatHashes.SHIELD_DURATION,
        StatHashes.IMPACT,
        StatHashes.CHARGE_RATE,
    }
)


class DamageType(_UnknownFallbackEnum):
    """Damage element, keyed by its manifest hash."""

    UNKNOWN = 0
    ARC = 2303181850
    VOID = 3454344768
    SOLAR = 1847026933
    STASIS = 151347233
    KINETIC = 3373582085
    STRAND = 3949783978


class DamageSource(Enum):
    """Origin of incoming damage."""

    SNIPER = auto()
    MELEE = auto()
    EXPLOSION = auto()
    ENVIRONMENTAL = auto()
    UNKNOWN = auto()