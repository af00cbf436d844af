"""Perk identifiers and the registry of perk modifier functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional

from d2calc.perks.responses import CalculationInput


class Perks(Enum):
    """Perks, mods, buffs and intrinsics that modify weapon behaviour."""

    BUILT_IN = auto()

    # mods
    DEXTERITY_MOD = auto()
    TARGETING_MOD = auto()
    RESERVE_MOD = auto()
    LOADER_MOD = auto()
    UNFLINCHING_MOD = auto()
    RALLY_BARRICADE = auto()
    ADEPT_CHARGE_TIME = auto()
    IN_FLIGHT_COMPENSATOR_MOD = auto()

    # buffs and debuffs
    WELL_OF_RADIANCE = auto()
    NOBLE_ROUNDS = auto()
    RADIANT = auto()
    PATH_OF_THE_BURNING_STEPS = auto()
    BANNER_SHIELD = auto()
    EMP_RIFT = auto()
    WARD_OF_DAWN = auto()
    GYRFALCON = auto()
    AEON_INSIGHT = auto()
    UMBRAL_SHARPENING = auto()
    WORM_BYPRODUCT = auto()
    WEAKEN = auto()
    TRACTOR_CANNON = auto()
    MOEBIUS_QUIVER = auto()
    DEAD_FALL = auto()
    FELWINTERS = auto()
    ENHANCED_SCANNER_AUGMENT = auto()
    SURGE_MOD = auto()
    LUCENT_BLADES = auto()
    ETERNAL_WARRIOR = auto()
    MANTLE_OF_BATTLE_HARMONY = auto()
    MASK_OF_BAKRIS = auto()
    SANGUINE_ALCHEMY = auto()
    FOETRACERS = auto()
    GLACIAL_GUARD = auto()
    NO_BACKUP_PLANS = auto()
    AEON_FORCE = auto()
    DOOM_FANG = auto()

    # exotic armor
    BALLINDORSE_WRATHWEAVERS = auto()
    LUCKY_PANTS = auto()
    TOME_OF_DAWN = auto()
    KNUCKLEHEAD_RADAR = auto()
    MECHANEERS_TRICKSLEEVES = auto()
    OATHKEEPER = auto()
    SEALED_AHAMKARA_GRASPS = auto()
    ACTIUM_WAR_RIG = auto()
    HALLOWFIRE_HEART = auto()
    LION_RAMPART = auto()
    PEACEKEEPERS = auto()
    PEREGRINE_GREAVES = auto()
    EYE_OF_ANOTHER_WORLD = auto()
    ASTROCYTE_VERSE = auto()
    NECROTIC_GRIPS = auto()
    BOOTS_OF_THE_ASSEMBLER = auto()
    RAIN_OF_FIRE = auto()
    SPEEDLOADER_SLACKS = auto()
    LUNA_FACTION = auto()
    TRITON_VICE = auto()

    # exotic and intrinsic weapon perks
    PARACAUSAL_SHOT = auto()
    HUNTERS_TRANCE = auto()
    HUNTERS_TRACE = auto()
    MEMENTO_MORI = auto()
    ROADBORN = auto()
    REIGN_HAVOC = auto()
    WORMS_HUNGER = auto()
    LAGRANGIAN_SIGHT = auto()
    TOUCH_OF_MALICE = auto()
    ROCKET_TRACERS = auto()
    HAKKE_HEAVY_BURST = auto()
    SWOOPING_TALONS = auto()
    IGNITION_TRIGGER = auto()
    CALCULATED_BALANCE = auto()
    RAVENOUS_BEAST = auto()
    RELEASE_THE_WOLVES = auto()
    FUNDAMENTALS = auto()
    THIN_THE_HERD = auto()
    CHIMERA = auto()
    FIRST_GLANCE = auto()
    FATE_OF_ALL_FOOLS = auto()
    HONED_EDGE = auto()
    TAKEN_PREDATOR = auto()
    MARKOV_CHAIN = auto()
    STRING_OF_CURSES = auto()
    STORM_AND_STRESS = auto()
    DUAL_SPEED_RECEIVER = auto()
    FULL_STOP = auto()
    RAT_PACK = auto()
    RIDE_THE_BULL = auto()
    SPINNING_UP = auto()
    CRANIAL_SPIKE = auto()
    DARK_FORGED_TRIGGER = auto()
    HARMONIC_LASER = auto()
    AGERS_SCEPTER_CATALYST = auto()
    COLD_FUSION = auto()
    MARKSMAN_SIGHTS = auto()
    BROADSIDE = auto()
    TEMPORAL_UNLIMITER = auto()
    FOURTH_HORSEMAN_CATALYST = auto()
    BLACK_HOLE = auto()
    IMPETUS = auto()
    BROADHEAD = auto()
    DESPERATION = auto()
    IONIC_RETURN = auto()
    UNREPENTANT = auto()
    ARC_CONDUCTOR = auto()
    VOID_LEECH = auto()
    WHITE_NAIL = auto()
    WHISPERED_BREATHING = auto()
    INVERSE_RELATIONSHIP = auto()
    SPINDLE = auto()
    THE_RIGHT_CHOICE = auto()
    PICK_YOUR_POISON = auto()
    STRING_THEORY = auto()
    JUDGEMENT = auto()


class ModifierKind(Enum):
    """What a registered perk function modifies."""

    STAT_BUMP = auto()
    DAMAGE = auto()
    HANDLING = auto()
    FIRING = auto()
    RANGE = auto()
    RELOAD = auto()
    MAGAZINE = auto()
    INVENTORY = auto()
    EXTRA_DAMAGE = auto()
    EXPLOSIVE_PERCENT = auto()
    VELOCITY = auto()
    REFUND = auto()
    FLINCH = auto()


@dataclass
class ModifierResponseInput:
    """What a perk function receives."""

    calc_data: CalculationInput = field(default_factory=CalculationInput)
    value: int = 0
    is_enhanced: bool = False
    pvp: bool = False
    cached_data: dict[str, float] = field(default_factory=dict)


ModifierFunc = Callable[[ModifierResponseInput], Any]


class PerkRegistry:
    """Maps (modifier kind, perk) pairs to the functions that compute them.

    Adding a function for a pair that already has one replaces it.
    """

    def __init__(self) -> None:
        self._funcs: dict[tuple[ModifierKind, Perks], ModifierFunc] = {}

    def add(self, kind: ModifierKind, perk: Perks, func: ModifierFunc) -> None:
        self._funcs[(kind, perk)] = func

    def register(self, kind: ModifierKind, perk: Perks) -> Callable[[ModifierFunc], ModifierFunc]:
        """Decorator form of :meth:`add`."""

        def decorator(func: ModifierFunc) -> ModifierFunc:
            self.add(kind, perk, func)
            return func

        return decorator

    def get(self, kind: ModifierKind, perk: Perks) -> Optional[ModifierFunc]:
        """The function registered for the pair, or None."""
        return self._funcs.get((kind, perk))

    def __contains__(self, key: tuple[ModifierKind, Perks]) -> bool:
        return key in self._funcs

    def __len__(self) -> int:
        return len(self._funcs)


def clamp(value, low, high):
    """Limit ``value`` to the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return max(low, min(value, high))