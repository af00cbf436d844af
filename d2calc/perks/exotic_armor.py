"""Exotic armour pieces that change weapon stats and damage."""

from __future__ import annotations

from d2calc.enums import AmmoType, DamageType, StatHashes, WeaponType
from d2calc.perks.registry import (
    ModifierKind,
    ModifierResponseInput,
    PerkRegistry,
    Perks,
    clamp,
)
from d2calc.perks.responses import (
    DamageModifierResponse,
    FlinchModifierResponse,
    HandlingModifierResponse,
    RangeModifierResponse,
    ReloadModifierResponse,
)

_AIRBORNE = int(StatHashes.AIRBORNE)
_HANDLING = int(StatHashes.HANDLING)
_RELOAD = int(StatHashes.RELOAD)
_DRAW_TIME = int(StatHashes.DRAW_TIME)

# Thorn, Osteo Striga, Touch of Malice, Necrochasm
_NECROTIC_WEAPONS = frozenset({1863355414, 2965975126, 2724693746, 4184462049})
_LUMINA = 2144092201

# (reload, handling, airborne) bumps and reload time scale per stack count
_SPEEDLOADER_STATS = ((0, 0, 0), (40, 40, 30), (40, 40, 35), (45, 45, 40), (50, 50, 45), (55, 55, 50))
_SPEEDLOADER_RELOAD_SCALE = (1.0, 1.0, 0.925, 0.915, 0.91, 0.89)


def _speedloader_tier(value: int) -> int:
    return min(value, len(_SPEEDLOADER_STATS) - 1)


def _perk_active(inp: ModifierResponseInput, perk: Perks) -> bool:
    return inp.calc_data.perk_value_map.get(perk, 0) > 0


def exotic_armor(registry: PerkRegistry) -> None:
    """Register the exotic armour modifiers in ``registry``."""
    stat_bump = ModifierKind.STAT_BUMP
    damage = ModifierKind.DAMAGE
    handling = ModifierKind.HANDLING
    reload = ModifierKind.RELOAD

    def flat_airborne(perk: Perks, amount: int) -> None:
        registry.add(stat_bump, perk, lambda inp: {_AIRBORNE: amount})

    def conditional_airborne(perk: Perks, amount: int, condition) -> None:
        def func(inp: ModifierResponseInput) -> dict[int, int]:
            return {_AIRBORNE: amount} if condition(inp) else {}

        registry.add(stat_bump, perk, func)

    @registry.register(damage, Perks.BALLINDORSE_WRATHWEAVERS)
    def _ballindorse(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.calc_data.damage_type == DamageType.STASIS and inp.value >= 1:
            buff = 1.05 if inp.pvp else 1.15
            return DamageModifierResponse(impact_dmg_scale=buff, explosive_dmg_scale=buff)
        return DamageModifierResponse()

    # Does not account for Sturm overcharge or Memento.
    @registry.register(damage, Perks.LUCKY_PANTS)
    def _lucky_pants_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if (
            _perk_active(inp, Perks.PARACAUSAL_SHOT)
            or _perk_active(inp, Perks.STORM_AND_STRESS)
            or inp.pvp
        ):
            return DamageModifierResponse()
        mult = 0.3 if inp.calc_data.ammo_type == AmmoType.SPECIAL else 0.45
        return DamageModifierResponse(impact_dmg_scale=1.0 + mult * clamp(inp.value, 0, 10))

    conditional_airborne(Perks.TOME_OF_DAWN, 50, lambda inp: inp.value > 0)

    @registry.register(ModifierKind.FLINCH, Perks.TOME_OF_DAWN)
    def _tome_of_dawn_flinch(inp: ModifierResponseInput) -> FlinchModifierResponse:
        if inp.value > 0:
            return FlinchModifierResponse(flinch_scale=0.80)
        return FlinchModifierResponse()

    flat_airborne(Perks.KNUCKLEHEAD_RADAR, 20)

    @registry.register(damage, Perks.KNUCKLEHEAD_RADAR)
    def _knucklehead_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        health_percent = inp.cached_data.get("health%", 1.0)
        if health_percent >= 0.3 or inp.value == 0:
            return DamageModifierResponse()
        return DamageModifierResponse.basic_dmg_buff(1.0 + (0.3 - health_percent))

    def is_sidearm(inp: ModifierResponseInput) -> bool:
        return inp.calc_data.weapon_type == WeaponType.SIDEARM

    @registry.register(stat_bump, Perks.MECHANEERS_TRICKSLEEVES)
    def _tricksleeves_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if not is_sidearm(inp):
            return {}
        return {_AIRBORNE: 50, _HANDLING: 100, _RELOAD: 100}

    @registry.register(handling, Perks.MECHANEERS_TRICKSLEEVES)
    def _tricksleeves_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if is_sidearm(inp):
            return HandlingModifierResponse(stat_add=100)
        return HandlingModifierResponse()

    @registry.register(reload, Perks.MECHANEERS_TRICKSLEEVES)
    def _tricksleeves_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        if is_sidearm(inp):
            return ReloadModifierResponse(reload_stat_add=100)
        return ReloadModifierResponse()

    @registry.register(damage, Perks.MECHANEERS_TRICKSLEEVES)
    def _tricksleeves_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0 or not is_sidearm(inp):
            return DamageModifierResponse()
        mult = 1.10 if inp.pvp else 2.0
        return DamageModifierResponse(impact_dmg_scale=mult, explosive_dmg_scale=mult)

    @registry.register(stat_bump, Perks.OATHKEEPER)
    def _oathkeeper_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if inp.calc_data.weapon_type != WeaponType.BOW:
            return {}
        return {_AIRBORNE: 40, _DRAW_TIME: 10}

    conditional_airborne(Perks.SEALED_AHAMKARA_GRASPS, 50, lambda inp: inp.value > 0)

    def lucky_pants_active(inp: ModifierResponseInput) -> bool:
        return inp.value > 0 and inp.calc_data.weapon_type == WeaponType.HANDCANNON

    @registry.register(stat_bump, Perks.LUCKY_PANTS)
    def _lucky_pants_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if not lucky_pants_active(inp):
            return {}
        return {_AIRBORNE: 20, _HANDLING: 100}

    @registry.register(handling, Perks.LUCKY_PANTS)
    def _lucky_pants_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if lucky_pants_active(inp):
            return HandlingModifierResponse(draw_add=100, draw_scale=0.6)
        return HandlingModifierResponse()

    conditional_airborne(
        Perks.NO_BACKUP_PLANS, 30, lambda inp: inp.calc_data.weapon_type == WeaponType.SHOTGUN
    )
    conditional_airborne(
        Perks.ACTIUM_WAR_RIG,
        30,
        lambda inp: inp.calc_data.weapon_type in (WeaponType.AUTORIFLE, WeaponType.MACHINEGUN),
    )
    flat_airborne(Perks.HALLOWFIRE_HEART, 20)
    conditional_airborne(Perks.LION_RAMPART, 50, lambda inp: inp.value > 0)

    def is_smg(inp: ModifierResponseInput) -> bool:
        return inp.calc_data.weapon_type == WeaponType.SUBMACHINEGUN

    @registry.register(stat_bump, Perks.PEACEKEEPERS)
    def _peacekeepers_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if not is_smg(inp):
            return {}
        return {_AIRBORNE: 40, _HANDLING: 50}

    @registry.register(handling, Perks.PEACEKEEPERS)
    def _peacekeepers_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if is_smg(inp):
            return HandlingModifierResponse(
                stat_add=50, ads_scale=1.0, draw_scale=0.8, stow_scale=0.8
            )
        return HandlingModifierResponse()

    flat_airborne(Perks.PEREGRINE_GREAVES, 20)
    flat_airborne(Perks.EYE_OF_ANOTHER_WORLD, 15)

    @registry.register(stat_bump, Perks.ASTROCYTE_VERSE)
    def _astrocyte_stats(inp: ModifierResponseInput) -> dict[int, int]:
        stats = {_AIRBORNE: 30}
        if inp.value > 0:
            stats[_HANDLING] = 100
        return stats

    @registry.register(handling, Perks.ASTROCYTE_VERSE)
    def _astrocyte_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if inp.value == 0:
            return HandlingModifierResponse()
        return HandlingModifierResponse(draw_add=100)

    conditional_airborne(
        Perks.NECROTIC_GRIPS, 30, lambda inp: inp.calc_data.intrinsic_hash in _NECROTIC_WEAPONS
    )
    conditional_airborne(
        Perks.BOOTS_OF_THE_ASSEMBLER, 30, lambda inp: inp.calc_data.intrinsic_hash == _LUMINA
    )
    conditional_airborne(
        Perks.RAIN_OF_FIRE,
        30,
        lambda inp: inp.calc_data.weapon_type
        in (WeaponType.FUSIONRIFLE, WeaponType.LINEARFUSIONRIFLE),
    )

    @registry.register(stat_bump, Perks.SPEEDLOADER_SLACKS)
    def _speedloader_stats(inp: ModifierResponseInput) -> dict[int, int]:
        reload_bump, handling_bump, airborne_bump = _SPEEDLOADER_STATS[_speedloader_tier(inp.value)]
        return {_RELOAD: reload_bump, _HANDLING: handling_bump, _AIRBORNE: airborne_bump}

    @registry.register(handling, Perks.SPEEDLOADER_SLACKS)
    def _speedloader_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        return HandlingModifierResponse(stat_add=_SPEEDLOADER_STATS[_speedloader_tier(inp.value)][1])

    @registry.register(reload, Perks.SPEEDLOADER_SLACKS)
    def _speedloader_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        tier = _speedloader_tier(inp.value)
        return ReloadModifierResponse(
            reload_stat_add=_SPEEDLOADER_STATS[tier][0],
            reload_time_scale=_SPEEDLOADER_RELOAD_SCALE[tier],
        )

    @registry.register(stat_bump, Perks.LUNA_FACTION)
    def _luna_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {_RELOAD: 100} if inp.value >= 1 else {}

    @registry.register(reload, Perks.LUNA_FACTION)
    def _luna_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        if inp.value >= 1:
            return ReloadModifierResponse(reload_stat_add=100, reload_time_scale=0.9)
        return ReloadModifierResponse()

    @registry.register(ModifierKind.RANGE, Perks.LUNA_FACTION)
    def _luna_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        if inp.value >= 2:
            return RangeModifierResponse(range_all_scale=2.0)
        return RangeModifierResponse()

    @registry.register(stat_bump, Perks.TRITON_VICE)
    def _triton_vice_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if inp.value > 0 and inp.calc_data.weapon_type == WeaponType.GLAIVE:
            return {_RELOAD: 50}
        return {}