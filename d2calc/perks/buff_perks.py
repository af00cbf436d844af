"""Class abilities, buffs, debuffs and surges that scale weapon damage."""

from __future__ import annotations

from d2calc.enums import DamageType, StatHashes, WeaponType
from d2calc.perks.registry import (
    ModifierKind,
    ModifierResponseInput,
    PerkRegistry,
    Perks,
    clamp,
)
from d2calc.perks.responses import (
    DamageModifierResponse,
    HandlingModifierResponse,
    ReloadModifierResponse,
)

_SURGE_PVP = {1: 1.03, 2: 1.045, 3: 1.055}
_SURGE_PVP_MAX = 1.060
_SURGE_PVE = {1: 1.10, 2: 1.17, 3: 1.22}
_SURGE_PVE_MAX = 1.25

_UMBRAL_SHARPENING_PVE = (1.2, 1.25, 1.35, 1.4)
_SCANNER_AUGMENT_PVE = (1.08, 1.137, 1.173, 1.193, 1.2)


def _stacking_buff(cached_data: dict[str, float], key: str, desired: float) -> float:
    """Apply a buff that does not stack with others of the same category.

    Returns the extra factor needed to raise the current buff to ``desired``,
    or 1.0 when a buff at least as strong is already active.
    """
    current = cached_data.get(key, 1.0)
    if current >= desired:
        return 1.0
    cached_data[key] = desired
    return desired / current


def emp_buff(cached_data: dict[str, float], desired_buff: float) -> float:
    """Empowering buff factor; empowering buffs do not stack."""
    return _stacking_buff(cached_data, "empowering", desired_buff)


def surge_buff(cached_data: dict[str, float], value: int, pvp: bool) -> float:
    """Surge buff factor for ``value`` surge stacks; surges do not stack."""
    if value == 0:
        desired = 1.0
    elif pvp:
        desired = _SURGE_PVP.get(value, _SURGE_PVP_MAX)
    else:
        desired = _SURGE_PVE.get(value, _SURGE_PVE_MAX)
    return _stacking_buff(cached_data, "surge", desired)


def gbl_debuff(cached_data: dict[str, float], desired_buff: float) -> float:
    """Global debuff factor; global debuffs do not stack."""
    return _stacking_buff(cached_data, "debuff", desired_buff)


def _impact_and_explosive(buff: float) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=buff, explosive_dmg_scale=buff)


def buff_perks(registry: PerkRegistry) -> None:
    """Register the buff and debuff modifiers in ``registry``."""
    damage = ModifierKind.DAMAGE

    def empowering(perk: Perks, pve: float, pvp: float | None = None) -> None:
        pvp_value = pve if pvp is None else pvp

        def func(inp: ModifierResponseInput) -> DamageModifierResponse:
            desired = pvp_value if inp.pvp else pve
            return DamageModifierResponse.basic_dmg_buff(emp_buff(inp.cached_data, desired))

        registry.add(damage, perk, func)

    def debuff(perk: Perks, pve: float, pvp: float) -> None:
        def func(inp: ModifierResponseInput) -> DamageModifierResponse:
            desired = pvp if inp.pvp else pve
            return DamageModifierResponse.basic_dmg_buff(gbl_debuff(inp.cached_data, desired))

        registry.add(damage, perk, func)

    def value_surge(perk: Perks) -> None:
        def func(inp: ModifierResponseInput) -> DamageModifierResponse:
            return DamageModifierResponse.surge_buff(surge_buff(inp.cached_data, inp.value, inp.pvp))

        registry.add(damage, perk, func)

    empowering(Perks.WELL_OF_RADIANCE, 1.25)
    empowering(Perks.BANNER_SHIELD, 1.4, 1.35)
    empowering(Perks.EMP_RIFT, 1.2, 1.15)
    empowering(Perks.WARD_OF_DAWN, 1.25)
    empowering(Perks.GYRFALCON, 1.35, 1.0)

    @registry.register(damage, Perks.NOBLE_ROUNDS)
    def _noble_rounds(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        desired = 1.15 if inp.pvp else 1.35
        return DamageModifierResponse.basic_dmg_buff(emp_buff(inp.cached_data, desired))

    @registry.register(damage, Perks.RADIANT)
    def _radiant(inp: ModifierResponseInput) -> DamageModifierResponse:
        desired = 1.1 if inp.pvp else 1.25
        buff = emp_buff(inp.cached_data, desired)
        inp.cached_data["radiant"] = 1.0
        return DamageModifierResponse.basic_dmg_buff(buff)

    @registry.register(damage, Perks.PATH_OF_THE_BURNING_STEPS)
    def _burning_steps(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0 or inp.calc_data.damage_type != DamageType.SOLAR:
            return DamageModifierResponse()
        return DamageModifierResponse.surge_buff(surge_buff(inp.cached_data, inp.value, inp.pvp))

    @registry.register(damage, Perks.AEON_INSIGHT)
    def _aeon_insight(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        desired = 1.0 if inp.pvp else 1.35
        return _impact_and_explosive(emp_buff(inp.cached_data, desired))

    @registry.register(damage, Perks.UMBRAL_SHARPENING)
    def _umbral_sharpening(inp: ModifierResponseInput) -> DamageModifierResponse:
        desired = 1.0 if inp.pvp else _UMBRAL_SHARPENING_PVE[clamp(inp.value, 0, 3)]
        return DamageModifierResponse.basic_dmg_buff(emp_buff(inp.cached_data, desired))

    @registry.register(damage, Perks.WORM_BYPRODUCT)
    def _worm_byproduct(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        return _impact_and_explosive(1.15)

    debuff(Perks.WEAKEN, 1.15, 1.075)
    debuff(Perks.TRACTOR_CANNON, 1.3, 1.5)
    debuff(Perks.MOEBIUS_QUIVER, 1.3, 1.5)
    debuff(Perks.DEAD_FALL, 1.3, 1.5)

    @registry.register(damage, Perks.FELWINTERS)
    def _felwinters(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        return DamageModifierResponse.basic_dmg_buff(gbl_debuff(inp.cached_data, 1.3))

    @registry.register(damage, Perks.ENHANCED_SCANNER_AUGMENT)
    def _scanner_augment(inp: ModifierResponseInput) -> DamageModifierResponse:
        desired = 1.0 if inp.pvp else _SCANNER_AUGMENT_PVE[clamp(inp.value, 0, 4)]
        return DamageModifierResponse.basic_dmg_buff(gbl_debuff(inp.cached_data, desired))

    value_surge(Perks.SURGE_MOD)
    value_surge(Perks.ETERNAL_WARRIOR)

    @registry.register(ModifierKind.STAT_BUMP, Perks.LUCENT_BLADES)
    def _lucent_blades(inp: ModifierResponseInput) -> dict[int, int]:
        if inp.calc_data.weapon_type != WeaponType.SWORD or inp.value == 0:
            return {}
        bump = {1: 30, 2: 50}.get(inp.value, 60)
        return {int(StatHashes.CHARGE_RATE): bump}

    @registry.register(damage, Perks.MANTLE_OF_BATTLE_HARMONY)
    def _battle_harmony(inp: ModifierResponseInput) -> DamageModifierResponse:
        buff = surge_buff(inp.cached_data, 4, inp.pvp) if inp.value > 0 else 1.0
        return DamageModifierResponse.surge_buff(buff)

    @registry.register(damage, Perks.MASK_OF_BAKRIS)
    def _mask_of_bakris(inp: ModifierResponseInput) -> DamageModifierResponse:
        applies = inp.value > 0 and inp.calc_data.damage_type in (DamageType.STASIS, DamageType.ARC)
        buff = surge_buff(inp.cached_data, 4, inp.pvp) if applies else 1.0
        return DamageModifierResponse.surge_buff(buff)

    @registry.register(damage, Perks.SANGUINE_ALCHEMY)
    def _sanguine_alchemy(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0 or inp.calc_data.damage_type == DamageType.KINETIC:
            return DamageModifierResponse()
        return DamageModifierResponse.surge_buff(surge_buff(inp.cached_data, 2, inp.pvp))

    @registry.register(damage, Perks.FOETRACERS)
    def _foetracers(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        return DamageModifierResponse.surge_buff(surge_buff(inp.cached_data, 4, inp.pvp))

    @registry.register(damage, Perks.GLACIAL_GUARD)
    def _glacial_guard(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0 or inp.calc_data.damage_type != DamageType.STASIS:
            return DamageModifierResponse()
        return DamageModifierResponse.surge_buff(surge_buff(inp.cached_data, 4, inp.pvp))

    @registry.register(damage, Perks.NO_BACKUP_PLANS)
    def _no_backup_plans(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.calc_data.weapon_type != WeaponType.SHOTGUN or inp.value == 0:
            return DamageModifierResponse()
        desired = 1.10 if inp.pvp else 1.35
        return _impact_and_explosive(emp_buff(inp.cached_data, desired))

    @registry.register(ModifierKind.RELOAD, Perks.AEON_FORCE)
    def _aeon_force_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        if inp.value == 0:
            return ReloadModifierResponse()
        return ReloadModifierResponse(reload_stat_add=30, reload_time_scale=0.85)

    @registry.register(ModifierKind.STAT_BUMP, Perks.AEON_FORCE)
    def _aeon_force_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if inp.value == 0:
            return {}
        return {int(StatHashes.RELOAD): 30, int(StatHashes.HANDLING): 40}

    @registry.register(ModifierKind.HANDLING, Perks.AEON_FORCE)
    def _aeon_force_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if inp.value == 0:
            return HandlingModifierResponse()
        return HandlingModifierResponse(stat_add=40)

    @registry.register(damage, Perks.DOOM_FANG)
    def _doom_fang(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.calc_data.damage_type != DamageType.VOID or inp.value == 0:
            return DamageModifierResponse()
        return _impact_and_explosive(surge_buff(inp.cached_data, inp.value, inp.pvp))