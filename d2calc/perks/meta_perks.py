"""Built-in weapon behaviour and armour mods."""

from __future__ import annotations

from d2calc.enemies import EnemyType
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
    ExplosivePercentResponse,
    FiringModifierResponse,
    FlinchModifierResponse,
    HandlingModifierResponse,
    InventoryModifierResponse,
    RangeModifierResponse,
    ReloadModifierResponse,
    Stat,
)

_MINOR_SCALARS = {
    WeaponType.SIDEARM: 1.2,
    WeaponType.TRACERIFLE: 1.2,
    WeaponType.SCOUTRIFLE: 1.2,
    WeaponType.BOW: 1.2,
    WeaponType.AUTORIFLE: 1.15,
    WeaponType.PULSERIFLE: 1.15,
    WeaponType.SUBMACHINEGUN: 1.1,
    WeaponType.HANDCANNON: 1.05,
    WeaponType.SNIPER: 1.6,
}
_ELITE_SCALARS = {WeaponType.TRACERIFLE: 1.2, WeaponType.SNIPER: 1.75}
_MINIBOSS_SCALARS = {WeaponType.SNIPER: 1.35}
_CHAMPION_SCALARS = {WeaponType.SNIPER: 1.25}

_BOW_LIGHTWEIGHT = {905, 1470121888, 3239299468, 2636679416}
_BOW_PRECISION = {906, 2186532310, 1573888036, 2226793914}
_LEVIATHANS_BREATH = 1699724249

_CHARGE_TIME_DELAY = {WeaponType.FUSIONRIFLE: 0.0040, WeaponType.LINEARFUSIONRIFLE: 0.0033}


def _tiered(value: int, tiers: tuple[int, ...]) -> int:
    """Pick ``tiers[value]``, using the last tier for larger values."""
    return tiers[min(value, len(tiers) - 1)]


def _charge_time_delta(inp: ModifierResponseInput) -> float:
    charge_time = inp.calc_data.stats[int(StatHashes.CHARGE_TIME)]
    return float(charge_time.perk_val() - charge_time.base_value)


def meta_perks(registry: PerkRegistry) -> None:
    """Register built-in weapon behaviour and mod modifiers in ``registry``."""

    @registry.register(ModifierKind.DAMAGE, Perks.BUILT_IN)
    def _built_in_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        calc = inp.calc_data
        crit_scale = 1.0
        dmg_scale = 1.0
        if calc.weapon_type == WeaponType.LINEARFUSIONRIFLE and not inp.pvp:
            crit_scale *= 1.15
        if calc.damage_type == DamageType.KINETIC and not inp.pvp and calc.enemy_type != EnemyType.BOSS:
            if calc.ammo_type == AmmoType.PRIMARY:
                dmg_scale *= 1.1
            elif calc.ammo_type == AmmoType.SPECIAL:
                dmg_scale *= 1.15
        if (
            calc.ammo_type == AmmoType.PRIMARY
            and calc.enemy_type == EnemyType.MINOR
            and not inp.pvp
            and calc.intrinsic_hash > 1000
        ):
            dmg_scale *= 1.3
        if not inp.pvp:
            scalars = {
                EnemyType.MINOR: _MINOR_SCALARS,
                EnemyType.ELITE: _ELITE_SCALARS,
                EnemyType.MINIBOSS: _MINIBOSS_SCALARS,
                EnemyType.CHAMPION: _CHAMPION_SCALARS,
            }.get(calc.enemy_type, {})
            dmg_scale *= scalars.get(calc.weapon_type, 1.0)
        if calc.weapon_type == WeaponType.LINEARFUSIONRIFLE and calc.intrinsic_hash < 1000:
            stat = _charge_time_delta(inp)
            total_damage = calc.curr_firing_data.damage * calc.curr_firing_data.burst_size
            dmg_scale *= 1.0 - (0.6 * stat) / total_damage
        return DamageModifierResponse(
            impact_dmg_scale=dmg_scale,
            explosive_dmg_scale=dmg_scale,
            crit_scale=crit_scale,
        )

    @registry.register(ModifierKind.FIRING, Perks.BUILT_IN)
    def _built_in_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        calc = inp.calc_data
        delay_add = 0.0
        if calc.weapon_type in _CHARGE_TIME_DELAY and calc.intrinsic_hash < 1000:
            delay_add -= _charge_time_delta(inp) * _CHARGE_TIME_DELAY[calc.weapon_type]
        if calc.weapon_type == WeaponType.BOW:
            draw = float(calc.stats[int(StatHashes.DRAW_TIME)].perk_val())
            if calc.intrinsic_hash in _BOW_LIGHTWEIGHT:
                delay_add += (draw * -4.0 + 900.0) / 1100.0
            elif calc.intrinsic_hash in _BOW_PRECISION:
                delay_add += (draw * -3.6 + 900.0) / 1100.0
            elif calc.intrinsic_hash == _LEVIATHANS_BREATH:
                delay_add += (draw * -5.0 + 1428.0) / 1100.0
        return FiringModifierResponse(burst_delay_add=delay_add)

    @registry.register(ModifierKind.EXPLOSIVE_PERCENT, Perks.BUILT_IN)
    def _built_in_explosive(inp: ModifierResponseInput) -> ExplosivePercentResponse:
        calc = inp.calc_data
        if calc.weapon_type == WeaponType.GRENADELAUNCHER:
            blast_radius = calc.stats.get(int(StatHashes.BLAST_RADIUS), Stat()).perk_val()
            if calc.ammo_type == AmmoType.SPECIAL:
                return ExplosivePercentResponse(
                    percent=0.5 + 0.003 * blast_radius, retain_base_total=True
                )
            if calc.ammo_type == AmmoType.HEAVY:
                return ExplosivePercentResponse(
                    percent=0.7 + 0.00175 * blast_radius, retain_base_total=True
                )
        if calc.weapon_type == WeaponType.SIDEARM and calc.intrinsic_hash == 914:
            percent = 0.536 if inp.pvp else 0.822
            return ExplosivePercentResponse(percent=percent, retain_base_total=True)
        if calc.weapon_type == WeaponType.ROCKET and calc.intrinsic_hash < 1000:
            return ExplosivePercentResponse(percent=0.778, retain_base_total=True)
        return ExplosivePercentResponse(percent=0.0, retain_base_total=True)

    @registry.register(ModifierKind.HANDLING, Perks.DEXTERITY_MOD)
    def _dexterity(inp: ModifierResponseInput) -> HandlingModifierResponse:
        swap_scale = 0.85 - clamp(inp.value, 1, 3) * 0.05 if inp.value > 0 else 1.0
        return HandlingModifierResponse(stow_scale=swap_scale, draw_scale=swap_scale)

    @registry.register(ModifierKind.HANDLING, Perks.TARGETING_MOD)
    def _targeting_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        return HandlingModifierResponse(ads_scale=0.75 if inp.value > 0 else 1.0)

    @registry.register(ModifierKind.STAT_BUMP, Perks.TARGETING_MOD)
    def _targeting_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if inp.value == 0:
            return {}
        return {int(StatHashes.AIM_ASSIST): _tiered(inp.value, (0, 5, 8, 10))}

    reserve_tiers = (0, 20, 40, 50)

    @registry.register(ModifierKind.INVENTORY, Perks.RESERVE_MOD)
    def _reserve_inventory(inp: ModifierResponseInput) -> InventoryModifierResponse:
        return InventoryModifierResponse(
            inv_stat_add=_tiered(inp.value, reserve_tiers), inv_scale=1.0
        )

    @registry.register(ModifierKind.STAT_BUMP, Perks.RESERVE_MOD)
    def _reserve_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {int(StatHashes.INVENTORY_SIZE): _tiered(inp.value, reserve_tiers)}

    loader_tiers = (0, 10, 15, 18)

    @registry.register(ModifierKind.RELOAD, Perks.LOADER_MOD)
    def _loader_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        return ReloadModifierResponse(
            reload_stat_add=_tiered(inp.value, loader_tiers),
            reload_time_scale=0.85 if inp.value > 0 else 1.0,
        )

    @registry.register(ModifierKind.STAT_BUMP, Perks.LOADER_MOD)
    def _loader_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {int(StatHashes.RELOAD): _tiered(inp.value, loader_tiers)}

    @registry.register(ModifierKind.FLINCH, Perks.UNFLINCHING_MOD)
    def _unflinching(inp: ModifierResponseInput) -> FlinchModifierResponse:
        if inp.value > 2:
            return FlinchModifierResponse(flinch_scale=0.6)
        if inp.value == 2:
            return FlinchModifierResponse(flinch_scale=0.7)
        if inp.value == 1:
            return FlinchModifierResponse(flinch_scale=0.75)
        return FlinchModifierResponse()

    @registry.register(ModifierKind.STAT_BUMP, Perks.RALLY_BARRICADE)
    def _rally_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {int(StatHashes.STABILITY): 30, int(StatHashes.RELOAD): 100}

    @registry.register(ModifierKind.FLINCH, Perks.RALLY_BARRICADE)
    def _rally_flinch(inp: ModifierResponseInput) -> FlinchModifierResponse:
        return FlinchModifierResponse(flinch_scale=0.5)

    @registry.register(ModifierKind.RELOAD, Perks.RALLY_BARRICADE)
    def _rally_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        return ReloadModifierResponse(reload_stat_add=100, reload_time_scale=0.9)

    @registry.register(ModifierKind.RANGE, Perks.RALLY_BARRICADE)
    def _rally_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_all_scale=1.1)

    @registry.register(ModifierKind.FIRING, Perks.ADEPT_CHARGE_TIME)
    def _adept_charge_time(inp: ModifierResponseInput) -> FiringModifierResponse:
        delay = {WeaponType.FUSIONRIFLE: -0.040, WeaponType.LINEARFUSIONRIFLE: -0.033}
        return FiringModifierResponse(burst_delay_add=delay.get(inp.calc_data.weapon_type, 0.0))

    @registry.register(ModifierKind.STAT_BUMP, Perks.IN_FLIGHT_COMPENSATOR_MOD)
    def _in_flight_compensator(inp: ModifierResponseInput) -> dict[int, int]:
        return {int(StatHashes.AIRBORNE): _tiered(inp.value, (0, 15, 25, 30))}