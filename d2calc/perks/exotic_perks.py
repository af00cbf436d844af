"""Exotic and intrinsic weapon perks."""

from __future__ import annotations

import math

from d2calc.enums import StatHashes
from d2calc.perks.registry import (
    ModifierKind,
    ModifierResponseInput,
    PerkRegistry,
    Perks,
    clamp,
)
from d2calc.perks.responses import (
    DamageModifierResponse,
    ExtraDamageResponse,
    FiringModifierResponse,
    HandlingModifierResponse,
    MagazineModifierResponse,
    RangeModifierResponse,
    RefundResponse,
    ReloadModifierResponse,
)

_RELOAD = int(StatHashes.RELOAD)
_RANGE = int(StatHashes.RANGE)
_HANDLING = int(StatHashes.HANDLING)
_STABILITY = int(StatHashes.STABILITY)
_AIM_ASSIST = int(StatHashes.AIM_ASSIST)
_AIRBORNE = int(StatHashes.AIRBORNE)
_ZOOM = int(StatHashes.ZOOM)

# Raw perk hashes that other perks look for in the perk value map.
HUNTERS_TRANCE_STACKS_HASH = 213689231
RELEASE_THE_WOLVES_CATALYST_HASH = 431220296
HONED_EDGE_CATALYST_HASH = 529188544
DARK_FORGED_TRIGGER_STACKS_HASH = 1319823571

_PARACAUSAL_PVE = (1.0, 3.92, 4.0, 4.4, 5.25, 7.67, 11.71, 18.36)
_PARACAUSAL_PVP = (1.0, 1.01, 1.03, 1.13, 1.41, 1.96, 3.0, 4.73)


def _both(buff: float, crit_scale: float = 1.0) -> DamageModifierResponse:
    return DamageModifierResponse(
        impact_dmg_scale=buff, explosive_dmg_scale=buff, crit_scale=crit_scale
    )


def _hunters_trance_bump(inp: ModifierResponseInput) -> int:
    stacks = inp.calc_data.perk_value_map.get(HUNTERS_TRANCE_STACKS_HASH, 0)
    return clamp(stacks, 0, 7) * 5


def exotic_perks(registry: PerkRegistry) -> None:
    """Register exotic and intrinsic weapon perk modifiers in ``registry``."""
    damage = ModifierKind.DAMAGE
    stat_bump = ModifierKind.STAT_BUMP
    firing = ModifierKind.FIRING
    reload = ModifierKind.RELOAD
    range_ = ModifierKind.RANGE
    handling = ModifierKind.HANDLING

    @registry.register(damage, Perks.PARACAUSAL_SHOT)
    def _paracausal_shot(inp: ModifierResponseInput) -> DamageModifierResponse:
        calc = inp.calc_data
        buffs = _PARACAUSAL_PVP if inp.pvp else _PARACAUSAL_PVE
        buff = 1.0
        if calc.curr_mag == 1.0:
            buff = buffs[clamp(int(calc.shots_fired_this_mag), 0, 7)]
        if calc.time_this_mag < 0.0:
            buff = buffs[clamp(int(inp.value), 0, 7)]
        return _both(buff)

    @registry.register(stat_bump, Perks.HUNTERS_TRANCE)
    def _hunters_trance_stats(inp: ModifierResponseInput) -> dict[int, int]:
        bump = _hunters_trance_bump(inp)
        return {_RELOAD: bump, _RANGE: bump, _HANDLING: bump}

    @registry.register(reload, Perks.HUNTERS_TRANCE)
    def _hunters_trance_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        return ReloadModifierResponse(reload_stat_add=_hunters_trance_bump(inp))

    @registry.register(range_, Perks.HUNTERS_TRANCE)
    def _hunters_trance_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_stat_add=_hunters_trance_bump(inp))

    @registry.register(handling, Perks.HUNTERS_TRANCE)
    def _hunters_trance_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        return HandlingModifierResponse(stat_add=_hunters_trance_bump(inp))

    @registry.register(range_, Perks.HUNTERS_TRACE)
    def _hunters_trace(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_zoom_scale=4.5 / 1.7 if inp.value > 0 else 1.0)

    def memento_active(inp: ModifierResponseInput) -> bool:
        return inp.value > 0 and inp.calc_data.total_shots_fired < 7.0

    @registry.register(damage, Perks.MEMENTO_MORI)
    def _memento_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if not memento_active(inp):
            return _both(1.0)
        return _both(1.285 if inp.pvp else 1.5)

    @registry.register(range_, Perks.MEMENTO_MORI)
    def _memento_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_all_scale=0.85 if memento_active(inp) else 1.0)

    @registry.register(stat_bump, Perks.ROADBORN)
    def _roadborn_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if inp.value == 0:
            return {}
        return {_HANDLING: 20, _STABILITY: 20, _RELOAD: 40}

    @registry.register(damage, Perks.ROADBORN)
    def _roadborn_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        return DamageModifierResponse(crit_scale=1.17 if inp.value > 0 else 1.0)

    @registry.register(firing, Perks.ROADBORN)
    def _roadborn_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        return FiringModifierResponse(burst_delay_scale=0.583 if inp.value > 0 else 1.0)

    @registry.register(range_, Perks.ROADBORN)
    def _roadborn_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_all_scale=1.15 if inp.value > 0 else 1.05)

    @registry.register(reload, Perks.ROADBORN)
    def _roadborn_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        if inp.value == 0:
            return ReloadModifierResponse()
        return ReloadModifierResponse(reload_stat_add=40, reload_time_scale=0.75)

    @registry.register(firing, Perks.REIGN_HAVOC)
    def _reign_havoc_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        calc = inp.calc_data
        delay = 1.0
        if calc.shots_fired_this_mag >= calc.base_mag * 0.2:
            delay = 0.75
        if calc.shots_fired_this_mag >= calc.base_mag * 0.4:
            delay = 0.625
        return FiringModifierResponse(burst_delay_scale=delay)

    def one_hit_extra_damage(amount: float) -> ExtraDamageResponse:
        return ExtraDamageResponse(
            additive_damage=amount,
            time_for_additive_damage=0.0,
            increment_total_time=False,
            times_to_hit=1,
            hit_at_same_time=True,
            is_dot=False,
            weapon_scale=True,
            crit_scale=False,
            combatant_scale=True,
        )

    @registry.register(ModifierKind.EXTRA_DAMAGE, Perks.REIGN_HAVOC)
    def _reign_havoc_extra(inp: ModifierResponseInput) -> ExtraDamageResponse:
        return one_hit_extra_damage(65.0 if inp.pvp else 65.0 * 1.3)

    @registry.register(damage, Perks.WORMS_HUNGER)
    def _worms_hunger(inp: ModifierResponseInput) -> DamageModifierResponse:
        return _both(1.0 + clamp(inp.value, 0, 20) * 0.1)

    @registry.register(damage, Perks.LAGRANGIAN_SIGHT)
    def _lagrangian_sight(inp: ModifierResponseInput) -> DamageModifierResponse:
        active = inp.value > 0 and inp.calc_data.time_total < 30.0
        return _both(1.4 if active else 1.0)

    @registry.register(damage, Perks.TOUCH_OF_MALICE)
    def _touch_of_malice_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.calc_data.curr_mag != 1.0:
            return _both(1.0)
        return _both(2.0 if inp.pvp else 2.4)

    @registry.register(ModifierKind.REFUND, Perks.TOUCH_OF_MALICE)
    def _touch_of_malice_refund(inp: ModifierResponseInput) -> RefundResponse:
        return RefundResponse(
            refund_mag=1 if inp.calc_data.curr_mag == 0.0 else 0,
            refund_reserves=0,
            crit=False,
            requirement=1,
        )

    @registry.register(ModifierKind.EXTRA_DAMAGE, Perks.ROCKET_TRACERS)
    def _rocket_tracers(inp: ModifierResponseInput) -> ExtraDamageResponse:
        return one_hit_extra_damage(24.0 if inp.pvp else 105.0)

    @registry.register(firing, Perks.HAKKE_HEAVY_BURST)
    def _hakke_heavy_burst_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        return FiringModifierResponse(burst_size_add=-2.0, burst_delay_add=-0.033)

    @registry.register(damage, Perks.HAKKE_HEAVY_BURST)
    def _hakke_heavy_burst_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        return _both(1.485, crit_scale=1.8525 / inp.calc_data.base_crit_mult)

    @registry.register(damage, Perks.SWOOPING_TALONS)
    def _swooping_talons(inp: ModifierResponseInput) -> DamageModifierResponse:
        mult = 1.4 if inp.value > 0 else 1.0
        mult += inp.calc_data.total_shots_fired * 0.04
        return _both(clamp(mult, 1.0, 1.4))

    @registry.register(damage, Perks.IGNITION_TRIGGER)
    def _ignition_trigger(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value > 0 or inp.calc_data.total_shots_fired > 20.0:
            return _both(1.55 if inp.pvp else 1.99)
        return _both(1.0)

    @registry.register(damage, Perks.CALCULATED_BALANCE)
    def _calculated_balance(inp: ModifierResponseInput) -> DamageModifierResponse:
        bonus = 0.2 if inp.value > 0 else 0.0
        if inp.calc_data.time_total > 5.0:
            bonus = 0.0
        return _both(1.0 + bonus)

    @registry.register(firing, Perks.RAVENOUS_BEAST)
    def _ravenous_beast_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        if inp.value == 0:
            return FiringModifierResponse()
        return FiringModifierResponse(burst_delay_scale=0.8)

    @registry.register(damage, Perks.RAVENOUS_BEAST)
    def _ravenous_beast_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return _both(1.0)
        if inp.pvp:
            return _both(2.2, crit_scale=1.0 / (1.5 + -3.0 / 51.0))
        return _both(2.87, crit_scale=1.99 / 2.87)

    def has_wolves_catalyst(inp: ModifierResponseInput) -> bool:
        return RELEASE_THE_WOLVES_CATALYST_HASH in inp.calc_data.perk_value_map

    @registry.register(stat_bump, Perks.RELEASE_THE_WOLVES)
    def _wolves_stats(inp: ModifierResponseInput) -> dict[int, int]:
        if not has_wolves_catalyst(inp):
            return {}
        if inp.value == 0:
            return {_STABILITY: 40}
        if inp.value == 1:
            return {_RELOAD: 100}
        return {}

    @registry.register(reload, Perks.RELEASE_THE_WOLVES)
    def _wolves_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        if inp.value == 1 and has_wolves_catalyst(inp):
            return ReloadModifierResponse(reload_stat_add=100, reload_time_scale=0.85)
        return ReloadModifierResponse()

    @registry.register(firing, Perks.RELEASE_THE_WOLVES)
    def _wolves_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        if inp.value == 0:
            return FiringModifierResponse()
        return FiringModifierResponse(burst_delay_scale=0.4)

    @registry.register(damage, Perks.RELEASE_THE_WOLVES)
    def _wolves_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        return _both(1.4 if inp.value > 0 else 1.0)

    @registry.register(stat_bump, Perks.FUNDAMENTALS)
    def _fundamentals_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {
            1: {_STABILITY: 20, _AIM_ASSIST: 10},
            2: {_AIRBORNE: 20, _RELOAD: 35},
            3: {_RANGE: 5, _HANDLING: 25},
        }.get(inp.value, {})

    @registry.register(handling, Perks.FUNDAMENTALS)
    def _fundamentals_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        return HandlingModifierResponse(stat_add=25 if inp.value == 3 else 0)

    @registry.register(reload, Perks.FUNDAMENTALS)
    def _fundamentals_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        return ReloadModifierResponse(reload_stat_add=35 if inp.value == 2 else 0)

    @registry.register(range_, Perks.FUNDAMENTALS)
    def _fundamentals_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_stat_add=5 if inp.value == 3 else 0)

    @registry.register(stat_bump, Perks.THIN_THE_HERD)
    def _thin_the_herd_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {_RELOAD: 70} if inp.value > 0 else {}

    @registry.register(reload, Perks.THIN_THE_HERD)
    def _thin_the_herd_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        if inp.value > 0:
            return ReloadModifierResponse(reload_stat_add=70)
        return ReloadModifierResponse()

    @registry.register(handling, Perks.CHIMERA)
    def _chimera_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if inp.value > 0:
            return HandlingModifierResponse(stat_add=100)
        return HandlingModifierResponse()

    @registry.register(stat_bump, Perks.CHIMERA)
    def _chimera_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {_RELOAD: 100} if inp.value > 0 else {}

    @registry.register(damage, Perks.FIRST_GLANCE)
    def _first_glance(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return _both(1.0)
        if inp.calc_data.total_shots_fired == 0.0:
            return _both(1.33)
        return _both(1.0, crit_scale=1.33)

    @registry.register(damage, Perks.FATE_OF_ALL_FOOLS)
    def _fate_of_all_fools(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value > inp.calc_data.total_shots_fired:
            crit = inp.calc_data.base_crit_mult
            return _both(crit, crit_scale=1.0 / crit)
        return _both(1.0)

    @registry.register(damage, Perks.HONED_EDGE)
    def _honed_edge(inp: ModifierResponseInput) -> DamageModifierResponse:
        has_catalyst = HONED_EDGE_CATALYST_HASH in inp.calc_data.perk_value_map
        if inp.value == 2:
            mult = 1.183 if inp.pvp else 2.0
        elif inp.value == 3:
            mult = 1.412 if inp.pvp else 3.0
        elif inp.value == 4:
            mult = 1.504 if inp.pvp else 4.0
            if has_catalyst:
                mult *= 1.2
        else:
            mult = 1.0
        return _both(mult)

    @registry.register(damage, Perks.TAKEN_PREDATOR)
    def _taken_predator(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value in (1, 2):
            return _both(1.25)
        if inp.value == 3:
            return _both(1.25 * 1.25)
        return _both(1.0)

    @registry.register(damage, Perks.MARKOV_CHAIN)
    def _markov_chain(inp: ModifierResponseInput) -> DamageModifierResponse:
        bonus = (1.0 / 15.0) * clamp(inp.value, 0, 5) * (1.0 if inp.pvp else 2.0)
        return _both(1.0 + bonus)

    @registry.register(damage, Perks.STRING_OF_CURSES)
    def _string_of_curses(inp: ModifierResponseInput) -> DamageModifierResponse:
        bonus = 0.2 * clamp(inp.value, 0, 5)
        if inp.pvp:
            bonus = math.ceil((bonus * 100.0 / 2.0) / 4.0) * 0.04
        if inp.calc_data.time_total > 3.5:
            bonus = 0.0
        return _both(1.0 + bonus)

    @registry.register(damage, Perks.STORM_AND_STRESS)
    def _storm_and_stress(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        return _both(1.8 if inp.pvp else 3.62)

    @registry.register(range_, Perks.DUAL_SPEED_RECEIVER)
    def _dual_speed_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        if inp.value == 0:
            return RangeModifierResponse()
        return RangeModifierResponse(range_stat_add=30)

    @registry.register(stat_bump, Perks.DUAL_SPEED_RECEIVER)
    def _dual_speed_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {_ZOOM: 3, _RANGE: 30} if inp.value > 0 else {}

    @registry.register(damage, Perks.FULL_STOP)
    def _full_stop(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.pvp:
            return DamageModifierResponse()
        return DamageModifierResponse(crit_scale=2.9)

    @registry.register(firing, Perks.RAT_PACK)
    def _rat_pack_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        if inp.value == 0:
            return FiringModifierResponse()
        stacks = clamp(inp.value - 1, 0, 4)
        return FiringModifierResponse(burst_delay_add=stacks * (-0.625 / 30.0))

    @registry.register(ModifierKind.MAGAZINE, Perks.RAT_PACK)
    def _rat_pack_magazine(inp: ModifierResponseInput) -> MagazineModifierResponse:
        stacks = clamp(inp.value - 1, 0, 4)
        per_stack = 2.25 if stacks == 4 else 2.0
        return MagazineModifierResponse(magazine_add=stacks * per_stack)

    def spin_up(divisor: float, step: float):
        def func(inp: ModifierResponseInput) -> FiringModifierResponse:
            extra = int(inp.calc_data.shots_fired_this_mag / divisor)
            stacks = clamp(inp.value + extra, 0, 2)
            return FiringModifierResponse(burst_delay_add=stacks * (-step / 30.0))

        return func

    registry.add(firing, Perks.RIDE_THE_BULL, spin_up(10.0, 0.25))
    registry.add(firing, Perks.SPINNING_UP, spin_up(12.0, 0.5))

    @registry.register(stat_bump, Perks.CRANIAL_SPIKE)
    def _cranial_spike_stats(inp: ModifierResponseInput) -> dict[int, int]:
        stacks = clamp(inp.value, 0, 5)
        return {_RANGE: 8 * stacks, _AIM_ASSIST: 4 * stacks}

    @registry.register(reload, Perks.CRANIAL_SPIKE)
    def _cranial_spike_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
        return ReloadModifierResponse(reload_time_scale=0.97 ** clamp(inp.value, 0, 5))

    @registry.register(range_, Perks.CRANIAL_SPIKE)
    def _cranial_spike_range(inp: ModifierResponseInput) -> RangeModifierResponse:
        return RangeModifierResponse(range_stat_add=8 * clamp(inp.value, 0, 5))

    @registry.register(firing, Perks.DARK_FORGED_TRIGGER)
    def _dark_forged_trigger(inp: ModifierResponseInput) -> FiringModifierResponse:
        if inp.value == 0:
            return FiringModifierResponse()
        stacks = inp.calc_data.perk_value_map.get(DARK_FORGED_TRIGGER_STACKS_HASH, 0)
        if stacks > 4:
            return FiringModifierResponse(burst_delay_add=-5.0 / 30.0)
        return FiringModifierResponse(burst_delay_add=-1.0 / 30.0)