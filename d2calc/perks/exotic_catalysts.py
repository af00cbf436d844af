"""Exotic catalysts and the remaining exotic weapon perks."""

from __future__ import annotations

from d2calc.enemies import EnemyType
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
    FiringModifierResponse,
    HandlingModifierResponse,
    MagazineModifierResponse,
    RefundResponse,
)

_HANDLING = int(StatHashes.HANDLING)

# Intrinsic hash of the weapon whose Judgement buff is always the stronger one.
JUDGEMENT_STRONG_INTRINSIC = 1797707170

_BROADSIDE = (1.0, 1.18, 1.39, 1.59, 1.81)
_HARMONIC_LASER_PVE = (1.0, 1.323, 1.687)
_HARMONIC_LASER_PVP = (1.0, 1.03, 1.0625)
_INVERSE_RELATIONSHIP_PVE = (1.0, 1.1, 1.2, 1.4)
_INVERSE_RELATIONSHIP_PVP = (1.0, 1.01, 1.025, 1.05)


def _tier(table: tuple[float, ...], value: int) -> float:
    """Pick ``table[value]``, using the last entry for larger values."""
    return table[min(value, len(table) - 1)]


def _both(buff: float, crit_scale: float = 1.0) -> DamageModifierResponse:
    return DamageModifierResponse(
        impact_dmg_scale=buff, explosive_dmg_scale=buff, crit_scale=crit_scale
    )


def catalyst_perks(registry: PerkRegistry) -> None:
    """Register exotic catalyst and late exotic perk modifiers in ``registry``."""
    damage = ModifierKind.DAMAGE
    firing = ModifierKind.FIRING
    magazine = ModifierKind.MAGAZINE

    @registry.register(damage, Perks.HARMONIC_LASER)
    def _harmonic_laser(inp: ModifierResponseInput) -> DamageModifierResponse:
        table = _HARMONIC_LASER_PVP if inp.pvp else _HARMONIC_LASER_PVE
        return DamageModifierResponse(impact_dmg_scale=_tier(table, inp.value))

    @registry.register(damage, Perks.AGERS_SCEPTER_CATALYST)
    def _agers_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value > 0:
            return DamageModifierResponse(impact_dmg_scale=1.8)
        return DamageModifierResponse()

    @registry.register(magazine, Perks.AGERS_SCEPTER_CATALYST)
    def _agers_magazine(inp: ModifierResponseInput) -> MagazineModifierResponse:
        doubled = inp.value > 0 and inp.calc_data.total_shots_fired == 0.0
        return MagazineModifierResponse(magazine_scale=2.0 if doubled else 1.0)

    @registry.register(damage, Perks.COLD_FUSION)
    def _cold_fusion(inp: ModifierResponseInput) -> DamageModifierResponse:
        buff = 0.0195 * clamp(inp.calc_data.total_shots_hit, 0.0, 41.0)
        return DamageModifierResponse(impact_dmg_scale=1.0 + buff)

    # Queenbreaker's sights
    @registry.register(damage, Perks.MARKSMAN_SIGHTS)
    def _marksman_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        return DamageModifierResponse(impact_dmg_scale=1.38)

    @registry.register(firing, Perks.MARKSMAN_SIGHTS)
    def _marksman_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        # 300 + 333 = 633
        return FiringModifierResponse(burst_delay_add=0.333)

    @registry.register(damage, Perks.BROADSIDE)
    def _broadside(inp: ModifierResponseInput) -> DamageModifierResponse:
        return DamageModifierResponse(impact_dmg_scale=_tier(_BROADSIDE, inp.value))

    @registry.register(firing, Perks.TEMPORAL_UNLIMITER)
    def _temporal_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        if inp.value > 0:
            return FiringModifierResponse(burst_delay_add=0.366)
        return FiringModifierResponse()

    @registry.register(damage, Perks.TEMPORAL_UNLIMITER)
    def _temporal_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        buff = 7.545 if inp.pvp else 14.0
        if inp.calc_data.enemy_type == EnemyType.CHAMPION:
            buff *= 2.0
        return DamageModifierResponse(impact_dmg_scale=buff, crit_scale=1.875)

    @registry.register(magazine, Perks.FOURTH_HORSEMAN_CATALYST)
    def _fourth_horseman(inp: ModifierResponseInput) -> MagazineModifierResponse:
        return MagazineModifierResponse(magazine_add=1.0)

    @registry.register(damage, Perks.BLACK_HOLE)
    def _black_hole(inp: ModifierResponseInput) -> DamageModifierResponse:
        odd_shot = inp.calc_data.total_shots_hit % 2.0 == 1.0
        return DamageModifierResponse(impact_dmg_scale=1.35 if odd_shot else 1.0)

    @registry.register(damage, Perks.IMPETUS)
    def _impetus(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value > 0:
            return DamageModifierResponse(impact_dmg_scale=1.5)
        return DamageModifierResponse()

    @registry.register(damage, Perks.BROADHEAD)
    def _broadhead(inp: ModifierResponseInput) -> DamageModifierResponse:
        broadhead_damage = 30.0 if inp.pvp else 60.0
        impact = inp.calc_data.curr_firing_data.damage
        crit_mult = inp.calc_data.curr_firing_data.crit_mult
        impact_scale = (broadhead_damage + impact) / impact
        crit_scale = (impact * crit_mult + broadhead_damage) / (impact * impact_scale * crit_mult)
        return DamageModifierResponse(impact_dmg_scale=impact_scale, crit_scale=crit_scale)

    @registry.register(firing, Perks.DESPERATION)
    def _desperation(inp: ModifierResponseInput) -> FiringModifierResponse:
        if inp.value == 0 or inp.calc_data.time_total > 7.0:
            return FiringModifierResponse()
        return FiringModifierResponse(burst_delay_scale=0.8)

    @registry.register(damage, Perks.IONIC_RETURN)
    def _ionic_return(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        current = inp.calc_data.curr_firing_data.crit_mult
        return DamageModifierResponse(
            impact_dmg_scale=1.15, crit_scale=(current + 34.0 / 51.0) / current
        )

    @registry.register(damage, Perks.UNREPENTANT)
    def _unrepentant_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0 or inp.pvp:
            return DamageModifierResponse()
        return DamageModifierResponse(impact_dmg_scale=3.0)

    @registry.register(firing, Perks.UNREPENTANT)
    def _unrepentant_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        shots_in_super_burst = 6.0
        if inp.calc_data.total_shots_hit >= shots_in_super_burst or inp.value == 0:
            return FiringModifierResponse()
        return FiringModifierResponse(burst_size_add=3.0)

    @registry.register(damage, Perks.ARC_CONDUCTOR)
    def _arc_conductor_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        return _both(1.1)

    @registry.register(ModifierKind.HANDLING, Perks.ARC_CONDUCTOR)
    def _arc_conductor_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
        if inp.value == 0:
            return HandlingModifierResponse()
        return HandlingModifierResponse(stat_add=100)

    @registry.register(ModifierKind.STAT_BUMP, Perks.ARC_CONDUCTOR)
    def _arc_conductor_stats(inp: ModifierResponseInput) -> dict[int, int]:
        return {_HANDLING: 100} if inp.value == 1 else {}

    @registry.register(damage, Perks.VOID_LEECH)
    def _void_leech(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0 or inp.pvp:
            return DamageModifierResponse()
        return _both(1.2)

    @registry.register(ModifierKind.REFUND, Perks.WHITE_NAIL)
    def _white_nail(inp: ModifierResponseInput) -> RefundResponse:
        return RefundResponse(crit=True, requirement=3, refund_mag=3, refund_reserves=-2)

    @registry.register(damage, Perks.WHISPERED_BREATHING)
    def _whispered_breathing(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        base = inp.calc_data.base_crit_mult
        return DamageModifierResponse(impact_dmg_scale=1.1078, crit_scale=(base + 1.2207) / base)

    @registry.register(damage, Perks.INVERSE_RELATIONSHIP)
    def _inverse_relationship(inp: ModifierResponseInput) -> DamageModifierResponse:
        table = _INVERSE_RELATIONSHIP_PVP if inp.pvp else _INVERSE_RELATIONSHIP_PVE
        return _both(_tier(table, inp.value))

    @registry.register(damage, Perks.SPINDLE)
    def _spindle(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        return _both(1.0 + 0.02 * inp.value)

    @registry.register(damage, Perks.THE_RIGHT_CHOICE)
    def _the_right_choice(inp: ModifierResponseInput) -> DamageModifierResponse:
        # Shots 1, 8, 15, ... are empowered.
        if (inp.calc_data.total_shots_fired + 6.0) % 7.0 == 0.0:
            return _both(1.15 if inp.pvp else 3.525)
        return DamageModifierResponse()

    @registry.register(damage, Perks.PICK_YOUR_POISON)
    def _pick_your_poison(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.value == 0:
            return DamageModifierResponse()
        if inp.value == 1:
            return DamageModifierResponse(crit_scale=2.0)
        return _both(1.2, crit_scale=1.0 / 1.2)

    @registry.register(damage, Perks.STRING_THEORY)
    def _string_theory(inp: ModifierResponseInput) -> DamageModifierResponse:
        if inp.calc_data.perk_value_map.get(Perks.PICK_YOUR_POISON, 0) == 0:
            return DamageModifierResponse()
        bosses = (EnemyType.MINIBOSS, EnemyType.BOSS)
        return _both(1.05 if inp.calc_data.enemy_type in bosses else 1.1)

    @registry.register(damage, Perks.JUDGEMENT)
    def _judgement(inp: ModifierResponseInput) -> DamageModifierResponse:
        hits_needed = 5 if inp.pvp else 14
        if inp.calc_data.shots_fired_this_mag < hits_needed and inp.value == 0:
            return DamageModifierResponse()
        strong = inp.pvp or inp.calc_data.intrinsic_hash == JUDGEMENT_STRONG_INTRINSIC
        return _both(1.3 if strong else 1.15)