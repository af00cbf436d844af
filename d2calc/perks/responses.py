"""Calculation inputs and the modifier responses that perks return."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from d2calc.enemies import EnemyType
from d2calc.enums import AmmoType, DamageSource, DamageType, WeaponType


@dataclass
class FiringData:
    """Per-shot damage and cadence data of a weapon."""

    damage: float = 0.0
    crit_mult: float = 0.0
    pve_damage: float = 0.0
    pve_crit_mult: float = 0.0
    burst_delay: float = 0.0
    inner_burst_delay: float = 0.0
    burst_size: int = 0
    one_ammo: bool = False
    charge: bool = False
    timestamp: int = 0


@dataclass
class Stat:
    """A weapon stat: its base value and the amount perks add to it."""

    base_value: int = 0
    perk_value: int = 0

    def perk_val(self) -> int:
        """The stat value including perk bonuses."""
        return self.base_value + self.perk_value


@dataclass
class CalculationInput:
    """The weapon and combat state a perk looks at."""

    intrinsic_hash: int = 0
    curr_firing_data: FiringData = field(default_factory=FiringData)
    base_crit_mult: float = 1.0
    shots_fired_this_mag: float = 0.0
    total_shots_fired: float = 0.0
    total_shots_hit: float = 0.0
    base_mag: float = 0.0
    curr_mag: float = 0.0
    reserves_left: float = 0.0
    time_total: float = 0.0
    time_this_mag: float = 0.0
    stats: dict[int, Stat] = field(default_factory=dict)
    weapon_type: WeaponType = WeaponType.UNKNOWN
    damage_type: DamageType = DamageType.UNKNOWN
    ammo_type: AmmoType = AmmoType.UNKNOWN
    handling_data: Any = None
    num_reloads: float = 0.0
    enemy_type: EnemyType = EnemyType.ENCLAVE
    perk_value_map: dict[Any, int] = field(default_factory=dict)
    has_overshield: bool = False

    @classmethod
    def construct_pve_sparse(
        cls,
        intrinsic_hash,
        firing_data,
        stats,
        perk_value_map,
        weapon_type,
        ammo_type,
        damage_type,
        base_damage,
        base_crit_mult,
        base_mag_size,
        total_shots_hit,
        total_time,
    ) -> "CalculationInput":
        """Input for PvE quantities such as magazine size against a boss."""
        return cls(
            intrinsic_hash=intrinsic_hash,
            curr_firing_data=firing_data,
            base_crit_mult=base_crit_mult,
            shots_fired_this_mag=0.0,
            total_shots_fired=float(total_shots_hit),
            total_shots_hit=float(total_shots_hit),
            base_mag=float(base_mag_size),
            curr_mag=float(base_mag_size),
            reserves_left=100.0,
            time_total=total_time,
            time_this_mag=-1.0,
            stats=stats,
            weapon_type=weapon_type,
            damage_type=damage_type,
            ammo_type=ammo_type,
            handling_data=None,
            num_reloads=0.0,
            enemy_type=EnemyType.BOSS,
            perk_value_map=perk_value_map,
            has_overshield=False,
        )

    @classmethod
    def construct_pvp(
        cls,
        intrinsic_hash,
        firing_data,
        stats,
        perk_value_map,
        weapon_type,
        ammo_type,
        base_damage,
        base_crit_mult,
        mag_size,
        has_overshield,
        handling_data,
    ) -> "CalculationInput":
        """Input for a fight against another player."""
        return cls(
            intrinsic_hash=intrinsic_hash,
            curr_firing_data=firing_data,
            base_crit_mult=base_crit_mult,
            shots_fired_this_mag=0.0,
            total_shots_fired=0.0,
            total_shots_hit=0.0,
            base_mag=mag_size,
            curr_mag=mag_size,
            reserves_left=999.0,
            time_total=0.0,
            time_this_mag=0.0,
            stats=stats,
            weapon_type=weapon_type,
            damage_type=DamageType.STASIS,
            ammo_type=ammo_type,
            handling_data=handling_data,
            num_reloads=0.0,
            enemy_type=EnemyType.PLAYER,
            perk_value_map=perk_value_map,
            has_overshield=has_overshield,
        )


@dataclass
class DamageModifierResponse:
    impact_dmg_scale: float = 1.0
    explosive_dmg_scale: float = 1.0
    crit_scale: float = 1.0

    @classmethod
    def basic_dmg_buff(cls, modifier: float) -> "DamageModifierResponse":
        """A modifier that scales all damage."""
        return cls(impact_dmg_scale=modifier, explosive_dmg_scale=modifier)

    @classmethod
    def surge_buff(cls, modifier: float) -> "DamageModifierResponse":
        """A modifier that scales weapon damage but not melee damage."""
        return cls(impact_dmg_scale=modifier, explosive_dmg_scale=modifier)


@dataclass
class ExtraDamageResponse:
    additive_damage: float = 0.0
    time_for_additive_damage: float = 0.0
    increment_total_time: bool = False
    times_to_hit: int = 0
    hit_at_same_time: bool = True
    is_dot: bool = False
    weapon_scale: bool = False
    crit_scale: bool = False
    combatant_scale: bool = False


@dataclass
class ReloadModifierResponse:
    reload_stat_add: int = 0
    reload_time_scale: float = 1.0


@dataclass
class FiringModifierResponse:
    burst_delay_scale: float = 1.0
    burst_delay_add: float = 0.0
    inner_burst_scale: float = 1.0
    burst_size_add: float = 0.0


@dataclass
class HandlingModifierResponse:
    stat_add: int = 0
    stow_add: int = 0
    draw_add: int = 0
    ads_add: int = 0
    stow_scale: float = 1.0
    draw_scale: float = 1.0
    ads_scale: float = 1.0


@dataclass
class RangeModifierResponse:
    range_stat_add: int = 0
    range_all_scale: float = 1.0
    range_hip_scale: float = 1.0
    range_zoom_scale: float = 1.0


@dataclass
class RefundResponse:
    crit: bool = False
    requirement: int = 0
    refund_mag: int = 0
    refund_reserves: int = 0


@dataclass
class MagazineModifierResponse:
    magazine_stat_add: int = 0
    magazine_scale: float = 1.0
    magazine_add: float = 0.0


@dataclass
class InventoryModifierResponse:
    inv_stat_add: int = 0
    inv_scale: float = 1.0
    inv_add: int = 0


@dataclass
class FlinchModifierResponse:
    flinch_scale: float = 1.0


@dataclass
class VelocityModifierResponse:
    velocity_scaler: float = 1.0


@dataclass
class ReloadOverrideResponse:
    valid: bool
    reload_time: float
    ammo_to_reload: int
    priority: int
    count_as_reload: bool
    uses_ammo: bool

    @classmethod
    def invalid(cls) -> "ReloadOverrideResponse":
        """A response that the reload logic ignores."""
        return cls(
            valid=False,
            reload_time=0.0,
            ammo_to_reload=0,
            priority=0,
            count_as_reload=False,
            uses_ammo=False,
        )


@dataclass
class ExplosivePercentResponse:
    percent: float = 0.0
    delayed: float = 0.0
    retain_base_total: bool = False


@dataclass
class DamageResistModifierResponse:
    body_shot_resist: float = 1.0
    head_shot_resist: float = 1.0
    element: Optional[DamageType] = None
    source: Optional[DamageSource] = None


@dataclass
class ModifierResponseSummary:
    rmr: Optional[RangeModifierResponse] = None
    dmr: Optional[DamageModifierResponse] = None
    hmr: Optional[HandlingModifierResponse] = None
    fmr: Optional[FiringModifierResponse] = None
    flmr: Optional[FlinchModifierResponse] = None
    rsmr: Optional[ReloadModifierResponse] = None
    mmr: Optional[MagazineModifierResponse] = None
    imr: Optional[InventoryModifierResponse] = None
    drmr: Optional[DamageResistModifierResponse] = None
    statbump: Optional[dict[int, int]] = None


@dataclass(frozen=True)
class DamageProfile:
    impact_dmg: float
    explosion_dmg: float
    crit_mult: float
    damage_delay: float