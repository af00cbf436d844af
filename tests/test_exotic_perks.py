import pytest

from d2calc.enums import StatHashes
from d2calc.perks.exotic_perks import (
    DARK_FORGED_TRIGGER_STACKS_HASH,
    HONED_EDGE_CATALYST_HASH,
    HUNTERS_TRANCE_STACKS_HASH,
    RELEASE_THE_WOLVES_CATALYST_HASH,
    exotic_perks,
)
from d2calc.perks.registry import ModifierKind, ModifierResponseInput, PerkRegistry, Perks
from d2calc.perks.responses import (
    CalculationInput,
    DamageModifierResponse,
    FiringModifierResponse,
    HandlingModifierResponse,
    RangeModifierResponse,
    ReloadModifierResponse,
)


@pytest.fixture
def registry():
    reg = PerkRegistry()
    exotic_perks(reg)
    return reg


def run(registry, kind, perk, value=0, pvp=False, **calc):
    func = registry.get(kind, perk)
    assert func is not None
    inp = ModifierResponseInput(calc_data=CalculationInput(**calc), value=value, pvp=pvp)
    return func(inp)


@pytest.mark.parametrize(
    "kind, perk, default",
    [
        (ModifierKind.DAMAGE, Perks.STORM_AND_STRESS, DamageModifierResponse()),
        (ModifierKind.DAMAGE, Perks.RAVENOUS_BEAST, DamageModifierResponse()),
        (ModifierKind.FIRING, Perks.RAVENOUS_BEAST, FiringModifierResponse()),
        (ModifierKind.FIRING, Perks.RELEASE_THE_WOLVES, FiringModifierResponse()),
        (ModifierKind.RANGE, Perks.DUAL_SPEED_RECEIVER, RangeModifierResponse()),
        (ModifierKind.RELOAD, Perks.THIN_THE_HERD, ReloadModifierResponse()),
        (ModifierKind.HANDLING, Perks.CHIMERA, HandlingModifierResponse()),
        (ModifierKind.FIRING, Perks.RAT_PACK, FiringModifierResponse()),
        (ModifierKind.FIRING, Perks.DARK_FORGED_TRIGGER, FiringModifierResponse()),
        (ModifierKind.RELOAD, Perks.ROADBORN, ReloadModifierResponse()),
    ],
)
def test_inactive_perks_return_defaults(registry, kind, perk, default):
    assert run(registry, kind, perk, value=0) == default


def test_paracausal_shot_grows_with_stacks_and_caps(registry):
    values = [
        run(registry, ModifierKind.DAMAGE, Perks.PARACAUSAL_SHOT, value=v, time_this_mag=-1.0)
        .impact_dmg_scale
        for v in range(8)
    ]
    assert values == sorted(values)
    capped = run(registry, ModifierKind.DAMAGE, Perks.PARACAUSAL_SHOT, value=12, time_this_mag=-1.0)
    assert capped.impact_dmg_scale == values[-1]
    pvp = run(
        registry, ModifierKind.DAMAGE, Perks.PARACAUSAL_SHOT, value=7, pvp=True, time_this_mag=-1.0
    )
    assert pvp.impact_dmg_scale < values[-1]


def test_paracausal_shot_last_round_uses_shots_fired(registry):
    last = run(
        registry,
        ModifierKind.DAMAGE,
        Perks.PARACAUSAL_SHOT,
        curr_mag=1.0,
        shots_fired_this_mag=7.0,
    )
    stacked = run(registry, ModifierKind.DAMAGE, Perks.PARACAUSAL_SHOT, value=7, time_this_mag=-1.0)
    assert last.impact_dmg_scale == stacked.impact_dmg_scale
    assert last.explosive_dmg_scale == last.impact_dmg_scale


def test_hunters_trance_bumps_agree(registry):
    pmap = {HUNTERS_TRANCE_STACKS_HASH: 3}
    stats = run(registry, ModifierKind.STAT_BUMP, Perks.HUNTERS_TRANCE, perk_value_map=pmap)
    reload = run(registry, ModifierKind.RELOAD, Perks.HUNTERS_TRANCE, perk_value_map=pmap)
    rng = run(registry, ModifierKind.RANGE, Perks.HUNTERS_TRANCE, perk_value_map=pmap)
    hand = run(registry, ModifierKind.HANDLING, Perks.HUNTERS_TRANCE, perk_value_map=pmap)
    assert stats[int(StatHashes.RELOAD)] == reload.reload_stat_add
    assert stats[int(StatHashes.RANGE)] == rng.range_stat_add
    assert stats[int(StatHashes.HANDLING)] == hand.stat_add
    assert reload.reload_stat_add == 15


def test_hunters_trance_caps_at_seven_stacks(registry):
    at_cap = run(
        registry,
        ModifierKind.RELOAD,
        Perks.HUNTERS_TRANCE,
        perk_value_map={HUNTERS_TRANCE_STACKS_HASH: 7},
    )
    over = run(
        registry,
        ModifierKind.RELOAD,
        Perks.HUNTERS_TRANCE,
        perk_value_map={HUNTERS_TRANCE_STACKS_HASH: 20},
    )
    assert at_cap == over


def test_memento_mori_ends_after_seven_shots(registry):
    active = run(registry, ModifierKind.DAMAGE, Perks.MEMENTO_MORI, value=1, total_shots_fired=3.0)
    spent = run(registry, ModifierKind.DAMAGE, Perks.MEMENTO_MORI, value=1, total_shots_fired=7.0)
    assert active.impact_dmg_scale == 1.5
    assert spent == DamageModifierResponse()
    rng_active = run(registry, ModifierKind.RANGE, Perks.MEMENTO_MORI, value=1)
    assert rng_active.range_all_scale < 1.0


def test_roadborn_range_higher_when_active(registry):
    idle = run(registry, ModifierKind.RANGE, Perks.ROADBORN, value=0)
    active = run(registry, ModifierKind.RANGE, Perks.ROADBORN, value=1)
    assert idle.range_all_scale > 1.0
    assert active.range_all_scale > idle.range_all_scale


def test_reign_havoc_delay_drops_as_mag_empties(registry):
    scales = [
        run(
            registry,
            ModifierKind.FIRING,
            Perks.REIGN_HAVOC,
            base_mag=10.0,
            shots_fired_this_mag=float(shots),
        ).burst_delay_scale
        for shots in (0, 2, 4)
    ]
    assert scales[0] == 1.0
    assert scales == sorted(scales, reverse=True)


@pytest.mark.parametrize("perk", [Perks.REIGN_HAVOC, Perks.ROCKET_TRACERS])
def test_extra_damage_lower_in_pvp(registry, perk):
    pve = run(registry, ModifierKind.EXTRA_DAMAGE, perk)
    pvp = run(registry, ModifierKind.EXTRA_DAMAGE, perk, pvp=True)
    assert pvp.additive_damage < pve.additive_damage
    assert pve.times_to_hit == 1
    assert pve.weapon_scale and pve.combatant_scale


def test_touch_of_malice_refunds_on_empty_mag(registry):
    empty = run(registry, ModifierKind.REFUND, Perks.TOUCH_OF_MALICE, curr_mag=0.0)
    loaded = run(registry, ModifierKind.REFUND, Perks.TOUCH_OF_MALICE, curr_mag=5.0)
    assert empty.refund_mag == 1
    assert loaded.refund_mag == 0


def test_swooping_talons_bounded(registry):
    for value in (0, 1):
        for shots in (0.0, 5.0, 50.0):
            scale = run(
                registry,
                ModifierKind.DAMAGE,
                Perks.SWOOPING_TALONS,
                value=value,
                total_shots_fired=shots,
            ).impact_dmg_scale
            assert 1.0 <= scale <= 1.4


def test_fate_of_all_fools_crits_cancel(registry):
    res = run(
        registry,
        ModifierKind.DAMAGE,
        Perks.FATE_OF_ALL_FOOLS,
        value=2,
        base_crit_mult=1.7,
        total_shots_fired=0.0,
    )
    assert res.impact_dmg_scale == 1.7
    assert res.impact_dmg_scale * res.crit_scale == pytest.approx(1.0)


def test_honed_edge_catalyst_boosts_full_stack(registry):
    plain = run(registry, ModifierKind.DAMAGE, Perks.HONED_EDGE, value=4)
    cat = run(
        registry,
        ModifierKind.DAMAGE,
        Perks.HONED_EDGE,
        value=4,
        perk_value_map={HONED_EDGE_CATALYST_HASH: 1},
    )
    assert cat.impact_dmg_scale / plain.impact_dmg_scale == pytest.approx(1.2)


def test_string_of_curses_expires(registry):
    early = run(registry, ModifierKind.DAMAGE, Perks.STRING_OF_CURSES, value=5)
    late = run(registry, ModifierKind.DAMAGE, Perks.STRING_OF_CURSES, value=5, time_total=4.0)
    pvp = run(registry, ModifierKind.DAMAGE, Perks.STRING_OF_CURSES, value=5, pvp=True)
    assert late.impact_dmg_scale == 1.0
    assert 1.0 < pvp.impact_dmg_scale < early.impact_dmg_scale


def test_markov_chain_caps_at_five(registry):
    five = run(registry, ModifierKind.DAMAGE, Perks.MARKOV_CHAIN, value=5)
    nine = run(registry, ModifierKind.DAMAGE, Perks.MARKOV_CHAIN, value=9)
    assert five == nine


def test_cranial_spike_consistency(registry):
    stats = run(registry, ModifierKind.STAT_BUMP, Perks.CRANIAL_SPIKE, value=3)
    rng = run(registry, ModifierKind.RANGE, Perks.CRANIAL_SPIKE, value=3)
    assert stats[int(StatHashes.RANGE)] == rng.range_stat_add
    scales = [
        run(registry, ModifierKind.RELOAD, Perks.CRANIAL_SPIKE, value=v).reload_time_scale
        for v in range(6)
    ]
    assert scales == sorted(scales, reverse=True)


def test_dark_forged_trigger_stronger_with_stacks(registry):
    low = run(registry, ModifierKind.FIRING, Perks.DARK_FORGED_TRIGGER, value=1)
    high = run(
        registry,
        ModifierKind.FIRING,
        Perks.DARK_FORGED_TRIGGER,
        value=1,
        perk_value_map={DARK_FORGED_TRIGGER_STACKS_HASH: 5},
    )
    assert high.burst_delay_add < low.burst_delay_add < 0.0


def test_ride_the_bull_shots_count_as_stacks(registry):
    by_shots = run(
        registry, ModifierKind.FIRING, Perks.RIDE_THE_BULL, shots_fired_this_mag=25.0
    )
    by_value = run(registry, ModifierKind.FIRING, Perks.RIDE_THE_BULL, value=2)
    assert by_shots == by_value


def test_release_the_wolves_needs_catalyst(registry):
    without = run(registry, ModifierKind.STAT_BUMP, Perks.RELEASE_THE_WOLVES, value=1)
    with_cat = run(
        registry,
        ModifierKind.STAT_BUMP,
        Perks.RELEASE_THE_WOLVES,
        value=1,
        perk_value_map={RELEASE_THE_WOLVES_CATALYST_HASH: 1},
    )
    assert without == {}
    assert with_cat == {int(StatHashes.RELOAD): 100}


def test_fundamentals_reload_matches_stat_bump(registry):
    stats = run(registry, ModifierKind.STAT_BUMP, Perks.FUNDAMENTALS, value=2)
    reload = run(registry, ModifierKind.RELOAD, Perks.FUNDAMENTALS, value=2)
    assert stats[int(StatHashes.RELOAD)] == reload.reload_stat_add


def test_rat_pack_magazine_grows(registry):
    adds = [
        run(registry, ModifierKind.MAGAZINE, Perks.RAT_PACK, value=v).magazine_add
        for v in range(1, 6)
    ]
    assert adds[0] == 0.0
    assert adds == sorted(adds)