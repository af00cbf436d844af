import pytest

from d2calc.enums import DamageType, StatHashes, WeaponType
from d2calc.perks.buff_perks import buff_perks, emp_buff, gbl_debuff, surge_buff
from d2calc.perks.registry import ModifierKind, ModifierResponseInput, PerkRegistry, Perks
from d2calc.perks.responses import (
    CalculationInput,
    DamageModifierResponse,
    HandlingModifierResponse,
    ReloadModifierResponse,
)


@pytest.fixture
def registry():
    reg = PerkRegistry()
    buff_perks(reg)
    return reg


def _run(registry, kind, perk, value=1, pvp=False, cached=None, **calc):
    func = registry.get(kind, perk)
    inp = ModifierResponseInput(
        calc_data=CalculationInput(**calc),
        value=value,
        pvp=pvp,
        cached_data={} if cached is None else cached,
    )
    return func(inp)


def test_emp_buff_first_application_returns_desired():
    cache = {}
    assert emp_buff(cache, 1.25) == pytest.approx(1.25)
    assert cache["empowering"] == pytest.approx(1.25)


def test_emp_buff_does_not_stack_with_weaker():
    cache = {}
    emp_buff(cache, 1.35)
    assert emp_buff(cache, 1.25) == 1.0
    assert cache["empowering"] == pytest.approx(1.35)


def test_emp_buff_upgrades_to_stronger_total():
    cache = {}
    first = emp_buff(cache, 1.25)
    second = emp_buff(cache, 1.35)
    assert first * second == pytest.approx(1.35)


def test_gbl_debuff_uses_separate_key():
    cache = {}
    emp_buff(cache, 1.4)
    assert gbl_debuff(cache, 1.3) == pytest.approx(1.3)
    assert set(cache) == {"empowering", "debuff"}


@pytest.mark.parametrize(
    "value,pvp,expected",
    [(0, False, 1.0), (1, False, 1.10), (2, False, 1.17), (3, False, 1.22), (9, False, 1.25),
     (1, True, 1.03), (2, True, 1.045), (3, True, 1.055), (4, True, 1.060)],
)
def test_surge_buff_table(value, pvp, expected):
    assert surge_buff({}, value, pvp) == pytest.approx(expected)


def test_surge_buff_not_stacking():
    cache = {}
    surge_buff(cache, 4, False)
    assert surge_buff(cache, 2, False) == 1.0


def test_well_of_radiance(registry):
    res = _run(registry, ModifierKind.DAMAGE, Perks.WELL_OF_RADIANCE)
    assert res == DamageModifierResponse.basic_dmg_buff(1.25)


def test_shared_cache_prevents_double_empowering(registry):
    cache = {}
    _run(registry, ModifierKind.DAMAGE, Perks.BANNER_SHIELD, cached=cache)
    res = _run(registry, ModifierKind.DAMAGE, Perks.WELL_OF_RADIANCE, cached=cache)
    assert res.impact_dmg_scale == 1.0


def test_noble_rounds_zero_value_is_default(registry):
    res = _run(registry, ModifierKind.DAMAGE, Perks.NOBLE_ROUNDS, value=0)
    assert res == DamageModifierResponse()


def test_radiant_marks_cache(registry):
    cache = {}
    res = _run(registry, ModifierKind.DAMAGE, Perks.RADIANT, pvp=True, cached=cache)
    assert res.impact_dmg_scale == pytest.approx(1.1)
    assert cache["radiant"] == 1.0


def test_burning_steps_requires_solar(registry):
    off = _run(registry, ModifierKind.DAMAGE, Perks.PATH_OF_THE_BURNING_STEPS, value=2,
               damage_type=DamageType.ARC)
    on = _run(registry, ModifierKind.DAMAGE, Perks.PATH_OF_THE_BURNING_STEPS, value=2,
              damage_type=DamageType.SOLAR)
    assert off == DamageModifierResponse()
    assert on.impact_dmg_scale == pytest.approx(1.17)


def test_umbral_sharpening_clamps_value(registry):
    high = _run(registry, ModifierKind.DAMAGE, Perks.UMBRAL_SHARPENING, value=10)
    top = _run(registry, ModifierKind.DAMAGE, Perks.UMBRAL_SHARPENING, value=3)
    assert high == top
    assert top.impact_dmg_scale == pytest.approx(1.4)


def test_scanner_augment_pvp_is_neutral(registry):
    res = _run(registry, ModifierKind.DAMAGE, Perks.ENHANCED_SCANNER_AUGMENT, value=4, pvp=True)
    assert res.impact_dmg_scale == 1.0


def test_weaken_pvp_value(registry):
    res = _run(registry, ModifierKind.DAMAGE, Perks.WEAKEN, pvp=True)
    assert res.impact_dmg_scale == pytest.approx(1.075)


def test_lucent_blades_sword_only(registry):
    other = _run(registry, ModifierKind.STAT_BUMP, Perks.LUCENT_BLADES, value=2,
                 weapon_type=WeaponType.SHOTGUN)
    sword = _run(registry, ModifierKind.STAT_BUMP, Perks.LUCENT_BLADES, value=5,
                 weapon_type=WeaponType.SWORD)
    assert other == {}
    assert sword == {int(StatHashes.CHARGE_RATE): 60}


def test_mask_of_bakris_elements(registry):
    void = _run(registry, ModifierKind.DAMAGE, Perks.MASK_OF_BAKRIS, damage_type=DamageType.VOID)
    arc = _run(registry, ModifierKind.DAMAGE, Perks.MASK_OF_BAKRIS, damage_type=DamageType.ARC)
    assert void.impact_dmg_scale == 1.0
    assert arc.impact_dmg_scale == pytest.approx(1.25)


def test_sanguine_alchemy_ignores_kinetic(registry):
    res = _run(registry, ModifierKind.DAMAGE, Perks.SANGUINE_ALCHEMY,
               damage_type=DamageType.KINETIC)
    assert res == DamageModifierResponse()


def test_no_backup_plans_shotgun(registry):
    res = _run(registry, ModifierKind.DAMAGE, Perks.NO_BACKUP_PLANS,
               weapon_type=WeaponType.SHOTGUN)
    assert res.impact_dmg_scale == pytest.approx(1.35)
    assert res.crit_scale == 1.0


def test_aeon_force_modifiers(registry):
    reload = _run(registry, ModifierKind.RELOAD, Perks.AEON_FORCE)
    stats = _run(registry, ModifierKind.STAT_BUMP, Perks.AEON_FORCE)
    handling = _run(registry, ModifierKind.HANDLING, Perks.AEON_FORCE)
    assert reload == ReloadModifierResponse(reload_stat_add=30, reload_time_scale=0.85)
    assert stats == {int(StatHashes.RELOAD): 30, int(StatHashes.HANDLING): 40}
    assert handling == HandlingModifierResponse(stat_add=40)


def test_aeon_force_inactive(registry):
    assert _run(registry, ModifierKind.STAT_BUMP, Perks.AEON_FORCE, value=0) == {}
    assert _run(registry, ModifierKind.RELOAD, Perks.AEON_FORCE, value=0) == ReloadModifierResponse()


def test_doom_fang_void_only(registry):
    off = _run(registry, ModifierKind.DAMAGE, Perks.DOOM_FANG, value=3,
               damage_type=DamageType.SOLAR)
    on = _run(registry, ModifierKind.DAMAGE, Perks.DOOM_FANG, value=3,
              damage_type=DamageType.VOID)
    assert off == DamageModifierResponse()
    assert on.explosive_dmg_scale == pytest.approx(1.22)