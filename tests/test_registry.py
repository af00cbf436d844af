import pytest

from d2calc.perks.registry import (
    ModifierKind,
    ModifierResponseInput,
    PerkRegistry,
    Perks,
    clamp,
)
from d2calc.perks.responses import DamageModifierResponse


def test_add_and_get():
    registry = PerkRegistry()

    def radiant(inp):
        return DamageModifierResponse.basic_dmg_buff(1.25)

    registry.add(ModifierKind.DAMAGE, Perks.RADIANT, radiant)
    assert registry.get(ModifierKind.DAMAGE, Perks.RADIANT) is radiant
    assert registry.get(ModifierKind.RANGE, Perks.RADIANT) is None
    assert len(registry) == 1
    assert (ModifierKind.DAMAGE, Perks.RADIANT) in registry


def test_register_decorator_returns_function():
    registry = PerkRegistry()

    @registry.register(ModifierKind.DAMAGE, Perks.WEAKEN)
    def weaken(inp):
        return DamageModifierResponse.basic_dmg_buff(1.15 if not inp.pvp else 1.075)

    func = registry.get(ModifierKind.DAMAGE, Perks.WEAKEN)
    assert func is weaken
    assert func(ModifierResponseInput(pvp=True)).impact_dmg_scale == 1.075


def test_later_add_replaces_earlier():
    registry = PerkRegistry()
    registry.add(ModifierKind.FIRING, Perks.MARKSMAN_SIGHTS, lambda inp: "first")
    registry.add(ModifierKind.FIRING, Perks.MARKSMAN_SIGHTS, lambda inp: "second")
    assert len(registry) == 1
    assert registry.get(ModifierKind.FIRING, Perks.MARKSMAN_SIGHTS)(ModifierResponseInput()) == "second"


def test_input_cached_data_is_per_instance():
    first = ModifierResponseInput()
    second = ModifierResponseInput()
    first.cached_data["empowering"] = 1.25
    assert "empowering" not in second.cached_data
    assert first.cached_data == {"empowering": 1.25}


def test_clamp_inside_and_outside():
    assert clamp(3, 0, 7) == 3
    assert clamp(-2, 0, 7) == 0
    assert clamp(12, 0, 7) == 7
    assert clamp(1.7, 1.0, 1.4) == 1.4


def test_clamp_rejects_empty_range():
    with pytest.raises(ValueError):
        clamp(1, 5, 2)


def test_perk_members_are_unique():
    looked_up = [Perks(p.value) for p in Perks]
    assert looked_up == list(Perks)
    assert len(set(looked_up)) == len(looked_up)
    assert Perks["BUILT_IN"] is Perks.BUILT_IN