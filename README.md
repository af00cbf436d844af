# d2calc

A library that models how Destiny 2 weapon perks, buffs, debuffs, mods and
exotic armour change a weapon's stats and damage. It also covers the
power-level damage scaling of an activity.

Each perk is a plain function. It takes a `ModifierResponseInput` and returns a
modifier response, for example a damage, handling, reload or range modifier.
These functions are collected in a `PerkRegistry`, keyed by a `ModifierKind`
and a `Perks` member.

## Installing

    pip install d2calc

To run the test suite, install the `test` extra:

    pip install "d2calc[test]"
    pytest

## Modules

- `d2calc.enums` holds `AmmoType`, `WeaponType`, `StatHashes`, `DamageType` and
  `DamageSource`. The first four are integer enums keyed by their in-game ids
  or hashes, and any integer they do not know becomes `UNKNOWN`.
  `StatHashes.is_weapon_stat()` tells weapon stats apart from the rest.
- `d2calc.log` holds `LogLevel` (`ERROR`, `WARNING`, `INFO`, `DEBUG`) along with
  `set_log_level`, `get_log_level` and `log`. `log` passes a message to the
  standard `logging` logger named `d2calc` only when its level is no more
  verbose than the current level, and returns whether it did. The default
  level is `WARNING`.
- `d2calc.abilities` holds `AbilityType`, `AbilityDamageProfile` and `Ability`.
  These are data containers only.
- `d2calc.enemies` holds `EnemyType` and `Enemy`. `Enemy.adjusted_health()`
  returns the enemy's health with its damage resistance applied.
- `d2calc.activity` holds `Activity`, `Player`, `PlayerClass`,
  `DifficultyOptions` and `DifficultyData`, with the scaling functions
  `rpl_mult`, `gear_delta_mult`, `wep_delta_mult` and `remove_pve_bonuses`.
  - `Activity.pl_delta()` multiplies the gear and weapon power-delta
    multipliers together.
  - `Activity.rpl_multiplier()` gives the multiplier for the recommended
    power level.
- `d2calc.perks.responses` holds `CalculationInput`, `FiringData` and `Stat`,
  and the response dataclasses `DamageModifierResponse`,
  `ExtraDamageResponse`, `ReloadModifierResponse`, `FiringModifierResponse`,
  `HandlingModifierResponse`, `RangeModifierResponse`, `RefundResponse`,
  `MagazineModifierResponse`, `InventoryModifierResponse`,
  `FlinchModifierResponse`, `VelocityModifierResponse`,
  `ReloadOverrideResponse`, `ExplosivePercentResponse`,
  `DamageResistModifierResponse`, `ModifierResponseSummary` and
  `DamageProfile`.
- `d2calc.perks.registry` holds the `Perks` enum, `ModifierKind`,
  `ModifierResponseInput`, `PerkRegistry` and `clamp`.
  - `PerkRegistry.add()` stores a function for a (kind, perk) pair and
    replaces any function already stored for that pair.
  - `PerkRegistry.register()` does the same job as a decorator.
  - `PerkRegistry.get()` returns the stored function, or `None` if there is
    none.
- These modules each provide one function that fills a registry:
  - `d2calc.perks.buff_perks`: `buff_perks`, `emp_buff`, `surge_buff` and
    `gbl_debuff`. The last three apply empowering buffs, surges and global
    debuffs that do not stack with others of their own category. They use
    the `cached_data` dictionary to do this.
  - `d2calc.perks.meta_perks`: `meta_perks` (built-in weapon behaviour and
    armour mods).
  - `d2calc.perks.exotic_armor`: `exotic_armor`.
  - `d2calc.perks.exotic_perks`: `exotic_perks` (exotic and intrinsic weapon
    perks).
  - `d2calc.perks.exotic_catalysts`: `catalyst_perks` (catalysts and the
    remaining exotic perks).

## Example

```python
from d2calc.perks.registry import ModifierKind, ModifierResponseInput, PerkRegistry, Perks
from d2calc.perks.buff_perks import buff_perks
from d2calc.perks.exotic_perks import exotic_perks

registry = PerkRegistry()
buff_perks(registry)
exotic_perks(registry)

well = registry.get(ModifierKind.DAMAGE, Perks.WELL_OF_RADIANCE)
cache: dict[str, float] = {}
print(well(ModifierResponseInput(cached_data=cache)).impact_dmg_scale)  # 1.25
# An empowering buff already sits in the cache, so a second one adds nothing:
print(well(ModifierResponseInput(cached_data=cache)).impact_dmg_scale)  # 1.0
```

The scaling for an activity:

```python
from d2calc.activity import Activity, DifficultyOptions

activity = Activity(difficulty=DifficultyOptions.MASTER, rpl=1800)
print(activity.rpl_multiplier(), activity.pl_delta())
```

## Limits

The package gives the modifiers that each perk returns. It does not combine
them into final weapon figures. There is no weapon model and no database of
weapon formulas. There is no calculation of range falloff, handling times,
reload times, magazine and reserve sizes, time-to-kill or DPS. There is no
command-line tool. It also keeps no state between calls other than the
`cached_data` dictionary that the caller passes in.