"""Activities, difficulty tables and power-level damage scaling."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from d2calc.log import LogLevel, log
from d2calc.perks.registry import clamp

WEAPON_DELTA_EXPONENT = 0.00672

_EXPANSION_BASE = 1600

# Power deltas at which every difficulty table is sampled.
_DELTA_POINTS = (-99.0, -90.0, -80.0, -70.0, -60.0, -50.0, -40.0, -30.0, -20.0, -10.0, 0.0)


@dataclass(frozen=True)
class DifficultyData:
    """Power cap and gear-delta table of a difficulty."""

    name: str
    cap: int
    table: tuple[tuple[float, float], ...]

    def y_at(self, x: float) -> float:
        """Linearly interpolate the table at ``x``; raise ValueError outside it."""
        points = self.table
        if not points or x < points[0][0] or x > points[-1][0]:
            raise ValueError(f"{x} is outside the table of {self.name}")
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            if x0 <= x <= x1:
                if x1 == x0:
                    return y0
                return y0 + (y1 - y0) * (x - x0) / (x1 - x0)
        return points[0][1]


def _difficulty(name: str, cap: int, multipliers: tuple[float, ...]) -> DifficultyData:
    if len(multipliers) != len(_DELTA_POINTS):
        raise ValueError(f"table of {name} needs {len(_DELTA_POINTS)} values")
    return DifficultyData(name=name, cap=cap, table=tuple(zip(_DELTA_POINTS, multipliers)))


_COMMON_LOW = (0.4018, 0.42, 0.44, 0.46, 0.475)

_NORMAL = _difficulty("Normal", 50, _COMMON_LOW + (0.5, 0.5405, 0.5915, 0.66, 0.78, 1.0))
_MASTER = _difficulty("Master", 20, _COMMON_LOW + (0.49, 0.51, 0.535, 0.58, 0.68, 0.85))
_RAID = _difficulty("Raid & Dungeon", 20, _COMMON_LOW + (0.495, 0.5253, 0.5632, 0.62, 0.73, 0.925))


class DifficultyOptions(IntEnum):
    """Activity difficulty; unknown integer values mean NORMAL."""

    NORMAL = 1
    RAID = 2
    MASTER = 3

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.NORMAL
        return None

    def difficulty_data(self) -> DifficultyData:
        """The power cap and delta table of this difficulty."""
        return _DIFFICULTY_DATA[self]


_DIFFICULTY_DATA = {
    DifficultyOptions.NORMAL: _NORMAL,
    DifficultyOptions.RAID: _RAID,
    DifficultyOptions.MASTER: _MASTER,
}


class PlayerClass(Enum):
    """Guardian class."""

    UNKNOWN = 0
    TITAN = 1
    HUNTER = 2
    WARLOCK = 3


@dataclass
class Player:
    """A player's gear and weapon power."""

    power: int = 0
    wep_power: int = 0
    player_class: PlayerClass = PlayerClass.UNKNOWN


def _default_player() -> Player:
    return Player(power=_EXPANSION_BASE + 210, wep_power=_EXPANSION_BASE + 210)


@dataclass
class Activity:
    """An activity with its recommended power and the player taking part."""

    name: str = "Default"
    difficulty: DifficultyOptions = DifficultyOptions.NORMAL
    rpl: int = _EXPANSION_BASE
    cap: int = 100
    player: Player = field(default_factory=_default_player)

    def pl_delta(self) -> float:
        """Combined gear and weapon power-delta damage multiplier."""
        return gear_delta_mult(self) * wep_delta_mult(self)

    def rpl_multiplier(self) -> float:
        """Damage multiplier from the recommended power level."""
        return rpl_mult(float(self.rpl))


def rpl_mult(rpl: float) -> float:
    """Damage multiplier for a recommended power level."""
    return (1.0 + rpl / 30.0) * 0.75


def gear_delta_mult(activity: Activity) -> float:
    """Multiplier from the gap between the player's power and the recommended power."""
    data = activity.difficulty.difficulty_data()
    delta = activity.player.power - activity.rpl
    if delta < -99:
        return 0.0
    result = data.y_at(float(min(delta, 0)))
    log(f"gear_delta_mult: {result}", LogLevel.DEBUG)
    return result


def wep_delta_mult(activity: Activity) -> float:
    """Multiplier from the gap between weapon power and the recommended power."""
    data = activity.difficulty.difficulty_data()
    delta = clamp(activity.player.wep_power - activity.rpl, -100, min(activity.cap, data.cap))
    if delta < -99:
        return 0.0
    if abs(delta) <= 50:
        # Quadratic fit; valid only close to the recommended power.
        result = 1.0 + delta * 0.00683343 + 0.0000441279650846838 * delta * delta / 2
    else:
        result = math.exp(WEAPON_DELTA_EXPONENT * delta)
    log(f"wep_delta: {result}", LogLevel.DEBUG)
    return result


def remove_pve_bonuses(damage: float, combatant_mult: float, activity: Activity) -> float:
    """Undo the recommended-power, gear-delta and combatant scaling of ``damage``."""
    scale = gear_delta_mult(activity) * activity.rpl_multiplier() * combatant_mult
    return damage / scale