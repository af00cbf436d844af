"""Enemy descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class EnemyType(Enum):
    """Combatant tier of an enemy."""

    MINOR = auto()
    ELITE = auto()
    MINIBOSS = auto()
    BOSS = auto()
    VEHICLE = auto()
    ENCLAVE = auto()
    PLAYER = auto()
    CHAMPION = auto()


@dataclass
class Enemy:
    """An enemy with health and damage resistance."""

    health: float = 0.0
    damage: float = 0.0
    damage_resistance: float = 0.0
    enemy_type: EnemyType = EnemyType.ENCLAVE
    tier: int = 0

    def adjusted_health(self, activity: Any = None) -> float:
        """Health after damage resistance is applied."""
        return self.health * (1.0 - self.damage_resistance)