"""Events that change player, power and dust spawner stats."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SetAttackEnergy:
    """Set the energy each attacker releases per strike."""

    amount: float


@dataclass(frozen=True)
class SpawnAttacker:
    """Spawn one more attacker at the centre of the game area."""


@dataclass(frozen=True)
class SpawnSpeed:
    """Set how many dust particles are spawned per second."""

    speed: float


@dataclass(frozen=True)
class RegenSpeed:
    """Set how much power is regenerated per second."""

    speed: float


@dataclass(frozen=True)
class PowerMax:
    """Set the maximum amount of power."""

    max_power: float


ChangePlayerStats = SetAttackEnergy
SetDustSpawnStats = SpawnSpeed
SetPowerStats = RegenSpeed | PowerMax
GameEvent = SetAttackEnergy | SpawnAttacker | SpawnSpeed | RegenSpeed | PowerMax