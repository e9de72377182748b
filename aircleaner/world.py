"""The gameplay level: dust, attackers, lightning damage and the economy."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from .entities import (
    DEFAULT_ATTACK_INTERVAL,
    DEFAULT_SPAWN_SPEED,
    Attacker,
    Dust,
    DustSpawner,
    VisualEffect,
    damage_text,
    lightning_effect,
)
from .events import PowerMax, RegenSpeed, SetAttackEnergy, SpawnAttacker, SpawnSpeed
from .geometry import GAME_AREA, Vec2
from .power import INITIAL_MAX_POWER, INITIAL_REGEN_SPEED, Power
from .shop import Inventory, ShopState, UpgradeItem

LIGHTNING_RANGE = 100.0
INITIAL_ATTACK_ENERGY = 5.0
MIN_CHAIN_ENERGY = 1.0
DEV_DUST_BONUS = 100
STEP_SOUNDS = ("step1.ogg", "step2.ogg", "step3.ogg", "step4.ogg")
LEVEL_MUSIC = "Fluffing A Duck.ogg"


def _fork(rng: random.Random) -> random.Random:
    """A new generator seeded from ``rng``."""
    return random.Random(rng.getrandbits(64))


def _clone(rng: random.Random) -> random.Random:
    """A generator in the same state as ``rng``."""
    copy = random.Random()
    copy.setstate(rng.getstate())
    return copy


class DamageType(enum.Enum):
    """How a damage source finds and hurts its targets."""

    LIGHTNING = "lightning"


@dataclass(eq=False)
class Damage:
    """A pending strike that hits the nearest dust in range and may chain on."""

    position: Vec2
    amount: float
    damage_type: DamageType = DamageType.LIGHTNING
    rng: random.Random = field(default_factory=random.Random, repr=False)
    previous: Dust | None = None


@dataclass
class PlayerStats:
    """Stats shared by all of the player's attackers."""

    attack_energy: float = INITIAL_ATTACK_ENERGY


@dataclass(frozen=True, eq=False)
class _DustHit:
    source: Vec2
    target: Vec2
    dust: Dust
    amount: float
    remaining_energy: float
    damage_type: DamageType
    rng: random.Random


def _contains(items: list[Dust], dust: Dust) -> bool:
    return any(item is dust for item in items)


class World:
    """Everything that lives in one gameplay session."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)
        self.power = Power(INITIAL_MAX_POWER, INITIAL_REGEN_SPEED)
        self.player_stats = PlayerStats()
        self.inventory = Inventory()
        self.shop = ShopState()
        self.spawner = DustSpawner(DEFAULT_SPAWN_SPEED, _fork(self.rng))
        self.attackers: list[Attacker] = []
        self.dust: list[Dust] = []
        self.damages: list[Damage] = []
        self.effects: list[VisualEffect] = []
        self.spawn_attacker()

    def spawn_attacker(self) -> Attacker:
        """Add an attacker at the centre of the game area."""
        attacker = Attacker(Vec2(), DEFAULT_ATTACK_INTERVAL, _fork(self.rng))
        self.attackers.append(attacker)
        return attacker

    def apply_event(self, event: object) -> None:
        """Apply a stats event fired by an upgrade."""
        match event:
            case SetAttackEnergy(amount=amount):
                self.player_stats.attack_energy = amount
            case SpawnAttacker():
                self.spawn_attacker()
            case SpawnSpeed(speed=speed):
                self.spawner.set_spawn_speed(speed)
            case RegenSpeed() | PowerMax():
                self.power.apply(event)
            case _:
                raise TypeError(f"unknown game event: {event!r}")

    def purchase(self, item: UpgradeItem) -> object:
        """Buy the next level of ``item``, apply its effect and return the event.

        Raises InsufficientDataError if the inventory cannot pay for it.
        """
        event = self.shop.purchase(item, self.inventory)
        self.apply_event(event)
        return event

    def add_dev_dust(self) -> int:
        """Grant a batch of dust data and return the new balance."""
        self.inventory.dust_data += DEV_DUST_BONUS
        return self.inventory.dust_data

    def attacker_at(self, point: Vec2) -> Attacker | None:
        """The topmost attacker under ``point``, if any."""
        for attacker in reversed(self.attackers):
            if attacker.contains(point):
                return attacker
        return None

    def update(self, dt: float) -> list[str]:
        """Advance the world by ``dt`` seconds.

        Returns the names of the sound effects triggered during the step.
        """
        if dt < 0.0:
            raise ValueError(f"cannot step the world backwards by {dt}")
        sounds: list[str] = []

        for attacker in self.attackers:
            attacker.tick(dt)
        self.effects = [effect for effect in self.effects if not effect.tick(dt)]
        new_dust = self.spawner.tick(dt)

        for dust in self.dust:
            dust.fall(dt)
        if new_dust is not None:
            self.dust.append(new_dust)
        self.power.regenerate(dt)
        energy = self.player_stats.attack_energy
        for attacker in self.attackers:
            attacker.try_charge(self.power, energy)
        launched = self._launch_attacks(sounds)
        hits = self._deal_damage()
        chained = self._resolve_hits(hits)
        self.damages = launched + chained

        self._cleanup()
        return sounds

    def _dust_in_range(self, position: Vec2) -> list[Dust]:
        limit = LIGHTNING_RANGE * LIGHTNING_RANGE
        return [d for d in self.dust if d.position.distance_squared(position) < limit]

    def _launch_attacks(self, sounds: list[str]) -> list[Damage]:
        launched = []
        energy = self.player_stats.attack_energy
        for attacker in self.attackers:
            if not attacker.in_bounds() or not attacker.fully_charged:
                continue
            if not self._dust_in_range(attacker.position):
                continue
            launched.append(
                Damage(attacker.position, energy, DamageType.LIGHTNING, _fork(attacker.rng))
            )
            sounds.append(attacker.rng.choice(STEP_SOUNDS))
            attacker.discharge()
        return launched

    def _nearest_target(self, position: Vec2, attacked: list[Dust]) -> Dust | None:
        nearest = None
        best = float("inf")
        for dust in self._dust_in_range(position):
            if _contains(attacked, dust):
                continue
            distance = dust.position.distance_squared(position)
            if distance < best:
                nearest, best = dust, distance
        return nearest

    def _deal_damage(self) -> list[_DustHit]:
        attacked: list[Dust] = []
        hits = []
        for damage in self.damages:
            if damage.previous is not None:
                attacked.append(damage.previous)
            if damage.damage_type is DamageType.LIGHTNING:
                target = self._nearest_target(damage.position, attacked)
                if target is None:
                    continue
                dealt = damage.rng.uniform(damage.amount / 2.0, damage.amount)
                target.health.apply_damage(dealt)
                attacked.append(target)
                hits.append(
                    _DustHit(
                        source=damage.position,
                        target=target.position,
                        dust=target,
                        amount=dealt,
                        remaining_energy=damage.amount - dealt,
                        damage_type=damage.damage_type,
                        rng=_clone(damage.rng),
                    )
                )
        return hits

    def _resolve_hits(self, hits: list[_DustHit]) -> list[Damage]:
        chained = []
        for hit in hits:
            self.effects.append(lightning_effect(hit.target, hit.source))
            self.effects.append(damage_text(hit.amount, hit.target))
            if hit.remaining_energy >= MIN_CHAIN_ENERGY:
                chained.append(
                    Damage(
                        hit.target,
                        hit.remaining_energy,
                        hit.damage_type,
                        _clone(hit.rng),
                        hit.dust,
                    )
                )
        return chained

    def _cleanup(self) -> None:
        remaining = []
        for dust in self.dust:
            if not dust.health.is_alive():
                self.inventory.dust_data += 1
            elif dust.position.y >= GAME_AREA.min.y:
                remaining.append(dust)
        self.dust = remaining