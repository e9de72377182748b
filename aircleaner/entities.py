"""Dust, dust spawners, attackers and short-lived visual effects."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .geometry import GAME_AREA, Vec2
from .health import Health
from .palette import BLACK, ORANGE, RED, YELLOW_300, Color
from .power import Power
from .utils import Timer, map_range

DUST_HEALTH = 5.0
DUST_SIZE = Vec2(16.0, 16.0)
DUST_SPEED_RANGE = (80.0, 120.0)
DUST_ALPHA_RANGE = (0.4, 1.0)
HEALTH_BAR_OFFSET = Vec2(0.0, 11.0)
HEALTH_BAR_SIZE = Vec2(20.0, 4.0)

DEFAULT_SPAWN_SPEED = 2.0

ATTACKER_SIZE = Vec2(16.0, 16.0)
DEFAULT_ATTACK_INTERVAL = 1.0

EFFECT_SIZE = Vec2(16.0, 16.0)
LIGHTNING_DURATION = 0.1
DAMAGE_TEXT_DURATION = 0.5
DAMAGE_TEXT_FONT_SIZE = 12.0


def _uniform(rng: random.Random, low: float, high: float) -> float:
    """A value drawn uniformly from the half-open range [low, high)."""
    return low + (high - low) * rng.random()


def _mix(color: Color, other: Color, factor: float) -> tuple[float, float, float]:
    return tuple(a + (b - a) * factor for a, b in zip(color[:3], other[:3]))  # type: ignore[return-value]


@dataclass
class Dust:
    """A dust particle falling through the game area."""

    position: Vec2
    speed: float
    health: Health = field(default_factory=lambda: Health(DUST_HEALTH))

    def alpha(self) -> float:
        """Opacity of the particle: faster dust is drawn more opaque."""
        return map_range(self.speed, DUST_SPEED_RANGE, DUST_ALPHA_RANGE)

    def fall(self, dt: float) -> None:
        """Move down for ``dt`` seconds at the particle's speed."""
        self.position = Vec2(self.position.x, self.position.y - self.speed * dt)


def _spawn_interval(spawn_speed: float) -> float:
    if not spawn_speed > 0.0:
        raise ValueError(f"spawn speed must be positive, got {spawn_speed}")
    return 1.0 / spawn_speed


class DustSpawner:
    """Spawns dust at the top edge of the game area at a steady rate."""

    def __init__(
        self, spawn_speed: float = DEFAULT_SPAWN_SPEED, rng: random.Random | None = None
    ) -> None:
        self.timer = Timer(_spawn_interval(spawn_speed), repeating=True)
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"DustSpawner({self.timer!r})"

    def tick(self, dt: float) -> Dust | None:
        """Advance ``dt`` seconds; return a new particle if one is due."""
        self.timer.tick(dt)
        if not self.timer.just_finished:
            return None
        x = _uniform(self.rng, GAME_AREA.min.x, GAME_AREA.max.x)
        speed = _uniform(self.rng, *DUST_SPEED_RANGE)
        return Dust(Vec2(x, GAME_AREA.max.y), speed)

    def set_spawn_speed(self, speed: float) -> None:
        """Spawn ``speed`` particles per second from now on."""
        self.timer.set_duration(_spawn_interval(speed))


class Attacker:
    """A draggable lightning emitter that charges from the power pool."""

    def __init__(
        self,
        position: Vec2 = Vec2(),
        attack_interval: float = DEFAULT_ATTACK_INTERVAL,
        rng: random.Random | None = None,
    ) -> None:
        self.position = position
        self.timer = Timer(attack_interval)
        self.fully_charged = False
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        state = "charged" if self.fully_charged else "charging"
        return f"Attacker({self.position}, {state})"

    def tick(self, dt: float) -> None:
        """Advance the attack timer by ``dt`` seconds."""
        self.timer.tick(dt)

    def try_charge(self, power: Power, energy: float) -> bool:
        """Draw ``energy`` from ``power`` once the timer is done.

        Returns True if the attacker became fully charged by this call.
        """
        if self.fully_charged:
            return False
        if self.timer.finished and power.current >= energy:
            power.consume(energy)
            self.fully_charged = True
            return True
        return False

    def in_bounds(self) -> bool:
        """True if the attacker stands inside the game area."""
        return GAME_AREA.contains(self.position)

    def color(self) -> Color:
        """Sprite colour: black out of bounds, yellow when charged, else red by progress."""
        if not self.in_bounds():
            return BLACK
        if self.fully_charged:
            return YELLOW_300
        progress = map_range(self.timer.fraction(), (0.0, 1.0), (0.5, 1.0))
        return _mix(RED, BLACK, 1.0 - progress)

    def drag(self, dx: float, dy: float) -> None:
        """Move by a pointer drag delta given in screen axes (y grows downwards)."""
        self.position = Vec2(self.position.x + dx, self.position.y - dy)

    def discharge(self) -> None:
        """Restart the attack timer after a strike."""
        self.timer.reset()
        self.fully_charged = False

    def contains(self, point: Vec2) -> bool:
        """True if ``point`` lies on the attacker's sprite."""
        half = ATTACKER_SIZE / 2.0
        return (
            abs(point.x - self.position.x) <= half.x
            and abs(point.y - self.position.y) <= half.y
        )


@dataclass
class VisualEffect:
    """A sprite, line or text shown for a fixed time and then removed."""

    position: Vec2
    duration: float
    color: Color
    size: Vec2 | None = None
    line: tuple[Vec2, Vec2] | None = None
    text: str | None = None
    font_size: float | None = None
    timer: Timer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.timer = Timer(self.duration)

    def tick(self, dt: float) -> bool:
        """Advance ``dt`` seconds; return True once the effect has expired."""
        return self.timer.tick(dt).finished


def lightning_effect(target: Vec2, source: Vec2) -> VisualEffect:
    """A brief flash at ``target`` with a line back to ``source``."""
    return VisualEffect(
        position=target,
        duration=LIGHTING_DURATION if False else LIGHTNING_DURATION,
        color=ORANGE,
        size=EFFECT_SIZE,
        line=(source, target),
    )


def damage_text(amount: float, position: Vec2) -> VisualEffect:
    """A floating number showing damage dealt at ``position``."""
    return VisualEffect(
        position=position,
        duration=DAMAGE_TEXT_DURATION,
        color=RED,
        text=f"-{amount:.1f}",
        font_size=DAMAGE_TEXT_FONT_SIZE,
    )


LIGHTING_DURATION = LIGHTNING_DURATION