"""The shared power pool that attackers draw on."""

from __future__ import annotations

from .events import PowerMax, RegenSpeed

INITIAL_MAX_POWER = 20.0
INITIAL_REGEN_SPEED = 5.0


def _display(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return f"{value:.6f}".rstrip("0").rstrip(".")


class Power:
    """A regenerating pool of power with an upper limit."""

    def __init__(self, max_power: float, regen_speed: float) -> None:
        self.max_power = max_power
        self.regen_speed = regen_speed
        self.current = max_power

    def __repr__(self) -> str:
        return f"Power({self.current}/{self.max_power}, +{self.regen_speed}/s)"

    def consume(self, amount: float) -> float:
        """Take up to ``amount`` power and return how much was taken."""
        taken = min(self.current, amount)
        self.current = max(self.current - taken, 0.0)
        return taken

    def regenerate(self, delta: float) -> None:
        """Regenerate for ``delta`` seconds, up to the maximum."""
        self.current = min(self.current + self.regen_speed * delta, self.max_power)

    def apply(self, event: RegenSpeed | PowerMax) -> None:
        """Apply a power stats event."""
        match event:
            case RegenSpeed(speed=speed):
                self.regen_speed = speed
            case PowerMax(max_power=max_power):
                self.max_power = max_power
            case _:
                raise TypeError(f"not a power stats event: {event!r}")

    def label(self) -> str:
        """Text shown in the power bar."""
        return f"Power: {self.current:.0f}/{_display(float(self.max_power))}"

    def fill_percent(self) -> float:
        """How full the pool is, in percent."""
        return self.current / self.max_power * 100.0