"""Hit points for things that can be damaged."""

from __future__ import annotations


class Health:
    """Current and maximum hit points."""

    def __init__(self, max_health: float) -> None:
        self.max_health = max_health
        self.current = max_health

    def __repr__(self) -> str:
        return f"Health({self.current}/{self.max_health})"

    def apply_damage(self, damage: float) -> None:
        """Lose ``damage`` hit points, never dropping below zero."""
        self.current -= min(damage, self.current)

    def is_alive(self) -> bool:
        return self.current > 0.0

    def is_max_health(self) -> bool:
        return self.current >= self.max_health

    def heal(self, amount: float) -> None:
        """Regain ``amount`` hit points, up to the maximum."""
        self.current = min(self.current + amount, self.max_health)

    def ratio(self) -> float:
        """Share of the maximum hit points left."""
        return self.current / self.max_health

    def bar_width(self, width: float) -> float:
        """Width of the filled part of a health bar ``width`` wide with a 1-unit border."""
        return (width - 2.0) * self.ratio()