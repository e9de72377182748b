"""Upgrade effect and cost progressions, and the offers made from them.

Values are computed in single precision so that costs truncate the same way
at every level.
"""

from __future__ import annotations

import copy
import math
import struct
from dataclasses import dataclass
from itertools import islice
from typing import Any, Callable, Union

_U32_MAX = 2**32 - 1


def _f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _powi(base: float, exponent: int) -> float:
    result = 1.0
    while True:
        if exponent & 1:
            result = _f32(result * base)
        exponent >>= 1
        if exponent == 0:
            return result
        base = _f32(base * base)


def _to_u32(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 2**32:
        return _U32_MAX
    return int(value)


def _check_step(n: int) -> None:
    if n < 0:
        raise ValueError(f"step must be non-negative, got {n}")


class _Progression:
    """An endless sequence indexed by a step counter ``k``."""

    def __init__(self) -> None:
        self.k = 0

    def _at(self, k: int) -> Any:
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self):
        value = self._at(self.k)
        self.k += 1
        return value

    def nth(self, n: int):
        """Return the value ``n`` steps ahead and move ``n`` steps forward.

        The returned value is also what the following ``next()`` yields.
        """
        _check_step(n)
        value = self._at(self.k + n)
        self.k += n
        return value


class ExpCosts(_Progression):
    """Costs ``factor * base**k``, truncated to whole units."""

    def __init__(self, factor: float, base: float) -> None:
        super().__init__()
        self.factor = _f32(factor)
        self.base = _f32(base)

    def __iter__(self) -> ExpCosts:
        return self

    def __next__(self) -> int:
        return super().__next__()

    def nth(self, n: int) -> int:
        return super().nth(n)

    def _at(self, k: int) -> int:
        return _to_u32(_f32(self.factor * _powi(self.base, k)))


class AdditiveEffect(_Progression):
    """Effect values ``initial_value + k * increment``."""

    def __init__(self, initial_value: float, increment: float) -> None:
        super().__init__()
        self.initial_value = _f32(initial_value)
        self.increment = _f32(increment)

    def __iter__(self) -> AdditiveEffect:
        return self

    def __next__(self) -> float:
        return super().__next__()

    def nth(self, n: int) -> float:
        return super().nth(n)

    def _at(self, k: int) -> float:
        return _f32(self.initial_value + _f32(self.increment * _f32(k)))


class MultiplicativeEffect(_Progression):
    """Effect values ``initial_value * ratio**k``."""

    def __init__(self, initial_value: float, ratio: float) -> None:
        super().__init__()
        self.initial_value = _f32(initial_value)
        self.ratio = _f32(ratio)

    def __iter__(self) -> MultiplicativeEffect:
        return self

    def __next__(self) -> float:
        return super().__next__()

    def nth(self, n: int) -> float:
        return super().nth(n)

    def _at(self, k: int) -> float:
        return _f32(self.initial_value * _powi(self.ratio, k))


Effects = Union[AdditiveEffect, MultiplicativeEffect]


@dataclass(frozen=True)
class UpgradeOffer:
    """What buying an upgrade at a given level costs and does."""

    name: str
    tips: str
    event: Any
    previous: float
    new: float
    cost: int

    def tip(self) -> str:
        """The tip line, showing the effect before and after the upgrade."""
        return f"{self.tips}: {self.previous:.1f}->{self.new:.1f}"


@dataclass(frozen=True, eq=False)
class Upgrade:
    """A purchasable upgrade whose effect and cost grow with its level."""

    name: str
    tips: str
    effects: Effects
    costs: ExpCosts
    make_event: Callable[[float], Any]

    def offer(self, level: int) -> UpgradeOffer:
        """The offer for moving from ``level`` to the next level."""
        _check_step(level)
        pairs = zip(copy.copy(self.effects), copy.copy(self.costs))
        current_effect, cost = next(islice(pairs, level, None))
        next_effect, _ = next(pairs)
        return UpgradeOffer(
            name=self.name,
            tips=self.tips,
            event=self.make_event(next_effect),
            previous=current_effect,
            new=next_effect,
            cost=cost,
        )