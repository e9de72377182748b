"""Numeric helpers and the frame timer used by gameplay systems."""

from __future__ import annotations

_U32_MAX = 2**32 - 1


def map_range(
    value: float, source: tuple[float, float], target: tuple[float, float]
) -> float:
    """Linearly map ``value`` from the ``source`` range onto the ``target`` range.

    A source range of zero width maps every value to the start of the target.
    """
    source_start, source_end = source
    target_start, target_end = target
    source_span = source_end - source_start
    if source_span == 0.0:
        return target_start
    normalized = (value - source_start) / source_span
    return target_start + normalized * (target_end - target_start)


def _check_duration(duration: float) -> float:
    duration = float(duration)
    if duration < 0.0 or duration != duration:
        raise ValueError(f"timer duration must be a non-negative number, got {duration}")
    return duration


class Timer:
    """A countdown timer, either one-shot or repeating.

    A one-shot timer stops at its duration and stays finished until reset.
    A repeating timer wraps around and is finished only on the ticks on
    which it wrapped.
    """

    def __init__(self, duration: float, repeating: bool = False) -> None:
        self.duration = _check_duration(duration)
        self.repeating = repeating
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def __repr__(self) -> str:
        mode = "repeating" if self.repeating else "once"
        return f"Timer({self.elapsed:.3f}/{self.duration:.3f}s, {mode})"

    @property
    def just_finished(self) -> bool:
        """True if the timer finished during the latest tick."""
        return self.times_finished_this_tick > 0

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        if delta < 0.0:
            raise ValueError(f"cannot tick a timer backwards by {delta}")
        if not self.repeating and self.finished:
            self.times_finished_this_tick = 0
            return self

        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.repeating:
            if self.duration == 0.0:
                self.times_finished_this_tick = _U32_MAX
                self.elapsed = 0.0
            else:
                laps, self.elapsed = divmod(self.elapsed, self.duration)
                self.times_finished_this_tick = min(int(laps), _U32_MAX)
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def fraction(self) -> float:
        """Share of the duration that has elapsed, 1.0 for a zero duration."""
        if self.duration == 0.0:
            return 1.0
        return self.elapsed / self.duration

    def reset(self) -> None:
        """Start the timer over from zero."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def set_duration(self, duration: float) -> None:
        """Change the duration, keeping the time already elapsed."""
        self.duration = _check_duration(duration)