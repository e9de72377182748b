"""The splash screen shown briefly at startup."""

from __future__ import annotations

from dataclasses import dataclass, field

from .palette import SPLASH_BACKGROUND
from .utils import Timer

SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"
SPLASH_BACKGROUND_COLOR = SPLASH_BACKGROUND


@dataclass
class FadeInOut:
    """A trapezoid fade: in, hold at full opacity, then out."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity at the current time, between 0 and 1."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def advance(self, dt: float) -> None:
        """Move the animation forward by ``dt`` seconds."""
        self.t += dt


@dataclass
class SplashScreen:
    """The fading splash image and the timer that ends the splash screen."""

    fade: FadeInOut = field(default_factory=FadeInOut)
    timer: Timer = field(default_factory=lambda: Timer(SPLASH_DURATION_SECS))
    skipped: bool = False

    def update(self, dt: float, assets_loaded: bool) -> bool:
        """Advance ``dt`` seconds; return True when it is time for the title screen.

        The switch happens only on the step the timer runs out, and only if
        the assets have finished loading by then.
        """
        self.fade.advance(dt)
        self.timer.tick(dt)
        return assets_loaded and self.timer.just_finished

    def skip(self, assets_loaded: bool) -> bool:
        """Request to leave the splash screen early.

        The request is honoured, and recorded in ``skipped``, only once the
        assets have finished loading.
        """
        if not assets_loaded:
            return False
        self.skipped = True
        return True