import pytest

from aircleaner.splash import (
    SPLASH_DURATION_SECS,
    SPLASH_FADE_DURATION_SECS,
    FadeInOut,
    SplashScreen,
)


def test_fade_starts_and_ends_transparent():
    fade = FadeInOut()
    assert fade.alpha() == 0.0
    fade.advance(SPLASH_DURATION_SECS)
    assert fade.alpha() == pytest.approx(0.0)


def test_fade_is_opaque_in_the_middle():
    fade = FadeInOut(t=SPLASH_DURATION_SECS / 2)
    assert fade.alpha() == 1.0


def test_fade_is_symmetric():
    for t in (0.1, 0.2, 0.4, 0.5):
        rising = FadeInOut(t=t)
        falling = FadeInOut(t=SPLASH_DURATION_SECS - t)
        assert rising.alpha() == pytest.approx(falling.alpha())


def test_fade_rises_during_fade_in():
    values = [FadeInOut(t=t).alpha() for t in (0.0, 0.1, 0.2, 0.3, 0.4, 0.5)]
    assert values == sorted(values)
    assert FadeInOut(t=SPLASH_FADE_DURATION_SECS).alpha() == 1.0


def test_fade_past_end_is_clamped():
    assert FadeInOut(t=SPLASH_DURATION_SECS * 5).alpha() == pytest.approx(0.0)
    assert FadeInOut(t=-1.0).alpha() == 0.0


def test_advance_accumulates():
    fade = FadeInOut()
    fade.advance(0.25)
    fade.advance(0.5)
    assert fade.t == pytest.approx(0.75)


def test_splash_ends_when_timer_runs_out():
    splash = SplashScreen()
    assert splash.update(1.0, True) is False
    assert splash.update(1.0, True) is True
    assert splash.update(1.0, True) is False


def test_splash_waits_forever_if_assets_missed_the_moment():
    splash = SplashScreen()
    assert splash.update(2.0, False) is False
    assert splash.update(1.0, True) is False


def test_skip_requires_loaded_assets():
    splash = SplashScreen()
    assert splash.skip(True) is True
    assert splash.skip(False) is False