import pytest

from aircleaner.utils import Timer, map_range


def test_map_range_endpoints_map_to_target_endpoints():
    assert map_range(80.0, (80.0, 120.0), (0.4, 1.0)) == pytest.approx(0.4)
    assert map_range(120.0, (80.0, 120.0), (0.4, 1.0)) == pytest.approx(1.0)


def test_map_range_midpoint():
    assert map_range(0.5, (0.0, 1.0), (0.5, 1.0)) == pytest.approx(0.75)


def test_map_range_zero_span_returns_target_start():
    assert map_range(3.0, (2.0, 2.0), (7.0, 9.0)) == 7.0


def test_map_range_extrapolates_below_start():
    assert map_range(-1.0, (0.0, 1.0), (0.0, 10.0)) < 0.0


def test_map_range_reversed_target():
    assert map_range(0.0, (0.0, 1.0), (1.0, 0.0)) == pytest.approx(1.0)
    assert map_range(1.0, (0.0, 1.0), (1.0, 0.0)) == pytest.approx(0.0)


def test_once_timer_partial_tick():
    timer = Timer(1.0)
    timer.tick(0.25)
    assert timer.fraction() == pytest.approx(0.25)
    assert not timer.finished
    assert not timer.just_finished


def test_once_timer_finishes_and_stays_finished():
    timer = Timer(1.0)
    timer.tick(1.5)
    assert timer.finished
    assert timer.just_finished
    assert timer.elapsed == timer.duration
    assert timer.fraction() == pytest.approx(1.0)
    timer.tick(0.1)
    assert timer.finished
    assert not timer.just_finished


def test_tick_returns_timer():
    assert Timer(0.5).tick(0.5).finished is True


def test_repeating_timer_wraps():
    duration = 0.5
    remainder = 0.1
    timer = Timer(duration, repeating=True)
    timer.tick(2 * duration + remainder)
    assert timer.just_finished
    assert timer.times_finished_this_tick == 2
    assert timer.elapsed == pytest.approx(remainder)
    timer.tick(remainder)
    assert not timer.finished
    assert timer.times_finished_this_tick == 0


def test_reset_clears_progress():
    timer = Timer(1.0)
    timer.tick(2.0)
    timer.reset()
    assert timer.elapsed == 0.0
    assert not timer.finished
    assert timer.fraction() == 0.0


def test_set_duration_keeps_elapsed():
    timer = Timer(1.0, repeating=True)
    timer.tick(0.3)
    timer.set_duration(0.25)
    assert timer.elapsed == pytest.approx(0.3)
    timer.tick(0.0)
    assert timer.just_finished
    assert timer.elapsed < timer.duration


def test_zero_duration_fraction_is_complete():
    assert Timer(0.0).fraction() == 1.0


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Timer(-1.0)
    with pytest.raises(ValueError):
        Timer(1.0).set_duration(-0.5)


def test_negative_delta_rejected():
    with pytest.raises(ValueError):
        Timer(1.0).tick(-0.1)