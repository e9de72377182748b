import pytest

from aircleaner.health import Health


def test_new_health_is_full():
    health = Health(5.0)
    assert health.current == health.max_health == 5.0
    assert health.is_alive()
    assert health.is_max_health()
    assert health.ratio() == 1.0


def test_partial_damage():
    health = Health(5.0)
    health.apply_damage(2.0)
    assert health.current == pytest.approx(3.0)
    assert health.is_alive()
    assert not health.is_max_health()


def test_overkill_stops_at_zero():
    health = Health(5.0)
    health.apply_damage(50.0)
    assert health.current == 0.0
    assert not health.is_alive()


def test_heal_caps_at_max():
    health = Health(5.0)
    health.apply_damage(4.0)
    health.heal(100.0)
    assert health.current == health.max_health
    assert health.is_max_health()


def test_damage_then_equal_heal_restores():
    health = Health(8.0)
    health.apply_damage(3.0)
    health.heal(3.0)
    assert health.current == pytest.approx(8.0)


def test_bar_width_full_and_empty():
    health = Health(5.0)
    assert health.bar_width(20.0) == pytest.approx(18.0)
    health.apply_damage(5.0)
    assert health.bar_width(20.0) == 0.0


def test_ratio_stays_in_unit_interval():
    health = Health(10.0)
    for _ in range(12):
        health.apply_damage(1.5)
        assert 0.0 <= health.ratio() <= 1.0