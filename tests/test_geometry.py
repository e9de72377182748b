import pytest

from aircleaner.geometry import GAME_AREA, Rect, Vec2


def test_distance_squared_three_four_five():
    assert Vec2(0.0, 0.0).distance_squared(Vec2(3.0, 4.0)) == 25.0


def test_distance_squared_symmetric_and_zero_to_self():
    a = Vec2(1.5, -2.0)
    b = Vec2(-7.0, 4.25)
    assert a.distance_squared(b) == b.distance_squared(a)
    assert a.distance_squared(a) == 0.0


def test_add_sub_round_trip():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.5, 8.0)
    assert (a + b) - b == a


def test_scale_round_trip():
    a = Vec2(3.0, -6.0)
    assert (a * 4.0) / 4.0 == a
    assert 2.0 * a == a * 2.0
    assert -(-a) == a


def test_unpacking():
    x, y = Vec2(1.0, 2.0)
    assert (x, y) == (1.0, 2.0)


def test_game_area_contains_center_and_corners():
    assert GAME_AREA.contains(Vec2(0.0, 0.0))
    assert GAME_AREA.contains(Vec2(-200.0, -300.0))
    assert GAME_AREA.contains(Vec2(200.0, 300.0))


@pytest.mark.parametrize(
    "point",
    [Vec2(200.1, 0.0), Vec2(0.0, -300.5), Vec2(-201.0, 301.0)],
)
def test_game_area_excludes_outside_points(point):
    assert not GAME_AREA.contains(point)


def test_game_area_size():
    assert GAME_AREA.size() == Vec2(400.0, 600.0)


def test_size_plus_min_is_max():
    rect = Rect(Vec2(1.0, 2.0), Vec2(5.0, 9.0))
    assert rect.min + rect.size() == rect.max