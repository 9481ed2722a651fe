import math

from bezier_game.core import ORIGIN, Point, Rect, lerp


def test_point_arithmetic_returns_new_points() -> None:
    a = Point(1.0, 2.0)
    b = Point(4.0, 6.0)

    assert a + b == Point(5.0, 8.0)
    assert b - a == Point(3.0, 4.0)
    assert a * 2 == Point(2.0, 4.0)
    assert 2 * a == Point(2.0, 4.0)
    assert -a == Point(-1.0, -2.0)
    assert a == Point(1.0, 2.0)
    assert math.isclose(a.distance_to(b), 5.0)


def test_point_of_accepts_pairs() -> None:
    assert Point.of((3, 4)) == Point(3.0, 4.0)
    p = Point(1.0, 1.0)
    assert Point.of(p) is p
    assert ORIGIN.as_tuple() == (0.0, 0.0)


def test_lerp_hits_both_endpoints_exactly() -> None:
    a = Point(0.1, 0.7)
    b = Point(0.3, -2.9)

    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(Point(0.0, 0.0), Point(10.0, 20.0), 0.25) == Point(2.5, 5.0)


def test_lerp_extrapolates_outside_unit_interval() -> None:
    assert lerp(Point(0.0, 0.0), Point(10.0, 0.0), 2.0) == Point(20.0, 0.0)
    assert Point(0.0, 0.0).lerp(Point(10.0, 0.0), -1.0) == Point(-10.0, 0.0)


def test_rect_contains_is_boundary_exclusive() -> None:
    rect = Rect(10.0, 20.0, 10.0, 10.0)

    assert rect.contains(Point(15.0, 25.0))
    assert not rect.contains(Point(10.0, 25.0))
    assert not rect.contains(Point(20.0, 25.0))
    assert not rect.contains(Point(15.0, 20.0))
    assert not rect.contains(Point(15.0, 30.0))
    assert rect.center == Point(15.0, 25.0)
    assert rect.origin == Point(10.0, 20.0)
