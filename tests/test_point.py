import pytest

from fieldrobot.point import CornerPoint, CurvyPoint, IndexPoint, NextAndPreviousCorner, Point


def test_default_point_is_empty_until_set():
    p = Point()
    assert p.is_empty
    assert (p.x, p.y) == (0.0, 0.0)
    p.y = 3.0
    assert not p.is_empty
    assert p.y == 3.0


def test_point_with_coordinates_is_not_empty():
    p = Point(1.5, -2.0)
    assert not p.is_empty
    assert tuple(p) == (1.5, -2.0)


def test_distance_symmetric_and_zero_to_self():
    a = Point(1.0, 2.0)
    b = Point(4.0, 6.0)
    assert a.distance(b) == 5.0
    assert b.distance(a) == a.distance(b)
    assert a.distance(a) == 0.0


def test_center_returns_equal_copy():
    p = Point(7.25, -1.0)
    c = p.center()
    assert c == p
    c.x = 0.0
    assert p.x == 7.25


def test_to_json():
    assert Point(1.5, -2.0).to_json() == {"x": 1.5, "y": -2.0}


def test_equality_ignores_subclass_extras():
    assert CurvyPoint(1.0, 2.0, 3.0) == Point(1.0, 2.0)
    assert Point(1.0, 2.0) != Point(1.0, 2.5)


def test_curvy_point_radius():
    assert CurvyPoint(1.0, 1.0).radius == 0.0
    assert CurvyPoint(1.0, 1.0, 2.5).radius == 2.5
    assert CurvyPoint().is_empty


def test_index_point():
    p = IndexPoint(3.0, 4.0, 12)
    assert p.index == 12
    assert p.distance(Point(3.0, 4.0)) == 0.0
    assert IndexPoint().index == 0


def test_corner_point_headland():
    corner = CornerPoint(index=5, point=Point(1.0, 1.0), angle=90.0, corner_index=2)
    assert not corner.is_headland
    corner.set_headland(4.5)
    assert corner.is_headland
    assert corner.headland_distance == 4.5


def test_next_and_previous_corner_defaults_are_independent():
    pair = NextAndPreviousCorner()
    pair.next_corner.corner_index = 3
    assert pair.previous_corner.corner_index == 0
    assert pair.next_corner.corner_index == 3