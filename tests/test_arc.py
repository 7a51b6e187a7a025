import pytest

from fieldrobot.arc import Arc
from fieldrobot.line import Line
from fieldrobot.point import CurvyPoint, Point


def _corner(turn_left):
    a = Point(0.0, 0.0)
    b = Point(10.0, 0.0)
    c = Point(10.0, 10.0) if turn_left else Point(10.0, -10.0)
    return Line(a, b), Line(b, c)


def test_from_points_rejects_distant_points():
    with pytest.raises(ValueError):
        Arc.from_points(Point(0.0, 0.0), Point(5.0, 0.0), Point(1.0, 1.0), 2.0)


def test_from_points_center_equidistant_and_opposite_side():
    start, stop, other = Point(0.0, 0.0), Point(2.0, 0.0), Point(1.0, -1.0)
    arc = Arc.from_points(start, stop, other, 2.0)
    assert arc.major
    assert arc.center.distance(start) == pytest.approx(2.0)
    assert arc.center.distance(stop) == pytest.approx(2.0)
    chord = Line(start, stop)
    assert chord.left(arc.center) != chord.left(other)


def test_from_points_full_diameter():
    arc = Arc.from_points(Point(0.0, 0.0), Point(2.0, 0.0), Point(1.0, 3.0), 1.0)
    assert arc.center.distance(Point(1.0, 0.0)) == pytest.approx(0.0, abs=1e-9)


def test_major_arc_interpolation_goes_long_way():
    arc = Arc.from_points(Point(0.0, 0.0), Point(2.0, 0.0), Point(1.0, -1.0), 2.0)
    points = arc.interpolate(0.1)
    assert points[-1] == arc.stop
    for p in points:
        assert isinstance(p, CurvyPoint)
        assert p.radius == 2.0
        assert p.distance(arc.center) == pytest.approx(2.0)
    assert any(p.y > arc.center.y for p in points)


@pytest.mark.parametrize("turn_left", [True, False])
def test_from_lines_tangent_points(turn_left):
    line1, line2 = _corner(turn_left)
    arc = Arc.from_lines(line1, line2, 2.0)
    assert not arc.major
    assert line1.distance(arc.start) == pytest.approx(0.0, abs=1e-9)
    assert line2.distance(arc.stop) == pytest.approx(0.0, abs=1e-9)
    assert arc.center.distance(arc.start) == pytest.approx(2.0)
    assert arc.center.distance(arc.stop) == pytest.approx(2.0)
    assert line1.distance(arc.center) == pytest.approx(2.0)
    assert line2.distance(arc.center) == pytest.approx(2.0)


@pytest.mark.parametrize("turn_left", [True, False])
def test_from_lines_interpolation_takes_short_way(turn_left):
    line1, line2 = _corner(turn_left)
    arc = Arc.from_lines(line1, line2, 2.0)
    points = arc.interpolate(0.1)
    assert len(points) > 2
    assert points[-1] == arc.stop
    assert points[0].distance(arc.start) == pytest.approx(0.0, abs=1e-9)
    for p in points:
        assert p.distance(arc.center) == pytest.approx(2.0)
    distances = [p.distance(arc.stop) for p in points]
    assert all(a > b for a, b in zip(distances, distances[1:]))