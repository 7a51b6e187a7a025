import numpy as np
import pytest

from fieldrobot.point import Point
from fieldrobot.polygon import Polygon
from fieldrobot.transform import vector_to_affine, vector_to_translation_affine


def _extent(polygon):
    xs = [p["x"] for p in polygon.to_json()]
    ys = [p["y"] for p in polygon.to_json()]
    return min(xs), max(xs), min(ys), max(ys)


def test_center_of_square():
    square = Polygon([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(0, 0)])
    c = square.center()
    assert (c.x, c.y) == pytest.approx((1.0, 1.0))


def test_center_of_empty_polygon_raises():
    with pytest.raises(ValueError):
        Polygon().center()


def test_distance_from_center_is_zero():
    poly = Polygon([Point(1, 1), Point(5, 1), Point(5, 3), Point(1, 3), Point(1, 1)])
    assert poly.distance(poly.center()) == pytest.approx(0.0)


def test_update_is_closed_and_centred_on_translation():
    poly = Polygon()
    poly.update(vector_to_translation_affine((3.0, 4.0, 0.0)), 2.0, 4.0)
    data = poly.to_json()
    assert len(data) == 5
    assert data[0] == data[-1]
    c = poly.center()
    assert (c.x, c.y) == pytest.approx((3.0, 4.0))


def test_update_extent_matches_size():
    poly = Polygon()
    poly.update(np.eye(4), 2.0, 4.0)
    x0, x1, y0, y1 = _extent(poly)
    assert x1 - x0 == pytest.approx(2.0)
    assert y1 - y0 == pytest.approx(4.0)


def test_update_rotated_swaps_extent():
    poly = Polygon()
    poly.update(vector_to_affine((0, 0, 0), (0, 0, 90.0)), 2.0, 4.0)
    x0, x1, y0, y1 = _extent(poly)
    assert x1 - x0 == pytest.approx(4.0)
    assert y1 - y0 == pytest.approx(2.0)


def test_update_span_limits():
    poly = Polygon()
    poly.update_span(np.eye(4), 2.0, 3.0, -1.0)
    x0, x1, y0, y1 = _extent(poly)
    assert (y0, y1) == pytest.approx((-1.0, 3.0))
    assert x1 - x0 == pytest.approx(2.0)


@pytest.mark.parametrize("width,height", [(0.0, 1.0), (-1.0, 1.0), (1.0, 0.0)])
def test_update_rejects_bad_sizes(width, height):
    with pytest.raises(ValueError):
        Polygon().update(np.eye(4), width, height)


def test_update_span_rejects_bad_width():
    with pytest.raises(ValueError):
        Polygon().update_span(np.eye(4), 0.0, 1.0, -1.0)