import math

import pytest

from fieldrobot.angle import (
    approx,
    atan2_positive,
    calc_smallest_angle,
    calc_smallest_angle_absolute,
    constrain_angle,
    deg_to_rad,
    in_range,
    rad_to_deg,
    sgn,
)


@pytest.mark.parametrize("x", [-725.5, -360.0, -90.0, -0.5, 0.0, 45.0, 359.9, 360.0, 1000.0])
def test_constrain_angle_range(x):
    result = constrain_angle(x)
    assert 0 <= result < 360


@pytest.mark.parametrize("x", [-200.0, 10.0, 123.25, 300.0])
def test_constrain_angle_periodic(x):
    assert constrain_angle(x + 360) == pytest.approx(constrain_angle(x))
    assert constrain_angle(x - 720) == pytest.approx(constrain_angle(x))


def test_constrain_angle_keeps_value_inside_range():
    assert constrain_angle(123.5) == 123.5


@pytest.mark.parametrize("c1,c2", [(350, 10), (10, 350), (0, 180), (90, 45), (45, 90), (200, 0)])
def test_smallest_angle_bounds_and_magnitude(c1, c2):
    signed = calc_smallest_angle(c1, c2)
    assert -180 <= signed <= 180
    assert abs(signed) == pytest.approx(calc_smallest_angle_absolute(c1, c2))


def test_smallest_angle_antisymmetric():
    assert calc_smallest_angle(30, 300) == pytest.approx(-calc_smallest_angle(300, 30))


@pytest.mark.parametrize("c1,c2", [(10, 350), (0, 0), (90, 270), (5, 60)])
def test_smallest_angle_absolute_symmetric(c1, c2):
    value = calc_smallest_angle_absolute(c1, c2)
    assert value == calc_smallest_angle_absolute(c2, c1)
    assert 0 <= value <= 180


@pytest.mark.parametrize(
    "y,x", [(1.0, 2.0), (-1.0, 2.0), (1.0, -2.0), (-1.0, -2.0), (3.0, 0.0), (-3.0, 0.0), (0.0, 5.0), (0.0, -5.0)]
)
def test_atan2_positive_matches_library_modulo_full_turn(y, x):
    result = atan2_positive(y, x)
    assert 0 <= result < 2 * math.pi
    assert result == pytest.approx(math.atan2(y, x) % (2 * math.pi))


def test_atan2_positive_origin_is_quarter_turn():
    assert atan2_positive(0.0, 0.0) == pytest.approx(0.5 * math.pi)


def test_sgn():
    assert sgn(5.5) == 1
    assert sgn(-0.1) == -1
    assert sgn(0.0) == 0


def test_approx_snaps_to_zero_within_tolerance():
    assert approx(1.05, 1.0, 0.1) == 0.0
    assert approx(2.5, 1.0, 0.1) == 2.5


def test_in_range_inclusive():
    assert in_range(0.0, 1.5, 0.0)
    assert in_range(0.0, 1.5, 1.5)
    assert not in_range(0.0, 1.5, 1.6)
    assert not in_range(-1.5, 0.0, 0.1)


def test_degree_radian_round_trip():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    for value in (-720.0, -33.3, 0.0, 90.0, 271.5):
        assert rad_to_deg(deg_to_rad(value)) == pytest.approx(value)