"""Angle helpers. Angles are in degrees unless a name says otherwise."""

from __future__ import annotations

import math

__all__ = [
    "calc_smallest_angle",
    "calc_smallest_angle_absolute",
    "constrain_angle",
    "atan2_positive",
    "sgn",
    "approx",
    "in_range",
    "deg_to_rad",
    "rad_to_deg",
]


def calc_smallest_angle(c1: float, c2: float) -> float:
    """Signed difference ``c1 - c2`` folded once into [-180, 180]."""
    a = c1 - c2
    if a > 180:
        a -= 360
    elif a < -180:
        a += 360
    return a


def calc_smallest_angle_absolute(c1: float, c2: float) -> float:
    """Unsigned smallest angle between two directions."""
    diff = abs(c1 - c2)
    return min(diff, 360 - diff)


def constrain_angle(x: float) -> float:
    """Return ``x`` mapped into [0, 360)."""
    x = math.fmod(x, 360)
    if x < 0:
        x += 360
    return x


def atan2_positive(y: float, x: float) -> float:
    """Arc tangent of ``y / x`` in radians, in [0, 2*pi)."""
    if x != 0:
        if x > 0:
            if y >= 0:
                return math.atan(y / x)
            return math.atan(y / x) + 2 * math.pi
        return math.atan(y / x) + math.pi
    if y >= 0:
        return 0.5 * math.pi
    return 1.5 * math.pi


def sgn(val: float) -> int:
    """Sign of ``val`` as -1, 0 or 1."""
    return int(0 < val) - int(val < 0)


def approx(d: float, d_ref: float, approx_value: float) -> float:
    """Return 0.0 when ``d`` is within ``approx_value`` of ``d_ref``, else ``d``."""
    if abs(d - d_ref) <= approx_value:
        return 0.0
    return d


def in_range(d1: float, d2: float, value: float) -> bool:
    """True when ``d1 <= value <= d2``."""
    return d1 <= value <= d2


def deg_to_rad(value: float) -> float:
    """Degrees to radians."""
    return value * math.pi / 180.0


def rad_to_deg(value: float) -> float:
    """Radians to degrees."""
    return value * 180.0 / math.pi