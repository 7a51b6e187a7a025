"""Line segments in the plane."""

from __future__ import annotations

import copy
import math
from enum import Enum

from fieldrobot.angle import (
    atan2_positive,
    calc_smallest_angle_absolute,
    constrain_angle,
    deg_to_rad,
    rad_to_deg,
)
from fieldrobot.point import CurvyPoint, Point

__all__ = ["Side", "Line", "FLT_MAX"]

FLT_MAX = 3.4028234663852886e38


class Side(Enum):
    """End of a line to act on."""

    BEGIN = "begin"
    END = "end"
    BOTH = "both"


def _ieee_div(n: float, d: float) -> float:
    """Division that yields inf or nan instead of raising on a zero divisor."""
    try:
        return n / d
    except ZeroDivisionError:
        if n == 0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, d)


class Line:
    """A directed segment from ``p1`` to ``p2``."""

    def __init__(self, p1: Point | None = None, p2: Point | None = None) -> None:
        self._empty = p1 is None and p2 is None
        self._p1 = copy.copy(p1) if p1 is not None else Point()
        self._p2 = copy.copy(p2) if p2 is not None else Point()

    @property
    def p1(self) -> Point:
        return self._p1

    @p1.setter
    def p1(self, point: Point) -> None:
        self._empty = False
        self._p1 = copy.copy(point)

    @property
    def p2(self) -> Point:
        return self._p2

    @p2.setter
    def p2(self, point: Point) -> None:
        self._empty = False
        self._p2 = copy.copy(point)

    @property
    def is_empty(self) -> bool:
        return self._empty

    def __repr__(self) -> str:
        return f"Line({self._p1!r}, {self._p2!r})"

    def params(self) -> tuple[float, float, float]:
        """Coefficients ``(a, b, c)`` of ``a*x + b*y + c = 0``."""
        a = self._p1.y - self._p2.y
        b = self._p2.x - self._p1.x
        c = self._p1.x * self._p2.y - self._p2.x * self._p1.y
        return a, b, c

    def slope_intercept(self) -> tuple[float, float]:
        """Slope and intercept ``(m, q)`` of ``y = m*x + q``; infinite for vertical lines."""
        a, b, c = self.params()
        return -_ieee_div(a, b), -_ieee_div(c, b)

    def alpha(self) -> float:
        """Angle of the line to the x axis in degrees, in [0, 360)."""
        return rad_to_deg(atan2_positive(self._p2.y - self._p1.y, self._p2.x - self._p1.x))

    def extend(self, distance: float, side: Side) -> None:
        """Lengthen the line by ``distance`` at the given end (or both)."""
        alpha_radians = deg_to_rad(self.alpha())
        if side is Side.BEGIN:
            self._p1.x = self._p1.x - distance * math.cos(alpha_radians)
            self._p1.y = self._p1.y - distance * math.sin(alpha_radians)
        elif side is Side.END:
            self._p2.x = self._p2.x + distance * math.cos(alpha_radians)
            self._p2.y = self._p2.y + distance * math.sin(alpha_radians)
        else:
            self.extend(distance, Side.BEGIN)
            self.extend(distance, Side.END)

    def point_from(self, distance: float, side: Side) -> Point:
        """Point on the line's extension ``distance`` beyond its start or end."""
        alpha_radians = deg_to_rad(self.alpha())
        if side is Side.BEGIN:
            return Point(
                self._p1.x - distance * math.cos(alpha_radians),
                self._p1.y - distance * math.sin(alpha_radians),
            )
        return Point(
            self._p2.x + distance * math.cos(alpha_radians),
            self._p2.y + distance * math.sin(alpha_radians),
        )

    def orthogonal(self, start: Point, length: float, left: bool) -> Line:
        """Perpendicular line of ``length`` from ``start``, to the left or right."""
        m, _ = self.slope_intercept()
        if m == 0:
            end = Point(start.x, start.y + (1 if left else -1) * length)
        else:
            m_new = -1 / m
            q_new = start.y - m_new * start.x
            offset = math.sqrt(length**2 / (1 + m_new**2))
            x1 = start.x - offset
            candidate1 = Point(x1, m_new * x1 + q_new)
            x2 = start.x + offset
            candidate2 = Point(x2, m_new * x2 + q_new)
            end = candidate1 if self.left(candidate1) == left else candidate2
        return Line(start, end)

    def distance(self, point: Point) -> float:
        """Perpendicular distance from ``point`` to the infinite line."""
        a, b, c = self.params()
        return abs(a * point.x + b * point.y + c) / math.sqrt(a * a + b * b)

    def left(self, point: Point) -> bool:
        """True when ``point`` lies strictly to the left of the line."""
        return (
            (self._p2.x - self._p1.x) * (point.y - self._p1.y)
            - (self._p2.y - self._p1.y) * (point.x - self._p1.x)
        ) > 0

    def corner(self, other: Line) -> float:
        """Angle in degrees between this line and ``other`` at their joint."""
        return calc_smallest_angle_absolute(self.alpha(), constrain_angle(other.alpha() + 180))

    def center(self) -> Point:
        return Point((self._p1.x + self._p2.x) / 2, (self._p1.y + self._p2.y) / 2)

    def intersection(self, other: Line) -> Point:
        """Intersection of the two infinite lines; ``(FLT_MAX, FLT_MAX)`` if parallel."""
        a, b = self._p1, self._p2
        c, d = other.p1, other.p2

        a1 = b.y - a.y
        b1 = a.x - b.x
        c1 = a1 * a.x + b1 * a.y

        a2 = d.y - c.y
        b2 = c.x - d.x
        c2 = a2 * c.x + b2 * c.y

        determinant = a1 * b2 - a2 * b1
        if determinant == 0:
            return Point(FLT_MAX, FLT_MAX)
        return Point((b2 * c1 - b1 * c2) / determinant, (a1 * c2 - a2 * c1) / determinant)

    def interpolate(self, interpolation_distance: float, curvy: bool = False) -> list[Point]:
        """Evenly spaced points from the start, excluding the end point."""
        num = int(self._p1.distance(self._p2) / interpolation_distance)
        if num <= 0:
            return []
        dx = (self._p2.x - self._p1.x) / num
        dy = (self._p2.y - self._p1.y) / num
        kind = CurvyPoint if curvy else Point
        return [kind(self._p1.x + j * dx, self._p1.y + j * dy) for j in range(num)]

    def length(self) -> float:
        return self._p1.distance(self._p2)