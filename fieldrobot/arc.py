"""Circular arcs between two points or tangent to two lines."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fieldrobot.angle import (
    atan2_positive,
    calc_smallest_angle_absolute,
    constrain_angle,
    deg_to_rad,
    rad_to_deg,
)
from fieldrobot.line import Line
from fieldrobot.point import CurvyPoint, Point

__all__ = ["Arc"]


@dataclass
class Arc:
    """An arc of a circle from ``start`` to ``stop`` around ``center``.

    ``major`` selects the long way round the circle.
    """

    start: Point
    stop: Point
    center: Point
    radius: float
    major: bool

    @classmethod
    def from_points(cls, start: Point, stop: Point, other_side: Point, radius: float) -> Arc:
        """Major arc through ``start`` and ``stop``; the center lies opposite ``other_side``."""
        if start.distance(stop) > 2 * radius:
            raise ValueError(
                "Start and stop points may not be more than twice the radius of the arc."
            )
        line = Line(start, stop)
        half_chord = start.distance(stop) / 2
        distance = math.sqrt(radius**2 - half_chord**2)
        center_line = line.orthogonal(line.center(), distance, not line.left(other_side))
        return cls(Point(start.x, start.y), Point(stop.x, stop.y), center_line.p2, radius, True)

    @classmethod
    def from_lines(cls, line1: Line, line2: Line, radius: float) -> Arc:
        """Minor arc rounding the corner where ``line1`` ends and ``line2`` begins."""
        alpha = deg_to_rad(line1.corner(line2))
        d = radius / math.tan(alpha / 2)

        line1_angle = deg_to_rad(constrain_angle(line1.alpha()))
        line2_angle = deg_to_rad(constrain_angle(line2.alpha() + 180))

        common = line1.p2
        on_line1 = Point(common.x - d * math.cos(line1_angle), common.y - d * math.sin(line1_angle))
        on_line2 = Point(common.x - d * math.cos(line2_angle), common.y - d * math.sin(line2_angle))

        orthogonal1 = line1.orthogonal(on_line1, 1, True)
        orthogonal2 = line2.orthogonal(on_line2, 1, True)
        center = orthogonal1.intersection(orthogonal2)
        return cls(on_line1, on_line2, center, radius, False)

    def interpolate(self, interpolation_distance: float) -> list[CurvyPoint]:
        """Points along the arc about ``interpolation_distance`` apart, ending at ``stop``."""
        start_line = Line(self.center, self.start)
        stop_line = Line(self.center, self.stop)
        center_left = Line(self.start, self.stop).left(self.center)

        sign = -1 if center_left == self.major else 1
        d_alpha = rad_to_deg(atan2_positive(interpolation_distance, self.radius))

        stop_angle = constrain_angle(stop_line.alpha())
        alpha = constrain_angle(start_line.alpha())

        points: list[CurvyPoint] = []
        while calc_smallest_angle_absolute(alpha, stop_angle) > d_alpha:
            alpha_radians = deg_to_rad(alpha)
            points.append(
                CurvyPoint(
                    self.center.x + self.radius * math.cos(alpha_radians),
                    self.center.y + self.radius * math.sin(alpha_radians),
                    self.radius,
                )
            )
            alpha += sign * d_alpha
        points.append(CurvyPoint(self.stop.x, self.stop.y, self.radius))
        return points