"""Planar polygons given as a ring of points."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from fieldrobot.point import Point

__all__ = ["Polygon"]


class Polygon:
    """A polygon whose outer ring is a list of points."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self.points: list[Point] = [Point(p.x, p.y) for p in points]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"Polygon({self.points!r})"

    def center(self) -> Point:
        """Area centroid of the ring."""
        pts = self.points
        if not pts:
            raise ValueError("cannot take the centroid of an empty polygon")
        area2 = cx = cy = 0.0
        for p, q in zip(pts, pts[1:] + pts[:1]):
            cross = p.x * q.y - q.x * p.y
            area2 += cross
            cx += (p.x + q.x) * cross
            cy += (p.y + q.y) * cross
        if area2 == 0:
            unique = pts[:-1] if len(pts) > 1 and pts[0] == pts[-1] else pts
            return Point(
                sum(p.x for p in unique) / len(unique),
                sum(p.y for p in unique) / len(unique),
            )
        return Point(cx / (3 * area2), cy / (3 * area2))

    def distance(self, point: Point) -> float:
        """Distance from the centroid to ``point``."""
        return self.center().distance(point)

    def to_json(self) -> list[dict[str, float]]:
        return [p.to_json() for p in self.points]

    def _set_rectangle(self, transform, width: float, low: float, high: float) -> None:
        corners = np.array(
            [
                [-width / 2, low, 0.0, 1.0],
                [width / 2, low, 0.0, 1.0],
                [width / 2, high, 0.0, 1.0],
                [-width / 2, high, 0.0, 1.0],
                [-width / 2, low, 0.0, 1.0],
            ]
        )
        moved = corners @ np.asarray(transform, dtype=float).T
        self.points = [Point(float(row[0]), float(row[1])) for row in moved]

    def update(self, transform, width: float, height: float) -> None:
        """Become a closed ``width`` x ``height`` rectangle centred on ``transform``."""
        if width <= 0:
            raise ValueError("Width must be positive")
        if height <= 0:
            raise ValueError("Height must be set or up and down must be set")
        self._set_rectangle(transform, width, -height / 2, height / 2)

    def update_span(self, transform, width: float, up: float, down: float) -> None:
        """Become a closed rectangle of ``width`` spanning ``down``..``up`` along y."""
        if width <= 0:
            raise ValueError("Width must be positive")
        self._set_rectangle(transform, width, down, up)