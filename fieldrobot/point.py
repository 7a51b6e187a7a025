"""Planar points and the point records built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

__all__ = ["Point", "CurvyPoint", "CornerPoint", "NextAndPreviousCorner", "IndexPoint"]


class Point:
    """A 2D point. A point created without coordinates is empty until set."""

    __slots__ = ("_x", "_y", "_empty")

    def __init__(self, x: float | None = None, y: float | None = None) -> None:
        self._empty = x is None and y is None
        self._x = float(x) if x is not None else 0.0
        self._y = float(y) if y is not None else 0.0

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._empty = False
        self._x = float(value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._empty = False
        self._y = float(value)

    @property
    def is_empty(self) -> bool:
        return self._empty

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._x!r}, {self._y!r})"

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self._x - other.x, self._y - other.y)

    def center(self) -> Point:
        """The point itself, as a new plain point."""
        return Point(self._x, self._y)

    def to_json(self) -> dict[str, float]:
        return {"x": self._x, "y": self._y}


class CurvyPoint(Point):
    """A path point carrying the radius of the curve it lies on (0 on straights)."""

    __slots__ = ("radius",)

    def __init__(self, x: float | None = None, y: float | None = None, radius: float = 0.0) -> None:
        super().__init__(x, y)
        self.radius = float(radius)

    def __repr__(self) -> str:
        return f"CurvyPoint({self.x!r}, {self.y!r}, radius={self.radius!r})"


class IndexPoint(Point):
    """A point together with its index in an interpolated path."""

    __slots__ = ("index",)

    def __init__(self, x: float | None = None, y: float | None = None, index: int = 0) -> None:
        super().__init__(x, y)
        self.index = int(index)

    def __repr__(self) -> str:
        return f"IndexPoint({self.x!r}, {self.y!r}, index={self.index!r})"


@dataclass
class CornerPoint:
    """A corner of a path, with the raw points around it."""

    index: int = 0
    point: Point = field(default_factory=Point)
    angle: float = 0.0
    corner_index: int = 0
    previous_raw_point: Point = field(default_factory=Point)
    next_raw_point: Point = field(default_factory=Point)
    is_headland: bool = False
    headland_distance: float = 0.0

    def set_headland(self, distance: float) -> None:
        """Mark the corner as a headland at the given distance."""
        self.is_headland = True
        self.headland_distance = distance


@dataclass
class NextAndPreviousCorner:
    """The corners on either side of a position on a path."""

    previous_corner: CornerPoint = field(default_factory=CornerPoint)
    next_corner: CornerPoint = field(default_factory=CornerPoint)