"""Series of points read from data files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from fieldrobot.fileutil import remove_characters
from fieldrobot.point import Point

__all__ = ["PointData", "PointCsvFile"]

_END_OF_LINE = "\r\n"
_BRACKETS = "\"'()[]{}"


class PointData:
    """One or more series of points, optionally closed as polygons."""

    def __init__(self, polygon: bool = False) -> None:
        self.polygon = polygon
        self.series: list[list[Point]] = []
        self.metadata: list[list[object]] = []

    def num_series(self) -> int:
        return len(self.series)

    def has_multiple(self) -> bool:
        return len(self.series) > 1

    def points(self, i: int) -> list[Point]:
        return self.series[i]

    def num_points(self, i: int) -> int:
        return len(self.series[i])

    def is_polygon(self, i: int) -> bool:
        """True when series ``i`` ends where it starts."""
        pts = self.series[i]
        return pts[0] == pts[-1]


def _split_fields(line: str) -> list[str]:
    fields = line.split(",")
    if fields and fields[-1] == "":
        fields.pop()
    return fields


class PointCsvFile(PointData):
    """Points read from the x and y columns of a CSV file."""

    def __init__(self, polygon: bool = False) -> None:
        super().__init__(polygon)
        self.csv_file = ""
        self.column_names: dict[str, int] = {}
        self.data_lines: list[list[str]] = []

    def load(self, filename: str, x_fields: Iterable[str], y_fields: Iterable[str]) -> None:
        """Read the file; ``x_fields``/``y_fields`` are accepted column names, any case."""
        filename = str(filename)
        name = Path(filename).name
        dot = name.find(".")
        extension = name[dot:] if dot >= 0 else ""
        if extension != ".csv":
            raise ValueError(f"wrong file extension {extension!r}, expected '.csv'")
        if not os.path.exists(filename):
            raise FileNotFoundError(filename)

        self.csv_file = filename
        self.series = []
        self.column_names = {}
        self.data_lines = []
        self._read(
            [f.lower() for f in x_fields],
            [f.lower() for f in y_fields],
        )

    def _read(self, x_fields: list[str], y_fields: list[str]) -> None:
        with open(self.csv_file, newline="", encoding="utf-8") as handle:
            header = remove_characters(handle.readline(), _END_OF_LINE)
            x_col = y_col = -1
            for idx, column in enumerate(_split_fields(header)):
                lowered = column.lower()
                if lowered in x_fields:
                    x_col = idx
                elif lowered in y_fields:
                    y_col = idx
                self.column_names.setdefault(column, idx)

            if x_col < 0 or y_col < 0:
                raise ValueError(
                    f"CSV columns not found: x in {x_fields}, y in {y_fields}"
                )

            points: list[Point] = []
            self.series.append(points)
            for raw in handle:
                line = remove_characters(raw, _END_OF_LINE)
                if not line:
                    break
                x = y = -1.0
                values = [remove_characters(v, _BRACKETS) for v in _split_fields(line)]
                for idx, value in enumerate(values):
                    if idx == x_col:
                        x = float(value)
                    elif idx == y_col:
                        y = float(value)
                self.data_lines.append(values)
                points.append(Point(x, y))

        if self.polygon and points:
            points.append(Point(points[0].x, points[0].y))