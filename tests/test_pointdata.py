import pytest

from fieldrobot.point import Point
from fieldrobot.pointdata import PointCsvFile, PointData


def _write(tmp_path, text, name="field.csv"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_loads_points_and_columns(tmp_path):
    path = _write(tmp_path, "X,Y,name\n1.0,2.0,a\n3.0,4.0,b\n")
    data = PointCsvFile()
    data.load(path, ["x"], ["y"])
    assert data.num_series() == 1
    assert not data.has_multiple()
    assert data.points(0) == [Point(1.0, 2.0), Point(3.0, 4.0)]
    assert data.column_names == {"X": 0, "Y": 1, "name": 2}
    assert data.data_lines == [["1.0", "2.0", "a"], ["3.0", "4.0", "b"]]


def test_polygon_is_closed(tmp_path):
    path = _write(tmp_path, "lon,lat\n1,2\n3,4\n5,6\n")
    data = PointCsvFile(polygon=True)
    data.load(path, ["lon"], ["lat"])
    assert data.num_points(0) == 4
    assert data.is_polygon(0)
    assert data.points(0)[-1] == data.points(0)[0]


def test_open_series_is_not_polygon(tmp_path):
    path = _write(tmp_path, "x,y\n1,2\n3,4\n")
    data = PointCsvFile()
    data.load(path, ["x"], ["y"])
    assert not data.is_polygon(0)


def test_quotes_and_crlf_are_stripped(tmp_path):
    path = _write(tmp_path, 'x,y\r\n"5.5","6.5"\r\n')
    data = PointCsvFile()
    data.load(path, ["x"], ["y"])
    assert data.points(0) == [Point(5.5, 6.5)]


def test_empty_line_ends_data(tmp_path):
    path = _write(tmp_path, "x,y\n1,2\n\n3,4\n")
    data = PointCsvFile()
    data.load(path, ["x"], ["y"])
    assert data.num_points(0) == 1


def test_reload_replaces_series(tmp_path):
    path = _write(tmp_path, "x,y\n1,2\n")
    data = PointCsvFile()
    data.load(path, ["x"], ["y"])
    data.load(path, ["x"], ["y"])
    assert data.num_series() == 1
    assert len(data.data_lines) == 1


def test_wrong_extension(tmp_path):
    path = _write(tmp_path, "x,y\n1,2\n", name="field.txt")
    with pytest.raises(ValueError):
        PointCsvFile().load(path, ["x"], ["y"])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PointCsvFile().load(str(tmp_path / "missing.csv"), ["x"], ["y"])


def test_missing_columns(tmp_path):
    path = _write(tmp_path, "a,b\n1,2\n")
    with pytest.raises(ValueError):
        PointCsvFile().load(path, ["x"], ["y"])


def test_point_data_multiple_series():
    data = PointData()
    data.series = [[Point(0, 0)], [Point(1, 1), Point(2, 2)]]
    assert data.has_multiple()
    assert data.num_points(1) == 2
    assert data.points(1)[1] == Point(2, 2)