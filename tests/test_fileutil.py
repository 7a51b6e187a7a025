from fieldrobot.fileutil import remove_characters, search_file_with_extension


def test_remove_characters():
    assert remove_characters('"abc"', '"') == "abc"
    assert remove_characters("a,b;c", [",", ";"]) == "abc"


def test_remove_characters_without_match():
    assert remove_characters("plain", "xyz") == "plain"


def test_finds_file_in_subdirectory(tmp_path):
    sub = tmp_path / "nested"
    sub.mkdir()
    (sub / "field.csv").write_text("x,y\n")
    (tmp_path / "notes.txt").write_text("")
    assert search_file_with_extension(str(tmp_path), ".csv") == f"{tmp_path}/field.csv"


def test_returns_empty_when_nothing_matches(tmp_path):
    (tmp_path / "notes.txt").write_text("")
    assert search_file_with_extension(str(tmp_path), ".shp") == ""


def test_extension_must_match_exactly(tmp_path):
    (tmp_path / "data.csvx").write_text("")
    assert search_file_with_extension(str(tmp_path), ".csv") == ""