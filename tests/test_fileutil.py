import pytest

from quickparse.fileutil import FileContents, getline_file, read_file, read_split, split


def test_split_basic():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_split_keeps_empty_inner_pieces():
    assert split("a,,b", ",") == ["a", "", "b"]


def test_split_drops_empty_tail():
    assert split("a b ", " ") == ["a", "b"]
    assert split("", ",") == []


def test_split_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_read_file_keeps_line_endings(tmp_path):
    path = tmp_path / "source.c"
    text = "int x;\r\nreturn x;\n"
    path.write_bytes(text.encode("utf-8"))
    assert read_file(path) == text


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.txt")


def test_read_split_lines(tmp_path):
    path = tmp_path / "rules.lex"
    path.write_text("IDENT [a-z]+\nNUM [0-9]+\n", encoding="utf-8")
    contents = read_split(path, "\n")
    assert isinstance(contents, FileContents)
    assert contents.lines == ["IDENT [a-z]+", "NUM [0-9]+"]
    assert contents.line_count == len(contents.lines)


def test_read_split_rejects_empty_delimiter(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        read_split(path, "")


def test_getline_file_switches_between_files(tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("alpha\nbeta\n", encoding="utf-8")
    second.write_text("gamma\ndelta\n", encoding="utf-8")
    assert getline_file(first, 1) == "beta"
    assert getline_file(second, 0) == "gamma"
    assert getline_file(first, 0) == "alpha"


def test_getline_file_out_of_range(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("only\n", encoding="utf-8")
    with pytest.raises(IndexError):
        getline_file(path, 5)
    with pytest.raises(IndexError):
        getline_file(path, -1)