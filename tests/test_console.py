import io

import pytest

from castlequest.console import Color, Console, to_upper


def make_console(use_color=False):
    stream = io.StringIO()
    return Console(stream, use_color=use_color), stream


@pytest.mark.parametrize(
    "text, expected",
    [
        ("move north", "MOVE NORTH"),
        ("Pick golden egg", "PICK GOLDEN EGG"),
        ("ALREADY", "ALREADY"),
        ("héllo 42", "HéLLO 42"),
        ("", ""),
    ],
)
def test_to_upper_changes_only_ascii_letters(text, expected):
    assert to_upper(text) == expected


def test_color_values_match_console_attributes():
    assert Color.RED == 12
    assert Color(14) is Color.YELLOW


def test_set_color_without_colours_writes_nothing():
    console, stream = make_console()
    console.set_color(Color.RED)
    assert stream.getvalue() == ""


def test_set_color_with_colours_writes_escape():
    console, stream = make_console(use_color=True)
    console.set_color(Color.RED)
    assert stream.getvalue() == "\x1b[91m"
    assert stream.getvalue() == Color.RED.ansi


def test_write_appends_text():
    console, stream = make_console()
    console.write("one")
    console.write(" two")
    assert stream.getvalue() == "one two"


def test_write_file_missing(tmp_path):
    console, stream = make_console()
    assert console.write_file(tmp_path / "nothing.txt", Color.RED) is False
    assert stream.getvalue() == "Could not open file"


def test_write_file_prints_each_line(tmp_path):
    path = tmp_path / "story.txt"
    path.write_text("first\nsecond", encoding="utf-8")
    console, stream = make_console()
    assert console.write_file(path, Color.PURPLE) is True
    assert stream.getvalue() == "first\nsecond\n"


def test_write_file_trailing_newline_gives_blank_line(tmp_path):
    path = tmp_path / "story.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    console, stream = make_console()
    console.write_file(path, Color.PURPLE)
    assert stream.getvalue().split("\n") == ["a", "b", "", ""]