import io

import pytest

from asciidraw import font5x7
from asciidraw.chars import char_lines_5x7, print_char_5x7


def _bits_from_lines(lines):
    columns = []
    for line in lines:
        value = 0
        for row, cell in enumerate(line):
            if cell == "*":
                value |= 1 << (font5x7.HEIGHT - 1 - row)
        columns.append(value)
    return tuple(columns)


@pytest.mark.parametrize("char", [chr(code) for code in range(0x20, 0x80)])
def test_lines_encode_the_glyph(char):
    lines = char_lines_5x7(char)
    assert len(lines) == font5x7.WIDTH
    assert all(len(line) == font5x7.HEIGHT for line in lines)
    assert set("".join(lines)) <= {"*", " "}
    assert _bits_from_lines(lines) == font5x7.glyph(char)


def test_space_is_blank():
    assert all(line.strip() == "" for line in char_lines_5x7(" "))


def test_vertical_bar_is_one_full_line():
    assert char_lines_5x7("|") == ["       ", "       ", "*******", "       ", "       "]


def test_dash_marks_middle_cell_of_each_line():
    assert char_lines_5x7("-") == ["   *   "] * 5


def test_print_writes_lines_and_blank_line():
    buffer = io.StringIO()
    print_char_5x7("E", file=buffer)
    expected = "".join(line + "\n" for line in char_lines_5x7("E")) + "\n"
    assert buffer.getvalue() == expected


def test_print_defaults_to_stdout(capsys):
    print_char_5x7("r")
    captured = capsys.readouterr().out
    assert captured.splitlines()[:5] == char_lines_5x7("r")
    assert captured.endswith("\n\n")


@pytest.mark.parametrize("char", ["\n", "\x1f", "\u00e9", "", "ab"])
def test_unknown_characters_raise(char):
    with pytest.raises(ValueError):
        char_lines_5x7(char)


def test_print_unknown_character_writes_nothing():
    buffer = io.StringIO()
    with pytest.raises(ValueError):
        print_char_5x7("\t", file=buffer)
    assert buffer.getvalue() == ""