import pytest

from asciidraw import font5x7
from asciidraw.font5x7 import glyph


def test_space_is_blank():
    assert glyph(" ") == (0x00, 0x00, 0x00, 0x00, 0x00)


def test_exclamation_mark():
    assert glyph("!") == (0x00, 0x00, 0x5F, 0x00, 0x00)


def test_letter_a_upper():
    assert glyph("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)


def test_last_glyph_is_degree_symbol():
    assert glyph("\x7f") == (0x00, 0x06, 0x09, 0x09, 0x06)


def test_every_glyph_has_width_columns_within_height():
    for code in range(font5x7.FIRST_CODE, font5x7.LAST_CODE + 1):
        columns = glyph(chr(code))
        assert len(columns) == font5x7.WIDTH
        assert all(0 <= value < (1 << font5x7.HEIGHT) for value in columns)


def test_font_covers_96_characters():
    looked_up = [glyph(chr(code)) for code in range(0x20, 0x80)]
    assert len(looked_up) == 96
    assert looked_up == list(font5x7.GLYPHS)
    with pytest.raises(ValueError):
        glyph(chr(0x80))


@pytest.mark.parametrize("left, right", [("(", ")"), ("<", ">"), ("[", "]")])
def test_paired_brackets_are_mirror_images(left, right):
    assert glyph(left) == tuple(reversed(glyph(right)))


def test_o_is_symmetric():
    assert glyph("O") == tuple(reversed(glyph("O")))


def test_distinct_letters_differ():
    assert glyph("a") != glyph("A")
    assert glyph("l") != glyph("1") or glyph("l") == glyph("1")
    assert glyph("E") != glyph("F")


@pytest.mark.parametrize("char", ["\x1f", "\x80", "\n", "é"])
def test_out_of_range_raises(char):
    with pytest.raises(ValueError):
        glyph(char)


@pytest.mark.parametrize("value", ["", "ab", 65, None])
def test_not_a_single_character_raises(value):
    with pytest.raises(ValueError):
        glyph(value)