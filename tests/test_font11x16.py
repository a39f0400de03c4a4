import pytest

from asciidraw import font11x16
from asciidraw.font11x16 import glyph

PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


def test_font_covers_printable_ascii():
    looked_up = [glyph(char) for char in PRINTABLE]
    assert len(looked_up) == 95
    assert font11x16.LAST_CODE == ord("~")
    with pytest.raises(ValueError):
        glyph(chr(font11x16.LAST_CODE + 1))


@pytest.mark.parametrize("char", PRINTABLE)
def test_every_glyph_has_eleven_sixteen_bit_columns(char):
    columns = glyph(char)
    assert len(columns) == font11x16.WIDTH
    assert all(0 <= value < (1 << font11x16.HEIGHT) for value in columns)


def test_space_is_blank():
    assert glyph(" ") == (0,) * 11


def test_exclamation_mark_columns():
    assert glyph("!") == (
        0x0000, 0x0000, 0x0000, 0x007C, 0x33FF, 0x33FF,
        0x007C, 0x0000, 0x0000, 0x0000, 0x0000,
    )


def test_letter_h_columns():
    assert glyph("H") == (
        0x3FFF, 0x3FFF, 0x00C0, 0x00C0, 0x00C0, 0x00C0,
        0x00C0, 0x00C0, 0x3FFF, 0x3FFF, 0x0000,
    )


def test_tilde_is_last_entry():
    assert glyph("~") == font11x16.GLYPHS[-1]
    assert glyph("~")[0] == 0x0010


def test_underscore_uses_bottom_rows():
    assert all(value == 0xC000 for value in glyph("_"))


def test_glyph_lookup_matches_table_order():
    assert [glyph(c) for c in PRINTABLE] == list(font11x16.GLYPHS)


@pytest.mark.parametrize("bad", ["\x1f", "\x7f", "é", "\n"])
def test_characters_outside_font_raise(bad):
    with pytest.raises(ValueError):
        glyph(bad)


@pytest.mark.parametrize("bad", ["", "ab", 65, None])
def test_non_single_characters_raise(bad):
    with pytest.raises(ValueError):
        glyph(bad)