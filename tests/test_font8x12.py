import pytest

from asciidraw import font8x12
from asciidraw.font8x12 import glyph


def _mirror_row(value):
    return int(f"{value:08b}"[::-1], 2)


def test_space_is_blank():
    assert glyph(" ") == (0,) * font8x12.HEIGHT


def test_underscore_fills_bottom_row():
    assert glyph("_")[-1] == 0xFF
    assert all(row == 0 for row in glyph("_")[:-1])


def test_letter_i_upper():
    assert glyph("I") == (
        0x00, 0x3C, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C, 0x00, 0x00,
    )


def test_tilde_is_last():
    assert glyph("~") == (
        0x00, 0x76, 0xDC, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    )
    assert font8x12.LAST_CODE == ord("~")


def test_font_covers_95_characters():
    looked_up = [glyph(chr(code)) for code in range(0x20, 0x7F)]
    assert len(looked_up) == 95
    assert looked_up == list(font8x12.GLYPHS)
    with pytest.raises(ValueError):
        glyph(chr(0x7F))


def test_every_glyph_has_height_rows_of_one_byte():
    for code in range(font8x12.FIRST_CODE, font8x12.LAST_CODE + 1):
        rows = glyph(chr(code))
        assert len(rows) == font8x12.HEIGHT
        assert all(0 <= value <= 0xFF for value in rows)


def test_descenders_reach_bottom_rows():
    for char in "gjpqy":
        assert glyph(char)[-1] != 0
    for char in "aceo":
        assert glyph(char)[-1] == 0


@pytest.mark.parametrize("char", ["\x1f", "\x7f", "\t", "ü"])
def test_out_of_range_raises(char):
    with pytest.raises(ValueError):
        glyph(char)


@pytest.mark.parametrize("value", ["", "xy", 32, None])
def test_not_a_single_character_raises(value):
    with pytest.raises(ValueError):
        glyph(value)