"""Render characters of the 5x7 font as text made of '*' and blanks."""

from __future__ import annotations

import sys
from typing import TextIO

from asciidraw import font5x7


def char_lines_5x7(char: str) -> list[str]:
    """Return the text lines that draw ``char`` in the 5x7 font.

    Each font column becomes one line of seven cells, read from the bottom
    bit (bit 6) to the top bit (bit 0).  Raises ValueError if the character
    has no glyph.
    """
    columns = font5x7.glyph(char)
    bits = [1 << (font5x7.HEIGHT - 1 - row) for row in range(font5x7.HEIGHT)]
    return ["".join("*" if column & mask else " " for mask in bits) for column in columns]


def print_char_5x7(char: str, file: TextIO | None = None) -> None:
    """Write ``char`` drawn in the 5x7 font, followed by a blank line."""
    out = sys.stdout if file is None else file
    for line in char_lines_5x7(char):
        out.write(line + "\n")
    out.write("\n")