"""Draw simple shapes as lines of '*' characters."""

from __future__ import annotations

import sys
from typing import TextIO


def _row(first_star: int, end: int) -> str:
    """A row with blanks up to ``first_star`` and stars up to ``end`` (exclusive)."""
    blanks = max(0, first_star)
    return " " * blanks + "*" * max(0, end - blanks)


def square_lines(left_col: int, size: int) -> list[str]:
    """Lines of a ``size`` x ``size`` square whose left edge is at ``left_col``."""
    end_col = left_col + size
    return [_row(left_col, end_col) for _ in range(size)]


def triangle_lines(left_col: int, size: int) -> list[str]:
    """Lines of a triangle of ``size + 1`` rows whose left edge is at ``left_col``."""
    apex = left_col + size
    return [_row(apex - row, apex + row + 1) for row in range(size + 1)]


def arrow_lines(left_col: int, size: int) -> list[str]:
    """Lines of an arrow: a triangle head followed by a shaft ``size`` rows tall."""
    center = left_col + size
    shaft = " " * max(0, center) + "*"
    return triangle_lines(left_col, size) + [shaft] * max(0, size)


def _write(lines: list[str], file: TextIO | None) -> None:
    out = sys.stdout if file is None else file
    for line in lines:
        out.write(line + "\n")


def print_square(left_col: int, size: int, file: TextIO | None = None) -> None:
    """Write a square to ``file`` (standard output by default)."""
    _write(square_lines(left_col, size), file)


def print_triangle(left_col: int, size: int, file: TextIO | None = None) -> None:
    """Write a triangle to ``file`` (standard output by default)."""
    _write(triangle_lines(left_col, size), file)


def print_arrow(left_col: int, size: int, file: TextIO | None = None) -> None:
    """Write an arrow to ``file`` (standard output by default)."""
    _write(arrow_lines(left_col, size), file)