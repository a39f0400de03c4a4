import io

import pytest

from asciidraw.shapes import (
    arrow_lines,
    print_arrow,
    print_square,
    print_triangle,
    square_lines,
    triangle_lines,
)


@pytest.mark.parametrize("left, size", [(0, 1), (5, 5), (3, 7), (0, 4)])
def test_square_dimensions(left, size):
    lines = square_lines(left, size)
    assert len(lines) == size
    for line in lines:
        assert line.count("*") == size
        assert len(line) == left + size
        assert line.index("*") == left


def test_square_of_size_zero_is_empty():
    assert square_lines(5, 0) == []


def test_small_triangle():
    assert triangle_lines(0, 1) == [" *", "***"]


@pytest.mark.parametrize("left, size", [(0, 0), (5, 7), (2, 3)])
def test_triangle_rows_grow_by_two(left, size):
    lines = triangle_lines(left, size)
    assert len(lines) == size + 1
    counts = [line.count("*") for line in lines]
    assert counts == list(range(1, 2 * size + 2, 2))
    assert lines[-1].index("*") == left
    for line in lines:
        assert line.rstrip() == line
        assert set(line.strip()) == {"*"}


def test_triangle_is_centered():
    lines = triangle_lines(5, 7)
    centers = {line.index("*") + line.count("*") // 2 for line in lines}
    assert centers == {12}


def test_arrow_starts_with_triangle():
    head = triangle_lines(5, 7)
    lines = arrow_lines(5, 7)
    assert lines[: len(head)] == head


@pytest.mark.parametrize("left, size", [(5, 7), (0, 3), (1, 1)])
def test_arrow_shaft(left, size):
    lines = arrow_lines(left, size)
    shaft = lines[size + 1:]
    assert len(lines) == 2 * size + 1
    assert len(shaft) == size
    for line in shaft:
        assert line.count("*") == 1
        assert line.index("*") == left + size
        assert line.endswith("*")


def test_arrow_of_size_zero_is_single_star():
    assert arrow_lines(0, 0) == ["*"]


@pytest.mark.parametrize(
    "printer, builder",
    [
        (print_square, square_lines),
        (print_triangle, triangle_lines),
        (print_arrow, arrow_lines),
    ],
)
def test_print_writes_lines_with_newlines(printer, builder):
    out = io.StringIO()
    printer(5, 5, out)
    text = out.getvalue()
    assert text.endswith("\n")
    assert text.splitlines() == builder(5, 5)


def test_print_defaults_to_stdout(capsys):
    print_square(1, 2)
    captured = capsys.readouterr()
    assert captured.out.splitlines() == square_lines(1, 2)