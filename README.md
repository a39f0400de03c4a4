# asciidraw

A small interactive terminal program and library that draws ASCII art.
It draws filled squares, triangles and arrows made of `*`, and it draws
letters from a 5x7 bitmap font. It also includes 8x12 and 11x16 bitmap
font tables.

## Installation

```
pip install .
```

## Interactive use

```
asciidraw
```

The program prints `Welcome!` and then asks which shape to draw:

- `t`: a triangle (`left_col=5`, `size=7`)
- `s`: a square (`left_col=5`, `size=5`)
- `a`: an arrow (`left_col=5`, `size=7`)
- `c`: the word "Ever" drawn in the 5x7 font, one letter after another
- `q`: prints `Bye!` and quits

The program reads input one character at a time. Newlines are skipped.
Any other character gets the message `Unrecognized option '<char>', please
try again!`, and the prompt comes back. End of input also ends the program.
The command takes no options apart from `-h`/`--help`.

The same loop can be run from code with `asciidraw.cli.run(stdin, stdout)`.
It takes any text streams, uses standard input and output by default, and
returns the exit status `0`.

## Library use

### Shapes

`asciidraw.shapes` returns each shape as a list of lines. It can also write
the shape straight to a text stream, which is standard output by default:

```python
import sys
from asciidraw.shapes import square_lines, triangle_lines, arrow_lines, print_arrow

for line in triangle_lines(2, 3):
    print(line)

print_arrow(5, 7, sys.stdout)
```

`left_col` is the number of spaces before the shape's left edge, and
`size` sets its size:

- `square_lines` / `print_square`: `size` rows of `size` stars.
- `triangle_lines` / `print_triangle`: `size + 1` rows. Row `n` has
  `2n + 1` stars centred under the point at column `left_col + size`.
- `arrow_lines` / `print_arrow`: the same triangle with a one-star shaft,
  `size` rows tall, under its point.

### Characters

```python
from asciidraw.font5x7 import glyph
from asciidraw.chars import char_lines_5x7, print_char_5x7

glyph("A")            # the five column values of "A"
char_lines_5x7("A")   # the character as five lines of '*' and ' '
print_char_5x7("A")   # writes those lines and a blank line
```

`char_lines_5x7` turns each font column into one line of seven cells, read
from bit 6 down to bit 0. The letter therefore comes out turned on its
side.

### Fonts

Each font module provides `glyph(char)` and the constants `WIDTH`,
`HEIGHT`, `FIRST_CODE`, `LAST_CODE` and `GLYPHS`:

- `asciidraw.font5x7`: characters from space (0x20) to 0x7F. 0x7F holds a
  degree sign. Each glyph is five column values, with bit 0 as the top row.
- `asciidraw.font8x12`: characters from space to `~`. Each glyph is twelve
  row values, top row first, with bit 7 as the leftmost pixel.
- `asciidraw.font11x16`: characters from space to `~`. Each glyph is eleven
  column values, with bit 0 as the top row.

`glyph` raises `ValueError` for anything that is not a single character in
the font's range.

Only the 5x7 font has a renderer. The 8x12 and 11x16 fonts are bitmap
tables only: nothing in the package draws them as text.

## Running the tests

```
pip install ".[test]"
pytest
```