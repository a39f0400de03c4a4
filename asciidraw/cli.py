"""Interactive menu that draws shapes and a word on the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from asciidraw.chars import print_char_5x7
from asciidraw.shapes import print_arrow, print_square, print_triangle

WELCOME = "Welcome!"
PROMPT = (
    "Select which shape you want to print (Triangle = t, Square = s, "
    "Arrow = a, myName = c) or 'q' to quit\n> "
)
NAME = "Ever"


def _next_choice(stdin: TextIO) -> str:
    """Read the next character that is not a newline; '' at end of input."""
    while True:
        char = stdin.read(1)
        if char != "\n":
            return char


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the menu loop until 'q' or end of input; return the exit status."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    stdout.write(WELCOME + "\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        choice = _next_choice(stdin)
        if not choice:
            return 0
        if choice == "t":
            stdout.write("You selected triangle:\n")
            print_triangle(5, 7, file=stdout)
        elif choice == "s":
            stdout.write("You selected square:\n")
            print_square(5, 5, file=stdout)
        elif choice == "a":
            stdout.write("You selected arrow:\n")
            print_arrow(5, 7, file=stdout)
        elif choice == "c":
            for char in NAME:
                print_char_5x7(char, file=stdout)
        elif choice == "q":
            stdout.write("Bye!\n")
            return 0
        else:
            stdout.write(f"Unrecognized option '{choice}', please try again!\n")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="asciidraw",
        description="Draw shapes and letters with '*' characters.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)