import io

import pytest

from asciidraw import cli
from asciidraw.chars import char_lines_5x7
from asciidraw.shapes import arrow_lines, square_lines, triangle_lines


def _run(text):
    out = io.StringIO()
    status = cli.run(io.StringIO(text), out)
    return status, out.getvalue()


def _block(lines):
    return "".join(line + "\n" for line in lines)


def test_quit():
    status, output = _run("q\n")
    assert status == 0
    assert output == cli.WELCOME + "\n" + cli.PROMPT + "Bye!\n"


def test_end_of_input_stops_quietly():
    status, output = _run("")
    assert status == 0
    assert output == cli.WELCOME + "\n" + cli.PROMPT


def test_newlines_are_skipped():
    status, output = _run("\n\n\n")
    assert status == 0
    assert output.count(cli.PROMPT) == 1


@pytest.mark.parametrize(
    "choice, heading, lines",
    [
        ("t", "You selected triangle:\n", triangle_lines(5, 7)),
        ("s", "You selected square:\n", square_lines(5, 5)),
        ("a", "You selected arrow:\n", arrow_lines(5, 7)),
    ],
)
def test_shapes(choice, heading, lines):
    status, output = _run(choice + "\nq\n")
    assert status == 0
    expected = (
        cli.WELCOME + "\n" + cli.PROMPT + heading + _block(lines) + cli.PROMPT + "Bye!\n"
    )
    assert output == expected


def test_name_is_drawn_letter_by_letter():
    _, output = _run("c\nq\n")
    drawn = "".join(_block(char_lines_5x7(char)) + "\n" for char in "Ever")
    assert output == cli.WELCOME + "\n" + cli.PROMPT + drawn + cli.PROMPT + "Bye!\n"


def test_unrecognized_option():
    _, output = _run("x\n")
    assert "Unrecognized option 'x', please try again!\n" in output
    assert output.count(cli.PROMPT) == 2


def test_several_choices_on_one_line():
    _, output = _run("zq")
    assert output.count(cli.PROMPT) == 2
    assert output.endswith("Bye!\n")


def test_input_after_quit_is_ignored():
    _, output = _run("q\nt\n")
    assert "You selected triangle:" not in output
    assert output.endswith("Bye!\n")


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("s\nq\n"))
    assert cli.main([]) == 0
    output = capsys.readouterr().out
    assert output.startswith(cli.WELCOME + "\n")
    assert "You selected square:\n" + _block(square_lines(5, 5)) in output


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        cli.main(["--bogus"])