import io

import pytest

from efpinput.stream import LineStream


def test_advance_folds_case():
    stream = LineStream(io.StringIO("RUN_TYPE OPT\nFragment \"Water 1\"\n"))

    assert stream.advance()
    assert stream.line == "run_type opt"
    assert stream.line_number == 1

    assert stream.advance()
    assert stream.line == 'fragment "water 1"'
    assert stream.line_number == 2

    assert not stream.advance()
    assert stream.exhausted


def test_no_case_folding():
    stream = LineStream(["Path/To/Lib"], fold_case=False)
    stream.advance()
    assert stream.line == "Path/To/Lib"


def test_line_endings_stripped():
    stream = LineStream(["coord points\r\n", "last"])
    stream.advance()
    assert stream.line == "coord points"
    stream.advance()
    assert stream.line == "last"


def test_long_line():
    values = " ".join(["1.0"] * 10000)
    stream = LineStream([values + "\n"])
    stream.advance()
    assert stream.line == values


def test_cursor():
    stream = LineStream(["   max_steps  10  "])
    stream.advance()

    stream.skip_space()
    assert stream.pos == 3
    assert stream.startswith("max_steps")

    stream.consume(len("max_steps"))
    assert stream.rest == "  10  "
    assert not stream.at_end()

    stream.consume(100)
    assert stream.rest == ""
    assert stream.at_end()


def test_exhausted_access():
    stream = LineStream([])
    assert not stream.advance()

    with pytest.raises(RuntimeError):
        stream.rest
