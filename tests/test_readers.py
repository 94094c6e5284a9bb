import math

import pytest

from efpinput.options import RunType, CoordType, Term, DispDamp, PolDamp
from efpinput.readers import *
from efpinput.units import ANGSTROM_TO_BOHR

from tests.fixtures import *


@pytest.mark.parametrize(
    "text,expected,pos",
    [
        ("h2o_l", "h2o_l", 5),
        ("   h2o next", "h2o", 6),
        ('"water 1" rest', "water 1", 9),
        ('  ""', "", 4),
        ('"a\tb"', "a\tb", 5),
    ],
)
def test_read_string(make_stream, text, expected, pos):
    stream = make_stream(text)
    assert read_string(stream) == expected
    assert stream.pos == pos


@pytest.mark.parametrize("text", ['"unterminated', "", "    "])
def test_read_string_failure(make_stream, text):
    stream = make_stream(text)
    assert read_string(stream) is None
    assert stream.pos == 0


def test_read_string_replaces_value(make_stream):
    stream = make_stream("first second")
    values = [read_string(stream), read_string(stream)]
    assert values == ["first", "second"]
    assert read_string(stream) is None


@pytest.mark.parametrize(
    "text,expected,pos",
    [("100", 100, 3), ("  -5 x", -5, 4), ("+7", 7, 2), ("12.5", 12, 2)],
)
def test_read_int(make_stream, text, expected, pos):
    stream = make_stream(text)
    assert read_int(stream) == expected
    assert stream.pos == pos


@pytest.mark.parametrize("text", ["abc", "", "-", " .5"])
def test_read_int_failure(make_stream, text):
    stream = make_stream(text)
    assert read_int(stream) is None
    assert stream.pos == 0


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0.001", 0.001),
        ("1.0e3", 1000.0),
        ("1.0E-4", 1.0e-4),
        ("-3.5", -3.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("300", 300.0),
        ("+2e2", 200.0),
    ],
)
def test_read_double(make_stream, text, expected):
    stream = make_stream(text)
    assert read_double(stream) == pytest.approx(expected)
    assert stream.at_end()


def test_read_double_partial(make_stream):
    stream = make_stream("1e 2")
    assert read_double(stream) == 1.0
    assert stream.rest == "e 2"


def test_read_double_special(make_stream):
    stream = make_stream("inf nan")
    assert math.isinf(read_double(stream))
    assert math.isnan(read_double(stream))


@pytest.mark.parametrize("text", ["x1.0", "", ".", "-e5"])
def test_read_double_failure(make_stream, text):
    stream = make_stream(text)
    assert read_double(stream) is None
    assert stream.pos == 0


def test_read_enum_first_match_wins(make_stream):
    choices = (("a", 1), ("ab", 2))
    stream = make_stream("ab")
    assert read_enum(stream, choices) == 1
    assert stream.rest == "b"

    choices = (("ab", 2), ("a", 1))
    stream = make_stream("ab")
    assert read_enum(stream, choices) == 2
    assert stream.at_end()


def test_read_enum_case_insensitive():
    from efpinput.stream import LineStream

    stream = LineStream(["MD"], fold_case=False)
    stream.advance()
    assert read_enum(stream, (("md", RunType.MD),)) is RunType.MD


def test_read_enum_failure(make_stream):
    stream = make_stream("  unknown")
    assert read_enum(stream, (("known", 1),)) is None
    assert stream.pos == 0


@pytest.mark.parametrize(
    "reader,text,expected",
    [
        (read_run_type, "sp", RunType.SP),
        (read_run_type, "hess", RunType.HESS),
        (read_run_type, "md", RunType.MD),
        (read_coord, "points", CoordType.POINTS),
        (read_coord, "rotmat", CoordType.ROTMAT),
        (read_disp_damp, "overlap", DispDamp.OVERLAP),
        (read_pol_damp, "off", PolDamp.OFF),
        (read_units, "bohr", 1.0),
        (read_units, "angs", ANGSTROM_TO_BOHR),
    ],
)
def test_named_readers(make_stream, reader, text, expected):
    stream = make_stream(text)
    assert reader(stream) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("elec", Term.ELEC),
        ("elec disp", Term.ELEC | Term.DISP),
        ("xr   pol  ", Term.XR | Term.POL),
        ("elec pol disp xr", Term.ELEC | Term.POL | Term.DISP | Term.XR),
        ("elec elec", Term.ELEC),
    ],
)
def test_read_terms(make_stream, text, expected):
    stream = make_stream(text)
    assert read_terms(stream) == expected
    assert stream.at_end()


@pytest.mark.parametrize("text", ["elec foo", "", "   ", "foo elec"])
def test_read_terms_failure(make_stream, text):
    stream = make_stream(text)
    assert read_terms(stream) is None
    assert stream.pos == 0


def test_range_checks():
    assert int_gt_zero(1)
    assert not int_gt_zero(0)
    assert not int_gt_zero(-5)
    assert double_gt_zero(1e-10)
    assert not double_gt_zero(0.0)
    assert not double_gt_zero(float("nan"))
