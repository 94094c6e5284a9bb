"""
Primitive value readers operating on the cursor of a :obj:`efpinput.stream.LineStream`.

Every reader skips leading whitespace and tries to extract a single value. On success
the cursor is moved past the consumed text and the value is returned. On failure the
cursor is left untouched and ``None`` is returned, so callers can try alternatives or
decide that the failure is fatal.
"""
import re
from typing import Any, Callable, Optional, Sequence, Tuple

from efpinput.options import (
    RunType,
    CoordType,
    Term,
    ElecDamp,
    DispDamp,
    PolDamp,
    EnsembleType,
)
from efpinput.stream import LineStream
from efpinput.units import length_factors

__all__ = [
    "Reader",
    "read_string",
    "read_int",
    "read_double",
    "read_enum",
    "read_terms",
    "read_run_type",
    "read_coord",
    "read_units",
    "read_elec_damp",
    "read_disp_damp",
    "read_pol_damp",
    "read_ensemble",
    "int_gt_zero",
    "double_gt_zero",
]

Reader = Callable[[LineStream], Any]

_int_pattern = re.compile(r"[+-]?\d+")
_double_pattern = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|infinity|inf|nan)", re.IGNORECASE
)


def _value_start(stream: LineStream) -> int:
    """Position of the first non-space character at or after the cursor."""
    line = stream.line
    pos = stream.pos
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def read_string(stream: LineStream) -> Optional[str]:
    """
    Read a string which is either enclosed in double quotes or delimited by whitespace.
    Quoted strings are returned without the quotes and may contain spaces.

    Args:
        stream (LineStream): Input stream positioned before the value.

    Returns:
        str: The string or None if no (complete) string could be read.
    """
    line = stream.line
    start = _value_start(stream)

    if start == len(line):
        return None

    if line[start] == '"':
        end = line.find('"', start + 1)
        if end < 0:
            return None
        stream.pos = end + 1
        return line[start + 1 : end]

    end = start
    while end < len(line) and not line[end].isspace():
        end += 1

    stream.pos = end
    return line[start:end]


def _read_number(stream: LineStream, pattern, convert):
    start = _value_start(stream)
    match = pattern.match(stream.line, start)

    if match is None:
        return None

    stream.pos = match.end()
    return convert(match.group())


def read_int(stream: LineStream) -> Optional[int]:
    """Read a base 10 integer with optional sign."""
    return _read_number(stream, _int_pattern, int)


def read_double(stream: LineStream) -> Optional[float]:
    """Read a floating point number in decimal notation, inf or nan."""
    return _read_number(stream, _double_pattern, float)


def read_enum(stream: LineStream, choices: Sequence[Tuple[str, Any]]) -> Any:
    """
    Match the text at the cursor against a list of names and return the value associated
    with the first name that is a prefix of the text. Matching is done on prefixes and
    not on whole tokens, hence names which are prefixes of other names have to be
    listed after them.

    Args:
        stream (LineStream): Input stream positioned before the value.
        choices (list(tuple)): Ordered (name, value) pairs.

    Returns:
        object: Value of the first matching name or None.
    """
    start = _value_start(stream)
    text = stream.line[start:].lower()

    for name, value in choices:
        if text.startswith(name.lower()):
            stream.pos = start + len(name)
            return value

    return None


def _enum_choices(enum_type):
    return tuple((member.value, member) for member in enum_type)


_term_choices = (
    ("elec", Term.ELEC),
    ("pol", Term.POL),
    ("disp", Term.DISP),
    ("xr", Term.XR),
)


def read_terms(stream: LineStream) -> Optional[Term]:
    """
    Read a whitespace separated list of interaction terms spanning the rest of the line.
    Any unknown token invalidates the whole list, as does an empty list.

    Returns:
        Term: Combination of all listed terms or None.
    """
    line = stream.line.lower()
    pos = _value_start(stream)
    terms = Term(0)

    while pos < len(line):
        for name, flag in _term_choices:
            if line.startswith(name, pos):
                pos += len(name)
                terms |= flag
                break
        else:
            return None

        while pos < len(line) and line[pos].isspace():
            pos += 1

    if not terms:
        return None

    stream.pos = pos
    return terms


_run_type_choices = _enum_choices(RunType)
_coord_choices = _enum_choices(CoordType)
_elec_damp_choices = _enum_choices(ElecDamp)
_disp_damp_choices = _enum_choices(DispDamp)
_pol_damp_choices = _enum_choices(PolDamp)
_ensemble_choices = _enum_choices(EnsembleType)


def read_run_type(stream: LineStream) -> Optional[RunType]:
    return read_enum(stream, _run_type_choices)


def read_coord(stream: LineStream) -> Optional[CoordType]:
    return read_enum(stream, _coord_choices)


def read_units(stream: LineStream) -> Optional[float]:
    """Read a length unit and return its conversion factor to Bohr."""
    return read_enum(stream, length_factors)


def read_elec_damp(stream: LineStream) -> Optional[ElecDamp]:
    return read_enum(stream, _elec_damp_choices)


def read_disp_damp(stream: LineStream) -> Optional[DispDamp]:
    return read_enum(stream, _disp_damp_choices)


def read_pol_damp(stream: LineStream) -> Optional[PolDamp]:
    return read_enum(stream, _pol_damp_choices)


def read_ensemble(stream: LineStream) -> Optional[EnsembleType]:
    return read_enum(stream, _ensemble_choices)


def int_gt_zero(value: int) -> bool:
    return value > 0


def double_gt_zero(value: float) -> bool:
    return value > 0.0
