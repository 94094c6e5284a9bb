"""
Table of all scalar options which can be given in an input file. Each row holds the
keyword, the default written exactly as it would appear in a file, the reader used to
parse the value, an optional range check and the attribute of the config the value is
stored in. Defaults are parsed with the same readers as user input.
"""
import logging
import os
from collections import namedtuple

from efpinput.config import ConfigBuilder, scalar_options
from efpinput.errors import ConfigValueError
from efpinput.readers import (
    read_string,
    read_int,
    read_double,
    read_terms,
    read_run_type,
    read_coord,
    read_units,
    read_elec_damp,
    read_disp_damp,
    read_pol_damp,
    read_ensemble,
    int_gt_zero,
    double_gt_zero,
)
from efpinput.stream import LineStream

log = logging.getLogger(__name__)

__all__ = [
    "Field",
    "FIELDS",
    "DEFAULT_FRAGLIB_PATH",
    "path_literal",
    "parse_field",
    "set_defaults",
]

DEFAULT_FRAGLIB_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "fraglib"
)

Field = namedtuple("Field", ["name", "default", "reader", "check", "attribute"])


def path_literal(path: str) -> str:
    """
    Write a path as string literal for the option table. Paths are quoted so they may
    contain spaces. A path containing a double quote is left bare, which only works if
    it has no whitespace either.
    """
    if '"' in path:
        return path
    return '"{:s}"'.format(path)


# Keywords are matched as prefixes in table order. A keyword must never be a prefix
# of a keyword listed after it.
FIELDS = (
    Field("run_type", "sp", read_run_type, None, "run_type"),
    Field("coord", "xyzabc", read_coord, None, "coord_type"),
    Field("units", "angs", read_units, None, "units_factor"),
    Field("terms", "elec pol disp xr", read_terms, None, "terms"),
    Field("elec_damp", "screen", read_elec_damp, None, "elec_damp"),
    Field("disp_damp", "tt", read_disp_damp, None, "disp_damp"),
    Field("pol_damp", "tt", read_pol_damp, None, "pol_damp"),
    Field("hess_delta", "0.001", read_double, double_gt_zero, "hess_delta"),
    Field("max_steps", "100", read_int, int_gt_zero, "max_steps"),
    Field("print_step", "1", read_int, int_gt_zero, "print_step"),
    Field("temperature", "300.0", read_double, double_gt_zero, "target_temperature"),
    Field("time_step", "1.0", read_double, double_gt_zero, "time_step"),
    Field("ensemble", "nve", read_ensemble, None, "ensemble_type"),
    Field("thermostat_tau", "1.0e3", read_double, double_gt_zero, "thermostat_tau"),
    Field("opt_tol", "1.0e-4", read_double, double_gt_zero, "opt_tol"),
    Field(
        "fraglib_path",
        path_literal(DEFAULT_FRAGLIB_PATH),
        read_string,
        None,
        "fraglib_path",
    ),
    Field("userlib_path", ".", read_string, None, "userlib_path"),
)

for _i, _field in enumerate(FIELDS):
    for _later in FIELDS[_i + 1 :]:
        assert not _later.name.startswith(
            _field.name
        ), "Keyword {:s} shadows {:s}".format(_field.name, _later.name)

assert sorted(field.attribute for field in FIELDS) == sorted(
    scalar_options
), "Option table does not cover all config attributes"


def parse_field(stream: LineStream, builder: ConfigBuilder):
    """
    Parse a single option line and store the value in the config builder. The cursor
    has to be on the first non-space character of the line and is left right after
    the parsed value.

    Args:
        stream (LineStream): Input stream.
        builder (ConfigBuilder): Config receiving the value.
    """
    for field in FIELDS:
        if not stream.startswith(field.name):
            continue

        stream.consume(len(field.name))
        stream.skip_space()

        value = field.reader(stream)
        if value is None:
            raise ConfigValueError(
                "incorrect value for option {:s}".format(field.name), stream.line_number
            )

        if field.check is not None and not field.check(value):
            raise ConfigValueError(
                "option {:s} value is out of range".format(field.name),
                stream.line_number,
            )

        setattr(builder, field.attribute, value)
        log.debug("Option {:s} set to {}".format(field.name, value))
        return

    raise ConfigValueError("unknown option in input file", stream.line_number)


def set_defaults(builder: ConfigBuilder):
    """
    Populate all options of the builder by parsing the default of every field.

    Args:
        builder (ConfigBuilder): Config to initialize.
    """
    for field in FIELDS:
        stream = LineStream([field.default], fold_case=False)
        stream.advance()

        value = field.reader(stream)
        assert value is not None, "Invalid default for option {:s}".format(field.name)

        setattr(builder, field.attribute, value)
