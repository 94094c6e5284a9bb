"""
Loading of efpmd input files. The file is read line by line: blank lines and comments
are skipped, lines starting with ``fragment`` open a fragment block and every other
line sets one option. Once all input is consumed the values are converted to atomic
units and returned as a :obj:`efpinput.config.Config`.

Any problem with the input is fatal and raises a :obj:`efpinput.errors.ConfigError`.
"""
import io
import logging
import os
from typing import Iterable

from efpinput.config import Config, ConfigBuilder
from efpinput.errors import (
    ConfigError,
    ConfigFormatError,
    ConfigValueError,
    FragmentCountError,
    InputFileError,
)
from efpinput.fields import parse_field, set_defaults
from efpinput.fragments import read_fragment
from efpinput.stream import LineStream
from efpinput.units import FS_TO_AU

log = logging.getLogger(__name__)

__all__ = ["parse_config", "load_config", "loads", "convert_units"]

FRAGMENT_KEYWORD = "fragment"


def convert_units(builder: ConfigBuilder):
    """
    Convert time steps from femtoseconds and fragment positions from the input length
    unit to atomic units. Only the distance-valued part of each geometry is scaled.
    Has to be called exactly once, after all fragments have been read.

    Args:
        builder (ConfigBuilder): Fully parsed config.
    """
    builder.time_step = FS_TO_AU * builder.time_step
    builder.thermostat_tau = FS_TO_AU * builder.thermostat_tau

    n_convert = builder.coord_type.n_distance

    for fragment in builder.fragments:
        fragment.coord[:n_convert] *= builder.units_factor


def _parse_option(stream: LineStream, builder: ConfigBuilder):
    coord_type = builder.coord_type

    parse_field(stream, builder)

    if builder.n_frags > 0 and builder.coord_type is not coord_type:
        raise ConfigValueError(
            "option coord cannot be changed after fragments are specified",
            stream.line_number,
        )

    if not stream.at_end():
        raise ConfigFormatError(
            "only one option per line is allowed", stream.line_number
        )


def parse_config(lines: Iterable[str]) -> Config:
    """
    Parse the lines of an input file.

    Args:
        lines (iterable(str)): Lines of the input file, e.g. an open file handle.

    Returns:
        Config: Options and fragments in atomic units.
    """
    if isinstance(lines, (str, bytes)):
        raise TypeError(
            "parse_config expects an iterable of lines, use loads for strings"
        )

    builder = ConfigBuilder()
    set_defaults(builder)

    stream = LineStream(lines)
    stream.advance()

    while not stream.exhausted:
        stream.skip_space()

        if stream.at_end() or stream.startswith("#"):
            stream.advance()
            continue

        if stream.startswith(FRAGMENT_KEYWORD):
            stream.consume(len(FRAGMENT_KEYWORD))
            builder.add_fragment(read_fragment(stream, builder.coord_type))
            # read_fragment leaves the stream on the next unprocessed line
            continue

        _parse_option(stream, builder)
        stream.advance()

    if builder.n_frags < 1:
        raise FragmentCountError("at least one fragment must be specified")

    convert_units(builder)
    return builder.build()


def loads(text: str) -> Config:
    """
    Parse an input file given as string.

    Args:
        text (str): Content of the input file.

    Returns:
        Config: Options and fragments in atomic units.
    """
    return parse_config(io.StringIO(text))


def load_config(path: str) -> Config:
    """
    Read an input file. The file is closed on every exit path. Errors are reported
    through the module logger before they are raised.

    Args:
        path (str): Path to the input file.

    Returns:
        Config: Options and fragments in atomic units.
    """
    try:
        # latin-1 decodes any byte sequence
        handle = open(path, "r", encoding="latin-1")
    except OSError as err:
        log.error("Unable to open input file {:s}: {}".format(path, err))
        raise InputFileError("unable to open input file {:s}".format(path)) from err

    try:
        with handle:
            config = parse_config(handle)
    except ConfigError as err:
        log.error("Error in input file {:s}: {}".format(os.path.basename(path), err))
        raise

    log.info(
        "Loaded {:s} ({:s} run, {:d} fragment{:s})".format(
            path,
            config.run_type.value,
            config.n_frags,
            "" if config.n_frags == 1 else "s",
        )
    )
    return config
