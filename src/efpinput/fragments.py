"""
Fragment blocks of the input file. A block starts with ``fragment <name>``, followed
by the geometry rows required by the active coordinate convention and an optional
``velocity`` line with one row of six values.
"""
import logging
from dataclasses import dataclass, field

import numpy as np

from efpinput.errors import ConfigFormatError
from efpinput.options import CoordType
from efpinput.readers import read_string, read_double
from efpinput.stream import LineStream

log = logging.getLogger(__name__)

__all__ = ["Fragment", "read_fragment", "MAX_COORD", "N_VELOCITY"]

# Capacity of the geometry buffer (rotation matrix convention)
MAX_COORD = 12
N_VELOCITY = 6


@dataclass(frozen=True, eq=False)
class Fragment:
    """
    Rigid molecular fragment.

    Args:
        name (str): Name of the fragment type in the fragment library.
        coord (np.ndarray): Geometry buffer of length ``MAX_COORD``. Only the first
                            ``coord_type.n_coord`` entries are meaningful.
        vel (np.ndarray): Translational and angular velocity, zero unless given.
        has_velocity (bool): Whether a velocity block was present.
    """

    name: str
    coord: np.ndarray = field(default_factory=lambda: np.zeros(MAX_COORD))
    vel: np.ndarray = field(default_factory=lambda: np.zeros(N_VELOCITY))
    has_velocity: bool = False

    def geometry(self, coord_type: CoordType) -> np.ndarray:
        """
        Get the meaningful part of the geometry buffer, reshaped to the rows of the
        input block.
        """
        return self.coord[: coord_type.n_coord].reshape(coord_type.shape)

    def freeze(self):
        self.coord.setflags(write=False)
        self.vel.setflags(write=False)


def _read_row(stream: LineStream, values: np.ndarray, offset: int, n_values: int):
    if stream.exhausted:
        return False

    for idx in range(offset, offset + n_values):
        value = read_double(stream)
        if value is None:
            return False
        values[idx] = value

    return True


def read_fragment(stream: LineStream, coord_type: CoordType) -> Fragment:
    """
    Read one fragment block. The cursor has to be placed right after the ``fragment``
    keyword. On return the stream is positioned on the first line after the block,
    which has not been interpreted yet.

    Args:
        stream (LineStream): Input stream.
        coord_type (CoordType): Coordinate convention used for the geometry rows.

    Returns:
        Fragment: The parsed fragment in input units.
    """
    name = read_string(stream)
    if name is None:
        raise ConfigFormatError("unable to read fragment name", stream.line_number)

    coord = np.zeros(MAX_COORD)
    vel = np.zeros(N_VELOCITY)
    stream.advance()

    n_rows, n_cols = coord_type.shape
    for row in range(n_rows):
        if not _read_row(stream, coord, row * n_cols, n_cols):
            raise ConfigFormatError(
                "incorrect fragment coordinates format",
                None if stream.exhausted else stream.line_number,
            )
        stream.advance()

    if stream.exhausted:
        log.debug("Read fragment {:s}".format(name))
        return Fragment(name, coord, vel)

    stream.skip_space()

    if stream.startswith("velocity"):
        stream.advance()

        if not _read_row(stream, vel, 0, N_VELOCITY):
            raise ConfigFormatError(
                "incorrect fragment velocities format",
                None if stream.exhausted else stream.line_number,
            )
        has_velocity = True
        stream.advance()
    else:
        has_velocity = False

    log.debug(
        "Read fragment {:s} (velocities: {:s})".format(
            name, "yes" if has_velocity else "no"
        )
    )
    return Fragment(name, coord, vel, has_velocity)
