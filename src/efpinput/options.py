"""
Enumerations for all options of the input file which take a named value.
"""
from enum import Enum, IntFlag

__all__ = [
    "RunType",
    "CoordType",
    "Term",
    "ElecDamp",
    "DispDamp",
    "PolDamp",
    "EnsembleType",
]


class RunType(Enum):
    """Type of calculation requested by the input file."""

    SP = "sp"
    GRAD = "grad"
    HESS = "hess"
    OPT = "opt"
    MD = "md"


class CoordType(Enum):
    """
    Convention used for fragment geometries:

        points: three reference points of the fragment (3 rows of 3 values)
        xyzabc: center of mass and Euler angles (1 row of 6 values)
        rotmat: center of mass and rotation matrix (4 rows of 3 values)
    """

    POINTS = "points"
    XYZABC = "xyzabc"
    ROTMAT = "rotmat"

    @property
    def shape(self):
        """Number of rows and values per row of a fragment geometry block."""
        return _coord_shapes[self]

    @property
    def n_coord(self) -> int:
        n_rows, n_cols = self.shape
        return n_rows * n_cols

    @property
    def n_distance(self) -> int:
        """Number of leading geometry values which are distances."""
        if self is CoordType.POINTS:
            return 9
        return 3


_coord_shapes = {
    CoordType.POINTS: (3, 3),
    CoordType.XYZABC: (1, 6),
    CoordType.ROTMAT: (4, 3),
}


class Term(IntFlag):
    """Interaction terms enabled for the energy evaluation."""

    ELEC = 1
    POL = 2
    DISP = 4
    XR = 8


class ElecDamp(Enum):
    SCREEN = "screen"
    OVERLAP = "overlap"
    OFF = "off"


class DispDamp(Enum):
    TT = "tt"
    OVERLAP = "overlap"
    OFF = "off"


class PolDamp(Enum):
    TT = "tt"
    OFF = "off"


class EnsembleType(Enum):
    NVE = "nve"
    NVT = "nvt"
