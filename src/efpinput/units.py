"""
Conversion constants used when translating input file quantities to atomic units.
All values are derived from :obj:`ase.units` so they stay consistent with the
CODATA set used by ASE.
"""
from ase import units

__all__ = ["BOHR_RADIUS", "FS_TO_AU", "ANGSTROM_TO_BOHR", "length_factors"]

# Bohr radius in Angstrom
BOHR_RADIUS = units.Bohr

# Femtoseconds to atomic time units (_aut is given in s)
FS_TO_AU = 1e-15 / units._aut

ANGSTROM_TO_BOHR = 1.0 / BOHR_RADIUS

# Length unit keywords accepted by the ``units`` option and their factors to Bohr.
# Order matters for prefix matching, see :func:`efpinput.readers.read_enum`.
length_factors = (
    ("bohr", 1.0),
    ("angs", ANGSTROM_TO_BOHR),
)
