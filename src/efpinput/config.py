"""
Containers for the options and fragments read from an input file. A
:obj:`ConfigBuilder` collects values while the file is parsed and is turned into the
final :obj:`Config` once all input has been consumed.
"""
import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
import torch

from efpinput.fragments import Fragment
from efpinput.options import (
    RunType,
    CoordType,
    Term,
    ElecDamp,
    DispDamp,
    PolDamp,
    EnsembleType,
)
from efpinput.utils import int2precision

log = logging.getLogger(__name__)

__all__ = ["ConfigBuilder", "Config", "scalar_options"]


@dataclass(frozen=True, eq=False)
class Config:
    """
    Options and fragments of an input file after unit conversion. Distances are
    given in Bohr and times in atomic time units.
    """

    run_type: RunType
    coord_type: CoordType
    units_factor: float
    terms: Term
    elec_damp: ElecDamp
    disp_damp: DispDamp
    pol_damp: PolDamp
    hess_delta: float
    max_steps: int
    print_step: int
    target_temperature: float
    time_step: float
    ensemble_type: EnsembleType
    thermostat_tau: float
    opt_tol: float
    fraglib_path: Optional[str]
    userlib_path: Optional[str]
    fragments: Tuple[Fragment, ...] = ()
    released: bool = False

    def __repr__(self):
        return "Config(run_type={:s}, coord_type={:s}, n_frags={:d})".format(
            self.run_type.value, self.coord_type.value, self.n_frags
        )

    @property
    def n_frags(self) -> int:
        return len(self.fragments)

    def release(self):
        """
        Drop all fragments and library paths. The config should not be used afterwards.
        """
        object.__setattr__(self, "fragments", ())
        object.__setattr__(self, "fraglib_path", None)
        object.__setattr__(self, "userlib_path", None)
        object.__setattr__(self, "released", True)
        log.debug("Released config")

    def as_dict(self) -> Dict:
        """
        Plain python representation with enumerations replaced by their names and
        arrays by lists.

        Returns:
            dict: Options and fragments.
        """
        config_dict = dataclasses.asdict(self)
        config_dict.pop("released")

        for name, value in config_dict.items():
            if isinstance(value, Term):
                config_dict[name] = [
                    term.name.lower() for term in Term if term in value
                ]
            elif isinstance(value, Enum):
                config_dict[name] = value.value

        n_coord = self.coord_type.n_coord
        config_dict["fragments"] = [
            {
                "name": fragment["name"],
                "coord": fragment["coord"][:n_coord].tolist(),
                "vel": fragment["vel"].tolist(),
                "has_velocity": fragment["has_velocity"],
            }
            for fragment in config_dict["fragments"]
        ]
        return config_dict

    def to_tensors(
        self, precision: Union[int, torch.dtype] = 64, device: str = "cpu"
    ) -> Dict[str, torch.Tensor]:
        """
        Collect fragment geometries and velocities in tensors for simulation drivers.

        Args:
            precision (int, torch.dtype): Floating point precision of the tensors.
            device (str): Device the tensors are placed on.

        Returns:
            dict(str, torch.Tensor): ``coordinates`` of shape n_frags x n_coord and
                                     ``velocities`` of shape n_frags x 6.
        """
        if not self.fragments:
            raise ValueError("Config contains no fragments")

        dtype = int2precision(precision)
        n_coord = self.coord_type.n_coord

        coordinates = np.stack(
            [fragment.coord[:n_coord] for fragment in self.fragments]
        )
        velocities = np.stack([fragment.vel for fragment in self.fragments])

        return {
            "coordinates": torch.tensor(coordinates, dtype=dtype, device=device),
            "velocities": torch.tensor(velocities, dtype=dtype, device=device),
        }


# Names of all scalar options, in the order they are stored and reported.
scalar_options = tuple(
    field.name
    for field in dataclasses.fields(Config)
    if field.name not in ("fragments", "released")
)


class ConfigBuilder:
    """
    Mutable collection of options used during parsing. All options start out as
    None and are populated with defaults by :func:`efpinput.fields.set_defaults`.
    """

    def __init__(self):
        for name in scalar_options:
            setattr(self, name, None)
        self.fragments: List[Fragment] = []

    @property
    def n_frags(self) -> int:
        return len(self.fragments)

    def add_fragment(self, fragment: Fragment):
        self.fragments.append(fragment)

    def build(self) -> Config:
        """
        Freeze the collected values into a :obj:`Config`. Geometry and velocity buffers
        are made read-only.
        """
        for fragment in self.fragments:
            fragment.freeze()

        options = {name: getattr(self, name) for name in scalar_options}
        return Config(fragments=tuple(self.fragments), **options)
