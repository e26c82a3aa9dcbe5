"""Four-momentum value type used for probes and struck nucleons."""

import math

import attr
import numpy as np


@attr.s(frozen=True)
class FourMomentum:
    """Immutable four-momentum :math:`(\\vec{p}, E)` in GeV.

    Being immutable, a `FourMomentum` can be shared between copies of a
    `.Target` or `.InitialState` without aliasing problems.
    """

    px: float = attr.ib(default=0.0, converter=float)
    py: float = attr.ib(default=0.0, converter=float)
    pz: float = attr.ib(default=0.0, converter=float)
    energy: float = attr.ib(default=0.0, converter=float)

    @classmethod
    def at_rest(cls, mass: float) -> "FourMomentum":
        """Create an on-shell four-momentum of a particle at rest."""
        return cls(0.0, 0.0, 0.0, mass)

    @property
    def momentum(self) -> float:
        return math.sqrt(self.px ** 2 + self.py ** 2 + self.pz ** 2)

    @property
    def mass(self) -> float:
        """Invariant mass. Negative for space-like four-momenta."""
        mass_squared = self.energy ** 2 - self.momentum ** 2
        return math.copysign(math.sqrt(abs(mass_squared)), mass_squared)

    def as_array(self) -> np.ndarray:
        """Components in the order :math:`(E, p_x, p_y, p_z)`."""
        return np.array([self.energy, self.px, self.py, self.pz])

    def __str__(self) -> str:
        return (
            f"(E = {self.energy:.6g}, px = {self.px:.6g},"
            f" py = {self.py:.6g}, pz = {self.pz:.6g})"
        )
