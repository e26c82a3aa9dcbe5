"""The struck object of a simulated interaction."""

import logging
from typing import Any, Dict, Optional

from evgcore.kinematics import FourMomentum
from evgcore.particle import ParticleCollection, load_default_particles
from evgcore.particle import pdg

_LOGGER = logging.getLogger(__name__)

NUCLEON_MASS = 0.938919
"""Average nucleon mass in GeV, used as the default struck nucleon mass."""


class Target:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """Interaction target: a free particle, a free nucleon, or a nucleus.

    A `Target` can optionally carry a "struck" sub-state: the nucleon that
    takes part in the interaction (with its four-momentum) and the quark
    inside that nucleon.

    A target can be constructed in three ways:

    - from a PDG code, :code:`Target(1000260560)` (ion codes are decoded into
      :math:`Z` and :math:`A`, any other code is a free particle);
    - from :math:`Z` and :math:`A`, :code:`Target(z=26, a=56)`;
    - from :math:`Z`, :math:`A` and a struck nucleon,
      :code:`Target(z=26, a=56, struck_nucleon=2212)`.

    Invalid input never raises. A :math:`(Z, A)` that is not a free nucleon
    and not in the isotope table is reset to :math:`(0, 0)` and a struck
    nucleon code that is not a proton or neutron is reset to unset (``0``).
    Check `is_valid_nucleus` and `struck_nucleon_is_set` before relying on
    either.

    Args:
        pdg_code: PDG code of the target (particle or ion code).
        z: Number of protons.
        a: Mass number.
        struck_nucleon: PDG code of the struck nucleon.
        particles: Table used for mass and charge lookups and for checking
            which isotopes exist. Defaults to `.load_default_particles`.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        pdg_code: Optional[int] = None,
        z: Optional[int] = None,
        a: Optional[int] = None,
        struck_nucleon: Optional[int] = None,
        particles: Optional[ParticleCollection] = None,
    ) -> None:
        if particles is None:
            particles = load_default_particles()
        self.__particles = particles
        self.__init_state()
        if pdg_code is not None:
            if z is not None or a is not None or struck_nucleon is not None:
                raise ValueError(
                    "Define a target either by PDG code or by Z and A, not both"
                )
            self.__pdg_code = int(pdg_code)
            if pdg.is_ion(self.__pdg_code):
                self.set_za(
                    pdg.ion_z(self.__pdg_code), pdg.ion_a(self.__pdg_code)
                )
            return
        if z is None and a is None:
            return
        if z is None or a is None:
            raise ValueError("Both Z and A have to be specified")
        self.__pdg_code = pdg.ion_code(z=z, a=a)
        if struck_nucleon is None:
            self.set_za(z, a)
        else:
            self.__z = int(z)
            self.__a = int(a)
            self.__force_nucleus_validity()
            self.set_struck_nucleon_code(struck_nucleon)

    def __init_state(self) -> None:
        self.__z = 0
        self.__a = 0
        self.__pdg_code = 0
        self.__struck_nucleon_code = 0
        self.__struck_quark_code = 0
        self.__struck_sea_quark = False
        self.__struck_nucleon_p4 = FourMomentum.at_rest(NUCLEON_MASS)

    def copy(self) -> "Target":
        """Create an independent copy that shares the particle table."""
        new_target = Target(particles=self.__particles)
        new_target.__pdg_code = self.__pdg_code
        if pdg.is_ion(self.__pdg_code):
            new_target.__z = self.__z
            new_target.__a = self.__a
            new_target.__struck_nucleon_code = self.__struck_nucleon_code
            new_target.__struck_quark_code = self.__struck_quark_code
            new_target.__struck_sea_quark = self.__struck_sea_quark
            new_target.__struck_nucleon_p4 = self.__struck_nucleon_p4
            new_target.__force_nucleus_validity()
            new_target.__force_struck_nucleon_validity()
        return new_target

    def __copy__(self) -> "Target":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Target":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Target):
            return (
                self.pdg_code == other.pdg_code
                and self.z == other.z
                and self.a == other.a
                and self.struck_nucleon_code == other.struck_nucleon_code
                and self.struck_nucleon_p4 == other.struck_nucleon_p4
                and self.struck_quark_code == other.struck_quark_code
                and self.struck_quark_is_from_sea()
                == other.struck_quark_is_from_sea()
            )
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_string()})"

    def __str__(self) -> str:
        lines = [f" target PDG code = {self.pdg_code}"]
        if self.is_nucleus() or self.is_free_nucleon():
            lines.append(f" Z = {self.z}, A = {self.a}")
        if self.struck_nucleon_is_set():
            particle = self.__particles.find(self.struck_nucleon_code)
            name = (
                particle.name
                if particle is not None
                else str(self.struck_nucleon_code)
            )
            lines.append(
                f" struck nucleon = {name}, P4 = {self.struck_nucleon_p4}"
            )
        return "\n".join(lines) + "\n"

    def as_string(self) -> str:
        """Canonical short form, for instance :code:`1000260560[N=2212][q=2(v)]`.

        The struck nucleon is rendered as :code:`[N=<code>]` and the struck
        quark as :code:`[q=<code>(v)]` for a valence quark or
        :code:`[q=<code>(s)]` for a sea quark.
        """
        output = str(self.pdg_code)
        if self.struck_nucleon_is_set():
            output += f"[N={self.struck_nucleon_code}]"
        if self.struck_quark_is_set():
            origin = "s" if self.struck_quark_is_from_sea() else "v"
            output += f"[q={self.struck_quark_code}({origin})]"
        return output

    @property
    def z(self) -> int:
        return self.__z

    @property
    def n(self) -> int:
        return self.__a - self.__z

    @property
    def a(self) -> int:
        return self.__a

    @property
    def pdg_code(self) -> int:
        return self.__pdg_code

    @property
    def mass(self) -> float:
        """Mass in GeV, ``0`` if the target code is not in the table."""
        particle = self.__particles.find(self.__pdg_code)
        if particle is None:
            return 0.0
        return particle.mass

    @property
    def charge(self) -> float:
        """Charge in units of :math:`e`, ``0`` if the code is not in the table."""
        particle = self.__particles.find(self.__pdg_code)
        if particle is None:
            return 0.0
        return particle.charge

    @property
    def struck_nucleon_code(self) -> int:
        return self.__struck_nucleon_code

    @property
    def struck_quark_code(self) -> int:
        return self.__struck_quark_code

    @property
    def struck_nucleon_p4(self) -> FourMomentum:
        return self.__struck_nucleon_p4

    @property
    def struck_nucleon_mass(self) -> float:
        if not self.struck_nucleon_is_set():
            _LOGGER.warning("Returning struck nucleon mass = 0")
            return 0.0
        return self.__nucleon_mass(self.__struck_nucleon_code)

    def is_free_nucleon(self) -> bool:
        return self.__a == 1 and self.__z in (0, 1)

    def is_proton(self) -> bool:
        return self.__a == 1 and self.__z == 1

    def is_neutron(self) -> bool:
        return self.__a == 1 and self.__z == 0

    def is_nucleus(self) -> bool:
        # validity was ensured when Z and A were set
        return self.__a > 1

    def is_particle(self) -> bool:
        return (
            self.__pdg_code in self.__particles
            and self.__a == 0
            and self.__z == 0
        )

    def is_valid_nucleus(self) -> bool:
        """Free nucleon or an isotope that exists in the particle table."""
        if self.is_free_nucleon():
            return True
        return pdg.ion_code(z=self.__z, a=self.__a) in self.__particles

    def is_even_even(self) -> bool:
        return self.is_nucleus() and self.n % 2 == 0 and self.z % 2 == 0

    def is_odd_odd(self) -> bool:
        return self.is_nucleus() and self.n % 2 == 1 and self.z % 2 == 1

    def is_even_odd(self) -> bool:
        return (
            self.is_nucleus()
            and not self.is_even_even()
            and not self.is_odd_odd()
        )

    def struck_nucleon_is_set(self) -> bool:
        return pdg.is_nucleon(self.__struck_nucleon_code)

    def struck_quark_is_set(self) -> bool:
        return pdg.is_quark(self.__struck_quark_code) or pdg.is_antiquark(
            self.__struck_quark_code
        )

    def struck_quark_is_from_sea(self) -> bool:
        return self.__struck_sea_quark

    def set_za(self, z: int, a: int) -> None:
        """Set :math:`Z` and :math:`A`, resetting both to zero if invalid.

        If the result is a free nucleon, the struck nucleon is set to that
        nucleon as well.
        """
        self.__z = int(z)
        self.__a = int(a)
        self.__force_nucleus_validity()
        if self.is_free_nucleon():
            if self.is_proton():
                self.set_struck_nucleon_code(pdg.PROTON)
            else:
                self.set_struck_nucleon_code(pdg.NEUTRON)

    def set_struck_nucleon_code(self, pdg_code: int) -> None:
        """Set the struck nucleon and put it at rest, on its mass shell.

        A code that is not a proton or neutron resets the struck nucleon to
        unset. Call `set_struck_nucleon_p4` afterwards for a moving nucleon.
        """
        self.__struck_nucleon_code = int(pdg_code)
        if self.__force_struck_nucleon_validity():
            mass = self.__nucleon_mass(self.__struck_nucleon_code)
            self.set_struck_nucleon_p4(FourMomentum.at_rest(mass))

    def set_struck_quark_code(self, pdg_code: int) -> None:
        """Set the struck quark; codes of non-quarks are ignored."""
        if pdg.is_quark(pdg_code) or pdg.is_antiquark(pdg_code):
            self.__struck_quark_code = int(pdg_code)

    def set_struck_nucleon_p4(self, p4: FourMomentum) -> None:
        self.__struck_nucleon_p4 = p4

    def set_struck_sea_quark(self, is_sea_quark: bool) -> None:
        self.__struck_sea_quark = bool(is_sea_quark)

    def __nucleon_mass(self, pdg_code: int) -> float:
        particle = self.__particles.find(pdg_code)
        if particle is None:
            _LOGGER.warning(
                f"No nucleon with PDG code {pdg_code} in the particle table,"
                f" using mass {NUCLEON_MASS} GeV"
            )
            return NUCLEON_MASS
        return particle.mass

    def __force_struck_nucleon_validity(self) -> bool:
        is_valid = pdg.is_nucleon(self.__struck_nucleon_code)
        if not is_valid:
            _LOGGER.debug("Resetting struck nucleon to unset")
            self.__struck_nucleon_code = 0
        return is_valid

    def __force_nucleus_validity(self) -> None:
        if not self.is_valid_nucleus():
            _LOGGER.warning("Invalid target -- resetting to Z = 0, A = 0")
            self.__z = 0
            self.__a = 0
