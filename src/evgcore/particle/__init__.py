"""Particle property and isotope tables.

The `~evgcore.particle` module provides the lookup table that the rest of
`evgcore` uses for masses and charges. Its main interface is the
`ParticleCollection`, a set of immutable `Particle` instances that is indexed
by PDG code. Nuclei are stored under their PDG ion code
(see `.pdg.ion_code`), so that the same collection also serves as the table of
known isotopes against which a `.Target` is validated.

A default collection with PDG data (from `scikit-hep/particle
<https://github.com/scikit-hep/particle>`_) and the isotopes listed in
:download:`isotopes.yml </../src/evgcore/particle/isotopes.yml>` is created
lazily by `load_default_particles`. Components that look up particle
properties accept a collection as an argument as well, so that they can be run
against a custom table.
"""

import json
import logging
from collections import abc
from functools import lru_cache
from os.path import dirname, join, realpath
from typing import Dict, Iterable, Iterator, Optional, Union

import attr
import jsonschema
import yaml
from particle import Particle as PdgDatabase

from .pdg import ion_code

_LOGGER = logging.getLogger(__name__)

__PARTICLE_PATH = dirname(realpath(__file__))
ISOTOPE_DEFINITIONS_PATH = join(__PARTICLE_PATH, "isotopes.yml")


@attr.s(frozen=True, repr=True, kw_only=True)
class Particle:
    """Immutable container of the properties of a particle or nucleus.

    The `~Particle.name` and `~Particle.latex` are just labels that are not
    taken into account when checking if two `Particle` instances are equal.
    Masses and widths are in GeV, the charge is in units of the elementary
    charge.
    """

    # Labels
    name: str = attr.ib(eq=False)
    latex: Optional[str] = attr.ib(eq=False, default=None)
    # Unique properties
    pid: int = attr.ib(converter=int)
    mass: float = attr.ib(converter=float)
    width: float = attr.ib(converter=float, default=0.0)
    charge: float = attr.ib(converter=float, default=0.0)
    spin: float = attr.ib(converter=float, default=0.0)


class ParticleCollection(abc.MutableSet):
    """Set of `Particle` instances, indexed by PDG code.

    Codes are unique: adding a particle with a code that is already in the
    collection replaces the existing entry.
    """

    def __init__(self, particles: Optional[Iterable[Particle]] = None) -> None:
        self.__particles: Dict[int, Particle] = dict()
        if particles is not None:
            self.update(particles)

    def __contains__(self, instance: object) -> bool:
        if isinstance(instance, Particle):
            return self.__particles.get(instance.pid) == instance
        if isinstance(instance, int):
            return instance in self.__particles
        raise NotImplementedError(
            f"Cannot search for type {instance.__class__.__name__}"
        )

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.__particles.values())

    def __len__(self) -> int:
        return len(self.__particles)

    def add(self, value: Particle) -> None:
        existing = self.__particles.get(value.pid)
        if existing is not None:
            _LOGGER.warning(
                f'Replacing particle "{existing.name}" with "{value.name}"'
                f" (PDG code {value.pid})"
            )
        self.__particles[value.pid] = value

    def discard(self, value: Union[Particle, int]) -> None:
        pdg_code = value.pid if isinstance(value, Particle) else int(value)
        self.__particles.pop(pdg_code, None)

    def find(self, pdg_code: int) -> Optional[Particle]:
        """Look up a particle by its PDG code.

        Returns `None` if there is no particle with that code, so that callers
        can treat unknown codes as "no particle" instead of handling errors.
        """
        return self.__particles.get(int(pdg_code))

    def update(self, other: Iterable[Particle]) -> None:
        for particle in other:
            self.add(particle)


def load_pdg() -> ParticleCollection:
    """Create a `.ParticleCollection` with all entries from the PDG.

    PDG info is imported from the `scikit-hep/particle
    <https://github.com/scikit-hep/particle>`_ package. Quarks and entries
    without charge or spin are skipped, as are nuclei (see `load_isotopes`).
    """
    all_pdg_particles = PdgDatabase.findall(
        lambda item: item.charge is not None
        and float(item.charge).is_integer()  # remove quarks
        and item.J is not None  # remove new physics and nuclei
        and abs(int(item.pdgid)) < 1e9  # p and n as nucleus
        and not (item.mass is None and not item.name.startswith("nu"))
    )
    particle_collection = ParticleCollection()
    for pdg_particle in all_pdg_particles:
        new_particle = __convert_pdg_instance(pdg_particle)
        particle_collection.add(new_particle)
    return particle_collection


# cspell:ignore pdgid
def __convert_pdg_instance(pdg_particle: PdgDatabase) -> Particle:
    def convert_mass_width(value: Optional[float]) -> float:
        if value is None:
            return 0.0
        return float(value) / 1e3  # MeV to GeV

    latex = None
    if pdg_particle.latex_name != "Unknown":
        latex = str(pdg_particle.latex_name)
    return Particle(
        name=str(pdg_particle.name),
        latex=latex,
        pid=int(pdg_particle.pdgid),
        mass=convert_mass_width(pdg_particle.mass),
        width=convert_mass_width(pdg_particle.width),
        charge=float(pdg_particle.charge),
        spin=float(pdg_particle.J),
    )


def load_isotopes(filename: Optional[str] = None) -> ParticleCollection:
    """Load the table of known isotopes.

    Each isotope becomes a `Particle` with the PDG ion code as its
    `~Particle.pid` and :math:`Z` as its `~Particle.charge`. The free nucleons
    are part of the table as well, under their ion codes.
    """
    if filename is None:
        filename = ISOTOPE_DEFINITIONS_PATH
    with open(filename) as stream:
        definition = yaml.load(stream, Loader=yaml.SafeLoader)
    validate_isotopes(definition)
    return ParticleCollection(
        Particle(
            name=isotope["name"],
            latex=isotope.get("latex"),
            pid=ion_code(z=isotope["Z"], a=isotope["A"]),
            mass=isotope["mass"],
            charge=isotope["Z"],
        )
        for isotope in definition["isotopes"]
    )


def validate_isotopes(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_ISOTOPES)


@lru_cache(maxsize=None)
def load_default_particles() -> ParticleCollection:
    """Load the default process-wide particle table.

    Runs `.load_pdg` and supplements its output with the isotopes from
    `load_isotopes`. The collection is created only once and should be treated
    as read-only, since it is shared by every caller.
    """
    particles = load_pdg()
    particles.update(load_isotopes())
    return particles


with open(join(__PARTICLE_PATH, "validation.json")) as __STREAM:
    __SCHEMA_ISOTOPES = json.load(__STREAM)
