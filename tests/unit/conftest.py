# pylint: disable=redefined-outer-name
import logging

import pytest

from evgcore.interaction import InitialState, Target
from evgcore.particle import (
    Particle,
    ParticleCollection,
    load_default_particles,
)
from evgcore.particle.pdg import NU_MU, ion_code
from evgcore.rng import RandomService

logging.basicConfig(level=logging.ERROR)


def _isotope(name: str, z: int, a: int, mass: float) -> Particle:
    return Particle(name=name, pid=ion_code(z=z, a=a), mass=mass, charge=z)


@pytest.fixture(scope="session")
def particle_database() -> ParticleCollection:
    return load_default_particles()


@pytest.fixture
def particles() -> ParticleCollection:
    """Small hand-made table, independent of the PDG data."""
    return ParticleCollection(
        [
            Particle(name="p", pid=2212, mass=0.938272, charge=1, spin=0.5),
            Particle(name="n", pid=2112, mass=0.939565, spin=0.5),
            Particle(name="e-", pid=11, mass=0.000511, charge=-1, spin=0.5),
            Particle(name="nu(mu)", pid=14, mass=0.0, spin=0.5),
            Particle(name="pi+", pid=211, mass=0.139570, charge=1),
            _isotope("H1", z=1, a=1, mass=0.938272),
            _isotope("n1", z=0, a=1, mass=0.939565),
            _isotope("C12", z=6, a=12, mass=11.174863),
            _isotope("N14", z=7, a=14, mass=13.040204),
            _isotope("Li7", z=3, a=7, mass=6.533833),
            _isotope("Fe56", z=26, a=56, mass=52.089778),
        ]
    )


@pytest.fixture
def rng() -> RandomService:
    return RandomService(seed=1234)


@pytest.fixture
def iron_initial_state(particles: ParticleCollection) -> InitialState:
    return InitialState(
        probe_pdg=NU_MU, target=Target(z=26, a=56, particles=particles)
    )
