# pylint: disable=no-self-use
import logging
from typing import Any

import attr
import jsonschema
import pytest

from evgcore.particle import (
    Particle,
    ParticleCollection,
    load_default_particles,
    load_isotopes,
    validate_isotopes,
)
from evgcore.particle.pdg import NEUTRON, PROTON, ion_code


class TestParticle:
    def test_immutable(self):
        particle = Particle(name="p", pid=PROTON, mass=0.938272, charge=1)
        with pytest.raises(attr.exceptions.FrozenInstanceError):
            particle.mass = 1.0  # type: ignore

    def test_labels_are_not_compared(self):
        proton = Particle(name="p", pid=PROTON, mass=0.938272, charge=1)
        renamed = attr.evolve(proton, name="proton", latex="p")
        assert proton == renamed
        assert proton != attr.evolve(proton, pid=PROTON + 1)

    def test_conversion(self):
        pid: Any = str(ion_code(6, 12))
        particle = Particle(name="C12", pid=pid, mass=11, charge=6)
        assert particle.pid == 1000060120
        assert isinstance(particle.mass, float)
        assert isinstance(particle.charge, float)


class TestParticleCollection:
    def test_find(self, particles: ParticleCollection):
        proton = particles.find(PROTON)
        assert proton is not None
        assert proton.name == "p"
        iron = particles.find(ion_code(z=26, a=56))
        assert iron is not None
        assert iron.name == "Fe56"
        assert particles.find(3122) is None

    def test_contains(self, particles: ParticleCollection):
        neutron = particles.find(NEUTRON)
        assert PROTON in particles
        assert neutron in particles
        assert attr.evolve(neutron, mass=1.0) not in particles
        assert 3122 not in particles
        with pytest.raises(NotImplementedError):
            assert "p" in particles

    def test_replace_existing_code(
        self, particles: ParticleCollection, caplog
    ):
        n_particles = len(particles)
        with caplog.at_level(logging.WARNING):
            particles.add(Particle(name="neutron", pid=NEUTRON, mass=0.94))
        assert 'Replacing particle "n" with "neutron"' in caplog.text
        assert len(particles) == n_particles
        assert particles.find(NEUTRON).name == "neutron"  # type: ignore

    def test_discard(self, particles: ParticleCollection):
        n_particles = len(particles)
        particles.discard(PROTON)
        particles.discard(particles.find(NEUTRON))  # type: ignore
        particles.discard(3122)
        assert PROTON not in particles
        assert NEUTRON not in particles
        assert len(particles) == n_particles - 2

    def test_set_operations(self, particles: ParticleCollection):
        nuclei = {p.name for p in particles if p.pid > 1000000000}
        assert nuclei == {"H1", "n1", "C12", "N14", "Li7", "Fe56"}
        copied = ParticleCollection(particles)
        assert copied == particles
        copied.discard(PROTON)
        assert copied != particles


class TestIsotopes:
    def test_load_isotopes(self):
        isotopes = load_isotopes()
        oxygen = isotopes.find(ion_code(z=8, a=16))
        assert oxygen is not None
        assert oxygen.name == "O16"
        assert oxygen.charge == 8
        assert oxygen.mass == pytest.approx(14.895081)
        assert ion_code(z=1, a=1) in isotopes
        assert ion_code(z=0, a=1) in isotopes

    def test_load_custom_file(self, tmp_path):
        filename = tmp_path / "isotopes.yml"
        filename.write_text(
            "isotopes:\n"
            "  - name: C12\n"
            "    Z: 6\n"
            "    A: 12\n"
            "    mass: 11.174863\n"
        )
        isotopes = load_isotopes(str(filename))
        assert [p.name for p in isotopes] == ["C12"]

    @pytest.mark.parametrize(
        "instance",
        [
            {},
            {"isotopes": [{"name": "C12", "Z": 6, "A": 12}]},
            {"isotopes": [{"name": "C12", "Z": "6", "A": 12, "mass": 11.2}]},
        ],
    )
    def test_validation(self, instance):
        with pytest.raises(jsonschema.ValidationError):
            validate_isotopes(instance)


class TestDefaultParticles:
    def test_cached(self, particle_database: ParticleCollection):
        assert load_default_particles() is particle_database

    def test_pdg_entries(self, particle_database: ParticleCollection):
        proton = particle_database.find(PROTON)
        assert proton is not None
        assert proton.mass == pytest.approx(0.938272, abs=1e-6)
        assert proton.charge == 1
        assert particle_database.find(-211) is not None
        assert particle_database.find(14) is not None

    def test_isotope_entries(self, particle_database: ParticleCollection):
        iron = particle_database.find(ion_code(z=26, a=56))
        assert iron is not None
        assert iron.charge == 26
