"""Shared fixtures for galaxy tests."""

import pytest

from py_galaxy.core.galaxy import Galaxy, GalaxyConfig
from py_galaxy.core.habitable_zone import frost_limit, habitable_zone_distances
from py_galaxy.core.models import Star


def make_star(seed=1234, mass=1.0, luminosity=1.0, temperature=5780.0, planet_count=7, type_index=13):
    """Build a star with the given physical properties and empty planet map."""
    hz = habitable_zone_distances(temperature, luminosity)
    return Star(
        seed=seed,
        type_index=type_index,
        spectral_class="G",
        luminosity_class="V",
        temperature_sequence="2",
        stellar_type="G2V",
        designation="main-sequence",
        mass=mass,
        radius=1.0,
        luminosity=luminosity,
        temperature=temperature,
        axial_rotation=2.2e6,
        color=(255, 244, 234),
        hz_distances=tuple(float(d) for d in hz),
        frost_limit=frost_limit(luminosity),
        planet_count=planet_count,
    )


class ScriptedStream:
    """Sample stream returning scripted values, then zeros."""

    def __init__(self, floats=(), uints=()):
        self.floats = list(floats)
        self.uints = list(uints)

    def next_float(self):
        return self.floats.pop(0) if self.floats else 0.0

    def next_uint(self, bound=None):
        value = self.uints.pop(0) if self.uints else 0
        assert bound is None or value < bound
        return value

    def uniform(self, low, high):
        return low + self.next_float() * (high - low)


@pytest.fixture
def sun():
    """A sun-like star hosting seven planets."""
    return make_star()


@pytest.fixture
def galaxy():
    """Galaxy with seed 0x1 and default configuration."""
    return Galaxy(seed=0x1, config=GalaxyConfig())


@pytest.fixture
def star_factory():
    """Factory building stars with chosen physical properties."""
    return make_star


@pytest.fixture
def scripted_stream():
    """Factory building scripted sample streams."""
    return ScriptedStream
