"""Tests for planetary accretion."""

import math

import pytest

from py_galaxy.core import seeds
from py_galaxy.core.planets import (
    equilibrium_temperature,
    generate_planets,
    inverse_exp_distribution,
    is_in_habitable_zone,
    mass_class,
    mass_density,
    normal_distribution,
    orbit_distance,
    planet_map,
    planet_type_index,
)
from py_galaxy.core.stars import generate_star
from py_galaxy.core.tables import (
    G,
    HZ_INNER,
    HZ_OUTER,
    M_EARTH_KG,
    MASS_CLASS_MAX,
    MASS_CLASS_MIN,
    PLANET_TYPE_COUNT,
    YEAR_EARTH_S,
)


def _planets_of(star):
    return generate_planets(star, seeds.planet_seeds(star.seed, star.planet_count))


class TestDistributions:
    """Test the disc density helpers."""

    def test_normal_peak(self):
        sigma = 0.5
        assert normal_distribution(1.0, 1.0, sigma) == pytest.approx(1.0 / (sigma * math.sqrt(2 * math.pi)))

    def test_inverse_exp(self):
        assert inverse_exp_distribution(0.0, 0.5) == 1.0
        assert inverse_exp_distribution(4.0, 0.5) == pytest.approx(math.exp(-2.0))

    def test_mass_density_regimes(self):
        frost = 4.0

        inner = mass_density(1.0, frost, 2.0)
        outer = mass_density(1.0, frost, 9.0)

        assert inner == pytest.approx(4.2e24 * normal_distribution(2.0, 2.0, 0.25))
        assert outer == pytest.approx(8e26 * math.exp(-3.0))

    def test_equilibrium_temperature_at_one_au(self):
        assert equilibrium_temperature(1.0, 1.0) == pytest.approx(278.6, abs=0.5)

    def test_equilibrium_temperature_falls_off(self):
        assert equilibrium_temperature(1.0, 4.0) == pytest.approx(equilibrium_temperature(1.0, 1.0) / 2.0)


class TestClassification:
    """Test the periodic table of planets lookup."""

    def test_mass_bands_are_contiguous(self):
        assert list(MASS_CLASS_MIN[1:]) == list(MASS_CLASS_MAX[:-1])

    @pytest.mark.parametrize(
        "mass_earth, expected",
        [(0.05, 0), (0.11, 1), (0.3, 1), (1.0, 2), (5.0, 3), (20.0, 4), (100.0, 5), (5000.0, 5)],
    )
    def test_mass_class(self, mass_earth, expected):
        assert mass_class(mass_earth * M_EARTH_KG) == expected

    def test_temperature_zones(self):
        earth = M_EARTH_KG

        assert planet_type_index(0.5, earth, 0.75, 1.77) == 2
        assert planet_type_index(1.0, earth, 0.75, 1.77) == 8
        assert planet_type_index(3.0, earth, 0.75, 1.77) == 14

    def test_habitable_zone_is_strict(self):
        hz = (0.0, 1.0, 1.1, 1.2, 1.8, 2.0, 2.5, 3.0)

        assert is_in_habitable_zone(1.5, hz)
        assert not is_in_habitable_zone(1.0, hz)
        assert not is_in_habitable_zone(2.0, hz)
        assert not is_in_habitable_zone(0.5, hz)
        assert not is_in_habitable_zone(3.0, hz)


class TestOrbitDistance:
    """Test the next-orbit draw."""

    def test_inside_frost_limit(self, scripted_stream):
        distance = orbit_distance(scripted_stream(floats=[0.5]), 0.0, 0.0, 3.0)

        assert distance == pytest.approx(1.6)

    def test_outside_frost_limit(self, scripted_stream):
        distance = orbit_distance(scripted_stream(floats=[0.5]), 4.0, 3.0, 3.0)

        assert distance == pytest.approx(6.0)

    def test_shifted_past_lower_limit(self, scripted_stream):
        distance = orbit_distance(scripted_stream(floats=[0.0]), 10.0, 3.0, 3.0)

        assert distance == pytest.approx(14.5)


class TestGeneratePlanets:
    """Test planet generation around a star."""

    def test_zero_planets(self, star_factory):
        star = star_factory(planet_count=0)

        assert generate_planets(star, []) == []

    def test_deterministic(self, sun):
        assert _planets_of(sun) == _planets_of(sun)

    def test_bands_are_contiguous(self, sun):
        planets = _planets_of(sun)

        assert len(planets) == sun.planet_count
        assert planets[0].lower_limit == 0.0
        for inner, outer in zip(planets, planets[1:]):
            assert inner.upper_limit == outer.lower_limit
            assert outer.star_distance > inner.star_distance

    def test_band_centred_on_planet(self, sun):
        for planet in _planets_of(sun):
            assert planet.upper_limit - planet.star_distance == pytest.approx(
                planet.star_distance - planet.lower_limit
            )

    def test_derived_properties(self, sun):
        for planet in _planets_of(sun):
            assert planet.mu == pytest.approx(G * planet.mass)
            assert planet.year == pytest.approx(planet.star_distance**1.5 * YEAR_EARTH_S)
            assert planet.equator_temperature >= planet.temperature >= planet.pole_temperature
            assert planet.radius > 0

    def test_properties_across_stars(self):
        for seed in range(80):
            star = generate_star(seed)
            for planet in _planets_of(star):
                assert 0 <= planet.type_index < PLANET_TYPE_COUNT
                assert planet.is_in_hz == (
                    star.hz_distances[HZ_INNER] < planet.star_distance < star.hz_distances[HZ_OUTER]
                )

                if planet.is_gas_giant:
                    assert planet.has_atmosphere
                    assert planet.atmosphere.radius == planet.radius
                if planet.type_column == 0:
                    assert planet.atmosphere is None
                if planet.has_atmosphere:
                    assert sum(planet.atmosphere.composition.values()) == pytest.approx(1.0, abs=1e-4)

    def test_habitable_zone_flag_scenario(self, star_factory):
        """Sun-like stars produce planets both inside and outside the HZ."""
        flags = []
        for seed in range(40):
            star = star_factory(seed=seed)
            flags.extend(planet.is_in_hz for planet in _planets_of(star))

        assert any(flags)
        assert not all(flags)

    def test_planet_map_keeps_order(self, sun):
        planets = _planets_of(sun)
        mapped = planet_map(planets)

        assert list(mapped) == [p.seed for p in planets]
        assert list(mapped.values()) == planets
