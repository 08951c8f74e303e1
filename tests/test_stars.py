"""Tests for the stellar model."""

import numpy as np
import pytest

from py_galaxy.core.pcg_prng import PCG32
from py_galaxy.core.stars import (
    axial_rotation,
    generate_star,
    star_color,
    star_type_index,
    stellar_luminosity,
    temperature_subclass,
)
from py_galaxy.core.tables import (
    PLANET_COUNT_BOUND,
    STAR_MASS_MAX,
    STAR_MASS_MIN,
    STAR_TEMPERATURE_MAX,
    STAR_TEMPERATURE_MIN,
    STAR_TYPE_CDF,
    STAR_TYPE_COUNT,
)


class TestStarType:
    """Test star type sampling from the CDF."""

    def test_table_shape(self):
        assert len(STAR_TYPE_CDF) == STAR_TYPE_COUNT
        assert np.all(np.diff(STAR_TYPE_CDF) > 0)
        assert STAR_TYPE_CDF[-1] == 1.0

    def test_first_bound_greater_or_equal(self):
        """The first cumulative bound >= sample wins."""
        assert star_type_index(0.0) == 0
        assert star_type_index(0.015152) == 0
        assert star_type_index(0.0152) == 1
        assert star_type_index(0.5) == 12
        assert star_type_index(0.9999999) == 23

    def test_range(self):
        prng = PCG32(2024)
        for _ in range(1000):
            assert 0 <= star_type_index(prng.next_float()) < STAR_TYPE_COUNT


class TestStellarPhysics:
    """Test the closed-form stellar relations."""

    def test_luminosity_regimes(self):
        assert stellar_luminosity(0.2) == pytest.approx(0.23 * 0.2**2.3)
        assert stellar_luminosity(1.0) == pytest.approx(1.0)
        assert stellar_luminosity(10.0) == pytest.approx(1.5 * 10.0**3.5)
        assert stellar_luminosity(25.0) == pytest.approx(80000.0)

    def test_luminosity_increases_with_mass(self):
        masses = np.linspace(0.01, 100.0, 200)
        lums = [stellar_luminosity(m) for m in masses]

        assert all(b > a for a, b in zip(lums, lums[1:]))

    def test_temperature_subclass(self):
        """0 is the hottest subclass and 9 the coolest (G V: 5440-6050 K)."""
        assert temperature_subclass(13, 6050.0) == 0
        assert temperature_subclass(13, 5745.0) == 5
        assert temperature_subclass(13, 5440.0) == 9

    def test_color_white_point(self):
        assert star_color(6600.0) == (255, 255, 255)

    def test_color_cool_star(self):
        assert star_color(1000.0) == (255, 67, 0)

    def test_color_clamped(self):
        for temperature in (500.0, 3000.0, 10000.0, 40000.0):
            assert all(0 <= c <= 255 for c in star_color(temperature))

    def test_axial_rotation_positive(self):
        assert axial_rotation(1.0, 1.0) > 0


class TestGenerateStar:
    """Test star generation from a seed."""

    def test_deterministic(self):
        assert generate_star(42) == generate_star(42)

    def test_consumption_order(self):
        """Type, mass, radius, temperature, then planet count."""
        star = generate_star(0xABCDEF)

        prng = PCG32(0xABCDEF)
        idx = star_type_index(prng.next_float())
        mass = prng.next_float()
        prng.next_float()
        temperature = prng.next_float()
        planet_count = prng.next_uint(PLANET_COUNT_BOUND)

        assert star.type_index == idx
        assert star.mass == pytest.approx(STAR_MASS_MIN[idx] + mass * (STAR_MASS_MAX[idx] - STAR_MASS_MIN[idx]))
        assert star.temperature == pytest.approx(
            STAR_TEMPERATURE_MIN[idx] + temperature * (STAR_TEMPERATURE_MAX[idx] - STAR_TEMPERATURE_MIN[idx])
        )
        assert star.planet_count == planet_count

    def test_properties_in_range(self):
        for seed in range(200):
            star = generate_star(seed)
            idx = star.type_index

            assert 0 <= idx < STAR_TYPE_COUNT
            assert STAR_MASS_MIN[idx] <= star.mass <= STAR_MASS_MAX[idx]
            assert star.luminosity == pytest.approx(stellar_luminosity(star.mass))
            assert star.stellar_type == star.spectral_class + star.temperature_sequence + star.luminosity_class
            assert 0 <= star.planet_count < PLANET_COUNT_BOUND
            assert len(star.hz_distances) == 8
            assert star.hz_distances[0] == 0.0
            assert all(d >= 0 for d in star.hz_distances)
            assert star.frost_limit > 0
            assert star.output_variation == 0.0
            assert star.planets == {}

    def test_planet_cap(self):
        for seed in range(50):
            assert generate_star(seed, max_planets=2).planet_count <= 2
