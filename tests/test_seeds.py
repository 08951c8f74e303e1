"""Tests for seed derivation."""

import itertools

from py_galaxy.core import seeds


class TestSplitMix:
    """Test the splitmix64 mixer."""

    def test_reference_value(self):
        """First splitmix64 output for state 0."""
        assert seeds.splitmix64(0) == 0xE220A8397B1DCDAF

    def test_output_is_64_bit(self):
        for x in (0, 1, seeds.MASK64, 2**63):
            assert 0 <= seeds.splitmix64(x) <= seeds.MASK64

    def test_combine_reference_value(self):
        assert seeds.combine(1, 2, 3) == 15020427595393229491

    def test_combine_order_matters(self):
        assert seeds.combine(1, 2, 3) != seeds.combine(1, 3, 2)

    def test_combine_negative_values(self):
        """Negative values are well defined modulo 2^64."""
        value = seeds.combine(1, -1)

        assert 0 <= value <= seeds.MASK64
        assert value == seeds.combine(1, seeds.MASK64)


class TestSeedDerivation:
    """Test the hierarchy of derived seeds."""

    def test_deterministic(self):
        assert seeds.sector_seed(1, 0, 0, 0) == seeds.sector_seed(1, 0, 0, 0)
        assert seeds.system_seeds(42, 5) == seeds.system_seeds(42, 5)

    def test_galaxy_seed_changes_sector(self):
        assert seeds.sector_seed(1, 0, 0, 0) != seeds.sector_seed(2, 0, 0, 0)

    def test_no_sector_collisions(self):
        """Sector seeds are unique over a block of coordinates."""
        coords = itertools.product(range(-5, 5), range(-3, 3), range(-5, 5))
        values = [seeds.sector_seed(0x1, x, y, z) for x, y, z in coords]

        assert len(set(values)) == len(values)

    def test_levels_are_separated(self):
        """The same parent and index give different seeds per level."""
        parent = 0xDEADBEEF

        derived = {
            seeds.system_seed(parent, 3),
            seeds.star_seed(parent, 3),
            seeds.planet_seed(parent, 3),
        }
        assert len(derived) == 3

    def test_list_helpers(self):
        parent = 77

        assert seeds.system_seeds(parent, 3) == [seeds.system_seed(parent, n) for n in range(3)]
        assert seeds.star_seeds(parent, 2) == [seeds.star_seed(parent, n) for n in range(2)]
        assert seeds.planet_seeds(parent, 0) == []

    def test_create_galaxy_seed(self):
        value = seeds.create_galaxy_seed()

        assert isinstance(value, int)
        assert 0 <= value <= seeds.MASK64
