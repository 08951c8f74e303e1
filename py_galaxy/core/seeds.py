"""
Seed derivation for the galaxy hierarchy.

Every child seed is a pure function of its parent seed and its position or
index. Values are combined with splitmix64 and a per-level salt so that, for
example, system 3 of a sector and star 3 of a system never share a seed.
"""

import secrets
from typing import List

MASK64 = 0xFFFFFFFFFFFFFFFF

# Per-level salts (domain separation)
SECTOR_SALT = 0x5EC7_0A11_5EC7_0A11
SYSTEM_SALT = 0x5757_E111_5757_E111
STAR_SALT = 0x57A2_57A2_57A2_57A2
PLANET_SALT = 0x91A2_E7E7_91A2_E7E7


def splitmix64(x: int) -> int:
    """One splitmix64 step: advance by the golden gamma and finalize."""
    x = (x + 0x9E3779B97F4A7C15) & MASK64
    z = x
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return (z ^ (z >> 31)) & MASK64


def combine(seed: int, *values: int) -> int:
    """
    Hash-combine a 64-bit seed with a sequence of integers.

    Negative values are taken modulo 2^64, so signed sector coordinates are
    well defined.

    Args:
        seed: Parent seed
        *values: Positional or index parameters

    Returns:
        Unsigned 64-bit child seed
    """
    x = splitmix64(int(seed) & MASK64)
    for v in values:
        x = splitmix64(x ^ (int(v) & MASK64))
    return x


def create_galaxy_seed() -> int:
    """Create a pristine galaxy seed from the system's random source."""
    return secrets.randbits(64)


def sector_seed(galaxy_seed: int, x: int, y: int, z: int) -> int:
    """Seed of the sector at integer coordinate (x, y, z)."""
    return combine(galaxy_seed, SECTOR_SALT, x, y, z)


def system_seed(sector_seed_: int, index: int) -> int:
    """Seed of the index-th system in a sector."""
    return combine(sector_seed_, SYSTEM_SALT, index)


def star_seed(system_seed_: int, index: int) -> int:
    """Seed of the index-th star in a system."""
    return combine(system_seed_, STAR_SALT, index)


def planet_seed(star_seed_: int, index: int) -> int:
    """Seed of the index-th planet of a star."""
    return combine(star_seed_, PLANET_SALT, index)


def system_seeds(sector_seed_: int, count: int) -> List[int]:
    """Seeds for systems 0..count-1 of a sector."""
    return [system_seed(sector_seed_, n) for n in range(count)]


def star_seeds(system_seed_: int, count: int) -> List[int]:
    """Seeds for stars 0..count-1 of a system."""
    return [star_seed(system_seed_, n) for n in range(count)]


def planet_seeds(star_seed_: int, count: int) -> List[int]:
    """Seeds for planets 0..count-1 of a star."""
    return [planet_seed(star_seed_, n) for n in range(count)]
