"""
Star system generation.

A system's stream is consumed in this order: position x, y, z inside the
sector cube, then multiplicity.
"""

import structlog

from .models import System
from .pcg_prng import PCG32
from .stars import cdf_index
from .tables import SYSTEM_MULTIPLICITY_CDF

logger = structlog.get_logger()


def system_multiplicity(sample: float) -> int:
    """Number of stars [1..7] from a uniform sample."""
    return cdf_index(sample, SYSTEM_MULTIPLICITY_CDF) + 1


def generate_system(seed: int, sector_seed: int, sector_size: float, max_stars: int = 7) -> System:
    """
    Generate a system's position and multiplicity.

    Args:
        seed: System seed
        sector_seed: Parent sector seed
        sector_size: Sector edge length [ly]
        max_stars: Cap applied to the multiplicity

    Returns:
        System with an empty star map
    """
    prng = PCG32(seed)

    position = (
        prng.next_double() * sector_size,
        prng.next_double() * sector_size,
        prng.next_double() * sector_size,
    )
    multiplicity = min(system_multiplicity(prng.next_float()), max_stars)

    logger.debug("Generated system", seed=seed, sector=sector_seed, multiplicity=multiplicity)

    return System(seed=seed, sector=sector_seed, position=position, multiplicity=multiplicity)
