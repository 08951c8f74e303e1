"""
Stellar model: star type sampling and derived physical properties.

A star's stream is consumed in this order:

1. type index (CDF sample)
2. mass within the type's range
3. radius within the type's range
4. temperature within the type's range
5. planet count

Luminosity, colour, subclass, habitable zone and frost limit are computed,
not sampled.
"""

import math
from typing import Tuple

import numpy as np
import structlog

from .habitable_zone import frost_limit, habitable_zone_distances
from .models import Star
from .pcg_prng import PCG32
from .tables import (
    LUMINOSITY_BREAKS,
    LUMINOSITY_CLASS,
    PLANET_COUNT_BOUND,
    R_SOL_KM,
    SPECTRAL_CLASS,
    STAR_DESIGNATION,
    STAR_MASS_MAX,
    STAR_MASS_MIN,
    STAR_RADIUS_MAX,
    STAR_RADIUS_MIN,
    STAR_TEMPERATURE_MAX,
    STAR_TEMPERATURE_MIN,
    STAR_TYPE_CDF,
)

logger = structlog.get_logger()


def cdf_index(sample: float, cdf: np.ndarray) -> int:
    """Index of the first cumulative bound >= sample."""
    idx = int(np.searchsorted(cdf, sample, side="left"))
    return min(idx, len(cdf) - 1)


def star_type_index(sample: float) -> int:
    """Map a uniform sample in [0, 1) to a star type index [0..23]."""
    return cdf_index(sample, STAR_TYPE_CDF)


def stellar_luminosity(mass: float) -> float:
    """
    Luminosity from mass using the piecewise mass-luminosity relation.

    - M < 0.43:       L = 0.23 * M^2.3
    - 0.43 <= M < 2:  L = M^4
    - 2 <= M < 20:    L = 1.5 * M^3.5
    - M >= 20:        L = 3200 * M

    Args:
        mass: Stellar mass [Msol]

    Returns:
        Luminosity [Lsol]
    """
    low, mid, high = LUMINOSITY_BREAKS
    if mass < low:
        return 0.23 * mass**2.3
    if mass < mid:
        return mass**4.0
    if mass < high:
        return 1.5 * mass**3.5
    return 3200.0 * mass


def temperature_subclass(type_index: int, temperature: float) -> int:
    """
    Temperature subclass digit within the spectral class.

    The type's temperature range is split into ten steps; 0 is the hottest
    and 9 the coolest.
    """
    t_min = STAR_TEMPERATURE_MIN[type_index]
    t_max = STAR_TEMPERATURE_MAX[type_index]
    step = (t_max - t_min) / 10.0
    if step <= 0:
        return 0
    return int(min(max((t_max - temperature) / step, 0.0), 9.0))


def star_color(temperature: float) -> Tuple[int, int, int]:
    """
    Blackbody colour approximation from temperature.

    Algorithm by Tanner Helland (2012), valid from 1000 K to 40000 K.

    Args:
        temperature: Temperature [K]

    Returns:
        (red, green, blue) in [0..255]
    """
    t = temperature / 100.0

    if t <= 66.0:
        red = 255.0
        green = 99.4708025861 * math.log(t) - 161.1195681661 if t > 0 else 0.0
    else:
        red = 329.698727446 * (t - 60.0) ** -0.1332047592
        green = 288.1221695283 * (t - 60.0) ** -0.0755148492

    if t >= 66.0:
        blue = 255.0
    elif t <= 19.0:
        blue = 0.0
    else:
        blue = 138.5177312231 * math.log(t - 10.0) - 305.0447927307

    return tuple(int(np.clip(channel, 0.0, 255.0)) for channel in (red, green, blue))


def axial_rotation(radius: float, mass: float) -> float:
    """Axial rotation period approximation: pi * R [km] / M [Msol]."""
    return math.pi * radius * R_SOL_KM / mass


def generate_star(seed: int, max_planets: int = PLANET_COUNT_BOUND - 1) -> Star:
    """
    Generate a star from its seed.

    Args:
        seed: Star seed
        max_planets: Cap applied to the sampled planet count

    Returns:
        Star with an empty planet map
    """
    prng = PCG32(seed)

    idx = star_type_index(prng.next_float())
    mass = prng.uniform(STAR_MASS_MIN[idx], STAR_MASS_MAX[idx])
    radius = prng.uniform(STAR_RADIUS_MIN[idx], STAR_RADIUS_MAX[idx])
    temperature = prng.uniform(STAR_TEMPERATURE_MIN[idx], STAR_TEMPERATURE_MAX[idx])
    planet_count = min(prng.next_uint(PLANET_COUNT_BOUND), max_planets)

    luminosity = stellar_luminosity(mass)
    subclass = str(temperature_subclass(idx, temperature))
    hz = habitable_zone_distances(temperature, luminosity)

    star = Star(
        seed=seed,
        type_index=idx,
        spectral_class=SPECTRAL_CLASS[idx],
        luminosity_class=LUMINOSITY_CLASS[idx],
        temperature_sequence=subclass,
        stellar_type=SPECTRAL_CLASS[idx] + subclass + LUMINOSITY_CLASS[idx],
        designation=STAR_DESIGNATION[idx],
        mass=float(mass),
        radius=float(radius),
        luminosity=float(luminosity),
        temperature=float(temperature),
        axial_rotation=axial_rotation(radius, mass),
        color=star_color(temperature),
        hz_distances=tuple(float(d) for d in hz),
        frost_limit=frost_limit(luminosity),
        planet_count=planet_count,
    )

    logger.debug(
        "Generated star",
        seed=seed,
        stellar_type=star.stellar_type,
        mass=star.mass,
        luminosity=star.luminosity,
        planet_count=planet_count,
    )
    return star
