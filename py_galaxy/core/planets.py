"""
Planet generation following the nebular hypothesis.

The frost limit (about 150 K) splits the disc: small rocky planets accrete
inward of it, following a normal mass density distribution; gas giants
accrete outward of it, following an inverse exponential distribution.

Each planet accretes the mass of its band [lower_limit, upper_limit), where
the band is centred on the planet and starts where the previous planet's
band ended.

A planet's stream is consumed in this order:

1. orbit distance
2. equator temperature offset
3. pole temperature offset
4. radius within the type's range
5. atmosphere (see ``atmosphere.generate_atmosphere``)
"""

import math
from typing import Dict, List, Sequence

import numpy as np
import structlog

from .atmosphere import generate_atmosphere
from .models import Planet, Star
from .pcg_prng import PCG32
from .tables import (
    AU_KM,
    G,
    HZ_INNER,
    HZ_OUTER,
    INNER_DENSITY_SCALE,
    L_SOL_W,
    M_EARTH_KG,
    MASS_CLASS_COUNT,
    MASS_CLASS_MIN,
    MIN_PLANET_GAP_AU,
    OUTER_DENSITY_SCALE,
    OUTER_DENSITY_SKEW,
    OUTER_SPACING_MIN,
    R_EARTH_KM,
    RADIUS_CLASS_MAX,
    RADIUS_CLASS_MIN,
    SIGMA,
    SURFACE_TEMPERATURE_SPREAD,
    YEAR_EARTH_S,
    ZONE_OFFSET_COLD,
    ZONE_OFFSET_HOT,
    ZONE_OFFSET_WARM,
)

logger = structlog.get_logger()


def normal_distribution(x: float, mu: float, sigma: float) -> float:
    """Normal probability density at x."""
    return math.exp(-((x - mu) ** 2) / (2 * sigma**2)) / (sigma * math.sqrt(2 * math.pi))


def inverse_exp_distribution(x: float, skew: float) -> float:
    """Inverse exponential density exp(-x^skew)."""
    return math.exp(-(x**skew))


def mass_density(star_mass: float, frost_limit: float, distance: float) -> float:
    """
    Disc mass density at a distance from the star.

    Args:
        star_mass: Star mass [Msol]
        frost_limit: Frost limit [au]
        distance: Distance from the star [au]

    Returns:
        Mass density [kg au^-1]
    """
    if distance < frost_limit:
        return INNER_DENSITY_SCALE * star_mass * normal_distribution(
            distance, frost_limit / 2.0, frost_limit / 16.0
        )
    return OUTER_DENSITY_SCALE * star_mass * inverse_exp_distribution(distance, OUTER_DENSITY_SKEW)


def equilibrium_temperature(luminosity: float, distance: float) -> float:
    """
    Median planet surface temperature.

    T = ((Aabs/Arad) * L * (1 - albedo) / (4 * pi * sigma * eta * D^2)) ^ 1/4
    with Aabs/Arad = 1/4, albedo = 0 and emissivity eta = 1.

    Args:
        luminosity: Star luminosity [Lsol]
        distance: Distance from the star [au]

    Returns:
        Temperature [K]
    """
    distance_m = distance * AU_KM * 1e3
    flux = luminosity * L_SOL_W / (4 * math.pi * SIGMA * distance_m**2)
    return (0.25 * flux) ** 0.25


def is_in_habitable_zone(distance: float, hz_distances: Sequence[float]) -> bool:
    """True if the distance lies strictly between the inner and outer HZ limits."""
    return hz_distances[HZ_INNER] < distance < hz_distances[HZ_OUTER]


def mass_class(mass: float) -> int:
    """Mass class column (0 Mercurian .. 5 Jovian) for a mass in kg."""
    mass_earth = mass / M_EARTH_KG
    return int(np.searchsorted(MASS_CLASS_MIN[1:], mass_earth, side="right"))


def planet_type_index(distance: float, mass: float, hz_inner: float, hz_outer: float) -> int:
    """
    Index into the periodic table of planets.

    The index is the temperature zone offset (hot 0, warm 6, cold 12) plus the
    mass class column.
    """
    zone = ZONE_OFFSET_WARM
    if distance < hz_inner:
        zone = ZONE_OFFSET_HOT
    if distance > hz_outer:
        zone = ZONE_OFFSET_COLD
    return zone + mass_class(mass)


def orbit_distance(prng: PCG32, lower_limit: float, previous_distance: float, frost_limit: float) -> float:
    """
    Draw the next planet's distance from the star.

    Inward of the frost limit the distance is uniform between the running
    lower limit and the frost limit. Outward of it the previous distance is
    scaled by a factor in [1.5, 2.5).
    """
    sample = prng.next_float()
    if lower_limit < frost_limit:
        return lower_limit + MIN_PLANET_GAP_AU + sample * (frost_limit - lower_limit)

    distance = previous_distance * (OUTER_SPACING_MIN + sample)
    if distance <= lower_limit:
        distance += lower_limit
    return distance


def generate_planet(seed: int, star: Star, lower_limit: float, previous_distance: float) -> Planet:
    """
    Generate one planet of a star.

    Args:
        seed: Planet seed
        star: Parent star (mass, luminosity, HZ and frost limit are read)
        lower_limit: Start of this planet's accretion band [au]
        previous_distance: Distance of the previous planet [au], 0 for the first

    Returns:
        Planet; its upper_limit is the next planet's lower_limit
    """
    prng = PCG32(seed)

    distance = orbit_distance(prng, lower_limit, previous_distance, star.frost_limit)

    # Accrete the band centred on the planet
    upper_limit = 2.0 * distance - lower_limit
    density = mass_density(star.mass, star.frost_limit, distance)
    mass = density * (upper_limit - lower_limit)

    temperature = equilibrium_temperature(star.luminosity, distance)
    equator_temperature = temperature + prng.next_float() * SURFACE_TEMPERATURE_SPREAD
    pole_temperature = temperature - prng.next_float() * SURFACE_TEMPERATURE_SPREAD

    type_index = planet_type_index(distance, mass, star.hz_inner, star.hz_outer)
    column = type_index % MASS_CLASS_COUNT

    radius = prng.uniform(RADIUS_CLASS_MIN[column], RADIUS_CLASS_MAX[column]) * R_EARTH_KM

    planet = Planet(
        seed=seed,
        star_distance=distance,
        lower_limit=lower_limit,
        upper_limit=upper_limit,
        is_in_hz=is_in_habitable_zone(distance, star.hz_distances),
        mass=mass,
        mu=G * mass,
        temperature=temperature,
        equator_temperature=equator_temperature,
        pole_temperature=pole_temperature,
        type_index=type_index,
        radius=float(radius),
        # TODO: correlate day length with planet type, mass and density
        day=2 * math.pi * float(radius),
        year=math.sqrt(distance**3) * YEAR_EARTH_S,
    )
    planet.atmosphere = generate_atmosphere(type_index, planet.radius, prng)

    logger.debug(
        "Generated planet",
        seed=seed,
        star=star.seed,
        distance=distance,
        type_index=type_index,
        has_atmosphere=planet.has_atmosphere,
    )
    return planet


def generate_planets(star: Star, planet_seeds: Sequence[int]) -> List[Planet]:
    """
    Generate a star's planets outward, one band after another.

    Args:
        star: Parent star
        planet_seeds: Planet seeds in orbital order

    Returns:
        Planets ordered outward; empty if the star hosts none
    """
    planets = []
    lower_limit = 0.0
    distance = 0.0

    for seed in planet_seeds:
        planet = generate_planet(seed, star, lower_limit, distance)
        planets.append(planet)
        lower_limit = planet.upper_limit
        distance = planet.star_distance

    return planets


def planet_map(planets: Sequence[Planet]) -> Dict[int, Planet]:
    """Key planets by seed, preserving orbital order."""
    return {planet.seed: planet for planet in planets}

