"""
Habitability estimates for oxygen-breathing, carbon-based life.

Planet habitability is the product

    P = P_inhz * P_temp * P_grav * P_atmo

where P_inhz is 1 inside the habitable zone and 0 elsewhere, and P_atmo only
applies to planets that have an atmosphere.
"""

from dataclasses import dataclass
from typing import Dict

from .models import Planet, Star
from .tables import (
    COMFORT_TEMPERATURE_K,
    G,
    G_EARTH,
    GAS_MAX_PARTIAL_PRESSURE,
    GRAVITY_LIMITS,
    MIN_OXYGEN_PARTIAL_PRESSURE,
    PROBABILITY_AGE,
    TEMPERATURE_LIMITS_K,
    TEMPERATURE_TOLERANCE_K,
)


@dataclass(frozen=True)
class HabitabilityScore:
    """Component probabilities and overall habitability of a planet."""

    temperature: float
    gravity: float
    atmosphere: float
    overall: float


def temperature_probability(temperature: float) -> float:
    """Probability from temperature; physiological limits -50 C to 50 C, best at 20 C."""
    low, high = TEMPERATURE_LIMITS_K
    if temperature < low or temperature > high:
        return 0.0
    return 1.0 - abs(COMFORT_TEMPERATURE_K - temperature) / TEMPERATURE_TOLERANCE_K


def relative_gravity(mass: float, radius: float) -> float:
    """
    Surface gravity relative to Earth.

    Args:
        mass: Planet mass [kg]
        radius: Planet radius [km]
    """
    if mass == 0 or radius == 0:
        return 0.0
    return (G * mass / (radius * 1e3) ** 2) / G_EARTH


def gravity_probability(g_rel: float) -> float:
    """Probability from gravity; physiological limits 0.2 g to 3 g."""
    low, high = GRAVITY_LIMITS
    if g_rel < low or g_rel > high:
        return 0.0
    return 1.0 - abs(1.0 - g_rel) / 2.0


def atmosphere_probability(composition: Dict[str, float], pressure: float = 1.0) -> float:
    """
    Binary breathability gate for an atmosphere.

    Args:
        composition: Gas symbol -> volume fraction
        pressure: Surface pressure [bar]

    Returns:
        1.0 if breathable, 0.0 otherwise
    """
    if "O2" not in composition:
        return 0.0

    for gas, share in composition.items():
        partial_pressure = share * pressure
        if partial_pressure > GAS_MAX_PARTIAL_PRESSURE[gas]:
            return 0.0
        if gas == "O2" and partial_pressure < MIN_OXYGEN_PARTIAL_PRESSURE:
            return 0.0

    return 1.0


def planet_habitability(planet: Planet) -> HabitabilityScore:
    """Estimate the habitability of a planet without technological aids."""
    prob_temp = temperature_probability(planet.temperature)
    prob_grav = gravity_probability(relative_gravity(planet.mass, planet.radius))

    if planet.has_atmosphere:
        prob_atmo = atmosphere_probability(planet.atmosphere.composition, planet.atmosphere.pressure)
    else:
        prob_atmo = 1.0

    overall = prob_temp * prob_grav * prob_atmo if planet.is_in_hz else 0.0

    return HabitabilityScore(
        temperature=prob_temp,
        gravity=prob_grav,
        atmosphere=prob_atmo,
        overall=overall,
    )


def has_planets_in_hz(star: Star) -> bool:
    """True if any generated planet of the star orbits in its habitable zone."""
    return any(planet.is_in_hz for planet in star.planets.values())


def habitable_planets_probability(star: Star) -> float:
    """
    Probability that a star hosts habitable planets.

    H = P_age * P_var * P_rad

    - P_age: the system is old enough for planet and atmosphere formation
    - P_var: 1 - luminosity output variation
    - P_rad: radiation factor, currently 1
    """
    prob_age = float(PROBABILITY_AGE[star.type_index])
    prob_var = 1.0 - star.output_variation
    prob_rad = 1.0
    return prob_age * prob_var * prob_rad
