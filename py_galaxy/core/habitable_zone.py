"""
Habitable zone and frost limit of a star.

Habitable zone fluxes follow Kopparapu et al. (2013), "Habitable Zones Around
Main-Sequence Stars", with two additional limits. The limits are indexed:

- 0: unused
- 1: Recent Venus (inner HZ limit)
- 2: Runaway Greenhouse
- 3: Moist Greenhouse
- 4: Maximum Greenhouse
- 5: Early Mars (outer HZ limit)
- 6: 2 AU cloud limit
- 7: First CO2 condensation limit

The polynomial is fitted for 2600 K < T_eff < 7200 K; outside that range
fluxes may floor at zero, which yields a zero distance.
"""

import math

import numpy as np

from .tables import (
    FROST_TEMPERATURE_K,
    HZ_COEFFICIENTS,
    L_SOL_W,
    M_TO_AU,
    SIGMA,
    SOLAR_TEMPERATURE_K,
)


def habitable_zone_fluxes(temperature: float) -> np.ndarray:
    """
    Effective stellar flux at each habitable zone limit.

    Args:
        temperature: Photosphere temperature [K]

    Returns:
        Array of 8 fluxes [S_eff_sun], entry 0 always 0
    """
    t_star = temperature - SOLAR_TEMPERATURE_K
    powers = np.array([1.0, t_star, t_star**2, t_star**3, t_star**4])
    fluxes = powers @ HZ_COEFFICIENTS
    fluxes = np.maximum(fluxes, 0.0)
    fluxes[0] = 0.0
    return fluxes


def habitable_zone_distances(temperature: float, luminosity: float) -> np.ndarray:
    """
    Distances of the habitable zone limits from the star.

    Args:
        temperature: Photosphere temperature [K]
        luminosity: Stellar luminosity [Lsol]

    Returns:
        Array of 8 distances [au]; zero where the flux is zero
    """
    fluxes = habitable_zone_fluxes(temperature)
    distances = np.zeros_like(fluxes)
    positive = fluxes > 0.0
    distances[positive] = np.sqrt(max(luminosity, 0.0) / fluxes[positive])
    return distances


def frost_limit(luminosity: float) -> float:
    """
    Distance where the equilibrium temperature drops to 150 K.

    D_FL = (0.25 * L / (150^4 * 4 * pi * sigma)) ^ 1/2

    Args:
        luminosity: Stellar luminosity [Lsol]

    Returns:
        Frost limit distance [au]
    """
    watts = luminosity * L_SOL_W
    meters = math.sqrt(0.25 * watts / (FROST_TEMPERATURE_K**4 * 4 * math.pi * SIGMA))
    return meters * M_TO_AU
