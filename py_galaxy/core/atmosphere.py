"""
Atmosphere model: presence, radius, pressure and gas composition.

Atmospheres are drawn from the owning planet's stream after the planet's own
properties. Gas giants always have an atmosphere whose radius equals the
planet radius; mercurian planets never have one.
"""

from typing import Dict, Optional

from .models import Atmosphere
from .pcg_prng import PCG32
from .tables import (
    ATMOSPHERE_PRESSURE_MAX,
    ATMOSPHERE_PRESSURE_MIN,
    ATMOSPHERE_PROBABILITY_MAX,
    ATMOSPHERE_RADIUS_FACTOR,
    GAS_GIANT_COLUMN,
    GAS_MAX_SHARE,
    GAS_ORDER,
    GAS_TIERS,
    MASS_CLASS_COUNT,
)

# Tolerance for the composition total
COMPOSITION_EPSILON = 1e-9


def generate_composition(prng: PCG32) -> Dict[str, float]:
    """
    Accrete a gas composition until the total volume reaches 100%.

    The first draw picks one of the two most common gases, the second one of
    the next two, every later draw one of the uncommon tail. Each draw adds
    60-100% of the gas's maximum share, capped by the remaining volume.

    Args:
        prng: Planet sample stream

    Returns:
        Mapping gas symbol -> volume fraction, summing to 1.0
    """
    composition: Dict[str, float] = {}
    total = 0.0
    run = 0

    while total < 1.0 - COMPOSITION_EPSILON:
        start, stop = GAS_TIERS[min(run, len(GAS_TIERS) - 1)]
        gas = GAS_ORDER[start + prng.next_uint(stop - start)]

        max_share = GAS_MAX_SHARE[gas]
        share = max_share * 0.6 + prng.next_float() * max_share * 0.4
        share = min(share, 1.0 - total)

        composition[gas] = composition.get(gas, 0.0) + share
        total += share
        run += 1

    return composition


def generate_atmosphere(type_index: int, planet_radius: float, prng: PCG32) -> Optional[Atmosphere]:
    """
    Create an atmosphere for a planet, or None if it has none.

    Args:
        type_index: Planet type index [0..17]
        planet_radius: Planet radius [km]
        prng: Planet sample stream

    Returns:
        Atmosphere or None
    """
    if prng.next_float() >= ATMOSPHERE_PROBABILITY_MAX[type_index]:
        return None

    column = type_index % MASS_CLASS_COUNT
    if column < GAS_GIANT_COLUMN:
        base, spread = ATMOSPHERE_RADIUS_FACTOR
        radius = planet_radius * (base + prng.next_float() * spread)
    else:
        radius = planet_radius

    pressure = prng.uniform(ATMOSPHERE_PRESSURE_MIN[column], ATMOSPHERE_PRESSURE_MAX[column])

    return Atmosphere(
        radius=float(radius),
        pressure=float(pressure),
        composition=generate_composition(prng),
    )


def format_composition(composition: Dict[str, float], separator: str = " ", detailed: bool = True) -> str:
    """
    Join composition gases into a display string.

    "H2:0.9553 N2:0.0447" when detailed, "H2 N2" otherwise.
    """
    if detailed:
        parts = [f"{gas}:{share:.4f}" for gas, share in composition.items()]
    else:
        parts = list(composition)
    return separator.join(parts)
