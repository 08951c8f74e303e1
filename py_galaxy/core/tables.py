"""
Physical constants and probability tables for galaxy generation.

All tables are module-level constants loaded once: numeric tables are
read-only NumPy arrays, string tables are tuples. Star tables are indexed by
star type (0-23), planet tables by planet type (0-17).
"""

from types import MappingProxyType

import numpy as np


def _frozen(values, dtype=np.float64) -> np.ndarray:
    """Build a read-only NumPy array."""
    array = np.array(values, dtype=dtype)
    array.flags.writeable = False
    return array


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

G = 6.67384e-11  # gravitation constant [m^3 kg^-1 s^-2]
G_EARTH = 9.81  # Earth surface gravity [m s^-2]

AU_KM = 1.49597871e8  # au to km
M_TO_AU = 6.68458712e-12  # meter to au

R_SOL_KM = 696342.0  # Sun radius [km]
R_EARTH_KM = 6371.0  # Earth radius [km]
M_EARTH_KG = 5.972e24  # Earth mass [kg]

L_SOL_W = 3.84e26  # Sun luminosity [W]
SIGMA = 5.67e-8  # Stefan-Boltzmann constant [W m^-2 K^-4]

YEAR_EARTH_S = 31558149.5  # sidereal year [s]

FROST_TEMPERATURE_K = 150.0
SOLAR_TEMPERATURE_K = 5780.0

# ---------------------------------------------------------------------------
# Systems
# ---------------------------------------------------------------------------

# Multiplicity cumulative distribution (unary .. septenary)
SYSTEM_MULTIPLICITY_CDF = _frozen([0.800, 0.900, 0.950, 0.975, 0.988, 0.996, 1.000])

MULTIPLICITY_NAMES = (
    "Unary", "Binary", "Trinary", "Quaternary", "Quintenary", "Sextenary", "Septenary",
)

# ---------------------------------------------------------------------------
# Stars
# ---------------------------------------------------------------------------

STAR_TYPE_COUNT = 24

# Cumulative distribution of star types
STAR_TYPE_CDF = _frozen([
    0.015152, 0.030303, 0.045455,  # B, A, F I
    0.060606, 0.075758, 0.090909,  # G, K, M I
    0.106061, 0.121212, 0.136364,  # G, K, M III
    0.166667, 0.242424, 0.378788,  # O, B, A V
    0.530303, 0.681818, 0.833333,  # F, G, K V
    0.924242, 0.969697, 0.984848,  # M, L, T V
    0.992424, 0.993939, 0.995454,  # Y, D, R
    0.996970, 0.998485, 1.000000,  # N, S, W
])

SPECTRAL_CLASS = (
    "B", "A", "F", "G", "K", "M",
    "G", "K", "M",
    "O", "B", "A", "F", "G", "K", "M", "L", "T",
    "Y", "D", "R", "N", "S", "W",
)

LUMINOSITY_CLASS = (
    "I", "I", "I", "I", "I", "I",
    "III", "III", "III",
    "V", "V", "V", "V", "V", "V", "V", "V", "V",
    "", "", "", "", "", "",
)

STAR_DESIGNATION = (
    "blue supergiant", "supergiant", "supergiant",
    "supergiant", "red supergiant", "red supergiant",
    "regular giant", "regular giant", "regular giant",
    "main-sequence", "main-sequence", "main-sequence",
    "main-sequence", "main-sequence", "orange dwarf",
    "red dwarf", "red dwarf", "methane dwarf",
    "brown dwarf", "white dwarf", "carbon-based",
    "carbon-based", "zirconium-monoxide-based star", "dying supergiant",
)

# Probability of an old enough system for planet formation, per star type
PROBABILITY_AGE = _frozen([
    0.10, 0.10, 0.10, 0.10, 0.10, 0.10,
    0.10, 0.10, 0.10,
    0.20, 0.50, 0.90, 1.00, 1.00, 1.00, 0.60, 0.30, 0.10,
    0.05, 0.01, 0.01, 0.01, 0.01, 0.01,
])

# Radius range [Rsol]
STAR_RADIUS_MIN = _frozen([
    30.0, 30.0, 30.0, 30.0, 25.0, 11.0,
    20.0, 15.0, 10.0,
    6.6, 1.8, 1.4, 1.15, 0.96, 0.70, 0.08,
    0.08, 0.008, 0.08, 0.08,
    0.01, 0.01, 0.01, 0.01,
])
STAR_RADIUS_MAX = _frozen([
    2000.0, 1900.0, 1800.0, 1700.0, 1600.0, 1.0,
    200.0, 50.0, 30.0,
    30.0, 6.6, 1.8, 1.40, 1.15, 0.96, 0.62,
    0.15, 0.1, 0.14, 0.1,
    0.1, 0.1, 0.1, 0.1,
])

# Mass range [Msol]
STAR_MASS_MIN = _frozen([
    10.0, 5.0, 4.0, 3.0, 2.0, 7.0,
    30.0, 20.0, 3.0,
    16.0, 2.1, 1.4, 1.04, 0.8, 0.08, 0.075,
    0.005, 0.005, 0.0005, 0.005,
    0.005, 0.005, 0.005, 0.005,
])
STAR_MASS_MAX = _frozen([
    100.0, 30.0, 20.0, 11.0, 40.0, 40.0,
    100.0, 70.0, 15.0,
    200.0, 16.0, 2.1, 1.4, 1.04, 0.45, 0.6,
    0.08, 0.008, 0.02, 0.008,
    0.08, 0.08, 0.08, 0.08,
])

# Effective temperature range [K]
STAR_TEMPERATURE_MIN = _frozen([
    9700.0, 8300.0, 6150.0, 5050.0, 3750.0, 2950.0,
    4870.0, 3780.0, 2800.0,
    3780.0, 11400.0, 7920.0, 6300.0, 5440.0, 4000.0, 2600.0,
    1500.0, 800.0, 500.0, 500.0,
    500.0, 500.0, 500.0, 500.0,
])
STAR_TEMPERATURE_MAX = _frozen([
    21000.0, 9400.0, 7500.0, 5800.0, 4900.0, 3690.0,
    5010.0, 4720.0, 3660.0,
    54000.0, 29200.0, 9600.0, 7350.0, 6050.0, 5240.0, 3750.0,
    2600.0, 1400.0, 1000.0, 800.0,
    800.0, 800.0, 800.0, 800.0,
])

# Mass-luminosity regime break points [Msol]
LUMINOSITY_BREAKS = (0.43, 2.0, 20.0)

# Upper bound (exclusive) of the planet count draw per star
PLANET_COUNT_BOUND = 8

# ---------------------------------------------------------------------------
# Habitable zone (Kopparapu et al. 2013)
# ---------------------------------------------------------------------------

HZ_DESCRIPTIONS = (
    "unused",
    "Inner HZ 'Recent Venus' limit",
    "'Runaway Greenhouse' limit",
    "Inner HZ 'Moist Greenhouse' (waterloss) limit",
    "Outer HZ 'Maximum Greenhouse' limit",
    "Outer HZ 'Early Mars' limit",
    "2 AU Cloud limit",
    "First CO2 Condensation limit",
)

HZ_INNER = 1
HZ_OUTER = 5

# Coefficient rows: S_eff_sun, a, b, c, d; column 0 is reserved
HZ_COEFFICIENTS = _frozen([
    [0.0, 1.7763, 1.0385, 1.0146, 0.3507, 0.3207, 0.2484, 0.5408],
    [0.0, 1.4335e-4, 1.2456e-4, 8.1884e-5, 5.9578e-5, 5.4471e-5, 4.2588e-5, 4.4499e-5],
    [0.0, 3.3954e-9, 1.4612e-8, 1.9394e-9, 1.6707e-9, 1.5275e-9, 1.1963e-9, 1.4065e-10],
    [0.0, -7.6364e-12, -7.6345e-12, -4.3618e-12, -3.0058e-12, -2.7481e-12, -2.1709e-12, -2.2750e-12],
    [0.0, -1.1950e-15, -1.7511e-15, -6.8260e-16, -5.1925e-16, -4.7474e-16, -3.8282e-16, -3.3509e-16],
])

# ---------------------------------------------------------------------------
# Planets: periodic table of planets (3 zones x 6 mass classes)
# ---------------------------------------------------------------------------

PLANET_TYPE_COUNT = 18
MASS_CLASS_COUNT = 6

TEMPERATURE_ZONES = ("Hot", "Warm", "Cold")
ZONE_OFFSET_HOT = 0
ZONE_OFFSET_WARM = 6
ZONE_OFFSET_COLD = 12

PLANET_FAMILIES = ("Mercurian", "Subterran", "Terran", "Superterran", "Neptunian", "Jovian")
PLANET_CLASSES = ("Terrestrial",) * 4 + ("Gas Giant",) * 2

PLANET_TYPES = tuple(
    f"{zone} {family}" for zone in TEMPERATURE_ZONES for family in PLANET_FAMILIES
)

# First gas giant column of the periodic table
GAS_GIANT_COLUMN = 4

# Mass class bounds [Mearth]
MASS_CLASS_MIN = _frozen([0.0, 0.1, 0.5, 2.0, 10.0, 50.0])
MASS_CLASS_MAX = _frozen([0.1, 0.5, 2.0, 10.0, 50.0, 1e3])

# Radius range per mass class [Rearth]
RADIUS_CLASS_MIN = _frozen([0.03, 0.4, 0.8, 1.25, 2.6, 6.0])
RADIUS_CLASS_MAX = _frozen([0.4, 0.8, 1.25, 2.6, 6.0, 1e3])

ATMOSPHERE_PROBABILITY_MAX = _frozen([
    0.0, 0.001, 0.001, 0.001, 1.0, 1.0,
    0.0, 0.02, 0.05, 0.01, 1.0, 1.0,
    0.0, 0.0, 0.0, 0.0, 1.0, 1.0,
])

# Surface pressure range per mass class [bar]
ATMOSPHERE_PRESSURE_MIN = _frozen([0.0, 0.1, 0.5, 0.5, 10.0, 1e2])
ATMOSPHERE_PRESSURE_MAX = _frozen([0.001, 0.5, 2.0, 3.0, 1e3, 2e3])

# Atmosphere radius factor range for terrestrial planets
ATMOSPHERE_RADIUS_FACTOR = (1.01, 0.09)

# Accretion model
MIN_PLANET_GAP_AU = 0.1
OUTER_SPACING_MIN = 1.5
INNER_DENSITY_SCALE = 4.2e24  # [kg au^-1 Msol^-1]
OUTER_DENSITY_SCALE = 8.0e26  # [kg au^-1 Msol^-1]
OUTER_DENSITY_SKEW = 0.5
SURFACE_TEMPERATURE_SPREAD = 50.0  # [K]

# ---------------------------------------------------------------------------
# Atmosphere gases
# ---------------------------------------------------------------------------

# More frequent gases first
GAS_ORDER = ("CO2", "H2", "N2", "O2", "He", "Ar", "CH4", "Ne", "Kr", "Xe")

# Composition tiers as [start, stop) ranges into GAS_ORDER
GAS_TIERS = ((0, 2), (2, 4), (4, 10))

# Maximum volume share of each gas
GAS_MAX_SHARE = MappingProxyType({
    "CO2": 0.965,
    "H2": 0.963,
    "N2": 0.780,
    "O2": 0.210,
    "He": 0.102,
    "Ar": 0.016,
    "CH4": 0.015,
    "Ne": 0.0001,
    "Kr": 0.0001,
    "Xe": 0.0001,
})

# Maximum tolerable partial pressure [bar]
GAS_MAX_PARTIAL_PRESSURE = MappingProxyType({
    "He": 2934.0,
    "Ne": 66.0,
    "H2": 16.5,
    "N2": 5.94,
    "O2": 1.6,
    "Ar": 1.12,
    "Kr": 0.12,
    "CO2": 0.015,
    "Xe": 0.009,
    "CH4": 0.001,
})

# ---------------------------------------------------------------------------
# Habitability
# ---------------------------------------------------------------------------

COMFORT_TEMPERATURE_K = 293.0
TEMPERATURE_LIMITS_K = (223.0, 323.0)
TEMPERATURE_TOLERANCE_K = 70.0
GRAVITY_LIMITS = (0.2, 3.0)
MIN_OXYGEN_PARTIAL_PRESSURE = 0.16
