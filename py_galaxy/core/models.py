"""Data structures for generated galaxy content."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .tables import (
    GAS_GIANT_COLUMN,
    HZ_INNER,
    HZ_OUTER,
    M_EARTH_KG,
    MASS_CLASS_COUNT,
    MULTIPLICITY_NAMES,
    PLANET_CLASSES,
    PLANET_FAMILIES,
    PLANET_TYPES,
    TEMPERATURE_ZONES,
)

Vector3 = Tuple[float, float, float]
Coordinate = Tuple[int, int, int]


@dataclass
class Atmosphere:
    """Planet atmosphere.

    Only planets that actually have an atmosphere carry an instance; absence
    is represented by ``Planet.atmosphere is None``.
    """

    radius: float  # [km]
    pressure: float  # surface pressure [bar]
    composition: Dict[str, float] = field(default_factory=dict)  # gas -> volume fraction

    def exists(self) -> bool:
        """True if the atmosphere has a positive height."""
        return self.radius > 0


@dataclass
class Planet:
    """A planet generated by frost-limit mass accretion."""

    seed: int
    star_distance: float  # [au]
    lower_limit: float  # accretion band start [au]
    upper_limit: float  # accretion band end [au]
    is_in_hz: bool
    mass: float  # [kg]
    mu: float  # standard gravitational parameter G*M
    temperature: float  # median surface temperature [K]
    equator_temperature: float  # [K]
    pole_temperature: float  # [K]
    type_index: int  # periodic table of planets [0..17]
    radius: float  # [km]
    day: float  # axial rotation period [s]
    year: float  # orbital period [s]
    atmosphere: Optional[Atmosphere] = None

    @property
    def has_atmosphere(self) -> bool:
        """True if the planet carries an atmosphere that exists."""
        return self.atmosphere is not None and self.atmosphere.exists()

    @property
    def mass_earth(self) -> float:
        """Mass in Earth masses."""
        return self.mass / M_EARTH_KG

    @property
    def type_column(self) -> int:
        """Mass class column (0 Mercurian .. 5 Jovian)."""
        return self.type_index % MASS_CLASS_COUNT

    @property
    def type_name(self) -> str:
        return PLANET_TYPES[self.type_index]

    @property
    def family(self) -> str:
        return PLANET_FAMILIES[self.type_column]

    @property
    def planet_class(self) -> str:
        return PLANET_CLASSES[self.type_column]

    @property
    def temperature_zone(self) -> str:
        return f"{TEMPERATURE_ZONES[self.type_index // MASS_CLASS_COUNT]} Zone"

    @property
    def is_gas_giant(self) -> bool:
        return self.type_column >= GAS_GIANT_COLUMN


@dataclass
class Star:
    """A star and the planets it hosts."""

    seed: int
    type_index: int  # [0..23]
    spectral_class: str
    luminosity_class: str
    temperature_sequence: str  # subclass digit 0 (hot) .. 9 (cool)
    stellar_type: str  # e.g. "G2V"
    designation: str
    mass: float  # [Msol]
    radius: float  # [Rsol]
    luminosity: float  # [Lsol]
    temperature: float  # photosphere temperature [K]
    axial_rotation: float  # [s]
    color: Tuple[int, int, int]  # RGB [0..255]
    hz_distances: Tuple[float, ...]  # 8 habitable zone limits [au], index 0 unused
    frost_limit: float  # [au]
    planet_count: int
    output_variation: float = 0.0  # luminosity fluctuation [0..1]
    planets: Dict[int, Planet] = field(default_factory=dict)

    @property
    def hz_inner(self) -> float:
        """'Recent Venus' limit [au]."""
        return self.hz_distances[HZ_INNER]

    @property
    def hz_outer(self) -> float:
        """'Early Mars' limit [au]."""
        return self.hz_distances[HZ_OUTER]

    def ordered_planets(self) -> List[Planet]:
        """Planets ordered outward from the star."""
        return sorted(self.planets.values(), key=lambda p: p.star_distance)


@dataclass
class System:
    """A star system inside a sector cube."""

    seed: int
    sector: int  # parent sector seed (reference only)
    position: Vector3  # [ly] inside the sector cube
    multiplicity: int  # number of stars [1..7]
    stars: Dict[int, Star] = field(default_factory=dict)

    @property
    def multiplicity_name(self) -> str:
        return MULTIPLICITY_NAMES[self.multiplicity - 1]


@dataclass
class Sector:
    """A cube of the galaxy grid; holds system seeds only."""

    seed: int
    position: Coordinate
    name: str = ""
    system_seeds: List[int] = field(default_factory=list)
