"""
Galaxy catalog: lazy, memoised generation of the content hierarchy.

The galaxy is centred at the origin and divided into cubic sectors. Sectors
only hold system seeds; systems own their stars and stars own their planets.
Every entity is generated on first request from its own seed and cached;
repeated requests return the cached object.

Generation of independent subtrees may run concurrently. Each entity uses its
own sample stream, and the catalog stores results with insert-if-absent under
a lock, so concurrent requests for the same key all receive the first stored
object.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import seeds
from .habitability import planet_habitability
from .models import Coordinate, Planet, Sector, Star, System
from .planets import generate_planets, planet_map
from .stars import generate_star
from .systems import generate_system

logger = structlog.get_logger()


class GalaxyConfigError(ValueError):
    """A coordinate or index outside the configured galaxy bounds."""


class UnknownSeedError(KeyError):
    """A seed that does not belong to the generated catalog hierarchy."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class GalaxyConfig(BaseModel):
    """Galaxy dimensions and generation caps."""

    model_config = ConfigDict(frozen=True)

    galaxy_size_ly: Tuple[float, float, float] = Field(
        default=(1.0e4, 100.0, 1.0e4), description="Galaxy extent x, y, z [ly]"
    )
    sector_size_ly: float = Field(default=10.0, gt=0, description="Sector edge length [ly]")
    max_systems_per_sector: int = Field(default=10, ge=0, description="Systems per sector")
    max_stars_per_system: int = Field(default=3, ge=1, le=7, description="Stars per system")
    max_planets_per_star: int = Field(default=10, ge=0, description="Planets per star")

    @field_validator("galaxy_size_ly")
    @classmethod
    def _positive_extent(cls, value):
        if any(v <= 0 for v in value):
            raise ValueError("galaxy extent must be positive on every axis")
        return value

    def sector_bounds(self) -> Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]:
        """Half-open [min, max) sector coordinate range per axis."""
        bounds = []
        for extent in self.galaxy_size_ly:
            half = int(extent / self.sector_size_ly / 2)
            # an extent thinner than two sectors still holds the origin sector
            bounds.append((-half, max(half, 1)))
        return tuple(bounds)


class Galaxy:
    """Root of the generated galaxy; owns the sector and system catalogs."""

    def __init__(self, seed: Optional[int] = None, config: Optional[GalaxyConfig] = None):
        """
        Initialize the galaxy.

        Args:
            seed: Galaxy seed; a pristine random seed is created if omitted
            config: Galaxy configuration
        """
        self.seed = seeds.create_galaxy_seed() if seed is None else int(seed) & seeds.MASK64
        self.config = config or GalaxyConfig()

        self.sectors: Dict[int, Sector] = {}
        self.systems: Dict[int, System] = {}
        # system seed -> parent sector seed
        self._system_index: Dict[int, int] = {}

        self._lock = threading.RLock()

        logger.info("Galaxy initialized", seed=self.seed, config=self.config.model_dump())

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def sector_bounds(self):
        return self.config.sector_bounds()

    def _check_coordinate(self, x: int, y: int, z: int) -> None:
        for axis, value, (low, high) in zip("xyz", (x, y, z), self.sector_bounds()):
            if not low <= value < high:
                raise GalaxyConfigError(
                    f"sector coordinate {axis}={value} outside configured range [{low}, {high})"
                )

    def iter_sector_coordinates(self, bounds=None) -> Iterator[Coordinate]:
        """Iterate sector coordinates, x outermost, then z, then y."""
        (x0, x1), (y0, y1), (z0, z1) = bounds or self.sector_bounds()
        for x in range(x0, x1):
            for z in range(z0, z1):
                for y in range(y0, y1):
                    yield (x, y, z)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def _insert(self, collection: dict, key: int, value):
        """Insert value unless key is present; return the stored value."""
        with self._lock:
            return collection.setdefault(key, value)

    def get_sector(self, x: int, y: int, z: int) -> Sector:
        """Get or generate the sector at integer coordinate (x, y, z)."""
        self._check_coordinate(x, y, z)
        sector_seed = seeds.sector_seed(self.seed, x, y, z)

        sector = self.sectors.get(sector_seed)
        if sector is not None:
            return sector

        system_seeds = seeds.system_seeds(sector_seed, self.config.max_systems_per_sector)
        sector = Sector(
            seed=sector_seed,
            position=(x, y, z),
            name=f"S{x:+d}{y:+d}{z:+d}",
            system_seeds=system_seeds,
        )
        with self._lock:
            sector = self.sectors.setdefault(sector_seed, sector)
            for system_seed in sector.system_seeds:
                self._system_index.setdefault(system_seed, sector_seed)

        logger.debug("Generated sector", seed=sector_seed, position=(x, y, z))
        return sector

    def get_system_seeds(self, x: int, y: int, z: int) -> List[int]:
        """Get or generate the system seeds of a sector."""
        return list(self.get_sector(x, y, z).system_seeds)

    def get_system_seed(self, x: int, y: int, z: int, index: int) -> int:
        """Seed of the index-th system of a sector."""
        if not 0 <= index < self.config.max_systems_per_sector:
            raise GalaxyConfigError(
                f"system index {index} outside configured range "
                f"[0, {self.config.max_systems_per_sector})"
            )
        return self.get_sector(x, y, z).system_seeds[index]

    def get_system(self, system_seed: int) -> System:
        """Get or generate a system; its seed must belong to a generated sector."""
        system = self.systems.get(system_seed)
        if system is not None:
            return system

        sector_seed = self._system_index.get(system_seed)
        if sector_seed is None:
            raise UnknownSeedError(f"system seed {system_seed} does not belong to a generated sector")

        system = generate_system(
            system_seed,
            sector_seed,
            self.config.sector_size_ly,
            max_stars=self.config.max_stars_per_system,
        )
        return self._insert(self.systems, system_seed, system)

    def get_stars(self, system_seed: int) -> Dict[int, Star]:
        """Get or generate the stars of a system (planets are generated separately)."""
        system = self.get_system(system_seed)
        if len(system.stars) == system.multiplicity:
            return system.stars

        stars = {
            star_seed: generate_star(star_seed, max_planets=self.config.max_planets_per_star)
            for star_seed in seeds.star_seeds(system_seed, system.multiplicity)
        }
        # published all at once; readers see no stars or every star
        with self._lock:
            if len(system.stars) != system.multiplicity:
                system.stars.update(stars)

        logger.debug("Generated stars", system=system_seed, count=system.multiplicity)
        return system.stars

    def get_star(self, system_seed: int, star_seed: int) -> Star:
        """Get or generate one star of a system."""
        stars = self.get_stars(system_seed)
        if star_seed not in stars:
            raise UnknownSeedError(f"star seed {star_seed} is not part of system {system_seed}")
        return stars[star_seed]

    def get_planets(self, system_seed: int, star_seed: int) -> Dict[int, Planet]:
        """Get or generate the planets of a star."""
        star = self.get_star(system_seed, star_seed)
        if len(star.planets) == star.planet_count:
            return star.planets

        planets = generate_planets(star, seeds.planet_seeds(star_seed, star.planet_count))
        with self._lock:
            if len(star.planets) != star.planet_count:
                star.planets.update(planet_map(planets))

        logger.debug("Generated planets", star=star_seed, count=star.planet_count)
        return star.planets

    # ------------------------------------------------------------------
    # Bulk generation
    # ------------------------------------------------------------------

    def generate_system_tree(self, system_seed: int) -> System:
        """Generate a system with all of its stars and planets."""
        for star_seed in self.get_stars(system_seed):
            self.get_planets(system_seed, star_seed)
        return self.systems[system_seed]

    def populate_sector(self, x: int, y: int, z: int, max_workers: Optional[int] = None) -> List[System]:
        """
        Generate every system of a sector with stars and planets.

        Systems are independent subtrees and are generated in parallel.

        Args:
            x, y, z: Sector coordinate
            max_workers: Thread pool size (executor default if None)

        Returns:
            Systems in sector order
        """
        sector = self.get_sector(x, y, z)
        logger.info("Populating sector", seed=sector.seed, systems=len(sector.system_seeds))

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            systems = list(executor.map(self.generate_system_tree, sector.system_seeds))

        logger.info("Sector populated", seed=sector.seed)
        return systems

    def census(self, coordinates: Iterable[Coordinate]) -> Dict[str, int]:
        """
        Count systems, stars, planets and probably habitable planets.

        Args:
            coordinates: Sector coordinates to generate and count

        Returns:
            Dictionary of totals
        """
        totals = {"sectors": 0, "systems": 0, "stars": 0, "planets": 0, "habitable_planets": 0}

        for x, y, z in coordinates:
            totals["sectors"] += 1
            for system in self.populate_sector(x, y, z):
                totals["systems"] += 1
                for star in system.stars.values():
                    totals["stars"] += 1
                    for planet in star.planets.values():
                        totals["planets"] += 1
                        if planet_habitability(planet).overall > 0:
                            totals["habitable_planets"] += 1

        logger.info("Galaxy census complete", **totals)
        return totals
