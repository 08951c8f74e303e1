"""FastAPI main application."""

import threading
from typing import Dict, List, Optional, Tuple

import structlog
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.atmosphere import format_composition
from ..core.galaxy import Galaxy, GalaxyConfigError, UnknownSeedError
from ..core.habitability import habitable_planets_probability, planet_habitability
from ..core.models import Planet, Star, System
from ..persistence.snapshot import GalaxySnapshot, snapshot_galaxy
from ..utils.logging import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Procedural Galaxy API",
    description="Deterministic galaxy content derived from a single seed",
    version=__version__,
)

_galaxy: Optional[Galaxy] = None
_galaxy_lock = threading.Lock()


def get_galaxy() -> Galaxy:
    """Process-wide galaxy built from the service settings."""
    global _galaxy
    if _galaxy is None:
        with _galaxy_lock:
            if _galaxy is None:
                _galaxy = Galaxy(seed=settings.seed, config=settings.galaxy_config())
    return _galaxy


# Response models
class SectorResponse(BaseModel):
    """Sector and the seeds of its systems."""

    seed: int
    position: Tuple[int, int, int]
    name: str
    systems: List[int]


class SystemResponse(BaseModel):
    """Star system summary."""

    seed: int
    sector: int
    position: Tuple[float, float, float]
    multiplicity: int
    multiplicity_name: str


class StarResponse(BaseModel):
    """Star properties."""

    seed: int
    type_index: int
    stellar_type: str
    designation: str
    mass: float = Field(description="Mass [Msol]")
    radius: float = Field(description="Radius [Rsol]")
    luminosity: float = Field(description="Luminosity [Lsol]")
    temperature: float = Field(description="Temperature [K]")
    color: Tuple[int, int, int]
    hz_distances: List[float] = Field(description="Habitable zone limits [au]")
    frost_limit: float = Field(description="Frost limit [au]")
    planet_count: int
    habitable_planets_probability: float


class AtmosphereResponse(BaseModel):
    """Planet atmosphere."""

    radius: float = Field(description="Radius [km]")
    pressure: float = Field(description="Surface pressure [bar]")
    composition: Dict[str, float]
    summary: str


class PlanetResponse(BaseModel):
    """Planet properties and habitability."""

    seed: int
    type_index: int
    type_name: str
    family: str
    planet_class: str
    temperature_zone: str
    star_distance: float = Field(description="Distance from the star [au]")
    mass: float = Field(description="Mass [kg]")
    mass_earth: float = Field(description="Mass [Mearth]")
    radius: float = Field(description="Radius [km]")
    temperature: float = Field(description="Median surface temperature [K]")
    is_in_hz: bool
    atmosphere: Optional[AtmosphereResponse] = None
    habitability: float


def _system_response(system: System) -> SystemResponse:
    return SystemResponse(
        seed=system.seed,
        sector=system.sector,
        position=system.position,
        multiplicity=system.multiplicity,
        multiplicity_name=system.multiplicity_name,
    )


def _star_response(star: Star) -> StarResponse:
    return StarResponse(
        seed=star.seed,
        type_index=star.type_index,
        stellar_type=star.stellar_type,
        designation=star.designation,
        mass=star.mass,
        radius=star.radius,
        luminosity=star.luminosity,
        temperature=star.temperature,
        color=star.color,
        hz_distances=list(star.hz_distances),
        frost_limit=star.frost_limit,
        planet_count=star.planet_count,
        habitable_planets_probability=habitable_planets_probability(star),
    )


def _planet_response(planet: Planet) -> PlanetResponse:
    atmosphere = None
    if planet.has_atmosphere:
        atmosphere = AtmosphereResponse(
            radius=planet.atmosphere.radius,
            pressure=planet.atmosphere.pressure,
            composition=planet.atmosphere.composition,
            summary=format_composition(planet.atmosphere.composition),
        )
    return PlanetResponse(
        seed=planet.seed,
        type_index=planet.type_index,
        type_name=planet.type_name,
        family=planet.family,
        planet_class=planet.planet_class,
        temperature_zone=planet.temperature_zone,
        star_distance=planet.star_distance,
        mass=planet.mass,
        mass_earth=planet.mass_earth,
        radius=planet.radius,
        temperature=planet.temperature,
        is_in_hz=planet.is_in_hz,
        atmosphere=atmosphere,
        habitability=planet_habitability(planet).overall,
    )


# API endpoints
@app.get("/")
async def root(galaxy: Galaxy = Depends(get_galaxy)):
    """Root endpoint."""
    return {
        "message": "Procedural Galaxy API",
        "version": __version__,
        "status": "running",
        "seed": galaxy.seed,
    }


@app.get("/health")
async def health_check(galaxy: Galaxy = Depends(get_galaxy)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "sectors": len(galaxy.sectors),
        "systems": len(galaxy.systems),
    }


@app.get("/sectors/{x}/{y}/{z}", response_model=SectorResponse)
def get_sector(x: int, y: int, z: int, galaxy: Galaxy = Depends(get_galaxy)):
    """Get or generate a sector."""
    try:
        sector = galaxy.get_sector(x, y, z)
    except GalaxyConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SectorResponse(
        seed=sector.seed,
        position=sector.position,
        name=sector.name,
        systems=sector.system_seeds,
    )


@app.get("/sectors/{x}/{y}/{z}/systems", response_model=List[SystemResponse])
def get_sector_systems(x: int, y: int, z: int, galaxy: Galaxy = Depends(get_galaxy)):
    """Get or generate every system of a sector."""
    try:
        system_seeds = galaxy.get_system_seeds(x, y, z)
    except GalaxyConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [_system_response(galaxy.get_system(seed)) for seed in system_seeds]


@app.get("/systems/{seed}", response_model=SystemResponse)
def get_system(seed: int, galaxy: Galaxy = Depends(get_galaxy)):
    """Get or generate a system of an already generated sector."""
    try:
        system = galaxy.get_system(seed)
    except UnknownSeedError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return _system_response(system)


@app.get("/systems/{seed}/stars", response_model=List[StarResponse])
def get_stars(seed: int, galaxy: Galaxy = Depends(get_galaxy)):
    """Get or generate the stars of a system."""
    try:
        stars = galaxy.get_stars(seed)
    except UnknownSeedError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return [_star_response(star) for star in stars.values()]


@app.get("/systems/{seed}/stars/{star_seed}/planets", response_model=List[PlanetResponse])
def get_planets(seed: int, star_seed: int, galaxy: Galaxy = Depends(get_galaxy)):
    """Get or generate the planets of a star."""
    try:
        galaxy.get_planets(seed, star_seed)
    except UnknownSeedError as e:
        raise HTTPException(status_code=404, detail=str(e))

    star = galaxy.get_star(seed, star_seed)
    return [_planet_response(planet) for planet in star.ordered_planets()]


@app.get("/snapshot", response_model=GalaxySnapshot)
def get_snapshot(galaxy: Galaxy = Depends(get_galaxy)):
    """Snapshot of everything generated so far."""
    logger.info("Snapshot requested", seed=galaxy.seed)
    return snapshot_galaxy(galaxy)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
