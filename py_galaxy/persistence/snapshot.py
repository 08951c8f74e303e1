"""
Galaxy snapshots.

A snapshot records the galaxy seed and the entities generated so far. Since
every entity is a pure function of the seed, restoring a snapshot
regenerates the recorded entities and checks them against the recorded
values instead of trusting the document.
"""

import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.galaxy import Galaxy, GalaxyConfig, GalaxyConfigError, UnknownSeedError
from ..core.models import Planet, Star, System

logger = structlog.get_logger()

# Relative tolerance for recorded floating point values
VALUE_TOLERANCE = 1e-12


class SnapshotDecodeError(ValueError):
    """Malformed snapshot, or recorded values that disagree with regeneration."""


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid")


class PlanetRecord(_Record):
    seed: int = Field(ge=0)
    type: int = Field(ge=0, le=17)
    mass: float
    temperature: float


class StarRecord(_Record):
    seed: int = Field(ge=0)
    type: int = Field(ge=0, le=23)
    mass: float
    planets: List[PlanetRecord] = Field(default_factory=list)


class SystemRecord(_Record):
    sector: int = Field(ge=0)
    seed: int = Field(ge=0)
    position: Tuple[float, float, float]
    multiplicity: int = Field(ge=1, le=7)
    stars: List[StarRecord] = Field(default_factory=list)


class SectorRecord(_Record):
    seed: int = Field(ge=0)
    position: Tuple[int, int, int]
    name: str
    systems: List[int] = Field(default_factory=list)


class GalaxyRecord(_Record):
    seed: int = Field(ge=0)


class GalaxySnapshot(_Record):
    """Snapshot document."""

    galaxy: GalaxyRecord
    sectors: List[SectorRecord] = Field(default_factory=list)
    systems: List[SystemRecord] = Field(default_factory=list)


# ----------------------------------------------------------------------
# Encoding
# ----------------------------------------------------------------------


def _planet_record(planet: Planet) -> PlanetRecord:
    return PlanetRecord(
        seed=planet.seed,
        type=planet.type_index,
        mass=planet.mass,
        temperature=planet.temperature,
    )


def _star_record(star: Star) -> StarRecord:
    return StarRecord(
        seed=star.seed,
        type=star.type_index,
        mass=star.mass,
        planets=[_planet_record(p) for p in star.planets.values()],
    )


def _system_record(system: System) -> SystemRecord:
    return SystemRecord(
        sector=system.sector,
        seed=system.seed,
        position=system.position,
        multiplicity=system.multiplicity,
        stars=[_star_record(s) for s in system.stars.values()],
    )


def snapshot_galaxy(galaxy: Galaxy) -> GalaxySnapshot:
    """Capture the seed and every generated entity of a galaxy."""
    # catalog inserts take the same lock, so the capture is consistent
    with galaxy._lock:
        sectors = [
            SectorRecord(
                seed=sector.seed,
                position=sector.position,
                name=sector.name,
                systems=list(sector.system_seeds),
            )
            for sector in galaxy.sectors.values()
        ]
        systems = [_system_record(system) for system in galaxy.systems.values()]

    return GalaxySnapshot(galaxy=GalaxyRecord(seed=galaxy.seed), sectors=sectors, systems=systems)


def dump_snapshot(snapshot: GalaxySnapshot, indent: Optional[int] = 2) -> str:
    """Serialize a snapshot to JSON."""
    return snapshot.model_dump_json(indent=indent)


def save_snapshot(galaxy: Galaxy, path: Union[str, Path]) -> GalaxySnapshot:
    """
    Write a galaxy snapshot to a JSON file.

    Args:
        galaxy: Galaxy to capture
        path: Output file path

    Returns:
        The written snapshot
    """
    snapshot = snapshot_galaxy(galaxy)
    Path(path).write_text(dump_snapshot(snapshot), encoding="utf-8")
    logger.info(
        "Snapshot saved",
        path=str(path),
        seed=galaxy.seed,
        sectors=len(snapshot.sectors),
        systems=len(snapshot.systems),
    )
    return snapshot


# ----------------------------------------------------------------------
# Decoding
# ----------------------------------------------------------------------


def parse_snapshot(data: Union[str, bytes]) -> GalaxySnapshot:
    """
    Parse and validate a JSON snapshot document.

    Raises:
        SnapshotDecodeError: Malformed JSON or schema violation
    """
    try:
        return GalaxySnapshot.model_validate_json(data)
    except ValidationError as e:
        raise SnapshotDecodeError(f"invalid snapshot: {e}") from e


def load_snapshot(path: Union[str, Path]) -> GalaxySnapshot:
    """Read and validate a snapshot file."""
    snapshot = parse_snapshot(Path(path).read_text(encoding="utf-8"))
    logger.info("Snapshot loaded", path=str(path), seed=snapshot.galaxy.seed)
    return snapshot


def _check(key: str, recorded, actual) -> None:
    if isinstance(recorded, float) or isinstance(actual, float):
        same = math.isclose(recorded, actual, rel_tol=VALUE_TOLERANCE, abs_tol=0.0)
    else:
        same = recorded == actual
    if not same:
        raise SnapshotDecodeError(f"{key}: recorded {recorded!r}, regenerated {actual!r}")


def _verify_system(galaxy: Galaxy, record: SystemRecord) -> None:
    key = f"system {record.seed}"
    system = galaxy.get_system(record.seed)

    _check(f"{key} sector", record.sector, system.sector)
    _check(f"{key} multiplicity", record.multiplicity, system.multiplicity)
    for axis, recorded, actual in zip("xyz", record.position, system.position):
        _check(f"{key} position.{axis}", recorded, actual)

    if not record.stars:
        return

    stars = galaxy.get_stars(record.seed)
    _check(f"{key} stars", [s.seed for s in record.stars], list(stars))

    for star_record in record.stars:
        star_key = f"star {star_record.seed}"
        star = stars[star_record.seed]
        _check(f"{star_key} type", star_record.type, star.type_index)
        _check(f"{star_key} mass", star_record.mass, star.mass)

        if not star_record.planets:
            continue

        planets = galaxy.get_planets(record.seed, star_record.seed)
        _check(f"{star_key} planets", [p.seed for p in star_record.planets], list(planets))

        for planet_record in star_record.planets:
            planet_key = f"planet {planet_record.seed}"
            planet = planets[planet_record.seed]
            _check(f"{planet_key} type", planet_record.type, planet.type_index)
            _check(f"{planet_key} mass", planet_record.mass, planet.mass)
            _check(f"{planet_key} temperature", planet_record.temperature, planet.temperature)


def restore_galaxy(snapshot: GalaxySnapshot, config: Optional[GalaxyConfig] = None) -> Galaxy:
    """
    Rebuild a galaxy from a snapshot by regeneration.

    Every recorded sector and system is regenerated from the galaxy seed and
    compared with the recorded values.

    Args:
        snapshot: Parsed snapshot
        config: Galaxy configuration the snapshot was generated with

    Returns:
        Galaxy holding the recorded entities

    Raises:
        SnapshotDecodeError: A recorded entity cannot be regenerated or differs
    """
    galaxy = Galaxy(seed=snapshot.galaxy.seed, config=config)

    try:
        for record in snapshot.sectors:
            key = f"sector {record.position}"
            sector = galaxy.get_sector(*record.position)
            _check(f"{key} seed", record.seed, sector.seed)
            _check(f"{key} name", record.name, sector.name)
            _check(f"{key} systems", record.systems, sector.system_seeds)

        for record in snapshot.systems:
            _verify_system(galaxy, record)
    except (GalaxyConfigError, UnknownSeedError) as e:
        raise SnapshotDecodeError(f"snapshot does not match galaxy {galaxy.seed}: {e}") from e

    logger.info(
        "Snapshot restored",
        seed=galaxy.seed,
        sectors=len(snapshot.sectors),
        systems=len(snapshot.systems),
    )
    return galaxy
