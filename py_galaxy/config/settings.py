"""Service settings pulled from environment variables and .env."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.galaxy import GalaxyConfig


class Settings(BaseSettings):
    """Application settings; every field can be set as GALAXY_<NAME>."""

    model_config = SettingsConfigDict(env_prefix="GALAXY_", env_file=".env", extra="ignore")

    # Galaxy
    seed: Optional[int] = Field(default=None, ge=0, description="Galaxy seed (random if unset)")
    size_x_ly: float = Field(default=1.0e4, gt=0, description="Galaxy extent along x [ly]")
    size_y_ly: float = Field(default=100.0, gt=0, description="Galaxy extent along y [ly]")
    size_z_ly: float = Field(default=1.0e4, gt=0, description="Galaxy extent along z [ly]")
    sector_size_ly: float = Field(default=10.0, gt=0, description="Sector edge length [ly]")
    max_systems_per_sector: int = Field(default=10, ge=0, description="Systems per sector")
    max_stars_per_system: int = Field(default=3, ge=1, le=7, description="Stars per system")
    max_planets_per_star: int = Field(default=10, ge=0, description="Planets per star")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "console"] = Field(default="json", description="Log renderer")

    def galaxy_config(self) -> GalaxyConfig:
        """Build the core galaxy configuration from these settings."""
        return GalaxyConfig(
            galaxy_size_ly=(self.size_x_ly, self.size_y_ly, self.size_z_ly),
            sector_size_ly=self.sector_size_ly,
            max_systems_per_sector=self.max_systems_per_sector,
            max_stars_per_system=self.max_stars_per_system,
            max_planets_per_star=self.max_planets_per_star,
        )


settings = Settings()
