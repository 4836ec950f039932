from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TABLES_DIR: Path = Path(__file__).parent / "tables"
ASSETS_DIR: Path = Path(__file__).parent / "assets"

US_ATLAS_STATES_URL: str = "https://cdn.jsdelivr.net/npm/us-atlas@3/states-10m.json"


class DashConfig(BaseSettings):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8050)
    debug: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="MIGRATION_MAP_DASH_")


class LoggingConfig(BaseSettings):
    verbosity_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_prefix="MIGRATION_MAP_LOGGING_")


class GeographyConfig(BaseSettings):
    """Remote document holding the U.S. state boundaries."""

    url: str = Field(default=US_ATLAS_STATES_URL)
    object_name: str = Field(
        default="states", description="TopoJSON object to decode into features"
    )
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="MIGRATION_MAP_GEOGRAPHY_")


class DataConfig(BaseSettings):
    destinations_path: Path = Field(default=TABLES_DIR / "destination_cities.csv")
    origins_path: Path = Field(default=TABLES_DIR / "origin_cities.csv")

    model_config = SettingsConfigDict(env_prefix="MIGRATION_MAP_DATA_")


class CarouselConfig(BaseSettings):
    # None disables autoplay
    interval: Optional[int] = Field(default=None)
    images: List[str] = Field(
        default=["gm1.jpg", "gm2.jpg", "gm3.jpg", "gm4.jpg", "gm5.png", "gm6.jpg"]
    )

    model_config = SettingsConfigDict(env_prefix="MIGRATION_MAP_CAROUSEL_")


class Settings(BaseSettings):
    dash: DashConfig = Field(default_factory=DashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    geography: GeographyConfig = Field(default_factory=GeographyConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    carousel: CarouselConfig = Field(default_factory=CarouselConfig)
