from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, PositiveInt, model_validator

from migration_map.logging import logger

DESTINATION_COLUMNS: List[str] = ["name", "longitude", "latitude", "population", "info"]
ORIGIN_COLUMNS: List[str] = ["name", "longitude", "latitude", "info"]


class CityDataError(Exception):
    """A city table is missing or malformed."""


class Coordinates(NamedTuple):
    """WGS84 position, longitude first."""

    lon: float
    lat: float


class DestinationCity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: Coordinates
    population: PositiveInt
    info: str = ""


class OriginCity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: Coordinates
    info: str = ""


def _check_unique(names: List[str], table: str) -> None:
    seen = set()
    for name in names:
        if name in seen:
            raise ValueError(f"duplicate city name {name!r} in {table} table")
        seen.add(name)


class CityTables(BaseModel):
    """Destination and origin cities, fixed for the life of the app."""

    model_config = ConfigDict(frozen=True)

    destinations: Tuple[DestinationCity, ...]
    origins: Tuple[OriginCity, ...]

    @model_validator(mode="after")
    def check_unique_names(self) -> "CityTables":
        _check_unique([c.name for c in self.destinations], "destination")
        _check_unique([c.name for c in self.origins], "origin")
        return self

    def destination(self, name: Optional[str]) -> Optional[DestinationCity]:
        for city in self.destinations:
            if city.name == name:
                return city
        return None


def _read_table(path: Path, columns: List[str]) -> pd.DataFrame:
    if not Path(path).is_file():
        raise CityDataError(f"city table not found: {path}")

    df: pd.DataFrame = pd.read_csv(path)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise CityDataError(f"{path} is missing columns: {', '.join(missing)}")

    return df.fillna({"info": ""})


def read_destinations(path: Path) -> Tuple[DestinationCity, ...]:
    df = _read_table(path, DESTINATION_COLUMNS)
    return tuple(
        DestinationCity(
            name=str(row["name"]),
            coordinates=(float(row["longitude"]), float(row["latitude"])),
            population=int(row["population"]),
            info=str(row["info"]),
        )
        for row in df.to_dict("records")
    )


def read_origins(path: Path) -> Tuple[OriginCity, ...]:
    df = _read_table(path, ORIGIN_COLUMNS)
    return tuple(
        OriginCity(
            name=str(row["name"]),
            coordinates=(float(row["longitude"]), float(row["latitude"])),
            info=str(row["info"]),
        )
        for row in df.to_dict("records")
    )


def load_city_tables(destinations_path: Path, origins_path: Path) -> CityTables:
    """
    reads both city tables from csv.

    :destinations_path:     csv with name, longitude, latitude, population, info
    :origins_path:          csv with name, longitude, latitude, info

    raises CityDataError for unreadable tables and pydantic.ValidationError for
    invalid rows or duplicate names.
    """
    tables = CityTables(
        destinations=read_destinations(destinations_path),
        origins=read_origins(origins_path),
    )
    logger.info(
        f"Loaded {len(tables.destinations)} destination and {len(tables.origins)} origin cities"
    )

    return tables
