from typing import List, NamedTuple

from migration_map.data import CityTables, Coordinates
from migration_map.distance import miles_from
from migration_map.interaction import HoverState


class MigrationPath(NamedTuple):
    origin: str
    start: Coordinates
    end: Coordinates
    miles: float


def derive_paths(state: HoverState, tables: CityTables) -> List[MigrationPath]:
    """
    one path from the hovered destination city to every origin city, in origin
    table order. Idle, or a hovered name that is not a destination, gives none.
    """
    if not state.hovering:
        return []

    city = tables.destination(state.city)
    if city is None:
        return []

    ends = [o.coordinates for o in tables.origins]
    distances = miles_from(city.coordinates, ends)

    return [
        MigrationPath(origin=o.name, start=city.coordinates, end=o.coordinates, miles=d)
        for o, d in zip(tables.origins, distances)
    ]
