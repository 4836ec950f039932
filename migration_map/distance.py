from typing import List, Sequence

from haversine import haversine_vector, Unit

from migration_map.data import Coordinates


def miles_from(
    _origin: Coordinates,
    _dests: Sequence[Coordinates],
) -> List[float]:
    """
    great-circle distances in miles from one point to each of _dests, in the
    order given.

    :_origin:    (lon: float, lat: float)
    :_dests:     list of (lon, lat)
    """
    if not _dests:
        return []

    # haversine expects (lat, lon)
    _os = [(_origin.lat, _origin.lon)] * len(_dests)
    _ds = [(d.lat, d.lon) for d in _dests]

    _distances = haversine_vector(_os, _ds, unit=Unit.MILES)

    return [float(d) for d in _distances]
