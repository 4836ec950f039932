from typing import List, Optional, Sequence, Tuple

import numpy as np
import plotly.graph_objects as go

from migration_map import scale
from migration_map.data import Coordinates, DestinationCity, OriginCity
from migration_map.interaction import DESTINATION_KIND, ORIGIN_KIND

MARKER_OUTLINE: str = "#FFFFFF"
MARKER_OUTLINE_WIDTH: int = 2

DESTINATION_CONNECTOR_COLOR: str = "#FF6B6B"
DESTINATION_LABEL_COLOR: str = "#FF5533"
ORIGIN_CONNECTOR_COLOR: str = scale.ORIGIN_COLOR
ORIGIN_LABEL_COLOR: str = scale.ORIGIN_COLOR

# label offset from its city in degrees (lon, lat): west and a little north
LABEL_OFFSET: Tuple[float, float] = (-2.0, 0.7)
LABEL_FONT_SIZE: int = 10


def destination_tooltip(city: DestinationCity) -> str:
    return f"City: {city.name}<br>Population: {city.population:,}<br>{city.info}"


def origin_tooltip(city: OriginCity) -> str:
    return f"City: {city.name}<br>{city.info}"


def label_position(
    coordinates: Coordinates, offset: Tuple[float, float] = LABEL_OFFSET
) -> Coordinates:
    return Coordinates(lon=coordinates.lon + offset[0], lat=coordinates.lat + offset[1])


def _segments(
    coordinates: Sequence[Coordinates], offset: Tuple[float, float]
) -> Tuple[List[Optional[float]], List[Optional[float]]]:
    """leader-line segments joined into one trace, separated by None gaps"""
    lons: List[Optional[float]] = []
    lats: List[Optional[float]] = []
    for c in coordinates:
        label = label_position(c, offset)
        lons += [c.lon, label.lon, None]
        lats += [c.lat, label.lat, None]

    return lons, lats


def annotation_traces(
    names: Sequence[str],
    coordinates: Sequence[Coordinates],
    connector_color: str,
    label_color: str,
    offset: Tuple[float, float] = LABEL_OFFSET,
) -> List[go.Scattergeo]:
    """
    leader lines from each city to its label, plus the labels themselves.
    neither trace reacts to hover.
    """
    lons, lats = _segments(coordinates, offset)
    labels = [label_position(c, offset) for c in coordinates]

    connectors = go.Scattergeo(
        lon=lons,
        lat=lats,
        mode="lines",
        line=dict(width=2, color=connector_color),
        hoverinfo="skip",
        showlegend=False,
    )
    texts = go.Scattergeo(
        lon=[p.lon for p in labels],
        lat=[p.lat for p in labels],
        text=list(names),
        mode="text",
        textposition="middle left",
        textfont=dict(color=label_color, size=LABEL_FONT_SIZE),
        hoverinfo="skip",
        showlegend=False,
    )

    return [connectors, texts]


def destination_traces(
    cities: Sequence[DestinationCity], offset: Tuple[float, float] = LABEL_OFFSET
) -> List[go.Scattergeo]:
    """annotations then markers, so markers sit on top of their leader lines"""
    populations = np.array([c.population for c in cities], dtype=float)

    markers = go.Scattergeo(
        lon=[c.coordinates.lon for c in cities],
        lat=[c.coordinates.lat for c in cities],
        mode="markers",
        # plotly sizes are diameters
        marker=dict(
            size=(2 * scale.radius(populations)).tolist(),
            sizemode="diameter",
            color=[scale.color(p) for p in populations],
            line=dict(width=MARKER_OUTLINE_WIDTH, color=MARKER_OUTLINE),
            opacity=1,
        ),
        hovertext=[destination_tooltip(c) for c in cities],
        hoverinfo="text",
        customdata=[[DESTINATION_KIND, c.name] for c in cities],
        name="Destination cities",
        showlegend=False,
    )

    return annotation_traces(
        [c.name for c in cities],
        [c.coordinates for c in cities],
        connector_color=DESTINATION_CONNECTOR_COLOR,
        label_color=DESTINATION_LABEL_COLOR,
        offset=offset,
    ) + [markers]


def origin_traces(
    cities: Sequence[OriginCity], offset: Tuple[float, float] = LABEL_OFFSET
) -> List[go.Scattergeo]:
    markers = go.Scattergeo(
        lon=[c.coordinates.lon for c in cities],
        lat=[c.coordinates.lat for c in cities],
        mode="markers",
        marker=dict(
            size=2 * scale.ORIGIN_RADIUS,
            color=scale.ORIGIN_COLOR,
            line=dict(width=MARKER_OUTLINE_WIDTH, color=MARKER_OUTLINE),
            opacity=1,
        ),
        hovertext=[origin_tooltip(c) for c in cities],
        hoverinfo="text",
        customdata=[[ORIGIN_KIND, c.name] for c in cities],
        name="Southern departure points",
        showlegend=False,
    )

    return annotation_traces(
        [c.name for c in cities],
        [c.coordinates for c in cities],
        connector_color=ORIGIN_CONNECTOR_COLOR,
        label_color=ORIGIN_LABEL_COLOR,
        offset=offset,
    ) + [markers]
