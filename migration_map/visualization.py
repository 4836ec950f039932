from typing import List, Tuple

import plotly.graph_objects as go

from migration_map import markers
from migration_map.data import CityTables
from migration_map.geography import FeatureCollection, GeographySource
from migration_map.interaction import IDLE, HoverState
from migration_map.paths import MigrationPath, derive_paths

GEOGRAPHY_FILL: str = "#EAEAEC"
GEOGRAPHY_STROKE: str = "#D6D6DA"

PATH_COLOR: str = "#FF6B6B"
PATH_WIDTH: int = 2


def geography_trace(collection: FeatureCollection) -> go.Choropleth:
    """flat-filled state boundaries; hovering them does nothing"""
    features = collection.get("features", [])
    ids = [str(f["id"]) for f in features]

    return go.Choropleth(
        geojson=collection,
        locations=ids,
        featureidkey="id",
        z=[0] * len(ids),
        colorscale=[[0, GEOGRAPHY_FILL], [1, GEOGRAPHY_FILL]],
        showscale=False,
        marker=dict(line=dict(color=GEOGRAPHY_STROKE, width=0.75)),
        hoverinfo="skip",
    )


def path_traces(paths: List[MigrationPath]) -> List[go.Scattergeo]:
    traces = []
    for p in paths:
        traces.append(
            go.Scattergeo(
                lon=[p.start.lon, p.end.lon],
                lat=[p.start.lat, p.end.lat],
                mode="lines",
                line=dict(width=PATH_WIDTH, color=PATH_COLOR),
                hoverinfo="skip",
                showlegend=False,
                name=f"migration-path-{p.origin}",
            )
        )

    return traces


class MigrationMapView:
    """
    renders the map for a hover state. the city tables are fixed at
    construction. geographies are either a FeatureCollection or a
    GeographySource, which is resolved on every render so boundaries appear once
    a fetch succeeds. the migration paths are derived again on every render.
    """

    def __init__(
        self,
        tables: CityTables,
        geographies=None,
        label_offset: Tuple[float, float] = markers.LABEL_OFFSET,
    ):
        self.tables = tables
        self.geographies = geographies
        self.label_offset = label_offset

    def collection(self):
        if isinstance(self.geographies, GeographySource):
            return self.geographies.resolve()
        return self.geographies

    def paths(self, state: HoverState) -> List[MigrationPath]:
        return derive_paths(state, self.tables)

    def render(self, state: HoverState = IDLE) -> go.Figure:
        fig = go.Figure()

        collection = self.collection()
        if collection:
            fig.add_trace(geography_trace(collection))

        for trace in path_traces(self.paths(state)):
            fig.add_trace(trace)

        for trace in markers.destination_traces(self.tables.destinations, self.label_offset):
            fig.add_trace(trace)

        for trace in markers.origin_traces(self.tables.origins, self.label_offset):
            fig.add_trace(trace)

        fig.update_layout(
            title_text="",
            showlegend=False,
            hovermode="closest",
            margin=dict(l=0, r=0, t=0, b=0),
            uirevision="migration-map",
            geo=dict(
                scope="usa",
                projection_type="albers usa",
                showland=False,
                showlakes=False,
                showsubunits=False,
                showcoastlines=False,
                showframe=False,
                bgcolor="rgba(0, 0, 0, 0)",
            ),
        )

        return fig
