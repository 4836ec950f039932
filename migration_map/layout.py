from typing import Callable, List, Optional

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import dcc, html

from migration_map.config import CarouselConfig
from migration_map.interaction import IDLE
from migration_map.paths import MigrationPath

TITLE: str = "Interactive Great Migration Map by Arjun Rao"
AUTHOR: str = "Created by Arjun Rao"

INFO_LINES: List[str] = [
    "Hover over cities for more information.",
    "Red circles: Destination cities (size indicates relative African American population)",
    "Green circles: Major southern departure points",
]

POEM_TITLE: str = 'Excerpt from "One-Way Ticket" by Langston Hughes'
POEM_LINES: List[str] = [
    "I pick up my life",
    "And take it with me",
    "And I put it down in",
    "Chicago, Detroit,",
    "Buffalo, Scranton,",
    "Any place that is",
    "North and East--",
    "And not Dixie.",
]

PATH_HINT: str = "Hover over a destination city to trace its migration paths."


def path_panel(city: Optional[str], paths: List[MigrationPath]) -> List:
    if not paths:
        return [html.P(PATH_HINT, className="path-hint")]

    return [
        html.H4(f"Migration paths to {city}"),
        html.Ul([html.Li(f"{p.origin}: {p.miles:,.0f} mi") for p in paths]),
    ]


def _lines(lines: List[str]) -> List:
    """text lines separated by <br>"""
    children: List = []
    for i, line in enumerate(lines):
        if i:
            children.append(html.Br())
        children.append(line)

    return children


def carousel(config: CarouselConfig, asset_url: Callable[[str], str]) -> dbc.Carousel:
    items = [
        {
            "key": str(i + 1),
            "src": asset_url(f"carousel/{name}"),
            "alt": f"Great Migration {i + 1}",
            "img_class_name": "carousel-image",
        }
        for i, name in enumerate(config.images)
    ]

    return dbc.Carousel(
        id="carousel",
        items=items,
        controls=True,
        indicators=True,
        interval=config.interval,
        className="carousel",
    )


def build_layout(
    figure: go.Figure, carousel_config: CarouselConfig, asset_url: Callable[[str], str]
) -> html.Div:
    return html.Div(
        [
            html.H2(TITLE, className="title"),
            dcc.Store(id="hover-state", data=IDLE.to_store()),
            dcc.Graph(
                id="migration-map",
                figure=figure,
                clear_on_unhover=True,
                config={"displayModeBar": False, "scrollZoom": False},
                className="map",
            ),
            html.Div(path_panel(None, []), id="migration-paths", className="paths"),
            html.Div([html.P(line) for line in INFO_LINES], className="info"),
            html.Div(
                [
                    html.H3("Legend"),
                    html.P([html.Span(className="red-circle"), " Destination cities"]),
                    html.P(
                        [html.Span(className="green-circle"), " Major southern departure points"]
                    ),
                ],
                className="legend",
            ),
            html.Div(
                [html.H3(POEM_TITLE), html.P(_lines(POEM_LINES))],
                className="poem-excerpt",
            ),
            carousel(carousel_config, asset_url),
            html.P(AUTHOR, className="author"),
        ],
        className="map-container",
    )
