from typing import Any, Dict, Optional, Tuple

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State

from migration_map.config import ASSETS_DIR, Settings
from migration_map.data import CityTables, load_city_tables
from migration_map.geography import GeographySource
from migration_map.interaction import HoverMachine, HoverState, apply_hover_data
from migration_map.layout import build_layout, path_panel
from migration_map.logging import logger
from migration_map.visualization import MigrationMapView


def on_hover(
    view: MigrationMapView,
    hover_data: Optional[Dict[str, Any]],
    store_data: Optional[Dict[str, Any]],
) -> Tuple[Any, Any, Any]:
    """
    applies one hover event to the stored state. the redraw is subscribed to
    the state machine, so the figure and path panel are only sent back when the
    state actually changed.
    """
    machine = HoverMachine(HoverState.from_store(store_data))

    redrawn = []
    machine.subscribe(lambda state: redrawn.append((state, view.render(state))))
    apply_hover_data(machine, hover_data)

    if not redrawn:
        return dash.no_update, dash.no_update, dash.no_update

    state, figure = redrawn[-1]
    return state.to_store(), figure, path_panel(state.city, view.paths(state))


def register_callbacks(app: dash.Dash, view: MigrationMapView) -> None:
    @app.callback(
        Output("hover-state", "data"),
        Output("migration-map", "figure"),
        Output("migration-paths", "children"),
        Input("migration-map", "hoverData"),
        State("hover-state", "data"),
    )
    def update_hover(hover_data, store_data):
        return on_hover(view, hover_data, store_data)


def create_app(
    settings: Optional[Settings] = None,
    tables: Optional[CityTables] = None,
    geographies=None,
) -> dash.Dash:
    """
    builds the Dash app. tables are loaded and a GeographySource is built
    from settings unless given.
    """
    settings = settings or Settings()

    if tables is None:
        tables = load_city_tables(
            settings.data.destinations_path, settings.data.origins_path
        )
    if geographies is None:
        geographies = GeographySource(
            settings.geography.url,
            object_name=settings.geography.object_name,
            timeout=settings.geography.timeout,
        )

    view = MigrationMapView(tables, geographies)

    app = dash.Dash(
        __name__,
        title="Great Migration Map",
        assets_folder=str(ASSETS_DIR),
        external_stylesheets=[dbc.themes.BOOTSTRAP],
    )
    app.layout = build_layout(view.render(), settings.carousel, app.get_asset_url)
    register_callbacks(app, view)
    logger.info("Dash app ready")

    return app
