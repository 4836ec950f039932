import pytest

from migration_map.config import TABLES_DIR
from migration_map.data import CityTables, load_city_tables
from migration_map.geography import to_feature_collection
from migration_map.visualization import MigrationMapView


@pytest.fixture
def tables() -> CityTables:
    """The city tables shipped with the package."""
    return load_city_tables(
        TABLES_DIR / "destination_cities.csv", TABLES_DIR / "origin_cities.csv"
    )


@pytest.fixture
def states_topology() -> dict:
    """Two quantized squares sharing an edge, like a tiny us-atlas file."""
    return {
        "type": "Topology",
        "transform": {"scale": [0.5, 0.25], "translate": [-100, 30]},
        "objects": {
            "states": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "Polygon", "id": "01", "properties": {"name": "West"}, "arcs": [[0, 1]]},
                    {"type": "Polygon", "id": "02", "properties": {"name": "East"}, "arcs": [[~0, 2]]},
                ],
            }
        },
        "arcs": [
            # shared edge (2,0) -> (2,4)
            [[2, 0], [0, 4]],
            # west square: (2,4) -> (0,4) -> (0,0) -> (2,0)
            [[2, 4], [-2, 0], [0, -4], [2, 0]],
            # east square: (2,0) -> (4,0) -> (4,4) -> (2,4)
            [[2, 0], [2, 0], [0, 4], [-2, 0]],
        ],
    }


@pytest.fixture
def geographies(states_topology) -> dict:
    return to_feature_collection(states_topology, "states")


@pytest.fixture
def view(tables, geographies) -> MigrationMapView:
    return MigrationMapView(tables, geographies)


@pytest.fixture
def hover_on():
    """Builds the hoverData payload dcc.Graph sends for one hovered marker."""

    def _hover_on(kind: str, name: str) -> dict:
        return {
            "points": [
                {"curveNumber": 3, "pointNumber": 0, "lon": -87.6, "lat": 41.9, "customdata": [kind, name]}
            ]
        }

    return _hover_on
