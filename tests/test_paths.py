import pytest

from migration_map.data import Coordinates
from migration_map.distance import miles_from
from migration_map.interaction import IDLE, HoverState
from migration_map.paths import derive_paths


class TestDerivePaths:
    def test_hovering_chicago(self, tables):
        chicago = tables.destination("Chicago")
        paths = derive_paths(HoverState("Chicago"), tables)

        assert len(paths) == len(tables.origins) == 4
        assert all(p.start == chicago.coordinates for p in paths)
        assert [p.end for p in paths] == [o.coordinates for o in tables.origins]
        assert [p.origin for p in paths] == ["Atlanta", "New Orleans", "Memphis", "Birmingham"]

    def test_idle_has_no_paths(self, tables):
        assert derive_paths(IDLE, tables) == []

    def test_origin_city_name_is_a_no_op(self, tables):
        assert derive_paths(HoverState("Atlanta"), tables) == []

    def test_unknown_city_is_a_no_op(self, tables):
        assert derive_paths(HoverState("Buffalo"), tables) == []

    def test_paths_carry_distances(self, tables):
        paths = derive_paths(HoverState("Chicago"), tables)
        miles = {p.origin: p.miles for p in paths}

        # Chicago to Atlanta is roughly 589 miles as the crow flies
        assert miles["Atlanta"] == pytest.approx(589, abs=10)
        assert all(m > 0 for m in miles.values())


class TestMilesFrom:
    def test_order_follows_destinations(self):
        origin = Coordinates(lon=-87.6298, lat=41.8781)
        near = Coordinates(lon=-87.0, lat=41.8781)
        far = Coordinates(lon=-74.0059, lat=40.7128)

        distances = miles_from(origin, [far, near])
        assert distances[0] > distances[1]

    def test_same_point_is_zero(self):
        point = Coordinates(lon=-90.0490, lat=35.1495)
        assert miles_from(point, [point]) == [pytest.approx(0.0)]

    def test_no_destinations(self):
        assert miles_from(Coordinates(lon=0.0, lat=0.0), []) == []
