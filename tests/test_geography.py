from unittest.mock import MagicMock, patch

import pytest
import requests
from shapely.geometry import shape

from migration_map.geography import (
    NOT_AVAILABLE,
    GeographyFetchError,
    GeographySource,
    to_feature_collection,
)

# ------------------------------------------------------
# Decoding
# ------------------------------------------------------


class TestToFeatureCollection:
    def test_topology_object_is_read(self, states_topology):
        collection = to_feature_collection(states_topology, "states")

        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 2
        assert [f["properties"]["name"] for f in collection["features"]] == ["West", "East"]
        assert all(isinstance(f["id"], str) for f in collection["features"])

    def test_topology_geometry_is_transformed(self, states_topology):
        west, east = to_feature_collection(states_topology, "states")["features"]

        assert shape(west["geometry"]).bounds == pytest.approx((-100.0, 30.0, -99.0, 31.0))
        assert shape(east["geometry"]).bounds == pytest.approx((-99.0, 30.0, -98.0, 31.0))

    def test_missing_object(self, states_topology):
        with pytest.raises(GeographyFetchError, match="no object 'counties'"):
            to_feature_collection(states_topology, "counties")

    def test_geojson_passes_through_with_ids(self):
        document = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "id": "06", "properties": {}, "geometry": None},
                {"type": "Feature", "properties": {}, "geometry": None},
            ],
        }

        collection = to_feature_collection(document, "states")
        assert [f["id"] for f in collection["features"]] == ["06", "1"]
        # the input document is left alone
        assert "id" not in document["features"][1]

    def test_unsupported_document(self):
        with pytest.raises(GeographyFetchError, match="unsupported"):
            to_feature_collection({"type": "Feature"}, "states")

        with pytest.raises(GeographyFetchError):
            to_feature_collection([], "states")


# ------------------------------------------------------
# Fetching
# ------------------------------------------------------


class TestGeographySource:
    def setup_method(self):
        self.get_patcher = patch("migration_map.geography.requests.get")
        self.mock_get = self.get_patcher.start()
        self.source = GeographySource("https://example.com/states.json", timeout=3)

    def teardown_method(self):
        self.get_patcher.stop()

    def test_fetch_decodes_topology(self, states_topology):
        response = MagicMock()
        response.json.return_value = states_topology
        self.mock_get.return_value = response

        collection = self.source.fetch()

        assert len(collection["features"]) == 2
        self.mock_get.assert_called_once_with("https://example.com/states.json", timeout=3)

    def test_network_error(self):
        self.mock_get.side_effect = requests.ConnectionError("offline")

        with pytest.raises(GeographyFetchError, match="could not fetch"):
            self.source.fetch()

    def test_http_error(self):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        self.mock_get.return_value = response

        with pytest.raises(GeographyFetchError, match="404"):
            self.source.fetch()

    def test_invalid_json(self):
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        self.mock_get.return_value = response

        with pytest.raises(GeographyFetchError, match="did not return JSON"):
            self.source.fetch()

    def test_resolve_failure_is_not_available(self):
        self.mock_get.side_effect = requests.Timeout("timed out")

        assert self.source.resolve() is NOT_AVAILABLE
        assert not NOT_AVAILABLE

    def test_resolve_fetches_once(self, states_topology):
        response = MagicMock()
        response.json.return_value = states_topology
        self.mock_get.return_value = response

        first = self.source.resolve()
        second = self.source.resolve()

        assert first is second
        assert self.mock_get.call_count == 1

    def test_resolve_retries_after_failure(self, states_topology):
        response = MagicMock()
        response.json.return_value = states_topology
        self.mock_get.side_effect = [requests.ConnectionError("offline"), response]

        assert self.source.resolve() is NOT_AVAILABLE
        assert len(self.source.resolve()["features"]) == 2
