"""
State boundary geometry.

The boundaries are fetched from a remote TopoJSON (or GeoJSON) document, read
with geopandas and handed to plotly as a GeoJSON FeatureCollection. A failed
fetch leaves the map without boundaries; it never stops the page from
rendering, and the next render tries again.
"""
import io
import json
from typing import Any, Dict, Optional, Union

import geopandas as gpd
import requests

from migration_map.logging import logger

FeatureCollection = Dict[str, Any]


class GeographyFetchError(Exception):
    """The geography document could not be fetched or decoded."""


class _NotAvailable:
    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_AVAILABLE"


NOT_AVAILABLE = _NotAvailable()


# %%
#::DECODING


def _with_string_ids(gdf: gpd.GeoDataFrame, ids) -> FeatureCollection:
    gdf.index = [str(i) for i in ids]
    return json.loads(gdf.to_json())


def to_feature_collection(document: Dict[str, Any], object_name: str) -> FeatureCollection:
    """
    FeatureCollection from either a TopoJSON topology (reading the object
    named object_name) or a GeoJSON collection. every feature comes back with a
    string id; features without one get their position.
    """
    kind = document.get("type") if isinstance(document, dict) else None

    if kind == "Topology":
        objects = document.get("objects") or {}
        if object_name not in objects:
            raise GeographyFetchError(
                f"TopoJSON has no object {object_name!r} (found: {', '.join(objects) or 'none'})"
            )
        try:
            gdf = gpd.read_file(io.BytesIO(json.dumps(document).encode("utf-8")), layer=object_name)
        except Exception as e:
            raise GeographyFetchError(f"could not read TopoJSON object {object_name!r}: {e}") from e

        ids = gdf["id"] if "id" in gdf.columns else range(len(gdf))
        return _with_string_ids(gdf, ids)

    if kind == "FeatureCollection":
        features = list(document.get("features") or [])
        try:
            gdf = gpd.GeoDataFrame.from_features(features)
        except Exception as e:
            raise GeographyFetchError(f"could not read GeoJSON features: {e}") from e

        return _with_string_ids(gdf, [f.get("id", i) for i, f in enumerate(features)])

    raise GeographyFetchError(f"unsupported geography document type: {kind!r}")


# %%
#::FETCHING


class GeographySource:
    """
    fetch of the boundary document.

    fetch() raises GeographyFetchError; resolve() logs the failure and returns
    NOT_AVAILABLE instead. a successful result is kept, so the network is hit
    once a fetch has succeeded; failures are retried on the next resolve().
    """

    def __init__(self, url: str, object_name: str = "states", timeout: float = 10.0):
        self.url = url
        self.object_name = object_name
        self.timeout = timeout
        self._collection: Optional[FeatureCollection] = None

    def fetch(self) -> FeatureCollection:
        logger.info(f"Fetching geographies from {self.url}")
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            document = response.json()
        except requests.RequestException as e:
            raise GeographyFetchError(f"could not fetch {self.url}: {e}") from e
        except ValueError as e:
            raise GeographyFetchError(f"{self.url} did not return JSON: {e}") from e

        collection = to_feature_collection(document, self.object_name)
        logger.info(f"Decoded {len(collection['features'])} geographies")

        return collection

    def resolve(self) -> Union[FeatureCollection, _NotAvailable]:
        if self._collection is not None:
            return self._collection

        try:
            self._collection = self.fetch()
        except GeographyFetchError as e:
            logger.warning(f"Rendering map without state boundaries: {e}")
            return NOT_AVAILABLE

        return self._collection
