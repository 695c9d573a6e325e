import json
import logging
from pathlib import Path
from typing import Any

from shapely.geometry import LineString, Point, shape

from .network import Coordinate, Network, as_polyline

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_NETWORK_FILE = _DATA_DIR / "sample_network.geojson"


def network_from_geojson(data: dict[str, Any] = None) -> Network:
    """Build a network from a GeoJSON FeatureCollection.

    Only LineString features are kept, in the order they appear. All other
    features are skipped.

    Parameters
    ----------
    data : dict
        Parsed GeoJSON FeatureCollection

    Returns
    -------
    Network
        Network with the line coordinates and the feature properties
    """
    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError("Network data needs to be a GeoJSON FeatureCollection.")

    polylines = []
    properties = []
    for n, feature in enumerate(data.get("features", [])):
        geometry = feature.get("geometry")
        if not geometry or geometry.get("type") != "LineString":
            logging.debug("skipping feature %d: not a LineString", n)
            continue
        # degenerate lines are kept here and skipped by the graph builder
        polylines.append(as_polyline(geometry.get("coordinates") or ()))
        properties.append(dict(feature.get("properties") or {}))

    return Network(polylines=tuple(polylines), properties=tuple(properties))


def load_network(data_file: Path = None) -> Network:
    """Load a network from a GeoJSON file.

    Parameters
    ----------
    data_file : Path, optional
        GeoJSON FeatureCollection of LineStrings. Defaults to the sample
        network shipped with the package.

    Returns
    -------
    Network
    """
    data_file = Path(data_file) if data_file is not None else DEFAULT_NETWORK_FILE
    if not data_file.exists():
        raise FileNotFoundError(f"Network file not found: {data_file}")
    with data_file.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    network = network_from_geojson(data)
    logging.info("loaded %d network lines from %s", len(network), data_file)
    return network


def as_coordinate(obj: Any = None) -> Coordinate:
    """Cast a query point to a (lon, lat) tuple.

    Accepts (lon, lat) pairs, shapely Points, GeoJSON Point geometries and
    GeoJSON Point features.
    """
    if isinstance(obj, dict):
        geometry = obj["geometry"] if obj.get("type") == "Feature" else obj
        if geometry.get("type") != "Point":
            raise ValueError(f"Expected Point, got {geometry.get('type')!r}")
        obj = shape(geometry)
    if isinstance(obj, Point):
        return (float(obj.x), float(obj.y))
    if isinstance(obj, LineString):
        raise ValueError("Expected a point, got a LineString")
    lon, lat = obj
    return (float(lon), float(lat))
