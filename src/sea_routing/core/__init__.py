"""Core layer: distances, network graph, shortest paths, snapping and routes."""

from .config import (
    EARTH_RADIUS_KM,
    EARTH_RADIUS_MILES,
    EARTH_RADIUS_NM,
    DEFAULT_UNITS,
    VERTEX_PRECISION,
    SNAP_MAX_DISTANCE_KM,
)
from .geodesics import (
    great_circle_distance_km,
    rhumb_distance,
    point_to_segment_distance,
    point_to_polyline_distance,
    polyline_length,
    convert_distance,
    knots_to_ms,
    ms_to_knots,
)
from .network import Network, NetworkGraph, vertex_key
from .pathfinding import PathFinder, PathResult, find_path
from .snapping import RouteSnapper
from .routes import Route
from .data import load_network, network_from_geojson, as_coordinate

__all__ = [
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_MILES",
    "EARTH_RADIUS_NM",
    "DEFAULT_UNITS",
    "VERTEX_PRECISION",
    "SNAP_MAX_DISTANCE_KM",
    "great_circle_distance_km",
    "rhumb_distance",
    "point_to_segment_distance",
    "point_to_polyline_distance",
    "polyline_length",
    "convert_distance",
    "knots_to_ms",
    "ms_to_knots",
    "Network",
    "NetworkGraph",
    "vertex_key",
    "PathFinder",
    "PathResult",
    "find_path",
    "RouteSnapper",
    "Route",
    "load_network",
    "network_from_geojson",
    "as_coordinate",
]
