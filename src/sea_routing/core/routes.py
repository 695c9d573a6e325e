from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from shapely.geometry import LineString

from .config import DEFAULT_UNITS
from .geodesics import (
    convert_distance,
    great_circle_distance_km,
    knots_to_ms,
    polyline_length,
)
from .network import Coordinate, as_polyline
from .pathfinding import PathResult


@dataclass(frozen=True)
class Route:
    """Sea route with its length in the requested units."""

    coordinates: tuple[Coordinate, ...]
    length: float
    units: str = DEFAULT_UNITS
    duration_hours: float | None = None

    def __len__(self):
        return len(self.coordinates)

    @classmethod
    def from_path(
        cls,
        path_result: PathResult = None,
        units: str = DEFAULT_UNITS,
        speed_knots: float | None = None,
    ) -> Route:
        """Construct from a path result.

        Parameters
        ----------
        path_result : PathResult
            Shortest path.
        units : str
            Units of the length. Unknown units are treated as km.
        speed_knots : float, optional
            Speed over ground used to estimate the voyage duration.

        Returns
        -------
        Route
        """
        coordinates = as_polyline(path_result.path)
        length = polyline_length(coordinates, units=units)
        duration_hours = None
        if speed_knots is not None:
            if speed_knots <= 0:
                raise ValueError("speed_knots must be positive")
            length_meters = 1000.0 * polyline_length(coordinates, units="km")
            duration_hours = length_meters / knots_to_ms(speed_knots) / 3600.0
        return cls(
            coordinates=coordinates,
            length=length,
            units=units,
            duration_hours=duration_hours,
        )

    @property
    def line_string(self):
        """LineString geometry with x=lon and y=lat."""
        if len(self.coordinates) == 1:
            # single-vertex route: repeat the point to get a valid line
            return LineString(self.coordinates * 2)
        return LineString(self.coordinates)

    @property
    def data_frame(self):
        """Data frame with cols lon, lat, distance (cumulative, route units)."""
        coords = np.array(self.coordinates, dtype=float).reshape(-1, 2)
        steps_km = great_circle_distance_km(coords[:-1], coords[1:])
        distance_km = np.concatenate(([0.0], np.cumsum(steps_km)))
        return pd.DataFrame(
            {
                "lon": coords[:, 0],
                "lat": coords[:, 1],
                "distance": convert_distance(distance_km, "km", self.units),
            }
        )

    def to_geojson(self) -> dict[str, Any]:
        """GeoJSON LineString feature with units and length properties."""
        properties = {"units": self.units, "length": self.length}
        if self.duration_hours is not None:
            properties["duration_hours"] = self.duration_hours
        return {
            "type": "Feature",
            "properties": properties,
            "geometry": {
                "type": "LineString",
                "coordinates": [list(c) for c in self.coordinates],
            },
        }

    @classmethod
    def from_geojson(cls, feature: dict[str, Any]) -> Route:
        """Construct from a GeoJSON LineString feature."""
        geometry = feature["geometry"]
        if geometry.get("type") != "LineString":
            raise ValueError(f"Expected LineString, got {geometry.get('type')!r}")
        properties = feature.get("properties") or {}
        coordinates = as_polyline(geometry["coordinates"])
        units = properties.get("units", DEFAULT_UNITS)
        length = properties.get("length")
        return cls(
            coordinates=coordinates,
            length=(
                float(length)
                if length is not None
                else polyline_length(coordinates, units=units)
            ),
            units=units,
            duration_hours=properties.get("duration_hours"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Simple dict representation of the route."""
        return {
            "coordinates": [list(c) for c in self.coordinates],
            "length": float(self.length),
            "units": self.units,
            "duration_hours": self.duration_hours,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Route:
        """Construct route from dict."""
        return cls(
            coordinates=as_polyline(data["coordinates"]),
            length=float(data["length"]),
            units=data.get("units", DEFAULT_UNITS),
            duration_hours=data.get("duration_hours"),
        )
