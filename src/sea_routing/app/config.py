from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.config import DEFAULT_UNITS, SNAP_MAX_DISTANCE_KM


def _check_lon_lat(name: str, point: Tuple[float, float]) -> None:
    lon, lat = point
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"{name}: longitude must be between -180 and 180 degrees.")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"{name}: latitude must be between -90 and 90 degrees.")


@dataclass(frozen=True)
class NetworkConfig:
    """Where the network comes from and how query points are snapped onto it."""

    path: str | None = None
    snap_max_distance_km: float = SNAP_MAX_DISTANCE_KM

    def __post_init__(self):
        if self.snap_max_distance_km <= 0:
            raise ValueError("snap_max_distance_km must be positive")


@dataclass(frozen=True)
class JourneyConfig:
    """Definition of the trip that needs to be routed."""

    name: str = "Journey"
    origin: Tuple[float, float] = (-5.0, 49.0)
    destination: Tuple[float, float] = (8.0, 57.5)
    units: str = DEFAULT_UNITS
    speed_knots: float | None = None

    def __post_init__(self):
        object.__setattr__(self, "origin", tuple(float(v) for v in self.origin))
        object.__setattr__(
            self, "destination", tuple(float(v) for v in self.destination)
        )
        _check_lon_lat("origin", self.origin)
        _check_lon_lat("destination", self.destination)
        if self.speed_knots is not None and self.speed_knots <= 0:
            raise ValueError("speed_knots must be positive")


@dataclass(frozen=True)
class RoutingConfig:
    """Top-level configuration consumed by the route calculator."""

    network: NetworkConfig = NetworkConfig()
    journey: JourneyConfig = JourneyConfig()
