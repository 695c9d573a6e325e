from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from .config import JourneyConfig, NetworkConfig, RoutingConfig
from ..core.config import DEFAULT_UNITS
from ..core.data import as_coordinate, load_network
from ..core.network import Coordinate, Network, NetworkGraph
from ..core.pathfinding import PathFinder
from ..core.routes import Route
from ..core.snapping import RouteSnapper


@dataclass
class RoutingResult:
    """Container returned by SeaRouteCalculator.run."""

    origin: Coordinate
    destination: Coordinate
    snapped_origin: Coordinate
    snapped_destination: Coordinate
    route: Route | None = None
    config: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec="seconds")
    )

    @property
    def found(self) -> bool:
        """Whether a route connects origin and destination."""
        return self.route is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "origin": list(self.origin),
            "destination": list(self.destination),
            "snapped_origin": list(self.snapped_origin),
            "snapped_destination": list(self.snapped_destination),
            "route": self.route.to_dict() if self.route else None,
            "config": self.config,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RoutingResult:
        """Reconstruct RoutingResult from dictionary."""
        return cls(
            origin=tuple(data["origin"]),
            destination=tuple(data["destination"]),
            snapped_origin=tuple(data["snapped_origin"]),
            snapped_destination=tuple(data["snapped_destination"]),
            route=Route.from_dict(data["route"]) if data.get("route") else None,
            config=data.get("config", {}),
            timestamp=data.get("timestamp", ""),
        )

    def to_msgpack(self) -> bytes:
        """Serialize to MessagePack binary format."""
        import msgpack

        def _default(obj: Any):
            if isinstance(obj, np.generic):
                return obj.item()
            if isinstance(obj, Path):
                return str(obj)
            raise TypeError(f"Object of type {type(obj)!r} is not serialisable")

        return msgpack.packb(self.to_dict(), use_bin_type=True, default=_default)

    @classmethod
    def from_msgpack(cls, data: bytes) -> RoutingResult:
        """Deserialize from MessagePack binary format."""
        import msgpack

        return cls.from_dict(msgpack.unpackb(data, raw=False))

    def dump_json(self, path: Path | str, *, indent: int = 2) -> None:
        """Write the result to JSON."""

        def _default(obj: Any):
            if isinstance(obj, np.generic):
                return obj.item()
            if isinstance(obj, Path):
                return str(obj)
            raise TypeError(f"Object of type {type(obj)!r} is not JSON serialisable")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            json.dump(self.to_dict(), fh, indent=indent, default=_default)

    @classmethod
    def load_json(cls, path: Path) -> RoutingResult:
        """Load a RoutingResult from disk."""
        with Path(path).open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        return cls.from_dict(data)


class SeaRouteCalculator:
    """Shortest sea routes over a fixed maritime network.

    The network graph is built once on construction and shared, read-only, by
    all queries.

    Parameters
    ----------
    network : Network, optional
        Network to route on. Loaded from ``config.path`` (or the bundled sample
        network) if not given.
    config : NetworkConfig
        Network source and snapping settings.
    """

    def __init__(
        self,
        network: Network | None = None,
        config: NetworkConfig = NetworkConfig(),
    ):
        self.config = config
        self.network = network if network is not None else load_network(config.path)
        self.graph = NetworkGraph.build(self.network)
        self.snapper = RouteSnapper(
            self.network, max_distance_km=config.snap_max_distance_km
        )
        self.path_finder = PathFinder(self.graph)

    def snap(self, point: Any = None) -> Coordinate:
        """Snap a query point onto the network, see ``RouteSnapper.snap``."""
        return self.snapper.snap(as_coordinate(point))

    def calculate_route(
        self,
        origin: Any = None,
        destination: Any = None,
        units: str = DEFAULT_UNITS,
        speed_knots: float | None = None,
    ) -> Route | None:
        """Calculate the shortest sea route between two points.

        Parameters
        ----------
        origin : (lon, lat), shapely Point or GeoJSON Point (feature)
            Start of the route.
        destination : (lon, lat), shapely Point or GeoJSON Point (feature)
            End of the route.
        units : str, default="nm"
            "nm", "miles", "kilometers" or "km". Lengths for unknown units are
            given in km.
        speed_knots : float, optional
            Speed used to estimate the voyage duration.

        Returns
        -------
        Route or None
            None if no route connects the two points.
        """
        route, _, _ = self._route(
            origin=as_coordinate(origin),
            destination=as_coordinate(destination),
            units=units,
            speed_knots=speed_knots,
        )
        return route

    def run(self, journey: JourneyConfig = JourneyConfig()) -> RoutingResult:
        """Route a journey and keep the query, snapped ends and route."""
        route, snapped_origin, snapped_destination = self._route(
            origin=journey.origin,
            destination=journey.destination,
            units=journey.units,
            speed_knots=journey.speed_knots,
        )
        return RoutingResult(
            origin=journey.origin,
            destination=journey.destination,
            snapped_origin=snapped_origin,
            snapped_destination=snapped_destination,
            route=route,
            config=asdict(RoutingConfig(network=self.config, journey=journey)),
        )

    def _route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        units: str,
        speed_knots: float | None,
    ) -> tuple[Route | None, Coordinate, Coordinate]:
        snapped_origin = self.snapper.snap(origin)
        snapped_destination = self.snapper.snap(destination)

        path = self.path_finder.find_path(snapped_origin, snapped_destination)
        if path is None:
            logging.warning(
                "No route found between %s and %s", origin, destination
            )
            return None, snapped_origin, snapped_destination

        route = Route.from_path(path, units=units, speed_knots=speed_knots)
        logging.info(
            "route with %d vertices and length %.3f %s",
            len(route),
            route.length,
            route.units,
        )
        return route, snapped_origin, snapped_destination
