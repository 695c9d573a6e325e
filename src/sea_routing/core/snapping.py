from __future__ import annotations

from typing import Sequence

from .config import SNAP_MAX_DISTANCE_KM
from .geodesics import point_to_polyline_distance, rhumb_distance
from .network import Coordinate, Network


class RouteSnapper:
    """Move arbitrary query points onto vertices of the network.

    Parameters
    ----------
    network : Network
        Network polylines. Their order decides ties.
    max_distance_km : float
        Polylines need to be closer than this to be considered.
    """

    def __init__(
        self,
        network: Network,
        max_distance_km: float = SNAP_MAX_DISTANCE_KM,
    ):
        if max_distance_km <= 0:
            raise ValueError("max_distance_km must be positive")
        self.network = network
        self.max_distance_km = max_distance_km

    def nearest_polyline_index(self, point: Sequence[float] = None) -> int | None:
        """Index of the closest polyline, first one on ties.

        None if no polyline is closer than ``max_distance_km``.
        """
        nearest_index = None
        min_distance = self.max_distance_km
        for index, polyline in enumerate(self.network.polylines):
            dist = point_to_polyline_distance(point, polyline, units="km")
            if dist < min_distance:
                min_distance = dist
                nearest_index = index
        return nearest_index

    def snap(self, point: Sequence[float] = None) -> Coordinate:
        """Nearest vertex (by rhumb distance) of the nearest polyline.

        Returns the point unchanged if there is no polyline within reach.

        Snapping is idempotent except for ties: a vertex of one polyline that
        lies on a segment of an earlier polyline snaps to a vertex of the
        earlier one.
        """
        point = (float(point[0]), float(point[1]))
        index = self.nearest_polyline_index(point)
        if index is None:
            return point

        nearest_coord = None
        nearest_dist = None
        for coord in self.network.polylines[index]:
            dist = rhumb_distance(point, coord, units="km")
            if nearest_dist is None or dist < nearest_dist:
                nearest_dist = dist
                nearest_coord = coord
        return nearest_coord
