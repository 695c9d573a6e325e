"""Shortest paths over a network graph."""

from __future__ import annotations

from dataclasses import dataclass
import heapq
from typing import Sequence

from .network import Coordinate, NetworkGraph, VertexKey, vertex_key


@dataclass(frozen=True)
class PathResult:
    """Shortest path between two vertices.

    Attributes
    ----------
    path : tuple
        Original (lon, lat) coordinates from start to end, both included.
    distance_km : float
        Total weight of the path in km.
    """

    path: tuple[Coordinate, ...]
    distance_km: float

    def __len__(self):
        return len(self.path)


class PathFinder:
    """Dijkstra search over a shared, read-only ``NetworkGraph``.

    All search state is local to ``find_path``, so one instance can serve
    concurrent queries.
    """

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def find_path(
        self, start: Sequence[float] = None, end: Sequence[float] = None
    ) -> PathResult | None:
        """Find the shortest path between two network vertices.

        No snapping happens here: both coordinates need to round to existing
        vertices.

        Parameters
        ----------
        start : (lon, lat)
            Start coordinate.
        end : (lon, lat)
            End coordinate.

        Returns
        -------
        PathResult or None
            None if either end is not a vertex or if the two are not connected.
        """
        start_key = vertex_key(start)
        end_key = vertex_key(end)
        if start_key not in self.graph or end_key not in self.graph:
            return None

        if start_key == end_key:
            return PathResult(
                path=(self.graph.coordinate_of(start_key),), distance_km=0.0
            )

        distances: dict[VertexKey, float] = {start_key: 0.0}
        previous: dict[VertexKey, VertexKey] = {}
        finalized: set[VertexKey] = set()
        frontier: list[tuple[float, VertexKey]] = [(0.0, start_key)]

        while frontier:
            current_distance, current = heapq.heappop(frontier)
            if current in finalized:
                continue  # stale entry
            finalized.add(current)
            if current == end_key:
                break

            for neighbor, weight in self.graph.neighbors(current):
                if neighbor in finalized:
                    continue
                candidate = current_distance + weight
                if candidate < distances.get(neighbor, float("inf")):
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(frontier, (candidate, neighbor))

        if end_key not in previous:
            return None

        keys = [end_key]
        while keys[-1] != start_key:
            keys.append(previous[keys[-1]])
        keys.reverse()

        return PathResult(
            path=tuple(self.graph.coordinate_of(key) for key in keys),
            distance_km=distances[end_key],
        )


def find_path(
    graph: NetworkGraph = None,
    start: Sequence[float] = None,
    end: Sequence[float] = None,
) -> PathResult | None:
    """Shortest path between start and end on graph, see ``PathFinder``."""
    return PathFinder(graph).find_path(start=start, end=end)
