"""Maritime network and the weighted graph built from it."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Iterable, Iterator, Sequence, Tuple

import numpy as np

from .config import VERTEX_PRECISION
from .geodesics import great_circle_distance_km

Coordinate = Tuple[float, float]
VertexKey = Tuple[int, int]

_KEY_SCALE = 10**VERTEX_PRECISION


def vertex_key(coord: Sequence[float]) -> VertexKey:
    """Canonical vertex identity of a (lon, lat) coordinate.

    Coordinates which agree after rounding to ``VERTEX_PRECISION`` decimals
    share a key.
    """
    # round in decimal first, scaling alone can land exactly on .5
    return (
        int(round(round(coord[0], VERTEX_PRECISION) * _KEY_SCALE)),
        int(round(round(coord[1], VERTEX_PRECISION) * _KEY_SCALE)),
    )


def as_polyline(coords: Iterable[Sequence[float]]) -> tuple[Coordinate, ...]:
    """Cast an iterable of (lon, lat) pairs to a tuple of float tuples."""
    return tuple((float(c[0]), float(c[1])) for c in coords)


@dataclass(frozen=True)
class Network:
    """Ordered collection of network polylines.

    Order matters: snapping breaks ties by the first polyline.

    Attributes
    ----------
    polylines : tuple
        Polylines, each a tuple of (lon, lat) coordinates.
    properties : tuple
        Properties of each polyline (e.g. GeoJSON feature properties).
    """

    polylines: tuple[tuple[Coordinate, ...], ...] = ()
    properties: tuple[dict[str, Any], ...] = field(default=(), compare=False)

    def __post_init__(self):
        if self.properties and len(self.properties) != len(self.polylines):
            raise ValueError("Need one properties entry per polyline.")

    def __len__(self) -> int:
        return len(self.polylines)

    def __iter__(self) -> Iterator[tuple[Coordinate, ...]]:
        return iter(self.polylines)

    def __getitem__(self, key):
        return self.polylines[key]

    @classmethod
    def from_polylines(
        cls,
        polylines: Iterable[Iterable[Sequence[float]]] = (),
        properties: Iterable[dict[str, Any]] | None = None,
    ) -> Network:
        """Construct from any iterable of (lon, lat) sequences."""
        return cls(
            polylines=tuple(as_polyline(p) for p in polylines),
            properties=tuple(properties) if properties is not None else (),
        )


class NetworkGraph:
    """Weighted undirected graph of a maritime network.

    Vertices are keyed by ``vertex_key`` and keep the first original coordinate
    seen for them. Every edge is stored twice, once per direction, with its
    great-circle length in km as weight. The graph is read-only once built.
    """

    __slots__ = ("_coordinates", "_adjacency", "_edge_count")

    def __init__(
        self,
        coordinates: dict[VertexKey, Coordinate],
        adjacency: dict[VertexKey, tuple[tuple[VertexKey, float], ...]],
        edge_count: int = 0,
    ):
        self._coordinates = coordinates
        self._adjacency = adjacency
        self._edge_count = edge_count

    @classmethod
    def build(
        cls, polylines: Network | Iterable[Iterable[Sequence[float]]] = ()
    ) -> NetworkGraph:
        """Build the graph from polylines.

        Polylines with fewer than two points are skipped. Parallel edges are
        kept.

        Parameters
        ----------
        polylines : Network or iterable
            Network, or iterable of polylines of (lon, lat) pairs.

        Returns
        -------
        NetworkGraph
        """
        coordinates: dict[VertexKey, Coordinate] = {}
        adjacency: dict[VertexKey, list[tuple[VertexKey, float]]] = {}
        edge_count = 0

        for polyline in polylines:
            coords = as_polyline(polyline)
            if len(coords) < 2:
                continue

            weights = great_circle_distance_km(
                np.array(coords[:-1]), np.array(coords[1:])
            )
            for start, end, weight in zip(coords[:-1], coords[1:], weights):
                key_start = vertex_key(start)
                key_end = vertex_key(end)
                coordinates.setdefault(key_start, start)
                coordinates.setdefault(key_end, end)
                weight = float(weight)
                adjacency.setdefault(key_start, []).append((key_end, weight))
                adjacency.setdefault(key_end, []).append((key_start, weight))
                edge_count += 1

        graph = cls(
            coordinates=coordinates,
            adjacency={key: tuple(edges) for key, edges in adjacency.items()},
            edge_count=edge_count,
        )
        logging.info(
            "built network graph with %d vertices and %d edges",
            len(graph),
            graph.edge_count,
        )
        return graph

    def __len__(self) -> int:
        return len(self._coordinates)

    def __contains__(self, key) -> bool:
        return key in self._coordinates

    @property
    def edge_count(self) -> int:
        """Number of undirected edges (parallel edges counted separately)."""
        return self._edge_count

    def keys(self):
        """All vertex keys."""
        return self._coordinates.keys()

    def contains(self, key: VertexKey) -> bool:
        """Whether key is a vertex of the graph."""
        return key in self._coordinates

    def neighbors(self, key: VertexKey) -> tuple[tuple[VertexKey, float], ...]:
        """Adjacent (vertex key, weight in km) pairs. Empty for unknown keys."""
        return self._adjacency.get(key, ())

    def coordinate_of(self, key: VertexKey) -> Coordinate:
        """Original coordinate of a vertex.

        Raises
        ------
        KeyError
            If key is not a vertex of the graph.
        """
        return self._coordinates[key]
