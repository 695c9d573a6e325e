from sea_routing.core.network import Network, NetworkGraph
from sea_routing.core.pathfinding import PathFinder
from sea_routing.core.snapping import RouteSnapper
from sea_routing.core.data import load_network

import pytest

from conftest import SAMPLE_NETWORK_FILE


def _two_legs_network():
    return Network.from_polylines(
        [[(0.0, 0.0), (1.0, 0.0)], [(1.0, 0.0), (1.0, 1.0)]]
    )


def test_snap_to_nearest_vertex_of_nearest_line():
    snapper = RouteSnapper(_two_legs_network())
    assert snapper.snap((0.3, 0.1)) == (0.0, 0.0)
    assert snapper.snap((1.1, 0.8)) == (1.0, 1.0)


def test_snap_vertex_is_identity():
    snapper = RouteSnapper(_two_legs_network())
    for vertex in [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]:
        assert snapper.snap(vertex) == vertex


def test_snap_only_considers_vertices_of_nearest_line():
    # (1.0, 0.6) is closer to (1.0, 1.0) of the second line, but the first line
    # is the nearest one
    network = Network.from_polylines(
        [[(0.0, 0.5), (2.0, 0.5)], [(1.0, 1.0), (1.0, 3.0)]]
    )
    snapper = RouteSnapper(network)
    assert snapper.nearest_polyline_index((1.0, 0.6)) == 0
    assert snapper.snap((1.0, 0.6)) in {(0.0, 0.5), (2.0, 0.5)}


def test_snap_ties_broken_by_network_order():
    short = [(0.0, 0.0), (2.0, 0.0)]
    dense = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    point = (0.9, 0.5)

    assert RouteSnapper(Network.from_polylines([short, dense])).snap(point) == (
        0.0,
        0.0,
    )
    assert RouteSnapper(Network.from_polylines([dense, short])).snap(point) == (
        1.0,
        0.0,
    )


@pytest.mark.parametrize(
    "point",
    [(-2.0, 49.5), (5.0, 54.5), (15.0, 55.2), (-7.0, 45.0), (1.3, 51.0), (0.0, 0.0)],
)
def test_snap_is_idempotent(point):
    snapper = RouteSnapper(load_network(SAMPLE_NETWORK_FILE))
    snapped = snapper.snap(point)
    assert snapper.snap(snapped) == snapped


def test_snap_result_is_graph_vertex():
    network = load_network(SAMPLE_NETWORK_FILE)
    graph = NetworkGraph.build(network)
    snapper = RouteSnapper(network)
    for point in [(-2.0, 49.5), (5.0, 54.5), (15.0, 55.2)]:
        snapped = snapper.snap(point)
        assert PathFinder(graph).find_path(snapped, snapped) is not None


def test_snap_far_point_returns_input():
    snapper = RouteSnapper(_two_legs_network(), max_distance_km=10.0)
    assert snapper.nearest_polyline_index((50.0, 50.0)) is None
    assert snapper.snap((50.0, 50.0)) == (50.0, 50.0)


def test_snap_far_point_not_found():
    network = _two_legs_network()
    snapper = RouteSnapper(network, max_distance_km=10.0)
    path_finder = PathFinder(NetworkGraph.build(network))
    origin = snapper.snap((50.0, 50.0))
    destination = snapper.snap((1.0, 1.0))
    assert path_finder.find_path(origin, destination) is None


def test_snap_empty_network_returns_input():
    assert RouteSnapper(Network()).snap((3.0, 4.0)) == (3.0, 4.0)


def test_snap_ignores_single_point_lines():
    network = Network.from_polylines([[(0.0, 0.0)], [(5.0, 5.0), (6.0, 5.0)]])
    assert RouteSnapper(network).snap((0.0, 0.0)) == (5.0, 5.0)


def test_default_threshold_admits_antipodes():
    snapper = RouteSnapper(_two_legs_network())
    assert snapper.snap((-179.5, -0.5)) in {(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)}


def test_snap_threshold_must_be_positive():
    with pytest.raises(ValueError):
        RouteSnapper(_two_legs_network(), max_distance_km=0.0)


def test_snap_vertex_inside_segment_of_earlier_line():
    # (1, 0) is a vertex of the second line and lies on the first one
    network = Network.from_polylines(
        [[(0.0, 0.0), (2.0, 0.0)], [(1.0, 0.0), (1.0, 1.0)]]
    )
    snapper = RouteSnapper(network)
    snapped = snapper.snap((1.0, 0.1))
    assert snapped == (1.0, 0.0)
    # the tie on distance zero goes to the first line
    assert snapper.snap(snapped) == (0.0, 0.0)
    assert PathFinder(NetworkGraph.build(network)).find_path(
        snapper.snap((1.0, 0.0)), snapper.snap((1.0, 1.0))
    ) is None
