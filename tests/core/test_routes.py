from sea_routing.core.geodesics import convert_distance, polyline_length
from sea_routing.core.pathfinding import PathResult
from sea_routing.core.routes import Route

from dataclasses import FrozenInstanceError

import numpy as np
from shapely.geometry import LineString

import pytest


def _path_result():
    path = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    return PathResult(path=path, distance_km=polyline_length(path, units="km"))


def test_route_is_immutable():
    route = Route.from_path(_path_result())
    with pytest.raises(FrozenInstanceError):
        route.length = 5.1


@pytest.mark.parametrize("units", ["nm", "miles", "kilometers", "km"])
def test_route_length_in_units(units):
    path_result = _path_result()
    route = Route.from_path(path_result, units=units)
    assert route.units == units
    np.testing.assert_allclose(
        route.length, convert_distance(path_result.distance_km, "km", units)
    )


def test_route_default_units_are_nm():
    route = Route.from_path(_path_result())
    assert route.units == "nm"
    np.testing.assert_allclose(route.length, 120.08, rtol=1e-4)


def test_route_unknown_units_give_km():
    route = Route.from_path(_path_result(), units="furlongs")
    assert route.units == "furlongs"
    np.testing.assert_allclose(route.length, _path_result().distance_km)


def test_route_duration():
    path_result = _path_result()
    route = Route.from_path(path_result, speed_knots=10.0)
    # 10 knots are 18.52 km/h
    np.testing.assert_allclose(
        route.duration_hours, path_result.distance_km / 18.52, rtol=1e-6
    )
    assert Route.from_path(path_result).duration_hours is None


def test_route_duration_needs_positive_speed():
    with pytest.raises(ValueError):
        Route.from_path(_path_result(), speed_knots=0.0)


def test_route_geojson():
    feature = Route.from_path(_path_result(), units="km").to_geojson()
    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "LineString"
    assert feature["geometry"]["coordinates"] == [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]]
    assert feature["properties"]["units"] == "km"
    np.testing.assert_allclose(feature["properties"]["length"], 222.39, rtol=1e-4)
    assert "duration_hours" not in feature["properties"]


def test_route_geojson_roundtrip():
    route_orig = Route.from_path(_path_result(), units="miles", speed_knots=12.0)
    route_new = Route.from_geojson(route_orig.to_geojson())
    assert route_new == route_orig


def test_route_from_geojson_needs_line_string():
    with pytest.raises(ValueError):
        Route.from_geojson(
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]}}
        )


def test_route_from_geojson_without_length():
    route = Route.from_geojson(
        {
            "type": "Feature",
            "properties": {"units": "km"},
            "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 0]]},
        }
    )
    np.testing.assert_allclose(route.length, 111.19, rtol=1e-4)


def test_route_dict_roundtrip():
    route_orig = Route.from_path(_path_result(), units="nm")
    assert Route.from_dict(route_orig.to_dict()) == route_orig


def test_route_line_string():
    route = Route.from_path(_path_result())
    assert isinstance(route.line_string, LineString)
    assert list(route.line_string.coords) == list(route.coordinates)


def test_single_vertex_route():
    route = Route.from_path(PathResult(path=((3.0, 4.0),), distance_km=0.0))
    assert route.length == 0.0
    assert len(route) == 1
    assert route.line_string.length == 0.0


def test_route_data_frame():
    route = Route.from_path(_path_result(), units="km")
    df = route.data_frame
    assert list(df.columns) == ["lon", "lat", "distance"]
    assert len(df) == len(route)
    assert df["distance"].iloc[0] == 0.0
    np.testing.assert_allclose(df["distance"].iloc[-1], route.length, rtol=1e-12)
    assert df["distance"].is_monotonic_increasing
