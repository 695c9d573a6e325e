import numpy as np
import pint

from .config import EARTH_RADIUS_KM, earth_radius

# Create unit registry once at module level
_ureg = pint.UnitRegistry()


def knots_to_ms(speed_knots: float) -> float:
    """Convert speed from knots to meters per second."""
    return float((speed_knots * _ureg.knot) / _ureg.meter_per_second)


def ms_to_knots(speed_ms: float) -> float:
    """Convert speed from meters per second to knots."""
    return float((speed_ms * _ureg.meter_per_second) / _ureg.knot)


def convert_distance(
    distance: float = None,
    from_units: str = "km",
    to_units: str = "km",
) -> float:
    """Convert a distance between units via the ratio of earth radii.

    Parameters
    ----------
    distance : float
        Distance in ``from_units``
    from_units : str, default="km"
        One of "km", "kilometers", "miles", "nm". Unknown units mean km.
    to_units : str, default="km"
        One of "km", "kilometers", "miles", "nm". Unknown units mean km.

    Returns
    -------
    float
        Distance in ``to_units``
    """
    distance_km = distance / earth_radius(from_units) * EARTH_RADIUS_KM
    return distance_km / EARTH_RADIUS_KM * earth_radius(to_units)


def great_circle_distance_km(a=None, b=None):
    """Haversine distance on a sphere of radius 6371 km.

    Parameters
    ----------
    a : array-like
        (lon, lat) in degrees, or an array of shape (..., 2)
    b : array-like
        (lon, lat) in degrees, broadcastable against ``a``

    Returns
    -------
    float or np.ndarray
        Distance in km. A float for single coordinates.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    lon1, lat1 = np.deg2rad(a[..., 0]), np.deg2rad(a[..., 1])
    lon2, lat2 = np.deg2rad(b[..., 0]), np.deg2rad(b[..., 1])

    # abs keeps the result bit-identical when swapping a and b
    h = (
        np.sin(np.abs(lat2 - lat1) / 2.0) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin(np.abs(lon2 - lon1) / 2.0) ** 2
    )
    # round-off can push h slightly outside [0, 1] for antipodal points
    h = np.clip(h, 0.0, 1.0)
    dist = 2.0 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h))

    if np.ndim(dist) == 0:
        return float(dist)
    return dist


def rhumb_distance(a=None, b=None, units: str = "km") -> float:
    """Distance along the line of constant bearing from ``a`` to ``b``.

    Parameters
    ----------
    a : array-like
        (lon, lat) in degrees
    b : array-like
        (lon, lat) in degrees
    units : str, default="km"
        Output units. Unknown units mean km.

    Returns
    -------
    float
        Rhumb-line distance in ``units``
    """
    lat1 = np.deg2rad(a[1])
    lat2 = np.deg2rad(b[1])
    d_lat = lat2 - lat1
    d_lon = np.deg2rad(abs(b[0] - a[0]))

    # poles give tan(0) = 0, which ends up in the cos(lat1) or q = 0 branch
    with np.errstate(divide="ignore", invalid="ignore"):
        d_phi = np.log(np.tan(lat2 / 2 + np.pi / 4) / np.tan(lat1 / 2 + np.pi / 4))
    # east-west lines have d_phi ~ 0
    q = d_lat / d_phi if abs(d_phi) >= 1e-12 else np.cos(lat1)

    if d_lon > np.pi:
        d_lon = 2 * np.pi - d_lon

    return float(np.sqrt(d_lat**2 + q**2 * d_lon**2) * earth_radius(units))


def _closest_points_on_segments(point, seg_start, seg_end):
    """Planar projection of point onto segments in lon/lat space."""
    seg = seg_end - seg_start
    rel = point - seg_start
    len_sq = (seg**2).sum(axis=-1)
    dot = (rel * seg).sum(axis=-1)
    param = np.divide(dot, len_sq, out=np.full_like(dot, -1.0), where=len_sq != 0)
    param = param[..., np.newaxis]
    return np.where(
        param <= 0,
        seg_start,
        np.where(param >= 1, seg_end, seg_start + param * seg),
    )


def point_to_segment_distance(point=None, seg_start=None, seg_end=None) -> float:
    """Great-circle distance in km from point to the closest point of a segment.

    The closest point is found by projection in the flat lon/lat plane, which
    is only a good approximation for short segments.
    """
    closest = _closest_points_on_segments(
        np.asarray(point, dtype=float),
        np.asarray(seg_start, dtype=float)[np.newaxis],
        np.asarray(seg_end, dtype=float)[np.newaxis],
    )
    return float(great_circle_distance_km(point, closest[0]))


def point_to_polyline_distance(point=None, polyline=None, units: str = "km") -> float:
    """Minimal distance from point to any segment of a polyline.

    Returns ``inf`` for polylines without segments.
    """
    coords = np.asarray(polyline, dtype=float).reshape(-1, 2)
    if len(coords) < 2:
        return np.inf
    point = np.asarray(point, dtype=float)
    closest = _closest_points_on_segments(point, coords[:-1], coords[1:])
    dist_km = float(np.min(great_circle_distance_km(point, closest)))
    return convert_distance(dist_km, from_units="km", to_units=units)


def polyline_length(coords=None, units: str = "nm") -> float:
    """Sum of great-circle distances between consecutive coordinates."""
    coords = np.asarray(coords, dtype=float).reshape(-1, 2)
    if len(coords) < 2:
        return 0.0
    length_km = float(np.sum(great_circle_distance_km(coords[:-1], coords[1:])))
    return convert_distance(length_km, from_units="km", to_units=units)
