from __future__ import annotations

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MILES = 3958.8
EARTH_RADIUS_NM = 3440.065

# Unit labels accepted for lengths. Anything else is treated as kilometers.
EARTH_RADII = {
    "km": EARTH_RADIUS_KM,
    "kilometers": EARTH_RADIUS_KM,
    "miles": EARTH_RADIUS_MILES,
    "nm": EARTH_RADIUS_NM,
}
DEFAULT_UNITS = "nm"

# Coordinates equal after rounding to this many decimals are the same vertex.
VERTEX_PRECISION = 6

# Always admits on Earth (max great-circle distance is ~20015 km).
SNAP_MAX_DISTANCE_KM = 30_000.0


def earth_radius(units: str = "km") -> float:
    """Earth radius in the requested units, kilometers if unknown."""
    return EARTH_RADII.get(units, EARTH_RADIUS_KM)
