"""
Geographic utility functions.

Planar (lat, lon) helpers used by the simplifier and bounds code.
Distances here are in decimal degrees, NOT great-circle distances.
"""
import math

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)


def planar_distance(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Euclidean distance between two points in (lat, lon) space.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in degrees
    """
    lat_diff = lat2 - lat1
    lon_diff = lon2 - lon1
    return math.sqrt(lat_diff * lat_diff + lon_diff * lon_diff)


def parse_degrees(value, axis: str) -> float:
    """
    Parse a decimal-degree value and check its range.

    Args:
        value: String or number, e.g. "49.327667"
        axis: "lat" or "lon"

    Returns:
        The coordinate as float

    Raises:
        ValueError: If the value is not numeric or out of range
    """
    if value is None:
        raise ValueError(f"missing {axis}")
    try:
        degrees = float(str(value).strip())
    except ValueError:
        raise ValueError(f"non-numeric {axis}: {value!r}")
    if math.isnan(degrees):
        raise ValueError(f"non-numeric {axis}: {value!r}")

    low, high = LAT_RANGE if axis == "lat" else LON_RANGE
    if not low <= degrees <= high:
        raise ValueError(f"{axis} {degrees} outside [{low}, {high}]")
    return degrees


def midpoint(low: float, high: float) -> float:
    """Arithmetic mean of two extremes."""
    return (low + high) / 2
