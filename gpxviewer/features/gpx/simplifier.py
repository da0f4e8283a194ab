"""
Point Simplifier

Drops points that sit too close to the previously kept point.
A rendering economy only: telemetry always uses the full point list.
"""

from typing import List, Optional, Sequence

from gpxviewer.config import Settings, settings as default_settings
from gpxviewer.shared.geo import planar_distance
from .models import GeoPoint

DEFAULT_MIN_DELTA = 0.0001


def simplify(
    points: Sequence[GeoPoint],
    min_delta: float = DEFAULT_MIN_DELTA
) -> List[GeoPoint]:
    """
    Greedy single-pass minimum-distance filter.

    The first point is always kept. A later point is kept iff its planar
    distance from the last kept point is strictly greater than `min_delta`.
    There is no lookahead; a retained point is never dropped again.

    Args:
        points: Ordered points
        min_delta: Threshold in decimal degrees

    Returns:
        Ordered subsequence of `points` (empty for empty input)

    Raises:
        ValueError: If min_delta is negative
    """
    if min_delta < 0:
        raise ValueError(f"min_delta must be >= 0, got {min_delta}")
    if not points:
        return []

    last = points[0]
    kept = [last]
    for point in points[1:]:
        if planar_distance(last.lat, last.lon, point.lat, point.lon) > min_delta:
            kept.append(point)
            last = point
    return kept


class PointSimplifier:
    """Simplifier bound to a configured threshold."""

    def __init__(
        self,
        min_delta: Optional[float] = None,
        settings: Optional[Settings] = None
    ):
        settings = settings or default_settings
        self.min_delta = settings.min_point_delta if min_delta is None else min_delta
        if self.min_delta < 0:
            raise ValueError(f"min_delta must be >= 0, got {self.min_delta}")

    def simplify(self, points: Sequence[GeoPoint]) -> List[GeoPoint]:
        return simplify(points, self.min_delta)
