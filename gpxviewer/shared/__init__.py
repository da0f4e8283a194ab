"""
Shared utilities (NOT business logic).

Usage:
    from gpxviewer.shared import planar_distance
    from gpxviewer.shared.formatters import format_time_of_day
"""
from .geo import (
    planar_distance,
    parse_degrees,
    midpoint,
    LAT_RANGE,
    LON_RANGE,
)
from .formatters import (
    MISSING_TIME,
    round_half_up,
    to_utc,
    time_of_day_seconds,
    format_time_of_day,
)

__all__ = [
    # geo
    "planar_distance",
    "parse_degrees",
    "midpoint",
    "LAT_RANGE",
    "LON_RANGE",
    # formatters
    "MISSING_TIME",
    "round_half_up",
    "to_utc",
    "time_of_day_seconds",
    "format_time_of_day",
]
