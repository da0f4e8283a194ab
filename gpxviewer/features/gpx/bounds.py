"""
Bounds Calculator

Minimum bounding boxes over points or over other boxes, and the
viewport derived from them.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from gpxviewer.config import Settings, settings as default_settings
from gpxviewer.shared.geo import midpoint
from .models import GeoPoint


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box in lat/lon space.

    Emptiness is an explicit flag: an empty box has all-zero extremes,
    but a box around the single point (0, 0) is NOT empty.
    """
    min_lat: float = 0.0
    max_lat: float = 0.0
    min_lon: float = 0.0
    max_lon: float = 0.0
    is_empty: bool = False

    @classmethod
    def empty(cls) -> "BoundingBox":
        return cls(is_empty=True)

    @classmethod
    def around(cls, point: GeoPoint) -> "BoundingBox":
        return cls(point.lat, point.lat, point.lon, point.lon)

    def extend(self, point: GeoPoint) -> "BoundingBox":
        """Smallest box containing this box and `point`."""
        if self.is_empty:
            return BoundingBox.around(point)
        return BoundingBox(
            min_lat=min(self.min_lat, point.lat),
            max_lat=max(self.max_lat, point.lat),
            min_lon=min(self.min_lon, point.lon),
            max_lon=max(self.max_lon, point.lon),
        )

    @property
    def south_west(self) -> GeoPoint:
        return GeoPoint(self.min_lat, self.min_lon)

    @property
    def north_east(self) -> GeoPoint:
        return GeoPoint(self.max_lat, self.max_lon)

    def contains(self, point: GeoPoint) -> bool:
        if self.is_empty:
            return False
        return (
            self.min_lat <= point.lat <= self.max_lat
            and self.min_lon <= point.lon <= self.max_lon
        )

    def center(self) -> GeoPoint:
        """
        Arithmetic mean of the extremes in each dimension.

        Raises:
            ValueError: If the box is empty
        """
        if self.is_empty:
            raise ValueError("An empty bounding box has no center")
        return GeoPoint(
            lat=midpoint(self.min_lat, self.max_lat),
            lon=midpoint(self.min_lon, self.max_lon),
        )


def bounds_from_points(*categories: Iterable[GeoPoint]) -> BoundingBox:
    """
    Bounding box over several point categories.

    Categories are scanned in the given order (track points, route points,
    waypoints); the first point found initialises the box.

    Returns:
        BoundingBox, empty when no category holds a point
    """
    box = BoundingBox.empty()
    for points in categories:
        for point in points:
            box = box.extend(point)
    return box


def bounds_from_document(document) -> BoundingBox:
    """Bounding box over all track points, route points and waypoints."""
    return bounds_from_points(
        document.iter_track_points(),
        document.iter_route_points(),
        document.iter_waypoints(),
    )


def merge_bounds(boxes: Iterable[BoundingBox]) -> BoundingBox:
    """Smallest box containing every non-empty box in `boxes`."""
    merged = BoundingBox.empty()
    for box in boxes:
        if box.is_empty:
            continue
        merged = merged.extend(box.south_west).extend(box.north_east)
    return merged


@dataclass(frozen=True)
class Viewport:
    """
    Initial view framing.

    `zoom` is only set for the fallback view; otherwise the rendering
    surface fits the zoom level to `bounds`.
    """
    center: GeoPoint
    bounds: BoundingBox
    zoom: Optional[int] = None
    is_fallback: bool = False


def viewport_for(box: BoundingBox, settings: Optional[Settings] = None) -> Viewport:
    """Viewport centred on `box`, or the configured default location if empty."""
    settings = settings or default_settings
    if box.is_empty:
        return Viewport(
            center=GeoPoint(settings.default_center_lat, settings.default_center_lon),
            bounds=box,
            zoom=settings.default_zoom,
            is_fallback=True,
        )
    return Viewport(center=box.center(), bounds=box)
