"""
GPX document entities.

Read-only views built in one pass from the source document.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional, Tuple

from gpxviewer.shared.geo import parse_degrees
from .errors import CorrelationMismatchError


@dataclass(frozen=True)
class GeoPoint:
    """A position in decimal degrees."""
    lat: float
    lon: float

    @classmethod
    def parse(cls, lat, lon) -> "GeoPoint":
        """
        Build a point from raw attribute values.

        Raises:
            ValueError: If either coordinate is non-numeric or out of range
        """
        return cls(lat=parse_degrees(lat, "lat"), lon=parse_degrees(lon, "lon"))


@dataclass(frozen=True)
class PointTelemetry:
    """
    Vendor telemetry of a single trackpoint.

    None means the value was not present in the extension block,
    which is distinct from a genuine zero reading.
    """
    speed: Optional[float] = None
    direction: Optional[float] = None
    heel: Optional[float] = None


@dataclass(frozen=True)
class TrackPoint:
    """A recorded point: position, optional time, description and telemetry."""
    position: GeoPoint
    time: Optional[datetime] = None
    description: Optional[str] = None
    telemetry_blocks: Tuple[PointTelemetry, ...] = ()

    @property
    def telemetry(self) -> Optional[PointTelemetry]:
        """
        The point's telemetry block, if any.

        Raises:
            CorrelationMismatchError: If the point carries several blocks
        """
        if not self.telemetry_blocks:
            return None
        if len(self.telemetry_blocks) > 1:
            raise CorrelationMismatchError(
                f"trackpoint at ({self.position.lat}, {self.position.lon}) carries "
                f"{len(self.telemetry_blocks)} telemetry blocks"
            )
        return self.telemetry_blocks[0]


@dataclass(frozen=True)
class Segment:
    """Contiguous run of trackpoints."""
    points: Tuple[TrackPoint, ...] = ()

    @property
    def positions(self) -> Tuple[GeoPoint, ...]:
        return tuple(point.position for point in self.points)


@dataclass(frozen=True)
class Track:
    """A recorded path split into segments."""
    name: Optional[str] = None
    segments: Tuple[Segment, ...] = ()
    display_color: Optional[str] = None

    def iter_points(self) -> Iterator[TrackPoint]:
        """All trackpoints of all segments, in document order."""
        for segment in self.segments:
            yield from segment.points


@dataclass(frozen=True)
class Route:
    """A planned path; route points carry no timestamp."""
    name: Optional[str] = None
    points: Tuple[GeoPoint, ...] = ()


@dataclass(frozen=True)
class Waypoint:
    """
    A labelled point of interest.

    `attributes` and `children` keep document order and are used to
    synthesize marker content when no embedded content exists.
    """
    position: GeoPoint
    tag: str = "wpt"
    name: Optional[str] = None
    content: Optional[str] = None
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple[Tuple[str, str], ...] = ()
