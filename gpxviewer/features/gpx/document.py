"""
GPX Document Model

Parses a GPX document into read-only tracks, routes and waypoints.

Tracks, routes and metadata come from gpxpy. Waypoints are read from the
raw element tree so that their attributes, child elements and embedded
`html` content stay available, in document order, for marker content.

A track's display colour is the first DisplayColor element found in any
extension block under its <trk>: track, trackpoint or segment level.
"""

import codecs
import logging
import re
import xml.etree.ElementTree as ET
from typing import List, Optional, Union

import gpxpy
import gpxpy.gpx

from gpxviewer.config import Settings, settings as default_settings
from .errors import MalformedDocumentError
from .models import GeoPoint, PointTelemetry, Route, Segment, Track, TrackPoint, Waypoint

logger = logging.getLogger(__name__)

TELEMETRY_BLOCK_TAG = "TrackPointExtension"
DISPLAY_COLOR_TAG = "DisplayColor"
EMBEDDED_CONTENT_TAG = "html"

XML_DECLARATION = re.compile(r"^\ufeff?\s*<\?xml[^>]*\?>")
DECLARED_ENCODING = re.compile(
    rb"""^(?:\xef\xbb\xbf)?\s*<\?xml[^>]*?encoding\s*=\s*["']([A-Za-z0-9._-]+)["']"""
)


def local_name(tag: str) -> str:
    """Strip the '{namespace}' part of an ElementTree tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _find_first(elements, name: str) -> Optional[ET.Element]:
    """First element named `name` among `elements` and their descendants."""
    for element in elements:
        for candidate in element.iter():
            if local_name(candidate.tag) == name:
                return candidate
    return None


def _decode(content: bytes) -> str:
    """
    Decode raw GPX bytes the way an XML parser would.

    A UTF-16 byte order mark wins, then the declared encoding,
    then UTF-8 (with or without BOM).
    """
    if content.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encoding = "utf-16"
    else:
        m = DECLARED_ENCODING.match(content)
        encoding = m.group(1).decode("ascii") if m else "utf-8-sig"
    try:
        if codecs.lookup(encoding).name == "utf-8":
            encoding = "utf-8-sig"
        return content.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"GPX is not valid {encoding}: {e}") from e


def _element_text(element: Optional[ET.Element]) -> Optional[str]:
    if element is None or element.text is None:
        return None
    text = element.text.strip()
    return text or None


def _parse_float(element: Optional[ET.Element]) -> Optional[float]:
    """Numeric text of an extension value, None if absent or malformed."""
    text = _element_text(element)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        logger.debug(f"Ignoring non-numeric extension value {text!r}")
        return None
    if value != value:  # NaN
        return None
    return value


def parse_time_offset(description: Optional[str], default: float) -> float:
    """
    Read the document time offset from a 'key=<offset>' description.

    Absent or malformed descriptions leave the default in place.

    Examples:
        "tz=5" -> 5.0
        "no offset here" -> default
    """
    if not description:
        return default
    key, sep, value = description.partition("=")
    if not sep:
        logger.debug(f"metadata/desc has no offset: {description!r}")
        return default
    # Only the token right after the first '=' counts
    value = value.split("=", 1)[0].strip()
    try:
        return float(value)
    except ValueError:
        logger.debug(f"Malformed time offset {value!r}, using {default}")
        return default


class GpxDocument:
    """
    Typed, read-only view of a parsed GPX document.

    Usage:
        document = GpxDocument.parse(content)
        for track in document.tracks:
            ...
    """

    def __init__(
        self,
        gpx: gpxpy.gpx.GPX,
        root: ET.Element,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or default_settings
        self.root = root
        self.name: Optional[str] = gpx.name
        self.description: Optional[str] = gpx.description
        self.time_offset = parse_time_offset(
            gpx.description, self.settings.default_time_offset
        )
        self.tracks: List[Track] = [self._build_track(t) for t in gpx.tracks]
        self.routes: List[Route] = [self._build_route(r) for r in gpx.routes]
        self.waypoints: List[Waypoint] = [
            self._build_waypoint(element)
            for element in root
            if local_name(element.tag) == "wpt"
        ]

    @classmethod
    def parse(
        cls,
        content: Union[bytes, str],
        settings: Optional[Settings] = None
    ) -> "GpxDocument":
        """
        Parse GPX content.

        Bytes are decoded with the encoding named in the XML declaration
        (UTF-8 when there is none), so Latin-1 or Windows-1252 files load.

        Args:
            content: GPX document as bytes or str

        Returns:
            GpxDocument

        Raises:
            MalformedDocumentError: If the content is not a usable GPX document
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise MalformedDocumentError(f"Invalid GPX file: {e}") from e

        if local_name(root.tag) != "gpx":
            raise MalformedDocumentError(
                f"Expected <gpx> root element, got <{local_name(root.tag)}>"
            )

        text = content if isinstance(content, str) else _decode(content)
        # The text is already decoded; a stale encoding declaration
        # must not be applied a second time.
        text = XML_DECLARATION.sub("", text, count=1)

        try:
            gpx = gpxpy.parse(text)
        except (gpxpy.gpx.GPXException, ValueError) as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise MalformedDocumentError(f"Invalid GPX file: {e}") from e

        return cls(gpx, root, settings=settings)

    # =========================================================================
    # Accessors
    # =========================================================================

    def iter_track_points(self):
        """Positions of every trackpoint, track by track."""
        for track in self.tracks:
            for point in track.iter_points():
                yield point.position

    def iter_route_points(self):
        for route in self.routes:
            yield from route.points

    def iter_waypoints(self):
        for waypoint in self.waypoints:
            yield waypoint.position

    @property
    def is_empty(self) -> bool:
        """True when the document holds no point at all."""
        return (
            next(self.iter_track_points(), None) is None
            and next(self.iter_route_points(), None) is None
            and not self.waypoints
        )

    # =========================================================================
    # Builders
    # =========================================================================

    @staticmethod
    def _position(lat, lon, where: str) -> GeoPoint:
        try:
            return GeoPoint.parse(lat, lon)
        except ValueError as e:
            raise MalformedDocumentError(f"Bad coordinates in {where}: {e}") from e

    def _build_track(self, track: gpxpy.gpx.GPXTrack) -> Track:
        segments = []
        # Extension blocks anywhere under <trk>, in document order
        extensions = list(track.extensions)
        for segment in track.segments:
            points = tuple(
                self._build_track_point(point) for point in segment.points
            )
            segments.append(Segment(points=points))
            for point in segment.points:
                extensions.extend(point.extensions)
            extensions.extend(segment.extensions)

        colour = _element_text(_find_first(extensions, DISPLAY_COLOR_TAG))
        if colour is None:
            logger.debug(f"Track {track.name!r} has no display colour")

        return Track(
            name=track.name,
            segments=tuple(segments),
            display_color=colour,
        )

    def _build_track_point(self, point: gpxpy.gpx.GPXTrackPoint) -> TrackPoint:
        blocks = []
        for extension in point.extensions:
            for element in extension.iter():
                if local_name(element.tag) == TELEMETRY_BLOCK_TAG:
                    blocks.append(self._build_telemetry(element))

        return TrackPoint(
            position=self._position(point.latitude, point.longitude, "trkpt"),
            time=point.time,
            description=point.description,
            telemetry_blocks=tuple(blocks),
        )

    @staticmethod
    def _build_telemetry(block: ET.Element) -> PointTelemetry:
        return PointTelemetry(
            speed=_parse_float(_find_first([block], "speed")),
            direction=_parse_float(_find_first([block], "direction")),
            heel=_parse_float(_find_first([block], "heel")),
        )

    def _build_route(self, route: gpxpy.gpx.GPXRoute) -> Route:
        points = tuple(
            self._position(point.latitude, point.longitude, "rtept")
            for point in route.points
        )
        return Route(name=route.name, points=points)

    def _build_waypoint(self, element: ET.Element) -> Waypoint:
        position = self._position(element.get("lat"), element.get("lon"), "wpt")

        attributes = tuple(
            (local_name(name), value) for name, value in element.attrib.items()
        )

        children = []
        name = None
        for child in element:
            text = _element_text(child)
            if text is None:
                continue
            tag = local_name(child.tag)
            children.append((tag, text))
            if tag == "name" and name is None:
                name = text

        return Waypoint(
            position=position,
            tag=local_name(element.tag),
            name=name,
            content=self._embedded_content(element),
            attributes=attributes,
            children=tuple(children),
        )

    @staticmethod
    def _embedded_content(element: ET.Element) -> Optional[str]:
        """Direct text of the first nested <html> element, verbatim."""
        for candidate in element.iter():
            if candidate is element or local_name(candidate.tag) != EMBEDDED_CONTENT_TAG:
                continue
            parts = [candidate.text or ""]
            parts.extend(child.tail or "" for child in candidate)
            return "".join(parts)
        return None
