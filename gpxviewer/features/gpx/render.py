"""
Track Render Adapter

Composes the pipeline (simplify, telemetry, markers, bounds) and emits
render instructions. The drawing itself belongs to a RenderSurface
implemented by the host application.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Tuple

from gpxviewer.config import Settings, settings as default_settings
from .bounds import (
    BoundingBox,
    Viewport,
    bounds_from_document,
    bounds_from_points,
    merge_bounds,
    viewport_for,
)
from .document import GpxDocument
from .markers import IconSpec, MarkerContentBuilder
from .models import GeoPoint
from .simplifier import PointSimplifier
from .telemetry import TelemetryExtractor, TelemetryTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayStyle:
    """Stroke style of a track or route."""
    colour: str
    width_px: int


@dataclass(frozen=True)
class PolylineDescriptor:
    """One path to draw: a track segment or a route."""
    kind: str  # "track" or "route"
    points: Tuple[GeoPoint, ...]
    style: DisplayStyle
    name: Optional[str] = None
    source_point_count: int = 0

    @property
    def bounds(self) -> BoundingBox:
        return bounds_from_points(self.points)


@dataclass(frozen=True)
class MarkerDescriptor:
    """One marker to draw."""
    position: GeoPoint
    icon: IconSpec
    icon_url: str
    content: str
    name: Optional[str] = None


@dataclass
class RenderModel:
    """Everything the rendering surface needs for one loaded document."""
    polylines: List[PolylineDescriptor] = field(default_factory=list)
    markers: List[MarkerDescriptor] = field(default_factory=list)
    viewport: Optional[Viewport] = None
    telemetry: TelemetryTable = field(default_factory=TelemetryTable)
    time_offset: float = 0.0


class RenderSurface(ABC):
    """
    Sink for render instructions.

    Implemented by the host (map widget, template, JSON exporter...).
    """

    @abstractmethod
    def add_polyline(self, polyline: PolylineDescriptor) -> None:
        pass

    @abstractmethod
    def add_marker(self, marker: MarkerDescriptor) -> None:
        pass

    @abstractmethod
    def set_viewport(self, viewport: Viewport) -> None:
        pass


class TrackRenderAdapter:
    """
    Turns a GpxDocument into render instructions.

    Tracks and routes follow the same simplification policy, each
    switchable through settings (simplify_tracks / simplify_routes).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        icons: Optional[Mapping[int, IconSpec]] = None
    ):
        self.settings = settings or default_settings
        self.simplifier = PointSimplifier(settings=self.settings)
        self.markers = MarkerContentBuilder(
            icons=icons, size_class=self.settings.marker_size_class
        )
        self.telemetry = TelemetryExtractor()

    def render(
        self,
        document: GpxDocument,
        surface: Optional[RenderSurface] = None
    ) -> RenderModel:
        """
        Build the render model and optionally emit it to a surface.

        Args:
            document: Parsed GPX document
            surface: Optional sink receiving every descriptor

        Returns:
            RenderModel
        """
        model = RenderModel(time_offset=document.time_offset)
        model.polylines.extend(self.track_polylines(document))
        model.polylines.extend(self.route_polylines(document))
        model.markers.extend(self.waypoint_markers(document))
        model.telemetry = self.telemetry.extract(document.tracks)
        model.viewport = viewport_for(bounds_from_document(document), self.settings)

        if model.viewport.is_fallback:
            logger.info("Document has no points, using default viewport")

        logger.debug(
            f"Rendered {len(model.polylines)} polylines, {len(model.markers)} markers"
        )

        if surface is not None:
            self.emit(model, surface)
        return model

    def emit(self, model: RenderModel, surface: RenderSurface) -> None:
        for polyline in model.polylines:
            surface.add_polyline(polyline)
        for marker in model.markers:
            surface.add_marker(marker)
        if model.viewport is not None:
            surface.set_viewport(model.viewport)

    # =========================================================================
    # Descriptors
    # =========================================================================

    def track_polylines(self, document: GpxDocument) -> List[PolylineDescriptor]:
        """One polyline per non-empty track segment."""
        polylines = []
        for track in document.tracks:
            style = DisplayStyle(
                colour=track.display_color or self.settings.track_colour,
                width_px=self.settings.track_width,
            )
            for segment in track.segments:
                positions = segment.positions
                if not positions:
                    continue
                polylines.append(self._polyline(
                    "track", positions, style, track.name,
                    simplify=self.settings.simplify_tracks,
                ))
        return polylines

    def route_polylines(self, document: GpxDocument) -> List[PolylineDescriptor]:
        """One polyline per non-empty route."""
        style = DisplayStyle(
            colour=self.settings.track_colour,
            width_px=self.settings.track_width,
        )
        return [
            self._polyline(
                "route", route.points, style, route.name,
                simplify=self.settings.simplify_routes,
            )
            for route in document.routes
            if route.points
        ]

    def waypoint_markers(self, document: GpxDocument) -> List[MarkerDescriptor]:
        icon = self.markers.icon()
        icon_url = icon.url(self.settings.icon_base_path)
        return [
            MarkerDescriptor(
                position=waypoint.position,
                icon=icon,
                icon_url=icon_url,
                content=self.markers.content(waypoint),
                name=waypoint.name,
            )
            for waypoint in document.waypoints
        ]

    def _polyline(
        self,
        kind: str,
        positions: Tuple[GeoPoint, ...],
        style: DisplayStyle,
        name: Optional[str],
        simplify: bool
    ) -> PolylineDescriptor:
        points = self.simplifier.simplify(positions) if simplify else list(positions)
        return PolylineDescriptor(
            kind=kind,
            points=tuple(points),
            style=style,
            name=name,
            source_point_count=len(positions),
        )

    # =========================================================================
    # Framing
    # =========================================================================

    def frame(
        self,
        polylines: Iterable[PolylineDescriptor] = (),
        markers: Iterable[MarkerDescriptor] = ()
    ) -> Viewport:
        """
        Viewport fitting a chosen set of descriptors.

        Merges the bounds of each polyline and the markers' box.
        """
        boxes = [polyline.bounds for polyline in polylines]
        boxes.append(bounds_from_points(marker.position for marker in markers))
        return viewport_for(merge_bounds(boxes), self.settings)
