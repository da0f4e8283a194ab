"""
GPX viewing pipeline.

Usage:
    from gpxviewer.features.gpx import GpxDocument, TrackRenderAdapter

    document = GpxDocument.parse(content)
    model = TrackRenderAdapter().render(document, surface)

Components:
- GpxDocument: typed view of a parsed GPX document
- simplify / PointSimplifier: minimum-distance point filter
- TelemetryExtractor: time-of-day indexed speed/direction/heel tables
- BoundingBox, bounds_from_points, merge_bounds: viewport framing
- MarkerContentBuilder: marker content and icon selection
- TrackRenderAdapter: composes the above into render instructions
- GpxLoader: fetch-then-parse entry points
"""

from .errors import (
    GpxError,
    MalformedDocumentError,
    CorrelationMismatchError,
    GpxFetchError,
)
from .models import (
    GeoPoint,
    PointTelemetry,
    TrackPoint,
    Segment,
    Track,
    Route,
    Waypoint,
)
from .document import GpxDocument, parse_time_offset
from .simplifier import PointSimplifier, simplify
from .telemetry import (
    TelemetryExtractor,
    TelemetrySample,
    MarkedSample,
    TelemetryTable,
    highlight_colour,
)
from .bounds import (
    BoundingBox,
    Viewport,
    bounds_from_points,
    bounds_from_document,
    merge_bounds,
    viewport_for,
)
from .markers import (
    IconSpec,
    DEFAULT_ICON_SIZES,
    MarkerContentBuilder,
    translate_name,
)
from .render import (
    DisplayStyle,
    PolylineDescriptor,
    MarkerDescriptor,
    RenderModel,
    RenderSurface,
    TrackRenderAdapter,
)
from .loader import GpxLoader
from .schemas import RenderModelResponse

__all__ = [
    # Errors
    "GpxError",
    "MalformedDocumentError",
    "CorrelationMismatchError",
    "GpxFetchError",
    # Models
    "GeoPoint",
    "PointTelemetry",
    "TrackPoint",
    "Segment",
    "Track",
    "Route",
    "Waypoint",
    # Document
    "GpxDocument",
    "parse_time_offset",
    # Simplifier
    "PointSimplifier",
    "simplify",
    # Telemetry
    "TelemetryExtractor",
    "TelemetrySample",
    "MarkedSample",
    "TelemetryTable",
    "highlight_colour",
    # Bounds
    "BoundingBox",
    "Viewport",
    "bounds_from_points",
    "bounds_from_document",
    "merge_bounds",
    "viewport_for",
    # Markers
    "IconSpec",
    "DEFAULT_ICON_SIZES",
    "MarkerContentBuilder",
    "translate_name",
    # Render
    "DisplayStyle",
    "PolylineDescriptor",
    "MarkerDescriptor",
    "RenderModel",
    "RenderSurface",
    "TrackRenderAdapter",
    # Loader
    "GpxLoader",
    # Schemas
    "RenderModelResponse",
]
