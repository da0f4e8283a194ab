"""
Render model schemas.

Pydantic models for serialising a RenderModel to JSON.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class GeoPointSchema(_FromAttributes):
    lat: float
    lon: float


class BoundingBoxSchema(_FromAttributes):
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    is_empty: bool


class ViewportSchema(_FromAttributes):
    """Initial view; zoom is only set for the fallback location."""

    center: GeoPointSchema
    bounds: BoundingBoxSchema
    zoom: Optional[int] = None
    is_fallback: bool = False


class DisplayStyleSchema(_FromAttributes):
    colour: str
    width_px: int


class PolylineSchema(_FromAttributes):
    kind: str
    name: Optional[str] = None
    points: List[GeoPointSchema]
    style: DisplayStyleSchema
    source_point_count: int = 0


class IconSchema(_FromAttributes):
    name: str
    width: int
    height: int
    anchor: Tuple[int, int]
    origin: Tuple[int, int]


class MarkerSchema(_FromAttributes):
    name: Optional[str] = None
    position: GeoPointSchema
    icon: IconSchema
    icon_url: str
    content: str


class TelemetrySampleSchema(_FromAttributes):
    time: str
    time_of_day_seconds: Optional[int] = None
    speed: float
    direction: float
    heel: float
    position: GeoPointSchema
    source_index: int
    timestamp: Optional[datetime] = None


class MarkedSampleSchema(_FromAttributes):
    colour: str
    time: str
    time_of_day_seconds: Optional[int] = None
    position: GeoPointSchema


class TelemetryTableSchema(_FromAttributes):
    tracks: List[Dict[str, TelemetrySampleSchema]]
    marked: Dict[str, MarkedSampleSchema]


class RenderModelResponse(_FromAttributes):
    """Response for a rendered GPX document."""

    polylines: List[PolylineSchema]
    markers: List[MarkerSchema]
    viewport: ViewportSchema
    telemetry: TelemetryTableSchema
    time_offset: float
