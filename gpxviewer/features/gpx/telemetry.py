"""
Telemetry Extractor

Builds time-of-day indexed speed/direction/heel tables from trackpoints.

Keys are 'HH:MM:SS' strings in UTC. The key does not encode the date, so
two samples recorded in the same second (or exactly one day apart) share a
key and the later one wins. This is fine for a single day's track; there
is no cross-midnight or multi-day disambiguation.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from gpxviewer.shared.formatters import (
    format_time_of_day,
    round_half_up,
    time_of_day_seconds,
)
from .models import GeoPoint, Track, TrackPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetrySample:
    """Telemetry of one trackpoint, keyed by its time of day."""
    time: str
    time_of_day_seconds: Optional[int]
    speed: float
    direction: float
    heel: float
    position: GeoPoint
    source_index: int
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class MarkedSample:
    """A sample flagged for highlighting by a colour tag in its description."""
    colour: str
    time: str
    time_of_day_seconds: Optional[int]
    position: GeoPoint


@dataclass
class TelemetryTable:
    """Per-track sample tables plus the global highlight table."""
    tracks: List[Dict[str, TelemetrySample]] = field(default_factory=list)
    marked: Dict[str, MarkedSample] = field(default_factory=dict)


def highlight_colour(description: Optional[str]) -> Optional[str]:
    """
    Extract the highlight colour from a trackpoint description.

    The second comma-delimited token, minus its last character,
    is the colour.

    Examples:
        "mark,#ff0000;" -> "#ff0000"
        "plain text" -> None
    """
    if not description or "," not in description:
        return None
    token = description.split(",")[1][:-1]
    return token or None


class TelemetryExtractor:
    """
    Extracts telemetry tables from tracks.

    Absent telemetry values become 0 in samples; the parsed
    PointTelemetry on the trackpoint keeps them as None.
    """

    def extract(self, tracks: Iterable[Track]) -> TelemetryTable:
        """
        Build one sample table per track and the merged highlight table.

        Raises:
            CorrelationMismatchError: If a trackpoint has several telemetry blocks
        """
        table = TelemetryTable()
        for track in tracks:
            samples: Dict[str, TelemetrySample] = {}
            for index, point in enumerate(track.iter_points()):
                sample = self.sample(point, index)
                if sample.time in samples:
                    logger.debug(
                        f"Track {track.name!r}: sample {index} overwrites "
                        f"{samples[sample.time].source_index} at {sample.time}"
                    )
                samples[sample.time] = sample

                colour = highlight_colour(point.description)
                if colour:
                    table.marked[sample.time] = MarkedSample(
                        colour=colour,
                        time=sample.time,
                        time_of_day_seconds=sample.time_of_day_seconds,
                        position=sample.position,
                    )
            table.tracks.append(samples)
        return table

    @staticmethod
    def sample(point: TrackPoint, index: int) -> TelemetrySample:
        """Telemetry sample of a single trackpoint."""
        telemetry = point.telemetry
        speed = direction = heel = None
        if telemetry is not None:
            speed, direction, heel = telemetry.speed, telemetry.direction, telemetry.heel

        if point.time is None:
            logger.debug(f"Trackpoint {index} has no timestamp")

        return TelemetrySample(
            time=format_time_of_day(point.time),
            time_of_day_seconds=time_of_day_seconds(point.time),
            speed=round_half_up(speed, 2) if speed is not None else 0.0,
            direction=round_half_up(direction) if direction is not None else 0.0,
            heel=round_half_up(heel) if heel is not None else 0.0,
            position=point.position,
            source_index=index,
            timestamp=point.time,
        )
