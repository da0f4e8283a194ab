"""
Shared GPX fixtures.
"""

import pytest

from gpxviewer.config import Settings


GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="tests"\n'
    '     xmlns="http://www.topografix.com/GPX/1/1"\n'
    '     xmlns:gpxx="http://www.garmin.com/xmlschemas/GpxExtensions/v3"\n'
    '     xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">\n'
)
GPX_FOOTER = "</gpx>\n"


def make_gpx(body: str) -> str:
    """Wrap elements in a GPX 1.1 root with the vendor namespaces."""
    return GPX_HEADER + body + GPX_FOOTER


def trkpt(lat, lon, time=None, desc=None, speed=None, direction=None, heel=None):
    """A <trkpt> element with optional time, description and telemetry."""
    parts = [f'<trkpt lat="{lat}" lon="{lon}">']
    if time:
        parts.append(f"<time>{time}</time>")
    if desc:
        parts.append(f"<desc>{desc}</desc>")
    values = [
        (tag, value)
        for tag, value in (("speed", speed), ("direction", direction), ("heel", heel))
        if value is not None
    ]
    if values:
        parts.append("<extensions><gpxtpx:TrackPointExtension>")
        parts.extend(f"<gpxtpx:{tag}>{value}</gpxtpx:{tag}>" for tag, value in values)
        parts.append("</gpxtpx:TrackPointExtension></extensions>")
    parts.append("</trkpt>")
    return "".join(parts)


SAMPLE_GPX = make_gpx(
    "<metadata><name>Regatta</name><desc>tz=5</desc></metadata>\n"
    '<wpt lat="49.1" lon="-122.9"><name>Start</name><sym>Flag</sym></wpt>\n'
    '<wpt lat="49.2" lon="-122.8"><name>Dock</name>'
    "<html><![CDATA[<b>Dock</b><br>fuel]]></html></wpt>\n"
    "<rte><name>Plan</name>"
    '<rtept lat="49.0" lon="-123.0"/>'
    '<rtept lat="49.00001" lon="-123.0"/>'
    '<rtept lat="49.01" lon="-123.01"/>'
    "</rte>\n"
    "<trk><name>Race</name>"
    "<extensions><gpxx:TrackExtension>"
    "<gpxx:DisplayColor>Red</gpxx:DisplayColor>"
    "</gpxx:TrackExtension></extensions>"
    "<trkseg>"
    + trkpt(49.1, -122.9, "2024-06-01T14:05:09Z", "start,#00ff00;", 5.456, 182.5, -12.4)
    + trkpt(49.1001, -122.9, "2024-06-01T14:05:10Z", None, 6.0, 190, 3)
    + trkpt(49.11, -122.91, "2024-06-01T14:05:11Z")
    + "</trkseg></trk>\n"
    "<trk><name>Cooldown</name><trkseg>"
    + trkpt(49.2, -122.7, "2024-06-01T15:00:00Z", None, 2.0, 10, 0)
    + "</trkseg></trk>\n"
)

EMPTY_GPX = make_gpx("")


@pytest.fixture
def settings():
    """Settings with library defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def sample_gpx():
    return SAMPLE_GPX


@pytest.fixture
def empty_gpx():
    return EMPTY_GPX
