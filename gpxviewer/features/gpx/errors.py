"""
GPX loading errors.

Absent optional fields (timestamp, colour tag, extension values) are
never errors; they are recovered with documented defaults.
"""


class GpxError(Exception):
    """Base GPX error."""
    pass


class MalformedDocumentError(GpxError):
    """Document is not GPX or carries unusable coordinates."""
    pass


class CorrelationMismatchError(GpxError):
    """Telemetry cannot be paired unambiguously with a trackpoint."""
    pass


class GpxFetchError(GpxError):
    """Source document could not be fetched."""
    pass
