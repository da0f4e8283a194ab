"""
Formatting utilities for telemetry display.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from datetime import datetime, timezone
from typing import Optional

# Key used for samples without a usable timestamp
MISSING_TIME = "--:--:--"


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round half away from zero.

    Python's round() uses banker's rounding; telemetry values are
    displayed the way instruments print them (2.5 -> 3, -2.5 -> -3).

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value (float)
    """
    exponent = Decimal(1).scaleb(-digits)
    try:
        return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return value


def to_utc(moment: datetime) -> datetime:
    """Naive datetimes are treated as already being UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def time_of_day_seconds(moment: Optional[datetime]) -> Optional[int]:
    """
    Seconds since midnight UTC, or None without a timestamp.

    Example:
        14:05:09 -> 50709
    """
    if moment is None:
        return None
    utc = to_utc(moment)
    return 3600 * utc.hour + 60 * utc.minute + utc.second


def format_time_of_day(moment: Optional[datetime]) -> str:
    """
    Format a timestamp as zero-padded 'HH:MM:SS' in UTC.

    Returns MISSING_TIME when there is no timestamp.
    """
    if moment is None:
        return MISSING_TIME
    utc = to_utc(moment)
    return f"{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
