"""
Conversions between Python date/time values and their wire encodings.

Every conversion here is pure and UTC based; the API never returns local
times.
"""

from datetime import UTC, date, datetime, timedelta
from typing import Union

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime, treating naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_date(value: Union[date, datetime]) -> str:
    """Format a calendar date as YYYY-MM-DD."""
    if isinstance(value, datetime):
        value = ensure_utc(value).date()
    return value.isoformat()


def parse_date(raw: str) -> date:
    """
    Parse a YYYY-MM-DD calendar date.

    Full timestamps are accepted and truncated to their UTC date.

    Raises:
        ValueError: If the string is not a date or timestamp
    """
    if len(raw) == 10:
        return date.fromisoformat(raw)
    return parse_time(raw).date()


def to_millis(value: Union[date, datetime]) -> int:
    """Milliseconds since the Unix epoch; a plain date maps to its UTC midnight."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=UTC)
    delta = ensure_utc(value) - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_millis(ms: int) -> datetime:
    """UTC datetime for a millisecond epoch timestamp."""
    return EPOCH + timedelta(milliseconds=ms)


def format_time(value: datetime) -> str:
    """Format a timestamp as RFC 3339 with millisecond precision, e.g. 2006-01-02T15:04:05.000Z."""
    value = ensure_utc(value)
    return (f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
            f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
            f".{value.microsecond // 1000:03d}Z")


def parse_time(raw: str) -> datetime:
    """
    Parse an RFC 3339 timestamp into an aware UTC datetime.

    Accepts a trailing ``Z`` or an explicit offset, with or without fractional
    seconds.

    Raises:
        ValueError: If the string is not a valid timestamp
    """
    return ensure_utc(datetime.fromisoformat(raw))
