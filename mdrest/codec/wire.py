"""
Wire encodings for scalar values.

A field declares its wire format once, in its dataclass metadata, and the same
format is used for query-string encoding and for JSON decode/encode so a value
always round-trips through one representation.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from ..utils.time import (
    format_date,
    format_time,
    from_millis,
    parse_date,
    parse_time,
    to_millis,
)


class WireFormat(str, Enum):
    """Encodings used for date and time fields."""
    DATE = "date"        # YYYY-MM-DD
    MILLIS = "millis"    # integer milliseconds since epoch
    TIME = "time"        # RFC 3339, millisecond precision, UTC


def format_float(value: float) -> str:
    """Shortest plain decimal text for a float: 150.0 -> '150', 1e-05 -> '0.00001'."""
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def to_query_value(value: Any, fmt: Optional[WireFormat] = None) -> str:
    """
    Stringify a parameter value for the query string.

    Args:
        value: Parameter value (never None; absent values emit no key)
        fmt: Wire format declared on the field, if any

    Returns:
        Query-string text for the value
    """
    if fmt is WireFormat.DATE:
        return format_date(value)
    if fmt is WireFormat.MILLIS:
        return str(to_millis(value))
    if fmt is WireFormat.TIME:
        return format_time(value)

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, date):
        return format_date(value)
    return str(value)


def to_json_value(value: Any, fmt: Optional[WireFormat] = None) -> Any:
    """Encode a date/time value for a JSON body; other values pass through."""
    if value is None or fmt is None:
        return value
    if fmt is WireFormat.DATE:
        return format_date(value)
    if fmt is WireFormat.MILLIS:
        return to_millis(value)
    return format_time(value)


def from_json_value(raw: Any, fmt: WireFormat) -> Any:
    """
    Decode a date/time value from a JSON body.

    Raises:
        ValueError: If the raw value cannot be read in the declared format
        TypeError: If the raw value has the wrong JSON type
        OverflowError: If the value lies outside the representable range
    """
    if fmt is WireFormat.MILLIS:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise TypeError(f"expected integer milliseconds, got {type(raw).__name__}")
        return from_millis(int(raw))

    if not isinstance(raw, str):
        raise TypeError(f"expected string, got {type(raw).__name__}")
    if fmt is WireFormat.DATE:
        return parse_date(raw)
    return parse_time(raw)
