"""
Dataclass field declarations carrying wire metadata.

Request parameters use ``query_field``, ``filter_field`` and ``path_field``;
response records use ``record_field``. The codec reads the metadata keys
defined here and never guesses wire names.
"""

from dataclasses import MISSING, field
from typing import Any, Callable, Optional

from ..codec.wire import WireFormat
from .filters import FilterField

# Metadata keys
KIND = "kind"
WIRE = "wire"
FORMAT = "format"
OMIT_EMPTY = "omit_empty"

# Parameter kinds
QUERY = "query"
FILTER = "filter"
PATH = "path"


def query_field(wire: str, fmt: Optional[WireFormat] = None) -> Any:
    """Optional scalar query parameter; ``None`` means the key is not sent."""
    return field(default=None, metadata={KIND: QUERY, WIRE: wire, FORMAT: fmt})


def filter_field(wire: str, fmt: Optional[WireFormat] = None) -> Any:
    """Comparator filter: one query key per populated comparator slot."""
    return field(default_factory=FilterField,
                 metadata={KIND: FILTER, WIRE: wire, FORMAT: fmt})


def path_field(wire: str) -> Any:
    """Required value substituted into the endpoint path template."""
    return field(default="", metadata={KIND: PATH, WIRE: wire, FORMAT: None})


def record_field(
    json_name: Optional[str] = None,
    fmt: Optional[WireFormat] = None,
    *,
    default: Any = MISSING,
    default_factory: Callable[[], Any] = MISSING,  # type: ignore[assignment]
    omit_empty: bool = True,
) -> Any:
    """
    Response record field.

    Args:
        json_name: JSON key, defaults to the attribute name
        fmt: Wire format for date/time values
        default: Zero value used when the key is absent
        default_factory: Factory for list or nested record zero values
        omit_empty: Drop the key when encoding a zero value
    """
    metadata = {WIRE: json_name, FORMAT: fmt, OMIT_EMPTY: omit_empty}
    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=None if default is MISSING else default, metadata=metadata)
