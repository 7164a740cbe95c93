"""
Data error classifications for response decoding.

Raised when a payload cannot be turned into response models.
"""

from typing import Any, Optional

from .base import MdrestError


class DataError(MdrestError):
    """Base class for payload data issues."""


class MalformedPayloadError(DataError):
    """Payload is not valid JSON or its top level is not an object."""

    def __init__(self, message: str, raw_data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data


class DecodeError(DataError):
    """A payload value does not match the type of its model field."""

    def __init__(self, message: str, path: Optional[str] = None,
                 raw: Any = None, expected_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.raw = raw
        self.expected_type = expected_type
