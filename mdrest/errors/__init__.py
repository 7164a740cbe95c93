"""
Error classification for request building and response decoding.

Request errors are raised before any network I/O happens; data errors are
raised while turning a wire payload into response models.
"""

from .base import MdrestError, ConfigError
from .request import (
    RequestError,
    RequestValidationError,
    UnsupportedComparatorError,
    UnknownFilterError,
    UnknownOptionError,
)
from .data import (
    DataError,
    DecodeError,
    MalformedPayloadError,
)

__all__ = [
    "MdrestError",
    "ConfigError",
    # Request Errors
    "RequestError",
    "RequestValidationError",
    "UnsupportedComparatorError",
    "UnknownFilterError",
    "UnknownOptionError",
    # Data Errors
    "DataError",
    "DecodeError",
    "MalformedPayloadError",
]
