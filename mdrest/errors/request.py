"""
Request error classifications.

These are raised while a request is being built, so callers see them before
any network call is attempted.
"""

from typing import Any, Optional

from .base import MdrestError


class RequestError(MdrestError):
    """Base class for errors in request parameters."""


class RequestValidationError(RequestError):
    """A required parameter is missing or empty."""

    def __init__(self, message: str, field: Optional[str] = None,
                 endpoint: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.endpoint = endpoint


class UnsupportedComparatorError(RequestError, ValueError):
    """Comparator is not one of eq, lt, lte, gt, gte."""

    def __init__(self, message: str, comparator: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.comparator = comparator


class UnknownFilterError(RequestError):
    """Named field is not a comparator filter on this parameter type."""

    def __init__(self, message: str, field: Optional[str] = None,
                 params_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.params_type = params_type


class UnknownOptionError(RequestError):
    """Named field is not a scalar query option on this parameter type."""

    def __init__(self, message: str, field: Optional[str] = None,
                 params_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.params_type = params_type
