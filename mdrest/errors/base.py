"""Base exception types shared by every mdrest error."""

from typing import Any, Optional


class MdrestError(Exception):
    """Base class for all errors raised by mdrest."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(MdrestError):
    """Configuration could not be loaded or is invalid."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
