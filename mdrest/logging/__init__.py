"""
Logging configuration and utilities for mdrest.
"""
from .config import configure_logging, get_logger, get_request_logger

__all__ = ["configure_logging", "get_logger", "get_request_logger"]
