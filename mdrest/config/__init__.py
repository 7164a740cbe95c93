"""
Configuration module.

Base URL and endpoint path templates, with defaults that can be overridden
from a YAML file or explicitly by the caller.
"""
