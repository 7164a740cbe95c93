"""
Utility functions module.

Time Semantics:
- Calendar dates travel as YYYY-MM-DD
- Millisecond fields travel as integer milliseconds since the Unix epoch
- Timestamps in response bodies travel as RFC 3339 strings in UTC
- Naive datetimes are always interpreted as UTC
"""
