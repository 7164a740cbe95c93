"""
Query-string and path encoding of request parameter objects.

Each populated option or filter slot contributes exactly one query key; unset
values contribute nothing. Path-bound values are substituted into the
endpoint's path template and must be non-empty.
"""

import re
from dataclasses import fields
from typing import Optional
from urllib.parse import quote

from ..errors import RequestValidationError
from ..logging.config import get_request_logger
from ..models.fields import FILTER, FORMAT, KIND, PATH, QUERY, WIRE
from ..models.params import RequestParams
from .wire import to_query_value

logger = get_request_logger(__name__)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# Characters kept as-is in a path segment besides letters, digits and "_.-~"
_PATH_SAFE = ":"


def encode_query(params: RequestParams) -> dict[str, str]:
    """
    Map a parameter object to its query-string keys and values.

    Filter keys are ``<wire>`` for equality and ``<wire>.<suffix>`` for the
    other comparators. Keys appear in field declaration order, then
    comparator order.

    Args:
        params: Request parameter object

    Returns:
        Query key to stringified value
    """
    query: dict[str, str] = {}

    for f in fields(params):
        kind = f.metadata.get(KIND)
        value = getattr(params, f.name)

        if kind == QUERY:
            if value is not None:
                query[f.metadata[WIRE]] = to_query_value(value, f.metadata[FORMAT])
        elif kind == FILTER:
            for key, slot_value in value.query_items(f.metadata[WIRE]):
                query[key] = to_query_value(slot_value, f.metadata[FORMAT])

    return query


def path_values(params: RequestParams, endpoint: Optional[str] = None) -> dict[str, str]:
    """
    Collect required path-bound values.

    Raises:
        RequestValidationError: If any path-bound value is missing or blank
    """
    values = {}
    for f in fields(params):
        if f.metadata.get(KIND) != PATH:
            continue

        value = getattr(params, f.name)
        if value is None or not str(value).strip():
            logger.warning(
                "Required path parameter missing",
                endpoint=endpoint,
                field=f.name,
            )
            raise RequestValidationError(
                f"{type(params).__name__}.{f.name} is required",
                field=f.name,
                endpoint=endpoint,
            )
        values[f.metadata[WIRE]] = str(value)

    return values


def build_path(template: str, params: RequestParams, endpoint: Optional[str] = None) -> str:
    """
    Substitute path-bound values into a template such as /v3/reference/tickers/{ticker}.

    Values are inserted verbatim apart from percent-escaping characters that
    cannot appear in a path segment.

    Raises:
        RequestValidationError: If a required value is blank or a placeholder
            has no matching parameter
    """
    values = path_values(params, endpoint)

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in values:
            raise RequestValidationError(
                f"No value for path placeholder {{{name}}} in {template}",
                field=name,
                endpoint=endpoint,
            )
        return quote(values[name], safe=_PATH_SAFE)

    return _PLACEHOLDER.sub(substitute, template)
