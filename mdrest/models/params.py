"""
Base class for request parameter objects.

Parameter objects are frozen dataclasses. Builders never mutate the receiver:
each ``with_*`` call returns a new object, so a base request can be branched
into several independent requests and shared between threads without locks.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

from ..errors import UnknownFilterError, UnknownOptionError
from .fields import FILTER, KIND, PATH, QUERY, WIRE

P = TypeVar("P", bound="RequestParams")


@dataclass(frozen=True)
class RequestParams:
    """Common behaviour of every endpoint's parameter object."""

    def with_filter(self: P, field_name: str, comparator: Any, value: Any) -> P:
        """
        Return a copy with one comparator slot of a filter field set.

        All other slots, including other comparators of the same field, keep
        the receiver's values.

        Args:
            field_name: Attribute name of a filter field (e.g. "ticker")
            comparator: Comparator or its wire text ("lt", "gte", ...)
            value: Value for the slot; None clears it

        Raises:
            UnknownFilterError: If ``field_name`` is not a filter on this type
            UnsupportedComparatorError: If ``comparator`` is not one of the five
        """
        if field_name not in self.filter_names():
            raise UnknownFilterError(
                f"{type(self).__name__} has no filter field {field_name!r}",
                field=field_name,
                params_type=type(self).__name__,
            )
        current = getattr(self, field_name)
        return replace(self, **{field_name: current.with_value(comparator, value)})

    def with_options(self: P, **options: Any) -> P:
        """
        Return a copy with the given scalar options replaced.

        Raises:
            UnknownOptionError: If a name is not a scalar option on this type;
                filters and path values have their own setters
        """
        unknown = sorted(set(options) - set(self.query_names()))
        if unknown:
            raise UnknownOptionError(
                f"{type(self).__name__} has no query option {unknown[0]!r}",
                field=unknown[0],
                params_type=type(self).__name__,
            )
        return replace(self, **options)

    @classmethod
    def filter_names(cls) -> tuple[str, ...]:
        """Attribute names of comparator filter fields."""
        return tuple(f.name for f in fields(cls) if f.metadata.get(KIND) == FILTER)

    @classmethod
    def query_names(cls) -> tuple[str, ...]:
        """Attribute names of plain optional query options."""
        return tuple(f.name for f in fields(cls) if f.metadata.get(KIND) == QUERY)

    @classmethod
    def path_names(cls) -> dict[str, str]:
        """Path-bound attribute names mapped to their template placeholders."""
        return {f.name: f.metadata[WIRE] for f in fields(cls) if f.metadata.get(KIND) == PATH}
