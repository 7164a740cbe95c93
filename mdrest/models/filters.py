"""
Comparator filters for request parameters.

A filterable field such as ``ticker`` or ``strike_price`` can be constrained
by several comparators at once (``ticker.gte=A`` together with
``ticker.lt=M`` selects a range). ``FilterField`` holds one independent
optional slot per comparator, indexed by the closed ``Comparator``
enumeration, and is immutable: every update returns a new instance.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from ..errors import UnsupportedComparatorError

T = TypeVar("T")


class Comparator(str, Enum):
    """Comparison operator selecting the query-key suffix of a filter value."""
    EQ = "eq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"

    @property
    def suffix(self) -> str:
        """Query-key suffix; equality has none."""
        return "" if self is Comparator.EQ else self.value

    def key_for(self, wire_name: str) -> str:
        """Query key for ``wire_name`` under this comparator, e.g. ticker.gte."""
        return f"{wire_name}.{self.suffix}" if self.suffix else wire_name

    @classmethod
    def coerce(cls, value: Any) -> "Comparator":
        """
        Accept a Comparator or its wire text ("lt", "gte", "eq" or "").

        Raises:
            UnsupportedComparatorError: For anything outside the five comparators
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text == "":
                return cls.EQ
            try:
                return cls(text)
            except ValueError:
                pass
        raise UnsupportedComparatorError(
            f"Unsupported comparator {value!r}; expected one of eq, lt, lte, gt, gte",
            comparator=value,
        )


_SLOT_INDEX = {comparator: i for i, comparator in enumerate(Comparator)}
_EMPTY_SLOTS = (None,) * len(_SLOT_INDEX)


@dataclass(frozen=True)
class FilterField(Generic[T]):
    """Comparator -> optional value mapping for one filterable field."""

    slots: tuple = _EMPTY_SLOTS

    def get(self, comparator: Any) -> Optional[T]:
        """Value bound to ``comparator``, None if that slot is unset."""
        return self.slots[_SLOT_INDEX[Comparator.coerce(comparator)]]

    def with_value(self, comparator: Any, value: Optional[T]) -> "FilterField[T]":
        """
        New filter with one slot replaced.

        Only the slot for ``comparator`` changes; passing ``None`` clears it.

        Raises:
            UnsupportedComparatorError: If ``comparator`` is not one of the five
        """
        index = _SLOT_INDEX[Comparator.coerce(comparator)]
        slots = list(self.slots)
        slots[index] = value
        return FilterField(tuple(slots))

    def items(self) -> Iterator[tuple[Comparator, T]]:
        """Populated (comparator, value) pairs in comparator order."""
        for comparator, value in zip(Comparator, self.slots):
            if value is not None:
                yield comparator, value

    def query_items(self, wire_name: str) -> Iterator[tuple[str, T]]:
        """Populated slots as (query key, value) pairs."""
        for comparator, value in self.items():
            yield comparator.key_for(wire_name), value

    def __bool__(self) -> bool:
        return any(value is not None for value in self.slots)

    @property
    def eq(self) -> Optional[T]:
        return self.slots[_SLOT_INDEX[Comparator.EQ]]

    @property
    def lt(self) -> Optional[T]:
        return self.slots[_SLOT_INDEX[Comparator.LT]]

    @property
    def lte(self) -> Optional[T]:
        return self.slots[_SLOT_INDEX[Comparator.LTE]]

    @property
    def gt(self) -> Optional[T]:
        return self.slots[_SLOT_INDEX[Comparator.GT]]

    @property
    def gte(self) -> Optional[T]:
        return self.slots[_SLOT_INDEX[Comparator.GTE]]
