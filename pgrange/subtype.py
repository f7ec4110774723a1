"""Element-type strategies for normalizing range bounds.

A discrete element type (integers, dates) has a successor operation, so every
bound has exactly one canonical spelling: lower bounds inclusive, upper bounds
exclusive. A continuous element type (timestamps, decimals, floats) has no
"next value" and its bounds are left as given.

The module-level registry maps Python types to the strategy a `Range` uses
when none is passed explicitly.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar

from dateutil.parser import isoparse
from typing_extensions import override

from pgrange.bound import BoundKind, LowerBound, RangeBound, UpperBound
from pgrange.util import INT4_MAX, INT8_MAX, ONE_DAY

logger = logging.getLogger(__name__)

T = TypeVar("T")
B = TypeVar("B", bound=RangeBound[Any])


class BoundOverflowError(AssertionError):
    """A discrete bound at its domain maximum was asked for its successor.

    This is a caller bug, not a runtime condition to recover from.
    """


class Subtype(ABC, Generic[T]):
    """Normalization strategy for one element type."""

    def __init__(self, name: str, parse: Callable[[str], T]):
        self.name: str = name
        self._parse: Callable[[str], T] = parse

    @abstractmethod
    def normalize(self, bound: B) -> B:
        """Return the canonical bound denoting the same set of values."""
        pass

    def parse(self, text: str) -> T:
        """Convert literal text for one bound value into an element."""
        return self._parse(text)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    def __reduce_ex__(self, protocol: Any) -> Any:
        # Built-in strategies unpickle as the module constants themselves
        if _BUILTINS.get(self.name) is self:
            return (_builtin_subtype, (self.name,))
        return super().__reduce_ex__(protocol)


class DiscreteSubtype(Subtype[T]):
    """Strategy for element types with a successor and a largest value."""

    def __init__(
        self,
        name: str,
        parse: Callable[[str], T],
        *,
        step: Any,
        maximum: T,
    ):
        super().__init__(name, parse)
        self.step: Any = step
        self.maximum: T = maximum

    def successor(self, value: T) -> T:
        if value >= self.maximum:  # type: ignore[operator]
            raise BoundOverflowError(
                f"{self.name} value {value!r} has no successor "
                f"(domain maximum is {self.maximum!r})"
            )
        return value + self.step  # type: ignore[operator]

    @override
    def normalize(self, bound: B) -> B:
        if isinstance(bound, UpperBound) and bound.kind is BoundKind.INCLUSIVE:
            return replace(
                bound, value=self.successor(bound.value), kind=BoundKind.EXCLUSIVE
            )
        if isinstance(bound, LowerBound) and bound.kind is BoundKind.EXCLUSIVE:
            return replace(
                bound, value=self.successor(bound.value), kind=BoundKind.INCLUSIVE
            )
        return bound


class ContinuousSubtype(Subtype[T]):
    """Strategy for element types without a successor; bounds stay as given."""

    @override
    def normalize(self, bound: B) -> B:
        return bound


def _parse_date(text: str) -> date:
    return isoparse(text).date()


INT4: DiscreteSubtype[int] = DiscreteSubtype("int4", int, step=1, maximum=INT4_MAX)
INT8: DiscreteSubtype[int] = DiscreteSubtype("int8", int, step=1, maximum=INT8_MAX)
DATE: DiscreteSubtype[date] = DiscreteSubtype(
    "date", _parse_date, step=ONE_DAY, maximum=date.max
)
TIMESTAMP: ContinuousSubtype[datetime] = ContinuousSubtype("timestamp", isoparse)
NUMERIC: ContinuousSubtype[Decimal] = ContinuousSubtype("numeric", Decimal)
FLOAT: ContinuousSubtype[float] = ContinuousSubtype("float8", float)
CONTINUOUS: ContinuousSubtype[Any] = ContinuousSubtype("any", str)

_BUILTINS: dict[str, Subtype[Any]] = {
    s.name: s for s in (INT4, INT8, DATE, TIMESTAMP, NUMERIC, FLOAT, CONTINUOUS)
}


def _builtin_subtype(name: str) -> Subtype[Any]:
    return _BUILTINS[name]


_REGISTRY: dict[type, Subtype[Any]] = {
    int: INT8,
    date: DATE,
    datetime: TIMESTAMP,
    Decimal: NUMERIC,
    float: FLOAT,
}


def register_subtype(py_type: type, subtype: Subtype[Any]) -> None:
    """Use `subtype` for ranges over `py_type` when none is given explicitly.

    Example:
        >>> register_subtype(int, INT4)
    """
    _REGISTRY[py_type] = subtype


def subtype_for(value: Any) -> Subtype[Any]:
    """Resolve the strategy for a bound value by walking its type's MRO."""
    for cls in type(value).__mro__:
        if cls in _REGISTRY:
            return _REGISTRY[cls]
    logger.debug(
        "No subtype registered for %s, bounds will not be normalized",
        type(value).__name__,
    )
    return CONTINUOUS
