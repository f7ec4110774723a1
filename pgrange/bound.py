from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class BoundKind(Enum):
    """Whether the bound's own value belongs to the range."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


class BoundSide(Enum):
    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class RangeBound(ABC, Generic[T]):
    """One endpoint of a range.

    The side is fixed by the concrete class (`LowerBound` or `UpperBound`);
    this base class is abstract.
    Bounds only compare against bounds of the same side; mixing sides in an
    ordering comparison raises TypeError.
    """

    value: T
    kind: BoundKind

    side: ClassVar[BoundSide]

    @abstractmethod
    def in_bounds(self, value: T) -> bool:
        """Return True if `value` satisfies this bound."""
        pass

    def _compare(self, other: "RangeBound[T]") -> int | None:
        """Three-way compare against a bound of the same side.

        Returns None when the values are incomparable (partially ordered T).
        Equal values are ordered by kind: an exclusive upper bound sits below
        an inclusive one, an inclusive lower bound sits below an exclusive one.
        """
        a: Any = self.value
        b: Any = other.value
        if a == b:
            if self.kind is other.kind:
                return 0
            lesser = (
                BoundKind.EXCLUSIVE
                if self.side is BoundSide.UPPER
                else BoundKind.INCLUSIVE
            )
            return -1 if self.kind is lesser else 1
        if a < b:
            return -1
        if a > b:
            return 1
        return None

    def __lt__(self, other: "RangeBound[T]") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        cmp = self._compare(other)
        return cmp is not None and cmp < 0

    def __le__(self, other: "RangeBound[T]") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        cmp = self._compare(other)
        return cmp is not None and cmp <= 0

    def __gt__(self, other: "RangeBound[T]") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        cmp = self._compare(other)
        return cmp is not None and cmp > 0

    def __ge__(self, other: "RangeBound[T]") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        cmp = self._compare(other)
        return cmp is not None and cmp >= 0


@dataclass(frozen=True)
class LowerBound(RangeBound[T]):
    side: ClassVar[BoundSide] = BoundSide.LOWER

    def in_bounds(self, value: T) -> bool:
        if self.kind is BoundKind.INCLUSIVE:
            return value >= self.value  # type: ignore[operator]
        return value > self.value  # type: ignore[operator]

    def __str__(self) -> str:
        bracket = "[" if self.kind is BoundKind.INCLUSIVE else "("
        return f"{bracket}{self.value}"


@dataclass(frozen=True)
class UpperBound(RangeBound[T]):
    side: ClassVar[BoundSide] = BoundSide.UPPER

    def in_bounds(self, value: T) -> bool:
        if self.kind is BoundKind.INCLUSIVE:
            return value <= self.value  # type: ignore[operator]
        return value < self.value  # type: ignore[operator]

    def __str__(self) -> str:
        bracket = "]" if self.kind is BoundKind.INCLUSIVE else ")"
        return f"{self.value}{bracket}"
