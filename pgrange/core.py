import logging
from typing import Any, Generic, TypeVar

from pgrange.bound import BoundKind, BoundSide, LowerBound, RangeBound, UpperBound
from pgrange.subtype import Subtype, subtype_for

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _OptBound(Generic[T]):
    """A possibly absent bound, ordered with absence at the far end of its side.

    An absent lower bound sorts below every present lower bound, an absent
    upper bound above every present upper bound. Two absences are equal.
    """

    __slots__ = ("side", "bound")

    def __init__(self, side: BoundSide, bound: RangeBound[T] | None):
        self.side: BoundSide = side
        self.bound: RangeBound[T] | None = bound

    def _compare(self, other: "_OptBound[T]") -> int | None:
        if self.bound is None and other.bound is None:
            return 0
        if self.bound is None:
            return -1 if self.side is BoundSide.LOWER else 1
        if other.bound is None:
            return 1 if self.side is BoundSide.LOWER else -1
        return self.bound._compare(other.bound)

    def __lt__(self, other: "_OptBound[T]") -> bool:
        cmp = self._compare(other)
        return cmp is not None and cmp < 0

    def __le__(self, other: "_OptBound[T]") -> bool:
        cmp = self._compare(other)
        return cmp is not None and cmp <= 0

    def __ge__(self, other: "_OptBound[T]") -> bool:
        cmp = self._compare(other)
        return cmp is not None and cmp >= 0


def _order(a: _OptBound[T], b: _OptBound[T]) -> tuple[_OptBound[T], _OptBound[T]]:
    """Return the pair as (lesser, greater)."""
    if a < b:
        return a, b
    return b, a


def _check_side(bound: Any, expected: type, edge: str) -> None:
    if bound is None or isinstance(bound, expected):
        return
    raise TypeError(
        f"Range {edge} bound must be a {expected.__name__} or None.\n"
        f"Got {type(bound).__name__!r}: {bound!r}\n"
        f"Hint: Bound sides are fixed by class:\n"
        f"  Range(LowerBound(5, BoundKind.INCLUSIVE), UpperBound(10, BoundKind.EXCLUSIVE))\n"
        f"  Range(upper=UpperBound(10, BoundKind.INCLUSIVE))  # unbounded below"
    )


class Range(Generic[T]):
    """An interval over ordered values, possibly unbounded on either side.

    Construction normalizes both bounds with the element type's strategy and
    collapses any bound pair that admits no value into the single empty range.
    Instances are immutable.

    Example:
        >>> r = Range(LowerBound(5, BoundKind.INCLUSIVE),
        ...           UpperBound(10, BoundKind.INCLUSIVE))
        >>> str(r)
        '[5,11)'
        >>> 10 in r
        True
    """

    __slots__ = ("_lower", "_upper", "_empty", "_subtype")

    _lower: LowerBound[T] | None
    _upper: UpperBound[T] | None
    _empty: bool
    _subtype: Subtype[T] | None

    def __init__(
        self,
        lower: LowerBound[T] | None = None,
        upper: UpperBound[T] | None = None,
        *,
        subtype: Subtype[T] | None = None,
    ):
        _check_side(lower, LowerBound, "lower")
        _check_side(upper, UpperBound, "upper")

        if subtype is None:
            present = lower if lower is not None else upper
            if present is not None:
                subtype = subtype_for(present.value)

        if subtype is not None:
            if lower is not None:
                lower = subtype.normalize(lower)
            if upper is not None:
                upper = subtype.normalize(upper)

        empty = False
        if lower is not None and upper is not None:
            lo: Any = lower.value
            hi: Any = upper.value
            if lower.kind is BoundKind.INCLUSIVE and upper.kind is BoundKind.INCLUSIVE:
                empty = lo > hi
            else:
                empty = lo >= hi

        if empty:
            logger.debug("Bounds %s,%s admit no value; using empty range", lower, upper)
            lower = upper = None

        object.__setattr__(self, "_lower", lower)
        object.__setattr__(self, "_upper", upper)
        object.__setattr__(self, "_empty", empty)
        object.__setattr__(self, "_subtype", subtype)

    @classmethod
    def empty(cls) -> "Range[Any]":
        """Return the canonical empty range."""
        return cls._restore(True, None, None, None)

    @classmethod
    def _restore(
        cls,
        empty: bool,
        lower: LowerBound[T] | None,
        upper: UpperBound[T] | None,
        subtype: Subtype[T] | None,
    ) -> "Range[T]":
        """Rebuild a range from already-normalized state, skipping checks."""
        r = cls.__new__(cls)
        object.__setattr__(r, "_lower", lower)
        object.__setattr__(r, "_upper", upper)
        object.__setattr__(r, "_empty", empty)
        object.__setattr__(r, "_subtype", subtype)
        return r

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            self.__class__._restore,
            (self._empty, self._lower, self._upper, self._subtype),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def is_empty(self) -> bool:
        return self._empty

    @property
    def lower(self) -> LowerBound[T] | None:
        """The lower bound, or None if empty or unbounded below."""
        return self._lower

    @property
    def upper(self) -> UpperBound[T] | None:
        """The upper bound, or None if empty or unbounded above."""
        return self._upper

    @property
    def subtype(self) -> Subtype[T] | None:
        return self._subtype

    def contains(self, value: T) -> bool:
        """Return True if `value` lies within this range."""
        if self._empty:
            return False
        return (self._lower is None or self._lower.in_bounds(value)) and (
            self._upper is None or self._upper.in_bounds(value)
        )

    def contains_range(self, other: "Range[T]") -> bool:
        """Return True if every value of `other` lies within this range.

        Every range contains the empty range; the empty range contains nothing
        else.
        """
        if other._empty:
            return True
        if self._empty:
            return False
        return _OptBound(BoundSide.LOWER, self._lower) <= _OptBound(
            BoundSide.LOWER, other._lower
        ) and _OptBound(BoundSide.UPPER, self._upper) >= _OptBound(
            BoundSide.UPPER, other._upper
        )

    def _derive(
        self, lower: RangeBound[T] | None, upper: RangeBound[T] | None, other: "Range[T]"
    ) -> "Range[T]":
        subtype = self._subtype if self._subtype is not None else other._subtype
        return Range(lower, upper, subtype=subtype)  # type: ignore[arg-type]

    def intersect(self, other: "Range[T]") -> "Range[T]":
        """Return the range of values lying in both ranges."""
        if self._empty or other._empty:
            return Range.empty()

        _, lower = _order(
            _OptBound(BoundSide.LOWER, self._lower),
            _OptBound(BoundSide.LOWER, other._lower),
        )
        upper, _ = _order(
            _OptBound(BoundSide.UPPER, self._upper),
            _OptBound(BoundSide.UPPER, other._upper),
        )
        return self._derive(lower.bound, upper.bound, other)

    def union(self, other: "Range[T]") -> "Range[T] | None":
        """Return the range covering both ranges, or None if there is a gap.

        Ranges that overlap or touch merge. Two bounds meeting at the same
        value leave a gap only when both exclude it, e.g. [1,5) and (5,9).
        """
        if self._empty:
            return other
        if other._empty:
            return self

        outer_lower, inner_lower = _order(
            _OptBound(BoundSide.LOWER, self._lower),
            _OptBound(BoundSide.LOWER, other._lower),
        )
        inner_upper, outer_upper = _order(
            _OptBound(BoundSide.UPPER, self._upper),
            _OptBound(BoundSide.UPPER, other._upper),
        )

        discontiguous = False
        if inner_lower.bound is not None and inner_upper.bound is not None:
            lo: Any = inner_lower.bound.value
            hi: Any = inner_upper.bound.value
            if (
                inner_lower.bound.kind is BoundKind.EXCLUSIVE
                and inner_upper.bound.kind is BoundKind.EXCLUSIVE
            ):
                discontiguous = lo >= hi
            else:
                discontiguous = lo > hi

        if discontiguous:
            logger.debug("Union of %s and %s is discontiguous", self, other)
            return None
        return self._derive(outer_lower.bound, outer_upper.bound, other)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Range):
            return self.contains_range(item)
        return self.contains(item)

    def __and__(self, other: "Range[T]") -> "Range[T]":
        if not isinstance(other, Range):
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other: "Range[T]") -> "Range[T]":
        if not isinstance(other, Range):
            return NotImplemented
        result = self.union(other)
        if result is None:
            raise ValueError(
                f"Cannot union (|) discontiguous ranges {self} and {other}.\n"
                f"The result would need two intervals to represent it.\n"
                f"Hint: Use a.union(b), which returns None for this case,\n"
                f"      or check a.intersect(b) / adjacency before merging."
            )
        return result

    def __bool__(self) -> bool:
        return not self._empty

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (self._empty, self._lower, self._upper) == (
            other._empty,
            other._lower,
            other._upper,
        )

    def __hash__(self) -> int:
        return hash((self._empty, self._lower, self._upper))

    def __str__(self) -> str:
        if self._empty:
            return "empty"
        lower = str(self._lower) if self._lower is not None else "("
        upper = str(self._upper) if self._upper is not None else ")"
        return f"{lower},{upper}"

    def __repr__(self) -> str:
        return f"<Range {self}>"

    def __copy__(self) -> "Range[T]":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Range[T]":
        return self
