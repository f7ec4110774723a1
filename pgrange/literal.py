"""Convenience constructors mirroring interval notation.

    between(5, 10)            # [5,10)
    between(5, 10, "[]")      # [5,10]  -> [5,11) once normalized
    at_least(5)               # [5,)
    less_than(10)             # (,10)
    unbounded()               # (,)
    literal("(5,10]")         # (5,10]  -> [6,11)
    literal("empty")
"""

import re
from typing import Any, Literal, TypeVar

from pgrange.bound import BoundKind, LowerBound, UpperBound
from pgrange.core import Range
from pgrange.subtype import INT8, Subtype

T = TypeVar("T")

Bounds = Literal["[]", "[)", "(]", "()"]

_KINDS: dict[str, BoundKind] = {
    "[": BoundKind.INCLUSIVE,
    "]": BoundKind.INCLUSIVE,
    "(": BoundKind.EXCLUSIVE,
    ")": BoundKind.EXCLUSIVE,
}

_LITERAL = re.compile(
    r"""
    ^\s*
    (?P<open>[\[(])
    \s*(?P<lower>[^,]*?)\s*
    ,
    \s*(?P<upper>[^,]*?)\s*
    (?P<close>[\])])
    \s*$
    """,
    re.VERBOSE,
)


def between(
    lower: T | None,
    upper: T | None,
    bounds: Bounds = "[)",
    *,
    subtype: Subtype[T] | None = None,
) -> Range[T]:
    """Build a range from two values and a two-character bounds string.

    A None value leaves that side unbounded, whatever its bracket says.
    """
    if bounds not in ("[]", "[)", "(]", "()"):
        raise ValueError(
            f"Invalid bounds string: {bounds!r}\n"
            f'Valid bounds: "[]", "[)", "(]", "()"\n'
            f"Example: between(5, 10, \"[]\")"
        )
    return Range(
        LowerBound(lower, _KINDS[bounds[0]]) if lower is not None else None,
        UpperBound(upper, _KINDS[bounds[1]]) if upper is not None else None,
        subtype=subtype,
    )


def closed(lower: T, upper: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(lower, upper, "[]", subtype=subtype)


def closed_open(lower: T, upper: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(lower, upper, "[)", subtype=subtype)


def open_closed(lower: T, upper: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(lower, upper, "(]", subtype=subtype)


def open_open(lower: T, upper: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(lower, upper, "()", subtype=subtype)


def at_least(lower: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(lower, None, "[)", subtype=subtype)


def greater_than(lower: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(lower, None, "()", subtype=subtype)


def at_most(upper: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(None, upper, "(]", subtype=subtype)


def less_than(upper: T, *, subtype: Subtype[T] | None = None) -> Range[T]:
    return between(None, upper, "()", subtype=subtype)


def unbounded() -> Range[Any]:
    return Range()


def empty() -> Range[Any]:
    return Range.empty()


def literal(text: str, subtype: Subtype[T] = INT8) -> Range[T]:  # type: ignore[assignment]
    """Build a range from bracket notation such as "[5,10)" or "(,10]".

    Element text is converted with `subtype.parse`; an empty element means
    that side is unbounded. The word "empty" yields the empty range.
    """
    if text.strip().lower() == "empty":
        return Range.empty()

    match = _LITERAL.match(text)
    if match is None:
        raise ValueError(
            f"Malformed range literal: {text!r}\n"
            f"Expected an opening [ or (, two comma-separated values\n"
            f"(either may be left blank), and a closing ] or ).\n"
            f"Examples: \"[5,10)\", \"(5,]\", \"(,10]\", \"(,)\", \"empty\""
        )

    lower = match["lower"]
    upper = match["upper"]
    return between(
        subtype.parse(lower) if lower else None,
        subtype.parse(upper) if upper else None,
        match["open"] + match["close"],  # type: ignore[arg-type]
        subtype=subtype,
    )
