from .bound import BoundKind, BoundSide, LowerBound, RangeBound, UpperBound
from .core import Range
from .literal import (
    at_least,
    at_most,
    between,
    closed,
    closed_open,
    empty,
    greater_than,
    less_than,
    literal,
    open_closed,
    open_open,
    unbounded,
)
from .subtype import (
    CONTINUOUS,
    DATE,
    FLOAT,
    INT4,
    INT8,
    NUMERIC,
    TIMESTAMP,
    BoundOverflowError,
    ContinuousSubtype,
    DiscreteSubtype,
    Subtype,
    register_subtype,
    subtype_for,
)

__all__ = [
    "Range",
    "RangeBound",
    "LowerBound",
    "UpperBound",
    "BoundKind",
    "BoundSide",
    "Subtype",
    "DiscreteSubtype",
    "ContinuousSubtype",
    "BoundOverflowError",
    "register_subtype",
    "subtype_for",
    "INT4",
    "INT8",
    "DATE",
    "TIMESTAMP",
    "NUMERIC",
    "FLOAT",
    "CONTINUOUS",
    "between",
    "closed",
    "closed_open",
    "open_closed",
    "open_open",
    "at_least",
    "greater_than",
    "at_most",
    "less_than",
    "unbounded",
    "empty",
    "literal",
]
