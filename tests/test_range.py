"""Tests for Range construction, queries and rendering."""

import copy
import itertools
import logging
import pickle
from datetime import datetime, timezone

import pytest

from pgrange import (
    FLOAT,
    INT4,
    TIMESTAMP,
    BoundKind,
    LowerBound,
    Range,
    UpperBound,
    between,
    closed,
    closed_open,
    open_closed,
    open_open,
)

INC = BoundKind.INCLUSIVE
EXC = BoundKind.EXCLUSIVE


class TestConstruction:
    """Tests for normalization and emptiness collapse in Range()."""

    def test_discrete_spellings_share_one_representation(self):
        """[5,10], [5,11), (4,10] and (4,11) build the same integer range."""
        spellings = [closed(5, 10), closed_open(5, 11), open_closed(4, 10), open_open(4, 11)]

        for r in spellings:
            assert r == spellings[0]
            assert r.lower == LowerBound(5, INC)
            assert r.upper == UpperBound(11, EXC)

    def test_singleton_is_not_empty(self):
        """A closed range with equal endpoints holds exactly that value."""
        r = closed(5, 5)
        assert not r.is_empty
        assert r.contains(5)
        assert not r.contains(4)
        assert not r.contains(6)

    @pytest.mark.parametrize("bounds", ["[)", "(]", "()"])
    def test_degenerate_bounds_are_empty(self, bounds):
        """Equal endpoints with any exclusive side admit no value."""
        assert between(5, 5, bounds).is_empty

    def test_misordered_bounds_are_empty(self):
        """A lower endpoint above the upper one yields the empty range."""
        assert closed(10, 5).is_empty

    def test_continuous_emptiness(self):
        """Float ranges follow the same emptiness rule without normalization."""
        assert not closed(5.0, 5.0).is_empty
        assert closed_open(5.0, 5.0).is_empty
        assert open_closed(5.0, 5.0).is_empty
        assert open_open(5.0, 5.0).is_empty
        assert not open_open(5.0, 5.5).is_empty

    def test_continuous_bounds_are_kept(self):
        """Float bounds keep their kinds as given."""
        r = open_closed(1.5, 2.5)
        assert r.lower == LowerBound(1.5, EXC)
        assert r.upper == UpperBound(2.5, INC)

    def test_empty_collapses_to_canonical_value(self):
        """A collapsed range equals Range.empty() and has no bounds."""
        collapsed = closed(10, 5)
        assert collapsed == Range.empty()
        assert collapsed.lower is None
        assert collapsed.upper is None

    def test_collapse_is_logged(self, caplog):
        """Collapsing bounds into the empty range leaves a debug record."""
        with caplog.at_level(logging.DEBUG, logger="pgrange.core"):
            closed(10, 5)
        assert "admit no value" in caplog.text

    def test_unbounded_is_not_empty(self):
        """Range() with no bounds covers everything and differs from empty."""
        r = Range()
        assert not r.is_empty
        assert r.lower is None
        assert r.upper is None
        assert r != Range.empty()

    def test_half_bounded(self):
        """A single lower bound is normalized and the upper side stays open."""
        r = Range(LowerBound(3, EXC))
        assert r.lower == LowerBound(4, INC)
        assert r.upper is None

    def test_explicit_subtype_is_used(self):
        """An explicit subtype overrides the one resolved from the values."""
        r = Range(LowerBound(5, EXC), UpperBound(6, INC), subtype=FLOAT)
        assert r.lower == LowerBound(5, EXC)
        assert r.upper == UpperBound(6, INC)
        assert r.subtype is FLOAT

    def test_subtype_does_not_affect_equality(self):
        """Ranges with the same bounds are equal whatever their subtype."""
        assert closed(1, 5, subtype=INT4) == closed(1, 5)

    def test_upper_bound_in_lower_position_is_rejected(self):
        """An UpperBound passed as the lower bound raises TypeError."""
        with pytest.raises(TypeError, match="lower bound must be a LowerBound"):
            Range(UpperBound(5, INC), None)  # type: ignore[arg-type]

    def test_lower_bound_in_upper_position_is_rejected(self):
        """A LowerBound passed as the upper bound raises TypeError."""
        with pytest.raises(TypeError, match="upper bound must be a UpperBound"):
            Range(None, LowerBound(5, INC))  # type: ignore[arg-type]

    def test_non_bound_value_is_rejected(self):
        """A bare value instead of a bound raises TypeError with a hint."""
        with pytest.raises(TypeError, match="Hint"):
            Range(5, None)  # type: ignore[arg-type]


class TestQueries:
    """Tests for contains() and contains_range()."""

    def test_contains_examples(self):
        """[5,10) holds 5 and 9 but not 4 or 10."""
        r = closed_open(5, 10)
        assert r.contains(5)
        assert r.contains(9)
        assert not r.contains(10)
        assert not r.contains(4)

    def test_empty_contains_nothing(self):
        """The empty range holds no value."""
        assert not Range.empty().contains(0)

    def test_unbounded_contains_everything(self):
        """The unbounded range holds arbitrarily large and small values."""
        r = Range()
        assert all(r.contains(v) for v in (-(10**30), 0, 10**30))

    def test_contains_matches_bounds(self, int_ranges, sample_values):
        """Membership is exactly both present bounds being satisfied."""
        for r, v in itertools.product(int_ranges, sample_values):
            expected = (
                not r.is_empty
                and (r.lower is None or r.lower.in_bounds(v))
                and (r.upper is None or r.upper.in_bounds(v))
            )
            assert r.contains(v) is expected
            assert (v in r) is expected

    def test_contains_range_reflexive(self, int_ranges):
        """Every range contains itself."""
        for r in int_ranges:
            assert r.contains_range(r)

    def test_every_range_contains_empty(self, int_ranges):
        """The empty range is contained in every range."""
        for r in int_ranges:
            assert r.contains_range(Range.empty())
            assert Range.empty() in r

    def test_empty_contains_only_empty(self, int_ranges):
        """The empty range contains no non-empty range."""
        for r in int_ranges:
            if not r.is_empty:
                assert not Range.empty().contains_range(r)

    def test_contains_range_is_transitive(self, int_ranges):
        """A contains B and B contains C implies A contains C."""
        for a, b, c in itertools.product(int_ranges, repeat=3):
            if a.contains_range(b) and b.contains_range(c):
                assert a.contains_range(c)

    def test_contains_range_agrees_with_members(self, int_ranges, sample_values):
        """A contained range has no member outside its container."""
        for a, b in itertools.product(int_ranges, repeat=2):
            if a.contains_range(b):
                assert all(a.contains(v) for v in sample_values if b.contains(v))

    def test_contains_range_with_unbounded_sides(self):
        """Absent bounds act as the far end of their side."""
        assert Range().contains_range(closed(1, 5))
        assert not closed(1, 5).contains_range(Range())
        assert Range(LowerBound(1, INC)).contains_range(closed(3, 100))
        assert not Range(upper=UpperBound(5, EXC)).contains_range(closed(3, 5))

    def test_contains_range_continuous_kinds(self):
        """Bound kinds decide containment when float endpoints coincide."""
        assert closed(1.0, 5.0).contains_range(open_open(1.0, 5.0))
        assert not open_open(1.0, 5.0).contains_range(closed(1.0, 5.0))
        assert not closed_open(1.0, 5.0).contains_range(closed(1.0, 5.0))


class TestValueSemantics:
    """Tests for rendering, equality, hashing, immutability and copying."""

    def test_rendering(self):
        """Ranges render in bracket notation, with blanks for absent bounds."""
        assert str(closed(5, 10)) == "[5,11)"
        assert str(Range()) == "(,)"
        assert str(Range(LowerBound(5, INC))) == "[5,)"
        assert str(Range(upper=UpperBound(10, INC))) == "(,11)"
        assert str(open_closed(1.5, 2.5)) == "(1.5,2.5]"
        assert str(Range.empty()) == "empty"

    def test_repr(self):
        """repr() wraps the rendering in angle brackets."""
        assert repr(closed(5, 10)) == "<Range [5,11)>"
        assert repr(Range.empty()) == "<Range empty>"

    def test_bool(self):
        """Only the empty range is falsy."""
        assert closed(1, 2)
        assert Range()
        assert not Range.empty()

    def test_hashable(self):
        """Equal ranges hash alike and deduplicate in sets."""
        assert hash(closed(5, 10)) == hash(closed_open(5, 11))
        assert len({closed(5, 10), open_open(4, 11), Range.empty(), closed(3, 1)}) == 2

    def test_immutable(self):
        """Assigning or deleting attributes raises AttributeError."""
        r = closed(1, 2)
        with pytest.raises(AttributeError):
            r._lower = None  # type: ignore[misc]
        with pytest.raises(AttributeError):
            r.lower = None  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del r._upper

    def test_copies_are_the_same_value(self):
        """copy() and deepcopy() give an equal range."""
        r = closed(1, 2)
        assert copy.copy(r) == r
        assert copy.deepcopy(r) == r

    @pytest.mark.parametrize(
        "r",
        [
            closed_open(1, 5),
            Range.empty(),
            Range(),
            closed(1, 5, subtype=INT4),
            open_closed(
                datetime(2024, 1, 1, tzinfo=timezone.utc),
                datetime(2024, 1, 2, tzinfo=timezone.utc),
            ),
        ],
        ids=str,
    )
    def test_pickle_round_trip(self, r):
        """Pickled ranges load back equal, empty included."""
        restored = pickle.loads(pickle.dumps(r))
        assert restored == r
        assert restored.is_empty is r.is_empty
        assert str(restored) == str(r)

    def test_pickle_keeps_builtin_subtype(self):
        """Built-in subtypes unpickle as the same module-level objects."""
        restored = pickle.loads(pickle.dumps(closed(1, 5, subtype=INT4)))
        assert restored.subtype is INT4

        moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
        restored = pickle.loads(pickle.dumps(closed(moment, moment)))
        assert restored.subtype is TIMESTAMP

    def test_unpickled_range_stays_immutable(self):
        """A loaded range refuses assignment like a freshly built one."""
        restored = pickle.loads(pickle.dumps(closed_open(1, 5)))
        with pytest.raises(AttributeError):
            restored._upper = None  # type: ignore[misc]

    def test_not_equal_to_other_types(self):
        """A range never equals a non-range value."""
        assert closed(1, 2) != "[1,3)"
