"""
Tests for the built-in select predicates and the negation operator
"""

import itertools

import pytest

from mapjoin.errors import UnknownJoinTypeError, ValidationError
from mapjoin.negation import negate
from mapjoin.predicates import MISSING, JoinType, never_select, predicate_for_type


# (left present, right present) -> expected, per join type
EXPECTED = {
    JoinType.LEFT: {(True, True): True, (True, False): True, (False, True): False},
    JoinType.RIGHT: {(True, True): True, (True, False): False, (False, True): True},
    JoinType.INNER: {(True, True): True, (True, False): False, (False, True): False},
    JoinType.OUTER: {(True, True): False, (True, False): True, (False, True): True},
    JoinType.FULL: {(True, True): True, (True, False): True, (False, True): True},
    JoinType.LEFT_OUTER: {(True, True): False, (True, False): True, (False, True): False},
    JoinType.RIGHT_OUTER: {(True, True): False, (True, False): False, (False, True): True},
}

SIDES = [(True, True), (True, False), (False, True)]


def call(select, left_present, right_present):
    return select(1 if left_present else MISSING, 2 if right_present else MISSING, "k")


class TestPredicateForType:
    @pytest.mark.parametrize("join_type", list(JoinType))
    def test_truth_table(self, join_type):
        select = predicate_for_type(join_type)
        for sides in SIDES:
            assert call(select, *sides) is EXPECTED[join_type][sides]

    def test_accepts_string_values(self):
        assert predicate_for_type("leftOuter") is predicate_for_type(JoinType.LEFT_OUTER)
        assert predicate_for_type("inner") is predicate_for_type(JoinType.INNER)

    def test_falsy_values_count_as_present(self):
        select = predicate_for_type("inner")
        assert select(0, "", "k") is True
        assert select(None, None, "k") is True

    def test_missing_is_falsy(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"

    @pytest.mark.parametrize("bad", ["nope", "left_outer", "LEFT", None, 3, ["left"]])
    def test_unknown_type(self, bad):
        with pytest.raises(UnknownJoinTypeError) as excinfo:
            predicate_for_type(bad)
        assert excinfo.value.join_type == bad
        assert isinstance(excinfo.value, ValidationError)
        assert isinstance(excinfo.value, ValueError)


class TestNegate:
    def test_named_complements(self):
        assert negate("left") is JoinType.RIGHT_OUTER
        assert negate("right") is JoinType.LEFT_OUTER
        assert negate("inner") is JoinType.OUTER
        assert negate("outer") is JoinType.INNER
        assert negate("leftOuter") is JoinType.RIGHT
        assert negate("rightOuter") is JoinType.LEFT

    def test_full_negates_to_never(self):
        assert negate(JoinType.FULL) is never_select
        for sides in SIDES:
            assert call(never_select, *sides) is False

    @pytest.mark.parametrize("join_type", list(JoinType))
    def test_negation_is_complement(self, join_type):
        negated = negate(join_type)
        select = negated if callable(negated) else predicate_for_type(negated)
        original = predicate_for_type(join_type)
        for sides in SIDES:
            assert call(select, *sides) is (not call(original, *sides))

    def test_function(self):
        calls = []

        def is_x(l, r, k):
            calls.append((l, r, k))
            return k == "x"

        negated = negate(is_x)
        assert negated(1, MISSING, "x") is False
        assert negated(MISSING, 2, "y") is True
        assert calls == [(1, MISSING, "x"), (MISSING, 2, "y")]

    def test_double_negation_of_function(self):
        def is_x(l, r, k):
            return k == "x"

        twice = negate(negate(is_x))
        for key, (l, r) in itertools.product("xy", [(1, 2), (1, MISSING), (MISSING, 2)]):
            assert twice(l, r, key) is (key == "x")

    def test_unknown_type(self):
        with pytest.raises(UnknownJoinTypeError):
            negate("nope")
