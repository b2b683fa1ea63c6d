"""Tests for FilterAccumulator state handling."""

from hookquery.constants import OptionKind
from hookquery.querydsl.accumulator import FilterAccumulator
from hookquery.querydsl.clause import Clause, OrderSpec
from hookquery.querydsl.where import FieldCompare, FieldMap


class TestDefaults:
    def test_new_accumulator_is_empty(self):
        acc = FilterAccumulator()
        assert acc.is_empty
        assert acc.clauses == []
        assert acc.ordering == []
        assert acc.group == []
        assert acc.options == {}
        assert acc.limit is None
        assert acc.offset is None
        assert acc.remember is None

    def test_limit_zero_is_not_empty(self):
        acc = FilterAccumulator()
        acc.limit = 0
        assert not acc.is_empty


class TestClauses:
    def test_add_where_appends_in_order(self):
        acc = FilterAccumulator()
        acc.add_where(FieldCompare("a", "=", 1))
        acc.add_where(FieldMap({"b": 2}), combinator="or")
        assert acc.clauses == [Clause("a", "=", 1, "and"), Clause("b", "=", 2, "or")]

    def test_add_where_returns_added_clauses(self):
        acc = FilterAccumulator()
        added = acc.add_where(FieldMap({"a": 1, "b": 2}))
        assert len(added) == 2


class TestOrdering:
    def test_add_order_normalizes_direction(self):
        acc = FilterAccumulator()
        acc.add_order("x")
        acc.add_order("y", -1)
        acc.add_order("z", 1)
        acc.add_order("w", "DESC")
        assert acc.ordering == [
            OrderSpec("x", "asc"),
            OrderSpec("y", "desc"),
            OrderSpec("z", "asc"),
            OrderSpec("w", "DESC"),
        ]


class TestReset:
    def test_reset_clears_everything(self):
        acc = FilterAccumulator()
        acc.add_where(FieldCompare("a", "=", 1))
        acc.add_order("a")
        acc.set_group(["a"])
        acc.set_option(OptionKind.DISTINCT, True)
        acc.limit, acc.offset, acc.remember = 1, 2, 3
        assert not acc.is_empty

        assert acc.reset() is acc
        assert acc.is_empty

    def test_reset_does_not_mutate_previous_lists(self):
        acc = FilterAccumulator()
        acc.add_where(FieldCompare("a", "=", 1))
        clauses = acc.clauses
        acc.reset()
        assert clauses == [Clause("a", "=", 1, "and")]


class TestOptions:
    def test_set_option_overwrites(self):
        acc = FilterAccumulator()
        acc.set_option(OptionKind.AGGREGATION, {"method": "max", "field": "a"})
        acc.set_option(OptionKind.AGGREGATION, {"method": "min", "field": "b"})
        assert acc.get_option(OptionKind.AGGREGATION) == {"method": "min", "field": "b"}

    def test_get_option_default(self):
        assert FilterAccumulator().get_option(OptionKind.DATA, "x") == "x"

    def test_repr(self):
        assert "FilterAccumulator" in repr(FilterAccumulator())
