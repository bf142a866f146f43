"""Tests for the shared equality / order predicates."""

from __future__ import annotations

import math

import pytest

from seqalgebra._predicates import (
    ascending,
    before_by,
    descending,
    eq_by,
    equals,
    is_sorted_by,
    resolve_eq,
)


class TestBasicPredicates:
    def test_equals(self):
        assert equals(1, 1) is True
        assert equals("a", "b") is False

    def test_directions(self):
        assert ascending(1, 2) is True
        assert ascending(2, 2) is False
        assert descending(2, 1) is True
        assert descending(2, 2) is False


class TestKeyPredicates:
    def test_eq_by(self):
        same_floor = eq_by(math.floor)
        assert same_floor(1.2, 1.9)
        assert not same_floor(1.9, 2.0)
        assert same_floor.__name__ == "eq_by(floor)"

    def test_before_by(self):
        floor_before = before_by(math.floor)
        assert floor_before(1.9, 2.0)
        assert not floor_before(1.2, 1.9)

    def test_before_by_reverse(self):
        floor_after = before_by(math.floor, reverse=True)
        assert floor_after(2.0, 1.9)
        assert not floor_after(1.9, 1.2)


class TestResolveEq:
    def test_none_is_equals(self):
        assert resolve_eq(None) is equals

    def test_callable(self):
        f = lambda a, b: True  # noqa: E731
        assert resolve_eq(f) is f

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid eq parameter"):
            resolve_eq("approx")


class TestIsSortedBy:
    def test_ascending(self):
        assert is_sorted_by([1, 1, 2, 5])
        assert not is_sorted_by([1, 3, 2])

    def test_descending(self):
        assert is_sorted_by([5, 5, 2], descending)
        assert not is_sorted_by([1, 2], descending)

    def test_trivial(self):
        assert is_sorted_by([])
        assert is_sorted_by([9])
