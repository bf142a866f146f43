"""Tests for Hypothesis strategy synthesis."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Optional

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqalgebra._predicates import before_by, equals
from seqalgebra._strategies import (
    UnsupportedParameter,
    _find_satisfying_kwargs,
    _strategy_for_function,
    _strategy_for_type,
    monotone_equivalences,
    monotone_orders,
    sorted_lists,
)


class TestStrategyForType:
    @given(_strategy_for_type(Sequence[int]))
    def test_sequence_of_int(self, xs):
        assert isinstance(xs, list)
        assert all(isinstance(x, int) for x in xs)

    @given(_strategy_for_type(tuple[int, ...]))
    def test_variadic_tuple(self, xs):
        assert isinstance(xs, tuple)

    @given(_strategy_for_type(Optional[str]))
    def test_optional(self, x):
        assert x is None or isinstance(x, str)

    @given(_strategy_for_type(Callable[[Any, Any], bool]))
    def test_predicates_are_equivalences(self, eq):
        for x in range(-4, 5):
            assert eq(x, x)
            assert eq(x, x + 1) == eq(x + 1, x)

    def test_unsupported(self):
        with pytest.raises(UnsupportedParameter):
            _strategy_for_type(bytearray)


class TestSortedLists:
    @given(sorted_lists())
    def test_ascending(self, xs):
        assert xs == sorted(xs)

    @given(sorted_lists(reverse=True, unique=True))
    def test_descending_unique(self, xs):
        assert xs == sorted(xs, reverse=True)
        assert len(set(xs)) == len(xs)


class TestMonotonePairs:
    @given(monotone_equivalences(), monotone_orders(), sorted_lists())
    def test_eq_and_ord_agree(self, eq, ord, xs):
        for left, right in zip(xs, xs[1:]):
            assert not ord(right, left)
            assert eq(left, right) or ord(left, right)


class TestStrategyForFunction:
    def test_overrides_win(self):
        def f(xs: Sequence[int], n: int) -> int:
            return n

        strat = _strategy_for_function(f, overrides={"n": st.just(3)})
        kwargs = _find_satisfying_kwargs(f, strat)
        assert kwargs["n"] == 3
        assert kwargs["xs"] == []

    def test_unsupported_parameter_named(self):
        def f(buf: bytearray) -> int:
            return len(buf)

        with pytest.raises(UnsupportedParameter, match="'buf'"):
            _strategy_for_function(f)

    def test_order_key_is_shared(self):
        strat = st.tuples(monotone_equivalences(), monotone_orders())

        @given(strat)
        def check(pair):
            eq, ord = pair
            if eq is equals:
                assert ord(1, 2)
            else:
                assert not ord(1, 2)

        check()

    def test_before_by_identity_name(self):
        assert before_by(abs).__name__ == "before_by(abs)"
