"""Property tests for the algebraic laws of the set operations."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from seqalgebra import presorted, unordered
from seqalgebra._strategies import equivalences, sorted_lists
from seqalgebra._util import _is_subsequence

small_lists = st.lists(st.integers(min_value=-6, max_value=6), max_size=15)


# ---------------------------------------------------------------------------
# unordered
# ---------------------------------------------------------------------------

class TestUniqueLaws:
    @given(small_lists)
    def test_idempotent(self, a):
        assert unordered.unique(unordered.unique(a)) == unordered.unique(a)

    @given(small_lists)
    def test_result_is_unique(self, a):
        assert unordered.is_unique(unordered.unique(a))

    @given(small_lists)
    def test_preserves_order(self, a):
        assert _is_subsequence(unordered.unique(a), a)

    @given(small_lists, equivalences())
    def test_via_result_is_unique_under_same_eq(self, a, eq):
        assert unordered.is_unique_via(unordered.unique_via(a, eq), eq)


class TestDifferenceLaws:
    @given(small_lists, small_lists)
    def test_uniq_pair_partitions_symmetric_difference(self, a, b):
        only_a, only_b = unordered.uniques(a, b)
        assert set(only_a) | set(only_b) == set(a) ^ set(b)
        assert not set(only_a) & set(only_b)
        assert unordered.is_unique(only_a + only_b)

    @given(small_lists, small_lists)
    def test_uniq_is_subsequence_of_unique(self, a, b):
        assert _is_subsequence(unordered.uniq(a, b), unordered.unique(a))


class TestIntersectUnionLaws:
    @given(small_lists, small_lists)
    def test_intersect_has_no_duplicates(self, a, b):
        out = unordered.intersect(a, b)
        assert unordered.is_unique(out)
        assert _is_subsequence(out, unordered.unique(a))

    @given(small_lists, small_lists)
    def test_union_covers_both(self, a, b):
        out = unordered.union(a, b)
        assert set(out) == set(a) | set(b)
        assert out[: len(unordered.unique(a))] == unordered.unique(a)

    @given(small_lists, st.integers(min_value=0, max_value=5))
    def test_times_length(self, a, n):
        assert len(unordered.times(a, n)) == len(a) * n


# ---------------------------------------------------------------------------
# presorted vs unordered
# ---------------------------------------------------------------------------

class TestSortedAgreesWithUnordered:
    @given(sorted_lists(), sorted_lists())
    def test_uniq(self, a, b):
        assert presorted.uniq(a, b) == unordered.uniq(a, b)

    @given(sorted_lists(reverse=True), sorted_lists(reverse=True))
    def test_uniq_desc(self, a, b):
        assert presorted.uniq_desc(a, b) == unordered.uniq(a, b)

    @given(sorted_lists())
    def test_unique(self, a):
        assert presorted.unique(a) == unordered.unique(a)
        assert presorted.is_unique(a) == unordered.is_unique(a)

    @settings(max_examples=200)
    @given(sorted_lists(unique=True), sorted_lists())
    def test_intersect_on_unique_a(self, a, b):
        assert presorted.intersect(a, b) == unordered.intersect(a, b)

    @given(sorted_lists(), sorted_lists())
    def test_intersect_after_dedup(self, a, b):
        assert presorted.intersect(presorted.unique(a), b) == unordered.intersect(a, b)
