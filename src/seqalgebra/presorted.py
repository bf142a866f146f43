"""Set operations that assume their input is already sorted.

Sortedness makes every equivalence class a contiguous run, so deduplication
is a single sweep and difference / intersection are merge sweeps over both
inputs: O(n + m) comparator calls instead of the quadratic work done in
:mod:`seqalgebra.unordered`.

The direction is whatever ``ord`` says: ``ord(left, right)`` means "left is
ordered before right". Use :func:`~seqalgebra.ascending` for non-decreasing
input and :func:`~seqalgebra.descending` for non-increasing input.

Input order is not checked unless contract checking is on
(``SEQALGEBRA_CHECK_CONTRACTS=1``); unsorted input gives meaningless but
well-formed results.
"""

from __future__ import annotations

from collections.abc import Sequence

from hypothesis import strategies as st

from seqalgebra import unordered
from seqalgebra._decorators import against, ensures, pure, requires, spec
from seqalgebra._predicates import ascending, descending, equals, is_sorted_by
from seqalgebra._strategies import monotone_equivalences, monotone_orders, sorted_lists
from seqalgebra._util import EqPredicate, OrdPredicate, T

__all__ = [
    "intersect",
    "intersect_desc",
    "intersect_if",
    "is_unique",
    "is_unique_via",
    "uniq",
    "uniq_desc",
    "uniq_via",
    "unique",
    "unique_via",
    "uniques",
    "uniques_via",
]

_ASC = {"a": sorted_lists(), "b": sorted_lists()}
_DESC = {"a": sorted_lists(reverse=True), "b": sorted_lists(reverse=True)}
_KEYED = {
    "a": sorted_lists(),
    "b": sorted_lists(),
    "eq": monotone_equivalences(),
    "ord": monotone_orders(),
}


# ---------------------------------------------------------------------------
# uniqueness
# ---------------------------------------------------------------------------

@pure
@ensures(lambda seq, eq, result: len(result) <= len(seq))
@against(unordered.unique_via, strategies={"seq": sorted_lists(), "eq": monotone_equivalences()})
def unique_via(seq: Sequence[T], eq: EqPredicate) -> list[T]:
    """Keep an element iff it is not equivalent to its predecessor.

    ``eq`` is called as ``eq(current, previous)``. Works for either sort
    direction since only neighbours are compared.
    """
    out = list(seq)
    cursor = 1
    for i in range(1, len(out)):
        if not eq(out[i], out[i - 1]):
            if i != cursor:
                out[cursor] = out[i]
            cursor += 1
    del out[cursor:]
    return out


@pure
@against(unordered.unique, strategies={"seq": sorted_lists()})
def unique(seq: Sequence[T]) -> list[T]:
    """``unique([1, 1, 1, 2, 3, 3, 4, 5, 6]) == [1, 2, 3, 4, 5, 6]``"""
    return unique_via(seq, equals)


@pure
@against(unordered.is_unique_via, strategies={"seq": sorted_lists(), "eq": monotone_equivalences()})
def is_unique_via(seq: Sequence[T], eq: EqPredicate) -> bool:
    """Adjacent-pair scan; any duplicate in sorted input has an equivalent neighbour."""
    for i in range(1, len(seq)):
        if eq(seq[i], seq[i - 1]):
            return False
    return True


@pure
@against(unordered.is_unique, strategies={"seq": sorted_lists()})
def is_unique(seq: Sequence[T]) -> bool:
    return is_unique_via(seq, equals)


# ---------------------------------------------------------------------------
# difference
# ---------------------------------------------------------------------------

@spec
def collapsed_uniq_reference(a: Sequence[T], b: Sequence[T], eq: EqPredicate) -> list[T]:
    """Difference with ``a`` collapsed to one element per ``eq`` class first.

    The merge sweep sees each class as a single run, so under a coarser ``eq``
    it differs from :func:`seqalgebra.unordered.uniq_via`, which dedups by value.
    """
    return unordered.uniq_via(unordered.unique_via(a, eq), b, eq)


@spec
def collapsed_uniques_reference(
    a: Sequence[T], b: Sequence[T], eq: EqPredicate
) -> tuple[list[T], list[T]]:
    return collapsed_uniq_reference(a, b, eq), collapsed_uniq_reference(b, a, eq)


@pure
@requires(lambda a, b, eq, ord: is_sorted_by(a, ord) and is_sorted_by(b, ord))
@against(collapsed_uniq_reference, strategies=_KEYED)
def uniq_via(a: Sequence[T], b: Sequence[T], eq: EqPredicate, ord: OrdPredicate) -> list[T]:
    """Elements of ``a`` with no equivalent in ``b``, one per run, by merge sweep.

    Both inputs must be sorted consistently with ``ord``. Calls are
    ``ord(b_head, a_head)`` and ``eq(b_head, a_head)``.

    ``uniq_via([1, 2, 3, 4, 5, 6], [1, 2, 5, 7, 9], equals, ascending) == [3, 4, 6]``
    """
    out = list(a)
    cursor = 0
    i = 0
    j = 0
    while i < len(out) and j < len(b):
        if ord(b[j], out[i]):
            j += 1
        elif eq(b[j], out[i]):
            i += 1
            j += 1
        else:
            if i == 0 or not eq(out[i - 1], out[i]):
                out[cursor] = out[i]
                cursor += 1
            i += 1
    while i < len(out):
        if i == 0 or not eq(out[i - 1], out[i]):
            out[cursor] = out[i]
            cursor += 1
        i += 1
    del out[cursor:]
    return out


@pure
@against(unordered.uniq, strategies=_ASC)
def uniq(a: Sequence[T], b: Sequence[T]) -> list[T]:
    return uniq_via(a, b, equals, ascending)


@pure
@against(unordered.uniq, strategies=_DESC)
def uniq_desc(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``uniq_desc([6, 5, 4, 3, 2, 1], [9, 7, 5, 3, 1]) == [6, 4, 2]``"""
    return uniq_via(a, b, equals, descending)


@pure
@against(collapsed_uniques_reference, strategies=_KEYED)
def uniques_via(
    a: Sequence[T], b: Sequence[T], eq: EqPredicate, ord: OrdPredicate
) -> tuple[list[T], list[T]]:
    return uniq_via(a, b, eq, ord), uniq_via(b, a, eq, ord)


@pure
@against(unordered.uniques, strategies=_ASC)
def uniques(a: Sequence[T], b: Sequence[T]) -> tuple[list[T], list[T]]:
    return uniques_via(a, b, equals, ascending)


# ---------------------------------------------------------------------------
# intersection
# ---------------------------------------------------------------------------

@pure
@requires(lambda a, b, eq, ord: is_sorted_by(a, ord) and is_sorted_by(b, ord))
@against(
    unordered.intersect_if,
    strategies={
        "a": sorted_lists(unique=True),
        "b": sorted_lists(),
        "eq": st.just(equals),
        "ord": st.just(ascending),
    },
)
def intersect_if(a: Sequence[T], b: Sequence[T], eq: EqPredicate, ord: OrdPredicate) -> list[T]:
    """Elements of ``a`` matched in ``b``, by merge sweep.

    Calls are ``eq(a_head, b_head)`` and ``ord(a_head, b_head)``. Runs in ``a``
    are not collapsed: each element of a run needs its own partner in ``b``.
    Apply :func:`unique_via` to ``a`` first for one copy per class.
    """
    out: list[T] = []
    i = 0
    j = 0
    while i < len(a) and j < len(b):
        if eq(a[i], b[j]):
            out.append(a[i])
            i += 1
            j += 1
        elif ord(a[i], b[j]):
            i += 1
        else:
            j += 1
    return out


@pure
@against(unordered.intersect, strategies={"a": sorted_lists(unique=True), "b": sorted_lists()})
def intersect(a: Sequence[T], b: Sequence[T]) -> list[T]:
    return intersect_if(a, b, equals, ascending)


@pure
@against(
    unordered.intersect,
    strategies={"a": sorted_lists(unique=True, reverse=True), "b": sorted_lists(reverse=True)},
)
def intersect_desc(a: Sequence[T], b: Sequence[T]) -> list[T]:
    return intersect_if(a, b, equals, descending)
