"""Set operations on sequences in arbitrary order.

Every operation compares elements only through an equality predicate, so
nothing here needs elements to be hashable or orderable. The price is
quadratic comparator work; see :mod:`seqalgebra.presorted` for linear
versions that rely on sorted input.

The plain names (``unique``, ``uniq``, ...) compare with ``==``. Each has a
``*_via`` / ``*_if`` form taking a custom equality predicate.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import Any

from hypothesis import strategies as st

from seqalgebra._decorators import against, ensures, pure, spec
from seqalgebra._predicates import equals
from seqalgebra._util import EqPredicate, T, _is_subsequence

__all__ = [
    "intersect",
    "intersect_if",
    "is_unique",
    "is_unique_via",
    "join",
    "shift",
    "times",
    "union",
    "union_via",
    "uniq",
    "uniq_via",
    "unique",
    "unique_via",
    "uniques",
    "uniques_via",
    "unshift",
]


# ---------------------------------------------------------------------------
# reference implementations (hashable elements only)
# ---------------------------------------------------------------------------

@spec
def unique_reference(seq: Sequence[T]) -> list[T]:
    return list(dict.fromkeys(seq))


@spec
def is_unique_reference(seq: Sequence[T]) -> bool:
    return len(set(seq)) == len(seq)


@spec
def uniq_reference(a: Sequence[T], b: Sequence[T]) -> list[T]:
    exclude = set(b)
    return [x for x in dict.fromkeys(a) if x not in exclude]


@spec
def intersect_reference(a: Sequence[T], b: Sequence[T]) -> list[T]:
    keep = set(b)
    return [x for x in dict.fromkeys(a) if x in keep]


@spec
def union_reference(a: Sequence[T], b: Sequence[T]) -> list[T]:
    return list(dict.fromkeys(itertools.chain(a, b)))


@spec
def times_reference(seq: Sequence[T], qty: int) -> list[T]:
    return list(seq) * qty


# ---------------------------------------------------------------------------
# uniqueness
# ---------------------------------------------------------------------------

@pure
@ensures(lambda seq, eq, result: len(result) <= len(seq))
@ensures(lambda seq, eq, result: _is_subsequence(result, seq))
@ensures(lambda seq, eq, result: is_unique_via(result, eq))
def unique_via(seq: Sequence[T], eq: EqPredicate) -> list[T]:
    """Drop every element equivalent to an earlier one.

    ``eq`` is called as ``eq(kept, candidate)`` where ``kept`` precedes
    ``candidate`` in ``seq``.
    """
    out = list(seq)
    cursor = 0
    for item in seq:
        if not any(eq(out[k], item) for k in range(cursor)):
            out[cursor] = item
            cursor += 1
    del out[cursor:]
    return out


@pure
@against(unique_reference)
def unique(seq: Sequence[T]) -> list[T]:
    """``unique([1, 2, 1, 3, 2, 3, 4, 5, 6]) == [1, 2, 3, 4, 5, 6]``"""
    return unique_via(seq, equals)


@pure
def is_unique_via(seq: Sequence[T], eq: EqPredicate) -> bool:
    """True iff no two positions of ``seq`` hold equivalent elements.

    Stops at the first duplicate found.
    """
    for i in range(len(seq)):
        for j in range(i + 1, len(seq)):
            if eq(seq[i], seq[j]):
                return False
    return True


@pure
@against(is_unique_reference)
def is_unique(seq: Sequence[T]) -> bool:
    return is_unique_via(seq, equals)


# ---------------------------------------------------------------------------
# difference
# ---------------------------------------------------------------------------

@pure
@ensures(lambda a, b, eq, result: is_unique(result))
@ensures(lambda a, b, eq, result: not any(eq(y, x) for x in result for y in b))
def uniq_via(a: Sequence[T], b: Sequence[T], eq: EqPredicate) -> list[T]:
    """Elements of ``unique(a)`` with no equivalent in ``unique(b)``.

    Both sides are deduplicated by value; ``eq`` only decides exclusion, so
    distinct values in one ``eq`` class can all survive. Not symmetric; see
    :func:`uniques_via` for both directions at once. ``eq`` is called as
    ``eq(b_item, a_item)``.
    """
    exclude = unique(b)
    out = unique(a)
    cursor = 0
    for item in out:
        if not any(eq(other, item) for other in exclude):
            out[cursor] = item
            cursor += 1
    del out[cursor:]
    return out


@pure
@against(uniq_reference)
def uniq(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``uniq([1, 2, 3, 4, 5, 6], [1, 2]) == [3, 4, 5, 6]``"""
    return uniq_via(a, b, equals)


@pure
@ensures(lambda a, b, eq, result: result == (uniq_via(a, b, eq), uniq_via(b, a, eq)))
def uniques_via(a: Sequence[T], b: Sequence[T], eq: EqPredicate) -> tuple[list[T], list[T]]:
    """Symmetric difference as a pair: what only ``a`` has, what only ``b`` has."""
    return uniq_via(a, b, eq), uniq_via(b, a, eq)


@pure
def uniques(a: Sequence[T], b: Sequence[T]) -> tuple[list[T], list[T]]:
    """``uniques([1, 2, 3, 4, 5], [2, 5, 6, 7, 8]) == ([1, 3, 4], [6, 7, 8])``"""
    return uniques_via(a, b, equals)


# ---------------------------------------------------------------------------
# intersection / union
# ---------------------------------------------------------------------------

@pure
@ensures(lambda a, b, eq, result: is_unique(result))
@ensures(lambda a, b, eq, result: _is_subsequence(result, unique(a)))
def intersect_if(a: Sequence[T], b: Sequence[T], eq: EqPredicate) -> list[T]:
    """Elements of ``unique(a)`` that have an equivalent somewhere in ``b``.

    ``a`` is deduplicated by value, ``b`` not at all. ``eq`` is called as
    ``eq(a_item, b_item)``.
    """
    return [x for x in unique(a) if any(eq(x, y) for y in b)]


@pure
@against(intersect_reference)
def intersect(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``intersect([1, 1, 3, 5], [1, 2, 3]) == [1, 3]``"""
    return intersect_if(a, b, equals)


@pure
@ensures(lambda a, b, eq, result: is_unique_via(result, eq))
def union_via(a: Sequence[T], b: Sequence[T], eq: EqPredicate) -> list[T]:
    """Deduplicated concatenation of ``a`` then ``b``, first occurrences first."""
    stack: list[T] = list(a)
    stack.extend(b)
    return unique_via(stack, eq)


@pure
@against(union_reference)
def union(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """``union(["a", "b", "c"], ["c", "d", "a"]) == ["a", "b", "c", "d"]``"""
    return union_via(a, b, equals)


# ---------------------------------------------------------------------------
# misc
# ---------------------------------------------------------------------------

@pure
@ensures(lambda seq, qty, result: len(result) == len(seq) * qty)
@against(times_reference, strategies={"qty": st.integers(min_value=0, max_value=6)})
def times(seq: Sequence[T], qty: int) -> list[T]:
    """Repeat the content of ``seq`` ``qty`` whole times.

    ``times([1, 2, 3], 3) == [1, 2, 3, 1, 2, 3, 1, 2, 3]``. An empty ``seq`` or
    ``qty == 0`` gives ``[]``.
    """
    if qty < 0:
        raise ValueError(f"times() quantity must be non-negative, got {qty}")
    if not seq:
        return []
    return list(itertools.islice(itertools.cycle(seq), len(seq) * qty))


def shift(seq: list[T]) -> T | None:
    """Remove and return the first element of ``seq`` in place; ``None`` if empty."""
    if not seq:
        return None
    return seq.pop(0)


def unshift(seq: list[T], item: T) -> None:
    """Insert ``item`` at the front of ``seq`` in place."""
    seq.insert(0, item)


def join(seq: Sequence[Any], joiner: str) -> str:
    return joiner.join(str(x) for x in seq)
