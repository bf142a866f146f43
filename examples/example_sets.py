"""Set operations with contracts: some correct, some deliberately broken.

Bug: `unique_unstable()` doesn't preserve input order.
Bug: `intersect_leaky()` lets duplicates from the first sequence through.
Bug: `merge_uniq()` forgets to collapse runs in the first sequence.
Bug: `append_sentinel()` mutates its argument.
Bug: `insist_empty()` has a precondition nothing satisfies.
"""

from __future__ import annotations

from collections.abc import Sequence

from seqalgebra import against, ensures, is_unique, pure, requires, spec, unique
from seqalgebra._strategies import sorted_lists
from seqalgebra.unordered import uniq_reference


@spec
def unique_spec(xs: Sequence[int]) -> list[int]:
    """Reference: unique elements preserving first-occurrence order."""
    seen: set[int] = set()
    result: list[int] = []
    for x in xs:
        if x not in seen:
            seen.add(x)
            result.append(x)
    return result


@against(unique_spec, max_examples=300)
@ensures(lambda xs, result: is_unique(result))
def unique_unstable(xs: Sequence[int]) -> list[int]:
    return list(set(xs))


@pure
@against(unique_spec, max_examples=300)
def unique_ok(xs: Sequence[int]) -> list[int]:
    return unique(xs)


@spec
def intersect_spec(xs: Sequence[int], ys: Sequence[int]) -> list[int]:
    keep = set(ys)
    return [x for x in dict.fromkeys(xs) if x in keep]


@against(intersect_spec, max_examples=300)
def intersect_leaky(xs: Sequence[int], ys: Sequence[int]) -> list[int]:
    keep = set(ys)
    return [x for x in xs if x in keep]


@against(uniq_reference, max_examples=300, strategies={"a": sorted_lists(), "b": sorted_lists()})
def merge_uniq(a: Sequence[int], b: Sequence[int]) -> list[int]:
    out: list[int] = []
    j = 0
    for x in a:
        while j < len(b) and b[j] < x:
            j += 1
        if j == len(b) or b[j] != x:
            out.append(x)
    return out


@pure
def append_sentinel(xs: list[int]) -> list[int]:
    xs.append(0)
    return xs


@requires(lambda xs: len(xs) < 0)
def insist_empty(xs: Sequence[int]) -> int:
    return len(xs)
