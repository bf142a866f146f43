"""Equality and order predicates shared by the unordered and presorted operations.

Every ``*_via`` operation takes plain binary callables. The helpers here cover
the common cases: value equality, ascending / descending order, predicates
derived from a key function, and a sortedness test.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from seqalgebra._util import EqPredicate, OrdPredicate


def equals(left: Any, right: Any) -> bool:
    return bool(left == right)


def ascending(left: Any, right: Any) -> bool:
    return bool(left < right)


def descending(left: Any, right: Any) -> bool:
    return bool(left > right)


def eq_by(key: Callable[[Any], Any]) -> EqPredicate:
    """Equality on ``key(x)``, e.g. ``eq_by(math.floor)`` groups floats by integer part."""

    def eq(left: Any, right: Any) -> bool:
        return bool(key(left) == key(right))

    eq.__name__ = f"eq_by({getattr(key, '__name__', repr(key))})"
    return eq


def before_by(key: Callable[[Any], Any], *, reverse: bool = False) -> OrdPredicate:
    """Order on ``key(x)``; ``reverse=True`` for descending sequences."""

    def before(left: Any, right: Any) -> bool:
        if reverse:
            return bool(key(left) > key(right))
        return bool(key(left) < key(right))

    before.__name__ = f"before_by({getattr(key, '__name__', repr(key))})"
    return before


def resolve_eq(eq: EqPredicate | None) -> EqPredicate:
    """``None`` means value equality; anything else must be a binary callable."""
    if eq is None:
        return equals
    if callable(eq):
        return eq
    raise ValueError(f"Invalid eq parameter: {eq!r}. Expected None or a callable.")


def is_sorted_by(seq: Sequence[Any], ord: OrdPredicate = ascending) -> bool:
    """True when no element is ordered before its predecessor.

    Runs of equivalent elements are allowed.
    """
    return not any(ord(seq[i], seq[i - 1]) for i in range(1, len(seq)))
