from seqalgebra import presorted, unordered
from seqalgebra._cli import main
from seqalgebra._config import contracts_enabled, default_max_examples, force_contracts
from seqalgebra._decorators import against, ensures, pure, requires, spec
from seqalgebra._engine import ObligationResult, check_module
from seqalgebra._predicates import (
    ascending,
    before_by,
    descending,
    eq_by,
    equals,
    is_sorted_by,
    resolve_eq,
)
from seqalgebra.unordered import (
    intersect,
    intersect_if,
    is_unique,
    is_unique_via,
    join,
    shift,
    times,
    union,
    union_via,
    uniq,
    uniq_via,
    unique,
    unique_via,
    uniques,
    uniques_via,
    unshift,
)

__all__ = [
    "ObligationResult",
    "against",
    "ascending",
    "before_by",
    "check_module",
    "contracts_enabled",
    "default_max_examples",
    "descending",
    "ensures",
    "eq_by",
    "equals",
    "force_contracts",
    "intersect",
    "intersect_if",
    "is_sorted_by",
    "is_unique",
    "is_unique_via",
    "join",
    "main",
    "presorted",
    "pure",
    "requires",
    "resolve_eq",
    "shift",
    "spec",
    "times",
    "union",
    "union_via",
    "uniq",
    "uniq_via",
    "unique",
    "unique_via",
    "uniques",
    "uniques_via",
    "unordered",
    "unshift",
]
