"""Dynamic purity check.

Calls a function twice on deep copies of the same arguments and requires:
equal results, arguments left exactly as they were passed, and nothing
written to stdout/stderr.
"""

from __future__ import annotations

import copy
import io
import sys
from collections.abc import Callable
from typing import Any

from seqalgebra._util import EqPredicate


def dynamic_purity_check(
    fn: Callable[..., Any],
    kwargs: dict[str, Any],
    *,
    eq: EqPredicate | None = None,
) -> tuple[bool, str]:
    """Returns (is_pure, error_message). error_message is empty if pure."""
    if eq is None:
        eq = lambda a, b: a == b  # noqa: E731

    kwargs1 = copy.deepcopy(kwargs)
    kwargs2 = copy.deepcopy(kwargs)

    old_stdout, old_stderr = sys.stdout, sys.stderr
    capture_out = io.StringIO()
    capture_err = io.StringIO()
    try:
        sys.stdout = capture_out
        sys.stderr = capture_err
        result1 = fn(**kwargs1)
        result2 = fn(**kwargs2)
    finally:
        sys.stdout = old_stdout
        sys.stderr = old_stderr

    errors: list[str] = []

    if not eq(result1, result2):
        errors.append(f"results differ: {result1!r} vs {result2!r}")

    for name, original in kwargs.items():
        if callable(original):
            continue
        if kwargs1[name] != original:
            errors.append(f"argument {name!r} was mutated: {original!r} -> {kwargs1[name]!r}")

    if capture_out.getvalue():
        errors.append("function produced stdout output")

    if capture_err.getvalue():
        errors.append("function produced stderr output")

    if errors:
        return False, "; ".join(errors)
    return True, ""
