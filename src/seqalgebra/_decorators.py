from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from hypothesis import HealthCheck

from seqalgebra._bundle import _bundle, _check_ensures, _check_requires, _root_original, _set_original
from seqalgebra._config import contracts_enabled
from seqalgebra._predicates import resolve_eq
from seqalgebra._util import EqPredicate, StrategyMap, _qualified_name


def requires(pred: Callable[..., bool]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Attach a precondition.

    ``pred`` is called with every argument of the decorated function by name
    (defaults applied). It is evaluated at call time only while contract
    checking is enabled; the checker always evaluates it.
    """
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["requires"].append(pred)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if contracts_enabled():
                ok, err = _check_requires(fn, args, kwargs)
                if not ok:
                    raise AssertionError(f"Precondition failed for {_qualified_name(_root_original(fn))}: {err}")
            return fn(*args, **kwargs)

        _set_original(wrapper, fn)
        return wrapper

    return deco


def ensures(pred: Callable[..., bool]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Attach a postcondition; ``pred`` also receives ``result=``."""
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["ensures"].append(pred)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not contracts_enabled():
                return fn(*args, **kwargs)
            ok, err = _check_requires(fn, args, kwargs)
            if not ok:
                raise AssertionError(f"Precondition failed for {_qualified_name(_root_original(fn))}: {err}")
            result = fn(*args, **kwargs)
            ok2, err2 = _check_ensures(fn, args, kwargs, result)
            if not ok2:
                raise AssertionError(f"Postcondition failed for {_qualified_name(_root_original(fn))}: {err2}")
            return result

        _set_original(wrapper, fn)
        return wrapper

    return deco


def spec(fn: Callable[..., Any]) -> Callable[..., Any]:
    _bundle(fn)["is_spec"] = True
    return fn


def pure(
    fn: Callable[..., Any] | None = None,
    *,
    eq: EqPredicate | None = None,
) -> Callable[..., Any]:
    """Declare that a function is pure with respect to its arguments.

    The checker calls it twice on copies of the same input and requires equal
    results, untouched inputs, and no output on stdout/stderr.

    Args:
        eq: Custom equality for comparing outputs across calls.
    """
    def _apply(f: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(f)["pure"] = {"eq": eq}
        return f

    if fn is not None:
        return _apply(fn)
    return _apply


def against(
    spec_fn: Callable[..., Any],
    *,
    eq: EqPredicate | None = None,
    max_examples: int | None = None,
    deadline_ms: int | None = None,
    strategies: StrategyMap | None = None,
    suppress_health_checks: tuple[HealthCheck, ...] = (
        HealthCheck.too_slow,
        HealthCheck.filter_too_much,
    ),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare that a function must agree with ``spec_fn`` on every valid input.

    ``strategies`` overrides the generated value for individual parameters,
    which is how sorted inputs reach the presorted operations. Parameters not
    accepted by ``spec_fn`` are dropped before calling it.
    """
    resolved_eq = resolve_eq(eq) if eq is not None else None

    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["against"] = {
            "spec": spec_fn,
            "eq": resolved_eq,
            "max_examples": max_examples,
            "deadline_ms": deadline_ms,
            "strategies": dict(strategies or {}),
            "suppress_health_checks": suppress_health_checks,
        }
        return fn

    return deco
