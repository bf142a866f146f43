from __future__ import annotations

import collections.abc
import inspect
import types
from collections.abc import Callable
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

from hypothesis import find
from hypothesis import strategies as st

from seqalgebra._bundle import _check_requires, _root_original
from seqalgebra._predicates import before_by, eq_by, equals
from seqalgebra._util import StrategyMap

# Small domain so that generated sequences actually collide.
_ELEMENTS: st.SearchStrategy[int] = st.integers(min_value=-8, max_value=8)


class UnsupportedParameter(TypeError):
    """No strategy can be derived for a parameter of a checked function."""


def _identity(x: Any) -> Any:
    return x


def _thirds(x: Any) -> Any:
    return x // 3


def _mod3(x: Any) -> Any:
    return x % 3


def _absolute(x: Any) -> Any:
    return abs(x)


def equivalences() -> st.SearchStrategy[Callable[[Any, Any], bool]]:
    """Valid equivalence relations over integers, for ``*_via`` operations."""
    return st.sampled_from([equals, eq_by(_thirds), eq_by(_mod3), eq_by(_absolute)])


_ORDER_KEY = st.shared(st.sampled_from([_identity, _thirds]), key="seqalgebra-order-key")


def monotone_equivalences() -> st.SearchStrategy[Callable[[Any, Any], bool]]:
    """Equivalences whose classes are contiguous in ascending integer order.

    Draws the same key as :func:`monotone_orders` within one example, so an
    ``eq``/``ord`` pair generated together always agrees.
    """
    return _ORDER_KEY.map(lambda key: equals if key is _identity else eq_by(key))


def monotone_orders() -> st.SearchStrategy[Callable[[Any, Any], bool]]:
    return _ORDER_KEY.map(before_by)


def sorted_lists(
    elements: st.SearchStrategy[Any] = _ELEMENTS,
    *,
    reverse: bool = False,
    unique: bool = False,
    max_size: int = 20,
) -> st.SearchStrategy[list[Any]]:
    return st.lists(elements, max_size=max_size, unique=unique).map(lambda xs: sorted(xs, reverse=reverse))


def _strategy_for_type(tp: Any, *, max_list_size: int = 20, depth: int = 0) -> st.SearchStrategy[Any]:
    if depth > 5:
        return st.none()

    origin = get_origin(tp)
    args = get_args(tp)

    if isinstance(tp, TypeVar) or tp is Any:
        return _ELEMENTS
    if tp is int:
        return st.integers()
    if tp is float:
        return st.floats(allow_nan=False, allow_infinity=False)
    if tp is bool:
        return st.booleans()
    if tp is str:
        return st.text()

    if origin in (Union, types.UnionType) and len(args) == 2 and type(None) in args:
        other = args[0] if args[1] is type(None) else args[1]
        return st.one_of(st.none(), _strategy_for_type(other, max_list_size=max_list_size, depth=depth + 1))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return st.lists(
                _strategy_for_type(args[0], max_list_size=max_list_size, depth=depth + 1),
                max_size=max_list_size,
            ).map(tuple)
        return st.tuples(*[_strategy_for_type(a, max_list_size=max_list_size, depth=depth + 1) for a in args])

    if origin in (list, collections.abc.Sequence):
        (elem,) = args if args else (Any,)
        return st.lists(_strategy_for_type(elem, max_list_size=max_list_size, depth=depth + 1), max_size=max_list_size)

    if origin is collections.abc.Callable:
        return equivalences()

    raise UnsupportedParameter(f"no strategy for type {tp!r}")


def _strategy_for_function(
    fn: Callable[..., Any],
    *,
    max_list_size: int = 20,
    overrides: StrategyMap | None = None,
) -> st.SearchStrategy[dict[str, Any]]:
    root = _root_original(fn)
    sig = inspect.signature(root)
    hints = get_type_hints(root)
    overrides = overrides or {}

    kwargs_strats: dict[str, st.SearchStrategy[Any]] = {}
    for name, param in sig.parameters.items():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if name in overrides:
            kwargs_strats[name] = overrides[name]
            continue
        tp = hints.get(name, Any)
        try:
            s = _strategy_for_type(tp, max_list_size=max_list_size)
        except UnsupportedParameter:
            raise UnsupportedParameter(f"no strategy for parameter {name!r} of type {tp!r}") from None
        if param.default is not inspect.Parameter.empty:
            kwargs_strats[name] = st.one_of(st.just(param.default), s)
        else:
            kwargs_strats[name] = s

    return st.fixed_dictionaries(kwargs_strats)


def _find_satisfying_kwargs(
    fn: Callable[..., Any], strat_kwargs: st.SearchStrategy[dict[str, Any]]
) -> dict[str, Any]:
    root = _root_original(fn)

    def ok(kwargs: dict[str, Any]) -> bool:
        ok_pre, _ = _check_requires(root, (), kwargs)
        return ok_pre

    return find(strat_kwargs, ok)
