from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from seqalgebra._util import _safe_call

_BUNDLE_ATTR = "__seqalgebra_bundle__"
_ORIGINAL_ATTR = "__seqalgebra_original__"


def _root_original(fn: Callable[..., Any]) -> Callable[..., Any]:
    cur = fn
    while True:
        nxt = getattr(cur, _ORIGINAL_ATTR, None)
        if nxt is None:
            return cur
        cur = nxt


def _bundle(fn: Callable[..., Any]) -> dict[str, Any]:
    base = _root_original(fn)
    if not hasattr(base, _BUNDLE_ATTR):
        setattr(
            base,
            _BUNDLE_ATTR,
            {"requires": [], "ensures": [], "against": None, "is_spec": False, "pure": None},
        )
    return getattr(base, _BUNDLE_ATTR)  # type: ignore[no-any-return]


def _set_original(wrapper: Callable[..., Any], original: Callable[..., Any]) -> None:
    setattr(wrapper, _ORIGINAL_ATTR, original)
    root = _root_original(original)
    if hasattr(root, _BUNDLE_ATTR) and not hasattr(wrapper, _BUNDLE_ATTR):
        setattr(wrapper, _BUNDLE_ATTR, getattr(root, _BUNDLE_ATTR))


def _get_bundle(fn: Callable[..., Any]) -> dict[str, Any]:
    return _bundle(fn)


def _bind_arguments(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    """Name every argument of a call, defaults included, so predicates can take them as keywords."""
    bound = inspect.signature(_root_original(fn)).bind(*args, **kwargs)
    bound.apply_defaults()
    return dict(bound.arguments)


def _check_requires(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[bool, str]:
    b = _get_bundle(fn)
    if not b["requires"]:
        return True, ""
    try:
        named = _bind_arguments(fn, args, kwargs)
    except TypeError as e:
        return False, f"TypeError: {e}"
    for pred in b["requires"]:
        ok, err = _safe_call(pred, **named)
        if not ok:
            return False, err or "returned False"
    return True, ""


def _check_ensures(
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    result: Any,
) -> tuple[bool, str]:
    b = _get_bundle(fn)
    if not b["ensures"]:
        return True, ""
    try:
        named = _bind_arguments(fn, args, kwargs)
    except TypeError as e:
        return False, f"TypeError: {e}"
    for pred in b["ensures"]:
        ok, err = _safe_call(pred, **named, result=result)
        if not ok:
            return False, err or "returned False"
    return True, ""
