from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from hypothesis import strategies as st

T = TypeVar("T")

EqPredicate = Callable[[Any, Any], bool]
OrdPredicate = Callable[[Any, Any], bool]
ContractPredicate = Callable[..., bool]
StrategyMap = dict[str, st.SearchStrategy[Any]]


def _qualified_name(fn: Callable[..., Any]) -> str:
    return f"{fn.__module__}.{getattr(fn, '__qualname__', getattr(fn, '__name__', str(fn)))}"


def _jsonable(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _jsonable(v) for k, v in obj.items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {"__dataclass__": obj.__class__.__name__, **_jsonable(dataclasses.asdict(obj))}
    if callable(obj):
        return getattr(obj, "__name__", repr(obj))
    return repr(obj)


def _safe_call(pred: ContractPredicate, *args: Any, **kwargs: Any) -> tuple[bool, str | None]:
    try:
        return bool(pred(*args, **kwargs)), None
    except Exception as e:
        return False, f"{type(e).__name__}: {e}"


def _is_subsequence(sub: Sequence[Any], seq: Sequence[Any]) -> bool:
    it = iter(seq)
    return all(any(x is y or x == y for y in it) for x in sub)
