from __future__ import annotations

import dataclasses
import importlib
import inspect
import time
from collections.abc import Callable
from typing import Any

from hypothesis import assume, given, settings
from hypothesis.errors import FailedHealthCheck, NoSuchExample

from seqalgebra._bundle import _BUNDLE_ATTR, _check_ensures, _check_requires, _get_bundle, _root_original
from seqalgebra._config import default_max_examples
from seqalgebra._predicates import equals
from seqalgebra._purity import dynamic_purity_check
from seqalgebra._strategies import UnsupportedParameter, _find_satisfying_kwargs, _strategy_for_function
from seqalgebra._util import _jsonable, _qualified_name


@dataclasses.dataclass
class ObligationResult:
    function: str
    obligation: str
    status: str  # "pass" | "fail" | "error" | "skip"
    details: dict[str, Any]
    duration_s: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "function": self.function,
            "obligation": self.obligation,
            "status": self.status,
            "details": self.details,
            "duration_s": round(self.duration_s, 3),
        }


def _collect_functions(module: Any) -> list[Callable[..., Any]]:
    """Decorated callables defined in ``module`` itself, not imported into it."""
    fns: list[Callable[..., Any]] = []
    for _name, obj in vars(module).items():
        if not callable(obj):
            continue
        root = _root_original(obj)
        if hasattr(root, _BUNDLE_ATTR) and getattr(root, "__module__", None) == module.__name__:
            fns.append(obj)
    return fns


def _spec_kwargs(spec_fn: Callable[..., Any], kwargs: dict[str, Any]) -> dict[str, Any]:
    params = inspect.signature(_root_original(spec_fn)).parameters
    if any(p.kind is p.VAR_KEYWORD for p in params.values()):
        return kwargs
    return {k: v for k, v in kwargs.items() if k in params}


def check_module(
    module_name: str,
    *,
    max_list_size: int = 20,
    smoke_max_list_size: int = 5,
    max_examples: int | None = None,
    on_result: Callable[[ObligationResult], None] | None = None,
) -> list[ObligationResult]:
    """Evaluate every contract obligation of the decorated functions in a module.

    Per function, in order:

    - ``contracts_smoke``: find one input satisfying ``@requires`` and check
      ``@ensures`` on it.
    - ``pure_dynamic``: for ``@pure`` functions, see
      :func:`seqalgebra._purity.dynamic_purity_check`.
    - ``equiv_to_spec``: for ``@against`` functions, search with Hypothesis
      for an input where the function and its reference disagree or a
      postcondition fails. The shrunk counterexample goes in ``details``.

    ``max_examples`` overrides both the per-declaration setting and
    ``SEQALGEBRA_MAX_EXAMPLES``.
    """
    module = importlib.import_module(module_name)
    funcs = _collect_functions(module)

    results: list[ObligationResult] = []

    def _emit(result: ObligationResult) -> None:
        results.append(result)
        if on_result is not None:
            on_result(result)

    for fn in funcs:
        root = _root_original(fn)
        b = _get_bundle(root)
        qn = _qualified_name(root)
        overrides = b["against"]["strategies"] if b["against"] is not None else {}

        # 1) Smoke: satisfiable requires + ensures on one satisfying input
        t0 = time.monotonic()
        try:
            smoke_strat = _strategy_for_function(root, max_list_size=smoke_max_list_size, overrides=overrides)
            example_kwargs = _find_satisfying_kwargs(root, smoke_strat)
            r = root(**example_kwargs)
            ok_post, post_err = _check_ensures(root, (), example_kwargs, r)
            if not ok_post:
                _emit(ObligationResult(
                    qn, "ensures_holds_on_smoke", "fail",
                    {"example": _jsonable(example_kwargs), "result": _jsonable(r), "error": post_err},
                    duration_s=time.monotonic() - t0,
                ))
            else:
                _emit(ObligationResult(
                    qn, "contracts_smoke", "pass",
                    {
                        "example": _jsonable(example_kwargs),
                        "requires": len(b["requires"]),
                        "ensures": len(b["ensures"]),
                    },
                    duration_s=time.monotonic() - t0,
                ))
        except UnsupportedParameter as e:
            _emit(ObligationResult(qn, "contracts_smoke", "skip", {"reason": str(e)}))
            continue
        except NoSuchExample:
            _emit(ObligationResult(
                qn, "requires_satisfiable", "fail",
                {"error": "No satisfying input found"},
                duration_s=time.monotonic() - t0,
            ))
            continue
        except Exception as e:
            _emit(ObligationResult(
                qn, "contracts_smoke", "error",
                {"error": f"{type(e).__name__}: {e}"},
                duration_s=time.monotonic() - t0,
            ))
            continue

        # 2) Purity: same result twice, arguments untouched, no output
        if b["pure"] is not None:
            tp = time.monotonic()
            try:
                is_pure, pure_err = dynamic_purity_check(root, example_kwargs, eq=b["pure"]["eq"])
                if is_pure:
                    _emit(ObligationResult(
                        qn, "pure_dynamic", "pass",
                        {"example": _jsonable(example_kwargs)},
                        duration_s=time.monotonic() - tp,
                    ))
                else:
                    _emit(ObligationResult(
                        qn, "pure_dynamic", "fail",
                        {"example": _jsonable(example_kwargs), "error": pure_err},
                        duration_s=time.monotonic() - tp,
                    ))
            except Exception as e:
                _emit(ObligationResult(
                    qn, "pure_dynamic", "error",
                    {"error": f"{type(e).__name__}: {e}"},
                    duration_s=time.monotonic() - tp,
                ))

        # 3) Agreement with the reference
        if b["against"] is None:
            _emit(ObligationResult(qn, "equiv_to_spec", "skip", {"reason": "no @against(spec) attached"}))
            continue

        t1 = time.monotonic()
        spec_fn = b["against"]["spec"]
        eq = b["against"]["eq"] or equals
        n_examples = max_examples or b["against"]["max_examples"] or default_max_examples()
        strat_kwargs = _strategy_for_function(root, max_list_size=max_list_size, overrides=overrides)

        # Mutable container to capture the shrunk counterexample from Hypothesis
        shrunk_ce: list[dict[str, Any] | None] = [None]

        @settings(
            max_examples=n_examples,
            deadline=b["against"]["deadline_ms"],
            suppress_health_check=list(b["against"]["suppress_health_checks"]),
            database=None,
        )
        @given(strat_kwargs)
        def prop(kwargs: dict[str, Any]) -> None:
            ok_pre, _ = _check_requires(root, (), kwargs)
            assume(ok_pre)

            impl_r = root(**kwargs)
            ok_post, post_err = _check_ensures(root, (), kwargs, impl_r)
            if not ok_post:
                shrunk_ce[0] = {
                    "kwargs": _jsonable(kwargs),
                    "impl_result": _jsonable(impl_r),
                    "spec_result": None,
                    "note": f"ensures failed: {post_err}",
                }
                raise AssertionError(f"ensures failed: {post_err}")

            spec_r = spec_fn(**_spec_kwargs(spec_fn, kwargs))
            if not eq(impl_r, spec_r):
                shrunk_ce[0] = {
                    "kwargs": _jsonable(kwargs),
                    "impl_result": _jsonable(impl_r),
                    "spec_result": _jsonable(spec_r),
                }
                raise AssertionError("impl != spec")

        spec_name = _qualified_name(_root_original(spec_fn))
        try:
            prop()
            _emit(ObligationResult(
                qn, "equiv_to_spec", "pass",
                {
                    "spec": spec_name,
                    "max_examples": n_examples,
                    "requires": len(b["requires"]),
                    "ensures": len(b["ensures"]),
                },
                duration_s=time.monotonic() - t1,
            ))
        except FailedHealthCheck as e:
            _emit(ObligationResult(
                qn, "equiv_to_spec", "fail",
                {"spec": spec_name, "error": f"FailedHealthCheck: {e}"},
                duration_s=time.monotonic() - t1,
            ))
        except AssertionError as e:
            _emit(ObligationResult(
                qn, "equiv_to_spec", "fail",
                {"spec": spec_name, "error": str(e), "counterexample": shrunk_ce[0]},
                duration_s=time.monotonic() - t1,
            ))
        except Exception as e:
            _emit(ObligationResult(
                qn, "equiv_to_spec", "error",
                {"spec": spec_name, "error": f"{type(e).__name__}: {e}"},
                duration_s=time.monotonic() - t1,
            ))

    return results
