"""Tests for the check_module engine and ObligationResult."""

from __future__ import annotations

import types

import pytest

from seqalgebra._bundle import _bundle
from seqalgebra._engine import ObligationResult, _collect_functions, _spec_kwargs, check_module


def _by_function(results, name):
    return {r.obligation: r for r in results if r.function.endswith(f".{name}")}


@pytest.fixture(scope="module")
def example_results():
    import os
    import sys

    examples_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "examples"))
    sys.path.insert(0, examples_dir)
    try:
        return check_module("example_sets", max_examples=150)
    finally:
        sys.path.remove(examples_dir)


# ---------------------------------------------------------------------------
# ObligationResult
# ---------------------------------------------------------------------------

class TestObligationResult:
    def test_to_json(self):
        r = ObligationResult("my_fn", "smoke", "pass", {"key": "val"}, duration_s=1.2345)
        j = r.to_json()
        assert j["function"] == "my_fn"
        assert j["obligation"] == "smoke"
        assert j["status"] == "pass"
        assert j["details"] == {"key": "val"}
        assert j["duration_s"] == 1.234  # rounded to 3 decimals

    def test_default_duration(self):
        r = ObligationResult("f", "o", "pass", {})
        assert r.duration_s == 0.0


# ---------------------------------------------------------------------------
# _collect_functions / _spec_kwargs
# ---------------------------------------------------------------------------

class TestCollectFunctions:
    def test_finds_decorated_functions(self):
        mod = types.ModuleType("dummy_mod")

        def f(x: int) -> int:
            return x
        f.__module__ = "dummy_mod"
        _bundle(f)
        mod.f = f
        mod.not_decorated = lambda x: x
        fns = _collect_functions(mod)
        assert fns == [f]

    def test_ignores_imported_functions(self):
        mod = types.ModuleType("dummy_mod")

        def f(x: int) -> int:
            return x
        f.__module__ = "somewhere_else"
        _bundle(f)
        mod.f = f
        assert _collect_functions(mod) == []

    def test_ignores_non_callables(self):
        mod = types.ModuleType("dummy_mod")
        mod.x = 42
        mod.y = "hello"
        assert _collect_functions(mod) == []


class TestSpecKwargs:
    def test_drops_unknown_parameters(self):
        def ref(a, b):
            return a

        assert _spec_kwargs(ref, {"a": 1, "b": 2, "ord": 3}) == {"a": 1, "b": 2}

    def test_keeps_everything_for_var_keyword(self):
        def ref(a, **rest):
            return a

        assert _spec_kwargs(ref, {"a": 1, "ord": 3}) == {"a": 1, "ord": 3}


# ---------------------------------------------------------------------------
# check_module (integration)
# ---------------------------------------------------------------------------

class TestCheckModule:
    def test_correct_function_passes(self, example_results):
        obligations = _by_function(example_results, "unique_ok")
        assert obligations["contracts_smoke"].status == "pass"
        assert obligations["pure_dynamic"].status == "pass"
        assert obligations["equiv_to_spec"].status == "pass"

    def test_order_bug_found(self, example_results):
        r = _by_function(example_results, "unique_unstable")["equiv_to_spec"]
        assert r.status == "fail"
        ce = r.details["counterexample"]
        assert "kwargs" in ce
        assert ce["impl_result"] != ce["spec_result"]

    def test_duplicate_leak_found(self, example_results):
        r = _by_function(example_results, "intersect_leaky")["equiv_to_spec"]
        assert r.status == "fail"

    def test_run_bug_found_with_sorted_strategies(self, example_results):
        r = _by_function(example_results, "merge_uniq")["equiv_to_spec"]
        assert r.status == "fail"
        a = r.details["counterexample"]["kwargs"]["a"]
        assert a == sorted(a)

    def test_mutation_reported_as_impure(self, example_results):
        r = _by_function(example_results, "append_sentinel")["pure_dynamic"]
        assert r.status == "fail"
        assert "mutated" in r.details["error"]

    def test_unsatisfiable_requires(self, example_results):
        obligations = _by_function(example_results, "insist_empty")
        assert obligations["requires_satisfiable"].status == "fail"
        assert "equiv_to_spec" not in obligations

    def test_spec_functions_smoke_only(self, example_results):
        obligations = _by_function(example_results, "unique_spec")
        assert obligations["contracts_smoke"].status == "pass"
        assert obligations["equiv_to_spec"].status == "skip"

    def test_imported_functions_not_checked(self, example_results):
        assert not any(r.function.endswith(".uniq_reference") for r in example_results)

    def test_on_result_callback(self):
        collected = []
        results = check_module("example_sets", max_examples=20, on_result=collected.append)
        assert collected == results

    def test_unknown_module(self):
        with pytest.raises(ImportError):
            check_module("nonexistent_module_xyz123")
