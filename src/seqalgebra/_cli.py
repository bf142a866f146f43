from __future__ import annotations

import argparse
import json
import sys
import time

from seqalgebra._config import force_contracts
from seqalgebra._engine import ObligationResult, check_module
from seqalgebra._term import bold, dim, force_color, status, style

DEFAULT_MODULES = ("seqalgebra.unordered", "seqalgebra.presorted")


def _print_result_line(r: ObligationResult, *, verbose: bool = False) -> None:
    timing = "  " + dim(f"({r.duration_s:.1f}s)") if r.duration_s >= 0.05 else ""
    print(f"  {status(r.status)}  {r.obligation:<22}  {bold(r.function)}{timing}")

    if not verbose or r.status not in ("fail", "error"):
        return

    ce = r.details.get("counterexample")
    if ce and isinstance(ce, dict):
        for key, label in (("kwargs", "kwargs"), ("impl_result", "impl"), ("spec_result", "spec")):
            if key in ce:
                print(f"         {label + ':':<8}{json.dumps(ce[key], default=str)}")
        if "note" in ce:
            print(f"         note:   {ce['note']}")
    elif "example" in r.details:
        print(f"         example: {json.dumps(r.details['example'], default=str)}")
    if "error" in r.details:
        print(f"         error:  {r.details['error']}")


def _print_summary(results: list[ObligationResult], total_s: float) -> None:
    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status in ("fail", "error"))
    skipped = sum(1 for r in results if r.status == "skip")

    parts: list[str] = []
    if passed:
        parts.append(style(f"{passed} passed", 32))
    if failed:
        parts.append(style(f"{failed} failed", 31))
    if skipped:
        parts.append(dim(f"{skipped} skipped"))

    summary = ", ".join(parts) if parts else "no obligations"
    print(f"\n{summary}  {dim(f'({total_s:.1f}s total)')}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="seqalgebra-check",
        description="Check the contracts declared on sequence set-operations.",
    )
    p.add_argument(
        "modules",
        nargs="*",
        default=list(DEFAULT_MODULES),
        help="Modules to check (default: %(default)s)",
    )
    p.add_argument("--max-examples", type=int, default=None, help="Hypothesis examples per reference comparison")
    p.add_argument("--max-list-size", type=int, default=20, help="Max size for generated sequences")
    p.add_argument("--smoke-max-list-size", type=int, default=5, help="Max size for smoke-test generation")
    p.add_argument("--contracts", action="store_true", help="Also enforce contracts inside nested calls")
    p.add_argument("-v", "--verbose", action="store_true", help="Show counterexample details")
    p.add_argument("-q", "--quiet", action="store_true", help="Only print summary and exit code")
    p.add_argument("--json", action="store_true", help="Output results as JSON array to stdout")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)
    if args.contracts:
        force_contracts(True)

    json_mode = args.json

    def on_result(r: ObligationResult) -> None:
        if not json_mode and not args.quiet:
            _print_result_line(r, verbose=args.verbose)

    results: list[ObligationResult] = []
    t_start = time.monotonic()
    try:
        for module_name in args.modules:
            try:
                results.extend(check_module(
                    module_name,
                    max_list_size=args.max_list_size,
                    smoke_max_list_size=args.smoke_max_list_size,
                    max_examples=args.max_examples,
                    on_result=on_result,
                ))
            except ImportError as e:
                print(f"error: could not import module '{module_name}': {e}", file=sys.stderr)
                return 1
    finally:
        if args.contracts:
            force_contracts(None)
    total_s = time.monotonic() - t_start

    if not results:
        if json_mode:
            print("[]")
        else:
            print(f"warning: no decorated functions found in {', '.join(args.modules)}", file=sys.stderr)
        return 0

    if json_mode:
        print(json.dumps([r.to_json() for r in results], indent=2, default=str))
    else:
        _print_summary(results, total_s)

    return 1 if any(r.status in ("fail", "error") for r in results) else 0
