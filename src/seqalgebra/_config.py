"""Process-wide settings, read lazily from the environment.

``SEQALGEBRA_CHECK_CONTRACTS``
    Truthy (``1``, ``true``, ``yes``, ``on``) turns on runtime checking of
    ``@requires`` / ``@ensures`` predicates. Off by default, so operations on
    sorted input stay unchecked.

``SEQALGEBRA_MAX_EXAMPLES``
    Default number of Hypothesis examples per ``@against`` obligation.
"""

from __future__ import annotations

import os

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSY: frozenset[str] = frozenset({"", "0", "false", "no", "off"})

_DEFAULT_MAX_EXAMPLES = 200

_CHECK_CONTRACTS: bool | None = None
_MAX_EXAMPLES: int | None = None


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Invalid value for {name}: {raw!r}. Expected one of 1/0, true/false, yes/no, on/off.")


def contracts_enabled() -> bool:
    global _CHECK_CONTRACTS
    if _CHECK_CONTRACTS is None:
        _CHECK_CONTRACTS = _parse_flag(
            "SEQALGEBRA_CHECK_CONTRACTS", os.environ.get("SEQALGEBRA_CHECK_CONTRACTS", "")
        )
    return _CHECK_CONTRACTS


def force_contracts(enabled: bool | None) -> None:
    """Override the environment; ``None`` re-reads it on next access."""
    global _CHECK_CONTRACTS
    _CHECK_CONTRACTS = enabled


def default_max_examples() -> int:
    global _MAX_EXAMPLES
    if _MAX_EXAMPLES is None:
        raw = os.environ.get("SEQALGEBRA_MAX_EXAMPLES", "").strip()
        if not raw:
            _MAX_EXAMPLES = _DEFAULT_MAX_EXAMPLES
        else:
            try:
                value = int(raw)
            except ValueError:
                raise ValueError(f"Invalid value for SEQALGEBRA_MAX_EXAMPLES: {raw!r}. Expected an integer.") from None
            if value < 1:
                raise ValueError(f"SEQALGEBRA_MAX_EXAMPLES must be positive, got {value}")
            _MAX_EXAMPLES = value
    return _MAX_EXAMPLES


def reset() -> None:
    global _CHECK_CONTRACTS, _MAX_EXAMPLES
    _CHECK_CONTRACTS = None
    _MAX_EXAMPLES = None
