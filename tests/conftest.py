"""Shared fixtures for seqalgebra tests."""

from __future__ import annotations

import os
import sys

import pytest

from seqalgebra import _config, _term


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Each test starts from a clean, environment-derived configuration."""
    monkeypatch.delenv("SEQALGEBRA_CHECK_CONTRACTS", raising=False)
    monkeypatch.delenv("SEQALGEBRA_MAX_EXAMPLES", raising=False)
    _config.reset()
    _term.force_color(False)
    yield
    _config.reset()
    _term.force_color(None)


@pytest.fixture
def contracts_on():
    """Enforce @requires / @ensures at call time for the duration of a test."""
    _config.force_contracts(True)
    yield
    _config.force_contracts(None)


@pytest.fixture(autouse=True)
def _add_examples_to_path():
    """Ensure examples/ is importable."""
    examples_dir = os.path.join(os.path.dirname(__file__), "..", "examples")
    examples_dir = os.path.abspath(examples_dir)
    if examples_dir not in sys.path:
        sys.path.insert(0, examples_dir)
    yield
    if examples_dir in sys.path:
        sys.path.remove(examples_dir)
