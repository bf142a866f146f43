"""Tests for terminal styling of the checker report."""

from __future__ import annotations

from seqalgebra import _term


class TestColor:
    def test_no_codes_when_disabled(self):
        _term.force_color(False)
        assert _term.style("x", 31) == "x"

    def test_codes_when_enabled(self):
        _term.force_color(True)
        assert _term.style("x", 31, 1) == "\033[31;1mx\033[0m"

    def test_no_color_env(self, monkeypatch):
        _term.force_color(None)
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        assert _term.supports_color() is False

    def test_force_color_env(self, monkeypatch):
        _term.force_color(None)
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert _term.supports_color() is True


class TestStatus:
    def test_padded_to_five_columns(self):
        _term.force_color(False)
        assert _term.status("pass") == " PASS"
        assert _term.status("error") == "ERROR"

    def test_unknown_status_uncoloured(self):
        _term.force_color(True)
        assert _term.status("odd") == "  ODD"
