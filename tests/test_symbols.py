"""
Tests for Symbols — Visual vocabulary and table rendering

Tests Unicode/ASCII detection and bordered tables.
"""

import os
from dataclasses import fields
from unittest.mock import patch

from purpose.presentation.symbols import (
    ASCII, UNICODE, TableRenderer, get_symbols, safe_print, supports_unicode,
)


class TestSymbolSets:
    """Both sets define every symbol."""

    def test_all_symbols_non_empty(self):
        for field in fields(UNICODE):
            assert getattr(UNICODE, field.name), field.name
            assert getattr(ASCII, field.name), field.name

    def test_ascii_is_printable(self):
        for field in fields(ASCII):
            value = getattr(ASCII, field.name)
            assert all(32 <= ord(c) < 127 for c in value), field.name


class TestDetection:
    """supports_unicode and get_symbols."""

    def test_ascii_only_env(self):
        with patch.dict(os.environ, {"PURPOSE_ASCII_ONLY": "1"}):
            assert supports_unicode() is False

    def test_unicode_env(self):
        with patch.dict(os.environ, {"PURPOSE_UNICODE": "true"}, clear=False):
            os.environ.pop("PURPOSE_ASCII_ONLY", None)
            assert supports_unicode() is True

    def test_explicit_preference(self):
        assert get_symbols("unicode") is UNICODE
        assert get_symbols("ascii") is ASCII

    def test_auto_follows_env(self):
        with patch.dict(os.environ, {"PURPOSE_ASCII_ONLY": "yes"}):
            assert get_symbols("auto") is ASCII
            assert get_symbols() is ASCII


class TestSafePrint:

    def test_prints(self, capsys):
        safe_print("main.py → edit")
        assert "main.py" in capsys.readouterr().out


class TestTableRenderer:
    """Bordered tables."""

    def test_empty(self):
        assert TableRenderer(ASCII, width=80).render(["A"], []) == "Nothing to display."

    def test_columns_fit_widest_cell(self):
        text = TableRenderer(ASCII, width=80).render(["WINDOW", "PURPOSE"], [["editor", "edit"], ["w", "terminal"]])
        lines = text.split("\n")
        assert lines[0] == "+------+--------+"
        assert lines[1] == "|WINDOW|PURPOSE |"
        assert lines[3] == "|editor|edit    |"
        assert len(lines) == 6

    def test_last_column_shrinks(self):
        text = TableRenderer(ASCII, width=20).render(["NAME", "BUFFER"], [["a", "x" * 40]])
        assert all(len(line) <= 20 for line in text.split("\n"))
        assert "..." in text
