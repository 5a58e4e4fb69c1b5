"""
Tests for Modes — Major-mode derivation
"""

import pytest

from purpose.core.modes import DEFAULT_MODE_PARENTS, FUNDAMENTAL_MODE, ModeTable


class TestDerivation:
    """derived_p follows parents transitively."""

    def test_mode_derives_from_itself(self):
        table = ModeTable()
        assert table.derived_p("python-mode", "python-mode")

    def test_direct_parent(self):
        table = ModeTable({"python-mode": "prog-mode"})
        assert table.derived_p("python-mode", "prog-mode")

    def test_transitive_parent(self):
        table = ModeTable.with_defaults()
        assert table.derived_p("python-mode", FUNDAMENTAL_MODE)
        assert table.derived_p("grep-mode", "special-mode")

    def test_unrelated_modes(self):
        table = ModeTable.with_defaults()
        assert not table.derived_p("python-mode", "text-mode")

    def test_parent_does_not_derive_from_child(self):
        table = ModeTable.with_defaults()
        assert not table.derived_p("prog-mode", "python-mode")

    def test_unknown_mode_only_matches_itself(self):
        table = ModeTable.with_defaults()
        assert table.lineage("brand-new-mode") == ["brand-new-mode"]


class TestDefine:
    """Declaring and clearing parents."""

    def test_with_defaults_adds_extra(self):
        table = ModeTable.with_defaults({"my-mode": "python-mode"})
        assert table.lineage("my-mode")[:3] == ["my-mode", "python-mode", "prog-mode"]

    def test_extra_overrides_default(self):
        table = ModeTable.with_defaults({"python-mode": "text-mode"})
        assert table.parent("python-mode") == "text-mode"

    def test_clear_parent(self):
        table = ModeTable({"a-mode": "b-mode"})
        table.define("a-mode", None)
        assert table.parent("a-mode") is None
        assert "a-mode" not in table

    def test_self_parent_rejected(self):
        with pytest.raises(ValueError):
            ModeTable().define("a-mode", "a-mode")

    def test_cycle_terminates(self):
        """A looping table stops instead of spinning."""
        table = ModeTable({"a-mode": "b-mode", "b-mode": "a-mode"})
        assert table.lineage("a-mode") == ["a-mode", "b-mode"]
        assert not table.derived_p("a-mode", "c-mode")

    def test_defaults_rooted_at_fundamental(self):
        """Every built-in mode ends at fundamental-mode."""
        table = ModeTable.with_defaults()
        for mode in DEFAULT_MODE_PARENTS:
            assert table.lineage(mode)[-1] == FUNDAMENTAL_MODE, mode
