"""
Shared pytest fixtures for the window-purpose test suite.

Usage in tests:
    def test_something(purpose_factory):
        frame, left, right = purpose_factory.side_by_side()
        assert purpose_factory.edges.left_window(frame) is left
"""

import pytest

from tests.factories import PurposeTestFactory


@pytest.fixture
def purpose_factory():
    """Empty environment: one *scratch* frame, default purpose 'edit', no tables."""
    return PurposeTestFactory()


@pytest.fixture
def scenario_factory(purpose_factory):
    """
    Environment with the reference configuration:
    - modes: python-mode -> coding
    - regexps: ^\\*scratch\\*$ -> scratch
    - default: edit
    """
    purpose_factory.configure(
        modes={"python-mode": "coding"},
        regexps={r"^\*scratch\*$": "scratch"},
        default="edit",
    )
    return purpose_factory


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point user config at a temp dir and clear PURPOSE_* overrides."""
    from purpose.config import ConfigManager

    user_dir = tmp_path / "home" / ".purpose"
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_DIR", user_dir)
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_FILE", user_dir / "config.yaml")
    for var in ("PURPOSE_DEFAULT", "PURPOSE_USE_DEFAULTS", "PURPOSE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return user_dir
