"""
Tests for Registry — All known purposes
"""

from purpose.config import Config, PurposeConfig, PurposesConfig
from purpose.core.purposes import Purpose
from purpose.core.registry import collect_purposes


class TestCollect:
    """Default plus every table value."""

    def test_includes_default_and_values(self):
        config = PurposeConfig.build(
            modes={"python-mode": "coding"},
            names={"*shell*": "terminal"},
            regexps={r"^\*scratch\*$": "scratch"},
            default="edit",
        )
        assert collect_purposes(config) == {
            Purpose("edit"), Purpose("coding"), Purpose("terminal"), Purpose("scratch"),
        }

    def test_empty_tables_give_default_only(self):
        assert collect_purposes(PurposeConfig.build(default="edit")) == {Purpose("edit")}

    def test_builtin_tables_listed(self):
        """With built-ins on, their purposes appear too."""
        config = Config(purposes=PurposesConfig(default="general")).to_purpose_config()
        purposes = collect_purposes(config)
        assert Purpose("terminal") in purposes
        assert Purpose("minibuf") in purposes
        assert Purpose("general") in purposes


class TestRegistry:
    """Cached view over the config store."""

    def test_no_duplicates(self, purpose_factory):
        purpose_factory.configure(modes={"a-mode": "x", "b-mode": "x"}, names={"n": "x"}, default="x")
        assert purpose_factory.registry.names() == ["x"]

    def test_names_sorted(self, scenario_factory):
        assert scenario_factory.registry.names() == ["coding", "edit", "scratch"]

    def test_contains(self, scenario_factory):
        assert Purpose("coding") in scenario_factory.registry
        assert "scratch" in scenario_factory.registry
        assert "nothing" not in scenario_factory.registry

    def test_contains_string_does_not_intern(self, scenario_factory):
        """Asking about a name leaves the purpose table untouched."""
        name = "never-declared-anywhere"
        assert name not in scenario_factory.registry
        assert name not in Purpose._table

    def test_cache_follows_replacement(self, purpose_factory):
        first = purpose_factory.registry.all_purposes()
        assert purpose_factory.registry.all_purposes() is first
        purpose_factory.configure(names={"*shell*": "terminal"})
        assert Purpose("terminal") in purpose_factory.registry.all_purposes()
