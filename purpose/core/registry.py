"""
Registry — Every purpose the configuration knows about

The default purpose plus every value of the mode, name and regexp
tables, deduplicated. The result is cached per configuration
generation, so it is recomputed only after ConfigStore.replace().
"""

from typing import TYPE_CHECKING, FrozenSet, List, Optional

from .purposes import Purpose

if TYPE_CHECKING:
    from ..config import ConfigStore, PurposeConfig


def collect_purposes(config: "PurposeConfig") -> FrozenSet[Purpose]:
    """Default purpose plus every table value."""
    purposes = {config.default_purpose}
    purposes.update(config.mode_purposes.values())
    purposes.update(config.name_purposes.values())
    purposes.update(config.regexp_purposes.values())
    return frozenset(purposes)


class PurposeRegistry:
    """Cached view of all known purposes."""

    def __init__(self, store: "ConfigStore"):
        self.store = store
        self._cache: Optional[FrozenSet[Purpose]] = None
        self._generation = -1

    def all_purposes(self) -> FrozenSet[Purpose]:
        if self._cache is None or self._generation != self.store.generation:
            self._cache = collect_purposes(self.store.current)
            self._generation = self.store.generation
        return self._cache

    def names(self) -> List[str]:
        """Sorted purpose names, for completion and listings."""
        return sorted(p.name for p in self.all_purposes())

    def __contains__(self, purpose: object) -> bool:
        if isinstance(purpose, str):
            return any(p.name == purpose for p in self.all_purposes())
        return purpose in self.all_purposes()
