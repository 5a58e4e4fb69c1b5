"""
Purposes — Interned purpose symbols

A purpose names a category of buffer use (edit, terminal, search...).
Purposes are interned: asking for the same name twice returns the
same object, so purposes compare by identity like symbols do.
"""

from typing import Dict, Iterable, List, Union


class Purpose:
    """
    An interned purpose symbol.

    Use Purpose("edit") or intern_purpose("edit"); both return the
    single Purpose object registered under that name.
    """

    __slots__ = ("name",)

    _table: Dict[str, "Purpose"] = {}

    def __new__(cls, name: str) -> "Purpose":
        if isinstance(name, Purpose):
            return name
        if not isinstance(name, str) or not name:
            raise ValueError(f"Purpose name must be a non-empty string, got {name!r}")
        existing = cls._table.get(name)
        if existing is not None:
            return existing
        instance = super().__new__(cls)
        instance.name = name
        cls._table[name] = instance
        return instance

    def __reduce__(self):
        # Unpickling goes through __new__ so identity is preserved
        return (Purpose, (self.name,))

    def __copy__(self) -> "Purpose":
        return self

    def __deepcopy__(self, memo) -> "Purpose":
        return self

    def __repr__(self) -> str:
        return f"Purpose({self.name!r})"

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: "Purpose") -> bool:
        if not isinstance(other, Purpose):
            return NotImplemented
        return self.name < other.name


PurposeLike = Union[Purpose, str]


def intern_purpose(value: PurposeLike) -> Purpose:
    """Return the interned Purpose for a name (or the purpose itself)."""
    return Purpose(value)


def purpose_names(purposes: Iterable[Purpose]) -> List[str]:
    """Sorted names, for display."""
    return sorted(p.name for p in purposes)


# Built-in default purpose when configuration does not set one
GENERAL = Purpose("general")
