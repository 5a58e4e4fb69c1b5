"""
Modes — Major-mode derivation

Buffers carry a major-mode tag. Modes derive from parent modes
(python-mode -> prog-mode -> fundamental-mode), and purpose lookup
by mode must honour that: a buffer in python-mode matches a table
key of prog-mode.

ModeTable holds the child -> parent links. The host owns one and
hands it to the classifier.
"""

from typing import Dict, Iterator, List, Mapping, Optional

FUNDAMENTAL_MODE = "fundamental-mode"


# Common derivations, child -> parent
DEFAULT_MODE_PARENTS: Dict[str, str] = {
    # Programming
    "prog-mode": FUNDAMENTAL_MODE,
    "python-mode": "prog-mode",
    "emacs-lisp-mode": "lisp-data-mode",
    "lisp-data-mode": "prog-mode",
    "c-mode": "prog-mode",
    "c++-mode": "prog-mode",
    "java-mode": "prog-mode",
    "js-mode": "prog-mode",
    "sh-mode": "prog-mode",
    "ruby-mode": "prog-mode",
    "go-mode": "prog-mode",
    "rust-mode": "prog-mode",
    "css-mode": "prog-mode",
    "lisp-interaction-mode": "emacs-lisp-mode",
    # Text
    "text-mode": FUNDAMENTAL_MODE,
    "markdown-mode": "text-mode",
    "org-mode": "outline-mode",
    "outline-mode": "text-mode",
    "rst-mode": "text-mode",
    "html-mode": "sgml-mode",
    "sgml-mode": "text-mode",
    # Special buffers
    "special-mode": FUNDAMENTAL_MODE,
    "help-mode": "special-mode",
    "messages-buffer-mode": "special-mode",
    "package-menu-mode": "tabulated-list-mode",
    "tabulated-list-mode": "special-mode",
    "Buffer-menu-mode": "tabulated-list-mode",
    "ibuffer-mode": "special-mode",
    "dired-mode": FUNDAMENTAL_MODE,
    "image-mode": FUNDAMENTAL_MODE,
    "minibuffer-inactive-mode": FUNDAMENTAL_MODE,
    # Processes and search
    "comint-mode": FUNDAMENTAL_MODE,
    "shell-mode": "comint-mode",
    "inferior-python-mode": "comint-mode",
    "eshell-mode": FUNDAMENTAL_MODE,
    "term-mode": FUNDAMENTAL_MODE,
    "compilation-mode": "special-mode",
    "grep-mode": "compilation-mode",
    "occur-mode": "special-mode",
}


class ModeTable:
    """
    Registry of major-mode derivations.

    Lookups are cycle-safe: a malformed table that loops back on itself
    stops the walk instead of spinning forever.
    """

    def __init__(self, parents: Optional[Mapping[str, str]] = None):
        self._parents: Dict[str, str] = dict(parents or {})

    @classmethod
    def with_defaults(cls, extra: Optional[Mapping[str, str]] = None) -> "ModeTable":
        """Table seeded with DEFAULT_MODE_PARENTS, then `extra` on top."""
        table = cls(DEFAULT_MODE_PARENTS)
        for child, parent in (extra or {}).items():
            table.define(child, parent)
        return table

    def define(self, mode: str, parent: Optional[str]) -> None:
        """Declare (or clear, with parent=None) the parent of a mode."""
        if parent is None:
            self._parents.pop(mode, None)
        elif parent == mode:
            raise ValueError(f"Mode {mode} cannot derive from itself")
        else:
            self._parents[mode] = parent

    def parent(self, mode: str) -> Optional[str]:
        return self._parents.get(mode)

    def ancestry(self, mode: str) -> Iterator[str]:
        """Yield the mode itself, then each ancestor up to the root."""
        seen = set()
        current: Optional[str] = mode
        while current is not None and current not in seen:
            seen.add(current)
            yield current
            current = self._parents.get(current)

    def lineage(self, mode: str) -> List[str]:
        return list(self.ancestry(mode))

    def derived_p(self, mode: str, ancestor: str) -> bool:
        """True if mode is ancestor or inherits from it, transitively."""
        return any(m == ancestor for m in self.ancestry(mode))

    def __contains__(self, mode: str) -> bool:
        return mode in self._parents

    def __len__(self) -> int:
        return len(self._parents)
