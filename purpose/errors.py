"""
Errors — Exception types raised by window-purpose

Only two things can actually fail:
- Resolving or classifying a buffer that does not exist
- Loading malformed configuration or layout descriptions

Everything else is total: no match means the default purpose,
no edge window means None.
"""

from typing import List, Optional


class PurposeError(Exception):
    """Base class for window-purpose errors."""


class NotFoundError(PurposeError, LookupError):
    """
    Raised when a buffer is requested that the host does not know.

    Carries the requested name and, when available, close matches
    so the caller can offer "did you mean" hints.
    """

    def __init__(self, name: str, suggestions: Optional[List[str]] = None):
        self.name = name
        self.suggestions = list(suggestions or [])
        self.message = self._build_message()
        super().__init__(self.message)

    def _build_message(self) -> str:
        message = f"No such buffer: {self.name}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        return message


class ConfigError(PurposeError, ValueError):
    """Raised when purpose tables cannot be compiled (e.g. bad regexp)."""


class LayoutError(PurposeError, ValueError):
    """Raised when a layout description cannot be turned into a frame."""
