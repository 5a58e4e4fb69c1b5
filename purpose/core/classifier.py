"""
Classifier — Buffer and window purpose resolution

Resolution order (first match wins, no fallthrough):
1. Dummy buffer name (*pu-dummy-PURPOSE*) -> embedded purpose
2. Major mode, tested against each mode-table key with derivation
3. Exact buffer name
4. Name patterns (searched, not anchored unless the pattern says so)
5. Default purpose

Steps 2 and 4 can match several keys at once. The first key in the
table's insertion order wins.

explain_buffer() is the pure core: a function of buffer data and
configuration only. PurposeClassifier binds it to a host and a
ConfigStore, and adds the window/buffer queries built on top.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from rapidfuzz import fuzz, process

from ..errors import NotFoundError
from . import dummy
from .host import Buffer, Host, Window
from .modes import ModeTable
from .purposes import Purpose, PurposeLike

if TYPE_CHECKING:
    from ..config import ConfigStore, PurposeConfig
    from .layout import Frame

logger = logging.getLogger(__name__)


class MatchRule(Enum):
    """Which step of the resolution order decided a purpose."""
    DUMMY = "dummy"
    MODE = "mode"
    NAME = "name"
    REGEXP = "regexp"
    DEFAULT = "default"


@dataclass(frozen=True)
class Classification:
    """A purpose plus the rule and table key that produced it."""
    purpose: Purpose
    rule: MatchRule
    key: Optional[str] = None

    def describe(self) -> str:
        if self.key is None:
            return self.rule.value
        return f"{self.rule.value} '{self.key}'"


def explain_buffer(name: str, mode: str, config: "PurposeConfig",
                   modes: ModeTable) -> Classification:
    """Classify buffer data against a configuration, reporting the deciding rule."""
    purpose = dummy.decode(name)
    if purpose is not None:
        return Classification(purpose, MatchRule.DUMMY)

    for key, purpose in config.mode_purposes.items():
        if modes.derived_p(mode, key):
            return Classification(purpose, MatchRule.MODE, key)

    purpose = config.name_purposes.get(name)
    if purpose is not None:
        return Classification(purpose, MatchRule.NAME, name)

    for pattern, purpose in config.regexp_purposes.items():
        if pattern.search(name):
            return Classification(purpose, MatchRule.REGEXP, pattern.pattern)

    return Classification(config.default_purpose, MatchRule.DEFAULT)


def classify_buffer(name: str, mode: str, config: "PurposeConfig", modes: ModeTable) -> Purpose:
    """Purpose of buffer data under a configuration."""
    return explain_buffer(name, mode, config, modes).purpose


class PurposeClassifier:
    """
    Purpose queries against a live host.

    Reads the configuration from a ConfigStore on every call, so a
    replaced configuration takes effect immediately.
    """

    def __init__(self, host: Host, store: "ConfigStore"):
        self.host = host
        self.store = store

    @property
    def config(self) -> "PurposeConfig":
        return self.store.current

    # -------------------------------------------------------------------------
    # Buffers
    # -------------------------------------------------------------------------

    def resolve_buffer(self, name: str) -> Buffer:
        """
        Turn a buffer name into a live buffer handle.

        Raises:
            NotFoundError: no live buffer has that name. Close names are
                attached as suggestions.
        """
        buffer = self.host.get_buffer(name)
        if buffer is None:
            raise NotFoundError(name, self._suggest(name))
        return buffer

    def _suggest(self, name: str, limit: int = 3) -> List[str]:
        names = [b.name for b in self.host.buffers()]
        matches = process.extract(name, names, scorer=fuzz.ratio, limit=limit, score_cutoff=60)
        return [match[0] for match in matches]

    def explain(self, buffer: Buffer) -> Classification:
        """Classification of a live buffer, with the deciding rule."""
        if not self.host.buffer_live_p(buffer):
            raise NotFoundError(buffer.name)
        result = explain_buffer(buffer.name, buffer.mode, self.config, self.host.modes)
        logger.debug("Buffer %s (%s) -> %s by %s",
                     buffer.name, buffer.mode, result.purpose, result.describe())
        return result

    def classify(self, buffer: Buffer) -> Purpose:
        """
        Purpose of a live buffer.

        Raises:
            NotFoundError: the buffer has been killed or never belonged
                to this host.
        """
        return self.explain(buffer).purpose

    def classify_name(self, name: str) -> Purpose:
        return self.classify(self.resolve_buffer(name))

    def buffers_with_purpose(self, purpose: PurposeLike) -> List[Buffer]:
        """Live buffers whose purpose is `purpose`, in host order."""
        purpose = Purpose(purpose)
        return [b for b in self.host.buffers() if self.classify(b) is purpose]

    def create_dummy_buffer(self, purpose: PurposeLike) -> Buffer:
        """Get or create the placeholder buffer standing for `purpose`."""
        return dummy.create_dummy_buffer(self.host, purpose)

    # -------------------------------------------------------------------------
    # Windows
    # -------------------------------------------------------------------------

    def window_purpose(self, window: Optional[Window] = None) -> Purpose:
        """Purpose of the buffer a window displays (selected window by default)."""
        window = window or self.host.selected_window()
        return self.classify(self.host.window_buffer(window))

    def windows_with_purpose(self, purpose: PurposeLike,
                             frame: Optional["Frame"] = None) -> List[Window]:
        """Non-minibuffer windows of a frame showing buffers with `purpose`."""
        purpose = Purpose(purpose)
        return [w for w in self.host.windows(frame)
                if not self.host.window_minibuffer_p(w) and self.window_purpose(w) is purpose]
