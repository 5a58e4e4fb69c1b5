"""
Test Data Factory — In-memory editor environments for purpose tests

Builds a MemoryHost with buffers and window layouts, a ConfigStore
with chosen tables, and the purpose services bound to them. No real
editor needed.

Usage:
    def test_something(purpose_factory):
        purpose_factory.configure(modes={"python-mode": "coding"})
        buffer = purpose_factory.add_buffer("main.py", "python-mode")
        assert purpose_factory.classifier.classify(buffer).name == "coding"
"""

from typing import Any, Dict, Optional, Tuple

from purpose.config import ConfigStore, PurposeConfig
from purpose.core.classifier import PurposeClassifier
from purpose.core.dedication import DedicationStore
from purpose.core.edges import EdgeLocator
from purpose.core.host import Buffer, Window
from purpose.core.layout import Frame, MemoryHost, Orientation, Split
from purpose.core.registry import PurposeRegistry


class PurposeTestFactory:
    """
    Factory for isolated purpose environments.

    Every factory owns its host and config store; services read the
    store, so `configure()` can be called at any point in a test.
    """

    def __init__(self, width: int = 80, height: int = 24):
        self.host = MemoryHost(width=width, height=height)
        self.store = ConfigStore(PurposeConfig.build(default="edit"))
        self.classifier = PurposeClassifier(self.host, self.store)
        self.registry = PurposeRegistry(self.store)
        self.dedication = DedicationStore(self.host)
        self.edges = EdgeLocator(self.host)

    # -------------------------------------------------------------------------
    # Configuration and buffers
    # -------------------------------------------------------------------------

    def configure(self, modes: Optional[Dict[str, Any]] = None,
                  names: Optional[Dict[str, Any]] = None,
                  regexps: Optional[Dict[str, Any]] = None,
                  default: str = "edit") -> PurposeConfig:
        config = PurposeConfig.build(modes=modes, names=names, regexps=regexps, default=default)
        self.store.replace(config)
        return config

    def add_buffer(self, name: str, mode: str = "fundamental-mode") -> Buffer:
        buffer = self.host.get_buffer_create(name, mode=mode)
        buffer.mode = mode
        return buffer

    # -------------------------------------------------------------------------
    # Layouts (each creates and selects a new frame)
    # -------------------------------------------------------------------------

    def window(self, buffer_name: str, mode: str = "fundamental-mode",
               name: Optional[str] = None) -> Window:
        return Window(self.add_buffer(buffer_name, mode), name=name)

    def single(self, buffer_name: str = "main.py", mode: str = "python-mode") -> Tuple[Frame, Window]:
        """One window filling the frame."""
        window = self.window(buffer_name, mode, name="only")
        return self.host.create_frame(window), window

    def side_by_side(self) -> Tuple[Frame, Window, Window]:
        """L | R"""
        left = self.window("left.py", "python-mode", name="L")
        right = self.window("*shell*", "shell-mode", name="R")
        frame = self.host.create_frame(Split(Orientation.HORIZONTAL, [left, right]))
        return frame, left, right

    def stacked(self) -> Tuple[Frame, Window, Window]:
        """T over B"""
        top = self.window("top.py", "python-mode", name="T")
        bottom = self.window("*compilation*", "compilation-mode", name="B")
        frame = self.host.create_frame(Split(Orientation.VERTICAL, [top, bottom]))
        return frame, top, bottom

    def ide(self) -> Dict[str, Window]:
        """
        Full-width top bar, editor and sidebar in the middle, full-width
        bottom panel:

            +-------------+
            |    bar      |
            +------+------+
            | side | edit |
            +------+------+
            |    panel    |
            +-------------+
        """
        windows = {
            "bar": self.window("*tabs*", name="bar"),
            "side": self.window("*dired*", "dired-mode", name="side"),
            "edit": self.window("main.py", "python-mode", name="edit"),
            "panel": self.window("*shell*", "shell-mode", name="panel"),
        }
        middle = Split(Orientation.HORIZONTAL, [windows["side"], windows["edit"]], [1, 3])
        root = Split(Orientation.VERTICAL, [windows["bar"], middle, windows["panel"]], [1, 4, 1])
        self.host.create_frame(root, width=120, height=36)
        return windows
