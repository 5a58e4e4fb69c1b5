"""
Core — Purpose resolution and window queries

Contains:
- Purposes: interned purpose symbols
- Modes: major-mode derivation table
- Dummy: placeholder buffer name codec
- Host: the editor interface (buffers, windows, neighbours)
- Layout: split trees and the in-memory host
- Classifier: buffer/window purpose resolution
- Registry: all known purposes
- Dedication: purpose-dedicated windows
- Edges: top/bottom/left/right window queries
"""

from .purposes import Purpose, GENERAL, intern_purpose, purpose_names
from .modes import ModeTable, FUNDAMENTAL_MODE, DEFAULT_MODE_PARENTS
from .dummy import DUMMY_PREFIX, DUMMY_SUFFIX, encode, decode, is_dummy_name, create_dummy_buffer
from .host import Buffer, Window, Host, Direction
from .layout import Frame, Split, Orientation, Rect, MemoryHost, frame_from_dict
from .classifier import (
    PurposeClassifier, Classification, MatchRule,
    classify_buffer, explain_buffer,
)
from .registry import PurposeRegistry, collect_purposes
from .dedication import DedicationStore, DEDICATED_PARAMETER
from .edges import EdgeLocator

__all__ = [
    # Purposes
    "Purpose", "GENERAL", "intern_purpose", "purpose_names",
    # Modes
    "ModeTable", "FUNDAMENTAL_MODE", "DEFAULT_MODE_PARENTS",
    # Dummy buffers
    "DUMMY_PREFIX", "DUMMY_SUFFIX", "encode", "decode", "is_dummy_name", "create_dummy_buffer",
    # Host
    "Buffer", "Window", "Host", "Direction",
    # Layout
    "Frame", "Split", "Orientation", "Rect", "MemoryHost", "frame_from_dict",
    # Classifier
    "PurposeClassifier", "Classification", "MatchRule", "classify_buffer", "explain_buffer",
    # Registry
    "PurposeRegistry", "collect_purposes",
    # Dedication
    "DedicationStore", "DEDICATED_PARAMETER",
    # Edges
    "EdgeLocator",
]
