"""
window-purpose — Purpose-aware buffers and windows

Every buffer gets a purpose (edit, terminal, search...). Windows take
the purpose of the buffer they show, can be dedicated to it, and can
be found by their position at the edges of a frame.

Usage:
    purpose classify main.py --mode python-mode
    purpose purposes
    purpose layout workspace.yaml
    purpose config --set purposes.default=edit

Library:
    host = MemoryHost()
    store = ConfigStore(PurposeConfig.build(modes={"python-mode": "coding"}))
    classifier = PurposeClassifier(host, store)
    classifier.window_purpose()
"""

__version__ = "0.1.0"

from .errors import PurposeError, NotFoundError, ConfigError, LayoutError

# Core layer
from .core.purposes import Purpose, GENERAL, intern_purpose
from .core.modes import ModeTable
from .core.dummy import encode, decode, create_dummy_buffer
from .core.host import Host, Buffer, Window, Direction
from .core.layout import Frame, Split, Orientation, MemoryHost, frame_from_dict
from .core.classifier import PurposeClassifier, Classification, MatchRule, classify_buffer, explain_buffer
from .core.registry import PurposeRegistry
from .core.dedication import DedicationStore
from .core.edges import EdgeLocator

# Config
from .config import Config, ConfigManager, ConfigStore, PurposeConfig, get_config

from .logging_config import setup_logging

__all__ = [
    # Errors
    'PurposeError', 'NotFoundError', 'ConfigError', 'LayoutError',
    # Core
    'Purpose', 'GENERAL', 'intern_purpose',
    'ModeTable',
    'encode', 'decode', 'create_dummy_buffer',
    'Host', 'Buffer', 'Window', 'Direction',
    'Frame', 'Split', 'Orientation', 'MemoryHost', 'frame_from_dict',
    'PurposeClassifier', 'Classification', 'MatchRule', 'classify_buffer', 'explain_buffer',
    'PurposeRegistry', 'DedicationStore', 'EdgeLocator',
    # Config
    'Config', 'ConfigManager', 'ConfigStore', 'PurposeConfig', 'get_config',
    'setup_logging',
]
