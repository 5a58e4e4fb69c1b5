"""
CLI -- Command interface

Wires configuration, the in-memory host and the purpose services
together, then dispatches to self-registered command modules.

    purpose classify main.py --mode python-mode
    purpose purposes
    purpose layout workspace.yaml --toggle editor
    purpose config --set purposes.default=edit
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional

import yaml

from . import __version__
from .config import ConfigManager, ConfigStore
from .core.classifier import PurposeClassifier
from .core.dedication import DedicationStore
from .core.edges import EdgeLocator
from .core.host import Host
from .core.layout import Frame, MemoryHost, frame_from_dict
from .core.modes import ModeTable
from .core.registry import PurposeRegistry
from .errors import ConfigError, LayoutError, PurposeError
from .logging_config import level_from_env, setup_logging
from .presentation.symbols import get_symbols, safe_print
from .commands.classify_cmd import ClassifyCommand
from .commands.purposes_cmd import PurposesCommand
from .commands.layout_cmd import LayoutCommand
from .commands.config_cmd import ConfigCommand

logger = logging.getLogger(__name__)


class PurposeCLI:
    """Command-line interface for window-purpose."""

    def __init__(self, project_dir: Path, host: Optional[Host] = None):
        self.project_dir = Path(project_dir)
        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()

        # Host carries the mode table; config may add derivations
        self.host = host or MemoryHost(ModeTable.with_defaults())
        self._mode_baseline: Dict[str, Optional[str]] = {}
        self._apply_mode_parents(self.config.mode_parents)

        # Compiled tables, replaceable on reload
        self.store = ConfigStore(self.config.to_purpose_config())

        self.symbols = get_symbols(self.config.display.symbols)

        # Purpose services
        self.classifier = PurposeClassifier(self.host, self.store)
        self.registry = PurposeRegistry(self.store)
        self.dedication = DedicationStore(self.host)
        self.edges = EdgeLocator(self.host)

        # Command handlers
        self._classify_cmd = ClassifyCommand(self)
        self._purposes_cmd = PurposesCommand(self)
        self._layout_cmd = LayoutCommand(self)
        self._config_cmd = ConfigCommand(self)

    def _apply_mode_parents(self, parents: Dict[str, str]) -> None:
        """Make the host's mode table reflect `parents`, undoing earlier config entries."""
        for child, parent in parents.items():
            if child == parent:
                raise ConfigError(f"Mode {child} cannot derive from itself")
        modes = self.host.modes
        for child, original in self._mode_baseline.items():
            modes.define(child, original)
        self._mode_baseline = {child: modes.parent(child) for child in parents}
        for child, parent in parents.items():
            modes.define(child, parent)

    def reload_config(self) -> None:
        """Re-read configuration files and swap in the new tables."""
        self.config = self.config_manager.reload()
        self._apply_mode_parents(self.config.mode_parents)
        self.store.replace(self.config.to_purpose_config())
        self.symbols = get_symbols(self.config.display.symbols)

    def load_layout(self, path: str) -> Frame:
        """Read a YAML layout file into a new frame of the host."""
        if not isinstance(self.host, MemoryHost):
            raise LayoutError("Layout files can only be loaded into an in-memory host")
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise LayoutError(f"Cannot read layout {path}: {e}")
        except yaml.YAMLError as e:
            raise LayoutError(f"Invalid YAML in {path}: {e}")
        frame = frame_from_dict(self.host, data)
        logger.debug("Loaded layout %s into frame %s", path, frame.name)
        return frame


def main(argv=None) -> int:
    """
    Main entry point for the purpose CLI.

    Parser definitions and dispatch logic are in individual command modules.
    """
    parser = argparse.ArgumentParser(
        prog="purpose",
        description="window-purpose -- purpose-aware buffer and window queries",
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("PURPOSE_PROJECT_PATH", "."),
        help='Project directory (default: PURPOSE_PROJECT_PATH or current)'
    )

    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level (default: PURPOSE_LOG_LEVEL or WARNING)'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'purpose {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    from .commands import register_all, dispatch
    register_all(subparsers)

    args = parser.parse_args(argv)
    setup_logging(args.log_level or level_from_env())

    if not args.command:
        parser.print_help()
        return 0

    try:
        cli = PurposeCLI(Path(args.project))
        result = dispatch(args.command, cli, args)
    except KeyError as e:
        safe_print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 2
    except PurposeError as e:
        safe_print(f"Error: {e}", file=sys.stderr)
        return 1

    # config --set returns an error message on failure
    if args.command == 'config' and isinstance(result, str):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
