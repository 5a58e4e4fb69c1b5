"""
BaseCommand — Shared foundation for all CLI commands

Provides access to CLI resources via composition.
Commands receive the CLI instance and access its resources through properties.
"""

import json
from typing import TYPE_CHECKING, Any, Optional

from ..presentation.symbols import safe_print

if TYPE_CHECKING:
    from ..cli import PurposeCLI


class BaseCommand:
    """
    Base class for CLI commands with access to shared resources.

    Commands don't reinitialize resources — they access them via the CLI instance.
    """

    def __init__(self, cli: 'PurposeCLI'):
        self._cli = cli

    # -------------------------------------------------------------------------
    # Core resources
    # -------------------------------------------------------------------------

    @property
    def host(self):
        """Editor host (MemoryHost for the CLI)."""
        return self._cli.host

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def store(self):
        """ConfigStore holding the compiled purpose tables."""
        return self._cli.store

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def classifier(self):
        return self._cli.classifier

    @property
    def registry(self):
        return self._cli.registry

    @property
    def dedication(self):
        return self._cli.dedication

    @property
    def edges(self):
        return self._cli.edges

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def output_format(self, requested: Optional[str] = None) -> str:
        """Explicit --format wins over display.format."""
        return requested or self.config.display.format

    def emit_json(self, data: Any) -> None:
        safe_print(json.dumps(data, indent=2, ensure_ascii=False))
