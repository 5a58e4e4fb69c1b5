"""
ConfigCommand — Configuration display and editing

Handles configuration operations:
- Displaying current configuration
- Setting configuration values (project or user scope)
"""

from typing import Optional

from ..commands.base import BaseCommand
from ..presentation.symbols import safe_print


class ConfigCommand(BaseCommand):
    """Show or edit configuration."""

    def show_config(self):
        """Show current configuration."""
        safe_print(self._cli.config_manager.display())

    def set_config(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """Set a configuration value. Returns the error message, if any."""
        symbols = self.symbols
        manager = self._cli.config_manager
        error = manager.set(key, value, scope)

        if error:
            safe_print(f"{symbols.check_fail} {error}")
            return error

        path = manager.project_config_path if scope == "project" else manager.user_config_path
        safe_print(f"{symbols.check_pass} Set {key} = {value}")
        safe_print(f"  Saved to: {path}")
        self._cli.reload_config()
        return None


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'config'


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., purposes.default=edit)')
    p.add_argument('--user', action='store_true',
                   help='Apply to user config instead of project')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if args.set:
        if '=' not in args.set:
            safe_print("Error: Use format KEY=VALUE (e.g., purposes.default=edit)")
            return "invalid format"
        key, value = args.set.split('=', 1)
        scope = "user" if args.user else "project"
        return cli._config_cmd.set_config(key, value, scope)
    cli._config_cmd.show_config()
