"""
PurposesCommand — List every known purpose

Shows each purpose with how many mode, name and regexp entries point
at it. The default purpose is marked.
"""

from typing import Dict, List, Optional

from ..commands.base import BaseCommand
from ..presentation.symbols import TableRenderer, safe_print


class PurposesCommand(BaseCommand):
    """List purposes from the registry."""

    def usage(self) -> Dict[str, Dict[str, int]]:
        """Per purpose name, how many entries of each table reference it."""
        config = self.store.current
        counts = {name: {"modes": 0, "names": 0, "regexps": 0} for name in self.registry.names()}
        for purpose in config.mode_purposes.values():
            counts[purpose.name]["modes"] += 1
        for purpose in config.name_purposes.values():
            counts[purpose.name]["names"] += 1
        for purpose in config.regexp_purposes.values():
            counts[purpose.name]["regexps"] += 1
        return counts

    def list_purposes(self, output_format: Optional[str] = None) -> List[str]:
        names = self.registry.names()
        default = self.store.current.default_purpose.name
        usage = self.usage()

        if self.output_format(output_format) == "json":
            self.emit_json({
                "default": default,
                "purposes": [dict(name=name, **usage[name]) for name in names],
            })
            return names

        symbols = self.symbols
        rows = []
        for name in names:
            marker = f" {symbols.default_marker}" if name == default else ""
            counts = usage[name]
            rows.append([f"{name}{marker}", counts["modes"], counts["names"], counts["regexps"]])

        safe_print(TableRenderer(symbols).render(["PURPOSE", "MODES", "NAMES", "REGEXPS"], rows))
        return names


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'purposes'


def register_parser(subparsers):
    """Register purposes command parser."""
    p = subparsers.add_parser('purposes', help='List all known purposes')
    p.add_argument('--format', '-f', dest='output_format', choices=['table', 'json'],
                   help='Output format')
    return p


def handle(cli, args):
    """Handle purposes command dispatch."""
    return cli._purposes_cmd.list_purposes(output_format=args.output_format)
