"""
ClassifyCommand — Which purpose would a buffer get?

Classifies a buffer by name and major mode against the loaded
configuration and reports the rule that decided it. With --layout,
the buffer is looked up among the buffers of a layout file instead,
so its declared mode is used.
"""

from typing import Optional

from ..commands.base import BaseCommand
from ..core.classifier import Classification
from ..core.modes import FUNDAMENTAL_MODE
from ..presentation.symbols import safe_print


class ClassifyCommand(BaseCommand):
    """Classify one buffer and explain the result."""

    def explain(self, name: str, mode: Optional[str] = None,
                layout: Optional[str] = None) -> Classification:
        if layout:
            self._cli.load_layout(layout)
            buffer = self.classifier.resolve_buffer(name)
        else:
            buffer = self.host.get_buffer_create(name, mode=mode or FUNDAMENTAL_MODE)
        if mode:
            buffer.mode = mode
        return self.classifier.explain(buffer)

    def classify(self, name: str, mode: Optional[str] = None,
                 layout: Optional[str] = None, output_format: Optional[str] = None):
        result = self.explain(name, mode=mode, layout=layout)
        buffer = self.host.get_buffer(name)

        if self.output_format(output_format) == "json":
            self.emit_json({
                "buffer": buffer.name,
                "mode": buffer.mode,
                "purpose": result.purpose.name,
                "rule": result.rule.value,
                "key": result.key,
            })
            return result

        symbols = self.symbols
        safe_print(f"{buffer.name} ({buffer.mode}) {symbols.arrow} {result.purpose}")
        safe_print(f"  decided by: {result.describe()}")
        lineage = self.host.modes.lineage(buffer.mode)
        if len(lineage) > 1:
            safe_print(f"  mode lineage: {f' {symbols.arrow} '.join(lineage)}")
        return result


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'classify'


def register_parser(subparsers):
    """Register classify command parser."""
    p = subparsers.add_parser('classify', help='Show the purpose of a buffer')
    p.add_argument('name', help='Buffer name (e.g. main.py, "*shell*")')
    p.add_argument('--mode', '-m', help='Major mode of the buffer (default: fundamental-mode)')
    p.add_argument('--layout', '-l', metavar='FILE',
                   help='Look the buffer up in a layout file instead')
    p.add_argument('--format', '-f', dest='output_format', choices=['table', 'json'],
                   help='Output format')
    return p


def handle(cli, args):
    """Handle classify command dispatch."""
    return cli._classify_cmd.classify(
        args.name,
        mode=args.mode,
        layout=args.layout,
        output_format=args.output_format,
    )
