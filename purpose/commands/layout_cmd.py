"""
LayoutCommand — Evaluate a window layout file

Loads a YAML layout description into the in-memory host and reports,
for every window, the buffer it shows, that buffer's purpose and
whether the window is purpose-dedicated, followed by the top, bottom,
left and right windows of the frame.
"""

from typing import Any, Dict, List, Optional

from ..commands.base import BaseCommand
from ..core.host import Direction
from ..errors import LayoutError
from ..presentation.symbols import TableRenderer, safe_print

EDGE_SIDES = [
    ("top", Direction.ABOVE),
    ("bottom", Direction.BELOW),
    ("left", Direction.LEFT),
    ("right", Direction.RIGHT),
]


class LayoutCommand(BaseCommand):
    """Report purposes, dedication and edges for a layout."""

    def describe(self, path: str, toggle: Optional[List[str]] = None) -> Dict[str, Any]:
        frame = self._cli.load_layout(path)

        for name in toggle or []:
            window = self.host.find_window(name, frame)
            if window is None:
                known = ", ".join(w.name for w in self.host.windows(frame))
                raise LayoutError(f"No window named '{name}'. Windows: {known}")
            self.dedication.toggle_dedicated(window)

        edges = {side: self.edges.edge_window(direction, frame) for side, direction in EDGE_SIDES}
        windows = []
        for window in self.host.windows(frame):
            buffer = self.host.window_buffer(window)
            windows.append({
                "window": window.name,
                "buffer": buffer.name,
                "mode": buffer.mode,
                "purpose": self.classifier.window_purpose(window).name,
                "dedicated": self.dedication.is_dedicated(window),
                "edges": [side for side, w in edges.items() if w is window],
            })

        return {
            "frame": {"name": frame.name, "width": frame.width, "height": frame.height},
            "windows": windows,
            "edges": {side: (w.name if w else None) for side, w in edges.items()},
        }

    def show(self, path: str, toggle: Optional[List[str]] = None,
             output_format: Optional[str] = None) -> Dict[str, Any]:
        report = self.describe(path, toggle=toggle)

        if self.output_format(output_format) == "json":
            self.emit_json(report)
            return report

        symbols = self.symbols
        edge_symbols = {
            "top": symbols.edge_top,
            "bottom": symbols.edge_bottom,
            "left": symbols.edge_left,
            "right": symbols.edge_right,
        }
        rows = []
        for entry in report["windows"]:
            rows.append([
                entry["window"],
                entry["buffer"],
                entry["purpose"],
                symbols.dedicated if entry["dedicated"] else symbols.undedicated,
                "".join(edge_symbols[side] for side in entry["edges"]),
            ])

        frame = report["frame"]
        safe_print(f"Frame {frame['name']} ({frame['width']}x{frame['height']})")
        safe_print(TableRenderer(symbols).render(["WINDOW", "BUFFER", "PURPOSE", "DED", "EDGE"], rows))
        for side, name in report["edges"].items():
            safe_print(f"  {side:<6} {symbols.arrow} {name or '-'}")
        return report


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'layout'


def register_parser(subparsers):
    """Register layout command parser."""
    p = subparsers.add_parser('layout', help='Show purposes and edge windows of a layout file')
    p.add_argument('file', help='YAML layout description')
    p.add_argument('--toggle', '-t', action='append', metavar='WINDOW',
                   help='Toggle purpose dedication of a window first (repeatable)')
    p.add_argument('--format', '-f', dest='output_format', choices=['table', 'json'],
                   help='Output format')
    return p


def handle(cli, args):
    """Handle layout command dispatch."""
    return cli._layout_cmd.show(args.file, toggle=args.toggle, output_format=args.output_format)
