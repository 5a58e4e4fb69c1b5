"""
Symbols — Visual vocabulary for CLI output

Progressive enhancement: Unicode when supported, ASCII fallback.
Configurable via display.symbols setting.

Also provides safe output utilities:
- safe_print(): Encoding-safe printing for buffer names from the host
- TableRenderer: bordered tables for window and purpose listings
"""

import os
import shutil
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence


# Common Unicode to ASCII replacements for display
UNICODE_TO_ASCII = {
    '→': '->',
    '←': '<-',
    '↑': '^',
    '↓': 'v',
    '…': '...',
    '•': '*',
    '●': '*',
    '○': 'o',
}


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Buffer names can contain anything; handles UnicodeEncodeError by
    replacing unencodable characters with ASCII equivalents or '?'.
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            # Last resort: replace all unencodable chars with ?
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


@dataclass(frozen=True)
class SymbolSet:
    """Symbols used by CLI listings."""
    # Window states
    dedicated: str
    undedicated: str
    selected: str

    # Edges
    edge_top: str
    edge_bottom: str
    edge_left: str
    edge_right: str

    # Status markers
    check_pass: str
    check_warn: str
    check_fail: str
    arrow: str
    bullet: str
    default_marker: str

    # Table borders
    box_h: str
    box_v: str
    box_tl: str
    box_tr: str
    box_bl: str
    box_br: str
    box_cross: str
    box_t_down: str
    box_t_up: str
    box_t_right: str
    box_t_left: str

    ellipsis: str


UNICODE = SymbolSet(
    dedicated='●',
    undedicated='○',
    selected='▶',
    edge_top='↑',
    edge_bottom='↓',
    edge_left='←',
    edge_right='→',
    check_pass='✓',
    check_warn='⚠',
    check_fail='✗',
    arrow='→',
    bullet='•',
    default_marker='★',
    box_h='─',
    box_v='│',
    box_tl='┌',
    box_tr='┐',
    box_bl='└',
    box_br='┘',
    box_cross='┼',
    box_t_down='┬',
    box_t_up='┴',
    box_t_right='├',
    box_t_left='┤',
    ellipsis='…',
)

ASCII = SymbolSet(
    dedicated='[D]',
    undedicated='[ ]',
    selected='>',
    edge_top='^',
    edge_bottom='v',
    edge_left='<',
    edge_right='>',
    check_pass='[OK]',
    check_warn='[!]',
    check_fail='[--]',
    arrow='->',
    bullet='*',
    default_marker='(default)',
    box_h='-',
    box_v='|',
    box_tl='+',
    box_tr='+',
    box_bl='+',
    box_br='+',
    box_cross='+',
    box_t_down='+',
    box_t_up='+',
    box_t_right='+',
    box_t_left='+',
    ellipsis='...',
)


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    """
    if os.environ.get('PURPOSE_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('PURPOSE_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False
        if encoding_lower.startswith('utf'):
            return True

    lang = os.environ.get('LANG', '').lower()
    lc_all = os.environ.get('LC_ALL', '').lower()
    return 'utf-8' in lang or 'utf8' in lang or 'utf-8' in lc_all or 'utf8' in lc_all


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """
    Get appropriate symbol set based on preference or auto-detection.

    Args:
        preference: "unicode", "ascii", or "auto" (None = auto)
    """
    if preference == 'unicode':
        return UNICODE
    if preference == 'ascii':
        return ASCII
    return UNICODE if supports_unicode() else ASCII


class TableRenderer:
    """Render rows as a bordered table sized to the terminal."""

    def __init__(self, symbols: SymbolSet = None, width: int = None):
        self.symbols = symbols or get_symbols()
        self.width = width or shutil.get_terminal_size().columns

    def _separator(self, widths: List[int], position: str = 'middle') -> str:
        s = self.symbols
        if position == 'top':
            left, cross, right = s.box_tl, s.box_t_down, s.box_tr
        elif position == 'bottom':
            left, cross, right = s.box_bl, s.box_t_up, s.box_br
        else:
            left, cross, right = s.box_t_right, s.box_cross, s.box_t_left

        parts = [left]
        for i, w in enumerate(widths):
            parts.append(s.box_h * w)
            parts.append(cross if i < len(widths) - 1 else right)
        return ''.join(parts)

    def _row(self, cells: Sequence, widths: List[int]) -> str:
        s = self.symbols
        ellip = s.ellipsis
        parts = [s.box_v]
        for cell, w in zip(cells, widths):
            cell_str = str(cell) if cell is not None else ''
            if len(cell_str) > w:
                cell_str = cell_str[:w - len(ellip)] + ellip if w > len(ellip) else cell_str[:w]
            parts.append(cell_str.ljust(w))
            parts.append(s.box_v)
        return ''.join(parts)

    def render(self, headers: Sequence[str], rows: Sequence[Sequence]) -> str:
        """Columns are as wide as their widest cell, the last one shrinks to fit."""
        if not rows:
            return "Nothing to display."

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(str(cell)))

        # Borders take len(widths) + 1 cells
        overflow = sum(widths) + len(widths) + 1 - self.width
        if overflow > 0:
            widths[-1] = max(len(headers[-1]), widths[-1] - overflow)

        lines = [self._separator(widths, 'top'), self._row(headers, widths),
                 self._separator(widths, 'middle')]
        lines.extend(self._row(row, widths) for row in rows)
        lines.append(self._separator(widths, 'bottom'))
        return '\n'.join(lines)
