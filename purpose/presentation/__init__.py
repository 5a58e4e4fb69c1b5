"""
Presentation — Symbols and table rendering for the CLI
"""

from .symbols import (
    SymbolSet, UNICODE, ASCII, TableRenderer,
    get_symbols, safe_print, supports_unicode,
)

__all__ = [
    'SymbolSet', 'UNICODE', 'ASCII', 'TableRenderer',
    'get_symbols', 'safe_print', 'supports_unicode',
]
