"""
Scanner subsystem.

Modules:
    utf8: Codepoint decoder
    state: Row/grid and glyph pairing state machine
"""
from .utf8 import decode_first
from .state import GridState, PairState, NEW_LINE, TAB, SPACE, BLANKS

__all__ = [
    "decode_first",
    "GridState",
    "PairState",
    "NEW_LINE",
    "TAB",
    "SPACE",
    "BLANKS",
]
