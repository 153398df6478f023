"""
GridState - Scanner State for Sprite Text
=========================================
Row/grid validation and glyph pairing as one small state machine.

State Diagram:
    EXPECT_START --glyph--> EXPECT_END(pending)
    EXPECT_END   --same glyph--> EXPECT_START   (one pixel emitted)
    EXPECT_END   --other glyph or newline--> error
    EXPECT_START --newline--> EXPECT_START      (row closed)

Spaces and tabs never change state. The first closed row fixes the width
every later row must match.
"""

from ..errors import (
    EmptySpriteError,
    PairMismatchError,
    RowWidthError,
    UnterminatedRowError,
)

# =============================================================================
# Character Classes
# =============================================================================

NEW_LINE = 0x0A
TAB = 0x09
SPACE = 0x20

BLANKS = (SPACE, TAB)


class PairState:
    """Glyph pairing states."""
    EXPECT_START = 0  # Next glyph opens a pair
    EXPECT_END = 1    # Next glyph must repeat the pending one

    _names = {
        0: "EXPECT_START",
        1: "EXPECT_END",
    }

    @classmethod
    def name(cls, state: int) -> str:
        """Get human-readable state name."""
        return cls._names.get(state, f"UNKNOWN({state})")


class GridState:
    """
    Scan position and row bookkeeping.

    Attributes:
        state: Current PairState
        pending: Codepoint waiting for its twin (EXPECT_END only)
        current_width: Pixels completed on the current row
        width: Width fixed by the first row, None until then
        height: Rows closed so far
        line: 1-based text line of the last character seen
        column: 1-based codepoint column of the last character seen
    """

    def __init__(self, line: int = 1, column: int = 0):
        self.state = PairState.EXPECT_START
        self.pending = None
        self.current_width = 0
        self.width = None
        self.height = 0
        self.line = line
        self.column = column

    @property
    def position(self) -> tuple[int, int]:
        return self.line, self.column

    def on_blank(self) -> None:
        """Space or tab: indentation, ignored."""
        self.column += 1

    def on_newline(self) -> None:
        """Close the current row."""
        self.column += 1

        if self.state == PairState.EXPECT_END:
            raise PairMismatchError(self.line, self.column)

        if self.width is None:
            self.width = self.current_width
        elif self.current_width != self.width:
            raise RowWidthError(self.width, self.current_width, self.line, self.column)

        self.height += 1
        self.current_width = 0
        self.line += 1
        self.column = 0

    def on_glyph(self, cp: int):
        """
        Feed one non-blank codepoint.

        Returns:
            The glyph codepoint when this completes a pair, else None

        Raises:
            PairMismatchError: If the twin differs from the pending glyph
        """
        self.column += 1

        if self.state == PairState.EXPECT_START:
            self.pending = cp
            self.state = PairState.EXPECT_END
            return None

        if cp != self.pending:
            raise PairMismatchError(self.line, self.column)

        self.pending = None
        self.state = PairState.EXPECT_START
        self.current_width += 1
        return cp

    def finish(self) -> None:
        """
        Validate end of input.

        Trailing blanks after the last newline are fine; glyphs are not.
        """
        if self.state == PairState.EXPECT_END or self.current_width:
            raise UnterminatedRowError(self.line, self.column)
        if self.width is None:
            raise EmptySpriteError(self.line, self.column)

    @property
    def pixel_count(self) -> int:
        return (self.width or 0) * self.height

    def __repr__(self):
        return (f"GridState({PairState.name(self.state)}, "
                f"row={self.current_width}/{self.width}, height={self.height}, "
                f"at={self.line}:{self.column})")
