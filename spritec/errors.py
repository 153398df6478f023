"""
Sprite Errors
=============
Every compile failure is fatal for the sprite being compiled. Errors carry
the text line and column (both 1-based) of the offending character when the
scanner knows it, so tools can report ``file:line:col``.

Hierarchy:
    SpriteError (ValueError)
    ├── SpriteFormatError
    │   ├── UnterminatedRowError
    │   └── EmptySpriteError
    ├── RowWidthError
    ├── PairMismatchError
    ├── TooManyGlyphsError
    ├── CapacityError
    └── SheetError
"""


class SpriteError(ValueError):
    """Base class for sprite compilation errors."""

    def __init__(self, message: str, line: int = None, column: int = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class SpriteFormatError(SpriteError):
    """Sprite text does not follow the leading/trailing newline layout."""


class UnterminatedRowError(SpriteFormatError):
    def __init__(self, line: int = None, column: int = None):
        super().__init__("rows must end with a newline", line, column)


class EmptySpriteError(SpriteFormatError):
    def __init__(self, line: int = None, column: int = None):
        super().__init__("no rows found", line, column)


class RowWidthError(SpriteError):
    def __init__(self, expected: int, found: int, line: int = None, column: int = None):
        super().__init__(
            f"rows must have equal width (expected {expected}, found {found})",
            line, column)
        self.expected = expected
        self.found = found


class PairMismatchError(SpriteError):
    def __init__(self, line: int = None, column: int = None):
        super().__init__("pattern pairs not matching", line, column)


class TooManyGlyphsError(SpriteError):
    def __init__(self, line: int = None, column: int = None):
        super().__init__("too many distinct glyphs", line, column)


class CapacityError(SpriteError):
    """Sizing pass and build pass disagree about the output length."""

    def __init__(self, expected: int, found: int):
        super().__init__(
            f"inconsistent capacity (expected {expected} bytes, got {found})")
        self.expected = expected
        self.found = found


class SheetError(SpriteError):
    """Malformed sprite sheet (headers, names, stray content)."""
