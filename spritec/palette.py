"""
Palette Index Allocator
=======================
Maps glyph codepoints to palette indices 0..3 in order of first appearance.
Entries are never reordered or removed, so an index is fixed the moment a
glyph is first seen.
"""

from .bitmap import BitsPerPixel
from .errors import TooManyGlyphsError

MAX_GLYPHS = 4


class PaletteTable:
    """Ordered table of distinct glyph codepoints (at most four)."""

    def __init__(self):
        self._glyphs = []

    def allocate(self, cp: int) -> int:
        """
        Return the index for ``cp``, appending it if new.

        Raises:
            TooManyGlyphsError: If a fifth distinct glyph appears
        """
        for i, known in enumerate(self._glyphs):
            if known == cp:
                return i

        if len(self._glyphs) >= MAX_GLYPHS:
            raise TooManyGlyphsError()

        self._glyphs.append(cp)
        return len(self._glyphs) - 1

    def index(self, cp: int) -> int:
        """Index of an already allocated glyph (ValueError if unknown)."""
        return self._glyphs.index(cp)

    @property
    def glyphs(self) -> tuple:
        return tuple(self._glyphs)

    @property
    def bpp(self) -> int:
        return BitsPerPixel.for_glyph_count(len(self._glyphs))

    def __len__(self):
        return len(self._glyphs)

    def __iter__(self):
        return iter(self._glyphs)

    def __repr__(self):
        return "PaletteTable(" + ", ".join(repr(chr(cp)) for cp in self._glyphs) + ")"
