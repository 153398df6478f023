"""
Sprite Compiler - Two-Pass Driver
=================================
Compiles sprite text into a packed Sprite.

Sprite text layout:
    - A single leading newline (mandatory, discarded)
    - Rows of glyph pairs; every glyph is written twice side by side
    - Every row, including the last, ends with a newline
    - Spaces and tabs are ignored anywhere (indentation)
    - 1-4 distinct glyphs; indices are assigned in order of appearance

Example:
    GRID = text_sprite('''
        0011
        2233
        ''')
    # GRID.shape == (2, 2), GRID.bpp == BitsPerPixel.TWO, GRID.data == b'\\x1b'

The output length must be known before the output is written, so every
sprite is scanned twice over the same bytes:

    sizing pass  -> (bpp, byte_capacity)
    build pass   -> writes into a buffer of exactly byte_capacity bytes

A buffer of any other length is a CapacityError.
"""

from collections import namedtuple

from .bitmap import Sprite, byte_length
from .errors import CapacityError, SpriteError, SpriteFormatError, TooManyGlyphsError
from .packer import BitPacker
from .palette import PaletteTable
from .scan import BLANKS, NEW_LINE, GridState, decode_first

SizingResult = namedtuple("SizingResult", ["bpp", "byte_capacity"])


def _as_bytes(text) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _scan(data: bytes, packer: BitPacker = None, line_offset: int = 0):
    """
    Run the scanner over ``data``, feeding pixels to ``packer`` if given.

    Returns:
        (GridState, PaletteTable) after the whole input is consumed
    """
    if not data or data[0] != NEW_LINE:
        raise SpriteFormatError("sprite text must start with a newline", line_offset + 1, 1)

    grid = GridState(line=line_offset + 2)
    palette = PaletteTable()

    offset = 1
    end = len(data)
    while offset < end:
        size, cp = decode_first(data, offset)
        offset += size

        if cp in BLANKS:
            grid.on_blank()
            continue

        if cp == NEW_LINE:
            grid.on_newline()
            continue

        glyph = grid.on_glyph(cp)
        if glyph is None:
            continue

        try:
            index = palette.allocate(glyph)
        except TooManyGlyphsError:
            raise TooManyGlyphsError(*grid.position) from None

        if packer is not None:
            packer.push(index)

    grid.finish()
    return grid, palette


def sprite_calc(text, line_offset: int = 0) -> SizingResult:
    """
    Sizing pass: validate ``text`` and compute the output layout.

    Args:
        text: Sprite text (str or UTF-8 bytes)
        line_offset: Added to reported line numbers

    Returns:
        SizingResult(bpp, byte_capacity)
    """
    grid, palette = _scan(_as_bytes(text), line_offset=line_offset)
    bpp = palette.bpp
    return SizingResult(bpp, byte_length(grid.width, grid.height, bpp))


def build_pass(text, bpp: int, buffer: bytearray,
               align_tail: bool = False, line_offset: int = 0) -> Sprite:
    """
    Build pass: pack ``text`` into ``buffer`` at ``bpp``.

    ``buffer`` must be exactly as long as the sizing pass said.

    Raises:
        CapacityError: If the packed length differs from len(buffer)
        SpriteError: If the glyph count calls for a different bpp
    """
    packer = BitPacker(bpp, buffer, align_tail=align_tail)
    grid, palette = _scan(_as_bytes(text), packer, line_offset=line_offset)

    if palette.bpp != bpp:
        raise SpriteError(
            f"inconsistent bits per pixel (sized for {bpp}, text needs {palette.bpp})")

    produced = packer.finish()
    if produced != len(buffer):
        raise CapacityError(len(buffer), produced)

    return Sprite.from_byte_array(buffer, (grid.width, grid.height), bpp, tail_aligned=align_tail)


def sprite_builder(text, buffer: bytearray = None,
                   align_tail: bool = False, line_offset: int = 0) -> Sprite:
    """
    Compile sprite text with both passes.

    Args:
        text: Sprite text (str or UTF-8 bytes)
        buffer: Optional output buffer; its length must equal the sizing
            pass capacity. Allocated when omitted.
        align_tail: Left-align a trailing partial byte
        line_offset: Added to reported line numbers

    Returns:
        Compiled Sprite

    Raises:
        SpriteError: On any validation failure
    """
    data = _as_bytes(text)
    bpp, capacity = sprite_calc(data, line_offset=line_offset)

    if buffer is None:
        buffer = bytearray(capacity)
    elif len(buffer) != capacity:
        raise CapacityError(capacity, len(buffer))

    return build_pass(data, bpp, buffer, align_tail=align_tail, line_offset=line_offset)


def text_sprite(text, align_tail: bool = False) -> Sprite:
    """Compile an inline sprite literal."""
    return sprite_builder(text, align_tail=align_tail)
