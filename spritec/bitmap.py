"""
Sprite - Packed Indexed Bitmap
==============================
Immutable result of compiling a sprite definition.

Pixels are palette indices packed row-major, most significant bits first:
- 1 bit per pixel: indices 0..1, 8 pixels per byte
- 2 bits per pixel: indices 0..3, 4 pixels per byte

Rows are not byte-aligned; pixel ``n = y * width + x`` occupies bits
``n * bpp`` to ``n * bpp + bpp - 1`` counted from the MSB of byte 0.

When the pixel bits do not fill the last byte, that byte is either
left-aligned (zero padding in the low bits) or, as the compiler writes it
by default, holds its pixels in the low-order bits (``tail_aligned=False``).
"""

_BITS_PER_BYTE = 8
_ONE_BIT_MASK = 0b1
_TWO_BIT_MASK = 0b11


class BitsPerPixel:
    """
    Bits-per-pixel enumeration.

    The value of each member is its bit count, so it can be used directly
    as a shift amount when packing.
    """
    ONE = 1
    TWO = 2

    _names = {
        1: "ONE",
        2: "TWO",
    }

    # Renderer blit flags (BLIT_1BPP / BLIT_2BPP)
    _blit_flags = {
        1: 0,
        2: 1,
    }

    @classmethod
    def name(cls, bpp: int) -> str:
        """Get human-readable name."""
        return cls._names.get(bpp, f"UNKNOWN({bpp})")

    @classmethod
    def is_valid(cls, bpp: int) -> bool:
        return bpp in cls._names

    @classmethod
    def for_glyph_count(cls, count: int) -> int:
        """Two glyphs fit in one bit; three or four need two."""
        return cls.ONE if count <= 2 else cls.TWO

    @classmethod
    def blit_flag(cls, bpp: int) -> int:
        return cls._blit_flags[bpp]


def byte_length(width: int, height: int, bpp: int) -> int:
    """Bytes needed for ``width * height`` pixels at ``bpp``."""
    return (width * height * bpp + _BITS_PER_BYTE - 1) // _BITS_PER_BYTE


class Sprite:
    """
    Packed indexed bitmap.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        bpp: BitsPerPixel.ONE or BitsPerPixel.TWO
        data: Packed pixel bytes
        tail_aligned: False if a partial last byte keeps its pixels in the
            low-order bits
    """

    __slots__ = ("_width", "_height", "_bpp", "_data", "_tail_aligned")

    def __init__(self, width: int, height: int, bpp: int, data: bytes,
                 tail_aligned: bool = True):
        if not BitsPerPixel.is_valid(bpp):
            raise ValueError(f"bits per pixel must be 1 or 2, got {bpp}")
        if width < 0 or height < 0:
            raise ValueError("sprite shape must not be negative")
        expected = byte_length(width, height, bpp)
        if len(data) != expected:
            raise ValueError(
                f"sprite {width}x{height} at {bpp} bpp needs {expected} bytes, got {len(data)}")

        self._width = width
        self._height = height
        self._bpp = bpp
        self._data = bytes(data)
        # Only a partial last byte can be stored either way
        self._tail_aligned = tail_aligned or (width * height * bpp) % _BITS_PER_BYTE == 0

    @classmethod
    def from_byte_array(cls, data: bytes, shape: tuple, bpp: int,
                        tail_aligned: bool = True) -> "Sprite":
        """
        Build a sprite from packed bytes.

        Args:
            data: Packed pixel data
            shape: (width, height) in pixels
            bpp: BitsPerPixel.ONE or BitsPerPixel.TWO
            tail_aligned: False if a partial last byte is stored in its
                low-order bits

        Raises:
            ValueError: If the data length does not match the shape
        """
        width, height = shape
        return cls(width, height, bpp, data, tail_aligned)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def width(self) -> int: return self._width

    @property
    def height(self) -> int: return self._height

    @property
    def shape(self) -> tuple[int, int]: return self._width, self._height

    @property
    def bpp(self) -> int: return self._bpp

    @property
    def data(self) -> bytes: return self._data

    @property
    def byte_length(self) -> int: return len(self._data)

    @property
    def blit_flag(self) -> int: return BitsPerPixel.blit_flag(self._bpp)

    @property
    def tail_aligned(self) -> bool: return self._tail_aligned

    # =========================================================================
    # Pixel Access
    # =========================================================================

    def get_pixel(self, x: int, y: int) -> int:
        """Return the palette index at (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} sprite")

        bpp = self._bpp
        bit_off = (y * self._width + x) * bpp
        byte = bit_off >> 3
        if not self._tail_aligned and byte == len(self._data) - 1:
            # Partial last byte, pixels packed into its low bits
            tail_bits = (self._width * self._height * bpp) & 7
            shift = tail_bits - bpp - (bit_off & 7)
        else:
            shift = _BITS_PER_BYTE - bpp - (bit_off & 7)
        mask = _ONE_BIT_MASK if bpp == 1 else _TWO_BIT_MASK
        return (self._data[byte] >> shift) & mask

    def rows(self) -> list[list[int]]:
        """All palette indices as a list of rows."""
        return [[self.get_pixel(x, y) for x in range(self._width)]
                for y in range(self._height)]

    # =========================================================================
    # Value Semantics
    # =========================================================================

    def __eq__(self, other):
        if not isinstance(other, Sprite):
            return NotImplemented
        return (self._width, self._height, self._bpp, self._data, self._tail_aligned) == \
            (other._width, other._height, other._bpp, other._data, other._tail_aligned)

    def __hash__(self):
        return hash((self._width, self._height, self._bpp, self._data, self._tail_aligned))

    def __repr__(self):
        tail = "" if self._tail_aligned else ", tail_aligned=False"
        return (f"Sprite({self._width}x{self._height}, "
                f"bpp={BitsPerPixel.name(self._bpp)}, data={self._data.hex()}{tail})")
