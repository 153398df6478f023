"""
BitPacker - MSB-first Pixel Accumulator
=======================================
Packs palette indices into bytes at 1 or 2 bits per pixel.

Each index is shifted into an accumulator (``acc = (acc << bpp) | index``);
a full byte is flushed to the next output slot. With no buffer, or past the
end of the buffer, bytes are counted but not stored, which lets the same
code run as a dry run.
"""

from .bitmap import BitsPerPixel

_BITS_PER_BYTE = 8
_BYTE_MASK = 0xFF


class BitPacker:
    """
    Byte accumulator for packed pixels.

    Args:
        bpp: BitsPerPixel.ONE or BitsPerPixel.TWO
        buffer: Writable byte buffer, or None to only count
        align_tail: Left-align the final partial byte (zero pixels follow)
            instead of storing it with its bits in the low-order positions
    """

    def __init__(self, bpp: int, buffer: bytearray = None, align_tail: bool = False):
        if not BitsPerPixel.is_valid(bpp):
            raise ValueError(f"bits per pixel must be 1 or 2, got {bpp}")

        self._bpp = bpp
        self._mask = (1 << bpp) - 1
        self._buffer = buffer
        self._capacity = len(buffer) if buffer is not None else 0
        self._align_tail = align_tail

        self._acc = 0
        self._acc_bits = 0
        self._offset = 0
        self.pixels = 0

    @property
    def offset(self) -> int:
        """Number of complete bytes flushed so far."""
        return self._offset

    def push(self, index: int) -> None:
        """Append one pixel."""
        if index & ~self._mask:
            raise ValueError(f"palette index {index} does not fit in {self._bpp} bpp")

        self._acc = ((self._acc << self._bpp) | index) & _BYTE_MASK
        self._acc_bits += self._bpp
        self.pixels += 1

        if self._acc_bits == _BITS_PER_BYTE:
            self._flush()

    def _flush(self) -> None:
        if self._offset < self._capacity:
            self._buffer[self._offset] = self._acc
        self._offset += 1
        self._acc = 0
        self._acc_bits = 0

    def finish(self) -> int:
        """
        Flush any partial byte.

        Returns:
            Total bytes produced (stored or not)
        """
        if self._acc_bits:
            if self._align_tail:
                self._acc = (self._acc << (_BITS_PER_BYTE - self._acc_bits)) & _BYTE_MASK
            self._flush()
        return self._offset
