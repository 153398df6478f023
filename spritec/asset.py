"""
Sprite Asset Format
===================
Binary container for compiled sprites, read back at runtime without
recompiling any sprite text.

Format Layout:
    [Header: 8 bytes]
    [Index: count × 26 bytes]
    [Sprite data: variable]

Header Structure (8 bytes, little-endian):
    - Magic: "S2" (2 bytes)
    - Version: 1 byte
    - Flags: 1 byte (reserved, 0)
    - Sprite count: 2 bytes
    - Reserved: 2 bytes

Index Entry (26 bytes, in file order):
    - Name: 16 bytes (UTF-8, NUL padded)
    - Width: 2 bytes
    - Height: 2 bytes
    - Bits per pixel: 1 byte (1 or 2)
    - Flags: 1 byte (bit 0: last byte left-aligned)
    - Offset: 4 bytes (position in sprite data section)

Sprite data length is implied by width, height and bits per pixel.
"""

import struct
from pathlib import Path

from .bitmap import BitsPerPixel, Sprite, byte_length

ASSET_MAGIC = b"S2"
ASSET_VERSION = 1
ASSET_HEADER_SIZE = 8
ASSET_INDEX_ENTRY_SIZE = 26
ASSET_NAME_SIZE = 16

_HEADER_FMT = "<2sBBHH"
_ENTRY_FMT = "<16sHHBBI"

# Index entry flags
ASSET_FLAG_TAIL_ALIGNED = 0x01


def _encode_name(name: str) -> bytes:
    raw = name.encode("utf-8")
    if len(raw) > ASSET_NAME_SIZE:
        raise ValueError(f"sprite name '{name}' longer than {ASSET_NAME_SIZE} bytes")
    return raw


def pack_asset(sprites: dict) -> bytes:
    """
    Serialize sprites to asset bytes.

    Args:
        sprites: {name: Sprite}, written in iteration order
    """
    if len(sprites) > 0xFFFF:
        raise ValueError("too many sprites for one asset")

    index = bytearray()
    data = bytearray()

    for name, sprite in sprites.items():
        index += struct.pack(
            _ENTRY_FMT,
            _encode_name(name),
            sprite.width,
            sprite.height,
            sprite.bpp,
            ASSET_FLAG_TAIL_ALIGNED if sprite.tail_aligned else 0,
            len(data),
        )
        data += sprite.data

    header = struct.pack(_HEADER_FMT, ASSET_MAGIC, ASSET_VERSION, 0, len(sprites), 0)
    return header + bytes(index) + bytes(data)


def write_asset(output_path: Path, sprites: dict) -> int:
    """
    Write sprites to an asset file.

    Returns:
        Number of bytes written
    """
    blob = pack_asset(sprites)
    with open(output_path, "wb") as f:
        f.write(blob)
    return len(blob)


class SpriteAsset:
    """
    Sprite asset file reader.

    Keeps the file open and reads sprite data on demand.
    Use close() or context manager to release the file handle.

    Attributes:
        count: Number of sprites in the asset
        index: {name: (width, height, bpp, flags, offset)}
    """

    def __init__(self, path):
        """
        Open and parse a sprite asset.

        Raises:
            ValueError: If the file is not a valid sprite asset
            OSError: If the file cannot be opened
        """
        self.file = open(path, "rb")

        hdr = self.file.read(ASSET_HEADER_SIZE)
        if len(hdr) != ASSET_HEADER_SIZE or hdr[:2] != ASSET_MAGIC:
            self.file.close()
            raise ValueError("Invalid sprite asset file")

        _, version, _, self.count, _ = struct.unpack(_HEADER_FMT, hdr)
        if version != ASSET_VERSION:
            self.file.close()
            raise ValueError(f"Unsupported sprite asset version {version}")

        self._data_start = ASSET_HEADER_SIZE + self.count * ASSET_INDEX_ENTRY_SIZE

        idx_data = self.file.read(self.count * ASSET_INDEX_ENTRY_SIZE)
        if len(idx_data) != self.count * ASSET_INDEX_ENTRY_SIZE:
            self.file.close()
            raise ValueError("Truncated sprite asset index")

        self.index = {}
        for i in range(self.count):
            off = i * ASSET_INDEX_ENTRY_SIZE
            raw_name, w, h, bpp, flags, offset = struct.unpack(
                _ENTRY_FMT, idx_data[off:off + ASSET_INDEX_ENTRY_SIZE])
            if not BitsPerPixel.is_valid(bpp):
                self.file.close()
                raise ValueError(f"Invalid bits per pixel {bpp} in sprite asset")
            name = raw_name.rstrip(b"\x00").decode("utf-8")
            self.index[name] = (w, h, bpp, flags, offset)

    def names(self) -> list:
        return list(self.index)

    def get(self, name: str):
        """
        Load a sprite by name.

        Returns:
            Sprite, or None if not found
        """
        entry = self.index.get(name)
        if entry is None:
            return None

        w, h, bpp, flags, offset = entry
        size = byte_length(w, h, bpp)
        self.file.seek(self._data_start + offset)
        data = self.file.read(size)
        if len(data) != size:
            raise ValueError(f"Truncated data for sprite '{name}'")
        return Sprite.from_byte_array(
            data, (w, h), bpp, tail_aligned=bool(flags & ASSET_FLAG_TAIL_ALIGNED))

    def load_all(self) -> dict:
        return {name: self.get(name) for name in self.index}

    def __contains__(self, name):
        return name in self.index

    def __len__(self):
        return self.count

    def close(self):
        """Close the asset file handle."""
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False
