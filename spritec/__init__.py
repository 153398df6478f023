"""
spritec - Text Sprite Compiler
==============================
Compiles sprites drawn as text into packed 1- or 2-bit indexed bitmaps.

Every pixel is one glyph written twice (to keep the square aspect in a
monospace editor); indices 0..3 follow the order glyphs first appear:

    SMILEY = text_sprite('''
        ....▒▒▒▒▒▒▒▒....
        ..▒▒▒▒▒▒▒▒▒▒▒▒..
        ▒▒▒▒██▒▒▒▒██▒▒▒▒
        ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒
        ▒▒▒▒██▒▒▒▒██▒▒▒▒
        ..▒▒▒▒████▒▒▒▒..
        ....▒▒▒▒▒▒▒▒....
        ''')

Architecture
------------
The compiler is organized into layers:

    compiler         Two-pass driver (sizing pass, then build pass)
       │
       ├── scan          UTF-8 decoder + row/pairing state machine
       ├── PaletteTable  First-seen glyph -> index allocator
       └── BitPacker     MSB-first pixel accumulator
              │
              └── Sprite     Immutable packed bitmap

    sheet            Multi-sprite definition files
    asset            Binary sprite container + runtime reader
    codegen          Python module / C header emitters
    preview          Terminal and PNG previews (Pillow)
    cli              `spritec` build tool

Module Structure
----------------
    spritec/
    ├── compiler.py      Two-pass driver
    ├── bitmap.py        Sprite value, BitsPerPixel
    ├── palette.py       Palette index allocator
    ├── packer.py        Bit packer
    ├── errors.py        Error hierarchy
    ├── scan/
    │   ├── utf8.py      Codepoint decoder
    │   └── state.py     Row/grid and pairing state machine
    ├── sheet.py         Sprite sheets
    ├── asset.py         Sprite asset format
    ├── codegen.py       Source emitters
    ├── preview.py       Previews
    └── cli.py           Command-line tool
"""

from .bitmap import BitsPerPixel, Sprite
from .compiler import SizingResult, build_pass, sprite_builder, sprite_calc, text_sprite
from .errors import (
    CapacityError,
    EmptySpriteError,
    PairMismatchError,
    RowWidthError,
    SheetError,
    SpriteError,
    SpriteFormatError,
    TooManyGlyphsError,
    UnterminatedRowError,
)
from .palette import PaletteTable
from .packer import BitPacker
from .sheet import SpriteSource, compile_sheet, parse_sheet
from .asset import SpriteAsset, write_asset

__all__ = [
    # Compiler
    "text_sprite",
    "sprite_builder",
    "sprite_calc",
    "build_pass",
    "SizingResult",
    # Values
    "Sprite",
    "BitsPerPixel",
    "PaletteTable",
    "BitPacker",
    # Sheets and assets
    "SpriteSource",
    "parse_sheet",
    "compile_sheet",
    "SpriteAsset",
    "write_asset",
    # Errors
    "SpriteError",
    "SpriteFormatError",
    "UnterminatedRowError",
    "EmptySpriteError",
    "RowWidthError",
    "PairMismatchError",
    "TooManyGlyphsError",
    "CapacityError",
    "SheetError",
]

__version__ = "1.0.0"
