"""
Code Generation
===============
Emits compiled sprites as source code so they ship as constant data.

- python_module(): a module of Sprite constants
- c_header(): static byte arrays with width/height/flags defines
"""

from .bitmap import BitsPerPixel

_BYTES_PER_LINE = 12


def _hex_rows(data: bytes, indent: str = "    ") -> list:
    rows = []
    for i in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[i:i + _BYTES_PER_LINE]
        rows.append(indent + ", ".join(f"0x{b:02X}" for b in chunk) + ",")
    return rows


def python_module(sprites: dict, source_name: str = None) -> str:
    """
    Generate a Python module defining one Sprite per entry.

    Args:
        sprites: {name: Sprite}
        source_name: Shown in the header comment
    """
    lines = []
    lines.append('"""')
    lines.append(f"Sprites compiled from {source_name}." if source_name else "Compiled sprites.")
    lines.append("")
    lines.append("Generated by spritec. Do not edit.")
    lines.append('"""')
    lines.append("")
    lines.append("from spritec.bitmap import BitsPerPixel, Sprite")
    lines.append("")

    for name, sprite in sprites.items():
        lines.append("")
        lines.append(f"# {sprite.width}x{sprite.height}, {sprite.bpp} bpp, "
                     f"{sprite.byte_length} bytes")
        lines.append(f"{name} = Sprite.from_byte_array(")
        lines.append(f"    bytes.fromhex({sprite.data.hex()!r}),")
        lines.append(f"    ({sprite.width}, {sprite.height}),")
        lines.append(f"    BitsPerPixel.{BitsPerPixel.name(sprite.bpp)},")
        if not sprite.tail_aligned:
            lines.append("    tail_aligned=False,")
        lines.append(")")

    lines.append("")
    lines.append("__all__ = [" + ", ".join(repr(n) for n in sprites) + "]")
    lines.append("")
    return "\n".join(lines)


def c_header(sprites: dict, source_name: str = None, guard: str = "SPRITES_H") -> str:
    """
    Generate a C header with one byte array per sprite.

    Each sprite also gets NAME_WIDTH, NAME_HEIGHT and NAME_FLAGS defines;
    the flags are the renderer's bits-per-pixel blit flag. Sprites with
    no pixels get only the defines.
    """
    lines = []
    lines.append(f"// Auto-generated from {source_name}" if source_name else "// Auto-generated")
    lines.append("// by spritec")
    lines.append("//")
    lines.append("// Packed indexed sprites, row-major, MSB = leftmost pixel")
    lines.append("")
    lines.append(f"#ifndef {guard}")
    lines.append(f"#define {guard}")
    lines.append("")
    lines.append("#include <stdint.h>")

    for name, sprite in sprites.items():
        upper = name.upper()
        lines.append("")
        lines.append(f"#define {upper}_WIDTH {sprite.width}")
        lines.append(f"#define {upper}_HEIGHT {sprite.height}")
        lines.append(f"#define {upper}_FLAGS {sprite.blit_flag}  "
                     f"// BLIT_{sprite.bpp}BPP")
        if not sprite.tail_aligned:
            lines.append("// last byte holds its pixels in the low-order bits")
        if not sprite.byte_length:
            lines.append(f"// {name}: no pixel data")
            continue
        lines.append(f"static const uint8_t {name}[{sprite.byte_length}] = {{")
        lines.extend(_hex_rows(sprite.data))
        lines.append("};")

    lines.append("")
    lines.append(f"#endif // {guard}")
    lines.append("")
    return "\n".join(lines)
