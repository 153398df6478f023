#!/usr/bin/env python3
"""
Sprite Compiler CLI
===================
Compiles sprite text files into packed sprite data.

Features:
- Input: single-sprite text file or multi-sprite sheet (@sprite NAME headers)
- Output: Python module, C header, binary sprite asset or PNG preview
- Preview compiled sprites in the terminal

Requirements:
    pip install Pillow

Usage:
    # Sheet to Python module
    spritec sprites.txt sprites_data.py

    # Sheet to C header
    spritec sprites.txt sprites.h

    # Sheet to binary asset (read back with spritec.SpriteAsset)
    spritec sprites.txt sprites.bin

    # Preview only
    spritec sprites.txt --preview
"""

import argparse
import sys
from pathlib import Path

from .asset import write_asset
from .bitmap import BitsPerPixel
from .codegen import c_header, python_module
from .errors import SpriteError
from .preview import render_image, render_strip, render_text
from .sheet import compile_sources, parse_sheet

ASSET_EXTENSIONS = (".bin", ".spr")


def preview_sprites(sprites: dict):
    """Print a text preview of each sprite."""
    for name, sprite in sprites.items():
        print(f"\n{name} ({sprite.width}x{sprite.height}, "
              f"{BitsPerPixel.name(sprite.bpp)}, {sprite.byte_length} bytes):")
        for line in render_text(sprite).splitlines():
            print(f"  {line}")
    print()


def _location(path: Path, err: SpriteError) -> str:
    where = str(path)
    if err.line is not None:
        where += f":{err.line}"
        if err.column is not None:
            where += f":{err.column}"
    name = getattr(err, "sprite", None)
    if name:
        where += f" [{name}]"
    return where


def write_output(output_path: Path, sprites: dict, source_name: str,
                 scale: int = 1) -> int:
    """
    Write sprites in the format chosen by the output extension.

    Returns:
        Number of bytes written
    """
    ext = output_path.suffix.lower()

    if ext == ".py":
        text = python_module(sprites, source_name)
        output_path.write_text(text, encoding="utf-8")
    elif ext == ".h":
        guard = output_path.stem.upper().replace("-", "_").replace(".", "_") + "_H"
        text = c_header(sprites, source_name, guard=guard)
        output_path.write_text(text, encoding="utf-8")
    elif ext == ".png":
        if len(sprites) == 1:
            img = render_image(next(iter(sprites.values())), scale=scale)
        else:
            img = render_strip(list(sprites.values()), scale=scale)
        img.save(output_path)
    else:
        if ext not in ASSET_EXTENSIONS:
            print(f"Warning: Unknown output extension '{ext}', defaulting to sprite asset")
        write_asset(output_path, sprites)

    return output_path.stat().st_size


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="spritec",
        description="Compile doubled-glyph sprite text into packed indexed bitmaps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Multi-sprite sheet to a Python module
  spritec sprites.txt game/sprites_data.py

  # Single sprite file, named explicitly, to a C header
  spritec smiley.txt smiley.h --name smiley

  # Only some sprites of a sheet, as a binary asset
  spritec sprites.txt sprites.bin --only player --only enemy

  # PNG preview at 8x
  spritec sprites.txt preview.png --scale 8

  # Terminal preview only (no output file)
  spritec sprites.txt --preview

Output format is chosen by extension: .py, .h, .bin/.spr, .png
        """
    )

    parser.add_argument('input', type=Path, help='Sprite text file or sheet')
    parser.add_argument('output', type=Path, nargs='?', help='Output file (optional for preview-only)')

    parser.add_argument('--name', '-n',
                        help='Sprite name for files without @sprite headers (default: file stem)')

    parser.add_argument('--only', action='append', dest='only', metavar='NAME',
                        help='Compile only this sprite (can repeat)')

    parser.add_argument('--align-tail', action='store_true',
                        help='Left-align a trailing partial byte (pixels MSB-first, zero padded)')

    parser.add_argument('--scale', '-s', type=int, default=1,
                        help='Upscale factor for PNG output (default: 1)')

    parser.add_argument('--preview', action='store_true',
                        help='Print compiled sprites in the terminal')

    parser.add_argument('--preview-only', action='store_true',
                        help='Only preview, don\'t write output')

    args = parser.parse_args(argv)

    # If no output specified, require --preview and enable preview-only mode
    if args.output is None:
        if not args.preview:
            parser.error("--preview is required when no output file is specified")
        args.preview_only = True

    if args.scale < 1:
        parser.error("--scale must be at least 1")

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    # ==========================================================================
    # Parse and compile
    # ==========================================================================

    try:
        text = args.input.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print(f"Error: {args.input}: not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
        return 1

    default_name = args.name or args.input.stem.replace("-", "_").replace(".", "_")

    try:
        sources = parse_sheet(text, default_name=default_name)

        if args.only:
            known = {s.name for s in sources}
            for name in args.only:
                if name not in known:
                    print(f"Warning: No sprite named '{name}' in {args.input}")
            sources = [s for s in sources if s.name in args.only]
            if not sources:
                print("Error: No sprites selected", file=sys.stderr)
                return 1

        sprites = compile_sources(sources, align_tail=args.align_tail)
    except SpriteError as e:
        print(f"Error: {_location(args.input, e)}: {e.message}", file=sys.stderr)
        return 1

    for name, sprite in sprites.items():
        print(f"Compiled {name}: {sprite.width}x{sprite.height}, "
              f"{sprite.bpp} bpp, {sprite.byte_length} bytes")

    # ==========================================================================
    # Preview
    # ==========================================================================

    if args.preview:
        preview_sprites(sprites)

    if args.preview_only:
        return 0

    # ==========================================================================
    # Write output (format based on extension)
    # ==========================================================================

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        size = write_output(args.output, sprites, args.input.name, scale=args.scale)
    except (ValueError, OSError) as e:
        print(f"Error: {args.output}: {e}", file=sys.stderr)
        return 1

    print(f"Created: {args.output} ({size} bytes)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
