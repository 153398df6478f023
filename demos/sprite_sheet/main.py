"""
Sprite Sheet Demo
=================
Compiles sprites.txt, prints a preview, writes a sprite asset and reads
it back.

Usage:
    python demos/sprite_sheet/main.py [OUTPUT_DIR]
"""

import sys
from pathlib import Path

from spritec import SpriteAsset, compile_sheet, write_asset
from spritec.cli import preview_sprites

SHEET_PATH = Path(__file__).with_name("sprites.txt")


def run(output_dir: Path) -> dict:
    sprites = compile_sheet(SHEET_PATH.read_text(encoding="utf-8"))
    preview_sprites(sprites)

    output_dir.mkdir(parents=True, exist_ok=True)
    asset_path = output_dir / "sprites.bin"
    size = write_asset(asset_path, sprites)
    print(f"Created: {asset_path} ({size} bytes)")

    with SpriteAsset(asset_path) as asset:
        for name in asset.names():
            loaded = asset.get(name)
            status = "OK" if loaded == sprites[name] else "MISMATCH"
            print(f"  {name:<12} {loaded.width:>3}x{loaded.height:<3} {status}")

    return sprites


if __name__ == "__main__":
    run(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("build"))
