import runpy
from pathlib import Path

from spritec import BitsPerPixel, compile_sheet

DEMO_DIR = Path(__file__).resolve().parents[1] / "demos" / "sprite_sheet"


def test_demo_sheet_compiles():
    sprites = compile_sheet((DEMO_DIR / "sprites.txt").read_text(encoding="utf-8"))
    assert list(sprites) == ["smiley", "arrow_up", "checker"]
    assert sprites["smiley"].shape == (8, 8)
    assert sprites["smiley"].bpp == BitsPerPixel.TWO
    assert sprites["arrow_up"].shape == (7, 6)
    assert sprites["checker"].data == b"\x5a\x5a"


def test_demo_run(tmp_path, capsys):
    module = runpy.run_path(str(DEMO_DIR / "main.py"))
    sprites = module["run"](tmp_path)
    assert (tmp_path / "sprites.bin").exists()
    assert "MISMATCH" not in capsys.readouterr().out
    assert len(sprites) == 3
