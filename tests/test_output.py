from PIL import Image

from spritec import compile_sheet, text_sprite
from spritec.codegen import c_header, python_module
from spritec.preview import DEFAULT_PALETTE, render_image, render_strip, render_text

SHEET = """\
@sprite grid
    0011
    2233
@sprite bar
    ##..##..##..##..
"""


def test_python_module_rebuilds_sprites():
    sprites = compile_sheet(SHEET)
    source = python_module(sprites, "demo.txt")
    assert "demo.txt" in source

    namespace = {}
    exec(compile(source, "generated.py", "exec"), namespace)
    assert namespace["grid"] == sprites["grid"]
    assert namespace["bar"] == sprites["bar"]
    assert namespace["__all__"] == ["grid", "bar"]


def test_c_header():
    sprites = compile_sheet(SHEET)
    header = c_header(sprites, "demo.txt", guard="DEMO_H")
    assert "#ifndef DEMO_H" in header
    assert "static const uint8_t grid[1] = {" in header
    assert "    0x1B," in header
    assert "#define GRID_WIDTH 2" in header
    assert "#define GRID_FLAGS 1" in header
    assert "#define BAR_FLAGS 0" in header
    assert "static const uint8_t bar[1] = {" in header
    assert "    0x55," in header


def test_c_header_wraps_long_arrays():
    sprite = text_sprite("\n" + "0011" * 16 + "\n" + "2233" * 16 + "\n")
    header = c_header({"wide": sprite})
    rows = [line for line in header.splitlines() if line.startswith("    0x")]
    assert len(rows) == 2
    assert rows[0].count("0x") == 12


def test_render_text():
    sprite = text_sprite("\n0011\n2233\n")
    assert render_text(sprite) == "·░\n▒█"
    assert render_text(sprite, shades="abcd") == "ab\ncd"


def test_render_image():
    sprite = text_sprite("\n0011\n2233\n")
    img = render_image(sprite)
    assert img.mode == "P"
    assert img.size == (2, 2)
    assert img.getpixel((1, 1)) == 3

    rgb = img.convert("RGB")
    assert rgb.getpixel((0, 0)) == (0xE0, 0xF8, 0xCF)
    assert rgb.getpixel((1, 1)) == (0x07, 0x18, 0x21)
    assert len(DEFAULT_PALETTE) == 4


def test_render_image_scaled():
    sprite = text_sprite("\n0011\n2233\n")
    img = render_image(sprite, scale=4)
    assert img.size == (8, 8)
    assert img.getpixel((7, 7)) == 3
    assert img.getpixel((0, 7)) == 2


def test_render_strip():
    sprites = compile_sheet(SHEET)
    strip = render_strip(list(sprites.values()), scale=2, gap=1)
    assert isinstance(strip, Image.Image)
    # grid 2x2 and bar 8x1, scaled x2, one scaled gap row between
    assert strip.size == (16, 4 + 2 + 2)


def test_unaligned_sprite_renders_and_regenerates():
    sprite = text_sprite("\n001100\n110011\n")
    assert render_text(sprite) == "·░·\n░·░"
    assert render_image(sprite).getpixel((1, 0)) == 1

    source = python_module({"odd": sprite})
    assert "tail_aligned=False" in source
    namespace = {}
    exec(compile(source, "generated.py", "exec"), namespace)
    assert namespace["odd"] == sprite
    assert namespace["odd"].rows() == [[0, 1, 0], [1, 0, 1]]


def test_c_header_empty_sprite():
    header = c_header({"empty": text_sprite("\n\n")})
    assert "#define EMPTY_WIDTH 0" in header
    assert "empty[" not in header
    assert "// empty: no pixel data" in header
