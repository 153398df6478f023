"""
Sprite Previews
===============
Terminal and image renderings of compiled sprites, for checking a sheet
without running the target renderer.

Pixels come from Sprite.rows(), which honours how the last byte was packed.
"""

from PIL import Image

# Index 0..3 shading for terminal output (lightest to darkest)
DEFAULT_SHADES = "·░▒█"

# Default 4-color palette (0xRRGGBB), index 0 first
DEFAULT_PALETTE = (
    0xE0F8CF,
    0x86C06C,
    0x306850,
    0x071821,
)


def render_text(sprite, shades: str = DEFAULT_SHADES) -> str:
    """Render a sprite as text, one character per pixel."""
    if len(shades) < (1 << sprite.bpp):
        raise ValueError(f"need {1 << sprite.bpp} shades for {sprite.bpp} bpp")
    return "\n".join("".join(shades[i] for i in row) for row in sprite.rows())


def _flat_palette(palette) -> list:
    flat = []
    for color in palette:
        flat.extend(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return flat


def render_image(sprite, palette=DEFAULT_PALETTE, scale: int = 1) -> Image.Image:
    """
    Render a sprite to a paletted Pillow image.

    Args:
        sprite: Compiled Sprite
        palette: Four 0xRRGGBB colors, one per index
        scale: Integer upscale factor (nearest neighbour)
    """
    if scale < 1:
        raise ValueError("scale must be >= 1")
    if len(palette) < (1 << sprite.bpp):
        raise ValueError(f"need {1 << sprite.bpp} palette colors for {sprite.bpp} bpp")

    img = Image.new("P", (sprite.width, sprite.height))
    img.putpalette(_flat_palette(palette))
    img.putdata([i for row in sprite.rows() for i in row])

    if scale > 1:
        img = img.resize((sprite.width * scale, sprite.height * scale), Image.NEAREST)
    return img


def render_strip(sprites, palette=DEFAULT_PALETTE, scale: int = 1, gap: int = 1) -> Image.Image:
    """Stack several sprites vertically into one image, separated by ``gap`` pixels."""
    images = [render_image(s, palette, scale) for s in sprites]
    if not images:
        raise ValueError("no sprites to render")

    width = max(img.width for img in images)
    height = sum(img.height for img in images) + gap * scale * (len(images) - 1)

    strip = Image.new("P", (width, height))
    strip.putpalette(_flat_palette(palette))

    y = 0
    for img in images:
        strip.paste(img, (0, y))
        y += img.height + gap * scale
    return strip
