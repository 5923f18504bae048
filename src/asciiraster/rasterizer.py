from PIL import Image, ImageDraw, ImageFont

from asciiraster.fonts import load_monospace_font
from asciiraster.model import DEFAULT_SETTINGS, CellGrid, RenderSettings

BACKGROUND = (255, 255, 255)
FOREGROUND = (0, 0, 0)


def render_grid(
    grid: CellGrid,
    colour: bool = False,
    settings: RenderSettings = DEFAULT_SETTINGS,
    font: ImageFont.FreeTypeFont | ImageFont.ImageFont | None = None,
) -> Image.Image:
    """Draw a character grid onto a white canvas, one glyph per cell.

    With colour enabled each glyph takes its cell's source RGB, otherwise
    glyphs are black.
    """
    cw = settings.cell_width
    ch = settings.cell_height
    if font is None:
        font = load_monospace_font(ch)

    canvas = Image.new("RGB", (grid.cols * cw, grid.rows * ch), BACKGROUND)
    draw = ImageDraw.Draw(canvas)

    for y, line in enumerate(grid.chars):
        for x, char in enumerate(line):
            if char == " ":
                continue
            if colour:
                r, g, b = (int(v) for v in grid.colours[y, x])
                fill = (r, g, b)
            else:
                fill = FOREGROUND
            draw.text((x * cw, y * ch), char, fill=fill, font=font)
    return canvas
