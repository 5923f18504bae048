from pathlib import Path

import numpy as np
from PIL import Image

from asciiraster.encoder import OUTPUT_NAME, save_png
from asciiraster.loader import load_image
from asciiraster.luminance import map_grid
from asciiraster.model import DEFAULT_SETTINGS, CellGrid, RenderSettings
from asciiraster.rasterizer import render_grid
from asciiraster.resampler import resample, validate_width


def image_to_grid(image: Image.Image, cols: int, settings: RenderSettings = DEFAULT_SETTINGS) -> CellGrid:
    """Resample an image to one pixel per cell and map every cell to a ramp character."""
    small = resample(image.convert("RGB"), cols, settings)
    pixels = np.asarray(small, dtype=np.uint8)
    return CellGrid(chars=map_grid(pixels, settings.ramp), colours=pixels)


def image_to_ascii_png(
    image: Image.Image | str | Path,
    output: str | Path = OUTPUT_NAME,
    width: str | int | None = None,
    colour: bool = False,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> Path:
    cols = validate_width(settings.default_width if width is None else width, settings)
    if not isinstance(image, Image.Image):
        image = load_image(image)

    grid = image_to_grid(image, cols, settings)
    canvas = render_grid(grid, colour=colour, settings=settings)
    return save_png(canvas, output)
