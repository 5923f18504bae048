import math
import re

from PIL import Image

from asciiraster.errors import WidthError
from asciiraster.model import DEFAULT_SETTINGS, RenderSettings


def validate_width(value: str | int, settings: RenderSettings = DEFAULT_SETTINGS) -> int:
    """Parse a column count and check it lies within the configured bounds."""
    text = str(value).strip()
    if not re.fullmatch(r"-?\d+", text, re.ASCII):
        raise WidthError("Width must be a positive number")
    cols = int(text)
    if cols <= 0:
        raise WidthError("Width must be a positive number")
    if cols < settings.min_width or cols > settings.max_width:
        raise WidthError(f"Width must be between {settings.min_width} and {settings.max_width} characters")
    return cols


def grid_size(
    width: int, height: int, cols: int, aspect_ratio: float = DEFAULT_SETTINGS.aspect_ratio
) -> tuple[int, int]:
    """Return (cols, rows) for an image of the given pixel size.

    Very wide images would produce zero rows; at least one row is kept so
    the output is always a drawable image.
    """
    rows = math.floor(height * cols / width * aspect_ratio)
    return cols, max(rows, 1)


def resample(image: Image.Image, cols: int, settings: RenderSettings = DEFAULT_SETTINGS) -> Image.Image:
    """Resize image to exactly one pixel per character cell."""
    size = grid_size(image.width, image.height, cols, settings.aspect_ratio)
    return image.resize(size, Image.LANCZOS)
