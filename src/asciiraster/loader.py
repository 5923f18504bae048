from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciiraster.errors import ImageDecodeError


def load_image(path: str | Path) -> Image.Image:
    """Decode an image file into an RGBA image."""
    try:
        with Image.open(path) as image:
            # Image.open is lazy; convert forces the full decode while the file is open
            return image.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Could not read image '{path}': {e}") from e
