from pathlib import Path

from PIL import Image

from asciiraster.errors import OutputWriteError

OUTPUT_NAME = "ascii.png"


def save_png(canvas: Image.Image, path: str | Path = OUTPUT_NAME) -> Path:
    """Write canvas as a PNG, replacing any existing file at path."""
    path = Path(path)
    try:
        canvas.save(path, format="PNG")
    except OSError as e:
        raise OutputWriteError(f"Error writing output file: {e}") from e
    return path
