import shutil
import subprocess
from pathlib import Path

from PIL import ImageFont

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "C:/Windows/Fonts/consola.ttf",
]
FC_MATCH_TIMEOUT = 5.0


def find_monospace_font() -> str | None:
    """Locate a monospace font file, asking fontconfig if no well-known path exists."""
    for path in _FONT_CANDIDATES:
        if Path(path).exists():
            return path
    if shutil.which("fc-match"):
        try:
            result = subprocess.run(
                ["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True, timeout=FC_MATCH_TIMEOUT
            )
        except subprocess.TimeoutExpired:
            return None
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
    return None


def load_monospace_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a monospace font at the given pixel size, falling back to Pillow's bundled font."""
    path = find_monospace_font()
    if path is not None:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            pass
    return ImageFont.load_default(size=size)
