import pytest
from PIL import Image

from asciiraster.fonts import load_monospace_font
from asciiraster.model import DEFAULT_SETTINGS


@pytest.fixture
def font():
    return load_monospace_font(DEFAULT_SETTINGS.cell_height)


@pytest.fixture
def black_image_path(tmp_path):
    path = tmp_path / "black.png"
    Image.new("RGB", (2, 2), (0, 0, 0)).save(path)
    return path


@pytest.fixture
def gradient_image():
    """Horizontal black-to-white ramp, 300x100."""
    img = Image.new("RGB", (300, 100))
    pixels = img.load()
    for x in range(300):
        v = x * 255 // 299
        for y in range(100):
            pixels[x, y] = (v, v, v)
    return img
