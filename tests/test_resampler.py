import pytest
from PIL import Image

from asciiraster.errors import WidthError
from asciiraster.model import RenderSettings
from asciiraster.resampler import grid_size, resample, validate_width


@pytest.mark.parametrize("value", ["149", "501", "abc", "-10", "0", "", "12.5"])
def test_invalid_widths_rejected(value):
    with pytest.raises(WidthError):
        validate_width(value)


@pytest.mark.parametrize("value, expected", [("150", 150), ("500", 500), (" 320 ", 320), (200, 200)])
def test_valid_widths_accepted(value, expected):
    assert validate_width(value) == expected


def test_non_numeric_message():
    with pytest.raises(WidthError, match="positive number"):
        validate_width("abc")


def test_out_of_range_message():
    with pytest.raises(WidthError, match="between 150 and 500"):
        validate_width("501")


def test_width_error_is_value_error():
    with pytest.raises(ValueError):
        validate_width("0")


def test_custom_bounds():
    settings = RenderSettings(min_width=10, max_width=20)
    assert validate_width("10", settings) == 10
    with pytest.raises(WidthError, match="between 10 and 20"):
        validate_width("21", settings)


def test_grid_size_halves_rows():
    assert grid_size(1000, 500, 200) == (200, 50)


def test_grid_size_floors():
    # 333 * 150 / 1000 * 0.5 = 24.975
    assert grid_size(1000, 333, 150) == (150, 24)


def test_grid_size_keeps_at_least_one_row():
    assert grid_size(10000, 10, 150) == (150, 1)


def test_grid_size_custom_aspect():
    assert grid_size(100, 100, 150, aspect_ratio=1.0) == (150, 150)


def test_resample_to_exact_grid():
    img = Image.new("RGB", (1000, 500), (10, 20, 30))
    small = resample(img, 200)
    assert small.size == (200, 50)
    assert small.getpixel((0, 0)) == (10, 20, 30)


def test_resample_upscales_tiny_image():
    img = Image.new("RGB", (2, 2), (0, 0, 0))
    assert resample(img, 150).size == (150, 75)


@pytest.mark.parametrize("value", ["1_50", "+150", "١٥٠", "150px", "1 50"])
def test_only_plain_ascii_digits_accepted(value):
    with pytest.raises(WidthError, match="positive number"):
        validate_width(value)
