import numpy as np

from asciiraster.charsets import ASCII_RAMP

# ITU-R BT.709 luma weights, scaled by 10^4 so the index is computed exactly in integers
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)
_SCALED_WEIGHTS = (2126, 7152, 722)
_SCALE = 10_000


def luma(r: int, g: int, b: int) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def _ramp_index(scaled_gray, ramp_length: int):
    # floor(gray / 255 * (n - 1)) without float rounding at the top of the range
    return scaled_gray * (ramp_length - 1) // (255 * _SCALE)


def pixel_to_char(r: int, g: int, b: int, ramp: str = ASCII_RAMP) -> str:
    """Map an RGB pixel to a ramp character, darkest first."""
    wr, wg, wb = _SCALED_WEIGHTS
    scaled = wr * int(r) + wg * int(g) + wb * int(b)
    return ramp[_ramp_index(scaled, len(ramp))]


def map_grid(pixels: np.ndarray, ramp: str = ASCII_RAMP) -> list[str]:
    """Map a (rows, cols, 3 or 4) pixel array to one string per row.

    Alpha, when present, is ignored. The result matches calling
    pixel_to_char on every cell.
    """
    rgb = np.asarray(pixels)[..., :3].astype(np.int64)
    indices = _ramp_index(rgb @ np.array(_SCALED_WEIGHTS, dtype=np.int64), len(ramp))
    lookup = np.array(list(ramp))
    return ["".join(row) for row in lookup[indices]]
