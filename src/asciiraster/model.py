from dataclasses import dataclass

import numpy as np

from asciiraster.charsets import ASCII_RAMP


@dataclass(frozen=True)
class RenderSettings:
    ramp: str = ASCII_RAMP
    cell_width: int = 10
    cell_height: int = 18
    # Glyphs are roughly twice as tall as wide; halve the rows so output isn't stretched
    aspect_ratio: float = 0.5
    min_width: int = 150
    max_width: int = 500
    default_width: int = 500


DEFAULT_SETTINGS = RenderSettings()


@dataclass
class CellGrid:
    chars: list[str]  # one string per row
    colours: np.ndarray  # (rows, cols, 3) uint8

    @property
    def rows(self) -> int:
        return len(self.chars)

    @property
    def cols(self) -> int:
        return len(self.chars[0]) if self.chars else 0

    @property
    def text(self) -> str:
        return "".join(line + "\n" for line in self.chars)
