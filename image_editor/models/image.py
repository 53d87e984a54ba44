from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np

from .color import Color
from .errors import InvalidDimension, OutOfBounds

# Signed and wide enough that channel accumulation never wraps.
PIXEL_DTYPE = np.int64


@dataclass
class Image:
    """
    Fixed-size grid of colour triples (+ optional source path for bookkeeping).
    Cells are addressed as (x, y) with x in [0, width) and y in [0, height).
    """
    pixels: np.ndarray  # Shape (H, W, 3), dtype int64, RGB order.
    path: Path | None = None  # Source of the image.
    max_value: int = 255  # Max-channel token from the header.

    @classmethod
    def create(cls, width: int, height: int, max_value: int = 255) -> "Image":
        if width < 0 or height < 0:
            raise InvalidDimension(f"Invalid image dimensions: {width}x{height}")
        return cls(pixels=np.zeros((height, width, 3), dtype=PIXEL_DTYPE),
                   max_value=max_value)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would wrap negative indices, so reject them explicitly
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )

    def get(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self.pixels[y, x] = color.as_tuple()
