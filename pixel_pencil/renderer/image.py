"""Pillow-backed render surface.

Cells are filled as solid rectangles on an RGBA image. Footprints with
fractional coordinates (non-integer cell sizes) are expanded outward to whole
pixels so adjacent cells leave no seams.
"""

import math
from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from pixel_pencil.components import Extent, Rect
from pixel_pencil.types import Color

UInt8Array = npt.NDArray[np.uint8]

TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)


class ImageSurface:
    width: int
    height: int
    background: Color
    image: Image.Image

    def __init__(
        self, width: int, height: int, background: Color = TRANSPARENT
    ) -> None:
        self.width = width
        self.height = height
        self.background = background
        self.image = Image.new("RGBA", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

    def _box(self, rect: Rect) -> Tuple[int, int, int, int] | None:
        """Return the inclusive pixel box covering ``rect``, clipped to the image."""
        x0 = max(math.floor(rect.x), 0)
        y0 = max(math.floor(rect.y), 0)
        x1 = min(math.ceil(rect.right), self.width) - 1
        y1 = min(math.ceil(rect.bottom), self.height) - 1
        if x1 < x0 or y1 < y0:
            return None
        return x0, y0, x1, y1

    def clear_region(self, rect: Rect) -> None:
        box = self._box(rect)
        if box is not None:
            self._draw.rectangle(box, fill=self.background)

    def fill_region(self, rect: Rect, color: Color) -> None:
        box = self._box(rect)
        if box is not None:
            self._draw.rectangle(box, fill=color)

    def surface_extent(self) -> Extent:
        return Extent(self.width, self.height)

    def to_array(self) -> UInt8Array:
        """Return the surface as an ``(height, width, 4)`` uint8 array."""
        return np.array(self.image, dtype=np.uint8)
