"""Rendering subpackage.

Concrete :class:`pixel_pencil.surface.RenderSurface` implementations:

* :class:`ImageSurface` draws onto a Pillow RGBA image and exports NumPy
  arrays.
* :class:`RecordingSurface` records clear / fill calls without drawing.
"""

from .image import ImageSurface
from .recording import ClearCall, FillCall, RecordingSurface

__all__ = [
    "ClearCall",
    "FillCall",
    "ImageSurface",
    "RecordingSurface",
]
