"""pixel_pencil.components
=================================

Aggregate import surface for the value dataclasses shared by the store,
rasterizer, engine and render surfaces.

Grid-space and surface-space coordinates are kept as separate types so a
pointer position can never be mistaken for a cell address::

    from pixel_pencil.components import Cell, SurfacePoint, Rect

All classes are frozen ``@dataclass`` value objects with no behavior beyond
small derived properties.
"""

from .cell import Cell
from .point import SurfacePoint
from .rect import Extent, Rect

__all__ = [
    "Cell",
    "Extent",
    "Rect",
    "SurfacePoint",
]
