"""pixel_pencil
=================================

Sparse pixel-raster drawing engine: a sparse ``x -> y -> color`` store, an
integer line rasterizer that turns pointer drags into connected runs of
cells, and an engine that keeps a render surface in sync with the store::

    from pixel_pencil import RasterEngine, SurfacePoint
    from pixel_pencil.renderer import ImageSurface

    engine = RasterEngine(ImageSurface(64, 64))
    engine.set_cell_size(4)
    engine.pointer_down(SurfacePoint(1, 1))
    engine.pointer_move(SurfacePoint(40, 30))
    engine.pointer_up()
"""

from .components import Cell, Extent, Rect, SurfacePoint
from .config import PencilConfig
from .engine import RasterEngine
from .input import PointerDown, PointerEventBus, PointerMove, PointerUp, replay
from .raster import line_cells, rasterize_line
from .store import PixelStore
from .stroke import Idle, Stroking

__all__ = [
    "Cell",
    "Extent",
    "Idle",
    "PencilConfig",
    "PixelStore",
    "PointerDown",
    "PointerEventBus",
    "PointerMove",
    "PointerUp",
    "RasterEngine",
    "Rect",
    "Stroking",
    "SurfacePoint",
    "line_cells",
    "rasterize_line",
    "replay",
]
