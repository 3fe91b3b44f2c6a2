"""Raster engine.

``RasterEngine`` owns the pixel store, the stroke state and the
configuration, and drives a :class:`pixel_pencil.surface.RenderSurface`.

Rendering contract:

* Painting a cell writes it into the store with the current color and fills
  exactly that cell's footprint on the surface. Neighbors are never redrawn.
* Cells whose footprint lies entirely outside the surface extent are dropped
  silently; strokes may legitimately leave the surface.
* A full redraw clears the whole surface, then fills every stored cell with
  its stored color at the current cell size. Clearing, loading and changing
  the cell size all end in a full redraw.

Pointer events are processed one at a time to completion; a move runs its
whole rasterize-and-paint loop before returning.
"""

import logging
import math
from dataclasses import replace
from typing import List, Optional

from pixel_pencil.components import Cell, Rect, SurfacePoint
from pixel_pencil.config import PencilConfig, validate_cell_size
from pixel_pencil.input import (
    EventSource,
    PointerDown,
    PointerEvent,
    PointerMove,
    PointerUp,
    Unsubscribe,
)
from pixel_pencil.store import PixelStore
from pixel_pencil.stroke import Idle, StrokeState, Stroking, drag, press, release
from pixel_pencil.surface import RenderSurface
from pixel_pencil.types import Color, PixelDict, PixelMap

logger = logging.getLogger(__name__)


class RasterEngine:
    surface: RenderSurface

    def __init__(
        self, surface: RenderSurface, config: Optional[PencilConfig] = None
    ) -> None:
        self.surface = surface
        self._config = config or PencilConfig()
        self._store = PixelStore()
        self._stroke: StrokeState = Idle()

    # --- Configuration ---

    @property
    def config(self) -> PencilConfig:
        return self._config

    @property
    def color(self) -> Color:
        return self._config.color

    @property
    def cell_size(self) -> float:
        return self._config.cell_size

    def set_color(self, color: Color) -> None:
        """Use ``color`` for subsequent paints. Stored cells keep their color."""
        self._config = replace(self._config, color=color)

    def set_cell_size(self, cell_size: float) -> None:
        """Change the cell size and redraw everything at the new footprint.

        Raises:
            ValueError: If ``cell_size`` is not a positive number.
        """
        validate_cell_size(cell_size)
        logger.debug("Cell size %s -> %s", self._config.cell_size, cell_size)
        self._config = replace(self._config, cell_size=cell_size)
        self.full_redraw()

    # --- Stroke state ---

    @property
    def stroke(self) -> StrokeState:
        return self._stroke

    @property
    def is_stroking(self) -> bool:
        return isinstance(self._stroke, Stroking)

    @property
    def store(self) -> PixelStore:
        return self._store

    # --- Geometry ---

    def cell_at(self, point: SurfacePoint) -> Cell:
        """Return the grid cell under a surface-space point."""
        size = self._config.cell_size
        return Cell(math.floor(point.x / size), math.floor(point.y / size))

    def cell_rect(self, cell: Cell) -> Rect:
        """Return the surface-space footprint of ``cell``."""
        size = self._config.cell_size
        return Rect(cell.x * size, cell.y * size, size, size)

    def in_bounds(self, cell: Cell) -> bool:
        """Return True unless the cell's footprint lies entirely off the surface."""
        rect = self.cell_rect(cell)
        extent = self.surface.surface_extent()
        return (
            rect.x < extent.width
            and rect.y < extent.height
            and rect.right > 0
            and rect.bottom > 0
        )

    # --- Painting ---

    def paint_cell(self, cell: Cell) -> bool:
        """Store and render ``cell`` with the current color.

        Returns:
            bool: False if the cell was dropped by the bounds policy.
        """
        if not self.in_bounds(cell):
            logger.debug("Dropping out-of-bounds cell (%d, %d)", cell.x, cell.y)
            return False
        color = self._config.color
        self._store.set(cell.x, cell.y, color)
        self.surface.fill_region(self.cell_rect(cell), color)
        return True

    def paint_cells(self, cells: List[Cell]) -> int:
        """Paint ``cells`` in order; later paints win. Returns the painted count."""
        return sum(1 for cell in cells if self.paint_cell(cell))

    def full_redraw(self) -> None:
        """Clear the surface and re-render every stored cell."""
        logger.debug(
            "Full redraw of %d cells at cell size %s",
            len(self._store),
            self._config.cell_size,
        )
        self.surface.clear_region(self.surface.surface_extent().rect())
        for cell, color in self._store.cells():
            self.surface.fill_region(self.cell_rect(cell), color)

    # --- Pointer input ---

    def pointer_down(self, point: SurfacePoint) -> None:
        if self.is_stroking:
            logger.debug("Pointer down during a stroke; restarting stroke")
        self._stroke, path = press(self._stroke, self.cell_at(point))
        self.paint_cells(path)

    def pointer_move(self, point: SurfacePoint) -> None:
        if not self.is_stroking:
            return
        self._stroke, path = drag(self._stroke, self.cell_at(point))
        self.paint_cells(path)

    def pointer_up(self) -> None:
        self._stroke = release(self._stroke)

    def handle_event(self, event: PointerEvent) -> None:
        """Dispatch a pointer event dataclass to the matching handler.

        Raises:
            TypeError: If ``event`` is not a pointer event.
        """
        if isinstance(event, PointerDown):
            self.pointer_down(event.point)
        elif isinstance(event, PointerMove):
            self.pointer_move(event.point)
        elif isinstance(event, PointerUp):
            self.pointer_up()
        else:
            raise TypeError(f"Unsupported pointer event: {event!r}")

    def attach(self, source: EventSource) -> Unsubscribe:
        """Subscribe to ``source``; call the returned function to detach."""
        return source.subscribe(self.handle_event)

    # --- Bulk state ---

    def clear(self) -> None:
        """Erase every pixel and the surface."""
        self._store.clear()
        self.full_redraw()

    def load_pixels(self, pixels: PixelMap) -> None:
        """Replace the drawing with a copy of ``pixels`` (``pixels[x][y] = color``)."""
        self._store.load(pixels)
        logger.debug("Loaded %d cells", len(self._store))
        self.full_redraw()

    def get_pixels(self) -> PixelDict:
        """Return a deep copy of the drawing as ``pixels[x][y] = color``."""
        return self._store.snapshot()
