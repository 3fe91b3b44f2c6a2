"""Render surface contract.

The engine never touches a concrete drawing API. It needs exactly three
capabilities from its host surface: clear a region, fill a rectangle with a
color, and report the renderable extent for bounds checks. Calls are made
synchronously from within paint / redraw operations.

Concrete implementations live in :mod:`pixel_pencil.renderer`.
"""

from typing import Protocol

from pixel_pencil.components import Extent, Rect
from pixel_pencil.types import Color


class RenderSurface(Protocol):
    def clear_region(self, rect: Rect) -> None: ...

    def fill_region(self, rect: Rect, color: Color) -> None: ...

    def surface_extent(self) -> Extent: ...
