"""Headless render surface that records every call.

Useful for hosts that forward draw operations elsewhere (e.g. over a socket
to a browser canvas) and for asserting on exactly what the engine asked to
draw.
"""

from dataclasses import dataclass
from typing import List

from pixel_pencil.components import Extent, Rect
from pixel_pencil.types import Color


@dataclass(frozen=True)
class ClearCall:
    rect: Rect


@dataclass(frozen=True)
class FillCall:
    rect: Rect
    color: Color


SurfaceCall = ClearCall | FillCall


class RecordingSurface:
    calls: List[SurfaceCall]

    def __init__(self, width: float, height: float) -> None:
        self.extent = Extent(width, height)
        self.calls = []

    def clear_region(self, rect: Rect) -> None:
        self.calls.append(ClearCall(rect))

    def fill_region(self, rect: Rect, color: Color) -> None:
        self.calls.append(FillCall(rect, color))

    def surface_extent(self) -> Extent:
        return self.extent

    @property
    def fills(self) -> List[FillCall]:
        return [call for call in self.calls if isinstance(call, FillCall)]

    @property
    def clears(self) -> List[ClearCall]:
        return [call for call in self.calls if isinstance(call, ClearCall)]

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()
