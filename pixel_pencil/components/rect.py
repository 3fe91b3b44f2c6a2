"""Surface-space rectangles.

``Rect`` is the footprint of a cell (or of the whole surface) handed to a
render surface. ``Extent`` is the renderable size reported by the surface and
used by the engine's bounds policy.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, top-left origin.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal size.
        height: Vertical size.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Extent:
    """Renderable surface dimensions."""

    width: float
    height: float

    def rect(self) -> Rect:
        """Return the rectangle covering the full surface."""
        return Rect(0, 0, self.width, self.height)
