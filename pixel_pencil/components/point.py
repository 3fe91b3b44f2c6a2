"""Surface-space pointer coordinate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SurfacePoint:
    """Continuous coordinate reported by the input source.

    Attributes:
        x: Horizontal offset from the surface's left edge.
        y: Vertical offset from the surface's top edge.
    """

    x: float
    y: float
