"""Cell component.

Immutable integer grid coordinates addressing the sparse pixel store. A cell
is grid-space, not surface-space: its on-screen footprint depends on the
engine's current cell size.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left). May be negative for strokes dragged off
            the surface.
        y: Row index (0 at top).
    """

    x: int
    y: int
