"""Sparse pixel store.

Colors are kept in a two-level persistent map ``x -> y -> color``. A cell is
present only once it has been drawn; absence means *unpainted*, not a default
color. Because the maps are ``pyrsistent.PMap`` values, every write replaces
the root map and nothing handed out of the store can alias live state.

The store does no bounds checking and no color validation; the bounds policy
belongs to :class:`pixel_pencil.engine.RasterEngine`.
"""

from typing import Iterator, Optional, Tuple

from pyrsistent import pmap, thaw
from pyrsistent.typing import PMap

from pixel_pencil.components import Cell
from pixel_pencil.types import Color, PixelDict, PixelMap


class PixelStore:
    _pixels: PMap[int, PMap[int, Color]]

    def __init__(self) -> None:
        self._pixels = pmap()

    def get(self, x: int, y: int) -> Optional[Color]:
        """Return the color at ``(x, y)`` or ``None`` if unpainted."""
        column = self._pixels.get(x)
        if column is None:
            return None
        return column.get(y)

    def set(self, x: int, y: int, color: Color) -> None:
        """Paint ``(x, y)``, overwriting any existing color."""
        column: PMap[int, Color] = self._pixels.get(x, pmap())
        self._pixels = self._pixels.set(x, column.set(y, color))

    def clear(self) -> None:
        self._pixels = pmap()

    def snapshot(self) -> PixelDict:
        """Return a deep copy of the store as plain nested dicts."""
        return thaw(self._pixels)

    def load(self, mapping: PixelMap) -> None:
        """Replace the contents with a copy of ``mapping``.

        Keys are coerced with ``int()`` so payloads whose keys became strings
        (e.g. after a JSON round-trip) load as integer coordinates. Empty rows
        are dropped. Colors are taken as-is.
        """
        pixels = {}
        for x, column in mapping.items():
            row = {int(y): color for y, color in column.items()}
            if row:
                pixels[int(x)] = pmap(row)
        self._pixels = pmap(pixels)

    def cells(self) -> Iterator[Tuple[Cell, Color]]:
        """Yield every painted cell with its color."""
        for x, column in self._pixels.items():
            for y, color in column.items():
                yield Cell(x, y), color

    def __len__(self) -> int:
        return sum(len(column) for column in self._pixels.values())

    def __contains__(self, cell: object) -> bool:
        if isinstance(cell, Cell):
            x, y = cell.x, cell.y
        elif isinstance(cell, tuple) and len(cell) == 2:
            x, y = cell
        else:
            return False
        return self.get(x, y) is not None
