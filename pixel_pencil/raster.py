"""Line rasterization.

Converts the segment between two grid cells into the 8-connected run of
cells a one-cell-wide stroke has to fill. The error accumulator is kept in
integers (scaled by ``2 * dx``) so the output is reproducible bit-for-bit;
``err > dx`` is the integer form of the classic ``|dy / dx|`` accumulator
exceeding one half.

Output order is deterministic but only the *set* of cells is symmetric under
swapping endpoints; callers should rely on coverage and connectivity, not on
ordering.
"""

from typing import Generator, List

from pixel_pencil.components import Cell


def line_cells(c0: Cell, c1: Cell) -> Generator[Cell, None, None]:
    """Yield the cells of the line from ``c0`` to ``c1`` (both inclusive).

    Traversal always runs toward increasing x; endpoints are swapped when
    ``c0`` lies right of ``c1``. Vertical segments keep the caller's order.

    Within one column the y coordinate advances while the accumulated error
    exceeds one half. Every intermediate staircase cell is yielded in that
    column; the cell reached by the final advance is yielded as the first
    cell of the next column, which keeps pure diagonals free of doubled steps.
    """
    if c0.x > c1.x:
        c0, c1 = c1, c0
    x0, y0, x1, y1 = c0.x, c0.y, c1.x, c1.y
    y_sign = 1 if y0 < y1 else -1

    if x0 == x1:
        for y in range(y0, y1 + y_sign, y_sign):
            yield Cell(x0, y)
        return

    dx = x1 - x0
    dy = abs(y1 - y0)
    err = 0
    y = y0
    for x in range(x0, x1 + 1):
        yield Cell(x, y)
        err += 2 * dy
        advanced = False
        while err > dx and y != y1:
            if advanced:
                yield Cell(x, y)
            y += y_sign
            err -= 2 * dx
            advanced = True


def rasterize_line(c0: Cell, c1: Cell) -> List[Cell]:
    """Return :func:`line_cells` as a list."""
    return list(line_cells(c0, c1))


def is_connected(path: List[Cell]) -> bool:
    """Return True if consecutive cells differ by at most one on each axis."""
    return all(
        abs(a.x - b.x) <= 1 and abs(a.y - b.y) <= 1 for a, b in zip(path, path[1:])
    )
