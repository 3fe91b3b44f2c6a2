"""Stroke state machine.

A stroke is either ``Idle`` or ``Stroking`` with the last cell the pointer
reported. Modelling it as a tagged variant rules out an "active" flag without
a valid last cell.

The transitions are pure: each takes the previous state plus the pointer's
current cell and returns the next state together with the cells that must be
painted, in order. :class:`pixel_pencil.engine.RasterEngine` owns the state
and performs the painting.
"""

from dataclasses import dataclass
from typing import List, Tuple

from pixel_pencil.components import Cell
from pixel_pencil.raster import rasterize_line


@dataclass(frozen=True)
class Idle:
    """No stroke in progress."""


@dataclass(frozen=True)
class Stroking:
    """Stroke in progress.

    Attributes:
        last_cell: Cell the pointer was last reported over.
    """

    last_cell: Cell


StrokeState = Idle | Stroking

Transition = Tuple[StrokeState, List[Cell]]


def press(state: StrokeState, cell: Cell) -> Transition:
    """Start a stroke at ``cell``.

    A press while already stroking ends the current stroke and starts a new
    one; no segment is drawn between the two.
    """
    return Stroking(last_cell=cell), [cell]


def drag(state: StrokeState, cell: Cell) -> Transition:
    """Extend the stroke to ``cell``.

    Moves while idle, or moves that stay within the last cell, paint nothing.
    """
    if not isinstance(state, Stroking) or state.last_cell == cell:
        return state, []
    return Stroking(last_cell=cell), rasterize_line(state.last_cell, cell)


def release(state: StrokeState) -> StrokeState:
    """End the stroke. Painting has already happened on press and drag."""
    return Idle()
