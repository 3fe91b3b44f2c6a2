"""Engine configuration.

``PencilConfig`` is a frozen value object. The engine swaps it with
``dataclasses.replace`` when the color or cell size changes, so a config
handed out by :attr:`pixel_pencil.engine.RasterEngine.config` is never
mutated behind the caller's back.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping

from pixel_pencil.types import Color


DEFAULT_CELL_SIZE: float = 1
DEFAULT_COLOR: Color = "black"


def validate_cell_size(cell_size: Any) -> float:
    """Return ``cell_size`` if it is a positive real number.

    Raises:
        ValueError: If ``cell_size`` is not a number or is not strictly positive.
    """
    if isinstance(cell_size, bool) or not isinstance(cell_size, Real):
        raise ValueError(f"Cell size must be a number, got {cell_size!r}")
    if not cell_size > 0:
        raise ValueError(f"Cell size must be positive, got {cell_size!r}")
    return cell_size


@dataclass(frozen=True)
class PencilConfig:
    """Pencil settings.

    Attributes:
        cell_size: Width and height of one grid cell in surface units.
        color: Color written into the store by subsequent paints.
    """

    cell_size: float = DEFAULT_CELL_SIZE
    color: Color = DEFAULT_COLOR

    def __post_init__(self) -> None:
        validate_cell_size(self.cell_size)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PencilConfig":
        """Build a config from a loose options mapping.

        Accepts ``cell_size`` (or its alias ``pixel_size``) and ``color``.
        Missing or falsy entries fall back to the defaults.
        """
        cell_size = options.get("cell_size") or options.get("pixel_size")
        color = options.get("color")
        return cls(
            cell_size=cell_size or DEFAULT_CELL_SIZE,
            color=color or DEFAULT_COLOR,
        )
