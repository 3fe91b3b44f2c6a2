import numpy as np

from pixel_pencil.components import Extent, Rect
from pixel_pencil.config import PencilConfig
from pixel_pencil.engine import RasterEngine
from pixel_pencil.renderer import ImageSurface
from tests.test_utils import center_of

RED = [255, 0, 0, 255]
CLEAR = [0, 0, 0, 0]


def test_extent_matches_image() -> None:
    surface = ImageSurface(32, 16)
    assert surface.surface_extent() == Extent(32, 16)
    assert surface.to_array().shape == (16, 32, 4)
    assert surface.to_array().dtype == np.uint8


def test_fill_covers_exact_footprint() -> None:
    surface = ImageSurface(8, 8)
    surface.fill_region(Rect(2, 2, 2, 2), "red")
    arr = surface.to_array()
    assert arr[2:4, 2:4].tolist() == [[RED, RED], [RED, RED]]
    assert int(arr[:, :, 3].astype(bool).sum()) == 4


def test_fractional_footprint_expands_outward() -> None:
    surface = ImageSurface(8, 8)
    surface.fill_region(Rect(1.5, 0, 1.5, 1), "red")
    arr = surface.to_array()
    assert arr[0, 1].tolist() == RED
    assert arr[0, 2].tolist() == RED
    assert arr[0, 3].tolist() == CLEAR


def test_fill_is_clipped_to_image() -> None:
    surface = ImageSurface(4, 4)
    surface.fill_region(Rect(3, 3, 10, 10), "red")
    surface.fill_region(Rect(-10, -10, 5, 5), "red")
    arr = surface.to_array()
    assert arr[3, 3].tolist() == RED
    assert int(arr[:, :, 3].astype(bool).sum()) == 1


def test_clear_restores_background() -> None:
    surface = ImageSurface(4, 4, background="white")
    surface.fill_region(Rect(0, 0, 4, 4), "black")
    surface.clear_region(surface.surface_extent().rect())
    assert (surface.to_array() == 255).all()


def test_engine_stroke_on_image() -> None:
    surface = ImageSurface(40, 40)
    engine = RasterEngine(surface, PencilConfig(cell_size=4, color=(255, 0, 0, 255)))
    engine.pointer_down(center_of(0, 0, cell_size=4))
    engine.pointer_move(center_of(9, 9, cell_size=4))
    engine.pointer_up()
    arr = surface.to_array()
    for i in range(10):
        assert arr[i * 4, i * 4].tolist() == RED
        assert arr[i * 4 + 3, i * 4 + 3].tolist() == RED
    assert arr[0, 4].tolist() == CLEAR


def test_engine_cell_size_change_rescales_image() -> None:
    surface = ImageSurface(20, 20)
    engine = RasterEngine(surface, PencilConfig(cell_size=2, color="red"))
    engine.pointer_down(center_of(1, 1, cell_size=2))
    engine.pointer_up()
    assert int(surface.to_array()[:, :, 3].astype(bool).sum()) == 4
    engine.set_cell_size(5)
    arr = surface.to_array()
    assert int(arr[:, :, 3].astype(bool).sum()) == 25
    assert arr[5:10, 5:10, 0].tolist() == [[255] * 5] * 5
