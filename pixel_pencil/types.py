"""Common type aliases.

``Color`` is opaque to the engine: it is stored and handed to the render
surface untouched, so any value the surface understands is acceptable (CSS
names and hex strings for the Pillow surface, RGB(A) tuples as well).
"""

from typing import Dict, Mapping, Tuple, Union

Color = Union[str, Tuple[int, ...]]

# x -> y -> color
PixelMap = Mapping[int, Mapping[int, Color]]
PixelDict = Dict[int, Dict[int, Color]]
