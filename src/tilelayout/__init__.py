"""Tile-based space allocation for terminal UI layouts."""

from .core import (
    Axis,
    Tile,
    iter_chain,
    iter_horizontal,
    iter_vertical,
    join_horizontal,
    join_vertical,
    validate_chain,
)
from .errors import ChainConsistencyError, LayoutDefinitionError, TileLayoutError
from .layout import LayoutLoader
from .style import StyleLike, set_style_height, set_style_size, set_style_width

__all__ = [
    "Axis",
    "ChainConsistencyError",
    "LayoutDefinitionError",
    "LayoutLoader",
    "StyleLike",
    "Tile",
    "TileLayoutError",
    "iter_chain",
    "iter_horizontal",
    "iter_vertical",
    "join_horizontal",
    "join_vertical",
    "set_style_height",
    "set_style_size",
    "set_style_width",
    "validate_chain",
]
