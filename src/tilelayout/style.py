"""Copy resolved tile sizes onto style objects."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from .core.tile import Tile

S = TypeVar("S", bound="StyleLike")


@runtime_checkable
class StyleLike(Protocol):
    """Protocol for chainable style objects.

    Any class whose width/max_width/height/max_height setters return a style
    of the same kind satisfies this protocol.
    """

    def width(self, value: int) -> StyleLike: ...

    def max_width(self, value: int) -> StyleLike: ...

    def height(self, value: int) -> StyleLike: ...

    def max_height(self, value: int) -> StyleLike: ...


def set_style_width(style: S, tile: Tile) -> S:
    """Set width and max width of style to the width of tile."""
    w, _ = tile.get_size()
    return style.width(w).max_width(w)


def set_style_height(style: S, tile: Tile) -> S:
    """Set height and max height of style to the height of tile."""
    _, h = tile.get_size()
    return style.height(h).max_height(h)


def set_style_size(style: S, tile: Tile) -> S:
    """Set width, max width, height and max height of style to the tile's size."""
    w, h = tile.get_size()
    return style.width(w).max_width(w).height(h).max_height(h)
