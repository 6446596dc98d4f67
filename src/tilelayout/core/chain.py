"""Sibling chains: joining tiles along an axis and walking the result."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator

from ..errors import ChainConsistencyError

if TYPE_CHECKING:
    from .tile import Tile


class Axis(Enum):
    """An axis of space allocation.

    The value is the pair of link attribute names (backward, forward) that
    make up a chain along the axis.
    """

    HORIZONTAL = ("left", "right")
    VERTICAL = ("up", "down")

    @property
    def backward(self) -> str:
        return self.value[0]

    @property
    def forward(self) -> str:
        return self.value[1]


def _join(axis: Axis, tiles: tuple[Tile, ...]) -> None:
    for prev, tile in zip(tiles, tiles[1:]):
        setattr(prev, axis.forward, tile)
        setattr(tile, axis.backward, prev)


def join_horizontal(*tiles: Tile) -> None:
    """Join tiles left to right into a single horizontal chain.

    The first tile becomes the head and the last the tail. Existing links
    are overwritten, never merged: re-joining a tile that already sits in
    another chain leaves its old neighbour pointing at it. Callers must not
    rely on that stale link.

    Args:
        *tiles: Tiles in left-to-right order
    """
    _join(Axis.HORIZONTAL, tiles)


def join_vertical(*tiles: Tile) -> None:
    """Join tiles top to bottom into a single vertical chain.

    Same overwrite semantics as join_horizontal().

    Args:
        *tiles: Tiles in top-to-bottom order
    """
    _join(Axis.VERTICAL, tiles)


def chain_head(tile: Tile, axis: Axis) -> Tile:
    """Walk backward along axis until no further neighbour exists."""
    head = tile
    while getattr(head, axis.backward) is not None:
        head = getattr(head, axis.backward)
    return head


def iter_chain(tile: Tile, axis: Axis) -> Iterator[Tile]:
    """Iterate over the chain tile belongs to, from head to tail.

    The given tile is not the starting point, just a link in the chain.
    Every call rewinds to the head again, so a new iteration reflects any
    joins made since the last one.

    Args:
        tile: Any member of the chain
        axis: Which chain to walk

    Yields:
        Chain members in head-to-tail order
    """
    node: Tile | None = chain_head(tile, axis)
    while node is not None:
        yield node
        node = getattr(node, axis.forward)


def iter_horizontal(tile: Tile) -> Iterator[Tile]:
    """Iterate over the horizontal chain of tile, leftmost first."""
    return iter_chain(tile, Axis.HORIZONTAL)


def iter_vertical(tile: Tile) -> Iterator[Tile]:
    """Iterate over the vertical chain of tile, topmost first."""
    return iter_chain(tile, Axis.VERTICAL)


def validate_chain(tile: Tile, axis: Axis) -> None:
    """Check that the chain of tile is consistently linked.

    Meant for debugging and tests; size resolution never calls it.

    Raises:
        ChainConsistencyError: If a forward link is not mirrored by the
            neighbour's backward link, or the chain walked from the head
            does not reach tile (a dangling link left by a re-join)
    """
    seen = False
    for node in iter_chain(tile, axis):
        if node is tile:
            seen = True
        nxt = getattr(node, axis.forward)
        if nxt is not None and getattr(nxt, axis.backward) is not node:
            raise ChainConsistencyError(
                f"{axis.name.lower()} link {node.name!r} -> {nxt.name!r} "
                f"is not mirrored by {nxt.name!r}.{axis.backward}"
            )
    if not seen:
        raise ChainConsistencyError(
            f"tile {tile.name!r} is not reachable from the head of its "
            f"{axis.name.lower()} chain"
        )
