"""Allocation map: where each tile of a resolved tree ends up.

This is an inspection aid for layouts. It places tiles by their resolved
sizes (a tile starts where the preceding members of its chains end, inside
its parent) and paints them into a numpy grid, one cell per character.
"""

from __future__ import annotations

import string

import numpy as np
from numpy.typing import NDArray

from .core.chain import Axis, iter_chain
from .core.tile import Tile

EMPTY = -1

# One character per tile index in render_ascii()
PALETTE = string.ascii_uppercase + string.ascii_lowercase + string.digits


def _offset(tile: Tile, axis: Axis) -> int:
    index = 0 if axis is Axis.HORIZONTAL else 1
    offset = 0
    for sibling in iter_chain(tile, axis):
        if sibling is tile:
            break
        offset += sibling.get_size()[index]
    return offset


def tile_origin(tile: Tile, relative_to: Tile | None = None) -> tuple[int, int]:
    """Compute the top-left corner of a tile.

    Args:
        tile: The tile to place
        relative_to: Ancestor whose corner counts as (0, 0). Defaults to the
            root of the hierarchy.

    Returns:
        (column, row) of the tile's top-left cell
    """
    x = y = 0
    node: Tile | None = tile
    while node is not None and node is not relative_to:
        x += _offset(node, Axis.HORIZONTAL)
        y += _offset(node, Axis.VERTICAL)
        node = node.parent
    return x, y


def rasterize(root: Tile) -> tuple[NDArray[np.int32], list[Tile]]:
    """Paint the resolved tiles of a hierarchy into a grid.

    Tiles are painted in depth-first order, so a child covers its parent.
    Everything is clipped to the root's area and tiles with a non-positive
    size paint nothing.

    Args:
        root: Tile whose area becomes the grid

    Returns:
        Tuple of (grid, nodes): a (height, width) array of indices into
        nodes, EMPTY where no tile lands
    """
    width, height = root.get_size()
    grid = np.full((max(height, 0), max(width, 0)), EMPTY, dtype=np.int32)
    nodes = list(root.iter_nodes())

    for index, node in enumerate(nodes):
        w, h = node.get_size()
        if w <= 0 or h <= 0:
            continue
        x, y = tile_origin(node, relative_to=root)
        if x + w <= 0 or y + h <= 0:
            continue
        grid[max(y, 0):y + h, max(x, 0):x + w] = index

    return grid, nodes


def render_ascii(grid: NDArray[np.int32], nodes: list[Tile]) -> str:
    """Render a rasterized grid as text followed by a legend."""
    lines = []
    for row in grid:
        lines.append("".join(
            "." if cell == EMPTY else PALETTE[cell % len(PALETTE)] for cell in row
        ))

    lines.append("")
    for index in np.unique(grid):
        if index == EMPTY:
            continue
        node = nodes[index]
        w, h = node.get_size()
        lines.append(f"{PALETTE[index % len(PALETTE)]}  {node.name} ({w}x{h})")

    return "\n".join(lines)
