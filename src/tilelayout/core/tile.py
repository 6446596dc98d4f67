"""Tile class: a rectangular region whose size is resolved lazily."""

from __future__ import annotations

import logging
import uuid
import weakref
from dataclasses import dataclass, field
from typing import Callable, Iterator

from .chain import Axis, iter_chain

logger = logging.getLogger(__name__)


def _split(space: int, unset_count: int) -> int:
    """Share of space for one of unset_count unsized chain members.

    The remainder of an inexact division is dropped, and a negative space
    (siblings claiming more than the parent has) is passed through as is.
    """
    if unset_count == 1:
        return space
    if unset_count == 2:
        return space >> 1
    share = abs(space) // unset_count
    return -share if space < 0 else share


@dataclass(eq=False)
class Tile:
    """A rectangular space in the layout.

    Subtiles strive to fill their parent's space. A tile without an explicit
    size on an axis shares what is left of its parent on that axis with the
    other unsized tiles of the same chain (see join_horizontal() and
    join_vertical()).

    Sizes are resolved on demand by get_size() and memoized. After a resize
    the caller sets the new size on the root and calls recalculate() to drop
    the memoized values of the whole tree.

    A tile holds its parent only through a weak reference, so the caller must
    keep a handle on the root for as long as the tree is used. Once the root
    is gone its children behave as roots and resolve to (0, 0).

    Example:
        screen = Tile("screen").with_size(80, 24)
        header = screen.new_child("header").with_size(0, 1)
        body = screen.new_child("body")
        join_vertical(header, body)
        body.get_size()  # (80, 23)
    """

    name: str = "root"
    width: int | None = None
    height: int | None = None
    up: Tile | None = field(default=None, repr=False)
    right: Tile | None = field(default=None, repr=False)
    down: Tile | None = field(default=None, repr=False)
    left: Tile | None = field(default=None, repr=False)
    children: dict[str, Tile] = field(default_factory=dict, repr=False)
    _calc_width: int | None = field(default=None, init=False, repr=False)
    _calc_height: int | None = field(default=None, init=False, repr=False)
    _parent_ref: weakref.ref[Tile] | None = field(default=None, init=False, repr=False)
    _recalc_callbacks: list[Callable[[], None]] = field(
        default_factory=list, init=False, repr=False
    )

    @property
    def parent(self) -> Tile | None:
        """The owning tile, or None for a root (or an orphaned subtree)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def with_size(self, width: int | None, height: int | None) -> Tile:
        """Set the explicit width and height.

        None or 0 leaves that axis to be filled automatically. Memoized
        sizes are not touched; call recalculate() for a new size to spread.

        Returns:
            This tile (for chaining)
        """
        self.width = width
        self.height = height
        return self

    def new_child(self, name: str | None = None) -> Tile:
        """Create a subtile owned by this tile.

        Args:
            name: Name to register the child under. A unique identifier is
                generated when omitted. An existing child with the same name
                is replaced.

        Returns:
            The new child tile
        """
        if name is None:
            name = uuid.uuid4().hex
        elif name in self.children:
            logger.debug("Replacing child %r of tile %r", name, self.name)

        child = Tile(name)
        child._parent_ref = weakref.ref(self)
        self.children[name] = child
        return child

    def get_child(self, name: str) -> Tile | None:
        """Look up a direct child by name.

        Returns:
            The child, or None if this tile has no child with that name
        """
        return self.children.get(name)

    def has_child(self, name: str) -> bool:
        """Return True if a direct child is registered under name."""
        return name in self.children

    def iter_nodes(self, include_self: bool = True) -> Iterator[Tile]:
        """Iterate over this tile and all descendants (depth-first).

        Args:
            include_self: Whether to include this tile in the iteration

        Yields:
            Tile instances
        """
        if include_self:
            yield self
        for child in self.children.values():
            yield from child.iter_nodes(include_self=True)

    def find(self, name: str) -> Tile | None:
        """Find the first descendant (or self) with the given name."""
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this tile in the hierarchy (root = 0)."""
        parent = self.parent
        if parent is None:
            return 0
        return parent.depth + 1

    @property
    def root(self) -> Tile:
        """Get the root tile of this hierarchy."""
        parent = self.parent
        if parent is None:
            return self
        return parent.root

    def effective_size(self) -> tuple[int, int]:
        """Return the explicit size per axis, falling back to the memoized one.

        Does not resolve anything; 0 means unknown.
        """
        w = self.width or self._calc_width or 0
        h = self.height or self._calc_height or 0
        return w, h

    def _allocate(self, axis: Axis, parent_space: int) -> int:
        index = 0 if axis is Axis.HORIZONTAL else 1
        unset_count = 0
        allocated = 0
        for sibling in iter_chain(self, axis):
            size = sibling.effective_size()[index]
            if size != 0:
                allocated += size
            else:
                unset_count += 1

        if unset_count == 0:
            return 0
        return _split(parent_space - allocated, unset_count)

    def get_size(self) -> tuple[int, int]:
        """Return the width and height of the tile, resolving them if needed.

        An axis without an explicit size gets what its parent has left on
        that axis after the sized members of the tile's chain, split evenly
        among the unsized members. Results are memoized until recalculate().

        Returns:
            (width, height); (0, 0) while the parent size is still unknown
        """
        w, h = self.effective_size()
        if w != 0 and h != 0:
            return w, h

        parent = self.parent
        if parent is None:
            # no container to fill
            return w, h

        parent_w, parent_h = parent.get_size()
        if parent_w == 0 or parent_h == 0:
            # happens before the first resize reaches the root
            return 0, 0

        if w == 0:
            w = self._allocate(Axis.HORIZONTAL, parent_w)
        if h == 0:
            h = self._allocate(Axis.VERTICAL, parent_h)

        self._calc_width = w
        self._calc_height = h
        return w, h

    def on_recalculate(self, callback: Callable[[], None]) -> None:
        """Register a callback to run every time recalculate() reaches this tile."""
        self._recalc_callbacks.append(callback)

    def recalculate(self) -> None:
        """Drop memoized sizes of this tile and its subtree, then notify.

        The whole subtree is invalidated before any callback fires. Callbacks
        then run children first, each tile's in registration order. Sizes
        are not recomputed here; the next get_size() call does that.
        Neither the parent nor chain neighbours outside the subtree are
        affected.
        """
        logger.debug("Recalculating tile %r", self.name)
        self._invalidate()
        self._notify()

    def _invalidate(self) -> None:
        self._calc_width = None
        self._calc_height = None
        for child in self.children.values():
            child._invalidate()

    def _notify(self) -> None:
        # callbacks may add children
        for child in list(self.children.values()):
            child._notify()
        for callback in list(self._recalc_callbacks):
            callback()

    def __repr__(self) -> str:
        w, h = self.effective_size()
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"Tile({self.name!r}, {w}x{h}{children_str})"
