"""Exceptions raised by tilelayout."""


class TileLayoutError(Exception):
    """Base class for tilelayout errors."""


class ChainConsistencyError(TileLayoutError):
    """A sibling chain has links that are not mirrored by the neighbour."""


class LayoutDefinitionError(TileLayoutError, ValueError):
    """A layout definition could not be turned into a tile tree."""
