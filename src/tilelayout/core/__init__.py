"""Core tile system components."""

from .chain import (
    Axis,
    iter_chain,
    iter_horizontal,
    iter_vertical,
    join_horizontal,
    join_vertical,
    validate_chain,
)
from .tile import Tile

__all__ = [
    "Axis",
    "Tile",
    "iter_chain",
    "iter_horizontal",
    "iter_vertical",
    "join_horizontal",
    "join_vertical",
    "validate_chain",
]
