"""Shared fixtures for tilelayout tests."""

import pytest

from tilelayout import Tile


@pytest.fixture
def parent() -> Tile:
    """A 10x15 root tile."""
    return Tile("parent").with_size(10, 15)
