"""Sidebar and main pane above a status bar."""

from ..core.chain import join_horizontal, join_vertical
from ..core.tile import Tile


def create_split_layout(width: int = 80, height: int = 24, sidebar_width: int = 20) -> Tile:
    """Create a screen split into a fixed-width sidebar and a main pane.

    Returns:
        The root tile of the screen.
    """
    screen = Tile("screen").with_size(width, height)
    body = screen.new_child("body")
    status = screen.new_child("status").with_size(0, 1)
    join_vertical(body, status)

    sidebar = body.new_child("sidebar").with_size(sidebar_width, 0)
    main = body.new_child("main")
    join_horizontal(sidebar, main)

    return screen
