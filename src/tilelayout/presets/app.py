"""Header / content / footer screen with a filterable list."""

from ..core.chain import join_vertical
from ..core.tile import Tile


def create_app_layout(width: int = 80, height: int = 24) -> Tile:
    """Create a screen with a header, a content area and a footer.

    The content area holds a list made of a two-line filter input above the
    list items.

    Args:
        width: Screen width in cells
        height: Screen height in cells

    Returns:
        The root tile of the screen.
    """
    screen = Tile("screen").with_size(width, height)
    header = screen.new_child("header").with_size(0, 2)
    content = screen.new_child("content")
    footer = screen.new_child("footer").with_size(0, 1)
    join_vertical(header, content, footer)

    listing = content.new_child("list")
    fuzzy = listing.new_child("filter").with_size(0, 2)
    items = listing.new_child("items")
    join_vertical(fuzzy, items)

    return screen
