"""Command line entry point for tilelayout."""

from __future__ import annotations

import argparse
import logging
import sys

from .core.chain import Axis, validate_chain
from .core.tile import Tile
from .errors import ChainConsistencyError
from .layout import LayoutLoader
from .logging_config import setup_logging
from .presets import PRESETS
from .preview import rasterize, render_ascii

logger = logging.getLogger(__name__)


def _parse_size(value: str) -> tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}") from None
    return width, height


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="tilelayout - resolve tile layouts for terminal UIs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-p", "--preset",
        choices=list(PRESETS.keys()),
        default=None,
        help="Built-in layout to resolve (default: app)",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="YAML layout definition to resolve",
    )
    parser.add_argument(
        "--size",
        metavar="WxH",
        type=_parse_size,
        help="Resize the root before resolving (e.g. 120x40)",
    )
    parser.add_argument(
        "--map",
        action="store_true",
        help="Print an allocation map of the resolved layout",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate every sibling chain and fail on dangling links",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write log output to this file",
    )
    return parser.parse_args(argv)


def check_chains(root: Tile) -> list[str]:
    """Validate the chains of every tile in the tree.

    Returns:
        Problem descriptions, empty if every chain is consistent
    """
    problems = []
    for node in root.iter_nodes():
        for axis in Axis:
            try:
                validate_chain(node, axis)
            except ChainConsistencyError as e:
                problems.append(str(e))
    return problems


def main(argv: list[str] | None = None) -> int:
    """Resolve a layout and print the sizes of its tiles."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    if args.file:
        root = LayoutLoader().load(args.file)
    else:
        root = PRESETS[args.preset or "app"]()

    if args.size:
        logger.debug("Resizing %r to %dx%d", root.name, *args.size)
        root.with_size(*args.size).recalculate()

    nodes = list(root.iter_nodes())
    print(f"Layout contains {len(nodes)} tiles:")
    for node in nodes:
        indent = "  " * node.depth
        w, h = node.get_size()
        print(f"{indent}- {node.name} ({w}x{h})")

    if args.map:
        grid, painted = rasterize(root)
        print()
        print(render_ascii(grid, painted))

    if args.check:
        problems = check_chains(root)
        for problem in problems:
            print(f"chain error: {problem}", file=sys.stderr)
        if problems:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
