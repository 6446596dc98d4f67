"""YAML loader for tile layout definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.chain import join_horizontal, join_vertical
from ..core.tile import Tile
from ..errors import LayoutDefinitionError

logger = logging.getLogger(__name__)

JOINS = {
    "horizontal": join_horizontal,
    "vertical": join_vertical,
}


class LayoutLoader:
    """Loads tile trees from YAML layout definitions.

    YAML format:
    ```yaml
    name: screen
    size: [120, 40]            # or width: / height:, 0 or null means auto
    children:                  # mapping of name -> definition
      header:
        height: 2
      content:
        children:
          list: {}
      footer:
        size: [0, 1]
    join:
      vertical: [header, content, footer]
      horizontal: [[left, right], [a, b, c]]   # several chains
    ```

    `children` may also be a list; entries can then carry a `name` key and
    get a generated name otherwise. Join members refer to children of the
    node the `join` block belongs to.
    """

    def load(self, path: str | Path) -> Tile:
        """Load a layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Root tile of the layout

        Raises:
            FileNotFoundError: If the file does not exist
            LayoutDefinitionError: If the definition is invalid
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loading layout from %s", path)
        return self._build_root(data)

    def load_string(self, yaml_string: str) -> Tile:
        """Load a layout definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            Root tile of the layout
        """
        data = yaml.safe_load(yaml_string)
        return self._build_root(data)

    def _build_root(self, data: Any) -> Tile:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise LayoutDefinitionError("Layout definition must be a mapping")

        root = Tile(str(data.get("name", "root")))
        self._configure(root, data)
        return root

    def _configure(self, tile: Tile, data: dict[str, Any]) -> None:
        """Apply size, children and joins of a definition to tile."""
        width, height = self._parse_size(tile.name, data)
        tile.with_size(width, height)

        for child_name, child_def in self._iter_children(tile.name, data.get("children")):
            if child_def is None:
                child_def = {}
            if not isinstance(child_def, dict):
                raise LayoutDefinitionError(
                    f"Definition of child '{child_name}' of '{tile.name}' must be a mapping"
                )
            child = tile.new_child(child_name)
            self._configure(child, child_def)

        join_def = data.get("join") or {}
        if not isinstance(join_def, dict):
            raise LayoutDefinitionError(
                f"Join of '{tile.name}' must be a mapping of axis -> chains"
            )
        for axis, chains in join_def.items():
            join = JOINS.get(axis)
            if join is None:
                raise LayoutDefinitionError(
                    f"Unknown join axis '{axis}' in '{tile.name}' "
                    f"(expected one of: {', '.join(JOINS)})"
                )
            for members in self._normalize_chains(chains):
                join(*self._resolve_members(tile, axis, members))

    def _iter_children(self, parent_name: str, children: Any):
        if children is None:
            return
        if isinstance(children, dict):
            for child_name, child_def in children.items():
                yield str(child_name), child_def
        elif isinstance(children, list):
            for child_def in children:
                child_name = None
                if isinstance(child_def, dict) and "name" in child_def:
                    child_name = str(child_def["name"])
                yield child_name, child_def
        else:
            raise LayoutDefinitionError(
                f"Children of '{parent_name}' must be a mapping or a list"
            )

    def _parse_size(self, name: str, data: dict[str, Any]) -> tuple[int | None, int | None]:
        """Read the explicit size of a node, None meaning auto."""
        if "size" in data:
            size = data["size"]
            if not isinstance(size, (list, tuple)) or len(size) != 2:
                raise LayoutDefinitionError(
                    f"Size of '{name}' must be a [width, height] pair, got {size!r}"
                )
            width, height = size
        else:
            width = data.get("width")
            height = data.get("height")

        return self._parse_dimension(name, width), self._parse_dimension(name, height)

    def _parse_dimension(self, name: str, value: Any) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise LayoutDefinitionError(
                f"Dimensions of '{name}' must be integers, got {value!r}"
            )
        return value

    def _normalize_chains(self, chains: Any) -> list[list[str]]:
        """Accept a single chain [a, b] or several [[a, b], [c, d]]."""
        if not isinstance(chains, list):
            raise LayoutDefinitionError(f"Join entry must be a list, got {chains!r}")
        if chains and all(isinstance(member, list) for member in chains):
            return chains
        return [chains]

    def _resolve_members(self, tile: Tile, axis: str, members: list[Any]) -> list[Tile]:
        if len(set(map(str, members))) != len(members):
            raise LayoutDefinitionError(
                f"Tile listed twice in {axis} join of '{tile.name}': {members!r}"
            )

        resolved = []
        for member in members:
            child = tile.get_child(str(member))
            if child is None:
                raise LayoutDefinitionError(
                    f"Cannot join '{member}' {axis}ly: '{tile.name}' has no such child"
                )
            resolved.append(child)
        return resolved
