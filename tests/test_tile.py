"""Tests for building tile trees."""

import gc

from tilelayout import Tile


def test_new_tile_is_root():
    tile = Tile()
    assert tile.parent is None
    assert tile.children == {}
    assert tile.width is None and tile.height is None


def test_with_size_returns_tile():
    tile = Tile()
    assert tile.with_size(3, 4) is tile
    assert (tile.width, tile.height) == (3, 4)


def test_new_child_sets_parent_and_registers():
    root = Tile()
    anonymous = root.new_child()
    named = root.new_child("name")

    assert len(root.children) == 2
    for child in root.children.values():
        assert child in (anonymous, named)
        assert child.parent is root
    assert root.get_child("name") is named
    assert root.get_child(anonymous.name) is anonymous


def test_anonymous_children_get_unique_names():
    root = Tile()
    names = {root.new_child().name for _ in range(50)}
    assert len(names) == 50


def test_get_child_missing_returns_none():
    root = Tile()
    root.new_child("a")
    assert root.get_child("b") is None
    assert root.has_child("a")
    assert not root.has_child("b")


def test_duplicate_name_replaces_child():
    root = Tile()
    first = root.new_child("dup")
    second = root.new_child("dup")

    assert first is not second
    assert root.get_child("dup") is second
    assert len(root.children) == 1


def test_parent_reference_does_not_keep_parent_alive():
    root = Tile()
    child = root.new_child()
    del root
    gc.collect()

    assert child.parent is None


def test_depth_root_and_find():
    root = Tile("root")
    mid = root.new_child("mid")
    leaf = mid.new_child("leaf")

    assert [root.depth, mid.depth, leaf.depth] == [0, 1, 2]
    assert leaf.root is root
    assert root.find("leaf") is leaf
    assert root.find("missing") is None


def test_iter_nodes_is_depth_first():
    root = Tile("root")
    a = root.new_child("a")
    a.new_child("a1")
    root.new_child("b")

    assert [n.name for n in root.iter_nodes()] == ["root", "a", "a1", "b"]
    assert [n.name for n in root.iter_nodes(include_self=False)] == ["a", "a1", "b"]


def test_tiles_compare_by_identity():
    assert Tile("x") != Tile("x")
