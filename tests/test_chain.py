"""Tests for joining tiles and walking chains."""

import itertools

import pytest

from tilelayout import (
    Axis,
    ChainConsistencyError,
    Tile,
    iter_chain,
    iter_horizontal,
    iter_vertical,
    join_horizontal,
    join_vertical,
    validate_chain,
)


def make_tiles(count: int) -> list[Tile]:
    return [Tile(f"t{i}") for i in range(count)]


def test_join_horizontal_links_pairwise():
    a, b, c = make_tiles(3)
    join_horizontal(a, b, c)

    assert a.left is None and a.right is b
    assert b.left is a and b.right is c
    assert c.left is b and c.right is None
    assert a.up is a.down is None


def test_join_vertical_links_pairwise():
    a, b = make_tiles(2)
    join_vertical(a, b)

    assert a.down is b and b.up is a
    assert a.right is a.left is None


@pytest.mark.parametrize("count", [0, 1])
def test_join_fewer_than_two_is_noop(count):
    tiles = make_tiles(count)
    join_horizontal(*tiles)
    join_vertical(*tiles)
    for tile in tiles:
        assert tile.left is tile.right is tile.up is tile.down is None


@pytest.mark.parametrize(
    "join,walk",
    [(join_horizontal, iter_horizontal), (join_vertical, iter_vertical)],
)
def test_iterate_from_any_member(join, walk):
    tiles = make_tiles(10)
    join(*tiles)

    for start in (tiles[0], tiles[4], tiles[9]):
        assert list(walk(start)) == tiles


@pytest.mark.parametrize("axis", list(Axis))
def test_iteration_can_stop_early(axis):
    tiles = make_tiles(10)
    join_horizontal(*tiles)
    join_vertical(*tiles)

    assert list(itertools.islice(iter_chain(tiles[5], axis), 3)) == tiles[:3]
    # a fresh iteration starts over from the head
    assert list(iter_chain(tiles[5], axis)) == tiles


def test_iteration_reflects_later_joins():
    tiles = make_tiles(3)
    join_horizontal(*tiles)
    extra = Tile("extra")
    join_horizontal(tiles[-1], extra)

    assert list(iter_horizontal(tiles[1])) == tiles + [extra]


def test_unjoined_tile_is_its_own_chain():
    tile = Tile()
    assert list(iter_horizontal(tile)) == [tile]
    assert list(iter_vertical(tile)) == [tile]


def test_axes_are_independent():
    a, b, c = make_tiles(3)
    join_horizontal(a, b)
    join_vertical(b, c)

    assert list(iter_horizontal(b)) == [a, b]
    assert list(iter_vertical(b)) == [b, c]
    assert list(iter_vertical(a)) == [a]


def test_rejoin_overwrites_links():
    a, b, c = make_tiles(3)
    join_horizontal(a, b)
    join_horizontal(c, b)

    assert b.left is c
    # a still points at b; the stale link is the caller's problem
    assert a.right is b
    assert list(iter_horizontal(b)) == [c, b]
    assert list(iter_horizontal(a)) == [a, b]


def test_validate_chain_accepts_consistent_chain():
    tiles = make_tiles(4)
    join_horizontal(*tiles)
    for tile in tiles:
        validate_chain(tile, Axis.HORIZONTAL)
        validate_chain(tile, Axis.VERTICAL)


def test_validate_chain_reports_unmirrored_link():
    a, b, c = make_tiles(3)
    join_horizontal(a, b)
    join_horizontal(c, b)

    with pytest.raises(ChainConsistencyError, match="not mirrored"):
        validate_chain(a, Axis.HORIZONTAL)


def test_validate_chain_reports_unreachable_tile():
    a, b, d = make_tiles(3)
    join_horizontal(a, b)
    join_horizontal(a, d)

    with pytest.raises(ChainConsistencyError, match="not reachable"):
        validate_chain(b, Axis.HORIZONTAL)


def test_axis_link_names():
    assert (Axis.HORIZONTAL.backward, Axis.HORIZONTAL.forward) == ("left", "right")
    assert (Axis.VERTICAL.backward, Axis.VERTICAL.forward) == ("up", "down")
