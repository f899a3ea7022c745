"""Board placement, run counting, alignment and expansion."""

import pytest

from Align_Omok_AI.Board import Board
from Align_Omok_AI.Stone import Color, Stone
from Align_Omok_AI.engine.directions import AXES, Direction
from Align_Omok_AI.errors import CellOccupied, InvalidColor, InvalidConfig, OutOfBounds

DARK, LIGHT = Color.DARK, Color.LIGHT


@pytest.mark.parametrize("size", [3, 5, 15])
def test_new_board_is_empty(size):
    b = Board(size)
    assert all(b.get(r, c) is None for r in range(size) for c in range(size))
    assert not b.is_full()
    assert b.center == (size // 2, size // 2)


@pytest.mark.parametrize("size", [4, 0, -3, 2])
def test_invalid_sizes_rejected(size):
    with pytest.raises(InvalidConfig):
        Board(size)


def test_single_cell_board_fills_after_one_stone():
    b = Board(1)
    b.place(0, 0, DARK)
    assert b.is_full()


def test_place_then_get_and_double_place():
    b = Board(5)
    stone = Stone(DARK, 1, 3)
    b.place(1, 3, stone)
    assert b.get(1, 3) is stone
    with pytest.raises(CellOccupied):
        b.place(1, 3, Stone(LIGHT, 1, 3))
    assert b.move_count == 1
    assert b.placements() == [(1, 3, DARK)]


def test_place_accepts_bare_color():
    b = Board(5)
    b.place(0, 4, -1)
    assert b.get(0, 4) == Stone(DARK, 0, 4)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 5), (5, 5), (2, -1)])
def test_place_out_of_bounds(row, col):
    with pytest.raises(OutOfBounds):
        Board(5).place(row, col, DARK)


def test_place_rejects_bad_color_and_mismatched_stone():
    b = Board(5)
    with pytest.raises(InvalidColor):
        b.place(0, 0, 0)
    with pytest.raises(InvalidConfig):
        b.place(0, 0, Stone(DARK, 1, 1))


def test_get_out_of_bounds_is_empty():
    b = Board(3)
    assert b.get(-1, 0) is None
    assert b.get(3, 3) is None
    assert b.get(1.5, 2) is None
    assert not b.is_empty(1, "1")
    assert not b.is_adjacent_to_occupied(0.5, 0.5)


def test_adjacency_around_center_stone():
    b = Board(5)
    b.place(2, 2, DARK)
    assert b.is_adjacent_to_occupied(1, 2)
    assert b.is_adjacent_to_occupied(3, 3)
    assert not b.is_adjacent_to_occupied(0, 0)
    assert not b.is_adjacent_to_occupied(2, 4)


def test_count_run_stops_at_empty_edge_and_opponent():
    b = Board(7)
    for c in (1, 2, 3):
        b.place(3, c, DARK)
    b.place(3, 4, LIGHT)

    assert b.count_run(3, 0, DARK, Direction.E) == 3
    assert b.count_run(3, 0, DARK, Direction.W) == 0  # off the board
    assert b.count_run(3, 5, DARK, Direction.W) == 0  # light stone next
    assert b.count_run(2, 2, DARK, Direction.N) == 0  # empty neighbor
    assert b.count_run(3, 5, LIGHT, Direction.W) == 1


def test_count_run_diagonal_for_hypothetical_stone():
    b = Board(7)
    b.place(2, 2, LIGHT)
    b.place(1, 1, LIGHT)
    # (3, 3) is still empty; scanning does not need a stone there
    assert b.count_run(3, 3, LIGHT, Direction.NW) == 2
    assert b.count_run(3, 3, LIGHT, Direction.SE) == 0


def test_directions_and_axes():
    assert len(Direction) == 8
    for d in Direction:
        assert d.opposite.opposite is d
        assert (d.d_row + d.opposite.d_row, d.d_col + d.opposite.d_col) == (0, 0)
    assert len(AXES) == 4
    assert {d for axis in AXES for d in axis} == set(Direction)


def test_would_align_counts_both_sides():
    b = Board(9)
    for c in (0, 1, 3):
        b.place(4, c, DARK)
    # gap at (4, 2): 1 + 2 + 1
    assert b.would_align(4, 2, DARK, 4)
    assert not b.would_align(4, 2, DARK, 5)
    assert not b.would_align(4, 2, LIGHT, 2)


def test_would_align_diagonals():
    b = Board(9)
    b.place(0, 8, LIGHT)
    b.place(1, 7, LIGHT)
    b.place(3, 5, LIGHT)
    assert b.would_align(2, 6, LIGHT, 4)
    b.place(5, 5, DARK)
    b.place(6, 6, DARK)
    assert b.would_align(4, 4, DARK, 3)


def test_would_align_false_on_occupied_or_outside():
    b = Board(5)
    b.place(2, 2, DARK)
    assert not b.would_align(2, 2, DARK, 1)
    assert not b.would_align(7, 7, DARK, 1)


def test_has_alignment_after_placement():
    b = Board(7)
    for r in range(4):
        b.place(r, 2, LIGHT)
    assert b.line_length(1, 2) == 4
    assert b.has_alignment(3, 2, 4)
    assert not b.has_alignment(3, 2, 5)
    assert not b.has_alignment(6, 6, 1)


def test_is_full():
    b = Board(3)
    colors = [DARK, LIGHT]
    for i, (r, c) in enumerate(list(b.empty_cells())):
        assert not b.is_full()
        b.place(r, c, colors[i % 2])
    assert b.is_full()
    assert list(b.empty_cells()) == []


def test_expand_centers_old_board():
    b = Board(5)
    b.place(0, 0, DARK)
    b.place(4, 3, LIGHT)
    old = b.get(0, 0)

    big = b.expand(9)
    assert big.size == 9
    assert big.get(2, 2) == Stone(DARK, 2, 2)
    assert big.get(6, 5) == Stone(LIGHT, 6, 5)
    assert big.get(0, 0) is None
    assert big.is_adjacent_to_occupied(1, 1)
    assert not big.is_adjacent_to_occupied(0, 0)

    # original board untouched
    assert b.size == 5
    assert b.get(0, 0) is old
    assert b.get(2, 2) is None


@pytest.mark.parametrize("new_size", [5, 3, 8])
def test_expand_rejects_bad_sizes(new_size):
    with pytest.raises(InvalidConfig):
        Board(5).expand(new_size)


def test_replay_reproduces_occupancy():
    moves = [(2, 2, DARK), (1, 1, LIGHT), (2, 3, DARK), (3, 3, LIGHT), (0, 4, DARK)]
    first = Board.from_placements(5, moves)
    second = Board.from_placements(5, first.placements())
    assert first.cells == second.cells
    assert second.placements() == moves
