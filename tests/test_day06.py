import pytest

from aoc2024.day06 import (
    Guard,
    Heading,
    count_loop_obstructions,
    find_start,
    loops,
    parse_grid,
    visited_positions,
)

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

BOX = ".#..\n.^.#\n#...\n..#.\n"
OPEN = "...\n.^.\n...\n"


def test_parse_grid_stops_at_blank_line():
    assert parse_grid("..\n^.\n\n##\n") == [[".", "."], ["^", "."]]


def test_find_start_locates_caret():
    grid = parse_grid(OPEN)
    start = find_start(grid)
    assert grid[start.row][start.col] == "^"
    assert start.heading is Heading.UP


def test_find_start_without_caret_fails():
    with pytest.raises(ValueError):
        find_start(parse_grid("...\n...\n"))


def test_visited_positions_example():
    assert len(visited_positions(parse_grid(EXAMPLE))) == 41


def test_open_grid_walks_straight_out():
    grid = parse_grid(OPEN)
    start = find_start(grid)
    positions = visited_positions(grid)
    assert (start.row, start.col) in positions
    assert all(col == start.col and row <= start.row for row, col in positions)


def test_step_moves_forward_when_clear():
    grid = parse_grid(OPEN)
    start = find_start(grid)
    moved = start.step(grid)
    assert (moved.row, moved.col, moved.heading) == (start.row - 1, start.col, start.heading)


def test_step_turns_right_at_block():
    grid = parse_grid(BOX)
    moved = find_start(grid).step(grid)
    assert moved.heading is Heading.RIGHT


def test_step_off_the_map_returns_none():
    grid = parse_grid(OPEN)
    assert Guard(0, 1, Heading.UP).step(grid) is None


def test_heading_full_turn_returns_to_start():
    heading = Heading.LEFT
    for _ in range(4):
        heading = heading.turned_right()
    assert heading is Heading.LEFT


def test_box_grid_loops():
    grid = parse_grid(BOX)
    assert loops(grid, find_start(grid)) is True


def test_open_grid_does_not_loop():
    grid = parse_grid(OPEN)
    assert loops(grid, find_start(grid)) is False


def test_loop_obstructions_bounded_and_grid_untouched():
    grid = parse_grid(EXAMPLE)
    count = count_loop_obstructions(grid)
    assert 0 < count <= len(visited_positions(grid))
    assert grid == parse_grid(EXAMPLE)