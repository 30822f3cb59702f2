import io

import pytest

from aoc2024.day10 import (
    BoardSize,
    Coordinate,
    Direction,
    find_trailheads,
    main,
    parse_grid,
    total_rating,
    total_score,
    trail_rating,
    trail_score,
)

SIMPLE = """0123
1234
8765
9876
"""

EXAMPLE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_simple_example_score():
    assert total_score(parse_grid(SIMPLE)) == 1


def test_example_score():
    assert total_score(parse_grid(EXAMPLE)) == 36


def test_example_rating():
    assert total_rating(parse_grid(EXAMPLE)) == 81


def test_rating_is_never_below_score():
    board = parse_grid(EXAMPLE)
    for start in find_trailheads(board):
        assert trail_rating(board, start) >= trail_score(board, start)


def test_shared_memo_gives_same_total_as_fresh_memos():
    board = parse_grid(EXAMPLE)
    fresh = sum(trail_score(board, start) for start in find_trailheads(board))
    assert total_score(board) == fresh


def test_memo_holds_only_summits():
    board = parse_grid(EXAMPLE)
    start = find_trailheads(board)[0]
    memo = {}
    score = trail_score(board, start, memo)
    assert len(memo[start]) == score
    assert all(summit.get(board) == "9" for summit in memo[start])


def test_find_trailheads_finds_every_zero():
    board = parse_grid(EXAMPLE)
    heads = find_trailheads(board)
    assert len(heads) == EXAMPLE.count("0")
    assert all(head.get(board) == "0" for head in heads)


def test_find_trailheads_on_empty_board_raises():
    with pytest.raises(ValueError):
        find_trailheads([])


def test_parse_grid_trims_and_stops_at_blank():
    assert parse_grid("  012 \n345\n\n678\n") == ["012", "345"]


def test_coordinate_outside_board_raises():
    with pytest.raises(ValueError):
        Coordinate(2, 0, BoardSize(2, 2))


def test_move_at_edges():
    size = BoardSize(2, 2)
    corner = Coordinate(0, 0, size)
    assert corner.move(Direction.UP) is None
    assert corner.move(Direction.LEFT) is None
    assert corner.move(Direction.RIGHT) == Coordinate(0, 1, size)
    assert corner.move(Direction.DOWN) == Coordinate(1, 0, size)
    assert Coordinate(1, 1, size).move(Direction.DOWN) is None


def test_equality_ignores_board_size():
    first = Coordinate(1, 1, BoardSize(2, 2))
    second = Coordinate(1, 1, BoardSize(5, 5))
    assert first == second
    assert hash(first) == hash(second)


def test_main_prints_score_and_rating(monkeypatch, capsys):
    board = parse_grid(EXAMPLE)
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    main([])
    assert capsys.readouterr().out == f"Result: {total_score(board)}\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    main(["2"])
    assert capsys.readouterr().out == f"Result: {total_rating(board)}\n"