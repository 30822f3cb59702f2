"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, MutableMapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

TRAILHEAD = "0"
SUMMIT = "9"

Board = Sequence[Sequence[str]]


class Direction(Enum):
    """Steps on the map as row and column offsets."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


@dataclass(frozen=True)
class BoardSize:
    """Number of rows ``m`` and columns ``n`` of the map."""

    m: int
    n: int


@dataclass(frozen=True)
class Coordinate:
    """A cell on the map; equality and hashing use only the position."""

    i: int
    j: int
    board_size: BoardSize = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not (0 <= self.i < self.board_size.m and 0 <= self.j < self.board_size.n):
            raise ValueError("Invalid coordinate!")

    def get(self, board: Board) -> str:
        """The height character at this cell."""
        return board[self.i][self.j]

    def move(self, direction: Direction) -> Coordinate | None:
        """The neighbouring cell in ``direction``, or None at the edge."""
        d_i, d_j = direction.value
        i, j = self.i + d_i, self.j + d_j
        if 0 <= i < self.board_size.m and 0 <= j < self.board_size.n:
            return Coordinate(i, j, self.board_size)
        return None


def parse_grid(text: str) -> list[str]:
    """Trimmed rows of the map up to the first blank line."""
    rows = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            break
        rows.append(line)
    return rows


def _board_size(board: Board) -> BoardSize:
    if not board:
        raise ValueError("the map is empty")
    return BoardSize(len(board), len(board[0]))


def find_trailheads(board: Board) -> list[Coordinate]:
    """Every cell of height zero, row by row."""
    size = _board_size(board)
    return [
        Coordinate(i, j, size)
        for i, row in enumerate(board)
        for j, cell in enumerate(row)
        if cell == TRAILHEAD
    ]


def _uphill(board: Board, coordinate: Coordinate, visited: set[Coordinate]) -> Iterator[Coordinate]:
    height = ord(coordinate.get(board))
    for direction in Direction:
        neighbour = coordinate.move(direction)
        if (
            neighbour is not None
            and neighbour not in visited
            and ord(neighbour.get(board)) == height + 1
        ):
            yield neighbour


def trail_score(
    board: Board,
    start: Coordinate,
    memo: MutableMapping[Coordinate, frozenset[Coordinate]] | None = None,
) -> int:
    """Number of distinct summits reachable from ``start`` by climbing one step at a time.

    ``memo`` maps cells to the summits reachable from them and may be shared
    between calls on the same board.
    """
    if memo is None:
        memo = {}
    visited: set[Coordinate] = set()

    def reach(coordinate: Coordinate) -> None:
        if coordinate in visited:
            return
        visited.add(coordinate)
        if coordinate not in memo:
            if coordinate.get(board) == SUMMIT:
                memo[coordinate] = frozenset({coordinate})
            else:
                summits: set[Coordinate] = set()
                for neighbour in _uphill(board, coordinate, visited):
                    reach(neighbour)
                    summits |= memo[neighbour]
                memo[coordinate] = frozenset(summits)
        visited.discard(coordinate)

    reach(start)
    return len(memo[start])


def trail_rating(board: Board, start: Coordinate) -> int:
    """Number of distinct climbing paths from ``start`` to any summit."""
    visited: set[Coordinate] = set()

    def paths(coordinate: Coordinate) -> int:
        if coordinate in visited:
            return 0
        if coordinate.get(board) == SUMMIT:
            return 1
        visited.add(coordinate)
        total = 0
        for neighbour in _uphill(board, coordinate, visited):
            total += paths(neighbour)
        visited.discard(coordinate)
        return total

    return paths(start)


def total_score(board: Board) -> int:
    """Sum of the scores of all trailheads."""
    memo: dict[Coordinate, frozenset[Coordinate]] = {}
    return sum(trail_score(board, start, memo) for start in find_trailheads(board))


def total_rating(board: Board) -> int:
    """Sum of the ratings of all trailheads."""
    return sum(trail_rating(board, start) for start in find_trailheads(board))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 10.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    board = parse_grid(sys.stdin.read())
    result = total_score(board) if args.part == 1 else total_rating(board)
    print(f"Result: {result}")


if __name__ == "__main__":
    main()