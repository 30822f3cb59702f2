"""Day 6: the patrolling guard and obstructions that trap it in a loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

BLOCK = "#"
START = "^"


class Heading(Enum):
    """Directions the guard can face, as row and column steps."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def turned_right(self) -> Heading:
        members = list(Heading)
        return members[(members.index(self) + 1) % len(members)]


@dataclass(frozen=True)
class Guard:
    """Position and heading of the guard."""

    row: int
    col: int
    heading: Heading = Heading.UP

    def _ahead(self, grid: Sequence[Sequence[str]]) -> tuple[int, int] | None:
        d_row, d_col = self.heading.value
        row, col = self.row + d_row, self.col + d_col
        if 0 <= row < len(grid) and 0 <= col < len(grid[0]):
            return row, col
        return None

    def step(self, grid: Sequence[Sequence[str]]) -> Guard | None:
        """The guard after one move, turning right at blocks; None once it leaves."""
        guard = self
        while True:
            ahead = guard._ahead(grid)
            if ahead is None:
                return None
            row, col = ahead
            if grid[row][col] != BLOCK:
                return Guard(row, col, guard.heading)
            guard = replace(guard, heading=guard.heading.turned_right())


def parse_grid(text: str) -> list[list[str]]:
    """Rows of the map up to the first blank line."""
    grid = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            break
        grid.append(list(line))
    return grid


def find_start(grid: Sequence[Sequence[str]]) -> Guard:
    """The guard at the first ``^`` on the map, facing up."""
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == START:
                return Guard(i, j, Heading.UP)
    raise ValueError("No ^ in input")


def visited_positions(grid: Sequence[Sequence[str]]) -> set[tuple[int, int]]:
    """Every cell the guard stands on before leaving the map."""
    positions: set[tuple[int, int]] = set()
    guard: Guard | None = find_start(grid)
    while guard is not None:
        positions.add((guard.row, guard.col))
        guard = guard.step(grid)
    return positions


def loops(grid: Sequence[Sequence[str]], start: Guard) -> bool:
    """True if the guard starting at ``start`` never leaves the map."""
    seen: set[Guard] = set()
    guard: Guard | None = start
    while guard is not None:
        if guard in seen:
            return True
        seen.add(guard)
        guard = guard.step(grid)
    return False


def count_loop_obstructions(grid: Sequence[Sequence[str]]) -> int:
    """Cells on the guard's path where one new block makes it loop."""
    board = [list(row) for row in grid]
    start = find_start(board)
    count = 0
    for row, col in visited_positions(board):
        original = board[row][col]
        board[row][col] = BLOCK
        try:
            if loops(board, start):
                count += 1
        finally:
            board[row][col] = original
    return count


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 6.")
    parser.parse_args(argv)
    grid = parse_grid(sys.stdin.read())
    print(f"Result: {len(visited_positions(grid))}")
    print(f"Result blocks size: {count_loop_obstructions(grid)}")


if __name__ == "__main__":
    main()