"""Day 12: fencing garden regions by perimeter and by sides."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Steps in the garden as row and column offsets."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


@dataclass(frozen=True, eq=False)
class Board:
    """The garden map, one string of plant types per row."""

    grid: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "grid", tuple(self.grid))
        if not self.grid:
            raise ValueError("the garden is empty")

    @property
    def m(self) -> int:
        return len(self.grid)

    @property
    def n(self) -> int:
        return len(self.grid[0])


@dataclass(frozen=True)
class Coordinate:
    """A plot in the garden; equality and hashing use only the position."""

    i: int
    j: int
    board: Board = field(compare=False, repr=False)

    def move_to(self, direction: Direction) -> Coordinate | None:
        """The neighbouring plot in ``direction``, or None at the edge."""
        d_i, d_j = direction.value
        i, j = self.i + d_i, self.j + d_j
        if 0 <= i < self.board.m and 0 <= j < self.board.n:
            return Coordinate(i, j, self.board)
        return None

    def value(self) -> str:
        """The plant type on this plot."""
        return self.board.grid[self.i][self.j]

    def perimeter(self) -> int:
        """Number of this plot's edges that need a fence."""
        return sum(self.is_wall(direction) for direction in Direction)

    def is_wall(self, direction: Direction) -> bool:
        """True if a fence runs along this plot's edge in ``direction``."""
        neighbour = self.move_to(direction)
        return neighbour is None or neighbour.value() != self.value()

    def find_wall(self, direction: Direction) -> Wall:
        """The fence side this edge belongs to, named by its top or left end."""
        along = Direction.UP if direction in (Direction.LEFT, Direction.RIGHT) else Direction.LEFT
        current = self
        while True:
            neighbour = current.move_to(along)
            if (
                neighbour is None
                or neighbour.value() != current.value()
                or not neighbour.is_wall(direction)
            ):
                return Wall(current, direction)
            current = neighbour

    def sides(self, walls: set[Wall]) -> int:
        """Fence sides along this plot not yet in ``walls``; they are added to it."""
        count = 0
        for direction in Direction:
            if self.is_wall(direction):
                wall = self.find_wall(direction)
                if wall not in walls:
                    walls.add(wall)
                    count += 1
        return count


@dataclass(frozen=True)
class Wall:
    """A straight fence side: its top-left plot and the side of the plot it lies on."""

    top_left_coordinate: Coordinate
    direction: Direction


def parse_garden(text: str) -> Board:
    """The garden from trimmed rows up to the first blank line."""
    rows = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            break
        rows.append(line)
    return Board(tuple(rows))


def _regions(board: Board) -> Iterator[list[Coordinate]]:
    visited: set[Coordinate] = set()
    for i in range(board.m):
        for j in range(board.n):
            start = Coordinate(i, j, board)
            if start in visited:
                continue
            visited.add(start)
            region = []
            stack = [start]
            while stack:
                plot = stack.pop()
                region.append(plot)
                for direction in Direction:
                    neighbour = plot.move_to(direction)
                    if (
                        neighbour is not None
                        and neighbour not in visited
                        and neighbour.value() == plot.value()
                    ):
                        visited.add(neighbour)
                        stack.append(neighbour)
            yield region


def fence_price(board: Board) -> int:
    """Sum over regions of area times perimeter."""
    return sum(
        len(region) * sum(plot.perimeter() for plot in region)
        for region in _regions(board)
    )


def discounted_price(board: Board) -> int:
    """Sum over regions of area times number of sides."""
    total = 0
    for region in _regions(board):
        walls: set[Wall] = set()
        total += len(region) * sum(plot.sides(walls) for plot in region)
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 12.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    board = parse_garden(sys.stdin.read())
    result = fence_price(board) if args.part == 1 else discounted_price(board)
    print(f"Result: {result}")


if __name__ == "__main__":
    main()