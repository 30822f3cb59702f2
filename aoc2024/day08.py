"""Day 8: antinodes of antennas sharing a frequency."""

from __future__ import annotations

import argparse
import math
import sys
from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations

EMPTY = "."


@dataclass(frozen=True)
class BoardSize:
    """Number of rows ``m`` and columns ``n`` of the map."""

    m: int
    n: int

    def contains(self, coordinate: Coordinate) -> bool:
        return 0 <= coordinate.i < self.m and 0 <= coordinate.j < self.n


@dataclass(frozen=True)
class Coordinate:
    """A cell on the map by row ``i`` and column ``j``."""

    i: int
    j: int

    def reflection(self, pivot: Coordinate, board_size: BoardSize) -> Coordinate | None:
        """This cell mirrored through ``pivot``, or None if that falls off the map."""
        mirrored = Coordinate(2 * pivot.i - self.i, 2 * pivot.j - self.j)
        return mirrored if board_size.contains(mirrored) else None

    def reflections(self, other: Coordinate, board_size: BoardSize) -> list[Coordinate]:
        """Each of the two cells mirrored through the other, where on the map."""
        candidates = (self.reflection(other, board_size), other.reflection(self, board_size))
        return [c for c in candidates if c is not None]

    def reflection_in_line(self, other: Coordinate, board_size: BoardSize) -> list[Coordinate]:
        """Every grid cell on the map lying on the line through both cells."""
        d_i, d_j = other.i - self.i, other.j - self.j
        divisor = gcd(d_i, d_j)
        if divisor == 0:
            raise ValueError("a line needs two distinct cells")
        d_i, d_j = d_i // divisor, d_j // divisor

        points = []
        current = self
        while board_size.contains(current):
            points.append(current)
            current = Coordinate(current.i + d_i, current.j + d_j)
        current = Coordinate(self.i - d_i, self.j - d_j)
        while board_size.contains(current):
            points.append(current)
            current = Coordinate(current.i - d_i, current.j - d_j)
        return points


Generator = Callable[[Coordinate, Coordinate, BoardSize], Iterable[Coordinate]]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor, never negative."""
    return math.gcd(a, b)


def all_reflections(
    coordinates: Sequence[Coordinate], board_size: BoardSize, generator: Generator
) -> set[Coordinate]:
    """Cells produced by ``generator`` for every unordered pair of coordinates."""
    return {
        point
        for first, second in combinations(coordinates, 2)
        for point in generator(first, second, board_size)
    }


def parse_antennas(text: str) -> list[list[str | None]]:
    """Rows of the map up to the first blank line; empty cells become None."""
    grid = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            break
        grid.append([None if cell == EMPTY else cell for cell in line])
    return grid


def count_antinodes(grid: Sequence[Sequence[str | None]], resonant: bool = False) -> int:
    """Distinct antinode cells; ``resonant`` counts every cell in line with a pair."""
    if not grid:
        raise ValueError("the map is empty")
    board_size = BoardSize(len(grid), len(grid[0]))
    by_frequency: dict[str, list[Coordinate]] = defaultdict(list)
    for i, row in enumerate(grid):
        for j, frequency in enumerate(row):
            if frequency is not None:
                by_frequency[frequency].append(Coordinate(i, j))

    generator: Generator = Coordinate.reflection_in_line if resonant else Coordinate.reflections
    antinodes: set[Coordinate] = set()
    for coordinates in by_frequency.values():
        antinodes |= all_reflections(coordinates, board_size, generator)
    return len(antinodes)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 8.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    grid = parse_antennas(sys.stdin.read())
    print(f"Result: {count_antinodes(grid, resonant=args.part == 2)}")


if __name__ == "__main__":
    main()