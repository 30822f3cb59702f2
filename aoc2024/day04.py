"""Day 4: word search for XMAS and X-shaped MAS."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

WORD = "XMAS"

_DIRECTIONS = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)

X_MAS_KERNEL = (
    ("M", None, "S"),
    (None, "A", None),
    ("M", None, "S"),
)


def read_lines(text: str) -> list[str]:
    """Trimmed lines up to the first blank one."""
    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            break
        lines.append(line)
    return lines


def count_word(grid: Sequence[Sequence[str]], word: str = WORD) -> int:
    """Occurrences of ``word`` in all eight directions."""
    if not grid:
        raise ValueError("the grid is empty")
    rows, cols = len(grid), len(grid[0])

    def found(i: int, j: int, di: int, dj: int) -> bool:
        return all(
            0 <= i + k * di < rows
            and 0 <= j + k * dj < cols
            and grid[i + k * di][j + k * dj] == char
            for k, char in enumerate(word)
        )

    return sum(
        found(i, j, di, dj)
        for i in range(rows)
        for j in range(cols)
        for di, dj in _DIRECTIONS
    )


def rotate(kernel: Sequence[Sequence]) -> list[list]:
    """The kernel turned a quarter clockwise."""
    return [list(column) for column in zip(*reversed(kernel))]


def all_rotations(kernel: Sequence[Sequence]) -> list:
    """The three quarter turns of the kernel followed by the kernel itself."""
    once = rotate(kernel)
    twice = rotate(once)
    thrice = rotate(twice)
    return [once, twice, thrice, kernel]


def _matches_at(kernel, image, i: int, j: int) -> bool:
    for k, row in enumerate(kernel):
        for l, cell in enumerate(row):
            if cell is None:
                continue
            if i + k >= len(image) or j + l >= len(image[i + k]):
                return False
            if image[i + k][j + l] != cell:
                return False
    return True


def count_kernel_matches(kernel: Sequence[Sequence], image: Sequence[Sequence[str]]) -> int:
    """Positions where every non-empty kernel cell equals the image cell under it."""
    if not image or not kernel:
        raise ValueError("kernel and image must not be empty")
    row_span = len(image) - len(kernel) + 1
    col_span = len(image[0]) - len(kernel[0]) + 1
    if row_span < 1 or col_span < 1:
        raise ValueError("the kernel is larger than the image")
    return sum(
        _matches_at(kernel, image, i, j)
        for i in range(row_span)
        for j in range(col_span)
    )


def count_x_mas(image: Sequence[Sequence[str]]) -> int:
    """Crosses of two MAS diagonals, in any orientation."""
    return sum(count_kernel_matches(k, image) for k in all_rotations(X_MAS_KERNEL))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 4.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    grid = read_lines(sys.stdin.read())
    result = count_word(grid) if args.part == 1 else count_x_mas(grid)
    print(f"Result: {result}")


if __name__ == "__main__":
    main()