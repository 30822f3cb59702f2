"""Day 11: stones that change every time you blink."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from functools import cache

BLINKS = 75


def parse_stones(text: str) -> list[int]:
    """Stone numbers from the first line, separated by whitespace."""
    lines = text.splitlines()
    line = lines[0] if lines else ""
    stones = [int(token) for token in line.split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stone numbers cannot be negative")
    return stones


@cache
def count_stones(stone: int, blinks: int) -> int:
    """How many stones a single stone becomes after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(int(digits[:half]), blinks - 1) + count_stones(
            int(digits[half:]), blinks - 1
        )
    return count_stones(stone * 2024, blinks - 1)


def total_stones(stones: Iterable[int], blinks: int = BLINKS) -> int:
    """How many stones a row of stones becomes after ``blinks`` blinks."""
    return sum(count_stones(stone, blinks) for stone in stones)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 11.")
    parser.add_argument("--blinks", type=int, default=BLINKS)
    args = parser.parse_args(argv)
    stones = parse_stones(sys.stdin.read())
    print(f"Result: {total_stones(stones, args.blinks)}")


if __name__ == "__main__":
    main()