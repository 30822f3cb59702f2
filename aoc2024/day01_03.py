"""Days 1 to 3: location lists, reactor reports and corrupted memory."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(r"don't\(\)|do\(\)|mul\(([0-9]+),([0-9]+)\)")
_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Mul:
    """A ``mul(left,right)`` instruction."""

    left: int
    right: int

    @property
    def product(self) -> int:
        return self.left * self.right


class Toggle(Enum):
    """Instructions that switch multiplication on or off."""

    DO = "do()"
    DONT = "don't()"


def _integers(line: str) -> list[int]:
    """Integers in a space separated line; tokens that are not integers are dropped."""
    return [int(token) for token in line.split(" ") if _INTEGER.fullmatch(token)]


def _lines_until_blank(text: str) -> Iterator[str]:
    for line in text.splitlines():
        if not line.strip():
            return
        yield line


def parse_pairs(text: str) -> tuple[list[int], list[int]]:
    """Read the two location lists, stopping at the first line without exactly two numbers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        numbers = _integers(line)
        if len(numbers) != 2:
            break
        left.append(numbers[0])
        right.append(numbers[1])
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists paired up in sorted order."""
    if len(left) != len(right):
        raise ValueError("both lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Each left number times how often it occurs on the right, summed."""
    counts = Counter(right)
    return sum(number * counts[number] for number in left)


def parse_reports(text: str) -> list[list[int]]:
    """Read reports, one per line, up to the first blank line."""
    return [_integers(line) for line in _lines_until_blank(text)]


def is_strictly_safe(levels: Sequence[int]) -> bool:
    """True if levels move monotonically by steps of 1 to 3."""
    previous_diff = 0
    for a, b in zip(levels, levels[1:]):
        diff = b - a
        if not 1 <= abs(diff) <= 3 or previous_diff * diff < 0:
            return False
        previous_diff = diff
    return True


def _tolerant(levels: Sequence[int], previous: int, has_unsafe: bool) -> bool:
    trend = 0
    for value in levels:
        diff = value - previous
        if not 1 <= abs(diff) <= 3 or diff * trend < 0:
            if has_unsafe:
                return False
            has_unsafe = True
            continue
        previous = value
        trend = 1 if diff > 0 else -1
    return True


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True if the report is safe once at most one bad level is ignored."""
    if not levels:
        raise ValueError("a report needs at least one level")
    if _tolerant(levels[1:], levels[0], False):
        return True
    return len(levels) > 1 and _tolerant(levels[2:], levels[1], True)


def sum_multiplications(text: str) -> int:
    """Sum of every well-formed ``mul(a,b)`` with one to three digit operands."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def _instructions(text: str) -> Iterator[Mul | Toggle]:
    position = 0
    while (match := _INSTRUCTION.search(text, position)) is not None:
        token = match.group(0)
        if token == Toggle.DONT.value:
            yield Toggle.DONT
        elif token == Toggle.DO.value:
            yield Toggle.DO
        else:
            left, right = int(match.group(1)), int(match.group(2))
            if left > _U32_MAX or right > _U32_MAX:
                position = match.start() + 1
                continue
            yield Mul(left, right)
        position = match.end()


def parse_instructions(text: str) -> list[Mul | Toggle]:
    """All instructions hidden in corrupted memory, in order."""
    instructions = list(_instructions(text))
    if not instructions:
        raise ValueError("no instructions found")
    return instructions


def sum_enabled_multiplications(text: str) -> int:
    """Sum of products of multiplications that are enabled at the time they appear."""
    enabled = True
    total = 0
    for instruction in parse_instructions(text):
        if isinstance(instruction, Mul):
            if enabled:
                total += instruction.product
        else:
            enabled = instruction is Toggle.DO
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve the puzzles of days 1 to 3.")
    parser.add_argument(
        "puzzle",
        nargs="?",
        default="3-2",
        choices=["1-1", "1-2", "2-1", "2-2", "3-1", "3-2"],
        help="day and part, such as 3-2",
    )
    args = parser.parse_args(argv)
    text = sys.stdin.read()

    if args.puzzle == "1-1":
        print(total_distance(*parse_pairs(text)))
    elif args.puzzle == "1-2":
        print(f"Result: {similarity_score(*parse_pairs(text))}")
    elif args.puzzle == "2-1":
        print(f"Result: {sum(map(is_strictly_safe, parse_reports(text)))}")
    elif args.puzzle == "2-2":
        print(f"Result: {sum(map(is_safe_with_dampener, parse_reports(text)))}")
    elif args.puzzle == "3-1":
        print(sum_multiplications(text))
    else:
        print(f"Result: {sum_enabled_multiplications(text)}")


if __name__ == "__main__":
    main()