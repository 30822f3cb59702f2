"""Day 7: calibration equations balanced with addition, multiplication and concatenation."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_EQUATION = re.compile(r"([+-]?[0-9]+): ([+-]?[0-9]+(?:[ \t]+[+-]?[0-9]+)*)")


@dataclass(frozen=True)
class Equation:
    """A target value and the numbers that should combine into it."""

    target: int
    nums: list[int] = field(default_factory=list)


def parse_equation(line: str) -> Equation:
    """Parse ``target: n1 n2 ...``; text after the last number is ignored."""
    match = _EQUATION.match(line)
    if match is None:
        raise ValueError(f"Failed to parse line: {line!r}")
    return Equation(int(match.group(1)), [int(token) for token in match.group(2).split()])


def parse_equations(text: str) -> list[Equation]:
    """Equations, one per trimmed line, up to the first blank line."""
    equations = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            break
        equations.append(parse_equation(line))
    return equations


def concat_digits(left: int, right: int) -> int:
    """The number written as the digits of ``left`` followed by those of ``right``."""
    return int(f"{left}{right}")


def _balances(acc: int, target: int, rest: Sequence[int], allow_concat: bool) -> bool:
    if not rest:
        return acc == target
    head, tail = rest[0], rest[1:]
    return (
        _balances(head * acc, target, tail, allow_concat)
        or _balances(head + acc, target, tail, allow_concat)
        or (allow_concat and _balances(concat_digits(acc, head), target, tail, allow_concat))
    )


def can_balance(target: int, nums: Sequence[int], allow_concat: bool = False) -> bool:
    """True if operators placed left to right between ``nums`` can produce ``target``."""
    if not nums:
        raise ValueError("an equation needs at least one number")
    return _balances(nums[0], target, nums[1:], allow_concat)


def total_calibration(equations: Iterable[Equation], allow_concat: bool = False) -> int:
    """Sum of the targets of the equations that can be balanced."""
    return sum(
        equation.target
        for equation in equations
        if can_balance(equation.target, equation.nums, allow_concat)
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 7.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    equations = parse_equations(sys.stdin.read())
    print(f"Result: {total_calibration(equations, allow_concat=args.part == 2)}")


if __name__ == "__main__":
    main()