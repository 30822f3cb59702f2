"""Day 5: page ordering rules for safety manual updates."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass, field
from functools import cmp_to_key

_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass
class Manual:
    """Ordering rules and the updates to check.

    ``rules[a]`` holds the pages that must not appear before ``a``.
    """

    rules: dict[int, set[int]] = field(default_factory=dict)
    updates: list[list[int]] = field(default_factory=list)


def _page(token: str) -> int:
    if not _NUMBER.fullmatch(token):
        raise ValueError(f"not a page number: {token!r}")
    return int(token)


def parse_manual(text: str) -> Manual:
    """Read rules, a blank line, then updates up to the next blank line."""
    manual = Manual()
    reading_rules = True
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            if reading_rules:
                reading_rules = False
                continue
            break
        if reading_rules:
            parts = line.split("|")
            if len(parts) != 2:
                raise ValueError(f"malformed rule: {line!r}")
            first, second = map(_page, parts)
            manual.rules.setdefault(first, set()).add(second)
        else:
            manual.updates.append([_page(token) for token in line.split(",")])
    return manual


def is_valid(update: Sequence[int], rules: Mapping[int, Set[int]]) -> bool:
    """True if no page is preceded by a page that must come after it."""
    seen: set[int] = set()
    for page in update:
        if seen & rules.get(page, set()):
            return False
        seen.add(page)
    return True


def middle_value(update: Sequence[int]) -> int:
    """The middle page; for an even count, the floor of the two middles' mean."""
    if not update:
        raise ValueError("an update has no middle page when empty")
    mid = len(update) // 2
    if len(update) % 2 == 0:
        return (update[mid] + update[mid - 1]) // 2
    return update[mid]


def sort_update(update: Sequence[int], rules: Mapping[int, Set[int]]) -> list[int]:
    """The update reordered to follow the rules."""

    def compare(a: int, b: int) -> int:
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    return sorted(update, key=cmp_to_key(compare))


def sum_valid_middles(manual: Manual) -> int:
    """Sum of middle pages of correctly ordered updates."""
    return sum(
        middle_value(update)
        for update in manual.updates
        if is_valid(update, manual.rules)
    )


def sum_corrected_middles(manual: Manual) -> int:
    """Sum of middle pages of misordered updates after reordering."""
    total = 0
    for update in manual.updates:
        ordered = sort_update(update, manual.rules)
        if ordered != list(update):
            total += middle_value(ordered)
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 5.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    manual = parse_manual(sys.stdin.read())
    result = sum_valid_middles(manual) if args.part == 1 else sum_corrected_middles(manual)
    print(f"Result: {result}")


if __name__ == "__main__":
    main()