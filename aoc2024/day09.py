"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import chain

Segment = "DiskFile | FreeSpace"


@dataclass(frozen=True)
class DiskFile:
    """A run of ``space`` blocks belonging to file ``id``."""

    id: int
    space: int


@dataclass(frozen=True)
class FreeSpace:
    """A run of ``space`` empty blocks."""

    space: int


def parse_disk_map(text: str) -> list[list[DiskFile | FreeSpace]]:
    """Slots from the first line of a dense disk map, files and free space alternating."""
    lines = text.splitlines()
    line = lines[0].strip() if lines else ""
    slots: list[list[DiskFile | FreeSpace]] = []
    for index, char in enumerate(line):
        if not char.isdigit() or not char.isascii():
            raise ValueError(f"not a digit in disk map: {char!r}")
        size = int(char)
        if index % 2 == 0:
            slots.append([DiskFile(index // 2, size)])
        else:
            slots.append([FreeSpace(size)])
    return slots


def _copy(slots: Sequence[Sequence[DiskFile | FreeSpace]]) -> list[list[DiskFile | FreeSpace]]:
    return [list(slot) for slot in slots]


def compact_whole_files(
    slots: Sequence[Sequence[DiskFile | FreeSpace]],
) -> list[list[DiskFile | FreeSpace]]:
    """Move each file, highest id first, whole into the leftmost free span that fits it."""
    result = _copy(slots)
    for slot_index in reversed(range(len(result))):
        slot = result[slot_index]
        if len(slot) != 1 or not isinstance(slot[0], DiskFile):
            continue
        file = slot[0]
        target = next(
            (
                index
                for index in range(slot_index)
                if isinstance(result[index][-1], FreeSpace)
                and result[index][-1].space >= file.space
            ),
            slot_index,
        )
        if target < slot_index:
            free = result[target][-1]
            result[target][-1] = file
            if free.space > file.space:
                result[target].append(FreeSpace(free.space - file.space))
            result[slot_index] = [FreeSpace(file.space)]
    return result


def _next_free(slots: Sequence[Sequence[DiskFile | FreeSpace]], start: int, end: int) -> int:
    for index in range(start, end):
        head = slots[index][0]
        if isinstance(head, FreeSpace) and head.space > 0:
            return index
    return end


def compact_fragmented(
    slots: Sequence[Sequence[DiskFile | FreeSpace]],
) -> list[list[DiskFile | FreeSpace]]:
    """Move file blocks from the end into the leftmost free blocks, splitting files."""
    result = _copy(slots)
    free_index = 0
    for slot_index in reversed(range(len(result))):
        slot = result[slot_index]
        if len(slot) != 1 or not isinstance(slot[0], DiskFile):
            continue
        file_id, to_pack = slot[0].id, slot[0].space
        while to_pack > 0 and free_index < slot_index:
            free_index = _next_free(result, free_index, slot_index)
            if free_index >= slot_index:
                break
            head = result[free_index][0]
            if isinstance(head, FreeSpace):
                moved = min(head.space, to_pack)
                result[free_index][0] = FreeSpace(head.space - moved)
                result[free_index].append(DiskFile(file_id, moved))
                to_pack -= moved
        result[slot_index][0] = DiskFile(file_id, to_pack)
    return result


def checksum(segments: Iterable[DiskFile | FreeSpace]) -> int:
    """Sum of block position times file id over every file block."""
    position = 0
    total = 0
    for segment in segments:
        end = position + segment.space
        if isinstance(segment, DiskFile):
            total += segment.id * sum(range(position, end))
        position = end
    return total


def _flatten(slots: Iterable[Iterable[DiskFile | FreeSpace]]) -> list[DiskFile | FreeSpace]:
    return list(chain.from_iterable(slots))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 9.")
    parser.add_argument("part", nargs="?", type=int, default=1, choices=[1, 2])
    args = parser.parse_args(argv)
    slots = parse_disk_map(sys.stdin.read())
    if args.part == 1:
        segments = _flatten(compact_whole_files(slots))
    else:
        segments = [
            segment
            for segment in _flatten(compact_fragmented(slots))
            if isinstance(segment, DiskFile) and segment.space > 0
        ]
    print(f"Checksum: {checksum(segments)}")


if __name__ == "__main__":
    main()