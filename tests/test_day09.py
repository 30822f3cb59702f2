from collections import Counter
from itertools import chain

import pytest

from aoc2024.day09 import (
    DiskFile,
    FreeSpace,
    checksum,
    compact_fragmented,
    compact_whole_files,
    parse_disk_map,
)

EXAMPLE = "2333133121414131402"


def _file_sizes(slots):
    sizes = Counter()
    for segment in chain.from_iterable(slots):
        if isinstance(segment, DiskFile):
            sizes[segment.id] += segment.space
    return sizes


def _total_space(slots):
    return sum(segment.space for segment in chain.from_iterable(slots))


def test_parse_disk_map():
    assert parse_disk_map("12345\n") == [
        [DiskFile(0, 1)],
        [FreeSpace(2)],
        [DiskFile(1, 3)],
        [FreeSpace(4)],
        [DiskFile(2, 5)],
    ]


def test_parse_reads_only_first_line():
    assert parse_disk_map("12\n34\n") == parse_disk_map("12")


def test_parse_rejects_non_digit():
    with pytest.raises(ValueError):
        parse_disk_map("12a3")


def test_parse_empty():
    assert parse_disk_map("") == []


def test_whole_files_example_checksum():
    slots = compact_whole_files(parse_disk_map(EXAMPLE))
    assert checksum(chain.from_iterable(slots)) == 2858


def test_fragmented_example_checksum():
    slots = compact_fragmented(parse_disk_map(EXAMPLE))
    files = [
        s for s in chain.from_iterable(slots) if isinstance(s, DiskFile) and s.space > 0
    ]
    assert checksum(files) == 1928


@pytest.mark.parametrize("compact", [compact_whole_files, compact_fragmented])
def test_compaction_does_not_mutate_input(compact):
    original = parse_disk_map(EXAMPLE)
    snapshot = [list(slot) for slot in original]
    compact(original)
    assert original == snapshot


def test_whole_files_are_never_split():
    compacted = compact_whole_files(parse_disk_map(EXAMPLE))
    ids = [s.id for s in chain.from_iterable(compacted) if isinstance(s, DiskFile)]
    assert len(ids) == len(set(ids))


def test_fragmented_leaves_no_gaps_between_files():
    compacted = compact_fragmented(parse_disk_map(EXAMPLE))
    kinds = [
        "file" if isinstance(s, DiskFile) else "free"
        for s in chain.from_iterable(compacted)
        if s.space > 0
    ]
    assert kinds[0] == "file"
    assert kinds == sorted(kinds)


def test_checksum_ignores_free_space_contents():
    assert checksum([FreeSpace(2), DiskFile(1, 1)]) == checksum(
        [DiskFile(0, 2), DiskFile(1, 1)]
    )


def test_checksum_of_file_zero_is_zero():
    assert checksum([DiskFile(0, 9)]) == 0