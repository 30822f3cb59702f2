import pytest

from aoc2024.day05 import (
    is_valid,
    middle_value,
    parse_manual,
    sort_update,
    sum_corrected_middles,
    sum_valid_middles,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def manual():
    return parse_manual(EXAMPLE)


def test_parse_manual_reads_rules_and_updates(manual):
    assert 53 in manual.rules[47]
    assert manual.updates[0] == [75, 47, 61, 53, 29]
    assert manual.updates[-1] == [97, 13, 75, 29, 47]


def test_parse_manual_stops_at_second_blank_line():
    result = parse_manual("1|2\n\n1,2\n\n2,1\n")
    assert result.updates == [[1, 2]]


def test_parse_manual_rejects_malformed_rule():
    with pytest.raises(ValueError):
        parse_manual("1|2|3\n")


def test_is_valid_follows_rules(manual):
    assert is_valid([1, 2], {1: {2}})
    assert not is_valid([2, 1], {1: {2}})


def test_sum_valid_middles_example(manual):
    assert sum_valid_middles(manual) == 143


def test_sum_corrected_middles_example(manual):
    assert sum_corrected_middles(manual) == 123


def test_sorted_updates_are_valid(manual):
    for update in manual.updates:
        ordered = sort_update(update, manual.rules)
        assert is_valid(ordered, manual.rules)
        assert sorted(ordered) == sorted(update)


def test_sorting_keeps_valid_updates(manual):
    for update in manual.updates:
        if is_valid(update, manual.rules):
            assert sort_update(update, manual.rules) == update


def test_middle_value_odd():
    assert middle_value([1, 5, 9]) == 5


def test_middle_value_rejects_empty():
    with pytest.raises(ValueError):
        middle_value([])