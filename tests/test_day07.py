import pytest

from aoc2024.day07 import (
    Equation,
    can_balance,
    concat_digits,
    parse_equation,
    parse_equations,
    total_calibration,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_equation():
    assert parse_equation("190: 10 19") == Equation(190, [10, 19])


def test_parse_equation_rejects_malformed():
    with pytest.raises(ValueError):
        parse_equation("190 10 19")


def test_parse_equations_stops_at_blank_line():
    equations = parse_equations("83: 17 5\n\n156: 15 6\n")
    assert equations == [Equation(83, [17, 5])]


def test_parse_equations_reads_all_lines():
    assert len(parse_equations(EXAMPLE)) == 9


@pytest.mark.parametrize(
    "target, nums, expected",
    [
        (190, [10, 19], True),
        (3267, [81, 40, 27], True),
        (292, [11, 6, 16, 20], True),
        (83, [17, 5], False),
        (156, [15, 6], False),
    ],
)
def test_can_balance_without_concat(target, nums, expected):
    assert can_balance(target, nums) is expected


@pytest.mark.parametrize(
    "target, nums", [(156, [15, 6]), (7290, [6, 8, 6, 15]), (192, [17, 8, 14])]
)
def test_can_balance_with_concat(target, nums):
    assert can_balance(target, nums, allow_concat=True) is True
    assert can_balance(target, nums, allow_concat=False) is False


def test_single_number_balances_only_itself():
    assert can_balance(5, [5]) is True
    assert can_balance(6, [5]) is False


def test_can_balance_rejects_empty():
    with pytest.raises(ValueError):
        can_balance(1, [])


def test_concat_digits():
    assert concat_digits(12, 345) == 12345


def test_concat_digits_negative_right_fails():
    with pytest.raises(ValueError):
        concat_digits(5, -3)


def test_total_calibration_example():
    equations = parse_equations(EXAMPLE)
    assert total_calibration(equations) == 3749
    assert total_calibration(equations, allow_concat=True) == 11387