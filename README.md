# aoc2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 12. Each day is a
module you can import. Each module also provides a small command-line tool
that reads the puzzle input on standard input and prints the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line use

Each day has its own command. Pipe your puzzle input into it:

```
aoc2024-day01-03 [PUZZLE] < input.txt   # PUZZLE: 1-1, 1-2, 2-1, 2-2, 3-1 or 3-2 (default 3-2)
aoc2024-day04 [PART] < input.txt        # PART: 1 or 2 (default 1)
aoc2024-day05 [PART] < input.txt
aoc2024-day06 < input.txt               # prints both answers
aoc2024-day07 [PART] < input.txt
aoc2024-day08 [PART] < input.txt
aoc2024-day09 [PART] < input.txt
aoc2024-day10 [PART] < input.txt
aoc2024-day11 [--blinks N] < input.txt  # default 75 blinks
aoc2024-day12 [PART] < input.txt
```

Reading stops at the first blank line for the grid and line-based inputs.
Day 5 is the exception: one blank line separates the rules from the updates,
and the updates run to the next blank line. Days 9 and 11 read only the first
line. Day 1 stops at the first line that does not hold exactly two numbers,
and day 3 reads everything.

## Library use

Every solution is a plain function that takes parsed input and returns the
answer:

```python
from aoc2024.day01_03 import sum_enabled_multiplications
from aoc2024.day11 import total_stones

program = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
print(sum_enabled_multiplications(program))  # 48

print(total_stones([125, 17], 6))  # 22
```

Malformed input raises `ValueError`, for example a day 6 map with no `^`, a
day 7 line that is not `target: n1 n2 ...`, or an empty map.

## Modules

| Module | Puzzle | Main entry points |
| --- | --- | --- |
| `aoc2024.day01_03` | Days 1 to 3: list distance, safe reports, corrupted memory | `parse_pairs`, `total_distance`, `similarity_score`, `parse_reports`, `is_strictly_safe`, `is_safe_with_dampener`, `sum_multiplications`, `parse_instructions`, `sum_enabled_multiplications` |
| `aoc2024.day04` | Word search | `read_lines`, `count_word`, `count_x_mas`, `count_kernel_matches`, `rotate`, `all_rotations` |
| `aoc2024.day05` | Print queue ordering | `parse_manual`, `Manual`, `is_valid`, `sort_update`, `middle_value`, `sum_valid_middles`, `sum_corrected_middles` |
| `aoc2024.day06` | Guard patrol | `parse_grid`, `find_start`, `Guard`, `visited_positions`, `loops`, `count_loop_obstructions` |
| `aoc2024.day07` | Bridge repair equations | `parse_equations`, `Equation`, `can_balance`, `concat_digits`, `total_calibration` |
| `aoc2024.day08` | Resonant antennas | `parse_antennas`, `count_antinodes`, `Coordinate`, `BoardSize`, `all_reflections`, `gcd` |
| `aoc2024.day09` | Disk fragmenter | `parse_disk_map`, `compact_whole_files`, `compact_fragmented`, `checksum` |
| `aoc2024.day10` | Hiking trails | `parse_grid`, `find_trailheads`, `trail_score`, `trail_rating`, `total_score`, `total_rating` |
| `aoc2024.day11` | Plutonian pebbles | `parse_stones`, `count_stones`, `total_stones` |
| `aoc2024.day12` | Garden fences | `parse_garden`, `fence_price`, `discounted_price` |

A few behaviours worth knowing:

- Day 5 takes the middle page of an even-length update as the floor of the
  mean of the two middle pages.
- In day 9, part 1 (`compact_whole_files`) moves whole files, highest
  position first, into the leftmost free span that fits. Part 2
  (`compact_fragmented`) splits files across free blocks.

## What it does not do

The package does not fetch puzzle input. Save your input to a file and pipe
it in. It covers days 1 to 12 only.

The package needs Python 3.10 or later and has no runtime dependencies.