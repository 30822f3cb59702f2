[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2024"
version = "0.1.0"
description = "Solutions to the 2024 Advent of Code puzzles, days 1 to 12, as a library and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms", "aoc", "2024"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2024-day01-03 = "aoc2024.day01_03:main"
aoc2024-day04 = "aoc2024.day04:main"
aoc2024-day05 = "aoc2024.day05:main"
aoc2024-day06 = "aoc2024.day06:main"
aoc2024-day07 = "aoc2024.day07:main"
aoc2024-day08 = "aoc2024.day08:main"
aoc2024-day09 = "aoc2024.day09:main"
aoc2024-day10 = "aoc2024.day10:main"
aoc2024-day11 = "aoc2024.day11:main"
aoc2024-day12 = "aoc2024.day12:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2024"]

[tool.hatch.build.targets.sdist]
include = ["aoc2024", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
