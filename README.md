# aoc2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 20. Each day has its
own module, `aoc2024.day01` to `aoc2024.day20`. Each module has `run_a(text)`
for the first part of the puzzle and `run_b(text)` for the second. Both take
the puzzle input as a string and return the answer.

There is also `aoc2024.day00`, a template whose two parts both return the
length of the input. The command does not run it.

## Installation

```
pip install .
```

To install with the test dependencies as well:

```
pip install .[test]
```

## Running puzzles from the command line

By default the command reads each day's input from `input/dayNN.txt` under the
current directory, for example `input/day05.txt`. Use `--input-dir` to read
from a different directory.

Run a single day:

```
aoc2024 5
```

Read the inputs from another directory:

```
aoc2024 5 --input-dir path/to/inputs
```

Leave out the day number to run every day from 1 to 20 in order:

```
aoc2024
```

Each part prints one line, for example `Day 5a: 143` and then `Day 5b: 123`.

If the day number is not a whole number, the command prints
`Invalid day number ...`. If it is outside 1 to 20, it prints
`Can't run day number ...`. A missing input file stops the command with an
error.

## Using the modules from Python

```python
from aoc2024 import day01

with open("input/day01.txt") as handle:
    text = handle.read()

print(day01.run_a(text))
print(day01.run_b(text))
```

Some days also expose general helpers:

- `aoc2024.day07.gen_pattern(pattern_number, width)` writes a number as
  `width` base-3 digits, most significant first.
- `aoc2024.day09.whole_file_compact(blocks)` and
  `aoc2024.day09.find_empty_space(blocks, amount, before)` work on a list of
  block owners where `-1` marks a free block.
- `aoc2024.day11.count_stones(stones, blinks)` counts stones after any number
  of blinks.
- `aoc2024.day17.Machine` parses a program with `Machine.parse(text)`, steps it
  with `run()` and runs it to the end with `run_to_end()`;
  `aoc2024.day17.get_output_digit(a)` gives one output digit of the puzzle's
  program for a register value.
- `aoc2024.day18.shortest_path(text, width, height, iters)` and
  `aoc2024.day18.first_blocking_byte(text, width, height, iters)` work on a
  grid of any size.
- `aoc2024.day20.count_cheats(text, threshold, radius)` takes its own
  threshold and radius.

Shared grid utilities live in `aoc2024.common`: `Point`, `Grid`, `Direction`,
`DirectionParseError` and `extract_numbers`.

Malformed input raises `ValueError` (or an `IndexError` where a walk leaves
the grid).

## What the package does not do

- Day 16 has no solution for its second part: `aoc2024.day16.run_b` always
  returns an empty string.
- Day 17's second part relies on the shape of the puzzle's own program and is
  not a general solver.
- Day 14's second part returns the first second at which the robots' safety
  score is lowest; it does not draw or check for the picture.
- The package does not download puzzle inputs; they must be saved to files
  first.

## Running the tests

```
pytest
```