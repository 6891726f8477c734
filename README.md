# queenboard

Tools for 8x8 boards that hold eight queens. No two queens may share a row
or a column, and no two queens may touch diagonally. "Queens"-style logic
puzzles use this layout.

A board is an integer bitboard. Bit `row * 8 + col` is set on each square
that holds a queen.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
queenboard
```

The command can also be run as `python -m queenboard.cli`. It takes no
options apart from `--help`. It prints two numbers, one per line:

1. The number of valid boards (5242).
2. The number of those boards that have a valid exclusion map. In a valid
   map, every empty square is excluded by at least two queens, and every
   queen's square is excluded only by that queen.

## Library

All functions are in `queenboard.board`:

```python
import random

from queenboard.board import (
    gen_all_queens,
    get_counts,
    get_exclusion_map,
    get_queen_indices,
    get_random_queens,
    validate_exclusion_map,
)

boards = gen_all_queens()            # every valid board, in search order
board = get_random_queens(random.Random(12345))
indices = get_queen_indices(board)   # square index of the queen in each row
exclusions = get_exclusion_map(board)
print(validate_exclusion_map(board, exclusions))
print(get_counts())                  # (total boards, boards with a valid map)
```

- `gen_all_queens()` returns every valid board as a list. The search is
  depth-first, one row at a time, and tries the columns from left to right.
- `get_random_queens(rng)` takes a `random.Random`. It shuffles the column
  order of each row, then backtracks through those orders until it has a
  valid board. The same seed always gives the same board.
- `get_queen_indices(queens)` returns a tuple of eight square indices, one
  for each row, top row first. A row without a queen gives `row * 8 + 64`.
- `get_exclusion_map(queens)` returns a list of 64 bitmasks. Bit `k` is set
  on a square when the `k`-th queen excludes that square through its row,
  its column or one of its adjacent diagonals. Queens are numbered in
  ascending square order. A board with more than eight queens raises
  `ValueError`.
- `validate_exclusion_map(queens, exclusion_map)` checks a map against the
  rule described under "Command line".
- `is_valid_queen_placement(current, row, col, used_cols)` checks whether a
  queen may go at `(row, col)`, given the board built so far in the rows
  above and the mask of columns already in use.
- `place_queen(current, row, col, used_cols)` returns the board and the
  column mask with the new queen added.

## What it does not do

The package only enumerates, samples and checks queen layouts. It does not
divide a board into coloured regions, and it does not build or solve
playable puzzles.