"""Eight-queens boards on a 64-bit bitboard.

Queens may not share a row or a column and may not touch diagonally.
Square ``row * 8 + col`` corresponds to bit ``row * 8 + col`` of the board.
"""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

SIZE = 8
SQUARES = SIZE * SIZE
_ROW_MASK = 0xFF


def _trailing_zeros(value: int, width: int = 64) -> int:
    """Number of trailing zero bits; ``width`` when the value is zero."""
    if value == 0:
        return width
    return (value & -value).bit_length() - 1


def get_queen_indices(queens: int) -> tuple[int, ...]:
    """Square index of the queen in each row, top row first.

    A row with no queen yields ``row * 8 + 64``.
    """
    return tuple(
        row * SIZE + _trailing_zeros((queens >> (row * SIZE)) & _ROW_MASK)
        for row in range(SIZE)
    )


def validate_exclusion_map(queens: int, exclusion_map: Sequence[int]) -> bool:
    """Check that every square is excluded, queen squares by exactly one queen
    and every other square by at least two."""
    for index, mask in enumerate(exclusion_map[:SQUARES]):
        if mask == 0:
            return False
        excluders = mask.bit_count()
        if queens >> index & 1:
            if excluders != 1:
                return False
        elif excluders < 2:
            return False
    return True


def get_exclusion_map(queens: int) -> list[int]:
    """For each square, a bit mask of the queens (numbered in square order)
    that exclude it through their row, column or adjacent diagonals."""
    exclusion_map = [0] * SQUARES
    queen_squares = [idx for idx in range(SQUARES) if queens >> idx & 1]
    if len(queen_squares) > SIZE:
        raise ValueError(f"at most {SIZE} queens are supported, got {len(queen_squares)}")

    for number, idx in enumerate(queen_squares):
        bit = 1 << number
        row, col = divmod(idx, SIZE)
        exclusion_map[idx] |= bit
        for i in range(SIZE):
            exclusion_map[row * SIZE + i] |= bit
            exclusion_map[i * SIZE + col] |= bit
        for d_row in (-1, 1):
            r = row + d_row
            if not 0 <= r < SIZE:
                continue
            for d_col in (-1, 1):
                c = col + d_col
                if 0 <= c < SIZE:
                    exclusion_map[r * SIZE + c] |= bit
    return exclusion_map


def is_valid_queen_placement(current: int, row: int, col: int, used_cols: int) -> bool:
    """Whether a queen fits at (row, col) given the rows above it are filled."""
    if used_cols >> col & 1:
        return False
    if row == 0:
        return True
    upper_left_free = col == 0 or not current >> (row * SIZE + col - 9) & 1
    upper_right_free = col == SIZE - 1 or not current >> (row * SIZE + col - 7) & 1
    return upper_left_free and upper_right_free


def place_queen(current: int, row: int, col: int, used_cols: int) -> tuple[int, int]:
    """Return the board and used-column mask with a queen added at (row, col)."""
    return current | (1 << (row * SIZE + col)), used_cols | (1 << col)


def _search(current: int, row: int, used_cols: int) -> Iterator[int]:
    if row == SIZE:
        yield current
        return
    for col in range(SIZE):
        if is_valid_queen_placement(current, row, col, used_cols):
            board, cols = place_queen(current, row, col, used_cols)
            yield from _search(board, row + 1, cols)


def gen_all_queens() -> list[int]:
    """Every valid board, in depth-first order with columns tried left to right."""
    return list(_search(0, 0, 0))


def get_random_queens(rng: random.Random) -> int:
    """A random valid board, found by backtracking over shuffled column orders."""
    column_orders: list[list[int]] = []
    for _ in range(SIZE):
        order = list(range(SIZE))
        rng.shuffle(order)
        column_orders.append(order)

    next_choice = [0] * SIZE
    current = 0
    used_cols = 0
    row = 0
    while row < SIZE:
        order = column_orders[row]
        placed = False
        while next_choice[row] < SIZE:
            col = order[next_choice[row]]
            next_choice[row] += 1
            if is_valid_queen_placement(current, row, col, used_cols):
                current, used_cols = place_queen(current, row, col, used_cols)
                placed = True
                break
        if placed:
            row += 1
            if row < SIZE:
                next_choice[row] = 0
        else:
            if row == 0:
                raise RuntimeError("could not place 8 queens")
            row -= 1
            prev_col = column_orders[row][next_choice[row] - 1]
            current &= ~(1 << (row * SIZE + prev_col))
            used_cols &= ~(1 << prev_col)
    return current


def get_counts() -> tuple[int, int]:
    """Number of valid boards, and how many of them have a valid exclusion map."""
    solutions = gen_all_queens()
    valid = sum(
        1 for board in solutions if validate_exclusion_map(board, get_exclusion_map(board))
    )
    return len(solutions), valid