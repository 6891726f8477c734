"""Command line entry point printing the board counts."""

from __future__ import annotations

import argparse

from queenboard.board import get_counts


def main(argv: list[str] | None = None) -> int:
    """Print the number of boards and the number with valid exclusion maps."""
    parser = argparse.ArgumentParser(
        prog="queenboard",
        description="Count eight-queens boards with no diagonally touching queens.",
    )
    parser.parse_args(argv)
    total, valid = get_counts()
    print(total)
    print(valid)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())