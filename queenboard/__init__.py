"""Enumerate, sample and check 8x8 boards of queens that share no row or
column and do not touch diagonally."""

__version__ = "0.1.0"
__all__ = ["board", "cli"]