"""Board coordinates and helpers.

Board layout (row, col), row 0 at the top::

    row 0  a8 b8 c8 d8 e8 f8 g8 h8   <- black back rank
    row 1  a7 ...                    <- black pawns
    ...
    row 6  a2 ...                    <- white pawns
    row 7  a1 b1 c1 d1 e1 f1 g1 h1   <- white back rank
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Position(NamedTuple):
    """A board cell as ``(row, col)``, both in ``0..7``."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        if not in_bounds(self.row, self.col):
            return f"({self.row}, {self.col})"
        return square_name(self)


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(pos: Position) -> str:
    """Human-readable name, e.g. ``Position(6, 4)`` → ``'e2'``."""
    return chr(ord("a") + pos.col) + str(BOARD_SIZE - pos.row)


def parse_square(name: str) -> Position:
    """Parse a square name, e.g. ``'e2'`` → ``Position(6, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
