"""Board set-up codec using the piece-placement field of FEN."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a placement string (row 0 first) into a :class:`Board`.

    A full FEN record is accepted too; only its first field is read.
    """
    fields = placement.split()
    if not fields:
        raise ValueError("Empty placement string")
    rows = fields[0].split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {placement!r}")

    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {placement!r}")
                board.place(Piece.from_char(ch, Position(row, col)))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a placement string."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board.piece_at(Position(row, col))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
