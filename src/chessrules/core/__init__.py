"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Position, Rules

    board = Board.initial()
    pawn = board.piece_at(Position(6, 4))
    print(Rules.legal_moves(board, pawn))
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameEndReason, GameState, PieceKind
from chessrules.core.exceptions import (
    ChessError,
    IllegalMove,
    InvalidSelection,
    InvariantViolation,
)
from chessrules.core.layout import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import BOARD_SIZE, Position, in_bounds, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameState",
    "PieceKind",
    # Types / helpers
    "BOARD_SIZE",
    "Position",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Rules",
    # Errors
    "ChessError",
    "IllegalMove",
    "InvalidSelection",
    "InvariantViolation",
    # Layout
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
