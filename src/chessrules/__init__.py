"""Two-player chess rule engine: move legality and game-ending conditions."""

from chessrules.core import (
    Board,
    ChessError,
    Color,
    GameEndReason,
    GameState,
    IllegalMove,
    InvalidSelection,
    InvariantViolation,
    Piece,
    PieceKind,
    Position,
    Rules,
    board_from_placement,
    board_to_placement,
)
from chessrules.game import Cell, Game, GameEvents, GameOptions, MoveRecord

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "ChessError",
    "Color",
    "Game",
    "GameEndReason",
    "GameEvents",
    "GameOptions",
    "GameState",
    "IllegalMove",
    "InvalidSelection",
    "InvariantViolation",
    "MoveRecord",
    "Piece",
    "PieceKind",
    "Position",
    "Rules",
    "board_from_placement",
    "board_to_placement",
]
