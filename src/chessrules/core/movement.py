"""Per-kind movement geometry (candidate moves, no check filtering)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceKind
from chessrules.core.types import Position, in_bounds

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

Offset = tuple[int, int]

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Offset, ...] = ROOK_DIRS + BISHOP_DIRS

# Row delta of a single pawn step and the row pawns start from.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}

MoveRule = Callable[["Piece", "Board"], list[Position]]


# -- Shared geometry -------------------------------------------------------


def _step_moves(piece: Piece, board: Board, offsets: tuple[Offset, ...]) -> list[Position]:
    moves: list[Position] = []
    for d_row, d_col in offsets:
        pos = piece.position.offset(d_row, d_col)
        if not in_bounds(pos.row, pos.col):
            continue
        target = board.piece_at(pos)
        if target is None or target.color != piece.color:
            moves.append(pos)
    return moves


def _ray_moves(piece: Piece, board: Board, directions: tuple[Offset, ...]) -> list[Position]:
    moves: list[Position] = []
    for d_row, d_col in directions:
        pos = piece.position.offset(d_row, d_col)
        while in_bounds(pos.row, pos.col):
            target = board.piece_at(pos)
            if target is None:
                moves.append(pos)
            else:
                if target.color != piece.color:
                    moves.append(pos)
                break
            pos = pos.offset(d_row, d_col)
    return moves


# -- Per-kind rules ----------------------------------------------------------


def king_moves(piece: Piece, board: Board) -> list[Position]:
    return _step_moves(piece, board, KING_OFFSETS)


def knight_moves(piece: Piece, board: Board) -> list[Position]:
    return _step_moves(piece, board, KNIGHT_OFFSETS)


def rook_moves(piece: Piece, board: Board) -> list[Position]:
    return _ray_moves(piece, board, ROOK_DIRS)


def bishop_moves(piece: Piece, board: Board) -> list[Position]:
    return _ray_moves(piece, board, BISHOP_DIRS)


def queen_moves(piece: Piece, board: Board) -> list[Position]:
    return _ray_moves(piece, board, QUEEN_DIRS)


def pawn_moves(piece: Piece, board: Board) -> list[Position]:
    """Pushes onto empty squares, diagonal steps only onto enemy pieces."""
    pos = piece.position
    step = PAWN_DIRECTION[piece.color]
    moves: list[Position] = []

    one = pos.offset(step, 0)
    if in_bounds(one.row, one.col) and board.is_empty(one):
        moves.append(one)
        two = pos.offset(2 * step, 0)
        if pos.row == PAWN_START_ROW[piece.color] and board.is_empty(two):
            moves.append(two)

    for d_col in (-1, 1):
        diag = pos.offset(step, d_col)
        if not in_bounds(diag.row, diag.col):
            continue
        target = board.piece_at(diag)
        if target is not None and target.color != piece.color:
            moves.append(diag)
    return moves


MOVE_RULES: dict[PieceKind, MoveRule] = {
    PieceKind.KING: king_moves,
    PieceKind.QUEEN: queen_moves,
    PieceKind.ROOK: rook_moves,
    PieceKind.BISHOP: bishop_moves,
    PieceKind.KNIGHT: knight_moves,
    PieceKind.PAWN: pawn_moves,
}
