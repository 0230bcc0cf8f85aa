"""Check detection, king-safety filtering and terminal-state evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameEndReason, GameState, PieceKind

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece
    from chessrules.core.types import Position

_MINOR_PIECES = (PieceKind.BISHOP, PieceKind.KNIGHT)


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every legality question goes through :meth:`legal_moves`, so selecting a
    piece and deciding checkmate or stalemate can never disagree.
    """

    @staticmethod
    def is_square_attacked(board: Board, pos: Position, by_color: Color) -> bool:
        """Whether any *by_color* piece has *pos* among its candidate moves."""
        return any(pos in piece.available_moves(board) for piece in board.pieces(by_color))

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return Rules.is_square_attacked(board, board.find_king(color), color.opposite)

    @staticmethod
    def legal_moves(board: Board, piece: Piece) -> list[Position]:
        """Candidate moves of *piece* that keep its own king safe."""
        origin = piece.position
        legal: list[Position] = []
        for target in piece.available_moves(board):
            with board.simulate(origin, target):
                if not Rules.is_in_check(board, piece.color):
                    legal.append(target)
        return legal

    @staticmethod
    def all_legal_moves(board: Board, color: Color) -> dict[Position, list[Position]]:
        """Legal destinations keyed by origin, for every *color* piece that can move."""
        moves: dict[Position, list[Position]] = {}
        for piece in board.pieces(color):
            targets = Rules.legal_moves(board, piece)
            if targets:
                moves[piece.position] = targets
        return moves

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return any(Rules.legal_moves(board, piece) for piece in board.pieces(color))

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return Rules.is_in_check(board, color) and not Rules.has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return not Rules.is_in_check(board, color) and not Rules.has_legal_move(
            board, color
        )

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [p for p in board.pieces() if p.kind != PieceKind.KING]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0].kind in _MINOR_PIECES

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            a, b = others
            if (
                a.kind == PieceKind.BISHOP
                and b.kind == PieceKind.BISHOP
                and a.color != b.color
            ):
                return sum(a.position) % 2 == sum(b.position) % 2

        return False

    @staticmethod
    def evaluate(
        board: Board, color: Color, *, insufficient_material: bool = True
    ) -> tuple[GameState, GameEndReason]:
        """Determine the state of the game with *color* to move."""
        if not Rules.has_legal_move(board, color):
            if Rules.is_in_check(board, color):
                return GameState.CHECKMATE, GameEndReason.CHECKMATE
            return GameState.STALEMATE, GameEndReason.STALEMATE

        if insufficient_material and Rules.is_insufficient_material(board):
            return GameState.DRAW, GameEndReason.INSUFFICIENT_MATERIAL

        return GameState.RUNNING, GameEndReason.NONE
