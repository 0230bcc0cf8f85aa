"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GameState(IntEnum):
    """Lifecycle of a single game. Every state except RUNNING is terminal."""

    RUNNING = 0
    CHECKMATE = 1
    STALEMATE = 2
    DRAW = 3


class GameEndReason(IntEnum):
    """Why a game left the RUNNING state."""

    NONE = 0
    CHECKMATE = 1
    STALEMATE = 2
    INSUFFICIENT_MATERIAL = 3
    MOVE_LIMIT = 4
    REPETITION = 5
