"""Piece model: kind tag, owner and current cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceKind
from chessrules.core.movement import MOVE_RULES
from chessrules.core.types import Position

if TYPE_CHECKING:
    from chessrules.core.board import Board

# Placement character ↔ (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
}

_PLACEMENT_CHARS: dict[tuple[Color, PieceKind], str] = {
    v: k for k, v in _CHAR_MAP.items()
}


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``kind`` and ``color`` never change after creation (promotion replaces
    the piece). ``position`` is owned by the :class:`Board` and kept equal to
    the cell holding the piece.
    """

    kind: PieceKind
    color: Color
    position: Position

    def available_moves(self, board: Board) -> list[Position]:
        """Candidate destinations by geometry alone; may leave own king in check."""
        return MOVE_RULES[self.kind](self, board)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black)."""
        return _PLACEMENT_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str, position: Position) -> Piece:
        """Create a piece from its placement character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, position)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]

    @property
    def name(self) -> str:
        """Readable name, e.g. ``'white knight'``."""
        return f"{self.color} {self.kind}"
