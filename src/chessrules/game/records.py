"""Caller-facing value objects: cell selections, move records, events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameEndReason, GameState, PieceKind
from chessrules.core.types import Position

if TYPE_CHECKING:
    from chessrules.core.piece import Piece


@dataclass(frozen=True, slots=True)
class Cell:
    """A cell picked by the user.

    ``kind`` is what the caller believes stands on the cell (``None`` for an
    empty cell or when unknown). It is checked against the board on selection.
    """

    position: Position
    kind: PieceKind | None = None

    @classmethod
    def at(cls, row: int, col: int, kind: PieceKind | None = None) -> Cell:
        return cls(Position(row, col), kind)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    from_pos: Position
    to_pos: Position
    piece: Piece
    captured: Piece | None = None
    promoted_to: Piece | None = None
    was_check: bool = False
    state_after: GameState = GameState.RUNNING
    end_reason: GameEndReason = GameEndReason.NONE
    message: str = ""
    # Half-move clock before the move, restored on undo.
    halfmove_clock_before: int = 0

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


MoveCallback = Callable[[MoveRecord], None]
GameOverCallback = Callable[[GameState, GameEndReason], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
