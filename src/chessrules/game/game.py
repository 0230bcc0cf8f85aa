"""Game: the state machine of a single match.

Owns the board, the side to move and the game state, and drives the
two-phase move protocol: select a source cell, then a destination cell.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import NamedTuple, NoReturn

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameEndReason, GameState, PieceKind
from chessrules.core.exceptions import IllegalMove, InvalidSelection, InvariantViolation
from chessrules.core.movement import PROMOTION_ROW
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Position
from chessrules.game.options import GameOptions
from chessrules.game.records import Cell, GameEvents, MoveRecord

_LOGGER = logging.getLogger(__name__)

_DRAW_MESSAGES: dict[GameEndReason, str] = {
    GameEndReason.INSUFFICIENT_MATERIAL: "Draw by insufficient material.",
    GameEndReason.MOVE_LIMIT: "Draw by the move limit.",
    GameEndReason.REPETITION: "Draw by repetition.",
}


class Selection(NamedTuple):
    """Source cell picked by :meth:`Game.move_piece_from` and its legal targets."""

    origin: Position
    targets: tuple[Position, ...]


class Game:
    """A single chess match between two players sharing one board.

    Usage::

        game = Game()
        game.move_piece_from(Cell.at(6, 4))   # -> [Position(5, 4), Position(4, 4)]
        game.move_piece_to(Cell.at(4, 4))     # -> "White moves pawn from e2 to e4. ..."

    Pass *board* and *player* to start from a custom position; a position
    that is already decided starts the game in its terminal state.
    """

    __slots__ = (
        "_board",
        "_player",
        "_state",
        "_end_reason",
        "_options",
        "_selection",
        "_halfmove_clock",
        "_repetitions",
        "_history",
        "events",
    )

    def __init__(
        self,
        options: GameOptions | None = None,
        *,
        board: Board | None = None,
        player: Color = Color.WHITE,
    ) -> None:
        self._options = options if options is not None else GameOptions()
        self._board = board if board is not None else Board.initial()
        self._player = player
        self._state = GameState.RUNNING
        self._end_reason = GameEndReason.NONE
        self._selection: Selection | None = None
        self._halfmove_clock = 0
        self._repetitions: Counter[tuple[object, ...]] = Counter()
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

        self._check_start_position()
        self._repetitions[self._position_key()] += 1
        self._evaluate()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def player(self) -> Color:
        """Side to move."""
        return self._player

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def end_reason(self) -> GameEndReason:
        return self._end_reason

    @property
    def options(self) -> GameOptions:
        return self._options

    @property
    def is_game_over(self) -> bool:
        return self._state != GameState.RUNNING

    @property
    def winner(self) -> Color | None:
        """The mating side, or ``None`` unless the game ended in checkmate."""
        if self._state == GameState.CHECKMATE:
            return self._player.opposite
        return None

    @property
    def selected(self) -> Selection | None:
        return self._selection

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def halfmove_clock(self) -> int:
        """Half-moves since the last capture or pawn move."""
        return self._halfmove_clock

    def is_in_check(self) -> bool:
        """Whether the side to move is in check."""
        return Rules.is_in_check(self._board, self._player)

    def legal_moves(self) -> dict[Position, list[Position]]:
        """Legal destinations of every piece the side to move can move."""
        if self.is_game_over:
            return {}
        return Rules.all_legal_moves(self._board, self._player)

    # ── Move protocol ────────────────────────────────────────────────────

    def move_piece_from(self, cell: Cell) -> list[Position]:
        """Select the piece on *cell* and return its legal destinations.

        Raises:
            InvalidSelection: the game is over, or *cell* is off the board,
                empty, not what the caller expected, or holds an opponent's
                piece. Nothing changes in that case.
        """
        if self.is_game_over:
            self._reject_selection("The game is over")

        pos = Position(*cell.position)
        if not Board.in_bounds(pos):
            self._reject_selection(f"Cell {tuple(pos)} is off the board")

        piece = self._board.piece_at(pos)
        if piece is None:
            self._reject_selection(f"No piece on {pos}")
        if cell.kind is not None and cell.kind != piece.kind:
            self._reject_selection(f"Expected a {cell.kind} on {pos}, found {piece.name}")
        if piece.color != self._player:
            self._reject_selection(
                f"The {piece.name} on {pos} does not belong to {self._player}"
            )

        targets = tuple(Rules.legal_moves(self._board, piece))
        self._selection = Selection(pos, targets)
        _LOGGER.debug("Selected %s on %s: %d legal moves", piece.name, pos, len(targets))
        return list(targets)

    def move_piece_to(self, cell: Cell) -> str:
        """Move the selected piece to *cell* and describe the outcome.

        Raises:
            IllegalMove: the game is over, no piece is selected, or *cell* is
                not a legal destination. The selection is kept in the last case.
        """
        if self.is_game_over:
            self._reject_move("The game is over")
        if self._selection is None:
            self._reject_move("No piece selected")

        origin, targets = self._selection
        target = Position(*cell.position)
        if target not in targets:
            piece = self._board.piece_at(origin)
            name = piece.name if piece is not None else "piece"
            self._reject_move(f"The {name} on {origin} cannot move to {target}")

        return self._commit(origin, target).message

    def cancel_selection(self) -> None:
        self._selection = None

    def undo_last_move(self) -> MoveRecord | None:
        """Take back the last move. Returns its record, or None if there is none."""
        if not self._history:
            return None

        record = self._history.pop()
        self._forget_position()

        if record.promoted_to is not None:
            self._board.place(record.piece)
        self._board.revert_move(record.from_pos, record.to_pos, record.captured)

        self._player = record.color
        self._halfmove_clock = record.halfmove_clock_before
        self._state = GameState.RUNNING
        self._end_reason = GameEndReason.NONE
        self._selection = None
        _LOGGER.debug("Undid %s %s-%s", record.piece.name, record.from_pos, record.to_pos)
        return record

    # ── Internal ─────────────────────────────────────────────────────────

    def _commit(self, origin: Position, target: Position) -> MoveRecord:
        board = self._board
        mover = self._player
        halfmove_before = self._halfmove_clock

        captured = board.apply_move(origin, target)
        piece = board.piece_at(target)
        assert piece is not None

        promoted: Piece | None = None
        if piece.kind == PieceKind.PAWN and target.row == PROMOTION_ROW[piece.color]:
            promoted = Piece(self._options.promotion_kind, piece.color, target)
            board.place(promoted)

        if captured is not None or piece.kind == PieceKind.PAWN:
            self._halfmove_clock = 0
        else:
            self._halfmove_clock += 1

        selection = self._selection
        self._selection = None
        self._player = mover.opposite
        self._repetitions[self._position_key()] += 1
        try:
            self._evaluate()
        except InvariantViolation:
            self._forget_position()
            self._player = mover
            self._halfmove_clock = halfmove_before
            self._selection = selection
            if promoted is not None:
                board.place(piece)
            board.revert_move(origin, target, captured)
            raise

        record = MoveRecord(
            color=mover,
            from_pos=origin,
            to_pos=target,
            piece=piece,
            captured=captured,
            promoted_to=promoted,
            was_check=self.is_in_check(),
            state_after=self._state,
            end_reason=self._end_reason,
            halfmove_clock_before=halfmove_before,
        )
        record.message = self._describe(record)
        self._history.append(record)
        _LOGGER.debug("Move %d: %s", len(self._history), record.message)

        for cb in self.events.on_move:
            cb(record)
        if self.is_game_over:
            for cb in self.events.on_game_over:
                cb(self._state, self._end_reason)
        return record

    def _check_start_position(self) -> None:
        for color in Color:
            kings = [p for p in self._board.pieces(color) if p.kind == PieceKind.KING]
            if len(kings) != 1:
                raise InvariantViolation(
                    f"Expected one {color.name} king on board, found {len(kings)}"
                )
        waiting = self._player.opposite
        if Rules.is_in_check(self._board, waiting):
            raise InvariantViolation(
                f"{str(waiting).capitalize()} is in check with {self._player} to move"
            )

    def _evaluate(self) -> None:
        opts = self._options
        state, reason = Rules.evaluate(
            self._board,
            self._player,
            insufficient_material=opts.draw_on_insufficient_material,
        )
        if state == GameState.RUNNING:
            if opts.move_limit is not None and self._halfmove_clock >= opts.move_limit:
                state, reason = GameState.DRAW, GameEndReason.MOVE_LIMIT
            elif (
                opts.repetition_limit is not None
                and self._repetitions[self._position_key()] >= opts.repetition_limit
            ):
                state, reason = GameState.DRAW, GameEndReason.REPETITION

        self._state = state
        self._end_reason = reason
        if state != GameState.RUNNING:
            _LOGGER.info("Game over: %s (%s)", state.name, reason.name)

    def _describe(self, record: MoveRecord) -> str:
        mover = str(record.color).capitalize()
        kind = record.piece.kind
        if record.captured is not None:
            parts = [
                f"{mover} {kind} on {record.from_pos} captures "
                f"{record.captured.name} on {record.to_pos}."
            ]
        else:
            parts = [f"{mover} moves {kind} from {record.from_pos} to {record.to_pos}."]
        if record.promoted_to is not None:
            parts.append(f"Pawn promoted to {record.promoted_to.kind}.")

        side = str(self._player).capitalize()
        if self._state == GameState.CHECKMATE:
            parts.append(f"Checkmate! {mover} wins.")
        elif self._state == GameState.STALEMATE:
            parts.append("Stalemate! The game is a draw.")
        elif self._state == GameState.DRAW:
            parts.append(_DRAW_MESSAGES[self._end_reason])
        elif record.was_check:
            parts.append(f"{side} is in check.")
        else:
            parts.append(f"{side} to move.")
        return " ".join(parts)

    def _position_key(self) -> tuple[object, ...]:
        return (self._board.placement_key(), self._player)

    def _forget_position(self) -> None:
        key = self._position_key()
        self._repetitions[key] -= 1
        if self._repetitions[key] <= 0:
            del self._repetitions[key]

    @staticmethod
    def _reject_selection(reason: str) -> NoReturn:
        _LOGGER.warning("Invalid selection: %s", reason)
        raise InvalidSelection(reason)

    @staticmethod
    def _reject_move(reason: str) -> NoReturn:
        _LOGGER.warning("Illegal move: %s", reason)
        raise IllegalMove(reason)
