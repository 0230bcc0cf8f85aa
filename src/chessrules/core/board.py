"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from chessrules.core.enums import Color, PieceKind
from chessrules.core.exceptions import InvariantViolation
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_POSITIONS, BOARD_SIZE, Position, in_bounds

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid that exclusively owns its pieces.

    Invariant: every piece's ``position`` equals the cell that holds it.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Geometric queries --------------------------------------------------

    @staticmethod
    def in_bounds(pos: Position) -> bool:
        return in_bounds(pos[0], pos[1])

    def piece_at(self, pos: Position) -> Piece | None:
        """Occupant of *pos*; raises InvariantViolation off the board."""
        self._require_in_bounds(pos)
        return self._grid[pos[0]][pos[1]]

    def is_empty(self, pos: Position) -> bool:
        return self.piece_at(pos) is None

    def color_at(self, pos: Position) -> Color | None:
        piece = self.piece_at(pos)
        return None if piece is None else piece.color

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces on the board in row-major order, optionally of one *color*."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def find_king(self, color: Color) -> Position:
        """Return the square of *color*'s king."""
        for piece in self.pieces(color):
            if piece.kind == PieceKind.KING:
                return piece.position
        raise InvariantViolation(f"No {color.name} king on board")

    # -- Set-up -------------------------------------------------------------

    def place(self, piece: Piece) -> None:
        """Put *piece* on its stored position, replacing any occupant."""
        self._require_in_bounds(piece.position)
        self._grid[piece.position[0]][piece.position[1]] = piece

    def remove(self, pos: Position) -> Piece | None:
        """Take the piece off *pos* and return it."""
        self._require_in_bounds(pos)
        piece = self._grid[pos[0]][pos[1]]
        self._grid[pos[0]][pos[1]] = None
        return piece

    # -- Moves --------------------------------------------------------------

    def apply_move(self, from_pos: Position, to_pos: Position) -> Piece | None:
        """Move the piece on *from_pos* to *to_pos*; return the captured piece.

        The captured piece keeps *to_pos* as its stored position so that
        :meth:`revert_move` can put it back unchanged.
        """
        self._require_in_bounds(from_pos)
        self._require_in_bounds(to_pos)
        piece = self._grid[from_pos[0]][from_pos[1]]
        if piece is None:
            raise InvariantViolation(f"No piece to move on {Position(*from_pos)}")
        captured = self._grid[to_pos[0]][to_pos[1]]
        self._grid[from_pos[0]][from_pos[1]] = None
        self._grid[to_pos[0]][to_pos[1]] = piece
        piece.position = Position(*to_pos)
        return captured

    def revert_move(
        self, from_pos: Position, to_pos: Position, captured: Piece | None
    ) -> None:
        """Undo :meth:`apply_move`: move back and restore the captured piece."""
        piece = self._grid[to_pos[0]][to_pos[1]]
        if piece is None:
            raise InvariantViolation(f"No piece to move back from {Position(*to_pos)}")
        self._grid[from_pos[0]][from_pos[1]] = piece
        piece.position = Position(*from_pos)
        self._grid[to_pos[0]][to_pos[1]] = captured
        if captured is not None:
            captured.position = Position(*to_pos)

    @contextmanager
    def simulate(self, from_pos: Position, to_pos: Position) -> Iterator[Piece | None]:
        """Apply a move for the duration of the ``with`` block, then revert it."""
        captured = self.apply_move(from_pos, to_pos)
        try:
            yield captured
        finally:
            self.revert_move(from_pos, to_pos, captured)

    # -- Copying / comparison -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: the new board owns fresh pieces."""
        b = Board()
        for piece in self.pieces():
            b.place(Piece(piece.kind, piece.color, piece.position))
        return b

    def placement_key(self) -> tuple[tuple[int, int] | None, ...]:
        """Hashable snapshot of who stands where, used for repetition counts."""
        key: list[tuple[int, int] | None] = []
        for pos in ALL_POSITIONS:
            piece = self._grid[pos.row][pos.col]
            key.append(None if piece is None else (int(piece.color), int(piece.kind)))
        return tuple(key)

    def _require_in_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise InvariantViolation(f"Square off the board: {tuple(pos)}")

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard layout: black on rows 0-1, white on rows 6-7."""
        b = cls()
        for col, kind in enumerate(_BACK_RANK):
            b.place(Piece(kind, Color.BLACK, Position(0, col)))
            b.place(Piece(PieceKind.PAWN, Color.BLACK, Position(1, col)))
            b.place(Piece(PieceKind.PAWN, Color.WHITE, Position(6, col)))
            b.place(Piece(kind, Color.WHITE, Position(7, col)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._grid[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
