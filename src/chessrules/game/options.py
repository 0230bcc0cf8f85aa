"""Rule options for a game."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chessrules.core.enums import PieceKind

_PROMOTION_KINDS = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class GameOptions:
    """All configurable rules of a :class:`~chessrules.game.game.Game`.

    Args:
        promotion_kind: What a pawn becomes on reaching the far row.
        draw_on_insufficient_material: End the game as a draw when neither
            side can possibly mate.
        move_limit: Half-moves without a capture or pawn move after which the
            game is drawn. ``None`` disables the rule.
        repetition_limit: Occurrences of the same placement with the same side
            to move after which the game is drawn. ``None`` disables the rule.
    """

    promotion_kind: PieceKind = PieceKind.QUEEN
    draw_on_insufficient_material: bool = True
    move_limit: int | None = 150
    repetition_limit: int | None = 5

    def __post_init__(self) -> None:
        if self.promotion_kind not in _PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {self.promotion_kind!r}")
        if self.move_limit is not None and self.move_limit < 1:
            raise ValueError(f"move_limit must be positive, got {self.move_limit}")
        if self.repetition_limit is not None and self.repetition_limit < 2:
            raise ValueError(
                f"repetition_limit must be at least 2, got {self.repetition_limit}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GameOptions:
        """Build options from plain data, e.g. a parsed settings file."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown game options: {', '.join(unknown)}")

        values = dict(data)
        kind = values.get("promotion_kind")
        if isinstance(kind, str):
            try:
                values["promotion_kind"] = PieceKind[kind.upper()]
            except KeyError:
                raise ValueError(f"Unknown piece kind: {kind!r}") from None
        return cls(**values)
