"""Tests for GameOptions."""

import pytest

from chessrules.core.enums import PieceKind
from chessrules.game.options import GameOptions


class TestGameOptions:
    def test_defaults(self) -> None:
        opts = GameOptions()
        assert opts.promotion_kind == PieceKind.QUEEN
        assert opts.draw_on_insufficient_material
        assert opts.move_limit == 150
        assert opts.repetition_limit == 5

    @pytest.mark.parametrize("kind", [PieceKind.KING, PieceKind.PAWN])
    def test_invalid_promotion_kind(self, kind: PieceKind) -> None:
        with pytest.raises(ValueError, match="Cannot promote"):
            GameOptions(promotion_kind=kind)

    def test_invalid_move_limit(self) -> None:
        with pytest.raises(ValueError, match="move_limit"):
            GameOptions(move_limit=0)

    def test_invalid_repetition_limit(self) -> None:
        with pytest.raises(ValueError, match="repetition_limit"):
            GameOptions(repetition_limit=1)

    def test_rules_can_be_disabled(self) -> None:
        opts = GameOptions(move_limit=None, repetition_limit=None)
        assert opts.move_limit is None
        assert opts.repetition_limit is None


class TestFromMapping:
    def test_piece_name(self) -> None:
        opts = GameOptions.from_mapping({"promotion_kind": "knight", "move_limit": 100})
        assert opts.promotion_kind == PieceKind.KNIGHT
        assert opts.move_limit == 100

    def test_empty_mapping_gives_defaults(self) -> None:
        assert GameOptions.from_mapping({}) == GameOptions()

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown game options: clock"):
            GameOptions.from_mapping({"clock": 300})

    def test_unknown_piece_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown piece kind"):
            GameOptions.from_mapping({"promotion_kind": "dragon"})
