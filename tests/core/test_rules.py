"""Tests for Rules: check detection, legality filtering, terminal states."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameEndReason, GameState
from chessrules.core.layout import board_from_placement
from chessrules.core.rules import Rules
from chessrules.core.types import Position, parse_square

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


def _legal(board: Board, square: str) -> set[Position]:
    piece = board.piece_at(parse_square(square))
    assert piece is not None
    return set(Rules.legal_moves(board, piece))


def _squares(*names: str) -> set[Position]:
    return {parse_square(name) for name in names}


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_knight_check(self) -> None:
        board = board_from_placement("4k3/8/3N4/8/8/8/8/4K3")
        assert Rules.is_in_check(board, Color.BLACK)

    def test_pawn_attacks_diagonally_only(self) -> None:
        board = board_from_placement("8/8/8/3p4/4K3/8/8/k7")
        assert Rules.is_in_check(board, Color.WHITE)
        board = board_from_placement("8/8/8/4p3/4K3/8/8/k7")
        assert not Rules.is_in_check(board, Color.WHITE)

    def test_blocked_ray_is_not_check(self) -> None:
        board = board_from_placement("4r1k1/8/8/8/8/8/4B3/4K3")
        assert not Rules.is_in_check(board, Color.WHITE)
        assert Rules.is_square_attacked(board, parse_square("e2"), Color.BLACK)


class TestLegalMoves:
    def test_pinned_piece_cannot_move(self) -> None:
        board = board_from_placement("4r1k1/8/8/8/8/8/4B3/4K3")
        bishop = board.piece_at(parse_square("e2"))
        assert bishop.available_moves(board)
        assert _legal(board, "e2") == set()

    def test_pinned_rook_may_slide_along_pin(self) -> None:
        board = board_from_placement("4r1k1/8/8/8/8/8/4R3/4K3")
        assert _legal(board, "e2") == _squares("e3", "e4", "e5", "e6", "e7", "e8")

    def test_king_avoids_attacked_squares(self) -> None:
        board = board_from_placement("3rk3/8/8/8/8/8/8/4K3")
        assert _legal(board, "e1") == _squares("e2", "f2", "f1")

    def test_king_avoids_pawn_diagonals(self) -> None:
        board = board_from_placement("4k3/8/8/4p3/8/4K3/8/8")
        legal = _legal(board, "e3")
        assert parse_square("e4") in legal
        assert parse_square("d4") not in legal
        assert parse_square("f4") not in legal

    def test_king_cannot_capture_protected_piece(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/3q4/3rK3")
        assert _legal(board, "e1") == set()

    def test_king_cannot_retreat_along_checking_ray(self) -> None:
        board = board_from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert parse_square("e8") not in _legal(board, "d8")

    def test_must_answer_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/4r3/R3K3")
        assert _legal(board, "a1") == set()
        assert parse_square("e2") in _legal(board, "e1")

    def test_block_is_legal_response(self) -> None:
        board = board_from_placement("4k3/4r3/8/8/8/8/8/R3K3")
        assert _legal(board, "a1") == set()
        board = board_from_placement("4k3/4r3/8/8/8/8/R7/4K3")
        assert _legal(board, "a2") == _squares("e2")

    def test_filtering_leaves_board_untouched(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        before = board.copy()
        Rules.all_legal_moves(board, Color.WHITE)
        Rules.evaluate(board, Color.WHITE)
        assert board == before

    def test_initial_position_has_twenty_moves(self) -> None:
        moves = Rules.all_legal_moves(Board.initial(), Color.WHITE)
        assert len(moves) == 10
        assert sum(len(targets) for targets in moves.values()) == 20
        assert set(moves[Position(6, 0)]) == {Position(5, 0), Position(4, 0)}


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        assert Rules.is_checkmate(board, Color.WHITE)
        assert Rules.evaluate(board, Color.WHITE) == (
            GameState.CHECKMATE,
            GameEndReason.CHECKMATE,
        )

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.is_checkmate(board, Color.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)
        assert Rules.evaluate(board, Color.WHITE)[0] == GameState.RUNNING

    def test_not_checkmate_when_checker_can_be_captured(self) -> None:
        board = board_from_placement("6k1/R7/8/8/8/8/5PPP/r5K1")
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.evaluate(board, Color.BLACK) == (
            GameState.STALEMATE,
            GameEndReason.STALEMATE,
        )

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_placement("7k/8/5K2/8/8/8/8/8")
        assert not Rules.is_stalemate(board, Color.BLACK)


class TestInsufficientMaterial:
    def test_k_vs_k(self) -> None:
        board = board_from_placement("8/8/4k3/8/8/4K3/8/8")
        assert Rules.is_insufficient_material(board)
        assert Rules.evaluate(board, Color.WHITE) == (
            GameState.DRAW,
            GameEndReason.INSUFFICIENT_MATERIAL,
        )

    def test_disabled_draw_keeps_running(self) -> None:
        board = board_from_placement("8/8/4k3/8/8/4K3/8/8")
        state, _ = Rules.evaluate(board, Color.WHITE, insufficient_material=False)
        assert state == GameState.RUNNING

    def test_k_bishop_vs_k(self) -> None:
        board = board_from_placement("8/8/4k3/8/8/4K3/3B4/8")
        assert Rules.is_insufficient_material(board)

    def test_k_knight_vs_k(self) -> None:
        board = board_from_placement("8/8/4k3/8/8/4K3/3n4/8")
        assert Rules.is_insufficient_material(board)

    def test_same_colour_bishops(self) -> None:
        board = board_from_placement("8/8/4k3/2b5/8/4K3/3B4/8")
        assert Rules.is_insufficient_material(board)

    def test_opposite_colour_bishops_sufficient(self) -> None:
        board = board_from_placement("8/8/4k3/3b4/8/4K3/3B4/8")
        assert not Rules.is_insufficient_material(board)

    def test_k_rook_vs_k_sufficient(self) -> None:
        board = board_from_placement("8/8/4k3/8/8/4K3/3R4/8")
        assert not Rules.is_insufficient_material(board)

    def test_kp_vs_k_sufficient(self) -> None:
        board = board_from_placement("8/8/4k3/8/4P3/4K3/8/8")
        assert not Rules.is_insufficient_material(board)

    def test_two_knights_sufficient(self) -> None:
        board = board_from_placement("8/8/4k3/8/8/4K3/3NN3/8")
        assert not Rules.is_insufficient_material(board)
