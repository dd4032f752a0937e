"""Tests for Rules: check detection."""

import pytest

from danchess.core.board import Board
from danchess.core.enums import Color
from danchess.core.exceptions import BoardError
from danchess.core.notation import board_from_fen, board_to_fen
from danchess.core.rules import CheckResult, Rules
from danchess.core.types import parse_position as sq


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        result = Rules.check(Board(), Color.WHITE)
        assert result == CheckResult(Color.WHITE, False, sq("e1"), ())
        assert not result

    def test_rook_on_open_file(self) -> None:
        board = board_from_fen("4r3/8/8/8/8/8/8/4K2k w - - 0 1")
        result = Rules.check(board, Color.WHITE)
        assert result.in_check
        assert result.king == sq("e1")
        assert result.attackers == (sq("e8"),)

    def test_blocked_rook(self) -> None:
        board = board_from_fen("4r3/8/8/8/4P3/8/8/4K2k w - - 0 1")
        assert not Rules.check(board, Color.WHITE).in_check

    def test_own_piece_blocks(self) -> None:
        board = board_from_fen("4r3/8/8/8/8/8/4B3/4K2k w - - 0 1")
        assert not Rules.is_in_check(board)

    def test_fools_mate(self) -> None:
        board = board_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        result = Rules.check(board, Color.WHITE)
        assert result.attackers == (sq("h4"),)

    def test_knight(self) -> None:
        board = board_from_fen("4k3/8/3N4/8/8/8/8/4K3 b - - 0 1")
        assert Rules.check(board, Color.BLACK).attackers == (sq("d6"),)

    def test_knight_jumps_over_pieces(self) -> None:
        board = board_from_fen("4k3/3ppp2/3pNp2/8/8/8/8/4K3 b - - 0 1")
        assert not Rules.is_in_check(board)
        board = board_from_fen("4k3/3pppp1/3p1N2/8/8/8/8/4K3 b - - 0 1")
        assert Rules.is_in_check(board)

    def test_white_pawn_attacks_forward(self) -> None:
        board = board_from_fen("4k3/3P4/8/8/8/8/8/4K3 b - - 0 1")
        assert Rules.check(board, Color.BLACK).attackers == (sq("d7"),)

    def test_pawn_does_not_attack_backwards(self) -> None:
        board = board_from_fen("8/8/8/8/8/3p4/8/4K2k w - - 0 1")
        assert not Rules.is_in_check(board)
        board = board_from_fen("8/8/8/8/8/8/3p4/4K2k w - - 0 1")
        assert Rules.is_in_check(board)

    def test_pawn_straight_ahead_does_not_attack(self) -> None:
        board = board_from_fen("4k3/4P3/8/8/8/8/8/4K3 b - - 0 1")
        assert not Rules.is_in_check(board)

    def test_bishop_diagonal(self) -> None:
        board = board_from_fen("4k3/8/8/b7/8/8/8/4K3 w - - 0 1")
        assert Rules.check(board, Color.WHITE).attackers == (sq("a5"),)

    def test_queen_both_lines(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/q3K3 w - - 0 1")
        assert Rules.is_in_check(board)
        board = board_from_fen("4k3/8/8/8/7q/8/8/4K3 w - - 0 1")
        assert Rules.is_in_check(board)

    def test_adjacent_king(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/4k3/4K3 w - - 0 1")
        assert Rules.check(board, Color.WHITE).attackers == (sq("e2"),)

    def test_double_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/5n2/8/r3K3 w - - 0 1")
        result = Rules.check(board, Color.WHITE)
        assert set(result.attackers) == {sq("a1"), sq("f3")}

    def test_defaults_to_side_to_move(self) -> None:
        board = board_from_fen("4r3/8/8/8/8/8/8/4K2k b - - 0 1")
        assert not Rules.is_in_check(board)
        assert Rules.is_in_check(board, Color.WHITE)

    def test_check_does_not_mutate(self) -> None:
        fen = "4r3/8/8/8/8/8/8/4K2k w - - 0 1"
        board = board_from_fen(fen)
        Rules.check(board, Color.WHITE)
        assert board_to_fen(board) == fen


class TestKingPreconditions:
    def test_missing_king_raises(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/8 w - - 0 1")
        with pytest.raises(BoardError):
            Rules.check(board, Color.WHITE)

    def test_two_kings_raise(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/K3K3 w - - 0 1")
        with pytest.raises(BoardError, match="Expected one WHITE king"):
            Rules.is_in_check(board)
