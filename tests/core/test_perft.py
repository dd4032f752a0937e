"""Perft tests: leaf counts of the legal-move tree against published values.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

import pytest

from danchess.core.board import Board
from danchess.core.enums import PROMOTION_TYPES, BoardMode
from danchess.core.move_generator import MoveGenerator
from danchess.core.notation import STARTING_FEN, board_from_fen


def perft(board: Board, depth: int) -> int:
    """Count leaf nodes at *depth* using copy/make; a promotion counts once per piece."""
    if depth == 0:
        return 1
    nodes = 0
    for start, destinations in MoveGenerator(board).all_legal_moves().items():
        for end in destinations:
            child = board.copy()
            if child.apply_move(start, end) == BoardMode.AWAITING_PROMOTION:
                for piece_type in PROMOTION_TYPES:
                    promoted = child.copy()
                    promoted.choose_promotion(piece_type)
                    nodes += perft(promoted, depth - 1)
            else:
                nodes += perft(child, depth - 1)
    return nodes


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(board_from_fen(STARTING_FEN), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(board_from_fen(STARTING_FEN), 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(board_from_fen(STARTING_FEN), 3) == 8_902


# ── Kiwipete (castling, en passant, promotions) ──────────────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        assert perft(board_from_fen(KIWIPETE), 1) == 48

    @pytest.mark.slow
    def test_depth_2(self) -> None:
        assert perft(board_from_fen(KIWIPETE), 2) == 2_039


# ── Position 3: en passant pins and rook endgame ─────────────────────────────

POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPos3:
    def test_depth_1(self) -> None:
        assert perft(board_from_fen(POS3), 1) == 14

    def test_depth_2(self) -> None:
        assert perft(board_from_fen(POS3), 2) == 191

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        assert perft(board_from_fen(POS3), 3) == 2_812


# ── Position 4: promotions and black castling ────────────────────────────────

POS4 = "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1"


class TestPerftPos4:
    def test_depth_1(self) -> None:
        assert perft(board_from_fen(POS4), 1) == 6

    def test_depth_2(self) -> None:
        assert perft(board_from_fen(POS4), 2) == 264


# ── Position 5 ───────────────────────────────────────────────────────────────

POS5 = "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"


class TestPerftPos5:
    def test_depth_1(self) -> None:
        assert perft(board_from_fen(POS5), 1) == 44

    @pytest.mark.slow
    def test_depth_2(self) -> None:
        assert perft(board_from_fen(POS5), 2) == 1_486
