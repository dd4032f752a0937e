"""Tests for Piece and PieceGrid."""

import pytest

from danchess.core.enums import Color, PieceType
from danchess.core.exceptions import BoardError
from danchess.core.grid import PieceGrid
from danchess.core.piece import Piece
from danchess.core.types import parse_position


class TestPiece:
    def test_from_char_case_sets_color(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_str_is_fen_char(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.QUEEN)) == "Q"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_every_fen_char_roundtrips(self) -> None:
        for ch in "PNBRQKpnbrqk":
            assert str(Piece.from_char(ch)) == ch

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_name(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).name == "Knight, Black"

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"


class TestGridInitial:
    def test_kings(self) -> None:
        grid = PieceGrid.initial()
        assert grid[parse_position("e1")] == Piece(Color.WHITE, PieceType.KING)
        assert grid[parse_position("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        grid = PieceGrid.initial()
        expected = "RNBQKBNR"
        for file_char, ch in zip("abcdefgh", expected):
            assert str(grid[parse_position(f"{file_char}1")]) == ch

    def test_pawns(self) -> None:
        grid = PieceGrid.initial()
        assert len(grid.pieces(Color.WHITE, PieceType.PAWN)) == 8
        assert len(grid.pieces(Color.BLACK, PieceType.PAWN)) == 8
        assert all(p.rank.value == 7 for p in grid.pieces(Color.BLACK, PieceType.PAWN))

    def test_empty_middle(self) -> None:
        grid = PieceGrid.initial()
        for rank in "3456":
            for file_char in "abcdefgh":
                assert grid.is_empty(parse_position(f"{file_char}{rank}"))


class TestGridOperations:
    def test_set_and_get(self) -> None:
        grid = PieceGrid()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        grid[parse_position("e4")] = piece
        assert grid[parse_position("e4")] == piece
        assert grid.is_empty(parse_position("e2"))

    def test_copy_independence(self) -> None:
        grid = PieceGrid.initial()
        copy = grid.copy()
        assert grid == copy
        copy[parse_position("e1")] = None
        assert grid != copy
        assert grid[parse_position("e1")] == Piece(Color.WHITE, PieceType.KING)

    def test_occupied_order(self) -> None:
        grid = PieceGrid.initial()
        positions = [pos for pos, _ in grid.occupied()]
        assert positions[0] == parse_position("a1")
        assert positions[-1] == parse_position("h8")
        assert len(positions) == 32

    def test_king_position(self) -> None:
        grid = PieceGrid.initial()
        assert grid.king_position(Color.WHITE) == parse_position("e1")
        assert grid.king_position(Color.BLACK) == parse_position("e8")

    def test_missing_king_raises(self) -> None:
        with pytest.raises(BoardError, match="No WHITE king"):
            PieceGrid().king_position(Color.WHITE)

    def test_duplicate_king_raises(self) -> None:
        grid = PieceGrid()
        grid[parse_position("a1")] = Piece(Color.BLACK, PieceType.KING)
        grid[parse_position("h8")] = Piece(Color.BLACK, PieceType.KING)
        with pytest.raises(BoardError, match="found 2"):
            grid.king_position(Color.BLACK)

    def test_repr(self) -> None:
        text = repr(PieceGrid.initial())
        assert "K" in text
        assert "a b c d e f g h" in text
