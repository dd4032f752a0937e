"""FEN parsing and serialization.

A record has six space-separated fields::

    <placement> <active> <castling> <en passant> <halfmove> <fullmove>

Placement lists ranks 8 → 1, files a → h; digits 1-8 stand for runs of empty
squares and may not follow one another.
"""

from __future__ import annotations

import logging
import re

from danchess.core.board import Board
from danchess.core.enums import BoardMode, CastlingRights, Color
from danchess.core.exceptions import (
    BoardError,
    ConsecutiveNumbersError,
    InvalidRankCountError,
    InvalidRowCountError,
    MalformedFieldError,
)
from danchess.core.grid import PieceGrid
from danchess.core.notation.models import FenFields
from danchess.core.piece import PIECE_CHARS, Piece
from danchess.core.types import File, Position, Rank

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
_EMPTY_DIGITS = "12345678"
_CLOCK_RE = re.compile(r"[0-9]+")


def split_fen(fen: str) -> FenFields:
    """Split *fen* into its six raw fields."""
    parts = fen.split()
    if len(parts) != 6:
        raise MalformedFieldError(f"Expected 6 FEN fields, found {len(parts)}: {fen!r}")
    return FenFields(*parts)


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`."""
    fields = split_fen(fen)

    grid = _parse_placement(fields.placement)

    if fields.active_color == "w":
        turn = Color.WHITE
    elif fields.active_color == "b":
        turn = Color.BLACK
    else:
        raise MalformedFieldError(
            f"Invalid active color: {fields.active_color!r}, expected 'w' or 'b'"
        )

    board = Board(
        grid=grid,
        turn=turn,
        castling=_parse_castling(fields.castling),
        en_passant=_parse_en_passant(fields.en_passant),
        halfmove_clock=_parse_clock(fields.halfmove, "halfmove clock"),
        fullmove_number=_parse_clock(fields.fullmove, "fullmove number"),
    )
    _LOGGER.debug("Loaded FEN %s", fields)
    return board


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN.

    FEN has no field for a pending promotion, so a board in
    :attr:`BoardMode.AWAITING_PROMOTION` raises :class:`BoardError`.
    """
    if board.mode != BoardMode.REGULAR:
        raise BoardError(
            f"Cannot write FEN while a promotion is pending on {board.promotion_square}"
        )

    # 1. Placement
    rows: list[str] = []
    for rank in reversed(Rank):
        empty = 0
        row = ""
        for file in File:
            piece = board.grid[Position(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    # 2. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if board.castling & right
    )

    # 3. En passant
    ep_str = board.en_passant.algebraic if board.en_passant is not None else "-"

    fields = FenFields(
        placement="/".join(rows),
        active_color=board.turn.fen_char,
        castling=castling_str or "-",
        en_passant=ep_str,
        halfmove=str(board.halfmove_clock),
        fullmove=str(board.fullmove_number),
    )
    return str(fields)


# ── Field parsers ────────────────────────────────────────────────────────────


def _parse_placement(placement: str) -> PieceGrid:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidRankCountError(
            f"Invalid rank count, found: {len(ranks)}, expected: 8"
        )

    grid = PieceGrid()
    for rank, rank_text in zip(reversed(Rank), ranks):
        files_seen = 0
        previous_was_digit = False
        for ch in rank_text:
            if ch in _EMPTY_DIGITS:
                if previous_was_digit:
                    raise ConsecutiveNumbersError(f"Unexpected consecutive number: {ch}")
                files_seen += int(ch)
                previous_was_digit = True
            elif ch in PIECE_CHARS:
                if files_seen < 8:
                    grid[Position(rank, File(files_seen + 1))] = Piece.from_char(ch)
                files_seen += 1
                previous_was_digit = False
            else:
                raise MalformedFieldError(
                    f"Unexpected character {ch!r} in rank {rank.algebraic}: {rank_text!r}"
                )
        if files_seen != 8:
            raise InvalidRowCountError(f"Invalid count for row, got: {files_seen}")
    return grid


def _parse_castling(text: str) -> CastlingRights:
    if text == "-":
        return CastlingRights.NONE
    castling = CastlingRights.NONE
    for ch in text:
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise MalformedFieldError(f"Invalid castling availability: {text!r}")
        castling |= right
    return castling


def _parse_en_passant(text: str) -> Position | None:
    if text == "-":
        return None
    position = Position.from_algebraic(text)
    if position is None:
        raise MalformedFieldError(f"Invalid en passant target: {text!r}")
    return position


def _parse_clock(text: str, name: str) -> int:
    if not _CLOCK_RE.fullmatch(text):
        raise MalformedFieldError(f"Invalid {name}: {text!r}")
    return int(text)
