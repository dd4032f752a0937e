"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from danchess.core import MoveGenerator, board_from_fen, parse_position, STARTING_FEN

    board = board_from_fen(STARTING_FEN)
    gen = MoveGenerator(board)
    print(gen.legal_moves(parse_position("e2")))
"""

from danchess.core.board import Board
from danchess.core.enums import BoardMode, CastlingRights, Color, PieceType
from danchess.core.exceptions import (
    BoardError,
    ChessError,
    ConsecutiveNumbersError,
    FenError,
    InvalidRankCountError,
    InvalidRowCountError,
    MalformedFieldError,
    MoveError,
    PromotionError,
)
from danchess.core.grid import PieceGrid
from danchess.core.move_generator import MoveGenerator
from danchess.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from danchess.core.piece import Piece
from danchess.core.rules import CheckResult, Rules
from danchess.core.types import File, Position, Rank, parse_position

__all__ = [
    # Enums / flags
    "BoardMode",
    "CastlingRights",
    "Color",
    "PieceType",
    # Coordinates
    "File",
    "Position",
    "Rank",
    "parse_position",
    # Domain objects
    "Board",
    "CheckResult",
    "MoveGenerator",
    "Piece",
    "PieceGrid",
    "Rules",
    # Errors
    "BoardError",
    "ChessError",
    "ConsecutiveNumbersError",
    "FenError",
    "InvalidRankCountError",
    "InvalidRowCountError",
    "MalformedFieldError",
    "MoveError",
    "PromotionError",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
