"""Notation package: FEN parsing and serialization."""

from danchess.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    split_fen,
)
from danchess.core.notation.models import FenFields

__all__ = [
    "STARTING_FEN",
    "FenFields",
    "board_from_fen",
    "board_to_fen",
    "split_fen",
]
