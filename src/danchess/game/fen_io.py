"""Reading and writing boards as ``.fen`` text files."""

from __future__ import annotations

import logging
from pathlib import Path

from danchess.core.board import Board
from danchess.core.exceptions import MalformedFieldError
from danchess.core.notation import board_from_fen, board_to_fen

_LOGGER = logging.getLogger(__name__)


def save_fen(board: Board, file_path: Path) -> None:
    """Write *board* to *file_path* as a single FEN record."""
    file_path.write_text(board_to_fen(board) + "\n", encoding="utf-8")
    _LOGGER.debug("Saved position to %s", file_path)


def load_fen(file_path: Path) -> Board:
    """Load the first FEN record found in *file_path*."""
    text = file_path.read_text(encoding="utf-8")
    for line in text.splitlines():
        if line.strip():
            _LOGGER.debug("Loading position from %s", file_path)
            return board_from_fen(line)
    raise MalformedFieldError(f"No FEN record in {file_path}")
