"""GameController — the façade a UI drives a game through.

Coordinates: Board, MoveGenerator, Rules, FEN codec.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from danchess.core.board import Board
from danchess.core.enums import BoardMode, Color, PieceType
from danchess.core.exceptions import PromotionError
from danchess.core.move_generator import MoveGenerator
from danchess.core.notation import board_from_fen, board_to_fen
from danchess.core.rules import CheckResult, Rules
from danchess.core.types import Position
from danchess.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Position, Position, Board], None]  # start, end, board
PromotionCallback = Callable[[Position, Color], None]  # square, color to choose
CheckCallback = Callable[[CheckResult], None]
PositionCallback = Callable[[str], None]  # fen


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_position_changed: list[PositionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates and applies moves, drives the two-phase promotion and
    notifies listeners.

    Illegal moves are not errors: :meth:`apply_move` and
    :meth:`choose_promotion` return ``False`` and leave the board untouched.
    """

    __slots__ = ("_board", "_settings", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._board = board_from_fen(self._settings.start_fen)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def mode(self) -> BoardMode:
        return self._board.mode

    @property
    def side_to_move(self) -> Color:
        return self._board.turn

    # ── Setup ────────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Start over from *fen* (default: the configured start position)."""
        self.load_fen(fen or self._settings.start_fen)

    def load_fen(self, fen: str) -> None:
        """Replace the current board; raises ``FenError`` and keeps the old one on bad input."""
        self._board = board_from_fen(fen)
        self._emit_position_changed()

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, at: Position) -> list[Position]:
        """Legal destinations for the side-to-move piece on *at* (for highlighting)."""
        board = self._board
        if board.mode != BoardMode.REGULAR:
            return []
        piece = board.grid[at]
        if piece is None or piece.color != board.turn:
            return []
        return MoveGenerator(board).legal_moves(at)

    def can_move(self, start: Position, end: Position) -> bool:
        return end in self.legal_moves(start)

    def check(self, color: Color | None = None) -> CheckResult:
        """Check status for *color* (default: side to move)."""
        return Rules.check(self._board, self._board.turn if color is None else color)

    def current_fen(self) -> str:
        """FEN of the board; raises ``BoardError`` while a promotion is pending."""
        return board_to_fen(self._board)

    # ── Commands ─────────────────────────────────────────────────────────

    def apply_move(self, start: Position, end: Position) -> bool:
        """Apply *start* → *end* if legal. Returns True if applied."""
        if not self.can_move(start, end):
            _LOGGER.warning(
                "Rejected move %s%s (%s to play, %s)",
                start,
                end,
                self._board.turn,
                self._board.mode.name,
            )
            return False

        mover = self._board.turn
        mode = self._board.apply_move(start, end)
        self._emit_move(start, end)

        if mode == BoardMode.AWAITING_PROMOTION:
            assert self._board.promotion_square is not None
            self._emit_promotion_required(self._board.promotion_square, mover)
            return True

        self._after_completed_move()
        return True

    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Supply the promotion piece. Returns False when nothing is pending
        or *piece_type* is not a legal promotion choice."""
        if self._board.mode != BoardMode.AWAITING_PROMOTION:
            _LOGGER.warning("No promotion pending, ignoring %s", piece_type.name)
            return False
        try:
            self._board.choose_promotion(piece_type)
        except PromotionError as exc:
            _LOGGER.warning("%s", exc)
            return False
        self._after_completed_move()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_completed_move(self) -> None:
        self._emit_position_changed()
        result = self.check()
        if result.in_check:
            self._emit_check(result)

    def _emit_move(self, start: Position, end: Position) -> None:
        for cb in self.events.on_move:
            cb(start, end, self._board)

    def _emit_promotion_required(self, square: Position, color: Color) -> None:
        for cb in self.events.on_promotion_required:
            cb(square, color)

    def _emit_check(self, result: CheckResult) -> None:
        for cb in self.events.on_check:
            cb(result)

    def _emit_position_changed(self) -> None:
        fen = self.current_fen()
        for cb in self.events.on_position_changed:
            cb(fen)
