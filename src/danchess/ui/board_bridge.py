"""Qt bridge between a board view and :class:`GameController`.

Translates scene coordinates to board positions and re-emits controller
events as Qt signals, so a view never derives game state from its items.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, pyqtSignal, pyqtSlot

from danchess.core.enums import Color, PieceType
from danchess.core.rules import CheckResult
from danchess.core.types import File, Position, Rank
from danchess.game.controller import GameController
from danchess.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class BoardBridge(QObject):
    """Signals:
    position_changed(str): FEN after every completed move or new position.
    move_applied(Position, Position): A move was accepted.
    promotion_requested(Position, Color): A pawn awaits its promotion piece.
    check_changed(CheckResult): The side to move has just been put in check.
    """

    position_changed = pyqtSignal(str)
    move_applied = pyqtSignal(object, object)
    promotion_requested = pyqtSignal(object, object)
    check_changed = pyqtSignal(object)

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_position_changed.append(self.position_changed.emit)
        events.on_move.append(lambda start, end, _board: self.move_applied.emit(start, end))
        events.on_promotion_required.append(self.promotion_requested.emit)
        events.on_check.append(self.check_changed.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> GameSettings:
        return self._controller.settings

    # ── Coordinate helpers ───────────────────────────────────────────────

    def position_for_point(self, point: QPointF) -> Position | None:
        """Scene point → board position; ``None`` outside the board."""
        size = self.settings.square_size
        col = int(point.x() // size)
        row = int(point.y() // size)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self.settings.flipped:
            return Position(Rank(row + 1), File(8 - col))
        return Position(Rank(8 - row), File(col + 1))

    def point_for_position(self, position: Position) -> QPointF:
        """Centre of *position*'s square in scene coordinates."""
        size = self.settings.square_size
        if self.settings.flipped:
            col, row = 8 - position.file.value, position.rank.value - 1
        else:
            col, row = position.file.value - 1, 8 - position.rank.value
        return QPointF((col + 0.5) * size, (row + 0.5) * size)

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(object, result=list)
    def highlight_squares(self, position: Position) -> list[Position]:
        return self._controller.legal_moves(position)

    @pyqtSlot(object, object, result=bool)
    def try_move(self, start: Position, end: Position) -> bool:
        return self._controller.apply_move(start, end)

    @pyqtSlot(object, result=bool)
    def promote(self, piece_type: PieceType) -> bool:
        try:
            choice = PieceType(piece_type)
        except ValueError:
            _LOGGER.warning("Unknown promotion piece %r", piece_type)
            return False
        return self._controller.choose_promotion(choice)

    def check(self, color: Color | None = None) -> CheckResult:
        return self._controller.check(color)
