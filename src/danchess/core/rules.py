"""Check detection by casting attack rays outward from the king."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from danchess.core.enums import Color, PieceType
from danchess.core.rays import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    PAWN_ATTACK_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    Direction,
    cast_ray,
)

if TYPE_CHECKING:
    from danchess.core.board import Board
    from danchess.core.types import Position


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a check test for one color."""

    color: Color
    in_check: bool
    king: Position
    attackers: tuple[Position, ...] = ()

    def __bool__(self) -> bool:
        return self.in_check


# (directions, max ray length, piece type that attacks along them)
_ATTACK_PATTERNS: tuple[tuple[tuple[Direction, ...], int | None, PieceType], ...] = (
    (ROOK_DIRS, None, PieceType.ROOK),
    (BISHOP_DIRS, None, PieceType.BISHOP),
    (QUEEN_DIRS, None, PieceType.QUEEN),
    (KNIGHT_OFFSETS, 1, PieceType.KNIGHT),
    (KING_OFFSETS, 1, PieceType.KING),
)


class Rules:
    """Static rule-checker that operates on a :class:`Board` snapshot."""

    @staticmethod
    def check(board: Board, color: Color) -> CheckResult:
        """Is *color*'s king attacked? Reports the king and every attacker.

        Raises :class:`~danchess.core.exceptions.BoardError` unless exactly one
        king of *color* is on the board. Never mutates *board*.
        """
        grid = board.grid
        king = grid.king_position(color)
        enemy = color.opposite

        patterns = _ATTACK_PATTERNS + (
            (PAWN_ATTACK_OFFSETS[color], 1, PieceType.PAWN),
        )

        attackers: list[Position] = []
        for directions, limit, piece_type in patterns:
            for direction in directions:
                ray = cast_ray(grid, king, direction, limit)
                if not ray:
                    continue
                piece = grid[ray[-1]]
                if (
                    piece is not None
                    and piece.color == enemy
                    and piece.piece_type == piece_type
                    and ray[-1] not in attackers
                ):
                    attackers.append(ray[-1])

        return CheckResult(
            color=color,
            in_check=bool(attackers),
            king=king,
            attackers=tuple(attackers),
        )

    @staticmethod
    def is_in_check(board: Board, color: Color | None = None) -> bool:
        """Shortcut for ``Rules.check(...).in_check``; defaults to the side to move."""
        return Rules.check(board, board.turn if color is None else color).in_check
