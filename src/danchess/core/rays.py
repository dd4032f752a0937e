"""Direction tables and ray casting shared by move generation and check detection.

Offsets are ``(d_rank, d_file)`` pairs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from danchess.core.enums import Color
from danchess.core.types import Rank

if TYPE_CHECKING:
    from danchess.core.grid import PieceGrid
    from danchess.core.types import Position

Direction: TypeAlias = tuple[int, int]

ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))
QUEEN_DIRS: tuple[Direction, ...] = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: tuple[Direction, ...] = QUEEN_DIRS

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
)

# Squares from which an enemy pawn would attack a king of the given color.
PAWN_ATTACK_OFFSETS: dict[Color, tuple[Direction, ...]] = {
    Color.WHITE: ((1, -1), (1, 1)),
    Color.BLACK: ((-1, -1), (-1, 1)),
}

PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_HOME_RANK: dict[Color, Rank] = {Color.WHITE: Rank.TWO, Color.BLACK: Rank.SEVEN}
PROMOTION_RANK: dict[Color, Rank] = {Color.WHITE: Rank.EIGHT, Color.BLACK: Rank.ONE}
BACK_RANK: dict[Color, Rank] = {Color.WHITE: Rank.ONE, Color.BLACK: Rank.EIGHT}


def cast_ray(
    grid: PieceGrid,
    origin: Position,
    direction: Direction,
    limit: int | None = None,
) -> list[Position]:
    """Step from *origin* along *direction*.

    Stops at the board edge, after the first occupied square (which is
    included), or after *limit* steps. *origin* itself is never included.
    """
    d_rank, d_file = direction
    squares: list[Position] = []
    current = origin.offset(d_rank, d_file)
    while current is not None:
        squares.append(current)
        if grid[current] is not None:
            break
        if limit is not None and len(squares) >= limit:
            break
        current = current.offset(d_rank, d_file)
    return squares
