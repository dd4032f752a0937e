"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from danchess.core.enums import CastlingRights, Color, PieceType
from danchess.core.piece import Piece
from danchess.core.rays import (
    BACK_RANK,
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    PAWN_DIRECTION,
    PAWN_HOME_RANK,
    QUEEN_DIRS,
    ROOK_DIRS,
    Direction,
    cast_ray,
)
from danchess.core.rules import Rules
from danchess.core.types import File, Position

if TYPE_CHECKING:
    from danchess.core.board import Board

# piece type -> (directions, max ray length)
_STEP_PATTERNS: dict[PieceType, tuple[tuple[Direction, ...], int | None]] = {
    PieceType.KNIGHT: (KNIGHT_OFFSETS, 1),
    PieceType.BISHOP: (BISHOP_DIRS, None),
    PieceType.ROOK: (ROOK_DIRS, None),
    PieceType.QUEEN: (QUEEN_DIRS, None),
    PieceType.KING: (KING_OFFSETS, 1),
}

# (rights of the wing for a color, rook file, king step, files that must be empty)
_CASTLING_WINGS: tuple[
    tuple[Callable[[Color], CastlingRights], File, int, tuple[File, ...]], ...
] = (
    (CastlingRights.kingside, File.H, 1, (File.F, File.G)),
    (CastlingRights.queenside, File.A, -1, (File.B, File.C, File.D)),
)


class MoveGenerator:
    """Generates destination squares for pieces on a :class:`Board`.

    Legality is decided by playing each candidate forward on a copy of the
    board and testing for check, so the board passed in is never mutated.
    """

    __slots__ = ("_board", "_grid")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._grid = board.grid

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, position: Position) -> list[Position]:
        """Destinations for the piece on *position* that keep its king safe."""
        piece = self._grid[position]
        if piece is None:
            return []

        board = self._board
        legal = [
            dest
            for dest in self.pseudo_legal_moves(position)
            if not Rules.check(board.simulate(position, dest), piece.color).in_check
        ]
        if piece.piece_type == PieceType.KING:
            legal.extend(self.castling_moves(position))
        return legal

    def all_legal_moves(
        self, color: Color | None = None
    ) -> dict[Position, list[Position]]:
        """Legal destinations for every piece of *color* (default: side to move)."""
        if color is None:
            color = self._board.turn
        moves: dict[Position, list[Position]] = {}
        for position in self._grid.all_pieces(color):
            destinations = self.legal_moves(position)
            if destinations:
                moves[position] = destinations
        return moves

    def pseudo_legal_moves(self, position: Position) -> list[Position]:
        """Destinations obeying piece movement only (own king may be left in check).

        Castling is not included; see :meth:`castling_moves`.
        """
        piece = self._grid[position]
        if piece is None:
            return []
        if piece.piece_type == PieceType.PAWN:
            return self._gen_pawn(position, piece.color)
        directions, limit = _STEP_PATTERNS[piece.piece_type]
        return self._gen_rays(position, piece.color, directions, limit)

    def castling_moves(self, position: Position) -> list[Position]:
        """Castling destinations for the king of the side to move on *position*.

        Each one requires the right, the rook on its corner, empty squares
        between king and rook, and a king that is not in check on its start
        square nor on any square it crosses.
        """
        board = self._board
        grid = self._grid
        piece = grid[position]
        color = board.turn
        if piece != Piece(color, PieceType.KING):
            return []

        rank = BACK_RANK[color]
        if position != Position(rank, File.E):
            return []
        if Rules.check(board, color).in_check:
            return []

        rook = Piece(color, PieceType.ROOK)
        moves: list[Position] = []
        for rights_for, rook_file, step, between in _CASTLING_WINGS:
            right = rights_for(color)
            if not board.castling & right:
                continue
            if grid[Position(rank, rook_file)] != rook:
                continue
            if any(not grid.is_empty(Position(rank, f)) for f in between):
                continue
            destination = self._walk_king(position, step, color)
            if destination is not None:
                moves.append(destination)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, position: Position, color: Color) -> list[Position]:
        grid = self._grid
        direction = PAWN_DIRECTION[color]
        moves: list[Position] = []

        one_step = position.offset(direction, 0)
        if one_step is not None and grid.is_empty(one_step):
            moves.append(one_step)
            if position.rank == PAWN_HOME_RANK[color]:
                two_step = one_step.offset(direction, 0)
                if two_step is not None and grid.is_empty(two_step):
                    moves.append(two_step)

        for d_file in (-1, 1):
            target = position.offset(direction, d_file)
            if target is None:
                continue
            occupant = grid[target]
            if occupant is not None:
                if occupant.color != color:
                    moves.append(target)
            elif target == self._board.en_passant:
                # the double-pushed enemy pawn must stand behind the target
                victim = target.offset(-direction, 0)
                if victim is not None and grid[victim] == Piece(
                    color.opposite, PieceType.PAWN
                ):
                    moves.append(target)
        return moves

    def _gen_rays(
        self,
        position: Position,
        color: Color,
        directions: tuple[Direction, ...],
        limit: int | None,
    ) -> list[Position]:
        grid = self._grid
        moves: list[Position] = []
        for direction in directions:
            for target in cast_ray(grid, position, direction, limit):
                occupant = grid[target]
                if occupant is None or occupant.color != color:
                    moves.append(target)
        return moves

    def _walk_king(self, start: Position, step: int, color: Color) -> Position | None:
        """Step the king two files one square at a time; ``None`` if any step is attacked."""
        board = self._board
        current = start
        for _ in range(2):
            nxt = current.offset(0, step)
            if nxt is None:
                return None
            board = board.simulate(current, nxt)
            if Rules.check(board, color).in_check:
                return None
            current = nxt
        return current
