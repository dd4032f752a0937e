"""PieceGrid - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from danchess.core.enums import Color, PieceType
from danchess.core.exceptions import BoardError
from danchess.core.piece import Piece
from danchess.core.types import ALL_POSITIONS, File, Position, Rank

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class PieceGrid:
    """Mutable 64-slot board addressed by :class:`Position`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> Piece | None:
        return self._squares[position.index]

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        self._squares[position.index] = piece

    def is_empty(self, position: Position) -> bool:
        return self._squares[position.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        """``(position, piece)`` pairs in a1..h8 order."""
        for index, piece in enumerate(self._squares):
            if piece is not None:
                yield ALL_POSITIONS[index], piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Position]:
        """Positions occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [pos for pos, piece in self.occupied() if piece == target]

    def all_pieces(self, color: Color) -> list[Position]:
        """All positions occupied by *color*."""
        return [pos for pos, piece in self.occupied() if piece.color == color]

    def king_position(self, color: Color) -> Position:
        """Return the single king position for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise BoardError(f"No {color.name} king on board")
        if len(kings) > 1:
            raise BoardError(
                f"Expected one {color.name} king, found {len(kings)}: "
                + ", ".join(str(k) for k in kings)
            )
        return kings[0]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> PieceGrid:
        grid = PieceGrid()
        grid._squares = self._squares.copy()
        return grid

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> PieceGrid:
        """Standard starting placement."""
        grid = cls()
        for file, piece_type in zip(File, _BACK_RANK):
            grid[Position(Rank.TWO, file)] = Piece(Color.WHITE, PieceType.PAWN)
            grid[Position(Rank.SEVEN, file)] = Piece(Color.BLACK, PieceType.PAWN)
            grid[Position(Rank.ONE, file)] = Piece(Color.WHITE, piece_type)
            grid[Position(Rank.EIGHT, file)] = Piece(Color.BLACK, piece_type)
        return grid

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceGrid):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in reversed(Rank):
            row = []
            for file in File:
                p = self[Position(rank, file)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank.value} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
