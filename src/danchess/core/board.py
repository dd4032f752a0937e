"""Board — complete game state (placement + metadata) and move application."""

from __future__ import annotations

import logging

from danchess.core.enums import (
    PROMOTION_TYPES,
    BoardMode,
    CastlingRights,
    Color,
    PieceType,
)
from danchess.core.exceptions import MoveError, PromotionError
from danchess.core.grid import PieceGrid
from danchess.core.piece import Piece
from danchess.core.rays import PAWN_DIRECTION, PROMOTION_RANK
from danchess.core.types import File, Position, Rank

_LOGGER = logging.getLogger(__name__)


class Board:
    """Full chess position: placement + side to move + castling + en passant + clocks.

    Moves are applied in place with :meth:`apply_move`. A pawn reaching the far
    rank leaves the board in :attr:`BoardMode.AWAITING_PROMOTION` until
    :meth:`choose_promotion` supplies the new piece; no other move is accepted
    meanwhile. Use :meth:`copy` or :meth:`simulate` for "what if" probes.
    """

    __slots__ = (
        "grid",
        "turn",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "mode",
        "promotion_square",
    )

    def __init__(
        self,
        grid: PieceGrid | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Position | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.grid = grid if grid is not None else PieceGrid.initial()
        self.turn = turn
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.mode = BoardMode.REGULAR
        self.promotion_square: Position | None = None

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, start: Position, end: Position) -> BoardMode:
        """Apply the move *start* → *end* with all of its side effects.

        Legality is the caller's concern (see ``MoveGenerator.legal_moves``).
        Returns the resulting mode.
        """
        if self.mode != BoardMode.REGULAR:
            raise MoveError(
                f"Cannot move while awaiting promotion on {self.promotion_square}"
            )
        piece = self.grid[start]
        if piece is None:
            raise MoveError(f"No piece on {start}")
        if piece.color != self.turn:
            raise MoveError(f"{piece.name} on {start} cannot move, {self.turn} to play")

        captured = self._relocate(start, end)
        self._update_castling(piece, start, end)

        # En passant target for the opponent
        next_en_passant: Position | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(end.rank.value - start.rank.value) == 2
        ):
            next_en_passant = start.offset(PAWN_DIRECTION[piece.color], 0)
        self.en_passant = next_en_passant

        _LOGGER.debug("%s %s%s", piece.name, start, end)

        if piece.piece_type == PieceType.PAWN and end.rank == PROMOTION_RANK[piece.color]:
            self.grid[end] = None
            self.mode = BoardMode.AWAITING_PROMOTION
            self.promotion_square = end
            _LOGGER.debug("Awaiting promotion choice on %s", end)
            return self.mode

        self._complete_move(
            resets_halfmove=piece.piece_type == PieceType.PAWN or captured is not None
        )
        return self.mode

    def choose_promotion(self, piece_type: PieceType) -> None:
        """Finish a pending promotion with *piece_type* (queen, rook, bishop or knight)."""
        if self.mode != BoardMode.AWAITING_PROMOTION or self.promotion_square is None:
            raise MoveError("No promotion is pending")
        if piece_type not in PROMOTION_TYPES:
            raise PromotionError(f"Cannot promote to {piece_type.name.lower()}")

        square = self.promotion_square
        self.grid[square] = Piece(self.turn, piece_type)
        self.mode = BoardMode.REGULAR
        self.promotion_square = None
        _LOGGER.debug("Promoted to %s on %s", piece_type.name.lower(), square)

        self._complete_move(resets_halfmove=True)

    def simulate(self, start: Position, end: Position) -> Board:
        """Copy of this board with the piece moved; ``self`` is left untouched.

        Only placement changes (captures, the en passant victim and the
        castling rook included). Turn, rights and clocks stay as they are.
        """
        if self.grid[start] is None:
            raise MoveError(f"No piece on {start}")
        board = self.copy()
        board._relocate(start, end)
        return board

    # ── Placement helpers ────────────────────────────────────────────────

    def _relocate(self, start: Position, end: Position) -> Piece | None:
        """Move the piece and return whatever it captured."""
        grid = self.grid
        piece = grid[start]
        assert piece is not None
        captured = grid[end]

        if (
            piece.piece_type == PieceType.PAWN
            and captured is None
            and end == self.en_passant
        ):
            victim_square = end.offset(-PAWN_DIRECTION[piece.color], 0)
            if victim_square is not None:
                victim = grid[victim_square]
                if victim == Piece(piece.color.opposite, PieceType.PAWN):
                    captured = victim
                    grid[victim_square] = None

        grid[end] = piece
        grid[start] = None

        # Slide the rook for castling
        if (
            piece.piece_type == PieceType.KING
            and abs(end.file.value - start.file.value) == 2
        ):
            if end.file > start.file:
                rook_from, rook_to = File.H, File.F
            else:
                rook_from, rook_to = File.A, File.D
            rook_square = Position(start.rank, rook_from)
            rook = grid[rook_square]
            if rook is not None:
                grid[Position(start.rank, rook_to)] = rook
                grid[rook_square] = None

        return captured

    def _complete_move(self, *, resets_halfmove: bool) -> None:
        if resets_halfmove:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.turn == Color.BLACK:
            self.fullmove_number += 1

        self.turn = self.turn.opposite

    # ── Castling bookkeeping ─────────────────────────────────────────────

    ROOK_CORNERS: dict[Position, CastlingRights] = {
        Position(Rank.ONE, File.A): CastlingRights.WHITE_QUEENSIDE,
        Position(Rank.ONE, File.H): CastlingRights.WHITE_KINGSIDE,
        Position(Rank.EIGHT, File.A): CastlingRights.BLACK_QUEENSIDE,
        Position(Rank.EIGHT, File.H): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, piece: Piece, start: Position, end: Position) -> None:
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.both(piece.color)

        # A rook leaving its corner, or being captured there
        for square in (start, end):
            right = self.ROOK_CORNERS.get(square)
            if right is not None:
                castling &= ~right

        self.castling = castling

    @property
    def white_can_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_can_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_can_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_can_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Board:
        """Fully independent deep copy."""
        board = Board(
            grid=self.grid.copy(),
            turn=self.turn,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )
        board.mode = self.mode
        board.promotion_square = self.promotion_square
        return board

    def _state(self) -> tuple[object, ...]:
        return (
            self.turn,
            self.castling,
            self.en_passant,
            self.halfmove_clock,
            self.fullmove_number,
            self.mode,
            self.promotion_square,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid and self._state() == other._state()

    def __repr__(self) -> str:
        return f"{self.grid!r}\n{self.turn} to move, mode={self.mode.name}"
