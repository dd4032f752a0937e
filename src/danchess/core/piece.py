"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from danchess.core.enums import Color, PieceType

# Lowercase FEN letter per kind; white pieces use the uppercase form.
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}

# U+2654 is the white king; black glyphs follow six code points later.
_UNICODE_BASE = 0x2654
_UNICODE_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)

PIECE_CHARS = "".join(_TYPE_LETTERS.values()).upper() + "".join(_TYPE_LETTERS.values())


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored chess man; compares by value."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter: uppercase for White, lowercase for Black."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of ``str()``, e.g. ``'n'`` gives a black knight."""
        piece_type = _LETTER_TYPES.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode figurine such as ♞."""
        offset = _UNICODE_ORDER.index(self.piece_type) + 6 * self.color.value
        return chr(_UNICODE_BASE + offset)

    @property
    def name(self) -> str:
        """Kind then color, e.g. ``"Knight, Black"``."""
        return f"{self.piece_type.name.capitalize()}, {self.color.name.capitalize()}"
