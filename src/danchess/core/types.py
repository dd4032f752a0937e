"""Board coordinates: ranks, files and positions.

Index layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_FILE_CHARS = "abcdefgh"
_RANK_CHARS = "12345678"


class Rank(IntEnum):
    """Board rank 1–8. ``rank + n`` / ``rank - n`` return ``None`` off the board."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8

    @classmethod
    def from_char(cls, char: str) -> Rank | None:
        if len(char) != 1:
            raise ValueError(f"Rank takes a single character, got {char!r}")
        idx = _RANK_CHARS.find(char)
        return cls(idx + 1) if idx >= 0 else None

    @property
    def algebraic(self) -> str:
        return _RANK_CHARS[self.value - 1]

    def __add__(self, other: int) -> Rank | None:  # type: ignore[override]
        return _shift(Rank, self.value + other)

    def __sub__(self, other: int) -> Rank | None:  # type: ignore[override]
        return _shift(Rank, self.value - other)

    def __str__(self) -> str:
        return self.algebraic


class File(IntEnum):
    """Board file a–h. ``file + n`` / ``file - n`` return ``None`` off the board."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8

    @classmethod
    def from_char(cls, char: str) -> File | None:
        if len(char) != 1:
            raise ValueError(f"File takes a single character, got {char!r}")
        idx = _FILE_CHARS.find(char)
        return cls(idx + 1) if idx >= 0 else None

    @property
    def algebraic(self) -> str:
        return _FILE_CHARS[self.value - 1]

    def __add__(self, other: int) -> File | None:  # type: ignore[override]
        return _shift(File, self.value + other)

    def __sub__(self, other: int) -> File | None:  # type: ignore[override]
        return _shift(File, self.value - other)

    def __str__(self) -> str:
        return self.algebraic


def _shift(enum_cls: type[IntEnum], value: int) -> Rank | File | None:
    if 1 <= value <= 8:
        return enum_cls(value)  # type: ignore[return-value]
    return None


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board coordinate."""

    rank: Rank
    file: File

    # ── Conversions ──────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Square index 0–63 (a1=0, h8=63)."""
        return (self.rank.value - 1) * 8 + (self.file.value - 1)

    @classmethod
    def from_index(cls, index: int) -> Position:
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index}")
        return cls(Rank(index // 8 + 1), File(index % 8 + 1))

    @property
    def algebraic(self) -> str:
        """File-then-rank name, e.g. ``"e4"``."""
        return self.file.algebraic + self.rank.algebraic

    @classmethod
    def from_algebraic(cls, text: str) -> Position | None:
        """``"e4"`` → Position, ``None`` for ``"-"`` or anything malformed."""
        if len(text) != 2:
            return None
        file = File.from_char(text[0])
        rank = Rank.from_char(text[1])
        if file is None or rank is None:
            return None
        return cls(rank, file)

    # ── Arithmetic ───────────────────────────────────────────────────────

    def offset(self, by_rank: int, by_file: int) -> Position | None:
        """Shift by ``(by_rank, by_file)``; ``None`` if either axis leaves the board."""
        rank = self.rank + by_rank
        file = self.file + by_file
        if rank is None or file is None:
            return None
        return Position(rank, file)

    def __str__(self) -> str:
        return self.algebraic

    def __repr__(self) -> str:
        return f"Position({self.algebraic})"


def parse_position(name: str) -> Position:
    """Parse square name, e.g. 'e4'. Raises ``ValueError`` when malformed."""
    position = Position.from_algebraic(name)
    if position is None:
        raise ValueError(f"Invalid square name: {name!r}")
    return position


ALL_POSITIONS: tuple[Position, ...] = tuple(Position.from_index(i) for i in range(64))
