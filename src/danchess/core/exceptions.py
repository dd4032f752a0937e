"""Exception hierarchy for the core domain layer."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all danchess errors."""


# ── FEN parsing ──────────────────────────────────────────────────────────────


class FenError(ChessError, ValueError):
    """Malformed FEN input.

    Every subclass carries a ``kind`` tag and a human-readable ``detail``.
    Two errors compare equal when both match.
    """

    kind = "fen"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FenError):
            return NotImplemented
        return self.kind == other.kind and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"


class InvalidRankCountError(FenError):
    """Placement field does not describe exactly 8 ranks."""

    kind = "invalidRankCount"


class InvalidRowCountError(FenError):
    """A rank descriptor does not cover exactly 8 files."""

    kind = "invalidRowCount"


class ConsecutiveNumbersError(FenError):
    """Two empty-square digits appear back to back within a rank."""

    kind = "consecutiveNumbers"


class MalformedFieldError(FenError):
    """Wrong field count or an unparsable field token."""

    kind = "malformedField"


# ── Board / move preconditions ───────────────────────────────────────────────


class BoardError(ChessError, ValueError):
    """Board does not satisfy a structural precondition (e.g. king count)."""


class MoveError(ChessError, ValueError):
    """A move was applied in a state that does not allow it."""


class PromotionError(MoveError):
    """Invalid promotion choice."""
