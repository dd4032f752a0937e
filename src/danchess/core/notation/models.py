"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FenFields:
    """The six raw, whitespace-separated fields of a FEN record."""

    placement: str
    active_color: str
    castling: str
    en_passant: str
    halfmove: str
    fullmove: str

    def __str__(self) -> str:
        return " ".join(
            (
                self.placement,
                self.active_color,
                self.castling,
                self.en_passant,
                self.halfmove,
                self.fullmove,
            )
        )
