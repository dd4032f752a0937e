"""Game/board configuration."""

from __future__ import annotations

from dataclasses import dataclass

from danchess.core.notation import STARTING_FEN


@dataclass
class GameSettings:
    """Settings shared by :class:`GameController` and the Qt bridge.

    Args:
        start_fen: Position loaded by ``new_game()`` when no FEN is given.
        square_size: Edge length of one board square in scene units.
        flipped: View the board from Black's side.
    """

    start_fen: str = STARTING_FEN
    square_size: float = 64.0
    flipped: bool = False

    def __post_init__(self) -> None:
        if self.square_size <= 0:
            raise ValueError(f"square_size must be positive, got {self.square_size}")

    @property
    def board_size(self) -> float:
        return self.square_size * 8
