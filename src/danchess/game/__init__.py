"""Game management layer — controller façade, settings and persistence.

Quick start::

    from danchess.core import parse_position
    from danchess.game import GameController

    ctrl = GameController()
    ctrl.apply_move(parse_position("e2"), parse_position("e4"))
    print(ctrl.current_fen())
"""

from danchess.game.controller import GameController, GameEvents
from danchess.game.fen_io import load_fen, save_fen
from danchess.game.settings import GameSettings

__all__ = [
    "GameController",
    "GameEvents",
    "GameSettings",
    "load_fen",
    "save_fen",
]
