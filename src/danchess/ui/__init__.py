"""Qt integration layer."""

from danchess.ui.board_bridge import BoardBridge

__all__ = ["BoardBridge"]
