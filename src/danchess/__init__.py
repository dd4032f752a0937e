"""danchess — chess position model, FEN codec and legal-move generator."""

__version__ = "0.1.0"
