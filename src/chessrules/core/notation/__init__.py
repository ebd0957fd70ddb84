"""Notation package: FEN and short algebraic notation."""

from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.notation.san import move_to_notation, with_check_suffix

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_notation",
    "with_check_suffix",
]
