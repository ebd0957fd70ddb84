"""Game management layer: state machine, move requests, controller.

Quick start::

    from chessrules.core import parse_square
    from chessrules.game import GameController

    ctrl = GameController()
    result = ctrl.attempt_move(parse_square("e2"), parse_square("e4"))
    print(result.notation, ctrl.state.to_fen())
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.models import MoveRecord, MoveResult, MoveStatus
from chessrules.game.requests import resolve_castle, resolve_piece_move, resolve_square_move
from chessrules.game.state import GameState, movetext

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "MoveResult",
    "MoveStatus",
    "movetext",
    "resolve_castle",
    "resolve_piece_move",
    "resolve_square_move",
]
