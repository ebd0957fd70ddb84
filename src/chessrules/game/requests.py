"""Resolve partially specified move requests into concrete moves.

Voice and text front-ends rarely name both squares. They produce one of:

* two square names (``"e2"``, ``"e4"``),
* a piece type plus a target square ("knight to f3"),
* a castling wish ("castle short").

Each request is resolved against the current position and then played
through :meth:`GameState.attempt_move`, so it obeys exactly the same rules
as a click on the board.
"""

from __future__ import annotations

import logging

from chessrules.core.enums import PieceType
from chessrules.core.move_generator import MoveGenerator, home_rank
from chessrules.core.piece import Piece
from chessrules.core.types import InvalidSquareError, Square, is_valid_square, make_square, parse_square
from chessrules.game.models import MoveResult, MoveStatus
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def resolve_square_move(state: GameState, from_name: str, to_name: str) -> MoveResult:
    """Play a move given as two square names."""
    try:
        from_sq = parse_square(from_name)
        to_sq = parse_square(to_name)
    except InvalidSquareError:
        _LOGGER.debug("Unparsable squares in request: %r -> %r", from_name, to_name)
        return MoveResult.rejected(MoveStatus.INVALID_SQUARE)
    return state.attempt_move(from_sq, to_sq)


def resolve_piece_move(state: GameState, piece_type: PieceType, to_sq: Square) -> MoveResult:
    """Move the only piece of *piece_type* that can legally reach *to_sq*."""
    if not is_valid_square(to_sq):
        return MoveResult.rejected(MoveStatus.INVALID_SQUARE)
    if state.is_game_over:
        return MoveResult.rejected(MoveStatus.GAME_OVER)

    position = state.position
    gen = MoveGenerator(position)
    candidates = tuple(
        from_sq
        for from_sq in position.board.pieces(state.side_to_move, piece_type)
        if gen.is_legal(from_sq, to_sq)
    )

    if len(candidates) == 1:
        return state.attempt_move(candidates[0], to_sq)
    if candidates:
        _LOGGER.debug("Ambiguous %s request: %d candidates", piece_type.name, len(candidates))
        return MoveResult.rejected(MoveStatus.AMBIGUOUS, candidates)
    return MoveResult.rejected(MoveStatus.NO_PIECE)


def resolve_castle(state: GameState, kingside: bool) -> MoveResult:
    """Castle the side to move, short (*kingside*) or long."""
    if state.is_game_over:
        return MoveResult.rejected(MoveStatus.GAME_OVER)

    color = state.side_to_move
    king_sq = make_square(4, home_rank(color))
    if state.position.board[king_sq] != Piece(color, PieceType.KING):
        return MoveResult.rejected(MoveStatus.ILLEGAL)

    to_sq = king_sq + (2 if kingside else -2)
    return state.attempt_move(king_sq, to_sq)
