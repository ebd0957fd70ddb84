"""Random-walk checks of properties that must hold after every move."""

import random

import pytest

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.types import rank_of
from chessrules.game.state import GameState


@pytest.mark.parametrize("seed", [1, 7, 2024])
def test_random_walk_invariants(seed: int) -> None:
    rng = random.Random(seed)
    state = GameState()

    for _ in range(80):
        if state.is_game_over:
            assert state.legal_moves() == []
            break

        before = state.position.copy()
        move = rng.choice(state.legal_moves())
        result = state.attempt_move(move.from_sq, move.to_sq)
        assert result.applied
        after = state.position

        # one king each
        for color in Color:
            assert after.board.count(color, PieceType.KING) == 1

        # side alternates and the mover's king is safe
        assert after.side_to_move == before.side_to_move.opposite
        assert not state.is_in_check(before.side_to_move)

        # castling rights are never regained
        assert after.castling & ~before.castling == 0

        # en passant lives for exactly one reply
        if move.flag == MoveFlag.DOUBLE_PAWN:
            assert after.en_passant is not None
            assert rank_of(after.en_passant) in (2, 5)
        else:
            assert after.en_passant is None

        # position reported to listeners matches the log
        assert state.move_log[-1].fen_after == state.to_fen()
