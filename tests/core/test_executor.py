"""Tests for move classification and in-place move application."""

import pytest

from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.executor import apply_move, move_for
from chessrules.core.move import Move
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, A8, C1, D1, D5, D6, E1, E2, E4, E5, E7, E8, F1, F3, G1, G8, H1, H6,
)


def play(fen: str, from_sq: int, to_sq: int):
    pos = position_from_fen(fen)
    applied = apply_move(pos, move_for(pos, from_sq, to_sq))
    return pos, applied


class TestMoveFor:
    def test_quiet_move(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert move_for(pos, G1, F3) == Move(G1, F3)

    def test_double_pawn(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert move_for(pos, E2, E4).flag == MoveFlag.DOUBLE_PAWN

    def test_castling_flags(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert move_for(pos, E1, G1).flag == MoveFlag.CASTLE_KINGSIDE
        assert move_for(pos, E1, C1).flag == MoveFlag.CASTLE_QUEENSIDE
        assert move_for(pos, E1, G1).is_castling

    def test_en_passant_flag(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert move_for(pos, E5, D6).flag == MoveFlag.EN_PASSANT

    def test_promotion_is_queen(self) -> None:
        pos = position_from_fen("8/4P3/8/8/8/8/k7/4K3 w - - 0 1")
        move = move_for(pos, E7, E8)
        assert move.flag == MoveFlag.PROMOTION
        assert move.promotion == PieceType.QUEEN
        assert move.uci == "e7e8q"

    def test_empty_origin_raises(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError):
            move_for(pos, E4, E5)


class TestApplyMove:
    def test_double_step_sets_en_passant(self) -> None:
        pos, applied = play(STARTING_FEN, E2, E4)
        assert position_to_fen(pos) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert not applied.is_capture

    def test_en_passant_cleared_by_next_move(self) -> None:
        pos, _ = play(STARTING_FEN, E2, E4)
        apply_move(pos, move_for(pos, G8, H6))
        assert pos.en_passant is None

    def test_en_passant_removes_victim(self) -> None:
        pos, applied = play("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1", E5, D6)
        assert pos.board[D5] is None
        assert pos.board[E5] is None
        assert pos.board[D6] == Piece(Color.WHITE, PieceType.PAWN)
        assert applied.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.halfmove_clock == 0

    def test_kingside_castle_moves_rook(self) -> None:
        pos, _ = play("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1", E1, G1)
        assert pos.board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[H1] is None
        assert pos.castling == CastlingRights.BLACK_BOTH

    def test_queenside_castle_moves_rook(self) -> None:
        pos, _ = play("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1", E1, C1)
        assert pos.board[C1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[D1] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[A1] is None

    def test_promotion_places_queen(self) -> None:
        pos, _ = play("8/4P3/8/8/8/8/k7/4K3 w - - 0 1", E7, E8)
        assert pos.board[E8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert pos.board[E7] is None

    def test_rook_move_revokes_its_side(self) -> None:
        pos, _ = play("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1", H1, H1 + 8)
        assert pos.castling == (
            CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_BOTH
        )

    def test_capturing_rook_on_corner_revokes_right(self) -> None:
        pos, applied = play("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1", A1, A8)
        assert applied.captured == Piece(Color.BLACK, PieceType.ROOK)
        assert not pos.has_castling_right(Color.BLACK, kingside=False)
        assert not pos.has_castling_right(Color.WHITE, kingside=False)
        assert pos.has_castling_right(Color.BLACK, kingside=True)

    def test_king_move_revokes_both(self) -> None:
        pos, _ = play("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1", E8, E7)
        assert pos.castling == CastlingRights.WHITE_BOTH

    def test_clocks_and_side(self) -> None:
        pos, _ = play("4k3/8/8/8/8/8/8/4K1N1 w - - 7 12", G1, F3)
        assert pos.halfmove_clock == 8
        assert pos.fullmove_number == 12
        assert pos.side_to_move == Color.BLACK

        apply_move(pos, move_for(pos, E8, E7))
        assert pos.halfmove_clock == 9
        assert pos.fullmove_number == 13
        assert pos.side_to_move == Color.WHITE

    def test_capture_resets_halfmove_clock(self) -> None:
        pos, applied = play("4k3/8/8/8/8/8/8/r2R2K1 w - - 5 1", D1, A1)
        assert applied.is_capture
        assert pos.halfmove_clock == 0

    def test_empty_origin_raises(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError):
            apply_move(pos, Move(E4, E5))
