"""Tests for FEN and short algebraic notation."""

import pytest

from chessrules.core.enums import CastlingRights, Color
from chessrules.core.executor import apply_move, move_for
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_notation,
    position_from_fen,
    position_to_fen,
    with_check_suffix,
)
from chessrules.core.types import C1, D5, D6, E1, E2, E3, E4, E5, E7, E8, F1, F3, G1, H1


class TestFenParsing:
    def test_starting_fields(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_en_passant_and_clocks(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert pos.side_to_move == Color.BLACK
        assert pos.en_passant == E3

    def test_clock_fields_are_optional(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 b - -")
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_partial_castling(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert pos.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8/8 w",
            "4k3/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3/8 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K4 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K2 w - - 0 1",
            "4k3/8/8/8/8/8/8/9 w - - 0 1",
            "4k3/8/8/8/8/8/8/4X3 w - - 0 1",
            "4k3/8/8/8/8/8/8/8 w - - 0 1",
            "4k3/8/8/8/8/8/8/3KK3 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KX - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KK - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - e3 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - z9 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - - -1 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 0",
            "4k3/8/8/8/8/8/8/4K3 w - - x 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 1 extra",
        ],
    )
    def test_rejects_malformed(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)

    def test_king_check_precedes_side_field(self) -> None:
        with pytest.raises(ValueError, match="must have one king"):
            position_from_fen("8/8/8/8/8/8/8/8 x - - 0 1")


class TestFenSerialisation:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 3",
            "8/8/8/8/8/8/8/K6k b - - 42 87",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert position_to_fen(position_from_fen(fen)) == fen

    def test_after_first_move(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        apply_move(pos, move_for(pos, E2, E4))
        assert position_to_fen(pos).split()[1:4] == ["b", "KQkq", "e3"]


def notation_for(fen: str, from_sq: int, to_sq: int) -> str:
    pos = position_from_fen(fen)
    return move_to_notation(pos, move_for(pos, from_sq, to_sq))


class TestMoveNotation:
    def test_pawn_push(self) -> None:
        assert notation_for(STARTING_FEN, E2, E4) == "e4"

    def test_piece_move(self) -> None:
        assert notation_for(STARTING_FEN, G1, F3) == "Nf3"

    def test_pawn_capture_uses_origin_file(self) -> None:
        fen = "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2"
        assert notation_for(fen, E4, D5) == "exd5"

    def test_en_passant_is_a_capture(self) -> None:
        fen = "rnbqkbnr/ppp1pppp/8/3pP3/8/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 3"
        assert notation_for(fen, E5, D6) == "exd6"

    def test_piece_capture(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4KQ1r w - - 0 1"
        assert notation_for(fen, F1, H1) == "Qxh1"

    def test_castling(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
        assert notation_for(fen, E1, G1) == "O-O"
        assert notation_for(fen, E1, C1) == "O-O-O"

    def test_promotion(self) -> None:
        assert notation_for("8/4P3/8/8/8/8/k7/4K3 w - - 0 1", E7, E8) == "e8=Q"

    def test_empty_origin(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        with pytest.raises(ValueError):
            move_to_notation(pos, Move(E4, E5))


class TestCheckSuffix:
    def test_plain(self) -> None:
        assert with_check_suffix("Nf3", check=False, mate=False) == "Nf3"

    def test_check(self) -> None:
        assert with_check_suffix("Bb5", check=True, mate=False) == "Bb5+"

    def test_mate_wins_over_check(self) -> None:
        assert with_check_suffix("Qh4", check=True, mate=True) == "Qh4#"
