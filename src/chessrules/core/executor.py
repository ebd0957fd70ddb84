"""Move execution: commits an already-validated move to a position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chessrules.core.position import Position

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}

# rook origin file, rook destination file
_CASTLING_ROOK_FILES: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (0, 3),
}


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """What :func:`apply_move` actually did to the position."""

    move: Move
    piece: Piece
    captured: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


def move_for(position: Position, from_sq: Square, to_sq: Square) -> Move:
    """Classify a ``(from, to)`` pair into a :class:`Move` with its flag.

    The pair is not validated; a pawn reaching the last rank always
    promotes to a queen.
    """
    piece = position.board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {from_sq}")

    df = file_of(to_sq) - file_of(from_sq)
    if piece.piece_type == PieceType.KING and abs(df) == 2:
        flag = MoveFlag.CASTLE_KINGSIDE if df > 0 else MoveFlag.CASTLE_QUEENSIDE
        return Move(from_sq, to_sq, flag)

    if piece.piece_type != PieceType.PAWN:
        return Move(from_sq, to_sq)

    if rank_of(to_sq) in (0, 7):
        return Move(from_sq, to_sq, MoveFlag.PROMOTION, PieceType.QUEEN)
    if abs(rank_of(to_sq) - rank_of(from_sq)) == 2:
        return Move(from_sq, to_sq, MoveFlag.DOUBLE_PAWN)
    if df != 0 and to_sq == position.en_passant and position.board.is_empty(to_sq):
        return Move(from_sq, to_sq, MoveFlag.EN_PASSANT)
    return Move(from_sq, to_sq)


def apply_move(position: Position, move: Move) -> AppliedMove:
    """Apply *move* to *position* in place.

    The caller must have confirmed legality; nothing is re-validated here.
    """
    board = position.board
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    captured = board[move.to_sq]

    # En passant: the captured pawn sits beside the origin, behind the target
    if move.flag == MoveFlag.EN_PASSANT:
        ep_capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
        captured = board[ep_capture_sq]
        board[ep_capture_sq] = None

    # Slide the rook for castling
    if move.flag in _CASTLING_ROOK_FILES:
        rook_file, rook_dest_file = _CASTLING_ROOK_FILES[move.flag]
        r = rank_of(move.from_sq)
        rook_from = make_square(rook_file, r)
        board[make_square(rook_dest_file, r)] = board[rook_from]
        board[rook_from] = None

    board[move.from_sq] = None
    placed_piece = piece
    if move.flag == MoveFlag.PROMOTION:
        placed_piece = Piece(piece.color, move.promotion or PieceType.QUEEN)
    board[move.to_sq] = placed_piece

    _update_castling(position, move, piece)

    # En passant target for the opponent
    if move.flag == MoveFlag.DOUBLE_PAWN:
        position.en_passant = make_square(
            file_of(move.from_sq),
            (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
        )
    else:
        position.en_passant = None

    # Clocks
    if piece.piece_type == PieceType.PAWN or captured is not None:
        position.halfmove_clock = 0
    else:
        position.halfmove_clock += 1

    if piece.color == Color.BLACK:
        position.fullmove_number += 1

    position.side_to_move = piece.color.opposite
    return AppliedMove(move=move, piece=piece, captured=captured)


def _update_castling(position: Position, move: Move, piece: Piece) -> None:
    if piece.piece_type == PieceType.KING:
        position.revoke_castling(CastlingRights.both(piece.color))

    # A rook leaving its corner, or anything landing on one (a capture).
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            position.revoke_castling(_ROOK_CORNERS[sq])
