"""Short algebraic move notation (no disambiguation)."""

from __future__ import annotations

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.position import Position
from chessrules.core.types import FILE_NAMES, file_of, square_name

_CASTLING_TEXT: dict[MoveFlag, str] = {
    MoveFlag.CASTLE_KINGSIDE: "O-O",
    MoveFlag.CASTLE_QUEENSIDE: "O-O-O",
}


def move_to_notation(position: Position, move: Move) -> str:
    """Render *move* given the *position* before it is played.

    Pawn captures are prefixed with the origin file (``exd5``); other
    pieces never name their origin, even when two of them could move.
    The check suffix is added separately by :func:`with_check_suffix`.
    """
    piece = position.board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")
    if move.flag in _CASTLING_TEXT:
        return _CASTLING_TEXT[move.flag]

    captures = move.flag == MoveFlag.EN_PASSANT or position.board[move.to_sq] is not None
    if piece.piece_type == PieceType.PAWN:
        prefix = FILE_NAMES[file_of(move.from_sq)] if captures else ""
    else:
        prefix = piece.piece_type.letter.upper()

    text = f"{prefix}{'x' if captures else ''}{square_name(move.to_sq)}"
    if move.promotion is not None:
        text += f"={move.promotion.letter.upper()}"
    return text


def with_check_suffix(notation: str, *, check: bool, mate: bool) -> str:
    """Append ``#`` for mate or ``+`` for check once the move has been played."""
    if mate:
        return f"{notation}#"
    return f"{notation}+" if check else notation
