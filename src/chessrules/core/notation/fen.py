"""FEN parsing and serialization."""

from __future__ import annotations

from itertools import groupby

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# FEN order of the castling field.
_CASTLING_LETTERS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
_SIDE_LETTERS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse a 4 to 6 field FEN string into a :class:`Position`.

    Missing clock fields default to ``0 1``. Anything malformed raises
    :class:`ValueError` naming the offending field.
    """
    fields = fen.split()
    if not 4 <= len(fields) <= 6:
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    board = _parse_placement(fields[0], fen)
    side = _SIDE_LETTERS.get(fields[1])
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {fields[1]!r}")

    return Position(
        board,
        side,
        _parse_castling(fields[2]),
        _parse_en_passant(fields[3], side),
        _parse_counter(fields, 4, default=0, minimum=0, label="halfmove clock"),
        _parse_counter(fields, 5, default=1, minimum=1, label="fullmove number"),
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to six-field FEN."""
    placement = "/".join(_encode_row(row) for row in pos.board.snapshot())
    side = "w" if pos.side_to_move == Color.WHITE else "b"
    castling = "".join(
        letter for letter, right in _CASTLING_LETTERS.items() if pos.castling & right
    )
    ep = "-" if pos.en_passant is None else square_name(pos.en_passant)
    return (
        f"{placement} {side} {castling or '-'} {ep} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )


# ── Field parsers ────────────────────────────────────────────────────────────


def _parse_placement(placement: str, fen: str) -> Board:
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    board = Board()
    for rank, row in zip(range(7, -1, -1), rows):
        file = 0
        for ch in row:
            if ch.isdigit():
                if ch in "09":
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += int(ch)
            else:
                if file < 8:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for color in Color:
        kings = board.count(color, PieceType.KING)
        if kings != 1:
            raise ValueError(f"Invalid FEN: {color.name} must have one king, found {kings}")
    return board


def _parse_castling(text: str) -> CastlingRights:
    if text == "-":
        return CastlingRights.NONE
    if len(set(text)) != len(text) or not set(text) <= _CASTLING_LETTERS.keys():
        raise ValueError(f"Invalid FEN castling field: {text!r}")
    rights = CastlingRights.NONE
    for letter in text:
        rights |= _CASTLING_LETTERS[letter]
    return rights


def _parse_en_passant(text: str, side: Color) -> Square | None:
    if text == "-":
        return None
    try:
        sq = parse_square(text)
    except ValueError:
        raise ValueError(f"Invalid FEN en-passant square: {text!r}") from None
    # The target lies behind a pawn the opponent has just pushed two squares.
    if rank_of(sq) != (5 if side == Color.WHITE else 2):
        raise ValueError(f"Invalid FEN en-passant square for side-to-move: {text!r}")
    return sq


def _parse_counter(
    fields: list[str], index: int, *, default: int, minimum: int, label: str
) -> int:
    if len(fields) <= index:
        return default
    try:
        value = int(fields[index])
    except ValueError:
        raise ValueError(f"Invalid FEN {label}: {fields[index]!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {label}: {fields[index]!r}")
    return value


def _encode_row(row: tuple[Piece | None, ...]) -> str:
    chunks: list[str] = []
    for empty, cells in groupby(row, key=lambda piece: piece is None):
        run = list(cells)
        chunks.append(str(len(run)) if empty else "".join(map(str, run)))
    return "".join(chunks)
