"""Legal and pseudo-legal move checks + attack detection.

Two geometry probes are kept strictly apart:

* :meth:`MoveGenerator.attacks` answers "could this piece hit that square".
  It is what attack detection uses, so it happily "captures" a king, counts
  pawn diagonals on empty squares and never considers castling.
* :meth:`MoveGenerator.is_pseudo_legal` answers "is this a well-formed move".
  It forbids king captures and knows about en passant and castling.

Neither probe ever asks about king safety, so attack detection can never
recurse back into the full legality check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.executor import apply_move, move_for
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position


KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {
        (-2, -1),
        (-2, 1),
        (-1, -2),
        (-1, 2),
        (1, -2),
        (1, 2),
        (2, -1),
        (2, 1),
    }
)

KING_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {
        (-1, -1),
        (-1, 0),
        (-1, 1),
        (0, -1),
        (0, 1),
        (1, -1),
        (1, 0),
        (1, 1),
    }
)

_KING_HOME_FILE = 4
_KINGSIDE_ROOK_FILE = 7
_QUEENSIDE_ROOK_FILE = 0


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def pawn_direction(color: Color) -> int:
    """Rank step a pawn of *color* advances by."""
    return 1 if color == Color.WHITE else -1


def home_rank(color: Color) -> int:
    return 0 if color == Color.WHITE else 7


class MoveGenerator:
    """Answers legality and attack questions about a :class:`Position`.

    The generator never mutates the position it was built from: full
    legality is decided by applying the candidate move to a copy.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether moving the piece on *from_sq* to *to_sq* is fully legal."""
        piece = self._board[from_sq]
        if piece is None:
            return False
        if not self.is_pseudo_legal(from_sq, to_sq):
            return False

        opponent = piece.color.opposite
        if piece.is_king and abs(file_of(to_sq) - file_of(from_sq)) == 2:
            # Castling: the king may not start, pass or land on an attacked square.
            step = _sign(to_sq - from_sq)
            return not any(
                self.is_square_attacked(sq, opponent)
                for sq in (from_sq, from_sq + step, to_sq)
            )

        probe = self._pos.copy()
        apply_move(probe, move_for(probe, from_sq, to_sq))
        return not MoveGenerator(probe).is_in_check(piece.color)

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Every square the piece on *from_sq* may legally move to."""
        if self._board[from_sq] is None:
            return []
        return [to_sq for to_sq in range(64) if self.is_legal(from_sq, to_sq)]

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All strictly legal moves for *color* (default: side to move)."""
        if color is None:
            color = self._pos.side_to_move
        return [
            move_for(self._pos, from_sq, to_sq)
            for from_sq in self._board.all_pieces(color)
            for to_sq in self.legal_destinations(from_sq)
        ]

    def has_no_legal_moves(self, color: Color) -> bool:
        """Whether *color* is without a single legal move."""
        for from_sq in self._board.all_pieces(color):
            for to_sq in range(64):
                if self.is_legal(from_sq, to_sq):
                    return False
        return True

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return any(
            self.attacks(from_sq, sq)
            for from_sq, piece in self._board.occupied()
            if piece.color == by_color
        )

    # -- Geometry probes ----------------------------------------------------

    def attacks(self, from_sq: Square, to_sq: Square) -> bool:
        """Could the piece on *from_sq* strike *to_sq*, king included?"""
        piece = self._board[from_sq]
        if piece is None or from_sq == to_sq:
            return False
        target = self._board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        df = file_of(to_sq) - file_of(from_sq)
        dr = rank_of(to_sq) - rank_of(from_sq)
        if piece.piece_type == PieceType.PAWN:
            return abs(df) == 1 and dr == pawn_direction(piece.color)
        return self._reaches(piece.piece_type, from_sq, to_sq, df, dr)

    def is_pseudo_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Geometric legality, ignoring whether the mover's king ends in check."""
        piece = self._board[from_sq]
        if piece is None or from_sq == to_sq:
            return False
        target = self._board[to_sq]
        if target is not None and (target.color == piece.color or target.is_king):
            return False

        df = file_of(to_sq) - file_of(from_sq)
        dr = rank_of(to_sq) - rank_of(from_sq)
        if piece.piece_type == PieceType.PAWN:
            return self._is_pawn_move(piece.color, from_sq, to_sq, df, dr)
        if piece.is_king and dr == 0 and abs(df) == 2:
            return self._is_castling_shape(piece.color, from_sq, to_sq)
        return self._reaches(piece.piece_type, from_sq, to_sq, df, dr)

    def is_path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Every square strictly between two aligned squares is empty."""
        df = file_of(to_sq) - file_of(from_sq)
        dr = rank_of(to_sq) - rank_of(from_sq)
        if df and dr and abs(df) != abs(dr):
            return False

        step_f, step_r = _sign(df), _sign(dr)
        f = file_of(from_sq) + step_f
        r = rank_of(from_sq) + step_r
        while (f, r) != (file_of(to_sq), rank_of(to_sq)):
            if not self._board.is_empty(make_square(f, r)):
                return False
            f += step_f
            r += step_r
        return True

    # -- Piece-specific helpers (private) ----------------------------------

    def _reaches(
        self, piece_type: PieceType, from_sq: Square, to_sq: Square, df: int, dr: int
    ) -> bool:
        if piece_type == PieceType.KNIGHT:
            return (df, dr) in KNIGHT_OFFSETS
        if piece_type == PieceType.KING:
            return (df, dr) in KING_OFFSETS

        straight = df == 0 or dr == 0
        diagonal = abs(df) == abs(dr)
        if piece_type == PieceType.ROOK:
            aligned = straight
        elif piece_type == PieceType.BISHOP:
            aligned = diagonal
        else:
            aligned = straight or diagonal
        return aligned and self.is_path_clear(from_sq, to_sq)

    def _is_pawn_move(
        self, color: Color, from_sq: Square, to_sq: Square, df: int, dr: int
    ) -> bool:
        board = self._board
        forward = pawn_direction(color)

        if df == 0:
            if not board.is_empty(to_sq):
                return False
            if dr == forward:
                return True
            start_rank = 1 if color == Color.WHITE else 6
            if dr == 2 * forward and rank_of(from_sq) == start_rank:
                return board.is_empty(from_sq + 8 * forward)
            return False

        if abs(df) != 1 or dr != forward:
            return False
        if not board.is_empty(to_sq):
            return True
        return self._is_en_passant_capture(color, to_sq)

    def _is_en_passant_capture(self, color: Color, to_sq: Square) -> bool:
        if to_sq != self._pos.en_passant:
            return False
        victim_sq = to_sq - 8 * pawn_direction(color)
        return self._board[victim_sq] == Piece(color.opposite, PieceType.PAWN)

    def _is_castling_shape(self, color: Color, from_sq: Square, to_sq: Square) -> bool:
        rank = home_rank(color)
        if from_sq != make_square(_KING_HOME_FILE, rank):
            return False

        kingside = to_sq > from_sq
        if not self._pos.has_castling_right(color, kingside):
            return False

        rook_file = _KINGSIDE_ROOK_FILE if kingside else _QUEENSIDE_ROOK_FILE
        rook_sq = make_square(rook_file, rank)
        if self._board[rook_sq] != Piece(color, PieceType.ROOK):
            return False
        return self.is_path_clear(from_sq, rook_sq)
