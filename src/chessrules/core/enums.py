"""Enumerations shared by every layer of the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceType(IntEnum):
    """Piece kinds; :attr:`letter` is the lowercase FEN letter."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return "pnbrqk"[self - 1]


class MoveFlag(IntEnum):
    """How a move has to be executed beyond lifting and dropping one piece."""

    NORMAL = 0
    DOUBLE_PAWN = 1  # leaves an en-passant target behind
    EN_PASSANT = 2  # captured pawn is not on the destination square
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class CastlingRights(IntFlag):
    """Remaining castling rights; bits are only ever cleared during a game."""

    NONE = 0
    WHITE_KINGSIDE = 1
    WHITE_QUEENSIDE = 2
    BLACK_KINGSIDE = 4
    BLACK_QUEENSIDE = 8

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, kingside: bool) -> CastlingRights:
        """The single right for *color* on the given wing."""
        if color == Color.WHITE:
            return cls.WHITE_KINGSIDE if kingside else cls.WHITE_QUEENSIDE
        return cls.BLACK_KINGSIDE if kingside else cls.BLACK_QUEENSIDE

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class Outcome(IntEnum):
    """Whether the game is still running and, if not, how it ended."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    STALEMATE = 3

    @property
    def is_over(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @classmethod
    def checkmate_against(cls, color: Color) -> Outcome:
        """Outcome when *color* has been checkmated."""
        return cls.BLACK_WINS if color == Color.WHITE else cls.WHITE_WINS
