"""Data models returned by the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square


class MoveStatus(StrEnum):
    """Why a move request was, or was not, applied."""

    APPLIED = "applied"
    ILLEGAL = "illegal"
    INVALID_SQUARE = "invalid_square"
    GAME_OVER = "game_over"
    AMBIGUOUS = "ambiguous"
    NO_PIECE = "no_piece"


@dataclass(slots=True, frozen=True)
class MoveResult:
    """Answer to a move request.

    Rejected requests never change the game; ``candidates`` lists the
    origin squares that made an ``AMBIGUOUS`` request ambiguous.
    """

    status: MoveStatus
    notation: str | None = None
    check: bool = False
    mate: bool = False
    candidates: tuple[Square, ...] = ()

    @property
    def applied(self) -> bool:
        return self.status == MoveStatus.APPLIED

    @classmethod
    def rejected(
        cls, status: MoveStatus, candidates: tuple[Square, ...] = ()
    ) -> MoveResult:
        return cls(status=status, candidates=candidates)


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """A single entry in the move log."""

    move: Move
    piece: Piece
    notation: str
    fen_after: str
    captured: Piece | None = None
    was_check: bool = False
    was_mate: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None
