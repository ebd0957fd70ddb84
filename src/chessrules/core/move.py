"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """One move from *from_sq* to *to_sq*, already classified by :class:`MoveFlag`.

    Instances are produced by :func:`chessrules.core.executor.move_for`;
    ``promotion`` is only set together with ``MoveFlag.PROMOTION``.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    @property
    def uci(self) -> str:
        """Long algebraic form used by analysis oracles, e.g. ``e7e8q``."""
        text = square_name(self.from_sq) + square_name(self.to_sq)
        if self.promotion is not None:
            # Black's FEN letters are the lowercase ones UCI expects.
            text += str(Piece(Color.BLACK, self.promotion))
        return text

    def __str__(self) -> str:
        return self.uci
