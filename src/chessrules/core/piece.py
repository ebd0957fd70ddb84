"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_BY_LETTER: dict[str, PieceType] = {pt.letter: pt for pt in PieceType}


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece; the board stores these, never strings."""

    color: Color
    piece_type: PieceType

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def __str__(self) -> str:
        """FEN letter: uppercase for White, lowercase for Black."""
        letter = self.piece_type.letter
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of :meth:`__str__`, e.g. ``'n'`` → black knight."""
        piece_type = _BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)
