"""Position: a board plus everything FEN records alongside it."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.types import Square


class Position:
    """Board, side to move, castling rights, en-passant target and clocks.

    Only :func:`chessrules.core.executor.apply_move` mutates a position.
    Legality probes run on :meth:`copy`, so the live position is never
    touched while a candidate move is tried out.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = Board.initial() if board is None else board
        self.side_to_move = side_to_move
        self.castling = castling
        # Square a pawn skipped on the previous ply, if it was a double step.
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    def has_castling_right(self, color: Color, kingside: bool) -> bool:
        return CastlingRights.for_side(color, kingside) in self.castling

    def revoke_castling(self, rights: CastlingRights) -> None:
        """Clear *rights*; there is no way to grant one back."""
        self.castling &= ~rights

    def copy(self) -> Position:
        """Deep copy; the board is duplicated, everything else is immutable."""
        return Position(self.board.copy(), *self._metadata())

    def _metadata(self) -> tuple[Color, CastlingRights, Square | None, int, int]:
        return (
            self.side_to_move,
            self.castling,
            self.en_passant,
            self.halfmove_clock,
            self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self._metadata() == other._metadata()

    def __repr__(self) -> str:
        return (
            f"Position({self.side_to_move.name}, castling={self.castling!r}, "
            f"en_passant={self.en_passant})\n{self.board!r}"
        )
