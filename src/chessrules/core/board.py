"""Board - the 64 cells of a position and who stands on them."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

# Rows are ordered rank 8 → rank 1, cells file a → h, as a player sees them.
BoardSnapshot = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK = "RNBQKBNR"


class Board:
    """Mutable 8x8 grid of optional pieces.

    Each colour's king square is tracked on every write, so check detection
    never has to scan for the king.
    """

    __slots__ = ("_cells", "_kings")

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64
        self._kings: dict[Color, Square] = {}

    # -- Cell access --------------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        previous = self._cells[sq]
        if previous is not None and previous.is_king and self._kings.get(previous.color) == sq:
            del self._kings[previous.color]
        self._cells[sq] = piece
        if piece is not None and piece.is_king:
            self._kings[piece.color] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq] is None

    # -- Lookups ------------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 first."""
        return ((sq, piece) for sq, piece in enumerate(self._cells) if piece is not None)

    def all_pieces(self, color: Color) -> list[Square]:
        """Squares holding any piece of *color*, ascending."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares holding *color*'s pieces of *piece_type*, ascending."""
        wanted = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == wanted]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(1 for _, piece in self.occupied() if piece == Piece(color, piece_type))

    def king_square(self, color: Color) -> Square:
        try:
            return self._kings[color]
        except KeyError:
            raise ValueError(f"No {color.name} king on board") from None

    def snapshot(self) -> BoardSnapshot:
        """Immutable copy of the grid for renderers (see :data:`BoardSnapshot`)."""
        return tuple(
            tuple(self._cells[make_square(file, rank)] for file in range(8))
            for rank in reversed(range(8))
        )

    # -- Construction -------------------------------------------------------

    def copy(self) -> Board:
        clone = Board()
        clone._cells = list(self._cells)
        clone._kings = dict(self._kings)
        return clone

    @classmethod
    def initial(cls) -> Board:
        """Pieces in the standard starting array."""
        board = cls()
        for file, letter in enumerate(_BACK_RANK):
            board[make_square(file, 0)] = Piece.from_char(letter)
            board[make_square(file, 1)] = Piece.from_char("P")
            board[make_square(file, 6)] = Piece.from_char("p")
            board[make_square(file, 7)] = Piece.from_char(letter.lower())
        return board

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        lines = [
            f"{8 - index} " + " ".join(str(piece) if piece else "." for piece in row)
            for index, row in enumerate(self.snapshot())
        ]
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
