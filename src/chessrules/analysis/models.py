"""Advisory data attached to a position by an external analysis oracle."""

from __future__ import annotations

from dataclasses import dataclass

_PENDING_TEXT = "Calculating..."


@dataclass(slots=True, frozen=True)
class Evaluation:
    """Oracle evaluation of the current position, from White's point of view.

    Purely informational: nothing in the rules engine reads it.
    At most one of ``score_cp`` / ``mate_in`` is set; a positive
    ``mate_in`` means White mates in that many moves.
    """

    score_cp: int | None = None
    mate_in: int | None = None
    best_move: str | None = None
    depth: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.score_cp is None and self.mate_in is None and self.best_move is None

    @property
    def pawns(self) -> float | None:
        """Score in pawns (centipawns / 100), or ``None`` without a cp score."""
        if self.score_cp is None:
            return None
        return self.score_cp / 100

    def describe(self) -> str:
        """Short display form: ``+0.35``, ``Mate in 3 (White)`` or pending text."""
        if self.mate_in is not None:
            winner = "White" if self.mate_in > 0 else "Black"
            return f"Mate in {abs(self.mate_in)} ({winner})"
        pawns = self.pawns
        if pawns is None:
            return _PENDING_TEXT
        sign = "+" if pawns > 0 else ""
        return f"{sign}{pawns:.2f}"

    @property
    def best_move_text(self) -> str:
        return self.best_move or _PENDING_TEXT
