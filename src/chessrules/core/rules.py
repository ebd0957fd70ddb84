"""High-level chess rules: check, checkmate, stalemate, game outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, Outcome
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Every *color* argument defaults to the side to move.
    """

    # Product policy:
    # - Checkmate and stalemate end the game.
    # - The half-move clock is reported, never enforced. There are no automatic draws.

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return MoveGenerator(position).is_in_check(color)

    @staticmethod
    def has_no_legal_moves(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return MoveGenerator(position).has_no_legal_moves(color)

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        if not Rules.is_in_check(position, color):
            return False
        return Rules.has_no_legal_moves(position, color)

    @staticmethod
    def is_stalemate(position: Position, color: Color | None = None) -> bool:
        if Rules.is_in_check(position, color):
            return False
        return Rules.has_no_legal_moves(position, color)

    @staticmethod
    def outcome(position: Position) -> Outcome:
        """Determine the current game outcome for the side to move."""
        color = position.side_to_move
        gen = MoveGenerator(position)
        if not gen.has_no_legal_moves(color):
            return Outcome.IN_PROGRESS
        if gen.is_in_check(color):
            return Outcome.checkmate_against(color)
        return Outcome.STALEMATE
