"""Game state machine: owns the position, the move log and the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.analysis.models import Evaluation
from chessrules.core.board import BoardSnapshot
from chessrules.core.enums import Color, Outcome
from chessrules.core.executor import apply_move, move_for
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_notation,
    position_from_fen,
    position_to_fen,
    with_check_suffix,
)
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import InvalidSquareError, Square, is_valid_square, square_name
from chessrules.game.models import MoveRecord, MoveResult, MoveStatus

_LOGGER = logging.getLogger(__name__)


def movetext(notations: list[str], *, start_fullmove: int = 1, black_first: bool = False) -> str:
    """Number a list of move strings, e.g. ``1. e4 e5 2. Nf3``."""
    parts: list[str] = []
    fullmove = start_fullmove
    for ply, notation in enumerate(notations):
        white_to_move = (ply % 2 == 0) != black_first
        if white_to_move:
            parts.append(f"{fullmove}.")
        elif ply == 0:
            parts.append(f"{fullmove}...")
        parts.append(notation)
        if not white_to_move:
            fullmove += 1
    return " ".join(parts)


@dataclass
class GameState:
    """Owns one game: position, move log, outcome and advisory data.

    This is a pure data/logic class: no threading, no UI.
    :meth:`attempt_move` is the only way the position changes.
    """

    position: Position = field(init=False)
    outcome: Outcome = field(default=Outcome.IN_PROGRESS, init=False)
    move_log: list[MoveRecord] = field(default_factory=list, init=False)
    advisory: Evaluation = field(default_factory=Evaluation, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    def __post_init__(self) -> None:
        self.setup()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game.

        A malformed *fen* raises :class:`ValueError` and leaves the current
        game as it was.
        """
        start_fen = STARTING_FEN if fen is None else fen
        position = position_from_fen(start_fen)
        self.start_fen = start_fen
        self.position = position
        self.outcome = Rules.outcome(position)
        self.move_log.clear()
        self.advisory = Evaluation()

    # ── Move application ─────────────────────────────────────────────────

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Validate and, if legal, play the move from *from_sq* to *to_sq*."""
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            _LOGGER.debug("Rejected move with invalid squares: %r -> %r", from_sq, to_sq)
            return MoveResult.rejected(MoveStatus.INVALID_SQUARE)

        if self.is_game_over:
            _LOGGER.debug("Rejected move after game over: %s", self.outcome.name)
            return MoveResult.rejected(MoveStatus.GAME_OVER)

        piece = self.position.board[from_sq]
        if piece is None or piece.color != self.side_to_move:
            _LOGGER.debug("Rejected move from %s: no piece to move", square_name(from_sq))
            return MoveResult.rejected(MoveStatus.ILLEGAL)

        if not MoveGenerator(self.position).is_legal(from_sq, to_sq):
            _LOGGER.debug(
                "Rejected illegal move %s%s", square_name(from_sq), square_name(to_sq)
            )
            return MoveResult.rejected(MoveStatus.ILLEGAL)

        record = self._commit(move_for(self.position, from_sq, to_sq))
        return MoveResult(
            status=MoveStatus.APPLIED,
            notation=record.notation,
            check=record.was_check,
            mate=record.was_mate,
        )

    def set_advisory(self, evaluation: object) -> None:
        """Attach oracle output to the current position; bad data is dropped."""
        if not isinstance(evaluation, Evaluation):
            _LOGGER.debug("Ignoring malformed advisory data: %r", evaluation)
            return
        self.advisory = evaluation

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_log)

    @property
    def notations(self) -> list[str]:
        return [record.notation for record in self.move_log]

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Legal target squares for the piece on *sq* (empty if none)."""
        if not is_valid_square(sq):
            raise InvalidSquareError(f"Square index off the board: {sq!r}")
        return MoveGenerator(self.position).legal_destinations(sq)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self.position, color)

    def is_checkmate(self, color: Color | None = None) -> bool:
        return Rules.is_checkmate(self.position, color)

    def is_stalemate(self, color: Color | None = None) -> bool:
        return Rules.is_stalemate(self.position, color)

    def has_no_legal_moves(self, color: Color | None = None) -> bool:
        return Rules.has_no_legal_moves(self.position, color)

    def to_fen(self) -> str:
        return position_to_fen(self.position)

    def board_snapshot(self) -> BoardSnapshot:
        return self.position.board.snapshot()

    def describe_for_assistant(self) -> str:
        """Plain-text summary of the game for a conversational helper."""
        start = position_from_fen(self.start_fen)
        moves = movetext(
            self.notations,
            start_fullmove=start.fullmove_number,
            black_first=start.side_to_move == Color.BLACK,
        )
        side = "White" if self.side_to_move == Color.WHITE else "Black"
        lines = [
            f"FEN: {self.to_fen()}",
            f"Side to move: {side}",
            f"Moves: {moves or '(none)'}",
            f"Evaluation: {self.advisory.describe()}",
            f"Best move: {self.advisory.best_move_text}",
            repr(self.position.board),
        ]
        if self.is_game_over:
            lines.insert(2, f"Result: {self.outcome.name}")
        return "\n".join(lines)

    # ── Internal ─────────────────────────────────────────────────────────

    def _commit(self, move: Move) -> MoveRecord:
        notation = move_to_notation(self.position, move)
        applied = apply_move(self.position, move)

        opponent = self.position.side_to_move
        gen = MoveGenerator(self.position)
        check = gen.is_in_check(opponent)
        stuck = gen.has_no_legal_moves(opponent)
        mate = check and stuck

        record = MoveRecord(
            move=move,
            piece=applied.piece,
            notation=with_check_suffix(notation, check=check, mate=mate),
            fen_after=position_to_fen(self.position),
            captured=applied.captured,
            was_check=check,
            was_mate=mate,
        )
        self.move_log.append(record)
        # The previous evaluation described the previous position.
        self.advisory = Evaluation()
        _LOGGER.info("Played %s (%s)", record.notation, move.uci)

        if mate:
            self.outcome = Outcome.checkmate_against(opponent)
        elif stuck:
            self.outcome = Outcome.STALEMATE
        if self.is_game_over:
            _LOGGER.info("Game over: %s", self.outcome.name)
        return record
