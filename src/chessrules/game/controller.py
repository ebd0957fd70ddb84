"""GameController: the single entry point the surrounding app talks to.

Coordinates: GameState, move requests and advisory ingestion.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Outcome, PieceType
from chessrules.core.types import Square
from chessrules.game.models import MoveRecord, MoveResult
from chessrules.game.requests import resolve_castle, resolve_piece_move, resolve_square_move
from chessrules.game.state import GameState

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[Outcome], None]
PositionCallback = Callable[[str], None]  # fen
RejectedCallback = Callable[[MoveResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one :class:`GameState` and notifies listeners about it.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Oracle output produced elsewhere must be marshalled
    onto that thread first, e.g. by :class:`chessrules.analysis.qt_bridge.AdvisoryBridge`.
    """

    __slots__ = ("__weakref__", "_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Discard the current game and start a fresh one.

        A malformed *fen* raises :class:`ValueError`; the game in progress is
        kept and no event fires.
        """
        state = GameState()
        if fen is not None:
            state.setup(fen)
        self._state = state
        self._emit_position_changed()
        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)

    # ── Move requests ────────────────────────────────────────────────────

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        return self._handle(self._state.attempt_move(from_sq, to_sq))

    def request_square_move(self, from_name: str, to_name: str) -> MoveResult:
        return self._handle(resolve_square_move(self._state, from_name, to_name))

    def request_piece_move(self, piece_type: PieceType, to_sq: Square) -> MoveResult:
        return self._handle(resolve_piece_move(self._state, piece_type, to_sq))

    def request_castle(self, kingside: bool) -> MoveResult:
        return self._handle(resolve_castle(self._state, kingside))

    # ── Advisory ─────────────────────────────────────────────────────────

    def ingest_advisory(self, evaluation: object) -> None:
        """Attach oracle output to the current position (display only)."""
        self._state.set_advisory(evaluation)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _handle(self, result: MoveResult) -> MoveResult:
        if not result.applied:
            for cb in self.events.on_rejected:
                cb(result)
            return result

        self._emit_move(self._state.move_log[-1])
        self._emit_position_changed()
        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)
        return result

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_position_changed(self) -> None:
        fen = self._state.to_fen()
        for cb in self.events.on_position_changed:
            cb(fen)

    def _emit_game_over(self, outcome: Outcome) -> None:
        for cb in self.events.on_game_over:
            cb(outcome)
