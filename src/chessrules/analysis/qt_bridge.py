"""Qt bridge between an asynchronous analysis oracle and the game thread."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.analysis.oracle import OracleLineParser
from chessrules.core.enums import Color
from chessrules.settings import AdvisorySettings

if TYPE_CHECKING:
    from chessrules.game.controller import GameController

_LOGGER = logging.getLogger(__name__)
_SIDE_FIELDS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


class AdvisoryBridge(QObject):
    """Thread-affine relay for oracle traffic.

    ``analysis_requested`` carries ``(request_id, fen, depth)`` to whatever
    drives the oracle. Its output lines come back through :meth:`receive_line`
    tagged with the same id (connect a queued signal to it from the oracle's
    thread); lines for any other id are dropped. Parsed evaluations leave
    through ``evaluation_changed`` on this object's thread.
    """

    analysis_requested = pyqtSignal(int, str, int)  # request_id, fen, depth
    evaluation_changed = pyqtSignal(object)

    __slots__ = (
        "_parser",
        "_settings",
        "_side_to_move",
        "_controller",
        "_pending_request_id",
        "_next_request_id",
    )

    def __init__(
        self,
        settings: AdvisorySettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._parser = OracleLineParser()
        self._settings = settings or AdvisorySettings()
        self._side_to_move = Color.WHITE
        self._controller: GameController | None = None
        self._pending_request_id: int | None = None
        self._next_request_id = 0

    @property
    def pending_request_id(self) -> int | None:
        """Id of the request whose output is currently accepted."""
        return self._pending_request_id

    def attach(self, controller: GameController) -> None:
        """Follow *controller*'s positions and feed evaluations back into it."""
        self._controller = controller
        controller.events.on_position_changed.append(self.request_analysis)
        self.evaluation_changed.connect(controller.ingest_advisory)
        self.request_analysis(controller.state.to_fen())

    @pyqtSlot(str)
    def request_analysis(self, fen: str) -> None:
        """Start tracking *fen*; output of earlier requests is dropped from now on."""
        fields = fen.split()
        side = _SIDE_FIELDS.get(fields[1]) if len(fields) > 1 else None
        if side is None:
            _LOGGER.warning("Not requesting analysis for malformed FEN: %r", fen)
            return

        self._parser.reset()
        self._side_to_move = side
        self._pending_request_id = None
        if not self._settings.enabled:
            return
        self._next_request_id += 1
        request_id = self._next_request_id
        self._pending_request_id = request_id
        self.analysis_requested.emit(request_id, fen, self._settings.depth)

    @pyqtSlot(int, str)
    def receive_line(self, request_id: int, line: str) -> None:
        """Parse one oracle output line and publish any resulting evaluation."""
        if request_id != self._pending_request_id:
            _LOGGER.debug("Dropping oracle line for stale request %d: %r", request_id, line)
            return
        evaluation = self._parser.feed(line, self._side_to_move)
        if evaluation is not None:
            self.evaluation_changed.emit(evaluation)

    def set_settings(self, settings: AdvisorySettings) -> None:
        """Takes effect on the next analysis request."""
        self._settings = settings
