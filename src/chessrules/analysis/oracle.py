"""Parsing of the analysis oracle's text output into :class:`Evaluation` data.

The oracle speaks a UCI-like line protocol. Only three line shapes matter::

    info depth 12 ... score cp -35 ...
    info depth 12 ... score mate 3 ...
    bestmove e2e4 [ponder e7e5]

Scores arrive relative to the side to move and are stored white-positive.
Anything else, including garbled versions of the above, is ignored.
"""

from __future__ import annotations

import dataclasses
import logging
import re

from chessrules.analysis.models import Evaluation
from chessrules.core.enums import Color

_LOGGER = logging.getLogger(__name__)

_SCORE_CP_RE = re.compile(r"\bscore cp (-?\d+)\b")
_SCORE_MATE_RE = re.compile(r"\bscore mate (-?\d+)\b")
_DEPTH_RE = re.compile(r"\bdepth (\d+)\b")
_BESTMOVE_RE = re.compile(r"^bestmove\s+(\S+)")
_UCI_MOVE_RE = re.compile(r"^[a-h][1-8][a-h][1-8][nbrq]?$")
_NO_MOVE = "(none)"


def analysis_commands(fen: str, depth: int) -> list[str]:
    """Lines that ask the oracle to analyse *fen* to *depth* plies."""
    return [f"position fen {fen}", f"go depth {depth}"]


class OracleLineParser:
    """Accumulates oracle output lines for one position into an evaluation."""

    __slots__ = ("_evaluation",)

    def __init__(self) -> None:
        self._evaluation = Evaluation()

    @property
    def evaluation(self) -> Evaluation:
        return self._evaluation

    def reset(self) -> None:
        """Forget everything; called whenever a new position is analysed."""
        self._evaluation = Evaluation()

    def feed(self, line: str, side_to_move: Color) -> Evaluation | None:
        """Consume one line; return the new evaluation if the line changed it."""
        text = line.strip()
        if text.startswith("info"):
            updated = self._parse_info(text, side_to_move)
        elif text.startswith("bestmove"):
            updated = self._parse_bestmove(text)
        else:
            updated = None

        if updated is None:
            _LOGGER.debug("Ignoring oracle line: %r", line)
            return None
        self._evaluation = updated
        return updated

    # ── Internal ─────────────────────────────────────────────────────────

    def _parse_info(self, text: str, side_to_move: Color) -> Evaluation | None:
        sign = 1 if side_to_move == Color.WHITE else -1
        depth_match = _DEPTH_RE.search(text)
        depth = int(depth_match.group(1)) if depth_match else self._evaluation.depth

        cp_match = _SCORE_CP_RE.search(text)
        if cp_match:
            return dataclasses.replace(
                self._evaluation,
                score_cp=sign * int(cp_match.group(1)),
                mate_in=None,
                depth=depth,
            )

        mate_match = _SCORE_MATE_RE.search(text)
        if mate_match:
            moves = int(mate_match.group(1))
            if moves == 0:
                return None
            return dataclasses.replace(
                self._evaluation,
                score_cp=None,
                mate_in=sign * moves,
                depth=depth,
            )
        return None

    def _parse_bestmove(self, text: str) -> Evaluation | None:
        match = _BESTMOVE_RE.match(text)
        if match is None:
            return None
        move_text = match.group(1)
        if move_text == _NO_MOVE:
            return dataclasses.replace(self._evaluation, best_move=None)
        if not _UCI_MOVE_RE.match(move_text):
            return None
        return dataclasses.replace(self._evaluation, best_move=move_text)
