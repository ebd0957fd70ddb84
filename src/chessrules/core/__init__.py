"""Chess rules: board model, legality, move execution and notation.

Pure Python, no Qt. For example, the legal targets of the e2 pawn::

    from chessrules.core import MoveGenerator, STARTING_FEN, parse_square, position_from_fen

    gen = MoveGenerator(position_from_fen(STARTING_FEN))
    gen.legal_destinations(parse_square("e2"))  # [20, 28]: e3 and e4
"""

from chessrules.core.board import Board, BoardSnapshot
from chessrules.core.enums import CastlingRights, Color, MoveFlag, Outcome, PieceType
from chessrules.core.executor import AppliedMove, apply_move, move_for
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_notation,
    position_from_fen,
    position_to_fen,
    with_check_suffix,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.types import (
    InvalidSquareError,
    Square,
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "Outcome",
    "PieceType",
    # Types / helpers
    "InvalidSquareError",
    "Square",
    "file_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "AppliedMove",
    "Board",
    "BoardSnapshot",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "apply_move",
    "move_for",
    # Notation
    "STARTING_FEN",
    "move_to_notation",
    "position_from_fen",
    "position_to_fen",
    "with_check_suffix",
]
