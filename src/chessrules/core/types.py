"""Squares and their coordinate helpers.

A square is a plain ``int`` in ``0..63`` counted rank by rank from White's
side: a1=0, h1=7, a2=8 ... h8=63. File and rank indexes are both ``0..7``.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


class InvalidSquareError(ValueError):
    """Raised for square names or coordinates outside the 8x8 board."""


def file_of(sq: Square) -> int:
    return sq % 8


def rank_of(sq: Square) -> int:
    return sq // 8


def make_square(file: int, rank: int) -> Square:
    """Square at (*file*, *rank*); rejects coordinates off the board."""
    if file not in range(8) or rank not in range(8):
        raise InvalidSquareError(f"Coordinates off the board: ({file}, {rank})")
    return 8 * rank + file


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``28`` → ``'e4'``."""
    return FILE_NAMES[file_of(sq)] + RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Inverse of :func:`square_name`."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return make_square(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is an ``int`` square index (``bool`` excluded)."""
    return type(sq) is int and 0 <= sq < 64


# ── Named squares ───────────────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
