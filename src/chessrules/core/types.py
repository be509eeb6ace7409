"""Squares as plain ints and the arithmetic around them.

Index 0 is a1, 7 is h1, 56 is a8 and 63 is h8: file in the low three bits,
rank in the next three.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def file_of(sq: Square) -> int:
    return sq & 7


def rank_of(sq: Square) -> int:
    return sq >> 3


def on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def make_square(file: int, rank: int) -> Square:
    """Square at (*file*, *rank*); ``ValueError`` if either is outside 0..7."""
    if not on_board(file, rank):
        raise ValueError(f"Square coordinates out of range: ({file}, {rank})")
    return rank * 8 + file


def offset_square(sq: Square, df: int, dr: int) -> Square | None:
    """Square *df* files and *dr* ranks away from *sq*, or None off the board."""
    file, rank = file_of(sq) + df, rank_of(sq) + dr
    return rank * 8 + file if on_board(file, rank) else None


def square_name(sq: Square) -> str:
    return FILE_NAMES[file_of(sq)] + RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """``'e4'`` -> 28. Only lower-case file letters are accepted."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < 64


def is_light_square(sq: Square) -> bool:
    """a1 is dark, h1 is light."""
    return (file_of(sq) + rank_of(sq)) % 2 == 1


# ── Named squares ───────────────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
