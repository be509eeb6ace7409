"""Attack detection, decomposed by piece-movement pattern."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square, make_square
from chessrules.errors import InvariantViolation

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_sources(forward: int) -> tuple[tuple[Square, ...], ...]:
    """Squares from which a pawn moving in *forward* direction hits each square."""
    return _build_targets(((-1, -forward), (1, -forward)))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

# [attacking color][target square] -> squares a pawn of that color attacks from.
_PAWN_SOURCES = (_build_pawn_sources(1), _build_pawn_sources(-1))


# -- Pattern checks ---------------------------------------------------------


def _has_piece(
    board: Board, sq: Square, color: Color, kinds: tuple[PieceType, ...]
) -> bool:
    piece = board[sq]
    return piece is not None and piece.color == color and piece.piece_type in kinds


def attacked_by_pawn(board: Board, sq: Square, by_color: Color) -> bool:
    return any(
        _has_piece(board, src, by_color, (PieceType.PAWN,))
        for src in _PAWN_SOURCES[int(by_color)][sq]
    )


def attacked_by_knight(board: Board, sq: Square, by_color: Color) -> bool:
    return any(
        _has_piece(board, src, by_color, (PieceType.KNIGHT,))
        for src in KNIGHT_TARGETS[sq]
    )


def attacked_by_king(board: Board, sq: Square, by_color: Color) -> bool:
    return any(
        _has_piece(board, src, by_color, (PieceType.KING,))
        for src in KING_TARGETS[sq]
    )


def _first_blocker(board: Board, ray: tuple[Square, ...]) -> Square | None:
    for to_sq in ray:
        if board[to_sq] is not None:
            return to_sq
    return None


def attacked_by_slider(board: Board, sq: Square, by_color: Color) -> bool:
    """Bishop, rook or queen attack along an unobstructed line."""
    for rays, kinds in (
        (BISHOP_RAYS[sq], _DIAGONAL_SLIDERS),
        (ROOK_RAYS[sq], _ORTHOGONAL_SLIDERS),
    ):
        for ray in rays:
            blocker = _first_blocker(board, ray)
            if blocker is not None and _has_piece(board, blocker, by_color, kinds):
                return True
    return False


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    return (
        attacked_by_pawn(board, sq, by_color)
        or attacked_by_knight(board, sq, by_color)
        or attacked_by_slider(board, sq, by_color)
        or attacked_by_king(board, sq, by_color)
    )


def attackers_of(board: Board, sq: Square, by_color: Color) -> list[Square]:
    """Squares of every *by_color* piece attacking *sq*, in index order."""
    found: set[Square] = set()
    for src in _PAWN_SOURCES[int(by_color)][sq]:
        if _has_piece(board, src, by_color, (PieceType.PAWN,)):
            found.add(src)
    for src in KNIGHT_TARGETS[sq]:
        if _has_piece(board, src, by_color, (PieceType.KNIGHT,)):
            found.add(src)
    for src in KING_TARGETS[sq]:
        if _has_piece(board, src, by_color, (PieceType.KING,)):
            found.add(src)
    for rays, kinds in (
        (BISHOP_RAYS[sq], _DIAGONAL_SLIDERS),
        (ROOK_RAYS[sq], _ORTHOGONAL_SLIDERS),
    ):
        for ray in rays:
            blocker = _first_blocker(board, ray)
            if blocker is not None and _has_piece(board, blocker, by_color, kinds):
                found.add(blocker)
    return sorted(found)


# -- Check detection --------------------------------------------------------


def king_square_of(board: Board, color: Color) -> Square:
    sq = board.find_king(color)
    if sq is None:
        _LOGGER.error("No %s king on board:\n%r", color, board)
        raise InvariantViolation(f"No {color} king on board")
    return sq


def is_in_check(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    board = position.board
    return is_square_attacked(board, king_square_of(board, color), color.opposite)
