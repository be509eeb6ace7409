"""Public entry points consumed by the host application.

Every function is synchronous and pure apart from :func:`apply_move` and
:func:`apply_uci`, which mutate the given position in place. A position is
owned by one game session; callers serialise access to it.
"""

from __future__ import annotations

import logging

from chessrules.core import attacks, legality
from chessrules.core.enums import Color, MoveKind, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_text,
    parse_uci,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.position import Position
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import Square, rank_of
from chessrules.errors import InvalidMoveRequest

_LOGGER = logging.getLogger(__name__)


# ── Position lifecycle ───────────────────────────────────────────────────────


def new_position(fen: str | None = None) -> Position:
    """Standard starting position, or the one described by *fen*.

    Raises :class:`~chessrules.errors.MalformedEncoding` for a bad record.
    """
    return position_from_fen(STARTING_FEN if fen is None else fen)


def encode(position: Position) -> str:
    """6-field FEN record; round-trips through :func:`new_position`."""
    return position_to_fen(position)


# ── Move queries ─────────────────────────────────────────────────────────────


def legal_moves(position: Position) -> list[Move]:
    """Legal moves for the side to move, annotated with check/checkmate."""
    return legality.legal_moves(position)


def moves_from(position: Position, sq: Square) -> list[Move]:
    """Legal moves of the piece standing on *sq* (empty if none or not on move)."""
    return [m for m in legality.legal_moves(position) if m.from_sq == sq]


def find_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> Move | None:
    """Resolve a (from, to[, promotion]) request against the legal moves.

    A promoting pawn move given without *promotion* resolves to the queen.
    """
    if promotion is None and is_promotion_move(position, from_sq, to_sq):
        promotion = PieceType.QUEEN
    wanted = Move(from_sq, to_sq, promotion)
    for move in legality.legal_moves(position):
        if move == wanted:
            return move
    return None


def is_promotion_move(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Whether moving the piece on *from_sq* to *to_sq* would be a pawn promotion."""
    piece = position.board[from_sq]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False
    return rank_of(to_sq) == piece.color.opposite.back_rank


def classify_move(position: Position, move: Move) -> MoveKind:
    """Feedback category of a legal *move* in *position*."""
    if move.is_castle:
        return MoveKind.CASTLING
    if move.is_en_passant:
        return MoveKind.EN_PASSANT
    if move.promotion is not None:
        return MoveKind.PROMOTION
    if move.is_capture or position.board[move.to_sq] is not None:
        return MoveKind.CAPTURE
    return MoveKind.NORMAL


# ── Mutation ─────────────────────────────────────────────────────────────────


def apply_move(position: Position, move: Move) -> bool:
    """Play *move* if it is currently legal.

    Returns False and leaves *position* untouched otherwise. The history
    records the engine's annotated move, not the caller's request.
    """
    for legal in legality.legal_moves(position):
        if legal == move:
            position.commit(legal)
            _LOGGER.debug(
                "Applied %s; now %s to move (%s)",
                legal.uci,
                position.side_to_move,
                position_to_fen(position),
            )
            return True
    _LOGGER.warning(
        "Rejected move %s for %s in %s",
        move.uci,
        position.side_to_move,
        position_to_fen(position),
    )
    return False


def apply_uci(position: Position, text: str) -> bool:
    """Apply a UCI move string such as ``e7e8q``; False if malformed or illegal."""
    try:
        move = parse_uci(position, text)
    except InvalidMoveRequest:
        return False
    return apply_move(position, move)


# ── Status & notation ────────────────────────────────────────────────────────


def is_in_check(position: Position, color: Color) -> bool:
    return attacks.is_in_check(position, color)


def status(position: Position) -> GameStatus:
    """Recompute the game status from scratch."""
    return Rules.status(position)


def notate(move: Move, position: Position) -> str:
    """Player-facing text of *move*, given the position before it is played."""
    return move_to_text(position, move)

