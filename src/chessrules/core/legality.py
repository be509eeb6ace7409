"""Legal-move filtering by copy-and-simulate.

Every pseudo-legal move is played on a throwaway copy of the position and
kept only if the mover's king is not attacked afterwards. The board has 64
squares and rarely more than ~40 candidate moves, so a full copy per
candidate is affordable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import is_in_check
from chessrules.core.move_generator import pseudo_legal_moves

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.move import Move
    from chessrules.core.position import Position


def _simulate(position: Position, move: Move, color: Color) -> Position:
    after = position.copy()
    # Generation for a color that is not on move still plays as that color.
    after.side_to_move = color
    after.play_unchecked(move)
    return after


def legal_moves(
    position: Position,
    color: Color | None = None,
    *,
    annotate: bool = True,
) -> list[Move]:
    """All strictly legal moves for *color* (default: side to move).

    With *annotate*, each move carries ``is_check`` and ``is_checkmate`` for
    the position it produces.
    """
    mover = position.side_to_move if color is None else color
    opponent = mover.opposite
    legal: list[Move] = []
    for move in pseudo_legal_moves(position, mover):
        after = _simulate(position, move, mover)
        if is_in_check(after, mover):
            continue
        if annotate:
            gives_check = is_in_check(after, opponent)
            mated = gives_check and not has_legal_move(after, opponent)
            move = move.with_result(is_check=gives_check, is_checkmate=mated)
        legal.append(move)
    return legal


def has_legal_move(position: Position, color: Color | None = None) -> bool:
    """Whether *color* has at least one legal move; stops at the first."""
    mover = position.side_to_move if color is None else color
    return any(
        not is_in_check(_simulate(position, move, mover), mover)
        for move in pseudo_legal_moves(position, mover)
    )


def is_legal(position: Position, move: Move) -> bool:
    """Whether *move* (compared by from/to/promotion) is legal for the side to move."""
    return move in legal_moves(position, annotate=False)
