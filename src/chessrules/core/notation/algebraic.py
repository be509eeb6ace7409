"""Long algebraic move text as shown to players, e.g. ``Ng1-f3``, ``Bb5xc6+``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.legality import legal_moves
from chessrules.core.types import square_name
from chessrules.errors import InvalidMoveRequest, InvariantViolation

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def resolve_move(position: Position, move: Move) -> Move:
    """Return the engine's annotated legal move equal to *move*."""
    for legal in legal_moves(position):
        if legal == move:
            return legal
    _LOGGER.warning("Cannot notate %s: not legal in %s", move.uci, position.encode())
    raise InvalidMoveRequest(f"Illegal move: {move.uci}")


def move_to_text(position: Position, move: Move) -> str:
    """Render a legal *move* given the *position* before it is played."""
    move = resolve_move(position, move)

    if move.is_castle:
        text = "O-O" if move.is_kingside_castle else "O-O-O"
    else:
        piece = position.board[move.from_sq]
        if piece is None:
            raise InvariantViolation(
                f"Legal move {move.uci} starts on an empty square"
            )
        text = PIECE_LETTERS.get(piece.piece_type, "")
        text += square_name(move.from_sq)
        text += "x" if move.is_capture else "-"
        text += square_name(move.to_sq)
        if move.promotion is not None:
            text += "=" + PIECE_LETTERS[move.promotion]

    # Check / checkmate suffix
    if move.is_checkmate:
        text += "#"
    elif move.is_check:
        text += "+"
    return text
