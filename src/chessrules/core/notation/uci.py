"""UCI long-algebraic move text (``e2e4``, ``e7e8q``) as spoken by analysis engines."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.legality import legal_moves
from chessrules.core.types import parse_square
from chessrules.errors import InvalidMoveRequest

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

_UCI_MOVE = re.compile(r"([a-h][1-8])([a-h][1-8])([qrbn])?")
_PROMO_TYPES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}


def parse_uci(position: Position, text: str) -> Move:
    """Resolve UCI *text* to the matching legal move in *position*."""
    match = _UCI_MOVE.fullmatch(text.strip())
    if match is None:
        raise InvalidMoveRequest(f"Malformed UCI move: {text!r}")
    from_sq = parse_square(match.group(1))
    to_sq = parse_square(match.group(2))
    promotion = _PROMO_TYPES.get(match.group(3) or "")

    for move in legal_moves(position):
        if (move.from_sq, move.to_sq, move.promotion) == (from_sq, to_sq, promotion):
            return move
    _LOGGER.warning("UCI move %s is not legal in %s", text, position.encode())
    raise InvalidMoveRequest(f"Illegal move: {text}")
