"""Notation package: FEN records, player-facing move text and UCI."""

from chessrules.core.notation.algebraic import PIECE_LETTERS, move_to_text
from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_signature,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.notation.uci import parse_uci

__all__ = [
    "PIECE_LETTERS",
    "STARTING_FEN",
    "board_signature",
    "move_to_text",
    "parse_uci",
    "position_from_fen",
    "position_to_fen",
]
