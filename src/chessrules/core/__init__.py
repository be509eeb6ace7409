"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import legal_moves, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in legal_moves(pos):
        print(move)
"""

from chessrules.core.attacks import attackers_of, is_in_check, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    MoveKind,
    PieceType,
    StatusKind,
)
from chessrules.core.legality import has_legal_move, is_legal, legal_moves
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, pseudo_legal_moves
from chessrules.core.notation import (
    STARTING_FEN,
    board_signature,
    move_to_text,
    parse_uci,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.repetition import RepetitionTracker
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveKind",
    "PieceType",
    "StatusKind",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "RepetitionTracker",
    "Rules",
    # Move generation / attacks
    "attackers_of",
    "has_legal_move",
    "is_in_check",
    "is_legal",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    # Notation
    "STARTING_FEN",
    "board_signature",
    "move_to_text",
    "parse_uci",
    "position_from_fen",
    "position_to_fen",
]
