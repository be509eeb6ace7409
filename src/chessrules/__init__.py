"""chessrules: a self-contained chess rules engine.

Quick start::

    from chessrules import apply_move, legal_moves, new_position, status

    pos = new_position()
    apply_move(pos, legal_moves(pos)[0])
    print(status(pos))
"""

from chessrules.core import (
    STARTING_FEN,
    CastlingRights,
    Color,
    GameStatus,
    Move,
    MoveKind,
    Piece,
    PieceType,
    Position,
    StatusKind,
    parse_square,
    square_name,
)
from chessrules.engine import (
    apply_move,
    apply_uci,
    classify_move,
    encode,
    find_move,
    is_in_check,
    is_promotion_move,
    legal_moves,
    moves_from,
    new_position,
    notate,
    status,
)
from chessrules.errors import (
    ChessRulesError,
    InvalidMoveRequest,
    InvariantViolation,
    MalformedEncoding,
)

__all__ = [
    # Model
    "CastlingRights",
    "Color",
    "GameStatus",
    "Move",
    "MoveKind",
    "Piece",
    "PieceType",
    "Position",
    "STARTING_FEN",
    "StatusKind",
    "parse_square",
    "square_name",
    # Operations
    "apply_move",
    "apply_uci",
    "classify_move",
    "encode",
    "find_move",
    "is_in_check",
    "is_promotion_move",
    "legal_moves",
    "moves_from",
    "new_position",
    "notate",
    "status",
    # Errors
    "ChessRulesError",
    "InvalidMoveRequest",
    "InvariantViolation",
    "MalformedEncoding",
]
