"""Enumerations shared across the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """A side. The value indexes per-color tables (white first)."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def pawn_step(self) -> int:
        """Square delta of a one-rank pawn push."""
        return 8 if self is Color.WHITE else -8

    @property
    def back_rank(self) -> int:
        """Rank index the side's king and rooks start on."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    # Values index the letter and glyph tables in chessrules.core.piece.
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Four independent castling permissions; play only ever clears bits."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class StatusKind(IntEnum):
    """Classification of a position, see :class:`~chessrules.core.rules.GameStatus`."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
    DRAW_FIFTY_MOVE = 4
    DRAW_THREEFOLD = 5
    DRAW_INSUFFICIENT_MATERIAL = 6


class MoveKind(IntEnum):
    """Caller-facing feedback category for an accepted move."""

    NORMAL = 0
    CAPTURE = 1
    CASTLING = 2
    EN_PASSANT = 3
    PROMOTION = 4
