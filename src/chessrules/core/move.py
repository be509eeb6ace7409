"""Move value object.

A :class:`Move` is produced by the engine and carries derived flags. Only
``from_sq``, ``to_sq`` and ``promotion`` take part in equality, so a bare
request such as ``Move(E2, E4)`` compares equal to the annotated legal move.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_capture: bool = field(default=False, compare=False)
    is_en_passant: bool = field(default=False, compare=False)
    is_castle: bool = field(default=False, compare=False)
    is_check: bool = field(default=False, compare=False)
    is_checkmate: bool = field(default=False, compare=False)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.uci

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation, e.g. ``e7e8q``."""
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def is_kingside_castle(self) -> bool:
        return self.is_castle and self.to_sq > self.from_sq

    def with_result(self, *, is_check: bool, is_checkmate: bool) -> Move:
        """Copy carrying the check/checkmate outcome of playing this move."""
        return replace(self, is_check=is_check, is_checkmate=is_checkmate)


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
