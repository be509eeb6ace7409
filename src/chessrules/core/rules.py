"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from chessrules.core.attacks import is_in_check
from chessrules.core.enums import Color, PieceType, StatusKind
from chessrules.core.legality import has_legal_move
from chessrules.core.types import is_light_square

if TYPE_CHECKING:
    from chessrules.core.position import Position

FIFTY_MOVE_HALFMOVES: Final = 100  # 100 half-moves = 50 full moves
REPETITION_THRESHOLD: Final = 3

_TERMINAL: Final = frozenset(
    {
        StatusKind.CHECKMATE,
        StatusKind.STALEMATE,
        StatusKind.DRAW_FIFTY_MOVE,
        StatusKind.DRAW_THREEFOLD,
        StatusKind.DRAW_INSUFFICIENT_MATERIAL,
    }
)
_MINORS: Final = (PieceType.KNIGHT, PieceType.BISHOP)
_MATING_MATERIAL: Final = (PieceType.PAWN, PieceType.ROOK, PieceType.QUEEN)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Derived classification of a position.

    ``side`` is the side to move for ``IN_PROGRESS``/``CHECK``, the winner for
    ``CHECKMATE`` and ``None`` for stalemate and the rule-based draws.
    """

    kind: StatusKind
    side: Color | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind in _TERMINAL

    @property
    def is_draw(self) -> bool:
        return self.is_terminal and self.kind != StatusKind.CHECKMATE

    @property
    def winner(self) -> Color | None:
        return self.side if self.kind == StatusKind.CHECKMATE else None

    def __str__(self) -> str:
        name = self.kind.name.lower().replace("_", "-")
        return f"{name}({self.side})" if self.side is not None else name


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Classification is a pure function of the position and its signature
    history; nothing is cached between calls.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not has_legal_move(position)

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+minor vs K, K+B vs K+B (same-colour bishops).

        A deliberate approximation: other dead positions (e.g. K+N+N vs K or
        blocked pawn walls) are not recognised.
        """
        minors: dict[Color, list[tuple[PieceType, bool]]] = {
            Color.WHITE: [],
            Color.BLACK: [],
        }
        for sq, piece in position.board:
            if piece.piece_type in _MATING_MATERIAL:
                return False
            if piece.piece_type in _MINORS:
                minors[piece.color].append((piece.piece_type, is_light_square(sq)))

        white, black = minors[Color.WHITE], minors[Color.BLACK]

        # K vs K, K+minor vs K
        if len(white) + len(black) <= 1:
            return True

        # K+B vs K+B with same-colour bishops
        if len(white) == 1 and len(black) == 1:
            (w_type, w_light), (b_type, b_light) = white[0], black[0]
            return (
                w_type == PieceType.BISHOP
                and b_type == PieceType.BISHOP
                and w_light == b_light
            )
        return False

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_HALFMOVES

    @staticmethod
    def is_threefold_repetition(position: Position) -> bool:
        return position.repetition_count() >= REPETITION_THRESHOLD

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Determine the current game status."""
        side = position.side_to_move
        in_check = Rules.is_in_check(position)

        if not has_legal_move(position):
            if in_check:
                return GameStatus(StatusKind.CHECKMATE, side.opposite)
            return GameStatus(StatusKind.STALEMATE)

        if Rules.is_fifty_move_rule(position):
            return GameStatus(StatusKind.DRAW_FIFTY_MOVE)
        if Rules.is_threefold_repetition(position):
            return GameStatus(StatusKind.DRAW_THREEFOLD)
        if Rules.is_insufficient_material(position):
            return GameStatus(StatusKind.DRAW_INSUFFICIENT_MATERIAL)

        if in_check:
            return GameStatus(StatusKind.CHECK, side)
        return GameStatus(StatusKind.IN_PROGRESS, side)
