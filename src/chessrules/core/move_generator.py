"""Pseudo-legal move generation.

Moves produced here obey piece movement and turn ownership but may still
leave the mover's king attacked; :mod:`chessrules.core.legality` filters them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
)
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.types import Square, file_of, make_square, rank_of, square_name
from chessrules.errors import InvariantViolation

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.position import Position

_LOGGER = logging.getLogger(__name__)

_EMPTY, _FRIENDLY, _ENEMY = 0, 1, 2

# color -> (kingside right, queenside right)
_CASTLING_FLAGS: dict[Color, tuple[CastlingRights, CastlingRights]] = {
    Color.WHITE: (CastlingRights.WHITE_KINGSIDE, CastlingRights.WHITE_QUEENSIDE),
    Color.BLACK: (CastlingRights.BLACK_KINGSIDE, CastlingRights.BLACK_QUEENSIDE),
}


def _occupant(board: Board, to_sq: Square, color: Color) -> int:
    """Classify the occupant of a destination square for *color*'s move.

    Every generator inspects destinations through here, so this is the one
    place that refuses an enemy king as a capture target.
    """
    target = board[to_sq]
    if target is None:
        return _EMPTY
    if target.color == color:
        return _FRIENDLY
    if target.is_king:
        _LOGGER.error(
            "%s can capture the enemy king on %s:\n%r",
            color,
            square_name(to_sq),
            board,
        )
        raise InvariantViolation(
            f"Enemy king on {square_name(to_sq)} is capturable by {color}"
        )
    return _ENEMY


class MoveGenerator:
    """Generates pseudo-legal moves for one color of a :class:`Position`.

    The position is only read, never mutated. Generating for the color not on
    move while it gives check raises :class:`InvariantViolation`, since the
    checked king would be a capture target.
    """

    __slots__ = ("_pos", "_board", "_color", "_en_passant")

    def __init__(self, position: Position, color: Color | None = None) -> None:
        self._pos = position
        self._board = position.board
        self._color = position.side_to_move if color is None else color
        # The target belongs to the side to move; the other color never sees it.
        self._en_passant = (
            position.en_passant if self._color == position.side_to_move else None
        )

    # -- Public API ---------------------------------------------------------

    def generate(self) -> list[Move]:
        """All pseudo-legal moves for the generator's color."""
        moves: list[Move] = []
        color = self._color
        for sq, piece in self._board:
            if piece.color != color:
                continue
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(sq, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_steps(sq, KNIGHT_TARGETS[sq], moves)
            elif ptype == PieceType.BISHOP:
                self._gen_sliding(sq, BISHOP_RAYS[sq], moves)
            elif ptype == PieceType.ROOK:
                self._gen_sliding(sq, ROOK_RAYS[sq], moves)
            elif ptype == PieceType.QUEEN:
                self._gen_sliding(sq, QUEEN_RAYS[sq], moves)
            else:
                self._gen_steps(sq, KING_TARGETS[sq], moves)
                self._gen_castling(sq, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, moves: list[Move]) -> None:
        board = self._board
        color = self._color
        forward = color.pawn_step
        start_rank = color.back_rank + forward // 8
        last_rank = color.opposite.back_rank
        file_idx = file_of(sq)

        # Pushes never capture, so any occupant (even a king) just blocks.
        one_step = sq + forward
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, last_rank, moves)
            two_step = one_step + forward
            if rank_of(sq) == start_rank and board.is_empty(two_step):
                moves.append(Move(sq, two_step))

        for side in (-1, 1):
            if not 0 <= file_idx + side < 8:
                continue
            cap_sq = one_step + side
            occupant = _occupant(board, cap_sq, color)
            if occupant == _ENEMY:
                self._add_pawn_move(sq, cap_sq, last_rank, moves, capture=True)
            elif occupant == _EMPTY and cap_sq == self._en_passant:
                moves.append(Move(sq, cap_sq, is_capture=True, is_en_passant=True))

    @staticmethod
    def _add_pawn_move(
        sq: Square,
        to_sq: Square,
        last_rank: int,
        moves: list[Move],
        *,
        capture: bool = False,
    ) -> None:
        if rank_of(to_sq) == last_rank:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, to_sq, pt, is_capture=capture))
        else:
            moves.append(Move(sq, to_sq, is_capture=capture))

    def _gen_steps(
        self, sq: Square, targets: tuple[Square, ...], moves: list[Move]
    ) -> None:
        board = self._board
        color = self._color
        for to_sq in targets:
            occupant = _occupant(board, to_sq, color)
            if occupant != _FRIENDLY:
                moves.append(Move(sq, to_sq, is_capture=occupant == _ENEMY))

    def _gen_sliding(
        self,
        sq: Square,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        color = self._color
        for ray in rays:
            for to_sq in ray:
                occupant = _occupant(board, to_sq, color)
                if occupant == _EMPTY:
                    moves.append(Move(sq, to_sq))
                    continue
                if occupant == _ENEMY:
                    moves.append(Move(sq, to_sq, is_capture=True))
                break

    def _gen_castling(self, king_sq: Square, moves: list[Move]) -> None:
        color = self._color
        home = make_square(4, color.back_rank)
        kingside, queenside = _CASTLING_FLAGS[color]
        if king_sq != home or not self._pos.castling & (kingside | queenside):
            return
        if is_in_check(self._pos, color):
            return

        board = self._board
        opponent = color.opposite
        # (right, squares that must be empty, square the king passes, destination)
        wings = (
            (kingside, (home + 1, home + 2), home + 1, home + 2),
            (queenside, (home - 1, home - 2, home - 3), home - 1, home - 2),
        )
        for right, between, transit, dest in wings:
            if not self._pos.castling & right:
                continue
            if not all(board.is_empty(s) for s in between):
                continue
            if is_square_attacked(board, transit, opponent):
                continue
            # Destination safety is left to the legality filter.
            moves.append(Move(king_sq, dest, is_castle=True))


def pseudo_legal_moves(position: Position, color: Color | None = None) -> list[Move]:
    """All pseudo-legal moves for *color* (default: side to move)."""
    return MoveGenerator(position, color).generate()
