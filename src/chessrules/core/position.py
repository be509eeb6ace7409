"""Position: complete game state (board + metadata + history)."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.repetition import RepetitionTracker
from chessrules.core.types import Square, file_of, make_square, rank_of, square_name
from chessrules.errors import InvariantViolation

_LOGGER = logging.getLogger(__name__)


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    :meth:`play_unchecked` applies a move with no legality test and touches
    only the board state; it is the primitive used for copy-and-simulate
    legality checks. :meth:`commit` additionally appends to the move,
    encoding and signature histories and is only reached through
    :func:`chessrules.engine.apply_move`.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_move_history",
        "_encoding_history",
        "_repetitions",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._move_history: list[Move] = []
        self._encoding_history: list[str] = [self.encode()]
        self._repetitions = RepetitionTracker([self.signature])

    # ── History ──────────────────────────────────────────────────────────

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._move_history)

    @property
    def encoding_history(self) -> tuple[str, ...]:
        """Full FEN of the initial position and of every position reached."""
        return tuple(self._encoding_history)

    @property
    def repetitions(self) -> RepetitionTracker:
        return self._repetitions

    @property
    def signature(self) -> str:
        """Board-only signature of the current placement."""
        return self.board.placement()

    def repetition_count(self) -> int:
        """How many times the current placement occurred in game history."""
        return self._repetitions.count(self.signature)

    def encode(self) -> str:
        from chessrules.core.notation.fen import position_to_fen

        return position_to_fen(self)

    # ── Move application ─────────────────────────────────────────────────

    def play_unchecked(self, move: Move) -> Piece | None:
        """Apply *move* to the board state without any legality test.

        Returns the captured piece, if any. History is left untouched. Every
        two-square pawn advance sets the en-passant target, whether or not an
        enemy pawn stands beside it; only an adjacent pawn can ever use it.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(move.from_sq)}")

        capture_sq = move.to_sq
        if move.is_en_passant:
            capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
        captured = board[capture_sq]
        if captured is not None and captured.is_king:
            _LOGGER.error(
                "Move %s would capture the %s king", move.uci, captured.color
            )
            raise InvariantViolation(f"Move {move.uci} captures a king")

        board[move.from_sq] = None
        if capture_sq != move.to_sq:
            board[capture_sq] = None

        placed = piece
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        board[move.to_sq] = placed

        if move.is_castle:
            rank = rank_of(move.from_sq)
            if move.is_kingside_castle:
                rook_from, rook_to = make_square(7, rank), make_square(5, rank)
            else:
                rook_from, rook_to = make_square(0, rank), make_square(3, rank)
            rook = board[rook_from]
            if rook is None or rook.piece_type != PieceType.ROOK:
                raise InvariantViolation(
                    f"Castling move {move.uci} has no rook on {square_name(rook_from)}"
                )
            board[rook_to] = rook
            board[rook_from] = None

        # The target is cleared on every move and set only by a double push.
        self.en_passant = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(rank_of(move.to_sq) - rank_of(move.from_sq)) == 2
        ):
            self.en_passant = make_square(
                file_of(move.from_sq),
                (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
            )

        self._update_castling(move, piece)

        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        return captured

    def commit(self, move: Move) -> None:
        """Play *move* and append it to every history record."""
        self.play_unchecked(move)
        self._move_history.append(move)
        self._encoding_history.append(self.encode())
        self._repetitions.record(self.signature)

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
        make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
        make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        # Rights are only ever removed here.
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.for_color(piece.color)

        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                castling &= ~self._ROOK_CORNERS[sq]
        self.castling = castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self, *, with_history: bool = False) -> Position:
        """Independent copy; histories are carried over only on request."""
        pos = Position.__new__(Position)
        pos.board = self.board.copy()
        pos.side_to_move = self.side_to_move
        pos.castling = self.castling
        pos.en_passant = self.en_passant
        pos.halfmove_clock = self.halfmove_clock
        pos.fullmove_number = self.fullmove_number
        if with_history:
            pos._move_history = self._move_history.copy()
            pos._encoding_history = self._encoding_history.copy()
            pos._repetitions = self._repetitions.copy()
        else:
            pos._move_history = []
            pos._encoding_history = []
            pos._repetitions = RepetitionTracker()
        return pos

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def __repr__(self) -> str:
        return f"Position({self.encode()!r})"
