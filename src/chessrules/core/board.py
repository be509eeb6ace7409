"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board with a cached king square per color.

    The cache tracks the most recently placed king of each color. A board
    carrying two kings of one color is not a valid game state, and
    :meth:`king_counts` lets the notation layer reject it.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise IndexError(f"Square index out of range: {sq}")
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_square(sq):
            raise IndexError(f"Square index out of range: {sq}")
        old_piece = self._squares[sq]
        if old_piece is not None and old_piece.is_king:
            color_idx = int(old_piece.color)
            if self._king_squares[color_idx] == sq:
                self._king_squares[color_idx] = None

        self._squares[sq] = piece
        if piece is not None and piece.is_king:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in index order as ``(square, piece)`` pairs."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def squares_of(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self
            if piece.color == color and piece.piece_type == piece_type
        ]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return len(self.squares_of(color, piece_type))

    def king_counts(self) -> tuple[int, int]:
        """Number of (white, black) kings on the board."""
        return (
            self.count(Color.WHITE, PieceType.KING),
            self.count(Color.BLACK, PieceType.KING),
        )

    def find_king(self, color: Color) -> Square | None:
        return self._king_squares[int(color)]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    def placement(self) -> str:
        """Piece-placement field of FEN, rank 8 first.

        This is also the board-only signature used for repetition detection.
        """
        rows: list[str] = []
        for rank in range(7, -1, -1):
            empty = 0
            row = ""
            for file in range(8):
                piece = self._squares[rank * 8 + file]
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
