"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Indexed by PieceType value; slot 0 is unused.
_FEN_LETTERS = " pnbrqk"
_GLYPHS: dict[Color, str] = {
    Color.WHITE: " ♙♘♗♖♕♔",
    Color.BLACK: " ♟♞♝♜♛♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A (color, kind) pair. Prints as its FEN letter, upper case for white."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _FEN_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of ``str(piece)``: ``'N'`` is a white knight, ``'n'`` a black one."""
        index = _FEN_LETTERS.find(char.lower()) if len(char) == 1 else -1
        if index <= 0:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(index))

    @property
    def symbol(self) -> str:
        return _GLYPHS[self.color][self.piece_type]

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING
