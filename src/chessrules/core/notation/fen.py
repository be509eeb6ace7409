"""FEN parsing and serialization."""

from __future__ import annotations

from chessrules.core.attacks import is_in_check
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import (
    Square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from chessrules.errors import MalformedEncoding

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# right -> (king home, rook corner, color)
_CASTLING_HOMES: dict[CastlingRights, tuple[Square, Square, Color]] = {
    CastlingRights.WHITE_KINGSIDE: (make_square(4, 0), make_square(7, 0), Color.WHITE),
    CastlingRights.WHITE_QUEENSIDE: (make_square(4, 0), make_square(0, 0), Color.WHITE),
    CastlingRights.BLACK_KINGSIDE: (make_square(4, 7), make_square(7, 7), Color.BLACK),
    CastlingRights.BLACK_QUEENSIDE: (make_square(4, 7), make_square(0, 7), Color.BLACK),
}


def _parse_board(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise MalformedEncoding(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                file += int(ch)
            elif ch.isdigit():
                raise MalformedEncoding(f"Invalid FEN digit {ch!r}: {fen!r}")
            else:
                if file >= 8:
                    raise MalformedEncoding(f"Invalid FEN rank width: {fen!r}")
                try:
                    piece = Piece.from_char(ch)
                except ValueError as exc:
                    raise MalformedEncoding(f"{exc}: {fen!r}") from exc
                if piece.piece_type == PieceType.PAWN and rank in (0, 7):
                    raise MalformedEncoding(f"Invalid FEN pawn on back rank: {fen!r}")
                board[make_square(file, rank)] = piece
                file += 1
            if file > 8:
                raise MalformedEncoding(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise MalformedEncoding(f"Invalid FEN rank width: {fen!r}")

    if board.king_counts() != (1, 1):
        raise MalformedEncoding(
            f"Invalid FEN (need exactly one king per side): {fen!r}"
        )
    return board


def _parse_castling(field: str, board: Board) -> CastlingRights:
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    seen: set[str] = set()
    for ch in field:
        right = _CASTLING_CHARS.get(ch)
        if right is None or ch in seen:
            raise MalformedEncoding(f"Invalid FEN castling field: {field!r}")
        seen.add(ch)
        king_sq, rook_sq, color = _CASTLING_HOMES[right]
        if board[king_sq] != Piece(color, PieceType.KING) or board[rook_sq] != Piece(
            color, PieceType.ROOK
        ):
            raise MalformedEncoding(
                f"Invalid FEN castling right {ch!r} without king and rook at home"
            )
        castling |= right
    return castling


def _parse_en_passant(field: str, side: Color, board: Board) -> Square | None:
    if field == "-":
        return None
    try:
        ep = parse_square(field)
    except ValueError as exc:
        raise MalformedEncoding(f"Invalid FEN en-passant square: {field!r}") from exc
    expected_rank = 5 if side == Color.WHITE else 2
    if rank_of(ep) != expected_rank:
        raise MalformedEncoding(
            f"Invalid FEN en-passant square for side-to-move: {field!r}"
        )
    # The pawn that just advanced two squares stands one rank past the target.
    pawn_sq = ep - side.pawn_step
    if not board.is_empty(ep) or board[pawn_sq] != Piece(side.opposite, PieceType.PAWN):
        raise MalformedEncoding(f"Invalid FEN en-passant square: {field!r}")
    return ep


def _parse_counter(field: str, name: str, minimum: int) -> int:
    if not (field.isascii() and field.isdigit()):
        raise MalformedEncoding(f"Invalid FEN {name}: {field!r}")
    value = int(field)
    if value < minimum:
        raise MalformedEncoding(f"Invalid FEN {name}: {field!r}")
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a 6-field FEN string into a fresh :class:`Position`.

    Raises :class:`~chessrules.errors.MalformedEncoding` on any defect; no
    partially built position escapes.
    """
    parts = fen.split()
    if len(parts) != 6:
        raise MalformedEncoding(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    # 1. Piece placement
    board = _parse_board(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise MalformedEncoding(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = _parse_castling(castling_part, board)

    # 4. En passant
    ep = _parse_en_passant(ep_part, side, board)

    # 5–6. Clocks
    halfmove = _parse_counter(half_part, "halfmove clock", 0)
    fullmove = _parse_counter(full_part, "fullmove number", 1)

    pos = Position(board, side, castling, ep, halfmove, fullmove)
    if is_in_check(pos, side.opposite):
        raise MalformedEncoding(
            f"Invalid FEN (side not to move is in check): {fen!r}"
        )
    return pos


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    board_str = pos.board.placement()

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )


def board_signature(pos: Position) -> str:
    """Board-only (placement) part of the encoding, used for repetition."""
    return pos.board.placement()
