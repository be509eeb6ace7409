"""Tests for Board and square helpers."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1,
    C1,
    D1,
    E1,
    E2,
    E4,
    E8,
    H1,
    H8,
    is_light_square,
    make_square,
    offset_square,
    parse_square,
    square_name,
)


class TestSquares:
    def test_parse_and_name_roundtrip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    def test_named_constants(self) -> None:
        assert parse_square("e4") == E4 == 28
        assert square_name(H8) == "h8"

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_invalid_square_name_raises(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    @pytest.mark.parametrize("file, rank", [(-1, 0), (8, 0), (0, -1), (0, 8)])
    def test_make_square_bounds(self, file: int, rank: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            make_square(file, rank)

    def test_offset_square_off_board(self) -> None:
        assert offset_square(H1, 1, 0) is None
        assert offset_square(A1, 0, -1) is None
        assert offset_square(A1, 1, 1) == parse_square("b2")

    def test_square_colors(self) -> None:
        assert not is_light_square(A1)
        assert is_light_square(H1)
        assert is_light_square(D1)
        assert not is_light_square(C1)


class TestBoardInitial:
    @pytest.mark.parametrize(
        "file, piece_type",
        list(
            enumerate(
                [
                    PieceType.ROOK,
                    PieceType.KNIGHT,
                    PieceType.BISHOP,
                    PieceType.QUEEN,
                    PieceType.KING,
                    PieceType.BISHOP,
                    PieceType.KNIGHT,
                    PieceType.ROOK,
                ]
            )
        ),
    )
    def test_back_ranks_mirror(self, file: int, piece_type: PieceType) -> None:
        board = Board.initial()
        assert board[make_square(file, 0)] == Piece(Color.WHITE, piece_type)
        assert board[make_square(file, 7)] == Piece(Color.BLACK, piece_type)

    def test_kings_cached(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        assert board.squares_of(Color.WHITE, PieceType.PAWN) == list(range(8, 16))
        assert board.squares_of(Color.BLACK, PieceType.PAWN) == list(range(48, 56))

    def test_middle_is_empty(self) -> None:
        board = Board.initial()
        assert all(board.is_empty(sq) for sq in range(16, 48))
        assert len(list(board)) == 32

    def test_placement(self) -> None:
        placement = Board.initial().placement()
        assert placement == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_out_of_range_index(self) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[64]
        with pytest.raises(IndexError):
            board[-1] = None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board.king_square(Color.WHITE) == E1

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_cache_follows_moves(self) -> None:
        board = Board.initial()
        board[E1] = None
        assert board.find_king(Color.WHITE) is None
        board[E4] = Piece(Color.WHITE, PieceType.KING)
        assert board.king_square(Color.WHITE) == E4

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16
        assert board.count(Color.BLACK, PieceType.KNIGHT) == 2
        assert board.king_counts() == (1, 1)

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(board[sq] is None for sq in range(64))
        assert board.king_counts() == (0, 0)

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestPiece:
    def test_fen_char_roundtrip(self) -> None:
        for ch in "PNBRQKpnbrqk":
            assert str(Piece.from_char(ch)) == ch

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_pawn_geometry(self) -> None:
        assert Color.WHITE.pawn_step == 8
        assert Color.BLACK.pawn_step == -8
        assert Color.WHITE.back_rank == 0
        assert Color.BLACK.back_rank == 7
        assert str(Color.BLACK) == "black"
