"""Tests for attack detection."""

import pytest

from chessrules.core.attacks import (
    attacked_by_king,
    attacked_by_knight,
    attacked_by_pawn,
    attacked_by_slider,
    attackers_of,
    is_in_check,
    is_square_attacked,
)
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.notation.fen import position_from_fen
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import (
    A1, A8, B2, D2, D3, D4, D5, E1, E2, E4, E5, E8, F3, F5, G1, G2, H1, H8,
)
from chessrules.errors import InvariantViolation


def _board(*placed: tuple[int, str]) -> Board:
    board = Board()
    for sq, ch in placed:
        board[sq] = Piece.from_char(ch)
    return board


class TestPatterns:
    def test_pawn_attacks_forward_diagonals_only(self) -> None:
        board = _board((E4, "P"), (E5, "p"))
        assert attacked_by_pawn(board, D5, Color.WHITE)
        assert attacked_by_pawn(board, F5, Color.WHITE)
        assert not attacked_by_pawn(board, D3, Color.WHITE)
        assert attacked_by_pawn(board, D4, Color.BLACK)
        assert not attacked_by_pawn(board, E4, Color.WHITE)

    def test_knight(self) -> None:
        board = Board.initial()
        assert attacked_by_knight(board, F3, Color.WHITE)
        assert not attacked_by_knight(board, E4, Color.WHITE)

    def test_king_attacks_occupied_neighbours(self) -> None:
        board = Board.initial()
        assert attacked_by_king(board, D2, Color.WHITE)
        assert not attacked_by_king(board, D3, Color.WHITE)

    def test_rook_line_stops_at_blocker(self) -> None:
        board = _board((A1, "R"), (E1, "K"))
        assert attacked_by_slider(board, A8, Color.WHITE)
        assert not is_square_attacked(board, H1, Color.WHITE)

    def test_rook_does_not_attack_diagonally(self) -> None:
        board = _board((A1, "R"))
        assert not attacked_by_slider(board, B2, Color.WHITE)

    def test_bishop_and_queen_diagonals(self) -> None:
        board = _board((A1, "B"), (H1, "q"))
        assert attacked_by_slider(board, H8, Color.WHITE)
        assert attacked_by_slider(board, A8, Color.BLACK)
        assert attacked_by_slider(board, A1, Color.BLACK)


class TestSquareAttacked:
    def test_starting_position(self) -> None:
        board = Board.initial()
        assert is_square_attacked(board, F3, Color.WHITE)
        assert not is_square_attacked(board, E4, Color.WHITE)
        assert not is_square_attacked(board, E4, Color.BLACK)

    def test_attackers_of(self) -> None:
        board = Board.initial()
        assert attackers_of(board, F3, Color.WHITE) == [G1, E2, G2]
        assert attackers_of(board, E4, Color.WHITE) == []


class TestCheck:
    def test_start_not_in_check(self) -> None:
        pos = Position()
        assert not is_in_check(pos, Color.WHITE)
        assert not is_in_check(pos, Color.BLACK)

    @pytest.mark.parametrize(
        "fen, checked",
        [
            ("4k3/8/8/8/8/8/8/4K2R b K - 0 1", False),
            ("4k3/8/8/8/8/8/8/R3K3 b Q - 0 1", False),
            ("4k3/8/8/1B6/8/8/8/4K3 b - - 0 1", True),
            ("4k3/8/3N4/8/8/8/8/4K3 b - - 0 1", True),
            ("4k3/3P4/8/8/8/8/8/4K3 b - - 0 1", True),
        ],
    )
    def test_check_patterns(self, fen: str, checked: bool) -> None:
        pos = position_from_fen(fen)
        assert is_in_check(pos, Color.BLACK) is checked

    def test_missing_king_is_invariant_violation(self) -> None:
        board = _board((E1, "K"))
        pos = Position(board, Color.WHITE)
        with pytest.raises(InvariantViolation):
            is_in_check(pos, Color.BLACK)

    def test_queen_gives_check_along_file(self) -> None:
        board = _board((E1, "K"), (E8, "k"), (E4, "Q"))
        pos = Position(board, Color.BLACK)
        assert is_in_check(pos, Color.BLACK)
        assert board[E4] == Piece(Color.WHITE, PieceType.QUEEN)
