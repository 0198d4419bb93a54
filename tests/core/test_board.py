"""Tests for Board and Cell."""

import pytest

from checkie.core.board import Board, IllegalMoveError
from checkie.core.enums import Color, PieceType
from checkie.core.move import Move
from checkie.core.piece import Cell


class TestCell:
    def test_color_from_parity(self) -> None:
        assert Cell.WHITE_MAN.color == Color.WHITE
        assert Cell.WHITE_KING.color == Color.WHITE
        assert Cell.BLACK_MAN.color == Color.BLACK
        assert Cell.BLACK_KING.color == Color.BLACK
        assert Cell.EMPTY.color is None

    def test_king_bit(self) -> None:
        assert not Cell.WHITE_MAN.is_king
        assert not Cell.BLACK_MAN.is_king
        assert Cell.WHITE_KING.is_king
        assert Cell.BLACK_KING.is_king

    def test_of(self) -> None:
        assert Cell.of(Color.WHITE) == Cell.WHITE_MAN
        assert Cell.of(Color.BLACK, PieceType.KING) == Cell.BLACK_KING

    def test_promoted(self) -> None:
        assert Cell.WHITE_MAN.promoted() == Cell.WHITE_KING
        assert Cell.BLACK_MAN.promoted() == Cell.BLACK_KING
        assert Cell.BLACK_KING.promoted() == Cell.BLACK_KING

    def test_promote_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            Cell.EMPTY.promoted()

    def test_opponents(self) -> None:
        assert Cell.WHITE_MAN.is_opponent_of(Cell.BLACK_KING)
        assert Cell.BLACK_MAN.is_opponent_of(Cell.WHITE_KING)
        assert not Cell.WHITE_MAN.is_opponent_of(Cell.WHITE_KING)
        assert not Cell.WHITE_MAN.is_opponent_of(Cell.EMPTY)

    def test_char_codec(self) -> None:
        assert Cell.from_char("W") == Cell.WHITE_KING
        assert str(Cell.BLACK_MAN) == "b"

    def test_symbols_distinct(self) -> None:
        assert len({cell.symbol for cell in Cell}) == len(Cell)
        assert Cell.WHITE_KING.piece_type == PieceType.KING
        assert Cell.EMPTY.piece_type is None

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Cell.from_char("k")


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite is Color.BLACK
        assert Color.BLACK.opposite is Color.WHITE

    def test_direction_and_promotion_row(self) -> None:
        assert Color.WHITE.forward == -1
        assert Color.WHITE.promotion_row == 0
        assert Color.BLACK.forward == 1
        assert Color.BLACK.promotion_row == 7

    def test_str(self) -> None:
        assert str(Color.BLACK) == "black"


class TestBoardInitial:
    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert board.count(Color.WHITE) == 12
        assert board.count(Color.BLACK) == 12
        assert board.count(Color.WHITE, PieceType.KING) == 0

    def test_black_on_top_rows(self) -> None:
        board = Board.initial()
        assert all(x < 3 for x, _ in board.pieces(Color.BLACK))

    def test_white_on_bottom_rows(self) -> None:
        board = Board.initial()
        assert all(x > 4 for x, _ in board.pieces(Color.WHITE))

    def test_only_dark_cells(self) -> None:
        board = Board.initial()
        assert all((x + y) % 2 == 1 for x, y, _ in board.occupied())

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for x in (3, 4):
            for y in range(8):
                assert board.is_empty(x, y)


class TestBoardApply:
    def test_quiet_step(self) -> None:
        board = Board()
        board[5, 2] = Cell.WHITE_MAN
        after = board.apply(Move(5, 2, 4, 3))
        assert after[4, 3] == Cell.WHITE_MAN
        assert after.is_empty(5, 2)

    def test_source_untouched(self) -> None:
        board = Board()
        board[5, 2] = Cell.WHITE_MAN
        board.apply(Move(5, 2, 4, 3))
        assert board[5, 2] == Cell.WHITE_MAN
        assert board.is_empty(4, 3)

    def test_capture_removes_piece(self) -> None:
        board = Board()
        board[5, 2] = Cell.WHITE_MAN
        board[4, 3] = Cell.BLACK_MAN
        after = board.apply(Move(5, 2, 3, 4, (4, 3)))
        assert after.is_empty(4, 3)
        assert after[3, 4] == Cell.WHITE_MAN
        assert after.count(Color.BLACK) == 0

    def test_white_promotes_on_row_0(self) -> None:
        board = Board()
        board[1, 0] = Cell.WHITE_MAN
        after = board.apply(Move(1, 0, 0, 1))
        assert after[0, 1] == Cell.WHITE_KING

    def test_black_promotes_on_row_7(self) -> None:
        board = Board()
        board[6, 1] = Cell.BLACK_MAN
        after = board.apply(Move(6, 1, 7, 2))
        assert after[7, 2] == Cell.BLACK_KING

    def test_no_promotion_elsewhere(self) -> None:
        board = Board()
        board[2, 1] = Cell.WHITE_MAN
        board[5, 2] = Cell.BLACK_MAN
        assert board.apply(Move(2, 1, 1, 2))[1, 2] == Cell.WHITE_MAN
        assert board.apply(Move(5, 2, 6, 3))[6, 3] == Cell.BLACK_MAN

    def test_white_man_on_row_7_is_not_promoted(self) -> None:
        board = Board()
        board[5, 2] = Cell.WHITE_MAN
        board[6, 3] = Cell.BLACK_MAN
        assert board.apply(Move(5, 2, 7, 4, (6, 3)))[7, 4] == Cell.WHITE_MAN

    def test_empty_source_raises(self) -> None:
        with pytest.raises(IllegalMoveError, match="empty"):
            Board().apply(Move(5, 2, 4, 3))

    def test_occupied_destination_raises(self) -> None:
        board = Board()
        board[5, 2] = Cell.WHITE_MAN
        board[4, 3] = Cell.WHITE_MAN
        with pytest.raises(IllegalMoveError, match="not empty"):
            board.apply(Move(5, 2, 4, 3))

    def test_capturing_own_piece_raises(self) -> None:
        board = Board()
        board[5, 2] = Cell.WHITE_MAN
        board[4, 3] = Cell.WHITE_MAN
        with pytest.raises(IllegalMoveError):
            board.apply(Move(5, 2, 3, 4, (4, 3)))

    def test_off_board_raises(self) -> None:
        board = Board()
        board[5, 0] = Cell.WHITE_MAN
        with pytest.raises(IllegalMoveError):
            board.apply(Move(5, 0, 4, -1))

    def test_illegal_move_error_is_value_error(self) -> None:
        assert issubclass(IllegalMoveError, ValueError)


class TestBoardCopyEquality:
    def test_copy_is_equal(self) -> None:
        board = Board.initial()
        assert board.copy() == board

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[5, 0] = Cell.EMPTY
        assert board[5, 0] == Cell.WHITE_MAN
        assert clone != board

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()

    def test_setitem_out_of_bounds(self) -> None:
        with pytest.raises(IndexError):
            Board()[8, 0] = Cell.WHITE_MAN

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (8, 1), (2, 8)])
    def test_getitem_out_of_bounds(self, coord: tuple[int, int]) -> None:
        board = Board.initial()
        with pytest.raises(IndexError):
            board[coord]
        with pytest.raises(IndexError):
            board.is_empty(*coord)

    def test_repr_has_files(self) -> None:
        assert "a b c d e f g h" in repr(Board.initial())
