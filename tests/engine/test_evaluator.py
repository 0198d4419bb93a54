"""Tests for the material evaluator."""

import math

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.piece import Cell
from checkie.engine.evaluator import LOSS_SCORE, WIN_SCORE, Evaluator
from checkie.engine.search import ScoringMode


def _board(cells: dict[tuple[int, int], Cell]) -> Board:
    board = Board()
    for coord, cell in cells.items():
        board[coord] = cell
    return board


class TestExtremes:
    @pytest.mark.parametrize("mode", list(ScoringMode))
    def test_opponent_wiped_out(self, mode: ScoringMode) -> None:
        board = _board({(5, 2): Cell.WHITE_MAN})
        assert Evaluator(mode).score(board, Color.WHITE) == WIN_SCORE
        assert math.isinf(WIN_SCORE)

    @pytest.mark.parametrize("mode", list(ScoringMode))
    def test_own_side_wiped_out(self, mode: ScoringMode) -> None:
        board = _board({(5, 2): Cell.WHITE_MAN})
        assert Evaluator(mode).score(board, Color.BLACK) == LOSS_SCORE

    def test_initial_position_is_even(self) -> None:
        for mode in ScoringMode:
            assert Evaluator(mode).score(Board.initial(), Color.WHITE) == pytest.approx(1.0)
            assert Evaluator(mode).score(Board.initial(), Color.BLACK) == pytest.approx(1.0)


class TestNumber:
    def test_men_ratio(self) -> None:
        board = _board(
            {
                (5, 0): Cell.WHITE_MAN,
                (5, 2): Cell.WHITE_MAN,
                (2, 1): Cell.BLACK_MAN,
            }
        )
        evaluator = Evaluator()
        assert evaluator.score(board, Color.WHITE) == pytest.approx(2.0)
        assert evaluator.score(board, Color.BLACK) == pytest.approx(0.5)

    def test_king_weighs_four(self) -> None:
        board = _board({(5, 0): Cell.WHITE_KING, (2, 1): Cell.BLACK_MAN})
        assert Evaluator(ScoringMode.NUMBER).score(board, Color.WHITE) == pytest.approx(4.0)

    def test_position_does_not_matter(self) -> None:
        near = _board({(1, 0): Cell.WHITE_MAN, (6, 1): Cell.BLACK_MAN})
        far = _board({(6, 1): Cell.WHITE_MAN, (1, 0): Cell.BLACK_MAN})
        evaluator = Evaluator(ScoringMode.NUMBER)
        assert evaluator.score(near, Color.WHITE) == evaluator.score(far, Color.WHITE)


class TestNumberAndPotential:
    def test_king_weighs_five(self) -> None:
        # A black man on its home row has no advancement bonus.
        board = _board({(5, 0): Cell.WHITE_KING, (0, 1): Cell.BLACK_MAN})
        evaluator = Evaluator(ScoringMode.NUMBER_AND_POTENTIAL)
        assert evaluator.score(board, Color.WHITE) == pytest.approx(5.0)

    def test_advancement_bonus(self) -> None:
        board = _board({(1, 0): Cell.WHITE_MAN, (2, 1): Cell.BLACK_MAN})
        evaluator = Evaluator(ScoringMode.NUMBER_AND_POTENTIAL)
        assert evaluator.score(board, Color.WHITE) == pytest.approx(1.3 / 1.1)
        assert evaluator.score(board, Color.BLACK) == pytest.approx(1.1 / 1.3)

    def test_mode_property(self) -> None:
        evaluator = Evaluator(ScoringMode.NUMBER_AND_POTENTIAL)
        assert evaluator.mode is ScoringMode.NUMBER_AND_POTENTIAL
