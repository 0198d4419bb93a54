"""Static evaluation of a board: material ratio of the two sides."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.engine.search import ScoringMode

if TYPE_CHECKING:
    from checkie.core.board import Board

WIN_SCORE = math.inf
LOSS_SCORE = 0.0

_KING_WEIGHTS: dict[ScoringMode, int] = {
    ScoringMode.NUMBER: 4,
    ScoringMode.NUMBER_AND_POTENTIAL: 5,
}
_ADVANCE_BONUS = 0.05


class Evaluator:
    """Scores a board from the maximizing side's point of view.

    The score is ``own / opponent`` material, so higher is better; it is
    :data:`WIN_SCORE` once the opponent has no pieces and :data:`LOSS_SCORE`
    once the maximizing side has none.  In
    :attr:`ScoringMode.NUMBER_AND_POTENTIAL` men also earn a bonus for every
    row they have advanced and kings weigh more.
    """

    __slots__ = ("_mode", "_king_weight")

    def __init__(self, mode: ScoringMode = ScoringMode.NUMBER) -> None:
        self._mode = mode
        self._king_weight = _KING_WEIGHTS[mode]

    @property
    def mode(self) -> ScoringMode:
        return self._mode

    def score(self, board: Board, maximizing: Color) -> float:
        men = [0.0, 0.0]
        kings = [0.0, 0.0]
        with_potential = self._mode == ScoringMode.NUMBER_AND_POTENTIAL

        for x, _, cell in board.occupied():
            side = int(cell.color)
            if cell.is_king:
                kings[side] += 1
                continue
            men[side] += 1
            if with_potential:
                advanced = 7 - x if side == Color.WHITE else x
                men[side] += _ADVANCE_BONUS * advanced

        own = int(maximizing)
        opp = 1 - own
        if men[opp] + kings[opp] == 0:
            return WIN_SCORE
        if men[own] + kings[own] == 0:
            return LOSS_SCORE

        weight = self._king_weight
        return (men[own] + kings[own] * weight) / (men[opp] + kings[opp] * weight)
