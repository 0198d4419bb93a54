"""Expansion of elementary moves into complete turns."""

from __future__ import annotations

from collections import deque
from random import Random
from typing import TYPE_CHECKING

from checkie.core.move import Turn
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color


class TurnSequencer:
    """Builds every legal :class:`Turn` for one side on a given board.

    Capture chains are expanded breadth-first from each initial capture until
    the capturing piece has nothing left to take, so every emitted chain is
    maximal.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def turns_for_side(self, color: Color, rng: Random | None = None) -> list[Turn]:
        board = self._board
        moves, has_capture = MoveGenerator(board).moves_for_side(color, rng)

        if not has_capture:
            return [Turn((move,), board.apply(move)) for move in moves]

        turns: list[Turn] = []
        for move in moves:
            pending: deque[Turn] = deque([Turn((move,), board.apply(move))])
            while pending:
                partial = pending.popleft()
                end_x, end_y = partial.last.end
                further, can_capture = MoveGenerator(partial.board).moves_for_piece(
                    end_x, end_y
                )
                if not can_capture:
                    turns.append(partial)
                    continue
                for next_move in further:
                    pending.append(partial.extended(next_move))
        return turns
