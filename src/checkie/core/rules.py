"""High-level checkers rules: legal turn queries and game end detection."""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING

from checkie.core.enums import Color, GameResult
from checkie.core.move_generator import MoveGenerator, MoveList
from checkie.core.turns import TurnSequencer

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move, Turn


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def legal_turns(board: Board, color: Color, rng: Random | None = None) -> list[Turn]:
        """Every complete legal turn for *color*."""
        return TurnSequencer(board).turns_for_side(color, rng)

    @staticmethod
    def legal_moves(board: Board, color: Color) -> MoveList:
        """First elementary steps of *color*'s legal turns."""
        return MoveGenerator(board).moves_for_side(color)

    @staticmethod
    def legal_moves_from(board: Board, x: int, y: int) -> list[Move]:
        """First steps available to the piece on ``(x, y)``.

        Side-level capture priority applies: a piece with only quiet moves
        gets nothing while another piece of its color can capture.
        """
        color = board[x, y].color
        if color is None:
            return []
        moves, _ = MoveGenerator(board).moves_for_side(color)
        return [m for m in moves if m.x == x and m.y == y]

    @staticmethod
    def continuation_moves(board: Board, x: int, y: int) -> list[Move]:
        """Further captures for a piece that has just captured on ``(x, y)``."""
        if board.is_empty(x, y):
            return []
        moves, has_capture = MoveGenerator(board).moves_for_piece(x, y)
        return moves if has_capture else []

    @staticmethod
    def has_legal_turn(board: Board, color: Color) -> bool:
        return bool(MoveGenerator(board).moves_for_side(color).moves)

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        turn_number: int = 0,
        max_turns: int | None = None,
    ) -> GameResult:
        """Determine the current game result.

        Reaching *max_turns* is a draw; otherwise a side without a legal turn
        (no pieces, or every piece blocked) has lost.
        """
        if max_turns is not None and turn_number >= max_turns:
            return GameResult.DRAW
        if Rules.has_legal_turn(board, side_to_move):
            return GameResult.IN_PROGRESS
        return (
            GameResult.BLACK_WINS
            if side_to_move == Color.WHITE
            else GameResult.WHITE_WINS
        )
