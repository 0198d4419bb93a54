"""Core domain layer: pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Color, Rules

    board = Board.initial()
    for turn in Rules.legal_turns(board, Color.WHITE):
        print(turn)
"""

from checkie.core.board import Board, IllegalMoveError
from checkie.core.enums import Color, GameResult, PieceType
from checkie.core.move import Move, Turn
from checkie.core.move_generator import MoveGenerator, MoveList
from checkie.core.notation import (
    STARTING_BOARD,
    board_from_text,
    board_to_text,
    move_to_text,
    parse_move,
    turn_to_text,
)
from checkie.core.piece import Cell
from checkie.core.rules import Rules
from checkie.core.turns import TurnSequencer
from checkie.core.types import Coord, coord_name, in_bounds, parse_coord

__all__ = [
    # Enums
    "Cell",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Coord",
    "coord_name",
    "in_bounds",
    "parse_coord",
    # Domain objects
    "Board",
    "IllegalMoveError",
    "Move",
    "MoveGenerator",
    "MoveList",
    "Rules",
    "Turn",
    "TurnSequencer",
    # Notation
    "STARTING_BOARD",
    "board_from_text",
    "board_to_text",
    "move_to_text",
    "parse_move",
    "turn_to_text",
]
