"""Text board diagrams and move notation."""

from __future__ import annotations

from collections.abc import Iterable

from checkie.core.board import Board
from checkie.core.move import Move, Turn, format_moves
from checkie.core.piece import Cell
from checkie.core.types import BOARD_SIZE, parse_coord

STARTING_BOARD = "\n".join(
    [
        ".b.b.b.b",
        "b.b.b.b.",
        ".b.b.b.b",
        "........",
        "........",
        "w.w.w.w.",
        ".w.w.w.w",
        "w.w.w.w.",
    ]
)


def board_from_text(text: str) -> Board:
    """Parse a board diagram: eight rows of eight cell characters, row 0 first.

    ``.`` is empty, ``w``/``b`` are men and ``W``/``B`` kings.  Blank lines
    and surrounding whitespace are ignored.
    """
    rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid board text (must contain 8 rows): {text!r}")
    board = Board()
    for x, row in enumerate(rows):
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid board row width: {row!r}")
        for y, ch in enumerate(row):
            board[x, y] = Cell.from_char(ch)
    return board


def board_to_text(board: Board) -> str:
    return "\n".join(
        "".join(str(board[x, y]) for y in range(BOARD_SIZE)) for x in range(BOARD_SIZE)
    )


def move_to_text(move: Move) -> str:
    """E.g. ``c3-d4`` for a step, ``c3xe5`` for a capture."""
    return str(move)


def turn_to_text(turn: Turn | Iterable[Move]) -> str:
    """E.g. ``c3xe5xc7`` for a capture chain."""
    moves = turn.moves if isinstance(turn, Turn) else tuple(turn)
    if not moves:
        raise ValueError("A turn needs at least one move")
    return format_moves(moves)


def parse_move(text: str) -> Move:
    """Parse ``c3-d4`` or ``c3xe5`` into a :class:`Move`.

    The captured cell of a capture is not part of the text; it is filled in
    only when the jumped cell sits exactly between start and end.
    """
    text = text.strip()
    if len(text) != 5 or text[2] not in "-x":
        raise ValueError(f"Invalid move text: {text!r}")
    x, y = parse_coord(text[:2])
    x2, y2 = parse_coord(text[3:])
    captured = None
    if text[2] == "x" and abs(x2 - x) == 2 and abs(y2 - y) == 2:
        captured = ((x + x2) // 2, (y + y2) // 2)
    return Move(x, y, x2, y2, captured)
