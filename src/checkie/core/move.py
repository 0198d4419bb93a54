"""Elementary move and full turn value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from checkie.core.types import Coord, coord_name

if TYPE_CHECKING:
    from checkie.core.board import Board


@dataclass(frozen=True, slots=True)
class Move:
    """A single step of one piece, possibly capturing one opposing piece.

    Identity is the start and end cell only: ``captured`` is derived from the
    board and ignored by ``==`` and ``hash``, so a move typed by a player
    matches the generated one.
    """

    x: int
    y: int
    x2: int
    y2: int
    captured: Coord | None = field(default=None, compare=False)

    @property
    def start(self) -> Coord:
        return (self.x, self.y)

    @property
    def end(self) -> Coord:
        return (self.x2, self.y2)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{coord_name(self.x, self.y)}{sep}{coord_name(self.x2, self.y2)}"


@dataclass(frozen=True, slots=True)
class Turn:
    """One full player action and the board it leaves behind.

    Either a single quiet step, or a chain of captures by one piece where
    every step starts on the previous step's end cell.
    """

    moves: tuple[Move, ...]
    board: Board = field(compare=False, repr=False)

    @property
    def first(self) -> Move:
        return self.moves[0]

    @property
    def last(self) -> Move:
        return self.moves[-1]

    @property
    def is_capture(self) -> bool:
        return self.moves[0].is_capture

    @property
    def capture_count(self) -> int:
        return sum(1 for m in self.moves if m.is_capture)

    def extended(self, move: Move) -> Turn:
        """New turn with *move* appended and applied to the resulting board."""
        return Turn(self.moves + (move,), self.board.apply(move))

    def __len__(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        return format_moves(self.moves)


def format_moves(moves: tuple[Move, ...]) -> str:
    """Chain notation: the start cell, then every landing cell."""
    if not moves[0].is_capture:
        return str(moves[0])
    return coord_name(moves[0].x, moves[0].y) + "".join(
        "x" + coord_name(m.x2, m.y2) for m in moves
    )
