"""Board - cell contents of an 8x8 checkers board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from checkie.core.enums import Color, PieceType
from checkie.core.piece import Cell
from checkie.core.types import BOARD_SIZE, Coord, coord_name, in_bounds, is_playable

if TYPE_CHECKING:
    from checkie.core.move import Move

_STARTING_ROWS = 3


class IllegalMoveError(ValueError):
    """A move cannot be applied to the board it was given."""


def _owner(cell: Cell) -> Color:
    return Color.WHITE if cell % 2 else Color.BLACK


class Board:
    """8x8 grid of :class:`Cell` values, row-major.

    Boards behave as values: :meth:`apply` never touches ``self`` and returns
    a fresh board, so every search branch owns its own copy.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell.EMPTY] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Cell:
        x, y = coord
        if not in_bounds(x, y):
            raise IndexError(f"Cell out of board: {coord!r}")
        return self._cells[x * BOARD_SIZE + y]

    def __setitem__(self, coord: Coord, cell: Cell) -> None:
        x, y = coord
        if not in_bounds(x, y):
            raise IndexError(f"Cell out of board: {coord!r}")
        self._cells[x * BOARD_SIZE + y] = Cell(cell)

    def is_empty(self, x: int, y: int) -> bool:
        return self[x, y] == Cell.EMPTY

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[int, int, Cell]]:
        """``(x, y, cell)`` for every non-empty cell, row by row."""
        for idx, cell in enumerate(self._cells):
            if cell != Cell.EMPTY:
                yield idx // BOARD_SIZE, idx % BOARD_SIZE, cell

    def pieces(self, color: Color) -> list[Coord]:
        """Cells occupied by *color*, in row-major order."""
        return [(x, y) for x, y, cell in self.occupied() if cell.color == color]

    def count(self, color: Color, piece_type: PieceType | None = None) -> int:
        """Number of *color*'s pieces, optionally of one *piece_type* only."""
        return sum(
            1
            for _, _, cell in self.occupied()
            if cell.color == color
            and (piece_type is None or cell.piece_type == piece_type)
        )

    # -- Move application ---------------------------------------------------

    def apply(self, move: Move) -> Board:
        """Return the board after *move*, promoting a man on its last row.

        Raises :class:`IllegalMoveError` when the source is empty, the
        destination is occupied or the captured cell holds no opposing piece.
        """
        if not (in_bounds(move.x, move.y) and in_bounds(move.x2, move.y2)):
            raise IllegalMoveError(f"Move leaves the board: {move!r}")
        piece = self[move.start]
        if piece == Cell.EMPTY:
            raise IllegalMoveError(
                f"Start cell {coord_name(move.x, move.y)} is empty, can't move"
            )
        if self[move.end] != Cell.EMPTY:
            raise IllegalMoveError(
                f"End cell {coord_name(move.x2, move.y2)} is not empty, can't move"
            )

        b = self.copy()
        if move.captured is not None:
            victim = self[move.captured] if in_bounds(*move.captured) else Cell.EMPTY
            if not piece.is_opponent_of(victim):
                raise IllegalMoveError(
                    f"No opposing piece to capture at {move.captured!r}"
                )
            b[move.captured] = Cell.EMPTY

        if not piece.is_king and move.x2 == _owner(piece).promotion_row:
            piece = piece.promoted()

        b[move.end] = piece
        b[move.start] = Cell.EMPTY
        return b

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [Cell.EMPTY] * (BOARD_SIZE * BOARD_SIZE)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: three rows of men per side."""
        b = cls()
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                if not is_playable(x, y):
                    continue
                if x < _STARTING_ROWS:
                    b[x, y] = Cell.BLACK_MAN
                elif x >= BOARD_SIZE - _STARTING_ROWS:
                    b[x, y] = Cell.WHITE_MAN
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for x in range(BOARD_SIZE):
            row = [str(self[x, y]) for y in range(BOARD_SIZE)]
            rows.append(f"{BOARD_SIZE - x} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
