"""Elementary move generation with capture priority."""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING, NamedTuple

from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.piece import Cell
from checkie.core.types import BOARD_SIZE, DIAGONALS, Coord, in_bounds

if TYPE_CHECKING:
    from checkie.core.board import Board


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Coord, ...], ...], ...]:
    """``[x * 8 + y][direction]`` -> cells along that diagonal, nearest first."""
    rays_per_cell: list[tuple[tuple[Coord, ...], ...]] = []
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            cell_rays: list[tuple[Coord, ...]] = []
            for dx, dy in DIAGONALS:
                ray: list[Coord] = []
                ax, ay = x + dx, y + dy
                while in_bounds(ax, ay):
                    ray.append((ax, ay))
                    ax += dx
                    ay += dy
                cell_rays.append(tuple(ray))
            rays_per_cell.append(tuple(cell_rays))
    return tuple(rays_per_cell)


_DIAGONAL_RAYS = _build_rays()


class MoveList(NamedTuple):
    """Elementary moves and whether they are captures."""

    moves: list[Move]
    has_capture: bool


class MoveGenerator:
    """Generates elementary moves on a given :class:`Board`.

    The board is only read.  Capture priority is applied at two levels: a
    piece that can capture offers no quiet moves, and a side with any capture
    offers captures only.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def moves_for_piece(self, x: int, y: int) -> MoveList:
        """Moves of the piece on ``(x, y)``; the cell must not be empty."""
        piece = self._board[x, y]
        if piece.is_king:
            moves = self._king_captures(x, y, piece)
            if moves:
                return MoveList(moves, True)
            return MoveList(self._king_steps(x, y), False)

        moves = self._man_captures(x, y, piece)
        if moves:
            return MoveList(moves, True)
        return MoveList(self._man_steps(x, y, piece), False)

    def moves_for_side(self, color: Color, rng: Random | None = None) -> MoveList:
        """Moves of every *color* piece under the side-level capture rule.

        With *rng* the result is shuffled so equal-scoring candidates are not
        always tried in board order.
        """
        moves: list[Move] = []
        captures_only = False

        for x, y, cell in self._board.occupied():
            if cell.color != color:
                continue
            piece_moves, has_capture = self.moves_for_piece(x, y)
            if has_capture and not captures_only:
                captures_only = True
                moves.clear()
            if has_capture or not captures_only:
                moves.extend(piece_moves)

        if rng is not None:
            rng.shuffle(moves)
        return MoveList(moves, captures_only)

    # -- Men ----------------------------------------------------------------

    def _man_captures(self, x: int, y: int, piece: Cell) -> list[Move]:
        # Men capture in all four directions.
        board = self._board
        captures: list[Move] = []
        for dx, dy in DIAGONALS:
            x2, y2 = x + 2 * dx, y + 2 * dy
            if not in_bounds(x2, y2) or not board.is_empty(x2, y2):
                continue
            xb, yb = x + dx, y + dy
            if piece.is_opponent_of(board[xb, yb]):
                captures.append(Move(x, y, x2, y2, (xb, yb)))
        return captures

    def _man_steps(self, x: int, y: int, piece: Cell) -> list[Move]:
        board = self._board
        x2 = x + (Color.WHITE.forward if piece % 2 else Color.BLACK.forward)
        steps: list[Move] = []
        for y2 in (y - 1, y + 1):
            if in_bounds(x2, y2) and board.is_empty(x2, y2):
                steps.append(Move(x, y, x2, y2))
        return steps

    # -- Kings --------------------------------------------------------------

    def _king_captures(self, x: int, y: int, piece: Cell) -> list[Move]:
        board = self._board
        captures: list[Move] = []
        for ray in _DIAGONAL_RAYS[x * BOARD_SIZE + y]:
            for idx, (ax, ay) in enumerate(ray):
                target = board[ax, ay]
                if target == Cell.EMPTY:
                    continue
                # Only the first piece on the ray can be jumped, and only onto
                # the cell right behind it.
                if piece.is_opponent_of(target) and idx + 1 < len(ray):
                    x2, y2 = ray[idx + 1]
                    if board.is_empty(x2, y2):
                        captures.append(Move(x, y, x2, y2, (ax, ay)))
                break
        return captures

    def _king_steps(self, x: int, y: int) -> list[Move]:
        board = self._board
        steps: list[Move] = []
        for ray in _DIAGONAL_RAYS[x * BOARD_SIZE + y]:
            for ax, ay in ray:
                if not board.is_empty(ax, ay):
                    break
                steps.append(Move(x, y, ax, ay))
        return steps
