"""Coordinate type alias and helpers.

Board layout: ``(x, y)`` is ``(row, column)``; row 0 is the top edge where
White promotes, row 7 the bottom edge where Black promotes.  In text form
columns are files ``a``-``h`` and rows are ranks ``8``-``1``::

    (0, 0)=a8 ... (0, 7)=h8
    ...
    (7, 0)=a1 ... (7, 7)=h1
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]

BOARD_SIZE = 8

DIAGONALS: tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_playable(x: int, y: int) -> bool:
    """Dark cells, the only ones pieces ever stand on."""
    return (x + y) % 2 == 1


def coord_name(x: int, y: int) -> str:
    """Human-readable name, e.g. (7, 0) -> 'a1'."""
    return chr(ord("a") + y) + str(BOARD_SIZE - x)


def parse_coord(name: str) -> Coord:
    """Parse a cell name, e.g. 'c3' -> (5, 2)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid cell name: {name!r}")
    return BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a")
