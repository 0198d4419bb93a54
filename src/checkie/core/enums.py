"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a man's quiet move (White moves toward row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Checkers piece types."""

    MAN = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
