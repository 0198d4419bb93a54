"""Cell contents value type."""

from __future__ import annotations

from enum import IntEnum

from checkie.core.enums import Color, PieceType

# Text character <-> cell value
_CHAR_MAP: dict[str, int] = {
    ".": 0,
    "w": 1,
    "b": 2,
    "W": 3,
    "B": 4,
}

_UNICODE: dict[int, str] = {
    0: "·",
    1: "⛀",
    2: "⛂",
    3: "⛁",
    4: "⛃",
}

_TEXT_CHARS: dict[int, str] = {v: k for k, v in _CHAR_MAP.items()}


class Cell(IntEnum):
    """Contents of one board cell.

    The encoding keeps color and rank independent: non-empty odd values are
    White and even values Black, and values above 2 are kings.
    """

    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @classmethod
    def of(cls, color: Color, piece_type: PieceType = PieceType.MAN) -> Cell:
        base = 1 if color == Color.WHITE else 2
        return cls(base + 2 if piece_type == PieceType.KING else base)

    @property
    def is_empty(self) -> bool:
        return self == Cell.EMPTY

    @property
    def color(self) -> Color | None:
        if self == Cell.EMPTY:
            return None
        return Color.WHITE if self % 2 else Color.BLACK

    @property
    def is_king(self) -> bool:
        return self > 2

    @property
    def piece_type(self) -> PieceType | None:
        if self == Cell.EMPTY:
            return None
        return PieceType.KING if self.is_king else PieceType.MAN

    def promoted(self) -> Cell:
        """King of the same color (kings are returned unchanged)."""
        if self == Cell.EMPTY:
            raise ValueError("An empty cell cannot be promoted")
        return self if self.is_king else Cell(self + 2)

    def is_opponent_of(self, other: Cell) -> bool:
        """Whether both cells hold pieces of different colors."""
        return self != Cell.EMPTY and other != Cell.EMPTY and (self - other) % 2 == 1

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        return _TEXT_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> Cell:
        """Create a cell from its text character, e.g. 'W' -> white king."""
        try:
            return cls(_CHAR_MAP[char])
        except KeyError:
            raise ValueError(f"Invalid cell character: {char!r}") from None

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛀."""
        return _UNICODE[self]
