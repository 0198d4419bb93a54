"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Color
    from checkie.core.move import Move, Turn


class ScoringMode(Enum):
    """How leaf positions are scored."""

    NUMBER = "Number"
    NUMBER_AND_POTENTIAL = "NumberAndPotential"

    @classmethod
    def from_name(cls, name: str) -> ScoringMode:
        for mode in cls:
            if name in (mode.value, mode.name):
                return mode
        raise ValueError(f"Unknown scoring mode: {name!r}")


class Optimization(Enum):
    """Optional speed-ups of the root search."""

    NONE = "None"
    PARALLEL_ROOT = "ParallelRoot"

    @classmethod
    def from_name(cls, name: str) -> Optimization:
        for opt in cls:
            if name in (opt.value, opt.name):
                return opt
        raise ValueError(f"Unknown optimization: {name!r}")


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single turn computation."""

    max_depth: int = 3


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    turn: Turn | None
    score: float
    depth: int
    nodes: int

    @property
    def moves(self) -> list[Move]:
        """Elementary moves of the chosen turn, in the order to apply them."""
        return [] if self.turn is None else list(self.turn.moves)


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> SearchResult: ...
