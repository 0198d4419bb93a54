"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a checkers game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_turn(self, board: Board) -> None:
        """Begin the turn-selection process.

        For humans this is a no-op (they interact via UI).
        For AI this kicks off the search.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing turn computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        max_turns: int | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit one elementary move. Returns True if legal and applied."""

    @abstractmethod
    def undo_turn(self) -> bool:
        """Undo the last turn. Returns True on success."""
