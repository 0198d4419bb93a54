"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from checkie.core.enums import Color
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.core.board import Board


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the UI.

    ``request_turn`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_turn(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """An AI participant that delegates computation to a callback.

    The engine search is decoupled: ``AIPlayer`` only stores a reference
    to a *bridge* callable invoked on ``request_turn``.  The terminal runner
    queues the request and searches synchronously; a Qt front end would hand
    it to an ``EngineWorker`` running in a ``QThread``.

    Args:
        color: Side the AI plays.
        name: Display name.
        depth: Search depth used for this side.
        on_request_turn: ``(Board) -> None``, called when the game
            controller asks the AI to start thinking.
        on_cancel: ``() -> None``, called to abort a running search.
    """

    __slots__ = ("_color", "_name", "_depth", "_on_request_turn", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Bot",
        depth: int = 3,
        on_request_turn: Callable[[Board], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._depth = depth
        self._on_request_turn = on_request_turn
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def is_human(self) -> bool:
        return False

    def request_turn(self, board: Board) -> None:
        if self._on_request_turn is not None:
            self._on_request_turn(board.copy())

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
