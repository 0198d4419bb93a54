"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes bot turns on demand.

    ``best_turn_ready`` carries ``(request_id, moves, score, nodes)`` where
    *moves* is the list of elementary moves to apply in order.
    """

    best_turn_ready = pyqtSignal(int, object, float, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine")

    def __init__(self, engine: IEngine | None = None) -> None:
        super().__init__()
        self._engine: IEngine = engine or MinimaxEngine()
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int, int, int)
    def request_turn(
        self, board_obj: object, color_value: int, depth: int, request_id: int
    ) -> None:
        """Search the best turn for *color_value* on *board_obj* and emit it."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                board_obj.copy(),
                Color(color_value),
                SearchLimits(max_depth=depth),
            )
        except Exception as exc:
            _LOGGER.warning("Engine search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        # The search itself is not interruptible; a stale result is dropped.
        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.turn is None:
            self.search_no_move.emit(request_id)
            return

        self.best_turn_ready.emit(request_id, result.moves, result.score, result.nodes)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search."""
        self._cancel_event.set()

    @pyqtSlot(object)
    def set_engine(self, engine: object) -> None:
        """Swap the engine (takes effect on the next search)."""
        self._engine = engine  # type: ignore[assignment]
