"""GameController: the central orchestrator of a checkers game.

Coordinates: Players, GameState, move legality.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.rules import Rules
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.state import GameState, TurnRecord

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
TurnCallback = Callable[[TurnRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_complete: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, applies capture chains step
    by step, switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Bot turns arrive via ``submit_turn`` once the
    engine has produced them.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        max_turns: int | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, side_to_move, max_turns)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        # Validate legality; the generated move carries the captured cell.
        legal = self._state.legal_moves()
        try:
            move = legal[legal.index(move)]
        except ValueError:
            return False

        completed = self._state.apply_step(move)
        self._emit_move(move)
        if not completed:
            return True

        self._emit_turn_complete(self._state.history[-1])
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def submit_turn(self, moves: Iterable[Move]) -> bool:
        """Submit every elementary move of a complete turn.

        The whole sequence is checked first; nothing is applied unless every
        step is legal and the last one completes the turn.
        """
        moves = list(moves)
        if not self._is_complete_turn(moves):
            return False
        for move in moves:
            self.submit_move(move)
        return True

    def undo_turn(self) -> bool:
        cp = self.current_player
        if not self._state.is_game_over and cp and not cp.is_human:
            cp.cancel()

        if not self._state.undo_last_turn():
            return False

        # Hand the board back to a human: also take back the bot's reply.
        cp = self.current_player
        if cp is not None and not cp.is_human and self._state.history:
            self._state.undo_last_turn()

        self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_complete_turn(self, moves: list[Move]) -> bool:
        """Whether *moves* can be played in full from the current state."""
        if not moves or self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        board = self._state.board
        legal = self._state.legal_moves()
        for move in moves:
            if not legal or move not in legal:
                return False
            move = legal[legal.index(move)]
            board = board.apply(move)
            legal = (
                Rules.continuation_moves(board, move.x2, move.y2)
                if move.is_capture
                else []
            )
        return not legal

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_turn(self._state.board)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_turn_complete(self, record: TurnRecord) -> None:
        for cb in self.events.on_turn_complete:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._state.phase = GamePhase.GAME_OVER
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
