"""Game state machine: tracks phase transitions and turn history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import Move, format_moves
from checkie.core.rules import Rules
from checkie.core.types import Coord
from checkie.game.interfaces import GamePhase


@dataclass
class TurnRecord:
    """A single completed turn in the history."""

    color: Color
    moves: tuple[Move, ...]
    board_before: Board
    board_after: Board

    @property
    def notation(self) -> str:
        return format_moves(self.moves)

    @property
    def capture_count(self) -> int:
        return sum(1 for m in self.moves if m.is_capture)


@dataclass
class GameState:
    """Manages game lifecycle: board, phase, result, turn history.

    A turn is applied one elementary move at a time; while a capture chain is
    running :attr:`chain_cell` names the piece that must keep capturing.
    This is a pure data/logic class with no threading and no UI.
    """

    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    history: list[TurnRecord] = field(default_factory=list, init=False)
    max_turns: int | None = field(default=None, init=False)
    _pending: list[Move] = field(default_factory=list, init=False, repr=False)
    _turn_start: Board | None = field(default=None, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        max_turns: int | None = None,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.max_turns = max_turns
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.history.clear()
        self._pending.clear()
        self._turn_start = None
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_step(self, move: Move) -> bool:
        """Apply one validated elementary move.

        Returns True when it completes the turn (quiet step, or a capture
        after which the piece has nothing left to take).  Caller is
        responsible for legality check.
        """
        if self._turn_start is None:
            self._turn_start = self.board
        self.board = self.board.apply(move)
        self._pending.append(move)

        if move.is_capture and Rules.continuation_moves(self.board, move.x2, move.y2):
            return False

        self.history.append(
            TurnRecord(
                color=self.side_to_move,
                moves=tuple(self._pending),
                board_before=self._turn_start,
                board_after=self.board,
            )
        )
        self._pending.clear()
        self._turn_start = None
        self.side_to_move = self.side_to_move.opposite
        self._check_game_over()
        return True

    def undo_last_turn(self) -> bool:
        """Undo the capture chain in progress, or else the last full turn."""
        if self._turn_start is not None:
            self.board = self._turn_start
            self._pending.clear()
            self._turn_start = None
            return True
        if not self.history:
            return False

        record = self.history.pop()
        self.board = record.board_before
        self.side_to_move = record.color

        # Reset result if we un-did a game-ending turn
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.phase = GamePhase.AWAITING_MOVE
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def turn_number(self) -> int:
        """Number of completed turns."""
        return len(self.history)

    @property
    def chain_cell(self) -> Coord | None:
        """Cell of the piece in the middle of a capture chain, if any."""
        return self._pending[-1].end if self._pending else None

    @property
    def pending_moves(self) -> tuple[Move, ...]:
        return tuple(self._pending)

    def legal_moves(self) -> list[Move]:
        """Elementary moves the side to move may play next."""
        cell = self.chain_cell
        if cell is not None:
            return Rules.continuation_moves(self.board, *cell)
        return Rules.legal_moves(self.board, self.side_to_move).moves

    def legal_moves_from(self, x: int, y: int) -> list[Move]:
        """Next moves of the piece on ``(x, y)`` (for highlighting a selection)."""
        return [m for m in self.legal_moves() if m.x == x and m.y == y]

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(
            self.board, self.side_to_move, self.turn_number, self.max_turns
        )
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
