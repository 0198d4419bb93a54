"""Pure-Python checkers search (minimax + alpha-beta over full turns)."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from random import Random
from time import perf_counter

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move, Turn
from checkie.core.turns import TurnSequencer
from checkie.engine.evaluator import LOSS_SCORE, WIN_SCORE, Evaluator
from checkie.engine.search import (
    IEngine,
    Optimization,
    ScoringMode,
    SearchLimits,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)

_INF = float("inf")


@dataclass(slots=True)
class _SearchContext:
    """Per-branch search state; never shared between workers."""

    rng: Random
    root_color: Color
    max_depth: int
    nodes: int = 0


class MinimaxEngine(IEngine):
    """Fixed-depth minimax with alpha-beta pruning.

    The tree is built from complete turns, so a capture chain is one ply.
    Odd depths belong to the root mover (maximizing), even depths to the
    opponent (minimizing); leaves are scored from the root mover's side.

    Args:
        scoring_mode: Leaf evaluation mode.
        seed: Seed of the move-order shuffle.  ``None`` seeds from system
            entropy, a fixed value makes the choice among equal turns
            reproducible.
        optimization: ``PARALLEL_ROOT`` scores root turns in a thread pool.
        max_workers: Pool size for ``PARALLEL_ROOT``.
        evaluator: Replaces the evaluator built from *scoring_mode*.
    """

    __slots__ = ("_evaluator", "_rng", "_optimization", "_max_workers")

    def __init__(
        self,
        scoring_mode: ScoringMode = ScoringMode.NUMBER,
        *,
        seed: int | None = None,
        optimization: Optimization = Optimization.NONE,
        max_workers: int | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        self._evaluator = evaluator or Evaluator(scoring_mode)
        self._rng = Random(seed)
        self._optimization = optimization
        self._max_workers = max_workers

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    @property
    def optimization(self) -> Optimization:
        return self._optimization

    def best_turn(self, board: Board, color: Color, max_depth: int) -> list[Move]:
        """Elementary moves of the best turn for *color*, empty if blocked."""
        return self.search(board, color, SearchLimits(max_depth=max_depth)).moves

    def search(
        self,
        board: Board,
        color: Color,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth < 0:
            raise ValueError("Search depth must be >= 0")

        started = perf_counter()
        root_turns = TurnSequencer(board.copy()).turns_for_side(color, self._rng)
        _LOGGER.debug(
            "Searching %s to depth %d over %d root turns",
            color,
            limits.max_depth,
            len(root_turns),
        )
        if not root_turns:
            return SearchResult(None, LOSS_SCORE, limits.max_depth, 0)

        if self._optimization == Optimization.PARALLEL_ROOT and len(root_turns) > 1:
            scores, nodes = self._score_parallel(root_turns, color, limits.max_depth)
        else:
            ctx = _SearchContext(self._rng, color, limits.max_depth)
            scores = [
                self._value(ctx, turn, color.opposite, 0, -_INF, _INF)
                for turn in root_turns
            ]
            nodes = ctx.nodes

        # Ties keep the first turn; the shuffle above decides which one that is.
        best_idx = 0
        for idx, score in enumerate(scores):
            if score > scores[best_idx]:
                best_idx = idx

        _LOGGER.debug(
            "Best turn %s scored %s after %d nodes in %.0f ms",
            root_turns[best_idx],
            scores[best_idx],
            nodes,
            (perf_counter() - started) * 1000.0,
        )
        return SearchResult(root_turns[best_idx], scores[best_idx], limits.max_depth, nodes)

    def _score_parallel(
        self,
        root_turns: list[Turn],
        color: Color,
        max_depth: int,
    ) -> tuple[list[float], int]:
        seeds = [self._rng.getrandbits(64) for _ in root_turns]
        contexts = [_SearchContext(Random(seed), color, max_depth) for seed in seeds]

        def run(idx: int) -> float:
            return self._value(
                contexts[idx], root_turns[idx], color.opposite, 0, -_INF, _INF
            )

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            scores = list(pool.map(run, range(len(root_turns))))
        return scores, sum(ctx.nodes for ctx in contexts)

    def _value(
        self,
        ctx: _SearchContext,
        turn: Turn,
        color: Color,
        depth: int,
        alpha: float,
        beta: float,
    ) -> float:
        ctx.nodes += 1
        if depth == ctx.max_depth:
            return self._evaluator.score(turn.board, ctx.root_color)

        children = TurnSequencer(turn.board).turns_for_side(color, ctx.rng)

        if depth % 2:
            # Root mover to play.
            if not children:
                return LOSS_SCORE
            score = -_INF
            for child in children:
                score = max(
                    score,
                    self._value(ctx, child, color.opposite, depth + 1, alpha, beta),
                )
                if score > beta:
                    break
                alpha = max(alpha, score)
            return score

        # Opponent to play.
        if not children:
            return WIN_SCORE
        score = _INF
        for child in children:
            score = min(
                score,
                self._value(ctx, child, color.opposite, depth + 1, alpha, beta),
            )
            if score < alpha:
                break
            beta = min(beta, score)
        return score
