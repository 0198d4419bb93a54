"""Checkers engine package: evaluator, minimax search and Qt worker bridge."""

from checkie.engine.evaluator import LOSS_SCORE, WIN_SCORE, Evaluator
from checkie.engine.minimax import MinimaxEngine
from checkie.engine.search import (
    IEngine,
    Optimization,
    ScoringMode,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "Evaluator",
    "IEngine",
    "LOSS_SCORE",
    "MinimaxEngine",
    "Optimization",
    "ScoringMode",
    "SearchLimits",
    "SearchResult",
    "WIN_SCORE",
]
