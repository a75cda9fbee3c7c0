"""Exhaustive minimax over every empty cell (no pruning, no transposition table)."""

import logging
from dataclasses import dataclass
from typing import Optional

try:
    from engine.terminal import is_terminal
except ImportError:
    from Tictac_AI.engine.terminal import is_terminal


LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10
# Sentinels far outside the [-WIN_SCORE, WIN_SCORE] leaf range.
MAX_SENTINEL = -1000
MIN_SENTINEL = 1000


@dataclass(frozen=True)
class ScoredMove:
    move: Optional[int]
    score: int


def heuristic(winner, maximizer, minimizer, depth):
    """Leaf score: fastest win and slowest loss are preferred, draws are 0."""
    if winner is None:
        return 0
    if winner == maximizer:
        return WIN_SCORE - depth
    if winner == minimizer:
        return depth - WIN_SCORE
    return 0


class MinimaxSearcher:
    """Holds the two roles and a node counter for one top-level search."""

    def __init__(self, maximizer, minimizer):
        self.maximizer = maximizer
        self.minimizer = minimizer
        self.node_counter = 0

    def search(self, board, is_max=True, depth=0):
        self.node_counter = 0
        result = self._minimax(board, is_max, depth)
        LOGGER.debug(
            "minimax max=%s min=%s -> move=%s score=%s (%d nodes)",
            self.maximizer, self.minimizer, result.move, result.score, self.node_counter,
        )
        return result

    def _minimax(self, board, is_max, depth):
        self.node_counter += 1

        terminal, winner = is_terminal(board)
        if terminal:
            return ScoredMove(None, heuristic(winner, self.maximizer, self.minimizer, depth))

        best_move = None
        best_score = MAX_SENTINEL if is_max else MIN_SENTINEL
        player = self.maximizer if is_max else self.minimizer

        for index in board.empty_cells():
            with board.simulate(index, player):
                score = self._minimax(board, not is_max, depth + 1).score

            # Ties replace the incumbent: the last equally good index wins.
            if is_max:
                if score >= best_score:
                    best_score = score
                    best_move = index
            else:
                if score <= best_score:
                    best_score = score
                    best_move = index

        return ScoredMove(best_move, best_score)


def minimax(board, maximizer, minimizer, is_max=True, depth=0):
    """
    Return the best ScoredMove for the side to move.

    The board is mutated in place during the search and restored before
    returning; callers must not share one board between concurrent searches.
    An already terminal board yields ScoredMove(None, leaf score).
    """
    return MinimaxSearcher(maximizer, minimizer).search(board, is_max=is_max, depth=depth)
