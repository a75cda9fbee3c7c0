"""Move proposal: random opening on an empty board, minimax otherwise."""

import random

from . import search_minimax


def choose_move(board, player, opponent, rng=None):
    """
    Propose a cell for player.

    A fully empty board gets a uniformly random cell; searching it would
    always return the same opening.
    """
    if board.is_all_empty():
        rng = rng or random
        return rng.randrange(len(board.cells))
    return search_minimax.minimax(board, player, opponent, is_max=True).move
