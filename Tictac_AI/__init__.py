"""Tictac_AI package exports."""

from .Board import Board, EMPTY, InvalidConfiguration
from .Tictacgame import Tictacgame
from .Player import Player, AIPlayer, HumanPlayer
from .ai.search_minimax import ScoredMove, minimax
from .engine.terminal import is_terminal

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "EMPTY",
    "InvalidConfiguration",
    "Tictacgame",
    "Player",
    "AIPlayer",
    "HumanPlayer",
    "ScoredMove",
    "minimax",
    "is_terminal",
    "ai",
    "engine",
    "utils",
]
