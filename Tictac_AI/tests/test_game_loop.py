"""Tests for Tictacgame turn handling and end-of-game state."""

import random

import pytest

from Tictac_AI.Player import AIPlayer, Player
from Tictac_AI.Tictacgame import TIE, Tictacgame


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, player_id, moves, name=None):
        super().__init__(player_id, name)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board, opponent):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def quiet_game(players, size=3, run_length=3, **kwargs):
    messages = []
    game = Tictacgame(size, run_length, players, logger=messages.append, **kwargs)
    return game, messages


def test_scripted_win_and_final_render():
    final = []

    def renderer(board, last_move, turn, result):
        if result is not None:
            final.append((turn, result, last_move))

    black = SeqPlayer(0, [0, 1, 2], name="Cross")
    white = SeqPlayer(1, [3, 4], name="Nought")
    game, messages = quiet_game([black, white], renderer=renderer)

    assert game.play() == 0
    assert final == [(0, 0, 2)]
    assert messages[-1] == "Cross wins!"
    assert game.move_index == 5


def test_draw_reports_tie():
    moves_x = [0, 2, 3, 7, 8]
    moves_o = [1, 4, 5, 6]
    game, messages = quiet_game([SeqPlayer(0, moves_x), SeqPlayer(1, moves_o)])
    assert game.play() is None
    assert messages[-1] == "It's a tie!"


def test_place_advances_turn_and_ignores_occupied():
    game, _ = quiet_game([Player(0), Player(1)])
    assert game.turn == 0
    assert game.place(4) is True
    assert game.turn == 1
    assert game.place(4) is False
    assert game.turn == 1


def test_turn_wraps_over_more_than_two_players():
    game, _ = quiet_game([Player(0), Player(1), Player(2)], size=4, run_length=4)
    seen = []
    for cell in range(4):
        seen.append(game.turn)
        game.place(cell)
    assert seen == [0, 1, 2, 0]
    assert game.board.cells[:4] == [0, 1, 2, 0]


def test_place_ignored_after_game_end():
    game, _ = quiet_game([Player(0), Player(1)])
    for cell in (0, 3, 1, 4, 2):
        assert game.place(cell)
    assert game.has_ended and game.winner == 0
    assert game.place(8) is False
    assert game.board.is_empty(8)


def test_restart_clears_state():
    game, _ = quiet_game([Player(0), Player(1)])
    for cell in (0, 3, 1, 4, 2):
        game.place(cell)
    lines = game.board.lines
    game.restart()
    assert not game.has_ended
    assert game.winner is None
    assert game.turn == 0
    assert game.board.is_all_empty()
    assert game.board.lines is lines
    assert game.result_message() is None


def test_rejected_move_is_retried():
    # Second attempt from player 1 repeats an occupied cell, then recovers.
    black = SeqPlayer(0, [0, 1, 2])
    white = SeqPlayer(1, [0, 3, 4])
    game, messages = quiet_game([black, white])
    assert game.play() == 0
    assert any("Rejected move from Player 2" in m for m in messages)


def test_repeated_rejections_disqualify():
    black = SeqPlayer(0, [4])
    white = SeqPlayer(1, [4, 4, 4])
    game, messages = quiet_game([black, white], max_rejections=3)
    assert game.play() == 0
    assert "Disqualification: Player 2" in messages


def test_requires_players():
    with pytest.raises(ValueError):
        Tictacgame(3, 3, [])


def test_ai_vs_ai_is_always_a_tie():
    rng = random.Random(1)
    players = [AIPlayer(0, rng=rng), AIPlayer(1, rng=rng)]
    game, _ = quiet_game(players)
    tally = game.play_rounds(2)
    assert tally == {TIE: 2}
