"""Game loop and turn management for N-in-a-row matches."""

from collections import Counter

try:
    from Board import Board
    from engine import referee
    from engine.terminal import is_terminal
except ImportError:
    from Tictac_AI.Board import Board
    from Tictac_AI.engine import referee
    from Tictac_AI.engine.terminal import is_terminal


TIE = "tie"


class Tictacgame:
    def __init__(self, board_size, run_length, players, logger=print, renderer=None, max_rejections=3):
        if not players:
            raise ValueError("at least one player is required")
        self.board = Board(size=board_size, run_length=run_length)
        self.players = list(players)
        self.logger = logger
        self.renderer = renderer
        self.max_rejections = max_rejections
        self.turn = 0
        self.move_index = 0
        self.has_ended = False
        self.winner = None

    @property
    def next_turn(self):
        return (self.turn + 1) % len(self.players)

    def place(self, cell):
        """Apply a move for the current player. Returns False if ignored."""
        if self.has_ended or not self.board.set(cell, self.turn):
            return False

        terminal, winner = is_terminal(self.board)
        if terminal:
            self._end(winner)
            return True

        self.turn = self.next_turn
        return True

    def restart(self):
        self.has_ended = False
        self.winner = None
        self.turn = 0
        self.move_index = 0
        self.board.reset()

    def result_message(self):
        if not self.has_ended:
            return None
        if self.winner is None:
            return "It's a tie!"
        return f"{self.players[self.winner].name} wins!"

    def _end(self, winner):
        self.has_ended = True
        self.winner = winner

    def play(self):
        """Run a single game. Returns the winning player index, or None for a tie."""
        last_move = None
        rejections = 0
        while not self.has_ended:
            if self.renderer:
                self.renderer(self.board, last_move, self.turn, None)

            player = self.players[self.turn]
            try:
                move = player.next_move(self.board, self.next_turn)
                referee.check_move(move, self.board)
            except ValueError as exc:
                rejections += 1
                self.logger(f"Rejected move from {player.name}: {exc}")
                if rejections >= self.max_rejections:
                    self.logger(f"Disqualification: {player.name}")
                    self._end(self.next_turn)
                continue

            rejections = 0
            self.place(move)
            last_move = move
            self.logger(f"Move {self.move_index + 1}: {player.name} {self.board.coords(move)}")
            self.move_index += 1

        if self.renderer:
            self.renderer(self.board, last_move, self.turn, TIE if self.winner is None else self.winner)
        self.logger(self.result_message())
        return self.winner

    def play_rounds(self, rounds):
        """Play consecutive games, restarting between them; tally winners by name."""
        tally = Counter()
        for _ in range(rounds):
            self.restart()
            winner = self.play()
            tally[TIE if winner is None else self.players[winner].name] += 1
        return tally
