"""Player controllers: engine-driven AI and text-input human."""

import random

try:
    from ai import move_selector, search_minimax
except ImportError:
    from Tictac_AI.ai import move_selector, search_minimax


class Player:
    def __init__(self, player_id, name=None):
        self.player_id = player_id
        self.name = name or f"Player {player_id + 1}"

    def next_move(self, board, opponent):
        """Return the flat cell index to play; opponent is the next player's id."""
        raise NotImplementedError


class AIPlayer(Player):
    def __init__(self, player_id, name=None, rng=None):
        super().__init__(player_id, name)
        self.rng = rng or random.Random()

    def next_move(self, board, opponent):
        return move_selector.choose_move(board, self.player_id, opponent, rng=self.rng)


class HumanPlayer(Player):
    HINT_COMMANDS = ("f", "hint")

    def __init__(self, player_id, name=None, input_fn=input):
        super().__init__(player_id, name)
        self.input_fn = input_fn

    def next_move(self, board, opponent):
        """Read 'x y' (0-indexed) or a flat index; 'f' lets the engine move."""
        raw = self.input_fn(f"{self.name}, enter move as 'x y' or cell index ('f' for engine move): ").strip()

        if raw.lower() in self.HINT_COMMANDS:
            return search_minimax.minimax(board, self.player_id, opponent, is_max=True).move

        parts = raw.split()
        try:
            values = [int(p) for p in parts]
        except ValueError as exc:
            raise ValueError("Invalid input format; expected 'x y' or a cell index") from exc

        if len(values) == 1:
            return values[0]
        if len(values) == 2:
            index = board.index_of(*values)
            if index is None:
                raise ValueError("Move out of bounds")
            return index
        raise ValueError("Invalid input format; expected 'x y' or a cell index")
